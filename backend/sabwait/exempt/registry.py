"""In-memory exempt (whitelist) registry keyed by normalized account name."""

from __future__ import annotations

import logging
import threading

from sabwait.core.names import require_account_name

logger = logging.getLogger("sabwait.exempt")


class ExemptRegistry:
    """Set of names excluded from enforcement; membership is idempotent."""

    def __init__(self) -> None:
        self._names: set[str] = set()
        self._lock = threading.Lock()

    def add(self, name: str) -> str:
        normalized = require_account_name(name)
        with self._lock:
            self._names.add(normalized)
        logger.info("Added to exempt list: %s", normalized)
        return normalized

    def remove(self, name: str) -> tuple[str, bool]:
        """Return the normalized name and whether it was present before removal."""
        normalized = require_account_name(name)
        with self._lock:
            existed = normalized in self._names
            self._names.discard(normalized)
        logger.info("Removed from exempt list: %s (existed: %s)", normalized, existed)
        return normalized, existed

    def is_exempt(self, name: str) -> bool:
        normalized = require_account_name(name)
        with self._lock:
            return normalized in self._names

    def list_names(self) -> list[str]:
        with self._lock:
            return sorted(self._names)

    def count(self) -> int:
        with self._lock:
            return len(self._names)


__all__ = ["ExemptRegistry"]
