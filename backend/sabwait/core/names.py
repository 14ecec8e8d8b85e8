"""Account-name normalization helpers for exempt checks and sessions."""

from __future__ import annotations

from sabwait.errors import InvalidArgumentError


def normalize_account_name(raw_name: str) -> str:
    """Trim and case-fold an external account name."""
    return raw_name.strip().casefold()


def require_account_name(raw_name: str | None, *, field: str = "username") -> str:
    """Normalize a name and reject blank values."""
    if raw_name is None:
        raise InvalidArgumentError(f"{field} is required")
    normalized = normalize_account_name(raw_name)
    if not normalized:
        raise InvalidArgumentError(f"{field} is required")
    return normalized


def require_text(value: str | None, *, field: str) -> str:
    """Trim a free-text identifier and reject blank values without case-folding."""
    if value is None:
        raise InvalidArgumentError(f"{field} is required")
    stripped = value.strip()
    if not stripped:
        raise InvalidArgumentError(f"{field} is required")
    return stripped
