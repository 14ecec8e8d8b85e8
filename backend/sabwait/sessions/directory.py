"""In-memory presence records for players inside the live game session."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from dataclasses import replace
import logging
import threading
import time

from sabwait.core.names import require_text

logger = logging.getLogger("sabwait.sessions")

DEFAULT_DEVICE = "Unknown"
DEFAULT_STALE_SECONDS = 600.0
AVATAR_URL_TEMPLATE = (
    "https://www.roblox.com/headshot-thumbnail/image?userId={user_id}&width=420&height=420&format=png"
)


def default_avatar_url(user_id: int | None) -> str:
    return AVATAR_URL_TEMPLATE.format(user_id=user_id or 1)


@dataclass(slots=True)
class SessionRecord:
    username: str
    display_name: str
    user_id: int
    device: str
    avatar: str
    joined_at: int


class SessionDirectory:
    """Username-keyed player records with a staleness sweep.

    Independent of the waitlist engine: it has its own lock, and the sweep
    never touches waitlist state.
    """

    def __init__(
        self,
        stale_seconds: float = DEFAULT_STALE_SECONDS,
        clock: Callable[[], float] = time.time,
    ) -> None:
        if stale_seconds <= 0:
            raise ValueError("stale_seconds must be > 0")
        self._records: dict[str, SessionRecord] = {}
        self._lock = threading.Lock()
        self._stale_ms = int(stale_seconds * 1000)
        self._clock = clock

    def _now_ms(self) -> int:
        return int(self._clock() * 1000)

    def join(
        self,
        username: str,
        display_name: str | None = None,
        user_id: int | None = None,
        device: str | None = None,
        avatar: str | None = None,
    ) -> SessionRecord:
        """Insert or refresh a player record; rejoining resets its join time."""
        username = require_text(username, field="username")
        record = SessionRecord(
            username=username,
            display_name=display_name or username,
            user_id=user_id or 0,
            device=device or DEFAULT_DEVICE,
            avatar=avatar or default_avatar_url(user_id),
            joined_at=self._now_ms(),
        )
        with self._lock:
            self._records[username] = record
        logger.info("Player joined: %s on %s", username, record.device)
        return replace(record)

    def leave(self, username: str) -> bool:
        username = require_text(username, field="username")
        with self._lock:
            existed = self._records.pop(username, None) is not None
        if existed:
            logger.info("Player left: %s", username)
        return existed

    def list_players(self) -> list[SessionRecord]:
        """Return records ordered by join time, earliest first."""
        with self._lock:
            records = [replace(record) for record in self._records.values()]
        return sorted(records, key=lambda item: item.joined_at)

    def count(self) -> int:
        with self._lock:
            return len(self._records)

    def sweep(self, now_ms: int | None = None) -> int:
        """Evict records older than the staleness threshold; return how many."""
        cutoff = (self._now_ms() if now_ms is None else now_ms) - self._stale_ms
        with self._lock:
            stale = [name for name, record in self._records.items() if record.joined_at < cutoff]
            for name in stale:
                del self._records[name]
        return len(stale)


__all__ = [
    "DEFAULT_DEVICE",
    "DEFAULT_STALE_SECONDS",
    "SessionDirectory",
    "SessionRecord",
    "default_avatar_url",
]
