"""In-memory waitlist engine: positions, steals accounting and removal on exhaustion."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from dataclasses import field
from dataclasses import replace
import logging
import threading
import time

from sabwait.core.names import require_text
from sabwait.errors import AlreadyExistsError
from sabwait.errors import InvalidArgumentError
from sabwait.errors import NotFoundError

logger = logging.getLogger("sabwait.waitlist")

# Positions above this threshold are "in server"; at or below it, "waiting".
ACTIVE_POSITION_THRESHOLD = 1
STATUS_ACTIVE = "active"
STATUS_WAITING = "waiting"


@dataclass(slots=True)
class WaitlistEntry:
    """One buyer admitted to the waitlist."""

    account_id: str
    display_name: str
    position: int
    credit_paid: int = 0
    steals: int = 0
    admitted_at: int = 0

    @property
    def is_active(self) -> bool:
        return self.position > ACTIVE_POSITION_THRESHOLD

    @property
    def status(self) -> str:
        return STATUS_ACTIVE if self.is_active else STATUS_WAITING


@dataclass(slots=True)
class ConsumeResult:
    """Outcome of spending steals; ``entry`` is the last state before any removal."""

    entry: WaitlistEntry
    removed: bool
    previous_steals: int
    amount: int


@dataclass(slots=True)
class RepositionResult:
    entry: WaitlistEntry
    previous_position: int


@dataclass(slots=True)
class WaitlistListing:
    """Position-ordered snapshot split into active and waiting partitions."""

    all: list[WaitlistEntry] = field(default_factory=list)
    active: list[WaitlistEntry] = field(default_factory=list)
    waiting: list[WaitlistEntry] = field(default_factory=list)

    @property
    def total_count(self) -> int:
        return len(self.all)

    @property
    def active_count(self) -> int:
        return len(self.active)

    @property
    def waiting_count(self) -> int:
        return len(self.waiting)


def _require_int(value: object, *, field_name: str) -> int:
    # bool is an int subclass; reject it so JSON true/false never counts as 1/0.
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgumentError(f"{field_name} must be an integer")
    return value


def _require_non_negative(value: object, *, field_name: str) -> int:
    number = _require_int(value, field_name=field_name)
    if number < 0:
        raise InvalidArgumentError(f"{field_name} must be >= 0")
    return number


def _require_positive(value: object, *, field_name: str) -> int:
    number = _require_int(value, field_name=field_name)
    if number <= 0:
        raise InvalidArgumentError(f"{field_name} must be a positive number")
    return number


class WaitlistEngine:
    """Owns the keyed entry collection; every operation runs under one lock.

    Reads hand out copies, and every mutation writes the updated entry back
    into the map, so callers never hold a live reference into the store.
    """

    def __init__(self, clock: Callable[[], float] = time.time) -> None:
        self._entries: dict[str, WaitlistEntry] = {}
        self._lock = threading.RLock()
        self._clock = clock

    def count(self) -> int:
        with self._lock:
            return len(self._entries)

    def admit(
        self,
        account_id: str,
        display_name: str,
        credit_paid: int | None = 0,
        initial_steals: int | None = 0,
    ) -> WaitlistEntry:
        """Append a new entry behind every current entry."""
        account_id = require_text(account_id, field="discordId")
        display_name = require_text(display_name, field="discordUsername")
        credit_paid = _require_non_negative(
            0 if credit_paid is None else credit_paid, field_name="brainrotPaid"
        )
        initial_steals = _require_non_negative(
            0 if initial_steals is None else initial_steals, field_name="steals"
        )

        with self._lock:
            if account_id in self._entries:
                raise AlreadyExistsError(
                    f"discordId={account_id} already in waitlist",
                    existing=replace(self._entries[account_id]),
                )

            max_position = max((entry.position for entry in self._entries.values()), default=0)
            entry = WaitlistEntry(
                account_id=account_id,
                display_name=display_name,
                position=max_position + 1,
                credit_paid=credit_paid,
                steals=initial_steals,
                admitted_at=int(self._clock() * 1000),
            )
            self._entries[account_id] = entry
            logger.info(
                "Added to waitlist: %s (position %d, steals %d)",
                display_name,
                entry.position,
                entry.steals,
            )
            return replace(entry)

    def get(self, account_id: str) -> WaitlistEntry:
        with self._lock:
            return replace(self._get_locked(account_id))

    def credit_steals(self, account_id: str, amount: int) -> WaitlistEntry:
        """Add steals; position and admission data are left untouched."""
        amount = _require_positive(amount, field_name="amount")
        with self._lock:
            current = self._get_locked(account_id)
            updated = replace(current, steals=current.steals + amount)
            self._entries[updated.account_id] = updated
            logger.info(
                "Added %d steals to %s (total %d)",
                amount,
                updated.display_name,
                updated.steals,
            )
            return replace(updated)

    def consume_steals(self, account_id: str, amount: int | None = None) -> ConsumeResult:
        """Spend steals, clamping at zero; an entry that reaches zero is removed.

        A missing or zero amount spends one steal; negative amounts are rejected.
        """
        amount = _require_non_negative(0 if amount is None else amount, field_name="amount") or 1
        with self._lock:
            current = self._get_locked(account_id)
            previous = current.steals
            updated = replace(current, steals=max(0, previous - amount))

            if updated.steals == 0:
                del self._entries[updated.account_id]
                logger.info(
                    "Out of steals, removed from waitlist: %s (%d -> 0)",
                    updated.display_name,
                    previous,
                )
                return ConsumeResult(entry=updated, removed=True, previous_steals=previous, amount=amount)

            self._entries[updated.account_id] = updated
            logger.info(
                "Used %d steals for %s (%d -> %d)",
                amount,
                updated.display_name,
                previous,
                updated.steals,
            )
            return ConsumeResult(
                entry=replace(updated),
                removed=False,
                previous_steals=previous,
                amount=amount,
            )

    def reposition(self, account_id: str, new_position: int) -> RepositionResult:
        """Move an entry to any non-negative position; ties are allowed."""
        new_position = _require_non_negative(new_position, field_name="newPosition")
        with self._lock:
            current = self._get_locked(account_id)
            updated = replace(current, position=new_position)
            self._entries[updated.account_id] = updated
            logger.info(
                "Position updated for %s: %d -> %d",
                updated.display_name,
                current.position,
                new_position,
            )
            return RepositionResult(entry=replace(updated), previous_position=current.position)

    def remove(self, account_id: str) -> WaitlistEntry:
        with self._lock:
            removed = self._get_locked(account_id)
            del self._entries[removed.account_id]
            logger.info("Removed from waitlist: %s", removed.display_name)
            return removed

    def list_entries(self) -> WaitlistListing:
        """Sort by position; equal positions keep admission order."""
        with self._lock:
            ordered = sorted(
                (replace(entry) for entry in self._entries.values()),
                key=lambda item: item.position,
            )
        return WaitlistListing(
            all=ordered,
            active=[entry for entry in ordered if entry.is_active],
            waiting=[entry for entry in ordered if not entry.is_active],
        )

    def _get_locked(self, account_id: str) -> WaitlistEntry:
        account_id = require_text(account_id, field="discordId")
        entry = self._entries.get(account_id)
        if entry is None:
            raise NotFoundError(f"discordId={account_id} not in waitlist")
        return entry


__all__ = [
    "ACTIVE_POSITION_THRESHOLD",
    "ConsumeResult",
    "RepositionResult",
    "STATUS_ACTIVE",
    "STATUS_WAITING",
    "WaitlistEngine",
    "WaitlistEntry",
    "WaitlistListing",
]
