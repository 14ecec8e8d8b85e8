"""Domain error kinds shared by the waitlist engine and the key-based stores."""

from __future__ import annotations


class SabWaitError(Exception):
    """Base class for waitlist-domain errors."""


class InvalidArgumentError(SabWaitError, ValueError):
    """Raised when a caller supplies a missing, malformed or out-of-range field."""


class AlreadyExistsError(SabWaitError):
    """Raised when admitting an account that is already in the waitlist."""

    def __init__(self, message: str, *, existing: object | None = None) -> None:
        super().__init__(message)
        self.existing = existing


class NotFoundError(SabWaitError, LookupError):
    """Raised when an operation targets a key that is not present."""


class UnauthorizedError(SabWaitError):
    """Raised by the HTTP boundary when the shared secret does not match."""


__all__ = [
    "AlreadyExistsError",
    "InvalidArgumentError",
    "NotFoundError",
    "SabWaitError",
    "UnauthorizedError",
]
