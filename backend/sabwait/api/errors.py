"""HTTP error mapping helpers for API routes."""

from __future__ import annotations

from typing import Any
from typing import NoReturn

from fastapi import HTTPException

from sabwait.api.http import api_error
from sabwait.errors import AlreadyExistsError
from sabwait.errors import InvalidArgumentError
from sabwait.errors import NotFoundError
from sabwait.errors import SabWaitError
from sabwait.errors import UnauthorizedError

# Most specific first: InvalidArgumentError and NotFoundError also subclass builtins.
_DOMAIN_ERROR_STATUS: tuple[tuple[type[SabWaitError], int, str], ...] = (
    (InvalidArgumentError, 400, "INVALID_ARGUMENT"),
    (UnauthorizedError, 403, "UNAUTHORIZED"),
    (NotFoundError, 404, "NOT_FOUND"),
    (AlreadyExistsError, 409, "ALREADY_EXISTS"),
)


def domain_error_status(exc: SabWaitError) -> tuple[int, str]:
    """Return the fixed (status_code, code) pair for a domain error kind."""
    for error_type, status_code, code in _DOMAIN_ERROR_STATUS:
        if isinstance(exc, error_type):
            return status_code, code
    return 500, "INTERNAL_ERROR"


def raise_domain_error(
    exc: SabWaitError,
    *,
    message: str | None = None,
    detail: dict[str, Any] | None = None,
) -> NoReturn:
    """Translate a domain error into the unified HTTP error payload."""
    status_code, code = domain_error_status(exc)
    raise HTTPException(
        status_code=status_code,
        detail=api_error(code=code, message=message or str(exc), detail=detail),
    ) from exc
