"""Dependency helpers shared by API routers."""

from __future__ import annotations

import hmac
import json
import logging

from fastapi import Depends
from fastapi import Request

from sabwait.api.errors import raise_domain_error
from sabwait.errors import UnauthorizedError
from sabwait.runtime import Runtime

logger = logging.getLogger("sabwait.api")


def get_runtime(request: Request) -> Runtime:
    """Return the runtime owned by the app serving this request."""
    return request.app.state.runtime


async def _body_api_key(request: Request) -> str | None:
    if request.method in {"GET", "HEAD"}:
        return None
    try:
        payload = await request.json()
    except (json.JSONDecodeError, UnicodeDecodeError):
        return None
    if not isinstance(payload, dict):
        return None
    value = payload.get("apiKey")
    return value if isinstance(value, str) else None


async def supplied_api_key(request: Request) -> str | None:
    """Find the caller's shared secret: body field, then query, then header."""
    return (
        await _body_api_key(request)
        or request.query_params.get("apiKey")
        or request.headers.get("x-api-key")
    )


async def require_api_key(
    request: Request,
    runtime: Runtime = Depends(get_runtime),
) -> None:
    """Reject mutating calls whose secret mismatches; open mode when unset."""
    expected = runtime.settings.sab_api_key
    if not expected:
        return
    supplied = await supplied_api_key(request)
    if supplied is None or not hmac.compare_digest(supplied.encode(), expected.encode()):
        logger.warning("Rejected %s %s: invalid or missing API key", request.method, request.url.path)
        raise_domain_error(UnauthorizedError("Invalid or missing API key"))
