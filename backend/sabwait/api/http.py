"""Exception handlers that render every failure as a `{code, message, detail}` body."""

from __future__ import annotations

import logging
from typing import Any

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger("sabwait.api")


def api_error(*, code: str, message: str, detail: dict[str, Any] | None = None) -> dict[str, Any]:
    """Error body shared by REST failures and the bot client parser."""
    return {"code": code, "message": message, "detail": detail or {}}


async def handle_http_exception(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Pass through payloads built by route helpers; wrap anything else, including routing 404s."""
    if isinstance(exc.detail, dict) and {"code", "message", "detail"} <= set(exc.detail):
        return JSONResponse(
            status_code=exc.status_code,
            content=exc.detail,
            headers=exc.headers,
        )

    if exc.status_code == 404:
        return JSONResponse(
            status_code=404,
            content=api_error(
                code="NOT_FOUND",
                message="Endpoint not found",
                detail={"path": request.url.path, "method": request.method},
            ),
            headers=exc.headers,
        )

    return JSONResponse(
        status_code=exc.status_code,
        content=api_error(
            code="HTTP_ERROR",
            message=str(exc.detail),
            detail={},
        ),
        headers=exc.headers,
    )


def _describe_validation_error(error: dict[str, Any]) -> str:
    location = [str(part) for part in error.get("loc", ()) if part != "body"]
    field = ".".join(location) or "body"
    if error.get("type") == "missing":
        return f"{field} is required"
    return f"{field}: {error.get('msg', 'invalid value')}"


async def handle_validation_error(_: Request, exc: RequestValidationError) -> JSONResponse:
    """Report malformed request bodies as 400 INVALID_ARGUMENT."""
    errors = list(exc.errors())
    message = _describe_validation_error(errors[0]) if errors else "invalid request"
    fields = sorted(
        {".".join(str(part) for part in error.get("loc", ()) if part != "body") for error in errors}
    )
    return JSONResponse(
        status_code=400,
        content=api_error(code="INVALID_ARGUMENT", message=message, detail={"fields": fields}),
    )


async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    logger.error("Unhandled error on %s %s", request.method, request.url.path, exc_info=exc)
    return JSONResponse(
        status_code=500,
        content=api_error(
            code="INTERNAL_ERROR",
            message="Internal server error",
            detail={"error": str(exc)},
        ),
    )
