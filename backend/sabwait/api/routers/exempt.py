"""Exempt list (whitelist) routes."""

from __future__ import annotations

import logging

from fastapi import APIRouter
from fastapi import Depends

from sabwait.api.deps import get_runtime
from sabwait.api.deps import require_api_key
from sabwait.api.errors import raise_domain_error
from sabwait.core.names import require_account_name
from sabwait.errors import SabWaitError
from sabwait.exempt.models import ExemptRequest
from sabwait.runtime import Runtime

logger = logging.getLogger("sabwait.api")

router = APIRouter()


@router.post("/exempt/add", dependencies=[Depends(require_api_key)])
def add_exempt(
    payload: ExemptRequest,
    runtime: Runtime = Depends(get_runtime),
) -> dict[str, object]:
    try:
        username = runtime.exempt.add(payload.username)
    except SabWaitError as exc:
        raise_domain_error(exc)
    return {"success": True, "username": username}


@router.post("/exempt/remove", dependencies=[Depends(require_api_key)])
def remove_exempt(
    payload: ExemptRequest,
    runtime: Runtime = Depends(get_runtime),
) -> dict[str, object]:
    try:
        username, existed = runtime.exempt.remove(payload.username)
    except SabWaitError as exc:
        raise_domain_error(exc)
    return {"success": True, "username": username, "existed": existed}


@router.get("/exempt/check/{username}")
def check_exempt(username: str, runtime: Runtime = Depends(get_runtime)) -> dict[str, object]:
    try:
        normalized = require_account_name(username)
        exempt = runtime.exempt.is_exempt(normalized)
    except SabWaitError as exc:
        raise_domain_error(exc)
    return {"exempt": exempt, "username": normalized}


@router.get("/exempt/list")
def list_exempt(runtime: Runtime = Depends(get_runtime)) -> dict[str, object]:
    users = runtime.exempt.list_names()
    return {"users": users, "count": len(users)}


@router.get("/checkwhitelist")
def check_whitelist(
    username: str | None = None,
    runtime: Runtime = Depends(get_runtime),
) -> dict[str, object]:
    """Query-string variant of the exempt check used by the game server."""
    try:
        normalized = require_account_name(username)
        is_whitelisted = runtime.exempt.is_exempt(normalized)
    except SabWaitError as exc:
        raise_domain_error(exc)
    logger.info("Whitelist check: %s = %s", normalized, is_whitelisted)
    return {"isWhitelisted": is_whitelisted, "username": normalized}
