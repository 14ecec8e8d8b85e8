"""Waitlist REST routes."""

from __future__ import annotations

from fastapi import APIRouter
from fastapi import Depends

from sabwait.api.deps import get_runtime
from sabwait.api.deps import require_api_key
from sabwait.api.errors import raise_domain_error
from sabwait.api.views import entry_view
from sabwait.api.views import listing_view
from sabwait.errors import AlreadyExistsError
from sabwait.errors import SabWaitError
from sabwait.runtime import Runtime
from sabwait.waitlist.models import AdmitRequest
from sabwait.waitlist.models import ConsumeStealsRequest
from sabwait.waitlist.models import CreditStealsRequest
from sabwait.waitlist.models import RemoveRequest
from sabwait.waitlist.models import RepositionRequest
from sabwait.ws.broadcast import broadcast_waitlist_update
from sabwait.ws.broadcast import dispatch_broadcast

router = APIRouter(prefix="/waitlist")


@router.post("/add", dependencies=[Depends(require_api_key)])
def admit(
    payload: AdmitRequest,
    runtime: Runtime = Depends(get_runtime),
) -> dict[str, object]:
    """Append a buyer to the end of the line."""
    try:
        entry = runtime.waitlist.admit(
            payload.account_id,
            payload.display_name,
            credit_paid=payload.credit_paid,
            initial_steals=payload.steals,
        )
    except AlreadyExistsError as exc:
        raise_domain_error(
            exc,
            message="User already in waitlist",
            detail={"user": entry_view(exc.existing)} if exc.existing is not None else {},
        )
    except SabWaitError as exc:
        raise_domain_error(exc)
    dispatch_broadcast(runtime, broadcast_waitlist_update)
    return {"success": True, "position": entry.position, "user": entry_view(entry)}


@router.post("/remove", dependencies=[Depends(require_api_key)])
def remove(
    payload: RemoveRequest,
    runtime: Runtime = Depends(get_runtime),
) -> dict[str, object]:
    try:
        entry = runtime.waitlist.remove(payload.account_id)
    except SabWaitError as exc:
        raise_domain_error(exc, message="User not in waitlist", detail={"discordId": payload.account_id})
    dispatch_broadcast(runtime, broadcast_waitlist_update)
    return {"success": True, "user": entry_view(entry)}


@router.post("/addsteals", dependencies=[Depends(require_api_key)])
def credit_steals(
    payload: CreditStealsRequest,
    runtime: Runtime = Depends(get_runtime),
) -> dict[str, object]:
    try:
        entry = runtime.waitlist.credit_steals(payload.account_id, payload.amount)
    except SabWaitError as exc:
        raise_domain_error(exc, detail={"discordId": payload.account_id})
    dispatch_broadcast(runtime, broadcast_waitlist_update)
    return {"success": True, "user": entry_view(entry)}


@router.post("/usesteals")
def consume_steals(
    payload: ConsumeStealsRequest,
    runtime: Runtime = Depends(get_runtime),
) -> dict[str, object]:
    """Spend steals; trusted internal callers only, so no shared secret."""
    try:
        result = runtime.waitlist.consume_steals(payload.account_id, payload.amount)
    except SabWaitError as exc:
        raise_domain_error(exc, detail={"discordId": payload.account_id})
    dispatch_broadcast(runtime, broadcast_waitlist_update)
    return {"success": True, "removed": result.removed, "user": entry_view(result.entry)}


@router.post("/updateposition", dependencies=[Depends(require_api_key)])
def reposition(
    payload: RepositionRequest,
    runtime: Runtime = Depends(get_runtime),
) -> dict[str, object]:
    try:
        result = runtime.waitlist.reposition(payload.account_id, payload.new_position)
    except SabWaitError as exc:
        raise_domain_error(exc, detail={"discordId": payload.account_id})
    dispatch_broadcast(runtime, broadcast_waitlist_update)
    return {"success": True, "user": entry_view(result.entry), "oldPosition": result.previous_position}


@router.get("/list")
def list_waitlist(runtime: Runtime = Depends(get_runtime)) -> dict[str, object]:
    """Position-ordered entries with active/waiting partitions."""
    return listing_view(runtime.waitlist.list_entries())


@router.get("/get/{account_id}")
def get_entry(account_id: str, runtime: Runtime = Depends(get_runtime)) -> dict[str, object]:
    try:
        entry = runtime.waitlist.get(account_id)
    except SabWaitError as exc:
        raise_domain_error(exc, message="User not in waitlist", detail={"discordId": account_id})
    return {"success": True, "user": entry_view(entry)}
