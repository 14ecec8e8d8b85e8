"""Player session routes."""

from __future__ import annotations

from fastapi import APIRouter
from fastapi import Depends

from sabwait.api.deps import get_runtime
from sabwait.api.errors import raise_domain_error
from sabwait.api.views import player_view
from sabwait.api.views import players_view
from sabwait.errors import SabWaitError
from sabwait.runtime import Runtime
from sabwait.sessions.models import PlayerJoinRequest
from sabwait.sessions.models import PlayerLeaveRequest
from sabwait.ws.broadcast import broadcast_players_update
from sabwait.ws.broadcast import dispatch_broadcast

router = APIRouter()


@router.post("/player/join")
def player_join(
    payload: PlayerJoinRequest,
    runtime: Runtime = Depends(get_runtime),
) -> dict[str, object]:
    try:
        record = runtime.sessions.join(
            payload.username,
            display_name=payload.display_name,
            user_id=payload.user_id,
            device=payload.device,
            avatar=payload.avatar,
        )
    except SabWaitError as exc:
        raise_domain_error(exc)
    dispatch_broadcast(runtime, broadcast_players_update)
    return {"success": True, "player": player_view(record)}


@router.post("/player/leave")
def player_leave(
    payload: PlayerLeaveRequest,
    runtime: Runtime = Depends(get_runtime),
) -> dict[str, object]:
    try:
        existed = runtime.sessions.leave(payload.username)
    except SabWaitError as exc:
        raise_domain_error(exc)
    if existed:
        dispatch_broadcast(runtime, broadcast_players_update)
    return {"success": True, "existed": existed}


@router.get("/players/list")
def list_players(runtime: Runtime = Depends(get_runtime)) -> dict[str, object]:
    """Players in the live session, earliest join first."""
    return players_view(runtime)


@router.get("/players/count")
def count_players(runtime: Runtime = Depends(get_runtime)) -> dict[str, object]:
    return {"count": runtime.sessions.count(), "jobId": runtime.jobs.peek()}
