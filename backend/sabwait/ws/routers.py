"""WebSocket route for the live status channel."""

from __future__ import annotations

from fastapi import APIRouter
from fastapi import WebSocket
from fastapi import WebSocketDisconnect

from sabwait.runtime import Runtime

from .broadcast import send_status_snapshot
from .heartbeat import serve_listener

router = APIRouter()


@router.websocket("/ws/status")
async def ws_status(websocket: WebSocket) -> None:
    """Status websocket: initial STATUS snapshot, then job/waitlist/player updates."""
    runtime: Runtime = websocket.app.state.runtime
    await websocket.accept()
    runtime.status_connections.add(websocket)
    try:
        await send_status_snapshot(websocket, runtime)
        await serve_listener(
            websocket,
            interval_seconds=runtime.settings.sab_ws_heartbeat_interval_seconds,
        )
    except WebSocketDisconnect:
        return
    finally:
        runtime.status_connections.discard(websocket)
