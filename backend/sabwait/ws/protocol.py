"""Status-stream wire format: ``{"v": 1, "type": ..., "payload": {...}}`` frames."""

from __future__ import annotations

from typing import Any
from typing import Literal

STATUS_PROTOCOL_VERSION = 1

EventType = Literal[
    "STATUS",
    "JOB_UPDATE",
    "WAITLIST_UPDATE",
    "PLAYERS_UPDATE",
    "PING",
    "PONG",
]

# Bare-text frames a listener may send instead of JSON.
CLIENT_PING = "PING"
CLIENT_PONG = "PONG"


def status_frame(event_type: EventType, payload: dict[str, Any] | None = None) -> dict[str, Any]:
    return {"v": STATUS_PROTOCOL_VERSION, "type": event_type, "payload": payload or {}}


async def send_frame(websocket: Any, event_type: EventType, payload: dict[str, Any] | None = None) -> None:
    await websocket.send_json(status_frame(event_type, payload))
