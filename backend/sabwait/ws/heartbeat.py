"""Keepalive for status listeners: periodic PING frames and client PING replies."""

from __future__ import annotations

import asyncio
import json
import logging
from typing import Any

from fastapi import WebSocketDisconnect

from .protocol import CLIENT_PING
from .protocol import CLIENT_PONG
from .protocol import send_frame

logger = logging.getLogger("sabwait.ws")

HEARTBEAT_TIMEOUT_CLOSE_CODE = 4408
MAX_MISSED_PONGS = 2


def frame_type(message: str) -> str | None:
    """Return the frame type of a bare-text or JSON client message."""
    if message in (CLIENT_PING, CLIENT_PONG):
        return message
    try:
        payload = json.loads(message)
    except json.JSONDecodeError:
        return None
    if isinstance(payload, dict) and isinstance(payload.get("type"), str):
        return payload["type"]
    return None


class ListenerKeepalive:
    """Counts unanswered PINGs for one listener."""

    def __init__(self, *, max_missed: int = MAX_MISSED_PONGS) -> None:
        self.max_missed = max_missed
        self.missed = 0
        self._answered = asyncio.Event()

    def pinged(self) -> None:
        self._answered.clear()

    def ponged(self) -> None:
        self.missed = 0
        self._answered.set()

    async def answered_within(self, timeout_seconds: float) -> bool:
        try:
            await asyncio.wait_for(self._answered.wait(), timeout=timeout_seconds)
        except TimeoutError:
            self.missed += 1
            return False
        return True

    @property
    def expired(self) -> bool:
        return self.missed >= self.max_missed


async def ping_listener(
    websocket: Any,
    keepalive: ListenerKeepalive,
    *,
    interval_seconds: float,
) -> None:
    """Send a PING every interval; close the socket after too many silent rounds."""
    # Sleep first so the STATUS snapshot is always the first frame a listener sees.
    while True:
        await asyncio.sleep(interval_seconds)
        keepalive.pinged()
        await send_frame(websocket, "PING")
        if await keepalive.answered_within(interval_seconds / 2):
            continue
        if keepalive.expired:
            logger.info("Closing silent status listener after %d missed PONGs", keepalive.missed)
            await websocket.close(code=HEARTBEAT_TIMEOUT_CLOSE_CODE, reason="HEARTBEAT_TIMEOUT")
            return


async def serve_listener(websocket: Any, *, interval_seconds: float) -> None:
    """Read client frames until disconnect while the ping task runs alongside."""
    keepalive = ListenerKeepalive()
    pinger = asyncio.create_task(ping_listener(websocket, keepalive, interval_seconds=interval_seconds))
    try:
        while True:
            kind = frame_type(await websocket.receive_text())
            if kind == CLIENT_PING:
                await send_frame(websocket, "PONG")
            elif kind == CLIENT_PONG:
                keepalive.ponged()
    except WebSocketDisconnect:
        return
    finally:
        pinger.cancel()
        try:
            await pinger
        except asyncio.CancelledError:
            pass
