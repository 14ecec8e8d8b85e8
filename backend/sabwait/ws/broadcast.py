"""Snapshot and broadcast helpers for the status websocket stream."""

from __future__ import annotations

import asyncio
from collections.abc import Awaitable
from collections.abc import Callable
import logging
from typing import Any

import anyio.from_thread

from sabwait.api.views import listing_view
from sabwait.api.views import players_view
from sabwait.api.views import status_view
from sabwait.runtime import Runtime

from .protocol import EventType
from .protocol import send_frame

logger = logging.getLogger("sabwait.ws")


async def send_status_snapshot(websocket: Any, runtime: Runtime) -> None:
    await send_frame(
        websocket,
        "STATUS",
        {
            **status_view(runtime),
            "waitlist": listing_view(runtime.waitlist.list_entries()),
            "players": players_view(runtime)["players"],
        },
    )


async def broadcast_event(runtime: Runtime, event_type: EventType, payload: dict[str, Any]) -> None:
    stale: list[Any] = []
    for websocket in list(runtime.status_connections):
        try:
            await send_frame(websocket, event_type, payload)
        except Exception:
            stale.append(websocket)
    for websocket in stale:
        runtime.status_connections.discard(websocket)
    if stale:
        logger.info("Dropped %d stale status listener(s)", len(stale))


async def broadcast_job_update(runtime: Runtime) -> None:
    await broadcast_event(runtime, "JOB_UPDATE", {"jobId": runtime.jobs.peek()})


async def broadcast_waitlist_update(runtime: Runtime) -> None:
    await broadcast_event(runtime, "WAITLIST_UPDATE", listing_view(runtime.waitlist.list_entries()))


async def broadcast_players_update(runtime: Runtime) -> None:
    await broadcast_event(runtime, "PLAYERS_UPDATE", players_view(runtime))


Broadcast = Callable[[Runtime], Awaitable[None]]


def _spawn_broadcast(runtime: Runtime, broadcast: Broadcast) -> asyncio.Task[None]:
    """Start a broadcast on the running loop; the task is held until it finishes."""
    task = asyncio.get_running_loop().create_task(broadcast(runtime))
    runtime.pending_broadcasts.add(task)
    task.add_done_callback(runtime.pending_broadcasts.discard)
    return task


def dispatch_broadcast(runtime: Runtime, broadcast: Broadcast) -> None:
    """Schedule a broadcast from either the event loop or a threadpool route, without waiting."""
    if not runtime.status_connections:
        return
    try:
        asyncio.get_running_loop()
    except RuntimeError:
        pass
    else:
        _spawn_broadcast(runtime, broadcast)
        return
    # Sync routes run in an AnyIO worker thread; hop to the app loop only to start the task.
    try:
        anyio.from_thread.run_sync(_spawn_broadcast, runtime, broadcast)
    except RuntimeError:
        logger.debug("No event loop available for %s", getattr(broadcast, "__name__", broadcast))
