"""Periodic stale-session sweep running as an asyncio task."""

from __future__ import annotations

import asyncio
from collections.abc import Awaitable
from collections.abc import Callable
import logging

from sabwait.sessions.directory import SessionDirectory

logger = logging.getLogger("sabwait.sessions")

DEFAULT_SWEEP_INTERVAL_SECONDS = 300.0


class SessionSweeper:
    """Run ``SessionDirectory.sweep`` on a fixed interval until stopped."""

    def __init__(
        self,
        directory: SessionDirectory,
        *,
        interval_seconds: float = DEFAULT_SWEEP_INTERVAL_SECONDS,
        on_evicted: Callable[[int], Awaitable[None]] | None = None,
    ) -> None:
        if interval_seconds <= 0:
            raise ValueError("interval_seconds must be > 0")
        self._directory = directory
        self._interval_seconds = interval_seconds
        self._on_evicted = on_evicted
        self._task: asyncio.Task[None] | None = None

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    async def run_once(self) -> int:
        removed = self._directory.sweep()
        if removed:
            logger.info("Cleaned up %d stale player session(s)", removed)
            if self._on_evicted is not None:
                try:
                    await self._on_evicted(removed)
                except Exception:
                    logger.exception("Session eviction callback failed")
        return removed

    async def _loop(self) -> None:
        while True:
            await asyncio.sleep(self._interval_seconds)
            await self.run_once()

    def start(self) -> None:
        if self.running:
            return
        self._task = asyncio.create_task(self._loop(), name="session-sweeper")

    async def stop(self) -> None:
        task = self._task
        self._task = None
        if task is None:
            return
        task.cancel()
        try:
            await task
        except asyncio.CancelledError:
            pass
