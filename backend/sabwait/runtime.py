"""Runtime state shared by REST and WebSocket handlers of one app instance."""

from __future__ import annotations

from dataclasses import dataclass
from dataclasses import field
import time
from typing import Any

from sabwait.core.config import Settings
from sabwait.core.config import load_settings
from sabwait.exempt.registry import ExemptRegistry
from sabwait.jobs.store import JobStore
from sabwait.sessions.directory import SessionDirectory
from sabwait.waitlist.registry import WaitlistEngine


@dataclass
class Runtime:
    """Owns exactly one instance of each store; built once per app."""

    settings: Settings
    waitlist: WaitlistEngine
    exempt: ExemptRegistry
    sessions: SessionDirectory
    jobs: JobStore
    started_at: float = field(default_factory=time.monotonic)
    status_connections: set[Any] = field(default_factory=set)
    pending_broadcasts: set[Any] = field(default_factory=set)

    def uptime_seconds(self) -> float:
        return time.monotonic() - self.started_at


def build_runtime(settings: Settings | None = None) -> Runtime:
    """Create fresh in-memory stores; nothing survives a restart."""
    settings = settings if settings is not None else load_settings()
    return Runtime(
        settings=settings,
        waitlist=WaitlistEngine(),
        exempt=ExemptRegistry(),
        sessions=SessionDirectory(stale_seconds=settings.sab_session_stale_seconds),
        jobs=JobStore(),
    )


__all__ = ["Runtime", "Settings", "build_runtime"]
