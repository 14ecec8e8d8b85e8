"""Player-session domain package."""

from sabwait.sessions.directory import SessionDirectory
from sabwait.sessions.directory import SessionRecord
from sabwait.sessions.models import PlayerJoinRequest
from sabwait.sessions.models import PlayerLeaveRequest
from sabwait.sessions.sweeper import SessionSweeper

__all__ = [
    "PlayerJoinRequest",
    "PlayerLeaveRequest",
    "SessionDirectory",
    "SessionRecord",
    "SessionSweeper",
]
