"""Pydantic models for player-session APIs."""

from __future__ import annotations

from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Field


class PlayerJoinRequest(BaseModel):
    """POST /player/join request body."""

    model_config = ConfigDict(populate_by_name=True)

    username: str
    display_name: str | None = Field(default=None, alias="displayName")
    user_id: int | None = Field(default=None, alias="userId")
    device: str | None = None
    avatar: str | None = None


class PlayerLeaveRequest(BaseModel):
    """POST /player/leave request body."""

    username: str
