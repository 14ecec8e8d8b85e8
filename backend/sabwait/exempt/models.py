"""Pydantic models for exempt-list APIs."""

from __future__ import annotations

from pydantic import BaseModel


class ExemptRequest(BaseModel):
    """POST /exempt/add and /exempt/remove request body."""

    username: str
