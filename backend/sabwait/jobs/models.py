"""Pydantic models for job id APIs."""

from __future__ import annotations

from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Field


class JobUpdateRequest(BaseModel):
    """POST /update request body."""

    model_config = ConfigDict(populate_by_name=True, coerce_numbers_to_str=True)

    job_id: str = Field(alias="jobId")
    username: str | None = None
