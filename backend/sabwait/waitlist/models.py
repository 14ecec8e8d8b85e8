"""Pydantic models for waitlist APIs."""

from __future__ import annotations

from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Field


class _WaitlistRequest(BaseModel):
    # Discord ids arrive as strings from the bot but as numbers from some scripts.
    model_config = ConfigDict(populate_by_name=True, coerce_numbers_to_str=True)

    account_id: str = Field(alias="discordId", min_length=1)


class AdmitRequest(_WaitlistRequest):
    """POST /waitlist/add request body."""

    display_name: str = Field(alias="discordUsername", min_length=1)
    credit_paid: int | None = Field(default=0, alias="brainrotPaid")
    steals: int | None = 0


class RemoveRequest(_WaitlistRequest):
    """POST /waitlist/remove request body."""


class CreditStealsRequest(_WaitlistRequest):
    """POST /waitlist/addsteals request body."""

    amount: int | None = None


class ConsumeStealsRequest(_WaitlistRequest):
    """POST /waitlist/usesteals request body."""

    amount: int | None = None


class RepositionRequest(_WaitlistRequest):
    """POST /waitlist/updateposition request body."""

    new_position: int | None = Field(default=None, alias="newPosition")
