"""Permission tiers for chat commands."""

from __future__ import annotations

from enum import IntEnum
from typing import Any

from sabwait.core.config import BotSettings


class Tier(IntEnum):
    """Ordered so a higher tier may run every lower-tier command."""

    ANYONE = 0
    BUYER = 1
    OWNER = 2


def _role_ids(member: Any) -> set[int]:
    # Partial or mocked members may lack roles entirely.
    return {role.id for role in getattr(member, "roles", None) or ()}


def member_tier(member: Any, settings: BotSettings) -> Tier:
    """Resolve the highest tier a guild member holds."""
    roles = _role_ids(member)
    if member.id in settings.owner_ids:
        return Tier.OWNER
    if settings.sab_owner_role_id is not None and settings.sab_owner_role_id in roles:
        return Tier.OWNER
    if settings.sab_buyer_role_id is not None and settings.sab_buyer_role_id in roles:
        return Tier.BUYER
    return Tier.ANYONE


def denial_message(required: Tier) -> str:
    if required is Tier.OWNER:
        return "❌ This command is owner-only!"
    return "❌ You need the Buyer role to use this command!"
