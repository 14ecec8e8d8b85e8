"""Permission tier resolution tests."""

from __future__ import annotations

from types import SimpleNamespace

from sabwait.bot.permissions import Tier
from sabwait.bot.permissions import denial_message
from sabwait.bot.permissions import member_tier
from sabwait.core.config import BotSettings

OWNER_ROLE = 10
BUYER_ROLE = 20


def _settings(**overrides: object) -> BotSettings:
    values: dict[str, object] = {
        "sab_discord_bot_token": "token",
        "sab_owner_ids": "1",
        "sab_owner_role_id": OWNER_ROLE,
        "sab_buyer_role_id": BUYER_ROLE,
    }
    values.update(overrides)
    return BotSettings(**values)


def _member(member_id: int, *role_ids: int) -> SimpleNamespace:
    return SimpleNamespace(id=member_id, roles=[SimpleNamespace(id=role_id) for role_id in role_ids])


def test_owner_id_list_grants_owner_without_roles() -> None:
    assert member_tier(_member(1), _settings()) is Tier.OWNER


def test_owner_role_outranks_buyer_role() -> None:
    assert member_tier(_member(5, BUYER_ROLE, OWNER_ROLE), _settings()) is Tier.OWNER


def test_buyer_role_and_plain_member() -> None:
    settings = _settings()
    assert member_tier(_member(5, BUYER_ROLE), settings) is Tier.BUYER
    assert member_tier(_member(5, 999), settings) is Tier.ANYONE


def test_unset_roles_grant_nothing() -> None:
    settings = _settings(sab_owner_ids="", sab_owner_role_id=None, sab_buyer_role_id=None)
    assert member_tier(_member(5, OWNER_ROLE, BUYER_ROLE), settings) is Tier.ANYONE


def test_member_without_roles_attribute() -> None:
    assert member_tier(SimpleNamespace(id=5), _settings()) is Tier.ANYONE


def test_tiers_are_ordered() -> None:
    assert Tier.OWNER > Tier.BUYER > Tier.ANYONE


def test_denial_messages() -> None:
    assert "owner-only" in denial_message(Tier.OWNER)
    assert "Buyer role" in denial_message(Tier.BUYER)
