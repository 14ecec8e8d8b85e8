"""Embed builder tests for the chat replies."""

from __future__ import annotations

from sabwait.bot import embeds


def _user(**overrides: object) -> dict[str, object]:
    user: dict[str, object] = {
        "discordId": "42",
        "discordUsername": "alice",
        "position": 1,
        "brainrotPaid": 100,
        "steals": 5,
        "addedAt": 0,
        "status": "waiting",
    }
    user.update(overrides)
    return user


def test_help_embeds_hide_owner_commands_from_buyers() -> None:
    assert len(embeds.help_embeds(include_owner=False)) == 1
    owner_view = embeds.help_embeds(include_owner=True)
    assert len(owner_view) == 2
    assert any(field.name.startswith("!addwaitlist") for field in owner_view[1].fields)


def test_join_link_quotes_job_id() -> None:
    link = embeds.join_link(123, "a b/c")

    assert link == "https://www.roblox.com/games/start?placeId=123&launchData=a%20b%2Fc"
    embed = embeds.join_server_embed("job-1", 123)
    assert "placeId=123&launchData=job-1" in embed.description


def test_slots_embed_caps_listing() -> None:
    players = [
        {"username": f"p{idx}", "displayName": f"P{idx}", "device": "PC", "userId": idx, "avatar": ""}
        for idx in range(12)
    ]

    embed = embeds.slots_embed({"players": players, "count": 12, "jobId": "job-1"})

    assert "**10. P9**" in embed.description
    assert "P10" not in embed.description
    assert "*...and 2 more*" in embed.description
    assert embed.footer.text == "12 player(s) online"


def test_waitlist_embed_sections() -> None:
    empty = embeds.waitlist_embed({"active": [], "waiting": [], "activeCount": 0, "waitingCount": 0})
    assert empty.description == "📋 Waitlist is currently empty."

    payload = {
        "active": [_user(discordId="1", position=2, status="active")],
        "waiting": [_user(discordId="2", position=1)],
        "activeCount": 1,
        "waitingCount": 1,
    }
    embed = embeds.waitlist_embed(payload)
    assert "🟢 In Server" in embed.description
    assert "🔴 Waiting" in embed.description
    assert embed.description.index("<@1>") < embed.description.index("<@2>")
    assert embed.footer.text == "Active: 1 | Waiting: 1 | Total: 2"


def test_steals_embed_color_and_notice() -> None:
    plenty = embeds.steals_embed(_user(steals=5))
    low = embeds.steals_embed(_user(steals=2))
    none = embeds.steals_embed(_user(steals=0))

    assert plenty.color.value == embeds.COLOR_GREEN
    assert plenty.description is None
    assert low.color.value == embeds.COLOR_ORANGE
    assert "Only 2 remaining" in low.description
    assert none.color.value == embeds.COLOR_RED
    assert "Out of steals" in none.description


def test_out_of_steals_embed_reports_role_change() -> None:
    revoked = embeds.out_of_steals_embed("42", role_revoked=True)
    kept = embeds.out_of_steals_embed("42", role_revoked=False)

    assert "<@42>" in revoked.description
    assert revoked.fields[1].value == "❌ Removed"
    assert kept.fields[1].value == "⚠️ Not changed"


def test_position_embed_shows_transition() -> None:
    embed = embeds.position_embed(_user(position=4, status="active"), old_position=1)

    assert embed.fields[1].value == "`1` → `4`"
    assert embed.fields[2].value == "🟢 In Server"


def test_unwhitelisted_footer_reflects_prior_membership() -> None:
    assert embeds.unwhitelisted_embed("bob", True).footer.text == "User was in whitelist"
    assert embeds.unwhitelisted_embed("bob", False).footer.text == "User was not in whitelist"
