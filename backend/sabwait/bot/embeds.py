"""Embed builders for waitlist chat replies."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any
from urllib.parse import quote

import discord

COLOR_CYAN = 0x00FFFF
COLOR_BLUE = 0x00BFFF
COLOR_GOLD = 0xFFD700
COLOR_GREEN = 0x00FF00
COLOR_ORANGE = 0xFF9900
COLOR_RED = 0xFF0000
COLOR_OWNER = 0xFF6B6B

SLOTS_PAGE_SIZE = 10
WAITLIST_SECTION_SIZE = 15
LOW_STEALS_THRESHOLD = 3

BUYER_COMMANDS: tuple[tuple[str, str], ...] = (
    ("!joinserver", "Get a clickable link to join the SAB server"),
    ("!waitlist", "View the current waitlist and positions"),
    ("!steals [@user]", "Check steals for yourself or another user"),
    ("!slots", "View all active players in the server"),
)

OWNER_COMMANDS: tuple[tuple[str, str], ...] = (
    ("!addwaitlist <@user> <brainrot> [steals]", "Add a user to the waitlist"),
    ("!addsteals <@user> <amount>", "Add steals to a user"),
    ("!removesteals <@user> [amount]", "Remove steals from a user (default: 1)"),
    ("!setposition <@user> <position>", "Move a user to a new waitlist position"),
    ("!removewaitlist <@user>", "Remove a user from the waitlist"),
    ("!whitelist <username>", "Add a Roblox user to the exempt list"),
    ("!unwhitelist <username>", "Remove a Roblox user from the exempt list"),
)


def mention(account_id: str | int) -> str:
    return f"<@{account_id}>"


def status_label(user: dict[str, Any]) -> str:
    return "🟢 In Server" if user.get("status") == "active" else "🔴 Waiting"


def join_link(place_id: int, job_id: str) -> str:
    return f"https://www.roblox.com/games/start?placeId={place_id}&launchData={quote(job_id, safe='')}"


def _timestamped(embed: discord.Embed) -> discord.Embed:
    embed.timestamp = discord.utils.utcnow()
    return embed


def _command_list_embed(title: str, color: int, entries: Sequence[tuple[str, str]]) -> discord.Embed:
    embed = discord.Embed(title=title, color=color)
    for name, value in entries:
        embed.add_field(name=name, value=value, inline=False)
    return _timestamped(embed)


def help_embeds(include_owner: bool) -> list[discord.Embed]:
    embeds = [_command_list_embed("📋 SAB Bot — Buyer Commands", COLOR_CYAN, BUYER_COMMANDS)]
    if include_owner:
        embeds.append(_command_list_embed("🔧 SAB Bot — Owner Commands", COLOR_OWNER, OWNER_COMMANDS))
    return embeds


def slots_embed(payload: dict[str, Any]) -> discord.Embed:
    players: list[dict[str, Any]] = payload.get("players", [])
    lines = [f"**JobId:** `{payload.get('jobId') or 'Not set'}`", ""]
    for idx, player in enumerate(players[:SLOTS_PAGE_SIZE], start=1):
        lines.append(f"**{idx}. {player['displayName']}** (@{player['username']})")
        lines.append(f"   📱 {player['device']} | 🆔 `{player['userId']}`")
        lines.append("")
    if len(players) > SLOTS_PAGE_SIZE:
        lines.append(f"*...and {len(players) - SLOTS_PAGE_SIZE} more*")

    embed = discord.Embed(
        title="👥 Active Players in SAB Server",
        description="\n".join(lines),
        color=COLOR_CYAN,
    )
    embed.set_footer(text=f"{payload.get('count', len(players))} player(s) online")
    if players and players[0].get("avatar"):
        embed.set_thumbnail(url=players[0]["avatar"])
    return _timestamped(embed)


def join_server_embed(job_id: str, place_id: int) -> discord.Embed:
    embed = discord.Embed(
        title="🎮 Join SAB Server",
        description=f"[**Click here to join**]({join_link(place_id, job_id)})",
        color=COLOR_BLUE,
    )
    embed.add_field(name="JobId", value=f"`{job_id}`", inline=True)
    embed.add_field(name="Place ID", value=f"`{place_id}`", inline=True)
    embed.set_footer(text="Link expires when server restarts")
    return _timestamped(embed)


def _waitlist_section(title: str, users: list[dict[str, Any]]) -> list[str]:
    lines = [title]
    for idx, user in enumerate(users[:WAITLIST_SECTION_SIZE], start=1):
        lines.append(
            f"{idx}. {mention(user['discordId'])} — Pos: `{user['position']}` | Steals: `{user['steals']}`"
        )
    if len(users) > WAITLIST_SECTION_SIZE:
        lines.append(f"*...and {len(users) - WAITLIST_SECTION_SIZE} more*")
    return lines


def waitlist_embed(payload: dict[str, Any]) -> discord.Embed:
    active_count = int(payload.get("activeCount", 0))
    waiting_count = int(payload.get("waitingCount", 0))
    embed = discord.Embed(title="⏳ SAB Waitlist Status", color=COLOR_GOLD)
    embed.set_footer(
        text=f"Active: {active_count} | Waiting: {waiting_count} | Total: {active_count + waiting_count}"
    )

    if active_count == 0 and waiting_count == 0:
        embed.description = "📋 Waitlist is currently empty."
        return _timestamped(embed)

    lines: list[str] = []
    if active_count:
        lines.extend(_waitlist_section("**🟢 In Server:**", payload.get("active", [])))
    if waiting_count:
        if lines:
            lines.append("")
        lines.extend(_waitlist_section("**🔴 Waiting:**", payload.get("waiting", [])))
    embed.description = "\n".join(lines)
    return _timestamped(embed)


def steals_color(steals: int) -> int:
    if steals > LOW_STEALS_THRESHOLD:
        return COLOR_GREEN
    if steals > 0:
        return COLOR_ORANGE
    return COLOR_RED


def steals_embed(user: dict[str, Any]) -> discord.Embed:
    steals = int(user["steals"])
    embed = discord.Embed(title="📊 Steals Info", color=steals_color(steals))
    embed.add_field(name="User", value=mention(user["discordId"]), inline=True)
    embed.add_field(name="Steals", value=f"**{steals}**", inline=True)
    embed.add_field(name="Position", value=f"`{user['position']}`", inline=True)
    embed.add_field(name="Brainrot Paid", value=f"{user['brainrotPaid']}", inline=True)
    embed.add_field(name="Status", value=status_label(user), inline=True)
    if steals == 0:
        embed.description = "⚠️ **Out of steals!** Will be removed on next use."
    elif steals <= LOW_STEALS_THRESHOLD:
        embed.description = f"⚠️ **Low steals!** Only {steals} remaining."
    return _timestamped(embed)


def admitted_embed(user: dict[str, Any]) -> discord.Embed:
    embed = discord.Embed(title="✅ Added to Waitlist", color=COLOR_GREEN)
    embed.add_field(name="User", value=mention(user["discordId"]), inline=True)
    embed.add_field(name="Position", value=f"`{user['position']}`", inline=True)
    embed.add_field(name="Brainrot Paid", value=f"{user['brainrotPaid']}", inline=True)
    embed.add_field(name="Steals", value=f"{user['steals']}", inline=True)
    return _timestamped(embed)


def steals_added_embed(user: dict[str, Any], amount: int) -> discord.Embed:
    embed = discord.Embed(title="✅ Steals Added", color=COLOR_GREEN)
    embed.add_field(name="User", value=mention(user["discordId"]), inline=True)
    embed.add_field(name="Added", value=f"+{amount}", inline=True)
    embed.add_field(name="Total Steals", value=f"**{user['steals']}**", inline=True)
    return _timestamped(embed)


def steals_removed_embed(user: dict[str, Any], amount: int) -> discord.Embed:
    steals = int(user["steals"])
    embed = discord.Embed(title="📉 Steals Removed", color=COLOR_ORANGE)
    embed.add_field(name="User", value=mention(user["discordId"]), inline=True)
    embed.add_field(name="Removed", value=f"-{amount}", inline=True)
    embed.add_field(name="Remaining", value=f"**{steals}**", inline=True)
    if steals <= LOW_STEALS_THRESHOLD:
        embed.description = f"⚠️ Low steals warning! Only {steals} remaining."
    return _timestamped(embed)


def out_of_steals_embed(account_id: str, role_revoked: bool) -> discord.Embed:
    embed = discord.Embed(
        title="⚠️ User Removed from Waitlist",
        description=f"{mention(account_id)} ran out of steals and was removed.",
        color=COLOR_RED,
    )
    embed.add_field(name="Steals", value="`0`", inline=True)
    embed.add_field(name="Buyer Role", value="❌ Removed" if role_revoked else "⚠️ Not changed", inline=True)
    return _timestamped(embed)


def position_embed(user: dict[str, Any], old_position: int) -> discord.Embed:
    embed = discord.Embed(title="📊 Position Updated", color=COLOR_BLUE)
    embed.add_field(name="User", value=mention(user["discordId"]), inline=True)
    embed.add_field(name="Position", value=f"`{old_position}` → `{user['position']}`", inline=True)
    embed.add_field(name="Status", value=status_label(user), inline=True)
    return _timestamped(embed)


def removed_from_waitlist_embed(user: dict[str, Any]) -> discord.Embed:
    embed = discord.Embed(
        title="🗑️ Removed from Waitlist",
        description=f"{mention(user['discordId'])} was removed from the waitlist.",
        color=COLOR_ORANGE,
    )
    embed.add_field(name="Steals Left", value=f"{user['steals']}", inline=True)
    embed.add_field(name="Last Position", value=f"`{user['position']}`", inline=True)
    return _timestamped(embed)


def whitelisted_embed(username: str) -> discord.Embed:
    embed = discord.Embed(title="✅ User Whitelisted", color=COLOR_GREEN)
    embed.add_field(name="Roblox Username", value=f"`{username}`", inline=False)
    embed.set_footer(text="This user will not be kicked")
    return _timestamped(embed)


def unwhitelisted_embed(username: str, existed: bool) -> discord.Embed:
    embed = discord.Embed(title="✅ User Removed from Whitelist", color=COLOR_ORANGE)
    embed.add_field(name="Roblox Username", value=f"`{username}`", inline=False)
    embed.set_footer(text="User was in whitelist" if existed else "User was not in whitelist")
    return _timestamped(embed)
