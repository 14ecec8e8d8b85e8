"""
Waitlist chat commands: buyer-facing reads and owner-only mutations.
"""

from __future__ import annotations

import logging
from typing import Any

import discord
from discord.ext import commands

from sabwait.bot import embeds
from sabwait.bot.client import ServerApiError
from sabwait.bot.client import ServerUnavailableError
from sabwait.bot.client import WaitlistServerClient
from sabwait.bot.client import describe_api_error
from sabwait.bot.permissions import Tier
from sabwait.bot.permissions import denial_message
from sabwait.bot.permissions import member_tier
from sabwait.core.config import BotSettings

logger = logging.getLogger("sabwait.bot.commands")

COMMAND_TIERS: dict[str, Tier] = {
    "help": Tier.ANYONE,
    "slots": Tier.BUYER,
    "joinserver": Tier.BUYER,
    "waitlist": Tier.BUYER,
    "steals": Tier.BUYER,
    "addwaitlist": Tier.OWNER,
    "addsteals": Tier.OWNER,
    "removesteals": Tier.OWNER,
    "setposition": Tier.OWNER,
    "removewaitlist": Tier.OWNER,
    "whitelist": Tier.OWNER,
    "unwhitelist": Tier.OWNER,
}

REMOVED_DM = (
    "⚠️ You have been removed from the SAB waitlist — you ran out of steals. "
    "Contact an admin to rejoin."
)

_CLIENT_ERRORS = (ServerApiError, ServerUnavailableError)


class TierCheckFailure(commands.CheckFailure):
    """Raised when the invoking member lacks the tier a command needs."""

    def __init__(self, required: Tier) -> None:
        super().__init__(denial_message(required))
        self.required = required


def _status(exc: Exception) -> int | None:
    return exc.status_code if isinstance(exc, ServerApiError) else None


class WaitlistCommands(commands.Cog):
    """Chat frontend for the waitlist server."""

    def __init__(
        self,
        bot: commands.Bot,
        settings: BotSettings,
        client: WaitlistServerClient | None = None,
    ) -> None:
        self.bot = bot
        self.settings = settings
        self._owns_client = client is None
        self.client = client or WaitlistServerClient(
            settings.sab_server_url,
            api_key=settings.sab_api_key,
            timeout_seconds=settings.sab_request_timeout_seconds,
        )

    async def cog_unload(self) -> None:
        if self._owns_client:
            await self.client.aclose()

    async def cog_check(self, ctx: commands.Context) -> bool:
        if ctx.guild is None:
            raise commands.NoPrivateMessage()
        required = COMMAND_TIERS.get(ctx.command.name, Tier.OWNER)
        if member_tier(ctx.author, self.settings) < required:
            raise TierCheckFailure(required)
        return True

    async def cog_command_error(self, ctx: commands.Context, error: commands.CommandError) -> None:
        if isinstance(error, commands.NoPrivateMessage):
            return
        if isinstance(error, TierCheckFailure):
            await ctx.reply(str(error))
            return
        if isinstance(error, (commands.MissingRequiredArgument, commands.BadArgument)):
            usage = f"!{ctx.command.name} {ctx.command.usage or ''}".strip()
            await ctx.reply(f"**Usage:** `{usage}`")
            return
        logger.error("Command %s failed", ctx.command, exc_info=error)

    # ── side effects: best-effort, never unwind the primary result ──────────

    def _buyer_role(self) -> discord.Object | None:
        role_id = self.settings.sab_buyer_role_id
        return discord.Object(id=role_id) if role_id is not None else None

    async def _grant_buyer_role(self, member: discord.Member) -> bool:
        role = self._buyer_role()
        if role is None:
            return False
        try:
            await member.add_roles(role, reason="Added to SAB waitlist")
        except discord.HTTPException as exc:
            logger.warning("Failed to add buyer role to %s: %s", member.id, exc)
            return False
        return True

    async def _revoke_buyer_role(self, member: discord.Member) -> bool:
        role = self._buyer_role()
        if role is None:
            return False
        try:
            await member.remove_roles(role, reason="Removed from SAB waitlist")
        except discord.HTTPException as exc:
            logger.warning("Failed to remove buyer role from %s: %s", member.id, exc)
            return False
        return True

    async def _notify_removed(self, member: discord.Member) -> None:
        try:
            await member.send(REMOVED_DM)
        except discord.HTTPException as exc:
            logger.info("Could not DM %s about waitlist removal: %s", member.id, exc)

    # ── anyone ───────────────────────────────────────────────────────────────

    @commands.command(name="help")
    async def help(self, ctx: commands.Context) -> None:
        """List the commands the caller can run."""
        is_owner = member_tier(ctx.author, self.settings) >= Tier.OWNER
        await ctx.reply(embeds=embeds.help_embeds(include_owner=is_owner))

    # ── buyer tier ───────────────────────────────────────────────────────────

    @commands.command(name="slots")
    async def slots(self, ctx: commands.Context) -> None:
        try:
            payload = await self.client.list_players()
        except _CLIENT_ERRORS as exc:
            await ctx.reply(describe_api_error(exc, "Failed to fetch players"))
            return
        if not payload.get("count"):
            await ctx.reply("📊 No players currently in the server.")
            return
        await ctx.reply(embed=embeds.slots_embed(payload))

    @commands.command(name="joinserver")
    async def joinserver(self, ctx: commands.Context) -> None:
        try:
            job_id = await self.client.get_job_id()
        except _CLIENT_ERRORS as exc:
            if _status(exc) == 404:
                await ctx.reply("❌ No active server JobId set!")
            else:
                await ctx.reply(describe_api_error(exc, "Failed to get join link"))
            return
        await ctx.reply(embed=embeds.join_server_embed(job_id, self.settings.sab_place_id))

    @commands.command(name="waitlist")
    async def waitlist(self, ctx: commands.Context) -> None:
        try:
            payload = await self.client.list_waitlist()
        except _CLIENT_ERRORS as exc:
            await ctx.reply(describe_api_error(exc, "Failed to fetch waitlist"))
            return
        await ctx.reply(embed=embeds.waitlist_embed(payload))

    @commands.command(name="steals", usage="[@user]")
    async def steals(self, ctx: commands.Context, member: discord.Member | None = None) -> None:
        target = member or ctx.author
        try:
            user = await self.client.get_entry(str(target.id))
        except _CLIENT_ERRORS as exc:
            if _status(exc) == 404:
                await ctx.reply(f"❌ {embeds.mention(target.id)} is not in the waitlist!")
            else:
                await ctx.reply(describe_api_error(exc, "Failed to fetch steals"))
            return
        await ctx.reply(embed=embeds.steals_embed(user))

    # ── owner tier ───────────────────────────────────────────────────────────

    @commands.command(name="addwaitlist", usage="<@user> <brainrot_paid> [steals]")
    async def addwaitlist(
        self,
        ctx: commands.Context,
        member: discord.Member,
        brainrot_paid: int,
        steals: int = 0,
    ) -> None:
        if brainrot_paid < 0:
            await ctx.reply("❌ Brainrot paid must be a valid number!")
            return
        if steals < 0:
            await ctx.reply("❌ Steals must be zero or more!")
            return
        try:
            user = await self.client.admit(
                str(member.id),
                str(member),
                credit_paid=brainrot_paid,
                steals=steals,
            )
        except _CLIENT_ERRORS as exc:
            if _status(exc) == 409:
                await ctx.reply("❌ User is already in the waitlist! Use `!addsteals` instead.")
            else:
                await ctx.reply(describe_api_error(exc, "Failed to add to waitlist"))
            return
        await self._grant_buyer_role(member)
        await ctx.reply(embed=embeds.admitted_embed(user))

    @commands.command(name="addsteals", usage="<@user> <amount>")
    async def addsteals(self, ctx: commands.Context, member: discord.Member, amount: int) -> None:
        if amount <= 0:
            await ctx.reply("**Usage:** `!addsteals <@user> <amount>`")
            return
        try:
            user = await self.client.credit_steals(str(member.id), amount)
        except _CLIENT_ERRORS as exc:
            if _status(exc) == 404:
                await ctx.reply("❌ User not found in waitlist! Use `!addwaitlist` first.")
            else:
                await ctx.reply(describe_api_error(exc, "Failed to add steals"))
            return
        await ctx.reply(embed=embeds.steals_added_embed(user, amount))

    @commands.command(name="removesteals", usage="<@user> [amount]")
    async def removesteals(self, ctx: commands.Context, member: discord.Member, amount: int = 1) -> None:
        amount = amount or 1
        if amount < 0:
            await ctx.reply("❌ Amount must be a positive number!")
            return
        try:
            removed, user = await self.client.consume_steals(str(member.id), amount)
        except _CLIENT_ERRORS as exc:
            if _status(exc) == 404:
                await ctx.reply("❌ User not found in waitlist!")
            else:
                await ctx.reply(describe_api_error(exc, "Failed to remove steals"))
            return

        if removed:
            role_revoked = await self._revoke_buyer_role(member)
            await self._notify_removed(member)
            await ctx.reply(embed=embeds.out_of_steals_embed(str(member.id), role_revoked))
            return
        await ctx.reply(embed=embeds.steals_removed_embed(user, amount))

    @commands.command(name="setposition", usage="<@user> <position>")
    async def setposition(self, ctx: commands.Context, member: discord.Member, position: int) -> None:
        if position < 0:
            await ctx.reply("❌ Position must be 0 or higher!")
            return
        try:
            user, old_position = await self.client.reposition(str(member.id), position)
        except _CLIENT_ERRORS as exc:
            if _status(exc) == 404:
                await ctx.reply("❌ User not found in waitlist!")
            else:
                await ctx.reply(describe_api_error(exc, "Failed to update position"))
            return
        await ctx.reply(embed=embeds.position_embed(user, old_position))

    @commands.command(name="removewaitlist", usage="<@user>")
    async def removewaitlist(self, ctx: commands.Context, member: discord.Member) -> None:
        try:
            user = await self.client.remove(str(member.id))
        except _CLIENT_ERRORS as exc:
            if _status(exc) == 404:
                await ctx.reply("❌ User not found in waitlist!")
            else:
                await ctx.reply(describe_api_error(exc, "Failed to remove from waitlist"))
            return
        await self._revoke_buyer_role(member)
        await ctx.reply(embed=embeds.removed_from_waitlist_embed(user))

    @commands.command(name="whitelist", usage="<roblox_username>")
    async def whitelist(self, ctx: commands.Context, username: str) -> None:
        try:
            normalized = await self.client.add_exempt(username)
        except _CLIENT_ERRORS as exc:
            await ctx.reply(describe_api_error(exc, "Failed to whitelist user"))
            return
        await ctx.reply(embed=embeds.whitelisted_embed(normalized))

    @commands.command(name="unwhitelist", usage="<roblox_username>")
    async def unwhitelist(self, ctx: commands.Context, username: str) -> None:
        try:
            normalized, existed = await self.client.remove_exempt(username)
        except _CLIENT_ERRORS as exc:
            await ctx.reply(describe_api_error(exc, "Failed to remove from whitelist"))
            return
        await ctx.reply(embed=embeds.unwhitelisted_embed(normalized, existed))


async def setup(bot: Any) -> None:
    await bot.add_cog(WaitlistCommands(bot, bot.settings))
