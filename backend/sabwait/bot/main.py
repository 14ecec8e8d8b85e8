"""
Discord bot entry for the SAB waitlist frontend.
"""

from __future__ import annotations

import logging

import discord
from discord.ext import commands
from pydantic import ValidationError

from sabwait.core.config import BotSettings
from sabwait.core.config import load_bot_settings
from sabwait.core.logs import configure_logging

logger = logging.getLogger("sabwait.bot")

EXTENSIONS = ["sabwait.bot.commands"]


def build_intents() -> discord.Intents:
    intents = discord.Intents.default()
    intents.message_content = True
    intents.members = True
    return intents


class SabWaitBot(commands.Bot):
    """Prefix-command bot; the built-in help is replaced by the waitlist one."""

    def __init__(self, settings: BotSettings) -> None:
        super().__init__(command_prefix="!", intents=build_intents(), help_command=None)
        self.settings = settings

    async def setup_hook(self) -> None:
        for extension in EXTENSIONS:
            await self.load_extension(extension)
            logger.info("Loaded extension %s", extension)

    async def on_ready(self) -> None:
        logger.info("Logged in as %s", self.user)
        logger.info("Server URL: %s", self.settings.sab_server_url)
        logger.info("Owner role: %s", self.settings.sab_owner_role_id or "not set")
        logger.info("Buyer role: %s", self.settings.sab_buyer_role_id or "not set")
        await self.change_presence(
            activity=discord.Activity(type=discord.ActivityType.watching, name="SAB Waitlist System")
        )

    async def on_error(self, event_method: str, *args, **kwargs) -> None:
        logger.exception("Discord error in %s", event_method)


def run() -> None:
    """Console entrypoint: start the bot, exiting non-zero without a token."""
    try:
        settings = load_bot_settings()
    except ValidationError as exc:
        configure_logging()
        logger.error("Invalid bot configuration (is DISCORD_BOT_TOKEN set?): %s", exc)
        raise SystemExit(1) from exc

    configure_logging(settings.sab_log_level)
    for name in settings.missing_optional():
        logger.warning("%s is not set", name)

    bot = SabWaitBot(settings)
    bot.run(settings.sab_discord_bot_token, log_handler=None)


if __name__ == "__main__":
    run()
