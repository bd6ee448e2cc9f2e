"""
Discord client setup using discord.py-self.
"""

import asyncio
import logging
import signal
import time
from typing import Iterable, Optional

import discord

from bot.config import Config, config
from bot.database import close_database, init_database
from bot.keep_alive import attach_registry, run_server, update_bot_status
from commands.category import CategoryHandler
from commands.command_handler import CommandHandler
from commands.command_loader import load_command_modules
from commands.command_registry import CommandRegistry
from repositories.guild_repository import GuildRepository
from utils.logger import get_logger, set_default_level

logger = get_logger("Client")


class OrionBot(discord.Client):
    """Discord client that routes messages through the command registry."""

    def __init__(self, registry: CommandRegistry, settings: Config):
        super().__init__()

        self.settings = settings
        self.registry = registry
        self.guild_repository = GuildRepository(None, cache_ttl=settings.GUILD_CACHE_TTL)
        self.command_handler = CommandHandler(registry, self.guild_repository)

    async def setup_hook(self):
        """Called when bot is starting up."""
        logger.info("Setting up bot...")

        self.guild_repository.pool = await init_database(self.settings.DATABASE_URL)
        attach_registry(self.registry)

        logger.info("Bot setup complete")

    async def on_ready(self):
        """Called when bot is ready."""
        update_bot_status(status="ready", discord_connected=True, ready_at=time.monotonic())

        logger.info(f"Logged in as: {self.user}")
        logger.info(f"Serving {len(self.registry)} commands")

    async def on_message(self, message: discord.Message):
        """Handle incoming messages."""
        await self.command_handler.handle(message)

    async def close(self):
        """Clean shutdown."""
        logger.info("Shutting down bot...")

        await close_database()

        update_bot_status(status="offline", discord_connected=False, ready_at=None)
        await super().close()


def create_bot(
    settings: Config = config,
    categories: Optional[CategoryHandler] = None,
    command_modules: Optional[Iterable[str]] = None,
) -> OrionBot:
    """
    Create the registry, load the command modules and build the client.

    Registration errors propagate, so a misconfigured bot never connects.

    Args:
        settings: Bot configuration
        categories: Command categories, the defaults when omitted
        command_modules: Dotted module paths, settings.COMMAND_MODULES when omitted

    Returns:
        Bot instance
    """
    registry = CommandRegistry(categories)
    if command_modules is None:
        command_modules = settings.COMMAND_MODULES
    load_command_modules(registry, command_modules)

    return OrionBot(registry, settings)


async def run_bot(settings: Config = config) -> None:
    """Run the bot."""
    settings.validate()

    if settings.DEBUG:
        set_default_level(logging.DEBUG)

    bot = create_bot(settings)

    loop = asyncio.get_running_loop()
    for sig in (signal.SIGINT, signal.SIGTERM):
        try:
            loop.add_signal_handler(sig, lambda s=sig: _shutdown(bot, s))
        except NotImplementedError:
            # Windows doesn't support add_signal_handler
            pass

    try:
        if settings.KEEP_ALIVE:
            run_server(settings.HOST, settings.PORT)

        await bot.start(settings.DISCORD_TOKEN)
    except Exception as e:
        logger.error(f"Bot error: {e}")
        raise
    finally:
        if not bot.is_closed():
            await bot.close()


def _shutdown(bot: OrionBot, sig: signal.Signals) -> None:
    logger.info(f"Received {sig.name}, shutting down...")
    asyncio.create_task(bot.close())
