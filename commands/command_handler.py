"""
Command Handler
Resolves inbound messages through the CommandRegistry and runs the command
"""

from typing import Any, List, Optional

from commands.command_container import AliasCommandContainer, CommandContainer
from commands.command_registry import CommandRegistry
from commands.context import CommandContext
from utils.discord import DiscordUtils
from utils.logger import get_logger
from utils.validation import ValidationUtils


class CommandHandler:
    """Handles command parsing and execution."""

    def __init__(
        self,
        registry: CommandRegistry,
        guild_repository: Optional[Any] = None,
    ):
        self.logger = get_logger("Command")
        self.registry = registry
        self.guild_repository = guild_repository

    async def handle(self, message: Any) -> bool:
        """
        Handle incoming message.

        Args:
            message: Discord message object

        Returns:
            True if a command was executed
        """
        author = getattr(message, "author", None)
        if author is None or getattr(author, "bot", False):
            return False

        content = ValidationUtils.sanitize_input(getattr(message, "content", "") or "")
        if not content:
            return False

        guild = await self.fetch_guild(message)
        context = CommandContext(message=message, guild=guild)

        container = self.registry.resolve_with_alias(content, context, guild)
        if container is None:
            return False

        if container.command.guild_only and getattr(message, "guild", None) is None:
            await DiscordUtils.safe_send(message.channel, "❌ This command must be used in a server")
            return False

        args = self.parse_arguments(content, container)

        try:
            self.logger.debug(f"Executing: {container.name} {args}")
            await container.command.execute(context, args)
        except Exception as error:
            self.logger.error(f"Command error ({container.name}): {error}")
            await DiscordUtils.safe_send(
                message.channel,
                f"❌ Something went wrong while running `{container.name}`"
            )
            return False

        return True

    async def fetch_guild(self, message: Any) -> Optional[Any]:
        """
        Fetch the settings of the guild a message was sent in.

        A failing store is logged and treated as a guild without settings,
        so commands still resolve on their default prefixes.

        Args:
            message: Discord message

        Returns:
            Guild settings or None
        """
        discord_guild = getattr(message, "guild", None)
        if self.guild_repository is None or discord_guild is None:
            return None

        try:
            return await self.guild_repository.fetch_guild(str(discord_guild.id))
        except Exception as error:
            self.logger.error(f"Failed to load guild {discord_guild.id}: {error}")
            return None

    @staticmethod
    def parse_arguments(content: str, container: CommandContainer) -> List[str]:
        """
        Get the command arguments from message content.

        Args:
            content: Message content, the first token is the command
            container: Resolved command

        Returns:
            Arguments, with alias arguments first
        """
        args = content.split()[1:]
        if isinstance(container, AliasCommandContainer):
            return container.build_arguments(args)
        return args
