"""
Discord Utilities
Helper functions for Discord interactions
"""

from typing import Any, Optional

from utils.logger import get_logger

logger = get_logger("DiscordUtils")

# Discord's message length limit
MAX_MESSAGE_LENGTH = 2000


class DiscordUtils:
    """Utility class for Discord-related helper functions."""

    @staticmethod
    async def safe_send(channel: Any, content: str) -> Optional[Any]:
        """
        Send a message to a channel, logging instead of raising on failure.

        Args:
            channel: Discord channel
            content: Message content, truncated to the Discord limit

        Returns:
            Sent message or None if failed
        """
        if not channel or not hasattr(channel, "send"):
            return None

        if len(content) > MAX_MESSAGE_LENGTH:
            content = content[: MAX_MESSAGE_LENGTH - 3] + "..."

        try:
            return await channel.send(content)
        except Exception as e:
            logger.debug(f"Failed to send message: {e}")
            return None
