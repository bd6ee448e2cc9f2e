"""
Command Context
Per-invocation state passed to prefix generation and command handlers
"""

from typing import Any, Optional

from commands.category import Category


class CommandContext:
    """Invocation context for a single inbound message."""

    def __init__(self, message: Any = None, guild: Optional[Any] = None):
        self.message = message
        self.guild = guild

    def get_prefix(self, category: Category) -> str:
        """
        Get the prefix commands in a category use in this context.

        Args:
            category: Command category

        Returns:
            Guild override if set, otherwise the category default
        """
        return category.get_prefix(self.guild)
