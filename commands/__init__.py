"""
Command system for the chat bot.
"""

from .category import Category, CategoryHandler
from .command import Command, CommandDefinition
from .command_container import AliasCommandContainer, CommandContainer
from .command_handler import CommandHandler
from .command_priority import CommandPriority
from .command_registry import CommandRegistry
from .context import CommandContext
from .exceptions import ConfigurationError, DuplicateCommandPrefixError

__all__ = [
    "AliasCommandContainer",
    "Category",
    "CategoryHandler",
    "Command",
    "CommandContainer",
    "CommandContext",
    "CommandDefinition",
    "CommandHandler",
    "CommandPriority",
    "CommandRegistry",
    "ConfigurationError",
    "DuplicateCommandPrefixError",
]
