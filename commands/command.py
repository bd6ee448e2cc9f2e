"""
Command
Definition and handler pair that can be registered with the CommandRegistry
"""

from typing import Any, Awaitable, Callable, Dict, List, Optional

from commands.category import Category
from commands.command_priority import CommandPriority

# Command handler type alias
CommandCallback = Callable[[Any, List[str]], Awaitable[Any]]


class CommandDefinition:
    """Definition of a command."""

    def __init__(
        self,
        name: str,
        description: Optional[str] = None,
        triggers: Optional[List[str]] = None,
        category: str = "Utility",
        priority: CommandPriority = CommandPriority.NORMAL,
        args: Optional[List[Dict[str, Any]]] = None,
        examples: Optional[List[str]] = None,
        guild_only: bool = False,
    ):
        self.name = name
        self.description = description
        self.triggers = list(triggers or [])
        self.category = category
        self.priority = priority
        self.args = args or []
        self.examples = examples or []
        self.guild_only = guild_only


class Command:
    """Registered command with definition and handler."""

    def __init__(self, definition: CommandDefinition, handler: CommandCallback):
        self.definition = definition
        self.handler = handler

    @classmethod
    def from_config(cls, config: Dict[str, Any], handler: CommandCallback) -> "Command":
        """
        Build a command from a config dict.

        Args:
            config: Command configuration dict with keys:
                - name: Command name (required)
                - description: Command description
                - triggers: List of triggers, without prefix
                - category: Category name
                - priority: CommandPriority or priority name
                - args: List of argument definitions
                - examples: List of example usages
                - guild_only: Whether command requires guild
            handler: Async function to handle the command

        Returns:
            New command
        """
        priority = config.get("priority", CommandPriority.NORMAL)
        if isinstance(priority, str):
            priority = CommandPriority.from_name(priority)

        definition = CommandDefinition(
            name=config["name"],
            description=config.get("description"),
            triggers=config.get("triggers", []),
            category=config.get("category", "Utility"),
            priority=priority,
            args=config.get("args", []),
            examples=config.get("examples", []),
            guild_only=config.get("guild_only", False),
        )
        return cls(definition, handler)

    @property
    def name(self) -> str:
        return self.definition.name

    @property
    def description(self) -> Optional[str]:
        return self.definition.description

    @property
    def triggers(self) -> List[str]:
        return self.definition.triggers

    @property
    def category(self) -> str:
        return self.definition.category

    @property
    def priority(self) -> CommandPriority:
        return self.definition.priority

    @property
    def args(self) -> List[Dict[str, Any]]:
        return self.definition.args

    @property
    def examples(self) -> List[str]:
        return self.definition.examples

    @property
    def guild_only(self) -> bool:
        return self.definition.guild_only

    def generate_command_prefix(self, context: Any, category: Category) -> str:
        """
        Get the prefix this command answers to in the given context.

        Override to ignore per-guild prefixes or to use a dynamic prefix.

        Args:
            context: Invocation context, or None for the default prefix
            category: The category the command is registered under

        Returns:
            Prefix string
        """
        if context is None:
            return category.prefix
        return context.get_prefix(category)

    def is_same(self, other: Any) -> bool:
        """Check whether other refers to the same command."""
        if other is self:
            return True
        if not isinstance(other, Command):
            return False
        return type(self) is type(other) and self.name == other.name and self.handler == other.handler

    async def execute(self, context: Any, args: List[str]) -> Any:
        return await self.handler(context, args)

    def __repr__(self) -> str:
        return f"<Command name={self.name!r} triggers={self.triggers!r} priority={self.priority.name}>"
