"""
Command Registry
Command registration and prefix/alias/priority based resolution
"""

import threading
from typing import Any, Dict, Iterable, List, Optional, Sequence, Tuple

from commands.category import Category, CategoryHandler
from commands.command import Command
from commands.command_container import AliasCommandContainer, CommandContainer
from commands.command_priority import CommandPriority
from commands.exceptions import ConfigurationError, DuplicateCommandPrefixError
from utils.logger import get_logger

# Registry key: (category default prefix, command triggers)
RegistryKey = Tuple[str, Tuple[str, ...]]


def first_token(input_line: Optional[str]) -> str:
    """
    Get the first whitespace-delimited token of a line, lowercased.

    Args:
        input_line: Raw message content or a single token

    Returns:
        First token, or an empty string for blank input
    """
    if not input_line:
        return ""
    parts = input_line.split()
    return parts[0].lower() if parts else ""


class CommandRegistry:
    """Table of registered commands keyed by their trigger sets.

    The table is copy-on-write: register() builds a new dict under a lock and
    swaps it in, readers iterate whichever snapshot they picked up.
    """

    def __init__(self, categories: Optional[CategoryHandler] = None):
        self.logger = get_logger("CommandRegistry")
        self.categories = categories if categories is not None else CategoryHandler.with_defaults()
        self._commands: Dict[RegistryKey, CommandContainer] = {}
        self._lock = threading.Lock()

    def register(self, command: Command, category: Optional[Category] = None) -> CommandContainer:
        """
        Register a command.

        Args:
            command: Command to register
            category: Category to register it under, looked up from the
                command's category name when omitted

        Returns:
            The created command container

        Raises:
            ConfigurationError: The command is incomplete
            DuplicateCommandPrefixError: A trigger clashes with a registered command
        """
        if command is None:
            raise ConfigurationError("Cannot register a null command")

        if category is None:
            category = self.categories.from_command(command)
        if category is None:
            raise ConfigurationError(
                f"{command.name} :: Invalid command category, command category may not be null"
            )
        if command.description is None:
            raise ConfigurationError(f"{command.name} :: Command description may not be null")
        if not command.triggers:
            raise ConfigurationError(f"{command.name} :: Command must have at least one trigger")

        container = CommandContainer(command, category)

        with self._lock:
            self._check_collisions(command, category, self._commands.values())

            commands = dict(self._commands)
            commands[(category.prefix, container.triggers)] = container
            self._commands = commands

        self.logger.debug(f"Registered command: {command.name} {category.prefix}{list(container.triggers)}")
        return container

    @staticmethod
    def _check_collisions(
        command: Command,
        category: Category,
        existing: Iterable[CommandContainer],
    ) -> None:
        existing = list(existing)
        for trigger in command.triggers:
            identifier = category.prefix + trigger
            for container in existing:
                for sub_trigger in container.triggers:
                    if identifier.lower() == (container.default_prefix + sub_trigger).lower():
                        raise DuplicateCommandPrefixError(identifier, command.name, container.name)

    def resolve(self, input_line: str, context: Any = None) -> Optional[CommandContainer]:
        """
        Get the command matching the first token of the input.

        Both the prefix and the trigger must match. The prefix comes from the
        command and the context, so a guild with a custom prefix matches on
        that prefix instead of the default.

        Args:
            input_line: Message content, only the first token is used
            context: Invocation context used to generate prefixes

        Returns:
            The matching command with the highest priority, or None
        """
        token = first_token(input_line)
        if not token:
            return None

        matches: List[CommandContainer] = []
        for container in self._commands.values():
            prefix = container.generate_prefix(context)
            for trigger in container.triggers:
                if token == (prefix + trigger).lower():
                    matches.append(container)
                    break

        return self._highest_priority(matches)

    def resolve_with_alias(
        self,
        input_line: str,
        context: Any = None,
        guild: Optional[Any] = None,
    ) -> Optional[CommandContainer]:
        """
        Get the command matching the input, falling back to guild aliases.

        Args:
            input_line: Message content
            context: Invocation context used to generate prefixes
            guild: Guild settings holding the alias map

        Returns:
            Matching command container, possibly wrapped with alias arguments
        """
        container = self.resolve(input_line, context)
        if container is not None:
            return container
        return self.resolve_alias(input_line, context, guild)

    def resolve_alias(
        self,
        input_line: str,
        context: Any = None,
        guild: Optional[Any] = None,
    ) -> Optional[CommandContainer]:
        """
        Get the command a guild alias points at.

        An alias applies when the first token starts with the alias key, so
        overlapping keys can match the same input; the winner is then picked
        by command priority alone.

        Args:
            input_line: Message content
            context: Invocation context used to generate prefixes
            guild: Guild settings holding the alias map

        Returns:
            Matching command container, or None
        """
        aliases = getattr(guild, "aliases", None)
        if not aliases:
            return None

        token = first_token(input_line)
        if not token:
            return None

        matches: List[Tuple[CommandContainer, List[str]]] = []
        for alias, target in aliases.items():
            if not alias or not token.startswith(alias):
                continue

            target_parts = target.split()
            if not target_parts:
                continue

            container = self.resolve(target_parts[0], context)
            if container is not None:
                matches.append((container, target_parts[1:]))

        if not matches:
            return None

        container, alias_arguments = matches[0]
        for candidate, arguments in matches[1:]:
            if candidate.priority.is_greater_than(container.priority):
                container, alias_arguments = candidate, arguments

        if not alias_arguments:
            return container
        return AliasCommandContainer(container, alias_arguments)

    def resolve_lazy(self, trigger: str) -> Optional[CommandContainer]:
        """
        Get the command matching a bare trigger, ignoring prefixes.

        Commands with IGNORED priority are left out of the search.

        Args:
            trigger: Trigger to search for

        Returns:
            The matching command with the highest priority, or None
        """
        if not trigger:
            return None

        trigger = trigger.lower()
        matches: List[CommandContainer] = []
        for container in self._commands.values():
            if container.priority is CommandPriority.IGNORED:
                continue

            if any(trigger == sub_trigger.lower() for sub_trigger in container.triggers):
                matches.append(container)

        return self._highest_priority(matches)

    def get_command(self, command: Command) -> Optional[CommandContainer]:
        """
        Get the container wrapping the given command instance.

        Args:
            command: Command instance

        Returns:
            Registered container or None
        """
        for container in self._commands.values():
            if container.command.is_same(command):
                return container
        return None

    def get_by_category(self, category: str) -> List[CommandContainer]:
        name = category.lower()
        return [c for c in self._commands.values() if c.category.name.lower() == name]

    def get_all(self) -> List[CommandContainer]:
        """
        Get all registered commands.

        Returns:
            List of all command containers
        """
        return list(self._commands.values())

    @staticmethod
    def _highest_priority(matches: Sequence[CommandContainer]) -> Optional[CommandContainer]:
        # max() keeps the first of equal-priority matches
        if not matches:
            return None
        return max(matches, key=lambda container: container.priority.value)

    def __len__(self) -> int:
        return len(self._commands)
