"""
Command Containers
Registry entries pairing a command with its resolved category
"""

from typing import Any, List, Sequence, Tuple

from commands.category import Category
from commands.command import Command
from commands.command_priority import CommandPriority


class CommandContainer:
    """Immutable pairing of a registered command and its category."""

    __slots__ = ("_command", "_category", "_triggers")

    def __init__(self, command: Command, category: Category):
        self._command = command
        self._category = category
        self._triggers: Tuple[str, ...] = tuple(command.triggers)

    @property
    def command(self) -> Command:
        return self._command

    @property
    def category(self) -> Category:
        return self._category

    @property
    def name(self) -> str:
        return self._command.name

    @property
    def triggers(self) -> Tuple[str, ...]:
        return self._triggers

    @property
    def priority(self) -> CommandPriority:
        return self._command.priority

    @property
    def default_prefix(self) -> str:
        return self._category.prefix

    def generate_prefix(self, context: Any) -> str:
        return self._command.generate_command_prefix(context, self._category)

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.name!r} {self.default_prefix}{list(self._triggers)}>"


class AliasCommandContainer(CommandContainer):
    """A command reached through a guild alias that carries extra arguments.

    The alias arguments are placed ahead of the arguments the user typed.
    """

    __slots__ = ("_alias_arguments",)

    def __init__(self, container: CommandContainer, alias_arguments: Sequence[str]):
        super().__init__(container.command, container.category)
        self._alias_arguments: Tuple[str, ...] = tuple(alias_arguments)

    @property
    def alias_arguments(self) -> Tuple[str, ...]:
        return self._alias_arguments

    def build_arguments(self, args: Sequence[str]) -> List[str]:
        return list(self._alias_arguments) + list(args)
