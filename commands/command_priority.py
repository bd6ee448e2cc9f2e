"""
Command Priority
Ordering used to pick a winner when several commands match the same input
"""

from enum import Enum


class CommandPriority(Enum):
    """Priority levels, higher values win ties.

    IGNORED commands can still be invoked with their prefix, but are never
    returned by a lazy (trigger-only) lookup.
    """

    IGNORED = 0
    LOWEST = 1
    LOW = 2
    NORMAL = 3
    HIGH = 4
    HIGHEST = 5

    def is_greater_than(self, other: "CommandPriority") -> bool:
        return self.value > other.value

    @classmethod
    def from_name(cls, name: str) -> "CommandPriority":
        """
        Look up a priority by its name.

        Args:
            name: Priority name, case-insensitive

        Returns:
            Matching priority
        """
        try:
            return cls[name.strip().upper()]
        except KeyError:
            raise ValueError(f"Unknown command priority: {name}") from None
