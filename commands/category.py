"""
Command Categories
Namespaces that give every command in them a shared default prefix
"""

from dataclasses import dataclass
from typing import Any, Dict, Iterable, Optional, Tuple

from utils.logger import get_logger

# Categories registered when none are supplied
DEFAULT_CATEGORIES: Tuple[Tuple[str, str], ...] = (
    ("Administration", "."),
    ("Help", "!"),
    ("Fun", "!"),
    ("Interaction", ">"),
    ("Music", "!"),
    ("Search", "!"),
    ("Utility", "!"),
    ("System", ";"),
)


@dataclass(frozen=True)
class Category:
    """A command category with a fixed default prefix."""

    name: str
    prefix: str

    def get_prefix(self, guild: Optional[Any] = None) -> str:
        """
        Get the prefix for this category in a guild.

        Args:
            guild: Guild settings with optional per-category prefix overrides

        Returns:
            The guild's custom prefix, or the default prefix
        """
        if guild is not None:
            custom = guild.prefixes.get(self.name.lower())
            if custom:
                return custom
        return self.prefix


class CategoryHandler:
    """Holds the known categories and resolves commands to them."""

    def __init__(self, categories: Optional[Iterable[Category]] = None):
        self.logger = get_logger("CategoryHandler")
        self.categories: Dict[str, Category] = {}

        for category in categories or ():
            self.add(category)

    @classmethod
    def with_defaults(cls) -> "CategoryHandler":
        """Create a handler pre-filled with the default categories."""
        return cls(Category(name, prefix) for name, prefix in DEFAULT_CATEGORIES)

    def add(self, category: Category) -> Category:
        """
        Add a category, replacing any category with the same name.

        Args:
            category: Category to add

        Returns:
            The added category
        """
        self.categories[category.name.lower()] = category
        self.logger.debug(f"Added category: {category.name} ({category.prefix})")
        return category

    def get(self, name: str) -> Optional[Category]:
        if not name:
            return None
        return self.categories.get(name.lower())

    def from_command(self, command: Any) -> Optional[Category]:
        """
        Get the category a command belongs to.

        Args:
            command: Command with a category name

        Returns:
            Category or None if the command's category is unknown
        """
        return self.get(getattr(command, "category", None))
