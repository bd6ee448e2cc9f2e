"""
Database repositories for the command router.
"""

from .base_repository import BaseRepository
from .guild_repository import GuildRepository, GuildSettings

__all__ = [
    "BaseRepository",
    "GuildRepository",
    "GuildSettings",
]
