"""
Guild Repository
Per-guild command prefixes and aliases
"""

import json
import time
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple

import asyncpg

from repositories.base_repository import BaseRepository


def _load_json_map(value: Any) -> Dict[str, str]:
    if not value:
        return {}
    if isinstance(value, str):
        try:
            value = json.loads(value)
        except json.JSONDecodeError:
            return {}
    if not isinstance(value, dict):
        return {}
    return {str(k).lower(): str(v) for k, v in value.items() if k}


@dataclass
class GuildSettings:
    """Command settings for one guild.

    prefixes maps a lowercased category name to the guild's prefix for it,
    aliases maps a lowercased alias to a command invocation such as
    "!ping extra".
    """

    guild_id: str
    prefixes: Dict[str, str] = field(default_factory=dict)
    aliases: Dict[str, str] = field(default_factory=dict)

    def __post_init__(self):
        self.prefixes = {k.lower(): v for k, v in self.prefixes.items() if k}
        self.aliases = {k.lower(): v for k, v in self.aliases.items() if k}

    @classmethod
    def from_row(cls, row: Dict[str, Any]) -> "GuildSettings":
        return cls(
            guild_id=str(row["id"]),
            prefixes=_load_json_map(row.get("prefixes")),
            aliases=_load_json_map(row.get("aliases")),
        )

    def to_row(self) -> Dict[str, Any]:
        return {
            "id": self.guild_id,
            "prefixes": json.dumps(self.prefixes),
            "aliases": json.dumps(self.aliases),
        }


class GuildRepository(BaseRepository):
    """Repository for the guilds table, with a short-lived read cache."""

    def __init__(self, pool: Optional[asyncpg.Pool], cache_ttl: float = 300.0):
        """
        Create GuildRepository instance.

        Args:
            pool: PostgreSQL connection pool
            cache_ttl: Seconds a fetched guild is served from memory
        """
        super().__init__(pool, "guilds", "id")
        self.cache_ttl = cache_ttl
        self._cache: Dict[str, Tuple[float, Optional[GuildSettings]]] = {}

    async def fetch_guild(self, guild_id: str) -> Optional[GuildSettings]:
        """
        Get the settings of a guild.

        Args:
            guild_id: Guild ID

        Returns:
            Guild settings, or None if the guild has none stored
        """
        if not self.is_connected():
            return None

        now = time.monotonic()
        cached = self._cache.get(guild_id)
        if cached and cached[0] > now:
            return cached[1]

        self._evict_expired(now)

        row = await self.find_by_id(guild_id)
        settings = GuildSettings.from_row(row) if row else None

        self._cache[guild_id] = (now + self.cache_ttl, settings)
        return settings

    async def save(self, settings: GuildSettings) -> Optional[GuildSettings]:
        """
        Store the settings of a guild.

        Args:
            settings: Guild settings

        Returns:
            The stored settings, or None if the database is disabled
        """
        if not self.is_connected():
            self.logger.warning("Database not connected, guild settings not saved")
            return None

        row = await self.upsert(settings.to_row(), ["id"])
        self.invalidate(settings.guild_id)
        return GuildSettings.from_row(row) if row else None

    def _evict_expired(self, now: float) -> None:
        expired = [key for key, (expires, _) in self._cache.items() if expires <= now]
        for key in expired:
            del self._cache[key]

    def invalidate(self, guild_id: Optional[str] = None) -> None:
        """Drop one guild, or every guild, from the cache."""
        if guild_id is None:
            self._cache.clear()
        else:
            self._cache.pop(guild_id, None)
