"""
Configuration management for the command router.
Loads environment variables and provides configuration settings.
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Tuple

from dotenv import load_dotenv

# Load environment variables from .env file
env_path = Path(__file__).parent.parent / ".env"
load_dotenv(dotenv_path=env_path)


def _split_modules(value: str) -> Tuple[str, ...]:
    return tuple(part.strip() for part in value.split(",") if part.strip())


@dataclass(frozen=True)
class Config:
    """Bot configuration settings."""

    # Discord
    DISCORD_TOKEN: str

    # Database
    DATABASE_URL: str = ""

    # Keep-alive web server
    PORT: int = 11186
    HOST: str = "0.0.0.0"
    KEEP_ALIVE: bool = True

    # Commands
    COMMAND_MODULES: Tuple[str, ...] = ()
    GUILD_CACHE_TTL: float = 300.0

    # Debug
    DEBUG: bool = False

    @classmethod
    def from_env(cls) -> "Config":
        """Load configuration from environment variables."""
        return cls(
            DISCORD_TOKEN=os.getenv("DISCORD_TOKEN", ""),
            DATABASE_URL=os.getenv("DATABASE_URL", ""),
            PORT=int(os.getenv("PORT", "11186")),
            HOST=os.getenv("HOST", "0.0.0.0"),
            KEEP_ALIVE=os.getenv("KEEP_ALIVE", "true").lower() == "true",
            COMMAND_MODULES=_split_modules(os.getenv("COMMAND_MODULES", "")),
            GUILD_CACHE_TTL=float(os.getenv("GUILD_CACHE_TTL", "300")),
            DEBUG=os.getenv("DEBUG", "false").lower() == "true",
        )

    def validate(self) -> None:
        """Validate required configuration."""
        if not self.DISCORD_TOKEN:
            raise ValueError("DISCORD_TOKEN is required")
        if self.GUILD_CACHE_TTL < 0:
            raise ValueError("GUILD_CACHE_TTL must not be negative")


# Global config instance
config = Config.from_env()
