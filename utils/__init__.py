"""
Utility modules for the command router.
"""

from .logger import get_logger, set_default_level, setup_logging
from .discord import DiscordUtils
from .validation import ValidationUtils

__all__ = [
    "get_logger",
    "set_default_level",
    "setup_logging",
    "DiscordUtils",
    "ValidationUtils",
]
