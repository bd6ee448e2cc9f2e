"""
Command Exceptions
Configuration errors raised while building the command registry
"""


class ConfigurationError(Exception):
    """A command or category was configured incorrectly.

    These are startup errors: the bot should refuse to start rather than
    recover from them.
    """


class DuplicateCommandPrefixError(ConfigurationError):
    """Two commands share the same prefix + trigger combination."""

    def __init__(self, prefix: str, command_name: str, conflicting_name: str):
        self.prefix = prefix
        self.command_name = command_name
        self.conflicting_name = conflicting_name
        super().__init__(
            f"The {prefix} command trigger used by {command_name} "
            f"is already registered by {conflicting_name}"
        )
