"""
Command Loader
Imports command modules and lets them register into the registry
"""

import importlib
from typing import Iterable, List

from commands.command_registry import CommandRegistry
from commands.exceptions import ConfigurationError
from utils.logger import get_logger

logger = get_logger("CommandLoader")


def load_command_module(registry: CommandRegistry, module_path: str) -> None:
    """
    Import a command module and call its setup(registry) function.

    Args:
        registry: Registry the module registers its commands into
        module_path: Dotted module path

    Raises:
        ConfigurationError: The module cannot be imported or has no setup()
    """
    try:
        module = importlib.import_module(module_path)
    except ImportError as e:
        raise ConfigurationError(f"Failed to import command module {module_path}: {e}") from e

    setup = getattr(module, "setup", None)
    if not callable(setup):
        raise ConfigurationError(f"Command module {module_path} has no setup(registry) function")

    before = len(registry)
    setup(registry)
    logger.info(f"Loaded {module_path} ({len(registry) - before} commands)")


def load_command_modules(registry: CommandRegistry, module_paths: Iterable[str]) -> List[str]:
    """
    Load several command modules in order.

    Args:
        registry: Registry to register into
        module_paths: Dotted module paths

    Returns:
        The module paths that were loaded
    """
    loaded = []
    for module_path in module_paths:
        module_path = module_path.strip()
        if not module_path:
            continue
        load_command_module(registry, module_path)
        loaded.append(module_path)

    logger.info(f"Registered {len(registry)} commands from {len(loaded)} modules")
    return loaded
