"""
Shared fixtures for the command router tests.
"""

import re
import sys
from pathlib import Path
from types import SimpleNamespace
from typing import Any, Dict, List, Optional

import pytest

# Add project root to path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from commands import Category, CategoryHandler, Command, CommandPriority, CommandRegistry  # noqa: E402


async def noop_handler(context, args):
    return None


@pytest.fixture
def categories() -> CategoryHandler:
    return CategoryHandler([
        Category("Utility", "!"),
        Category("Fun", "?"),
        Category("Bare", ""),
        Category("Administration", "."),
    ])


@pytest.fixture
def registry(categories) -> CommandRegistry:
    return CommandRegistry(categories)


@pytest.fixture
def make_command():
    """Factory for commands with sensible defaults."""
    def _make(
        name: str,
        triggers: Optional[List[str]] = None,
        category: str = "Utility",
        priority: CommandPriority = CommandPriority.NORMAL,
        handler=noop_handler,
        **config: Any,
    ) -> Command:
        config.setdefault("description", f"The {name} command")
        return Command.from_config(
            {
                "name": name,
                "triggers": triggers if triggers is not None else [name],
                "category": category,
                "priority": priority,
                **config,
            },
            handler,
        )

    return _make


class FakeChannel:
    """Channel that records sent messages."""

    def __init__(self):
        self.sent: List[str] = []

    async def send(self, content: str):
        self.sent.append(content)
        return SimpleNamespace(content=content)


def make_message(
    content: str,
    guild_id: Optional[int] = 123456789012345678,
    bot: bool = False,
) -> SimpleNamespace:
    return SimpleNamespace(
        content=content,
        author=SimpleNamespace(id=1, bot=bot),
        guild=SimpleNamespace(id=guild_id) if guild_id is not None else None,
        channel=FakeChannel(),
    )


@pytest.fixture
def message_factory():
    return make_message


class FakeConnection:
    """Minimal stand-in for an asyncpg connection over the guilds table."""

    def __init__(self, rows: Dict[str, Dict[str, Any]]):
        self.rows = rows
        self.queries: List[str] = []

    async def fetchrow(self, sql: str, *params):
        self.queries.append(sql)
        if "INSERT INTO" in sql:
            columns = re.search(r"INSERT INTO \w+ \(([^)]*)\)", sql).group(1)
            row = dict(zip([c.strip() for c in columns.split(",")], params))
            self.rows[row["id"]] = row
            return row
        return self.rows.get(params[0]) if params else None


class FakeAcquire:
    def __init__(self, conn: FakeConnection):
        self.conn = conn

    async def __aenter__(self):
        return self.conn

    async def __aexit__(self, exc_type, exc, tb):
        return False


class FakePool:
    """Minimal stand-in for an asyncpg pool."""

    def __init__(self, rows: Optional[Dict[str, Dict[str, Any]]] = None):
        self.connection = FakeConnection(rows if rows is not None else {})

    def acquire(self) -> FakeAcquire:
        return FakeAcquire(self.connection)


@pytest.fixture
def fake_pool() -> FakePool:
    return FakePool()
