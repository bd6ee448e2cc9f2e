"""
Database connection management using asyncpg.
"""

from typing import Optional

import asyncpg

from utils.logger import get_logger

logger = get_logger("Database")

_pool: Optional[asyncpg.Pool] = None


async def init_database(database_url: str) -> Optional[asyncpg.Pool]:
    """
    Initialize database connection pool.

    Args:
        database_url: PostgreSQL connection string, empty to disable the database

    Returns:
        The pool, or None when the database is disabled
    """
    global _pool

    if not database_url:
        logger.warning("DATABASE_URL not set - guild prefixes and aliases disabled")
        return None

    try:
        _pool = await asyncpg.create_pool(
            database_url,
            min_size=1,
            max_size=10,
            command_timeout=60,
        )
        logger.info("Database connected successfully")
        await _init_tables()
    except Exception as e:
        logger.error(f"Failed to connect to database: {e}")
        raise

    return _pool


async def _init_tables() -> None:
    """Initialize database tables if they don't exist."""
    if not _pool:
        return

    async with _pool.acquire() as conn:
        await conn.execute("""
            CREATE TABLE IF NOT EXISTS guilds (
                id VARCHAR(255) PRIMARY KEY,
                prefixes TEXT NOT NULL DEFAULT '{}',
                aliases TEXT NOT NULL DEFAULT '{}',
                created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
                updated_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
            )
        """)

        logger.info("Database tables initialized")


async def close_database() -> None:
    """Close database connection pool."""
    global _pool

    if _pool:
        await _pool.close()
        _pool = None
        logger.info("Database connection closed")


def is_connected() -> bool:
    """Check if database is connected."""
    return _pool is not None

