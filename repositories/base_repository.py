"""
Base Repository
Generic repository pattern for database operations
"""

from abc import ABC
from typing import Any, Dict, List, Optional

import asyncpg

from utils.logger import get_logger


class BaseRepository(ABC):
    """
    Base repository class for database operations.

    This is an abstract base class - do not instantiate directly.
    Subclasses should provide table_name and primary_key.
    """

    def __init__(
        self,
        pool: Optional[asyncpg.Pool],
        table_name: str,
        primary_key: str = "id"
    ):
        """
        Create a new repository instance.

        Args:
            pool: PostgreSQL connection pool, None when the database is disabled
            table_name: Database table name
            primary_key: Primary key column name
        """
        if self.__class__ == BaseRepository:
            raise TypeError("Cannot instantiate abstract BaseRepository directly")

        self.pool = pool
        self.table_name = table_name
        self.primary_key = primary_key
        self.logger = get_logger(self.__class__.__name__)

    def is_connected(self) -> bool:
        """Check if database is connected."""
        return self.pool is not None

    async def query(
        self,
        sql: str,
        params: Optional[List[Any]] = None
    ) -> Optional[asyncpg.Record]:
        """
        Execute a query returning a single row.

        Args:
            sql: SQL query string
            params: Query parameters

        Returns:
            First row, or None when there is none or the database is disabled
        """
        if not self.is_connected():
            self.logger.warning("Database not connected, query skipped")
            return None

        try:
            async with self.pool.acquire() as conn:
                return await conn.fetchrow(sql, *(params or []))
        except Exception as e:
            self.logger.error(f"Query failed: {e}")
            raise

    async def find_by_id(self, id: Any) -> Optional[Dict[str, Any]]:
        """
        Find a single record by primary key.

        Args:
            id: Primary key value

        Returns:
            Record as dict or None
        """
        sql = f"""
            SELECT * FROM {self.table_name}
            WHERE {self.primary_key} = $1
        """
        row = await self.query(sql, [id])
        return dict(row) if row else None

    async def upsert(
        self,
        data: Dict[str, Any],
        conflict_columns: List[str]
    ) -> Optional[Dict[str, Any]]:
        """
        Insert a record, or update it when the conflict columns match.

        Args:
            data: Record data (must include the conflict columns)
            conflict_columns: Columns for conflict resolution

        Returns:
            Upserted record as dict or None
        """
        keys = list(data.keys())
        values = list(data.values())
        placeholders = ", ".join(f"${i + 1}" for i in range(len(values)))

        update_columns = [f"{k} = EXCLUDED.{k}" for k in keys if k not in conflict_columns]
        update_columns.append("updated_at = CURRENT_TIMESTAMP")

        sql = f"""
            INSERT INTO {self.table_name} ({', '.join(keys)})
            VALUES ({placeholders})
            ON CONFLICT ({', '.join(conflict_columns)})
            DO UPDATE SET {', '.join(update_columns)}
            RETURNING *
        """

        row = await self.query(sql, values)
        return dict(row) if row else None
