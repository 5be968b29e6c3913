"""Key-value engines backing KeyValueStorage.

- SqliteKeyValueEngine: persistent, one SQLite file (aiosqlite)
- SessionKeyValueEngine: process lifetime, plain dict
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from pathlib import Path
from typing import ClassVar

import aiosqlite
from loguru import logger

from objectgraph.errors import StorageError


class SqliteKeyValueEngine:
    """
    Persistent key-value engine stored in a SQLite table.

    A connection is opened per operation, so the engine holds no
    open handles between calls. The table is created on first use.
    """

    def __init__(self, db_path: Path | str, table: str = "objectgraph_kv") -> None:
        """
        Initialize SqliteKeyValueEngine.

        Args:
            db_path: Path to SQLite database file.
            table: Table holding the key/value rows.
        """
        if not table.isidentifier():
            raise ValueError(f"Invalid table name: {table!r}")
        self.db_path = Path(db_path)
        self.table = table

    @asynccontextmanager
    async def _connection(self) -> AsyncIterator[aiosqlite.Connection]:
        """Open a connection, ensure the table exists and commit on success."""
        try:
            # Ensure parent directory exists
            self.db_path.parent.mkdir(parents=True, exist_ok=True)
            async with aiosqlite.connect(self.db_path) as conn:
                # Create table on first use
                await conn.execute(
                    f"""
                    CREATE TABLE IF NOT EXISTS {self.table} (
                        key TEXT PRIMARY KEY,
                        value TEXT NOT NULL
                    )
                    """
                )
                yield conn
                # Only reached when the caller did not raise
                await conn.commit()
        except (aiosqlite.Error, OSError) as e:
            raise StorageError(f"Key-value engine at {self.db_path} failed: {e}") from e

    async def get_item(self, key: str) -> str | None:
        """Return the value stored under key, or None."""
        async with self._connection() as conn:
            cursor = await conn.execute(f"SELECT value FROM {self.table} WHERE key = ?", [key])
            row = await cursor.fetchone()
        return row[0] if row else None

    async def set_item(self, key: str, value: str) -> None:
        """Store value under key, replacing any previous value."""
        async with self._connection() as conn:
            await conn.execute(
                f"""
                INSERT INTO {self.table} (key, value) VALUES (?, ?)
                ON CONFLICT(key) DO UPDATE SET value = excluded.value
                """,
                [key, value],
            )
        logger.debug("Stored {} chars under {!r} in {}", len(value), key, self.db_path)

    async def remove_item(self, key: str) -> None:
        """Remove key if present."""
        async with self._connection() as conn:
            await conn.execute(f"DELETE FROM {self.table} WHERE key = ?", [key])


class SessionKeyValueEngine:
    """
    Key-value engine that lives for the lifetime of the process.

    shared() returns a single per-process instance, so independent
    storages using the same key see each other's data.
    """

    _shared: ClassVar["SessionKeyValueEngine | None"] = None

    def __init__(self) -> None:
        self._items: dict[str, str] = {}

    @classmethod
    def shared(cls) -> "SessionKeyValueEngine":
        """Return the per-process session engine."""
        if cls._shared is None:
            cls._shared = cls()
        return cls._shared

    async def get_item(self, key: str) -> str | None:
        """Return the value stored under key, or None."""
        return self._items.get(key)

    async def set_item(self, key: str, value: str) -> None:
        """Store value under key, replacing any previous value."""
        self._items[key] = value

    async def remove_item(self, key: str) -> None:
        """Remove key if present."""
        self._items.pop(key, None)

    def __len__(self) -> int:
        return len(self._items)
