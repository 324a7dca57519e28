"""Key-value stores backing the optimization history and usage counter."""

import aiosqlite
import logging
from typing import Optional, Protocol

from prompt_optimizer.config import HISTORY_DB_PATH

logger = logging.getLogger(__name__)

CREATE_TABLE_SQL = """
CREATE TABLE IF NOT EXISTS kv_store (
    key TEXT PRIMARY KEY,
    value TEXT NOT NULL,
    updated_at TEXT NOT NULL DEFAULT (datetime('now'))
);
"""


class KeyValueStore(Protocol):
    """Anything with async get/set over string keys and values."""

    async def get(self, key: str) -> Optional[str]:
        ...

    async def set(self, key: str, value: str) -> None:
        ...


class SqliteKeyValueStore:
    """SQLite-backed store; one row per key."""

    def __init__(self, db_path: str = HISTORY_DB_PATH):
        self.db_path = db_path

    async def initialize(self) -> None:
        """Create the table if it does not exist."""
        async with aiosqlite.connect(self.db_path) as db:
            await db.execute(CREATE_TABLE_SQL)
            await db.commit()
        logger.info("Key-value store initialized at %s", self.db_path)

    async def get(self, key: str) -> Optional[str]:
        async with aiosqlite.connect(self.db_path) as db:
            cursor = await db.execute(
                "SELECT value FROM kv_store WHERE key = ?",
                (key,),
            )
            row = await cursor.fetchone()
            return row[0] if row else None

    async def set(self, key: str, value: str) -> None:
        async with aiosqlite.connect(self.db_path) as db:
            await db.execute(
                """INSERT INTO kv_store (key, value, updated_at)
                VALUES (?, ?, datetime('now'))
                ON CONFLICT(key) DO UPDATE SET
                    value = excluded.value,
                    updated_at = excluded.updated_at""",
                (key, value),
            )
            await db.commit()
        logger.debug("Stored key=%s (%d chars)", key, len(value))


class MemoryKeyValueStore:
    """In-process store, used in tests and when no database is wanted."""

    def __init__(self, initial: Optional[dict[str, str]] = None):
        self._data: dict[str, str] = dict(initial or {})

    async def initialize(self) -> None:
        return None

    async def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    async def set(self, key: str, value: str) -> None:
        self._data[key] = value
