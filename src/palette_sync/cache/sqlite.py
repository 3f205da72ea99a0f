"""SQLite-backed cache: survives restarts and can be shared between processes."""

from __future__ import annotations

import json
import sqlite3
import time
from typing import Any, Callable

from palette_sync.cache.db import Database
from palette_sync.errors import CacheUnavailable

SCHEMA = """
CREATE TABLE IF NOT EXISTS cache_entries (
    key TEXT PRIMARY KEY,
    value TEXT NOT NULL,
    expires_at REAL
);
"""


class SqliteCache:
    """Cache entries stored as JSON in a ``cache_entries`` table.

    Expired rows read as missing and are deleted on the way. Any sqlite
    failure, including a closed connection, surfaces as CacheUnavailable.
    """

    def __init__(self, db: Database, clock: Callable[[], float] = time.time) -> None:
        self._db = db
        self._clock = clock

    @classmethod
    def open(cls, path: str, clock: Callable[[], float] = time.time) -> SqliteCache:
        """Connect to *path* and create the table if needed."""
        db = Database(path)
        try:
            db.connect()
        except sqlite3.Error as e:
            raise CacheUnavailable(f"Cannot open cache database {path}: {e}", cause=e) from e
        cache = cls(db, clock=clock)
        cache.ensure_schema()
        return cache

    def ensure_schema(self) -> None:
        self._run(lambda: self._db.execute(SCHEMA))
        self._run(self._db.commit)

    def get(self, key: str) -> Any | None:
        row = self._run(
            lambda: self._db.fetch_one(
                "SELECT value, expires_at FROM cache_entries WHERE key = ?", (key,)
            )
        )
        if row is None:
            return None
        if row["expires_at"] is not None and self._clock() >= row["expires_at"]:
            self.delete(key)
            return None
        return json.loads(row["value"])

    def set(self, key: str, value: Any, ttl: float | None = None) -> None:
        expires_at = None if ttl is None else self._clock() + ttl
        self._run(
            lambda: self._db.execute(
                """INSERT INTO cache_entries (key, value, expires_at) VALUES (?, ?, ?)
                   ON CONFLICT(key) DO UPDATE SET value = excluded.value,
                                                  expires_at = excluded.expires_at""",
                (key, json.dumps(value), expires_at),
            )
        )
        self._run(self._db.commit)

    def delete(self, key: str) -> None:
        self._run(lambda: self._db.execute("DELETE FROM cache_entries WHERE key = ?", (key,)))
        self._run(self._db.commit)

    def close(self) -> None:
        self._db.close()

    def _run(self, operation: Callable[[], Any]) -> Any:
        if not self._db.is_connected:
            raise CacheUnavailable(f"Cache database {self._db.path} is not connected")
        try:
            return operation()
        except sqlite3.Error as e:
            raise CacheUnavailable(f"Cache database error: {e}", cause=e) from e
