from __future__ import annotations

import sqlite3


class Database:
    """SQLite connection wrapper; WAL mode so several processes can share a cache file."""

    def __init__(self, path: str = ":memory:") -> None:
        self._path = path
        self._conn: sqlite3.Connection | None = None

    @property
    def path(self) -> str:
        return self._path

    @property
    def is_connected(self) -> bool:
        return self._conn is not None

    def connect(self) -> None:
        """Open connection and enable WAL mode."""
        self._conn = sqlite3.connect(self._path)
        self._conn.row_factory = sqlite3.Row
        self._conn.execute("PRAGMA journal_mode=WAL")

    def close(self) -> None:
        """Close the database connection."""
        if self._conn:
            self._conn.close()
            self._conn = None

    def execute(self, sql: str, params: tuple = ()) -> sqlite3.Cursor:
        """Execute a single SQL statement."""
        assert self._conn is not None, "Database not connected"
        return self._conn.execute(sql, params)

    def fetch_one(self, sql: str, params: tuple = ()) -> sqlite3.Row | None:
        """Execute a query and return the first row, or None."""
        cursor = self.execute(sql, params)
        return cursor.fetchone()

    def commit(self) -> None:
        """Commit the current transaction."""
        assert self._conn is not None, "Database not connected"
        self._conn.commit()
