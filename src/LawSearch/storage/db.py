"""SQLite connection handling for the settings database."""

from __future__ import annotations

import sqlite3
from pathlib import Path

SCHEMA_SQL = """
CREATE TABLE IF NOT EXISTS settings (
  key TEXT PRIMARY KEY,
  value TEXT NOT NULL,
  updated_at INTEGER NOT NULL DEFAULT (CAST(strftime('%s','now') AS INTEGER))
);
"""


class DatabaseManager:
    """Own one connection to the settings database.

    The database file and its parent directories are created on first use.
    Use as a context manager so the connection is closed after a command.
    """

    def __init__(self, db_path: Path) -> None:
        self.db_path = db_path
        db_path.parent.mkdir(parents=True, exist_ok=True)
        self.conn: sqlite3.Connection | None = sqlite3.connect(str(db_path))
        init_schema(self.conn)

    def get_connection(self) -> sqlite3.Connection:
        """Return the open connection.

        Raises:
            RuntimeError: If the manager was already closed.
        """
        if self.conn is None:
            raise RuntimeError(f"Database already closed: {self.db_path}")
        return self.conn

    def close(self) -> None:
        if self.conn is None:
            return
        self.conn.close()
        self.conn = None

    def __enter__(self) -> DatabaseManager:
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()


def init_schema(conn: sqlite3.Connection) -> None:
    """Create the key-value ``settings`` table if it does not exist."""
    conn.executescript(SCHEMA_SQL)
    conn.commit()
