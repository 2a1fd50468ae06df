"""Persisted user preferences.

Only one preference exists: whether searches run in full-text mode (the
boolean engine) or use the simple AND-only search.
"""

from __future__ import annotations

import sqlite3

from LawSearch.utils.log import log

FULLTEXT_MODE_KEY = "FULLTEXT_MODE"


class PreferenceStore:
    """Key-value preference store backed by the ``settings`` table."""

    def __init__(self, conn: sqlite3.Connection) -> None:
        self.conn = conn

    def get(self, key: str) -> str | None:
        row = self.conn.execute("SELECT value FROM settings WHERE key = ?", (key,)).fetchone()
        return row[0] if row else None

    def set(self, key: str, value: str) -> None:
        self.conn.execute(
            """
            INSERT INTO settings (key, value) VALUES (?, ?)
            ON CONFLICT(key) DO UPDATE SET
              value = excluded.value,
              updated_at = CAST(strftime('%s','now') AS INTEGER)
            """,
            (key, value),
        )
        self.conn.commit()

    def get_fulltext_mode(self) -> bool:
        """Return the stored full-text flag; unset means off."""
        return self.get(FULLTEXT_MODE_KEY) == "1"

    def set_fulltext_mode(self, enabled: bool) -> None:
        """Persist the full-text flag as ``"1"``/``"0"``."""
        self.set(FULLTEXT_MODE_KEY, "1" if enabled else "0")
        log.info("Full-text mode %s", "enabled" if enabled else "disabled")
