"""Settings persistence.

LawSearch keeps no search history; the only persisted state is the user's
full-text mode preference in a small SQLite database.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from LawSearch.storage.db import DatabaseManager
from LawSearch.storage.settings import FULLTEXT_MODE_KEY, PreferenceStore
from LawSearch.utils.log import log

if TYPE_CHECKING:
    from LawSearch.config import AppConfig


def create_storage(config: AppConfig) -> tuple[DatabaseManager, PreferenceStore]:
    """Open the settings database named by ``storage.db_path``.

    The caller owns the returned manager and must close it (it is a
    context manager).
    """
    db_manager = DatabaseManager(config.storage.path)
    log.debug("Settings database: %s", db_manager.db_path)
    return db_manager, PreferenceStore(db_manager.get_connection())


__all__ = ["DatabaseManager", "FULLTEXT_MODE_KEY", "PreferenceStore", "create_storage"]
