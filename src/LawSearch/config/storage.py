"""Location of the settings database (the ``storage`` section)."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping

from LawSearch.config.common import check_non_empty, expect_str, get_optional_value, get_section

DEFAULT_DB_PATH = "database/settings.db"


@dataclass(frozen=True, slots=True)
class StorageConfig:
    db_path: str

    @property
    def path(self) -> Path:
        """Database path with ``~`` expanded; relative paths stay relative to the CWD."""
        return Path(self.db_path).expanduser()


def load_storage(raw: Mapping[str, Any]) -> StorageConfig:
    section = get_section(raw, "storage", required=False)
    db_path = expect_str(get_optional_value(section, "db_path", DEFAULT_DB_PATH), "storage.db_path")
    return StorageConfig(db_path=db_path.strip())


def check_storage(config: StorageConfig) -> None:
    check_non_empty(config.db_path, "storage.db_path")
    if config.db_path.endswith(("/", "\\")):
        raise ValueError("storage.db_path must name a file, not a directory")
