"""Logging settings (the ``log`` section)."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from LawSearch.config.common import (
    check_non_empty,
    expect_bool,
    expect_str,
    get_optional_value,
    get_required_value,
    get_section,
)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
_LEVEL_ALIASES = {"WARN": "WARNING", "FATAL": "CRITICAL"}


@dataclass(frozen=True, slots=True)
class RuntimeConfig:
    """Logging settings.

    Attributes:
        level: Console level name, upper-case.
        to_file: Mirror every record (DEBUG and up) to a per-action file.
        dir: Base directory of the log files.
    """

    level: str
    to_file: bool
    dir: str


def load_runtime(raw: Mapping[str, Any]) -> RuntimeConfig:
    """Load the ``log`` section; ``log.level`` is the only required key."""
    section = get_section(raw, "log", required=True)
    level = expect_str(get_required_value(section, "level", "log.level"), "log.level").strip().upper()
    return RuntimeConfig(
        level=_LEVEL_ALIASES.get(level, level),
        to_file=expect_bool(get_optional_value(section, "to_file", False), "log.to_file"),
        dir=expect_str(get_optional_value(section, "dir", "log"), "log.dir"),
    )


def check_runtime(config: RuntimeConfig) -> None:
    if config.level not in LOG_LEVELS:
        raise ValueError(f"log.level must be one of {', '.join(LOG_LEVELS)}")
    check_non_empty(config.dir, "log.dir")
