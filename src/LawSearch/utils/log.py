"""LawSearch logging utilities.

All modules log through the single ``LawSearch`` logger. Records are
prefixed with a short timestamp and a four-letter level tag.
"""

from __future__ import annotations

import logging
from datetime import datetime
from pathlib import Path
from typing import Final


_LEVEL_ABBREV: Final[dict[int, str]] = {
    logging.DEBUG: "DEBG",
    logging.INFO: "INFO",
    logging.WARNING: "WARN",
    logging.ERROR: "ERRO",
    logging.CRITICAL: "ERRO",
}

_LOG_FORMAT: Final[str] = "%(asctime)s [%(levelabbr)s] %(message)s"
_DATE_FORMAT: Final[str] = "%m-%d %H:%M:%S"


class _AbbrevLevelFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:  # noqa: A003 - record is stdlib name
        record.levelabbr = _LEVEL_ABBREV.get(record.levelno, record.levelname[:4])
        return super().format(record)


log = logging.getLogger("LawSearch")


def _file_handler(action: str, log_dir: str, formatter: logging.Formatter) -> logging.Handler:
    """Create a DEBUG-level file handler under ``<log_dir>/<action>/``.

    Args:
        action: CLI action name, used for the directory and file prefix.
        log_dir: Base directory for log files.
        formatter: Formatter shared with the console handler.

    Returns:
        Configured file handler.
    """
    action_dir = Path(log_dir or "log") / action
    action_dir.mkdir(parents=True, exist_ok=True)
    stamp = datetime.now().strftime("%m%d%H%M%S")
    handler = logging.FileHandler(action_dir / f"{action}_{stamp}.log", encoding="utf-8")
    handler.setLevel(logging.DEBUG)
    handler.setFormatter(formatter)
    return handler


def configure_logging(
    *,
    level: str = "INFO",
    action: str | None = None,
    log_to_file: bool = False,
    log_dir: str = "log",
) -> None:
    """Configure the LawSearch logger.

    Uses format: mm-dd HH:MM:SS [<LVL>] <message>
    where LVL is one of: DEBG/INFO/WARN/ERRO.

    The console handler follows ``level``; the optional file handler always
    records DEBUG so skipped documents can be traced after a search.

    Args:
        level: Logging level name (e.g. INFO, DEBUG).
        action: CLI action name used to create the log file path.
        log_to_file: Whether to mirror logs to a file.
        log_dir: Base directory for log files.
    """
    resolved_level = getattr(logging, (level or "INFO").upper(), logging.INFO)
    formatter = _AbbrevLevelFormatter(fmt=_LOG_FORMAT, datefmt=_DATE_FORMAT)

    console = logging.StreamHandler()
    console.setLevel(resolved_level)
    console.setFormatter(formatter)

    log.handlers.clear()
    log.addHandler(console)
    if log_to_file and action:
        log.addHandler(_file_handler(action, log_dir, formatter))
    log.setLevel(min(logging.DEBUG, resolved_level))
    log.propagate = False
