"""Command runner for coordinating CLI execution.

Manages component lifecycle, resource cleanup, logging configuration,
and error handling for command execution.
"""

from __future__ import annotations

import click

from LawSearch.cli.commands import ModeCommand, SearchCommand
from LawSearch.config import AppConfig
from LawSearch.renderers import create_output_writer
from LawSearch.services import create_search_service
from LawSearch.storage import create_storage
from LawSearch.utils.log import configure_logging, log


class CommandRunner:
    """Orchestrates command execution with proper resource management."""

    def __init__(self, config: AppConfig) -> None:
        self.config = config

    def _configure_logging(self, action: str) -> None:
        configure_logging(
            level=self.config.runtime.level,
            action=action,
            log_to_file=self.config.runtime.to_file,
            log_dir=self.config.runtime.dir,
        )

    def run_search(self, action: str, query: str, fulltext: bool | None = None) -> None:
        """Execute one search with full resource management.

        Args:
            action: The CLI command name (e.g., 'search').
            query: Raw query string.
            fulltext: Force a mode; None uses the stored preference.

        Raises:
            click.Abort: When the search fails.
        """
        self._configure_logging(action)
        try:
            db_manager, preferences = create_storage(self.config)
            with db_manager:
                search_service = create_search_service(self.config)
                try:
                    output_writer = create_output_writer(self.config)
                    command = SearchCommand(
                        search_service=search_service,
                        preferences=preferences,
                        output_writer=output_writer,
                        fulltext=fulltext,
                    )
                    command.execute(query)
                    output_writer.finalize(action)
                finally:
                    search_service.close()
        except Exception as e:  # noqa: BLE001 - cli boundary
            log.error("Search failed: %s", e)
            raise click.Abort from e

    def run_mode(self, action: str, value: str | None) -> bool:
        """Show or set the full-text preference.

        Raises:
            click.Abort: When the settings store cannot be used.
        """
        self._configure_logging(action)
        try:
            db_manager, preferences = create_storage(self.config)
            with db_manager:
                return ModeCommand(preferences).execute(value)
        except Exception as e:  # noqa: BLE001 - cli boundary
            log.error("Mode update failed: %s", e)
            raise click.Abort from e
