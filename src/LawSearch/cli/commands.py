"""Command implementations for LawSearch CLI.

Encapsulates business logic for commands, separated from CLI parameter
handling and output formatting.
"""

from __future__ import annotations

from dataclasses import dataclass

from LawSearch.core.models import SearchResult
from LawSearch.renderers import OutputWriter
from LawSearch.services.search import FullTextSearchService
from LawSearch.storage.settings import PreferenceStore
from LawSearch.utils.log import log


@dataclass(slots=True)
class SearchCommand:
    """Run one query in the selected mode and hand the result to the writer.

    When ``fulltext`` is None the stored preference decides the mode.
    """

    search_service: FullTextSearchService
    preferences: PreferenceStore
    output_writer: OutputWriter
    fulltext: bool | None = None

    def execute(self, query: str) -> SearchResult:
        fulltext = self.fulltext
        if fulltext is None:
            fulltext = self.preferences.get_fulltext_mode()
        log.info("query=%r mode=%s", query, "fulltext" if fulltext else "simple")

        result = self.search_service.search(query, fulltext=fulltext)
        self.output_writer.write_result(result)
        return result


@dataclass(slots=True)
class ModeCommand:
    """Show or change the stored full-text preference."""

    preferences: PreferenceStore

    def execute(self, value: str | None) -> bool:
        """Apply ``value`` (``on``/``off``) if given and return the current flag."""
        if value is not None:
            self.preferences.set_fulltext_mode(value.lower() == "on")
        enabled = self.preferences.get_fulltext_mode()
        log.info("Full-text mode: %s", "on" if enabled else "off")
        return enabled
