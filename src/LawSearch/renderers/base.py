"""Writer interface shared by the console and JSON outputs."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Sequence

from LawSearch.core.models import SearchResult


class OutputWriter(ABC):
    """Receives finished search results.

    ``write_result`` may be called several times per command; ``finalize``
    is called once at the end and may return whatever it produced (a file
    path for file writers).
    """

    @abstractmethod
    def write_result(self, result: SearchResult) -> None:
        """Accept the grouped records and statistics of one search."""

    @abstractmethod
    def finalize(self, action: str) -> Any:
        """Flush collected output for the CLI command ``action``."""


@dataclass(slots=True)
class MultiOutputWriter(OutputWriter):
    """Fan results out to several writers in configuration order."""

    writers: Sequence[OutputWriter]

    def write_result(self, result: SearchResult) -> None:
        for writer in self.writers:
            writer.write_result(result)

    def finalize(self, action: str) -> list[Any]:
        """Finalize every writer; returns their results, ``None`` entries dropped."""
        produced = [writer.finalize(action) for writer in self.writers]
        return [item for item in produced if item is not None]
