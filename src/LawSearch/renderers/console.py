"""Console text output renderers.

Renders a `SearchResult` into human-friendly text, one group per catalog.
"""

from __future__ import annotations

from LawSearch.core.models import MatchRecord, SearchResult
from LawSearch.engine.snippets import highlight
from LawSearch.renderers.base import OutputWriter
from LawSearch.services.search import format_stats
from LawSearch.utils.log import log

HASH_PREFIX_LEN = 12


def _render_record(idx: int, record: MatchRecord, needles: tuple[str, ...]) -> list[str]:
    lines = [f"{idx}. {record.title}"]
    lines.append(f"   TXT: {record.url}")
    tag = "" if record.matched_strict else "  (relaxed match)"
    lines.append(f"   size: {record.byte_size:,} bytes  sha256: {record.content_hash[:HASH_PREFIX_LEN]}…{tag}")
    for snippet in record.snippets:
        lines.append(f"   > {highlight(snippet, needles)}")
    return lines


def render_text(result: SearchResult) -> str:
    """Render a search result into a text block.

    Needle occurrences inside snippets are wrapped in ``[[...]]``.

    Args:
        result: Search result.

    Returns:
        A formatted string ready to be printed.
    """
    needles = tuple(result.needles)
    lines: list[str] = [format_stats(result.stats), ""]
    for label, records in result.groups():
        lines.append(f"== {label} ({len(records)}) ==")
        for idx, record in enumerate(records, start=1):
            lines.extend(_render_record(idx, record, needles))
            lines.append("")
    return "\n".join(lines).rstrip() + "\n"


class ConsoleOutputWriter(OutputWriter):
    """Write results to console via logging."""

    def write_result(self, result: SearchResult) -> None:
        for line in render_text(result).splitlines():
            log.info(line)

    def finalize(self, action: str) -> None:
        """No-op for console output."""
