"""JSON output renderers.

Renders a `SearchResult` into JSON-serializable objects and provides the
JsonFileWriter that saves all results of a command into one file.
"""

from __future__ import annotations

import json
from datetime import datetime
from pathlib import Path

from LawSearch.core.models import MatchRecord, SearchResult
from LawSearch.renderers.base import OutputWriter
from LawSearch.utils.log import log


def render_record(record: MatchRecord) -> dict:
    return {
        "title": record.title,
        "url": record.url,
        "hash": record.content_hash,
        "size": record.byte_size,
        "snippets": list(record.snippets),
        "strict": record.matched_strict,
    }


def render_json(result: SearchResult) -> dict:
    """Render a search result into a JSON-serializable mapping.

    Args:
        result: Search result.

    Returns:
        ``{query, mode, needles, textbooks, laws, rules, stats}``.
    """
    return {
        "query": result.query,
        "mode": result.mode,
        "needles": list(result.needles),
        "textbooks": [render_record(r) for r in result.textbooks],
        "laws": [render_record(r) for r in result.laws],
        "rules": [render_record(r) for r in result.rules],
        "stats": {
            "docs": result.stats.documents_scanned,
            "bytes": result.stats.bytes_scanned,
            "hits": result.stats.hit_count,
        },
    }


class JsonFileWriter(OutputWriter):
    """Accumulate results and write them to a timestamped JSON file."""

    def __init__(self, base_dir: str) -> None:
        self.output_dir = Path(base_dir)
        self.results: list[dict] = []

    def write_result(self, result: SearchResult) -> None:
        self.results.append(render_json(result))

    def finalize(self, action: str) -> Path | None:
        """Write accumulated results to ``<base_dir>/<action>_<timestamp>.json``.

        Returns:
            Path of the written file, or None when nothing was collected.
        """
        if not self.results:
            return None
        self.output_dir.mkdir(parents=True, exist_ok=True)
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        output_path = self.output_dir / f"{action}_{timestamp}.json"
        payload = self.results[0] if len(self.results) == 1 else self.results
        output_path.write_text(json.dumps(payload, ensure_ascii=False, indent=2), encoding="utf-8")
        log.info("JSON saved to %s", output_path)
        return output_path
