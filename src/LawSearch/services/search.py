"""Search service: catalogs in, grouped match records out."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping, Sequence

from LawSearch.core.models import CandidateDocument, DocumentKind, MatchRecord, SearchResult, SearchStats
from LawSearch.core.query import CompiledQuery
from LawSearch.core.synonyms import DEFAULT_SYNONYMS
from LawSearch.engine.matcher import DocumentMatcher
from LawSearch.engine.simple import SimpleMatcher, split_terms
from LawSearch.sources.catalog.source import CatalogAggregator
from LawSearch.sources.registry import catalog_kinds, group_for
from LawSearch.utils.log import log


def format_stats(stats: SearchStats) -> str:
    """Render statistics as a one-line summary."""
    return (
        f"Scanned — docs: {stats.documents_scanned}, "
        f"bytes: {stats.bytes_scanned:,} (≈{stats.kilobytes_scanned:.1f} KB), "
        f"matched: {stats.hit_count}"
    )


@dataclass(slots=True)
class FullTextSearchService:
    """Application service running one query over every catalog.

    Attributes:
        catalogs: Catalog aggregator supplying candidate documents.
        matcher: Boolean full-text matcher.
        simple_matcher: AND-only matcher used when full-text mode is off.
        synonyms: Normalized synonym table.
        resources: Extra objects closed with the service (HTTP clients).
    """

    catalogs: CatalogAggregator
    matcher: DocumentMatcher
    simple_matcher: SimpleMatcher
    synonyms: Mapping[str, Sequence[str]] = field(default_factory=lambda: DEFAULT_SYNONYMS)
    resources: Sequence[Any] = field(default_factory=tuple)

    def candidates(self) -> list[CandidateDocument]:
        """Load every catalog and return candidates in kind order."""
        by_kind = self.catalogs.load_all()
        documents: list[CandidateDocument] = []
        for entry in catalog_kinds():
            documents.extend(by_kind.get(entry.kind, ()))
        return documents

    def search(self, query: str, *, fulltext: bool = True) -> SearchResult:
        """Run ``query`` against the live corpus.

        Args:
            query: Raw query string.
            fulltext: Use the boolean engine; otherwise the AND-only search.

        Returns:
            Grouped match records and statistics.
        """
        documents = self.candidates()
        log.info("Scanning %d candidate documents (mode=%s)", len(documents), "fulltext" if fulltext else "simple")

        if fulltext:
            compiled = CompiledQuery.build(query, self.synonyms)
            log.debug("Query tree: %s", compiled.tree)
            records, stats = self.matcher.match(compiled, documents)
            needles: Sequence[str] = compiled.needles
        else:
            records, stats = self.simple_matcher.match(query, documents)
            needles = split_terms(query)

        log.info(format_stats(stats))
        groups = _group_records(records)
        return SearchResult(
            query=query,
            needles=tuple(needles),
            textbooks=tuple(groups["textbooks"]),
            laws=tuple(groups["laws"]),
            rules=tuple(groups["rules"]),
            stats=stats,
            mode="fulltext" if fulltext else "simple",
        )

    def close(self) -> None:
        """Close catalog and text clients, isolating close failures."""
        for resource in (self.catalogs, *self.resources):
            close_func = getattr(resource, "close", None)
            if not callable(close_func):
                continue
            try:
                close_func()
            except Exception as error:  # noqa: BLE001 - close failure must be isolated
                log.warning("Search resource close failed: resource=%s error=%s", type(resource).__name__, error)


def _group_records(records: Sequence[MatchRecord]) -> dict[str, list[MatchRecord]]:
    groups: dict[str, list[MatchRecord]] = {entry.group: [] for entry in catalog_kinds()}
    for record in records:
        groups[group_for(DocumentKind(record.kind))].append(record)
    return groups
