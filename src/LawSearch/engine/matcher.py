"""Per-document matching.

Each candidate document is fetched, normalized and tested against the
strict predicate, then, when that fails, against the relaxed OR-of-terms
predicate. The fallback is decided per document: a document that fails the
strict test is still included if any positive term or phrase occurs in it.

Documents are processed by a small thread pool; outcomes are reduced in
candidate order, so records and statistics do not depend on scheduling.
"""

from __future__ import annotations

import hashlib
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import Protocol, Sequence

from LawSearch.core.models import CandidateDocument, MatchRecord, SearchStats
from LawSearch.core.query import CompiledQuery
from LawSearch.core.tokens import normalize_text
from LawSearch.engine.snippets import DEFAULT_MAX_SNIPPETS, DEFAULT_WINDOW, extract_snippets
from LawSearch.utils.log import log

DEFAULT_MAX_DOCUMENTS = 9999
DEFAULT_MAX_WORKERS = 4


class TextFetcher(Protocol):
    """Protocol for the text-retrieval capability."""

    def fetch_text(self, url: str) -> str:
        """Return the full text at ``url`` or raise."""
        raise NotImplementedError


def content_hash(text: str) -> str:
    """Return the SHA-256 hex digest of ``text`` encoded as UTF-8."""
    return hashlib.sha256(text.encode("utf-8")).hexdigest()


@dataclass(frozen=True, slots=True)
class _Outcome:
    byte_size: int
    record: MatchRecord | None


@dataclass(slots=True)
class DocumentMatcher:
    """Scan candidate documents and build match records.

    Attributes:
        fetcher: Text retrieval capability.
        max_documents: Cap on candidates scanned per search.
        max_workers: Concurrent retrievals; 1 scans sequentially.
        relaxed_fallback: Whether a failed strict test falls back to the
            relaxed predicate.
        window: Snippet window width in characters.
        max_snippets: Snippets per record.
    """

    fetcher: TextFetcher
    max_documents: int = DEFAULT_MAX_DOCUMENTS
    max_workers: int = DEFAULT_MAX_WORKERS
    relaxed_fallback: bool = True
    window: int = DEFAULT_WINDOW
    max_snippets: int = DEFAULT_MAX_SNIPPETS

    def match(
        self,
        query: CompiledQuery,
        documents: Sequence[CandidateDocument],
    ) -> tuple[list[MatchRecord], SearchStats]:
        """Match ``documents`` against ``query``.

        Args:
            query: Compiled query.
            documents: Candidates in catalog order.

        Returns:
            Match records in candidate order, and the search statistics.
        """
        candidates = list(documents[: self.max_documents])
        if len(documents) > len(candidates):
            log.warning("Candidate cap reached: scanning %d of %d documents", len(candidates), len(documents))

        def run(doc: CandidateDocument) -> _Outcome | None:
            return self._process(query, doc)

        if self.max_workers <= 1 or len(candidates) <= 1:
            outcomes = [run(doc) for doc in candidates]
        else:
            with ThreadPoolExecutor(max_workers=self.max_workers) as executor:
                outcomes = list(executor.map(run, candidates))

        records: list[MatchRecord] = []
        scanned = 0
        scanned_bytes = 0
        for outcome in outcomes:
            if outcome is None:
                continue
            scanned += 1
            scanned_bytes += outcome.byte_size
            if outcome.record is not None:
                records.append(outcome.record)

        stats = SearchStats(documents_scanned=scanned, bytes_scanned=scanned_bytes, hit_count=len(records))
        return records, stats

    def _process(self, query: CompiledQuery, doc: CandidateDocument) -> _Outcome | None:
        """Fetch and test one document.

        Returns:
            None when the document could not be retrieved (it then counts
            for nothing), otherwise its size and optional record.
        """
        try:
            text = self.fetcher.fetch_text(doc.url)
            byte_size = len(text.encode("utf-8"))
        except Exception as error:  # noqa: BLE001 - unavailable documents are skipped
            log.debug("Document unavailable, skipped: url=%s error=%s", doc.url, error)
            return None

        try:
            record = self._evaluate(query, doc, text, byte_size)
        except Exception as error:  # noqa: BLE001 - isolate per-document failures
            log.warning("Document processing failed: url=%s error=%s", doc.url, error)
            record = None
        return _Outcome(byte_size=byte_size, record=record)

    def _evaluate(
        self,
        query: CompiledQuery,
        doc: CandidateDocument,
        text: str,
        byte_size: int,
    ) -> MatchRecord | None:
        normalized = normalize_text(text)
        strict = query.strict(normalized)
        if not strict:
            if not self.relaxed_fallback or not query.relaxed(normalized):
                return None
            log.debug("Relaxed match: title=%s", doc.title)

        return MatchRecord(
            kind=doc.kind,
            title=doc.title,
            url=doc.url,
            content_hash=content_hash(text),
            byte_size=byte_size,
            snippets=tuple(
                extract_snippets(normalized, query.needles, window=self.window, max_snippets=self.max_snippets)
            ),
            matched_strict=strict,
        )
