"""Simple AND-only search.

The search used when full-text mode is off: the query is split into plain
terms, every term must occur in the document, and snippets are taken around
occurrences of the first term whose window contains all terms. There are no
phrases, operators or synonyms.
"""

from __future__ import annotations

import re
import unicodedata
from dataclasses import dataclass
from typing import Sequence

from LawSearch.core.models import CandidateDocument, MatchRecord, SearchStats
from LawSearch.engine.matcher import DEFAULT_MAX_DOCUMENTS, TextFetcher, content_hash
from LawSearch.utils.log import log

SNIPPET_BEFORE = 140
SNIPPET_AFTER = 300
MAX_SNIPPETS = 3

_SPLIT_RE = re.compile(r"[+\s]+")
_QUOTES_RE = re.compile(r"[“”‘’]")
_PUNCT_RE = re.compile(r"[^\w\s\-]")
_WS_RE = re.compile(r"\s+")


def split_terms(query: str) -> list[str]:
    """Split a query on whitespace and ``+`` into lower-cased terms."""
    return [t for t in _SPLIT_RE.split(query.lower()) if t]


def normalize_plain(text: str) -> str:
    """Lower-case, NFKD-decompose and blank out punctuation."""
    folded = unicodedata.normalize("NFKD", text.lower())
    folded = _QUOTES_RE.sub('"', folded)
    return _PUNCT_RE.sub(" ", folded)


def simple_snippets(text: str, terms: Sequence[str], max_snippets: int = MAX_SNIPPETS) -> list[str]:
    """Collect windows around the first term that contain every term.

    Args:
        text: Raw document text.
        terms: Lower-cased query terms; the first one anchors the windows.
        max_snippets: Maximum number of windows.

    Returns:
        Ellipsized, whitespace-collapsed windows.
    """
    if not terms or not terms[0]:
        return []
    lowered = text.lower()
    anchor = terms[0]
    out: list[str] = []
    cursor = 0
    while len(out) < max_snippets:
        idx = lowered.find(anchor, cursor)
        if idx < 0:
            break
        start = max(0, idx - SNIPPET_BEFORE)
        end = min(len(text), idx + SNIPPET_AFTER)
        if all(t in lowered[start:end] for t in terms):
            out.append("…" + _WS_RE.sub(" ", text[start:end]).strip() + "…")
        cursor = idx + len(anchor)
    return out


@dataclass(slots=True)
class SimpleMatcher:
    """Sequential AND-only matcher producing the same records as the engine."""

    fetcher: TextFetcher
    max_documents: int = DEFAULT_MAX_DOCUMENTS

    def match(
        self,
        query: str,
        documents: Sequence[CandidateDocument],
    ) -> tuple[list[MatchRecord], SearchStats]:
        """Match ``documents`` requiring every query term.

        An empty query matches nothing and fetches nothing.

        Args:
            query: Raw query string.
            documents: Candidates in catalog order.

        Returns:
            Match records in candidate order, and the search statistics.
        """
        terms = split_terms(query)
        if not terms:
            return [], SearchStats()

        records: list[MatchRecord] = []
        scanned = 0
        scanned_bytes = 0
        for doc in documents[: self.max_documents]:
            try:
                text = self.fetcher.fetch_text(doc.url)
            except Exception as error:  # noqa: BLE001 - unavailable documents are skipped
                log.warning("Fetch failed: %s (%s): %s", doc.title, doc.url, error)
                continue

            scanned += 1
            size = len(text.encode("utf-8"))
            scanned_bytes += size
            normalized = normalize_plain(text)
            if not all(t in normalized for t in terms):
                continue
            records.append(
                MatchRecord(
                    kind=doc.kind,
                    title=doc.title,
                    url=doc.url,
                    content_hash=content_hash(text),
                    byte_size=size,
                    snippets=tuple(simple_snippets(text, terms)),
                )
            )

        return records, SearchStats(documents_scanned=scanned, bytes_scanned=scanned_bytes, hit_count=len(records))
