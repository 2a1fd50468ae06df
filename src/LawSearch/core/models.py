from __future__ import annotations

from dataclasses import dataclass
from dataclasses import field
from enum import Enum
from typing import Sequence


class DocumentKind(str, Enum):
    """Kind of a catalogued document; also selects its result group."""

    TEXTBOOK = "Textbook"
    LAW = "Law"
    RULE = "Rule"


@dataclass(frozen=True, slots=True)
class CandidateDocument:
    """A document listed by one of the catalogs.

    Attributes:
        kind: Catalog the document came from.
        title: Display title.
        url: Absolute URL of the document's plain-text content.
    """

    kind: DocumentKind
    title: str
    url: str


@dataclass(frozen=True, slots=True)
class MatchRecord:
    """A document that passed the inclusion test for one query.

    Attributes:
        kind: Catalog the document came from.
        title: Display title.
        url: Plain-text URL.
        content_hash: SHA-256 hex digest of the raw document text.
        byte_size: Size of the raw text in UTF-8 bytes.
        snippets: Excerpt windows in document order.
        matched_strict: False when only the relaxed fallback matched.
    """

    kind: DocumentKind
    title: str
    url: str
    content_hash: str
    byte_size: int
    snippets: Sequence[str] = ()
    matched_strict: bool = True


@dataclass(frozen=True, slots=True)
class SearchStats:
    """Work done by a single search invocation."""

    documents_scanned: int = 0
    bytes_scanned: int = 0
    hit_count: int = 0

    @property
    def kilobytes_scanned(self) -> float:
        return self.bytes_scanned / 1024


@dataclass(frozen=True, slots=True)
class SearchResult:
    """Plain-data result handed to renderers.

    Attributes:
        query: Raw query string as typed by the user.
        needles: Normalized terms/phrases used for highlighting.
        textbooks: Matches from the textbook catalog.
        laws: Matches from the law catalog.
        rules: Matches from the rule catalog.
        stats: Aggregate statistics for the search.
        mode: ``"fulltext"`` or ``"simple"``.
    """

    query: str
    needles: Sequence[str] = ()
    textbooks: Sequence[MatchRecord] = ()
    laws: Sequence[MatchRecord] = ()
    rules: Sequence[MatchRecord] = ()
    stats: SearchStats = field(default_factory=SearchStats)
    mode: str = "fulltext"

    def groups(self) -> tuple[tuple[str, Sequence[MatchRecord]], ...]:
        """Return ``(label, records)`` pairs in display order."""
        return (("Textbooks", self.textbooks), ("Laws", self.laws), ("Rules", self.rules))
