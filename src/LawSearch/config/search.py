"""Search domain configuration: scan limits, snippets and synonyms."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from LawSearch.config.common import (
    check_positive,
    expect_bool,
    expect_float,
    expect_int,
    expect_str_list_mapping,
    get_optional_value,
    get_section,
)
from LawSearch.core.synonyms import DEFAULT_SYNONYMS, build_synonym_table
from LawSearch.engine.matcher import DEFAULT_MAX_DOCUMENTS, DEFAULT_MAX_WORKERS
from LawSearch.engine.snippets import DEFAULT_MAX_SNIPPETS, DEFAULT_WINDOW
from LawSearch.sources.http import DEFAULT_TIMEOUT, MAX_ATTEMPTS


@dataclass(frozen=True, slots=True)
class SearchConfig:
    """Store validated search behavior.

    Attributes:
        max_documents: Cap on documents scanned per query.
        max_workers: Concurrent document retrievals.
        fetch_timeout: Per-request timeout in seconds.
        fetch_attempts: Attempts per document/catalog request.
        relaxed_fallback: Fall back to the OR-of-terms predicate per document.
        snippet_window: Snippet width in characters.
        max_snippets: Snippets per matched document.
        synonyms: Normalized synonym table.
    """

    max_documents: int
    max_workers: int
    fetch_timeout: float
    fetch_attempts: int
    relaxed_fallback: bool
    snippet_window: int
    max_snippets: int
    synonyms: Mapping[str, tuple[str, ...]]


def load_search(raw: Mapping[str, Any]) -> SearchConfig:
    """Load the ``search``, ``snippets`` and ``synonyms`` sections.

    Args:
        raw: Root configuration mapping.

    Returns:
        Parsed search configuration.

    Raises:
        TypeError: If config types are invalid.
    """
    section = get_section(raw, "search", required=False)
    snippets = get_section(raw, "snippets", required=False)

    synonyms_obj = raw.get("synonyms")
    if synonyms_obj is None:
        synonyms = build_synonym_table(DEFAULT_SYNONYMS)
    else:
        synonyms = build_synonym_table(expect_str_list_mapping(synonyms_obj, "synonyms"))

    return SearchConfig(
        max_documents=expect_int(
            get_optional_value(section, "max_documents", DEFAULT_MAX_DOCUMENTS), "search.max_documents"
        ),
        max_workers=expect_int(get_optional_value(section, "max_workers", DEFAULT_MAX_WORKERS), "search.max_workers"),
        fetch_timeout=expect_float(
            get_optional_value(section, "fetch_timeout", DEFAULT_TIMEOUT), "search.fetch_timeout"
        ),
        fetch_attempts=expect_int(get_optional_value(section, "fetch_attempts", MAX_ATTEMPTS), "search.fetch_attempts"),
        relaxed_fallback=expect_bool(
            get_optional_value(section, "relaxed_fallback", True), "search.relaxed_fallback"
        ),
        snippet_window=expect_int(get_optional_value(snippets, "window", DEFAULT_WINDOW), "snippets.window"),
        max_snippets=expect_int(
            get_optional_value(snippets, "max_snippets", DEFAULT_MAX_SNIPPETS), "snippets.max_snippets"
        ),
        synonyms=synonyms,
    )


def check_search(config: SearchConfig) -> None:
    """Validate search domain constraints.

    Raises:
        ValueError: If values violate search constraints.
    """
    check_positive(config.max_documents, "search.max_documents")
    check_positive(config.max_workers, "search.max_workers")
    check_positive(config.fetch_timeout, "search.fetch_timeout")
    check_positive(config.fetch_attempts, "search.fetch_attempts")
    check_positive(config.snippet_window, "snippets.window")
    if config.max_snippets < 0:
        raise ValueError("snippets.max_snippets must be >= 0")
    for key, phrases in config.synonyms.items():
        if not key:
            raise ValueError("synonyms keys must not be empty")
        if not phrases:
            raise ValueError(f"synonyms.{key} must list at least one synonym")
