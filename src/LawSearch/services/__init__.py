"""Search service layer for LawSearch.

Provides the search service and the factory that wires it from config.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from LawSearch.services.search import FullTextSearchService, format_stats

if TYPE_CHECKING:
    from LawSearch.config import AppConfig


def create_search_service(config: AppConfig) -> FullTextSearchService:
    """Create a search service with configured catalogs and clients.

    Args:
        config: Application configuration.

    Returns:
        Configured FullTextSearchService instance.
    """
    from LawSearch.engine.matcher import DocumentMatcher
    from LawSearch.engine.simple import SimpleMatcher
    from LawSearch.sources.catalog.client import CatalogApiClient
    from LawSearch.sources.catalog.source import CatalogAggregator
    from LawSearch.sources.text.client import TextApiClient

    search = config.search
    text_client = TextApiClient(timeout=search.fetch_timeout, max_attempts=search.fetch_attempts)
    catalogs = CatalogAggregator(
        client=CatalogApiClient(timeout=search.fetch_timeout, max_attempts=search.fetch_attempts),
        urls=config.catalogs.urls(),
        base_url=config.catalogs.base_url,
    )
    matcher = DocumentMatcher(
        fetcher=text_client,
        max_documents=search.max_documents,
        max_workers=search.max_workers,
        relaxed_fallback=search.relaxed_fallback,
        window=search.snippet_window,
        max_snippets=search.max_snippets,
    )
    return FullTextSearchService(
        catalogs=catalogs,
        matcher=matcher,
        simple_matcher=SimpleMatcher(fetcher=text_client, max_documents=search.max_documents),
        synonyms=search.synonyms,
        resources=(text_client,),
    )


__all__ = [
    "FullTextSearchService",
    "create_search_service",
    "format_stats",
]
