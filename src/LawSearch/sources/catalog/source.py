"""Catalog aggregation.

Loads the textbook, law and rule catalogs and turns them into candidate
documents. A catalog that cannot be fetched or parsed contributes no
documents; the search carries on with the others.
"""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import Any, Mapping, Protocol

from LawSearch.core.models import CandidateDocument, DocumentKind
from LawSearch.sources.catalog.parser import parse_catalog
from LawSearch.sources.registry import catalog_kinds
from LawSearch.utils.log import log


class CatalogClient(Protocol):
    """Protocol for a catalog JSON fetcher."""

    def fetch_catalog(self, url: str) -> Any:
        """Fetch and decode one catalog."""
        raise NotImplementedError

    def close(self) -> None:
        """Close resources held by the client."""
        raise NotImplementedError


@dataclass(slots=True)
class CatalogAggregator:
    """Load every configured catalog into per-kind document lists.

    Attributes:
        client: Catalog fetcher.
        urls: Catalog URL per kind.
        base_url: Base for relative text links inside catalogs.
    """

    client: CatalogClient
    urls: Mapping[DocumentKind, str]
    base_url: str = ""

    def load(self, kind: DocumentKind) -> list[CandidateDocument]:
        """Load one catalog; failures degrade to an empty list.

        Args:
            kind: Catalog to load.

        Returns:
            Candidate documents of that kind.
        """
        url = self.urls.get(kind)
        if not url:
            log.debug("No catalog configured for kind=%s", kind.value)
            return []
        try:
            payload = self.client.fetch_catalog(url)
            documents = parse_catalog(payload, kind, base_url=self.base_url)
        except Exception as error:  # noqa: BLE001 - catalog failure must be isolated
            log.warning("Catalog unavailable: kind=%s url=%s error=%s", kind.value, url, error)
            return []
        log.info("Catalog loaded: kind=%s documents=%d", kind.value, len(documents))
        return documents

    def load_all(self) -> dict[DocumentKind, list[CandidateDocument]]:
        """Load all catalogs concurrently.

        Returns:
            Documents per kind, keyed in registry order.
        """
        kinds = [entry.kind for entry in catalog_kinds()]
        with ThreadPoolExecutor(max_workers=len(kinds)) as executor:
            loaded = list(executor.map(self.load, kinds))
        return dict(zip(kinds, loaded))

    def close(self) -> None:
        self.client.close()
