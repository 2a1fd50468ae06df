"""Catalog JSON client."""

from __future__ import annotations

from typing import Any

from LawSearch.sources.http import RetryingHttpClient
from LawSearch.utils.log import log


class CatalogApiClient(RetryingHttpClient):
    """Low-level HTTP client for catalog JSON files."""

    accept = "application/json"

    def fetch_catalog(self, url: str) -> Any:
        """Fetch and decode one catalog.

        Args:
            url: Absolute catalog URL.

        Returns:
            Decoded JSON payload (list or object, validated by the parser).

        Raises:
            requests.RequestException: When the catalog cannot be fetched.
            ValueError: When the body is not valid JSON.
        """
        response = self._get(url)
        payload = response.json()
        log.debug("Catalog fetched: url=%s bytes=%d", url, len(response.content))
        return payload
