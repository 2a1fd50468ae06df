"""Catalog domain configuration (where documents are listed)."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from LawSearch.config.common import expect_str, get_optional_value, get_section
from LawSearch.core.models import DocumentKind
from LawSearch.sources.registry import catalog_kinds

DEFAULT_BASE_URL = "https://texts.wwwbcb.org/"
DEFAULT_CATALOG_URLS = {
    "textbooks": "https://texts.wwwbcb.org/texts/catalog.json",
    "laws": "https://texts.wwwbcb.org/laws.json",
    "rules": "https://texts.wwwbcb.org/rules.json",
}


@dataclass(frozen=True, slots=True)
class CatalogConfig:
    """Catalog URLs and the base used for relative text links.

    An empty URL disables that catalog.
    """

    base_url: str
    textbooks: str
    laws: str
    rules: str

    def urls(self) -> dict[DocumentKind, str]:
        """Return catalog URL per document kind, skipping disabled ones."""
        out: dict[DocumentKind, str] = {}
        for entry in catalog_kinds():
            url = getattr(self, entry.config_key)
            if url:
                out[entry.kind] = url
        return out


def load_catalogs(raw: Mapping[str, Any]) -> CatalogConfig:
    """Load the ``catalogs`` section; every key falls back to the public site.

    Raises:
        TypeError: If config types are invalid.
    """
    section = get_section(raw, "catalogs", required=False)
    values = {
        key: expect_str(get_optional_value(section, key, default), f"catalogs.{key}").strip()
        for key, default in DEFAULT_CATALOG_URLS.items()
    }
    return CatalogConfig(
        base_url=expect_str(get_optional_value(section, "base_url", DEFAULT_BASE_URL), "catalogs.base_url").strip(),
        **values,
    )


def check_catalogs(config: CatalogConfig) -> None:
    """Validate catalog domain constraints.

    Raises:
        ValueError: If no catalog is configured or a URL is not http(s).
    """
    urls = config.urls()
    if not urls:
        raise ValueError("catalogs must configure at least one of textbooks/laws/rules")
    for entry in catalog_kinds():
        url = getattr(config, entry.config_key)
        if url and not url.lower().startswith(("http://", "https://")):
            raise ValueError(f"catalogs.{entry.config_key} must be an http(s) URL")
