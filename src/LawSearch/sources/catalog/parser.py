"""Catalog payload parser.

Catalogs come in a few shapes: a bare JSON list, or an object wrapping the
list under ``items``. Entries name their text link ``url_txt``, ``url`` or
``txt``; relative links are resolved against the site base URL. Entries
without a usable link are dropped.
"""

from __future__ import annotations

from typing import Any, Mapping
from urllib.parse import urljoin

from LawSearch.core.models import CandidateDocument, DocumentKind

_LINK_FIELDS = ("url_txt", "url", "txt")
_TITLE_FIELDS = ("title", "name", "reference", "slug", "id")
_UNTITLED = "Untitled"


def catalog_entries(payload: Any) -> list[Any]:
    """Return the entry list of a catalog payload, or ``[]`` for other shapes."""
    if isinstance(payload, list):
        return payload
    if isinstance(payload, Mapping):
        items = payload.get("items")
        if isinstance(items, list):
            return items
    return []


def resolve_url(link: str, base_url: str) -> str:
    """Resolve a catalog link against ``base_url``.

    Args:
        link: Link from the catalog, absolute or relative (``./data/x.txt``).
        base_url: Site root used for relative links.

    Returns:
        Absolute URL; ``http(s)`` links are returned unchanged.
    """
    if link.lower().startswith(("http://", "https://")):
        return link
    if not base_url:
        return link
    return urljoin(base_url if base_url.endswith("/") else base_url + "/", link)


def pick_link(entry: Mapping[str, Any]) -> str | None:
    for key in _LINK_FIELDS:
        value = entry.get(key)
        if isinstance(value, str) and value.strip():
            return value.strip()
    return None


def pick_title(entry: Mapping[str, Any]) -> str:
    for key in _TITLE_FIELDS:
        value = entry.get(key)
        if value is None:
            continue
        text = str(value).strip()
        if text:
            return text
    return _UNTITLED


def parse_catalog(payload: Any, kind: DocumentKind, *, base_url: str = "") -> list[CandidateDocument]:
    """Parse a catalog payload into candidate documents.

    Args:
        payload: Decoded JSON catalog.
        kind: Kind assigned to every document of this catalog.
        base_url: Base for relative text links.

    Returns:
        Documents in catalog order.
    """
    documents: list[CandidateDocument] = []
    for entry in catalog_entries(payload):
        if not isinstance(entry, Mapping):
            continue
        link = pick_link(entry)
        if link is None:
            continue
        documents.append(
            CandidateDocument(kind=kind, title=pick_title(entry), url=resolve_url(link, base_url))
        )
    return documents
