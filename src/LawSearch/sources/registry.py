"""Registry of catalog kinds.

Maps each document kind to the config key of its catalog URL and the
result group it renders under. Order here is the scan and display order.
"""

from __future__ import annotations

from dataclasses import dataclass

from LawSearch.core.models import DocumentKind


@dataclass(frozen=True, slots=True)
class CatalogKind:
    kind: DocumentKind
    config_key: str
    group: str


_KINDS: tuple[CatalogKind, ...] = (
    CatalogKind(DocumentKind.TEXTBOOK, "textbooks", "textbooks"),
    CatalogKind(DocumentKind.LAW, "laws", "laws"),
    CatalogKind(DocumentKind.RULE, "rules", "rules"),
)


def catalog_kinds() -> tuple[CatalogKind, ...]:
    """Return all catalog kinds in scan order."""
    return _KINDS


def supported_catalog_keys() -> tuple[str, ...]:
    """Return config keys of all catalogs, in scan order."""
    return tuple(k.config_key for k in _KINDS)


def group_for(kind: DocumentKind) -> str:
    """Return the result group name for ``kind``.

    Raises:
        ValueError: If ``kind`` is not registered.
    """
    for entry in _KINDS:
        if entry.kind is kind:
            return entry.group
    raise ValueError(f"Unsupported document kind: {kind}")
