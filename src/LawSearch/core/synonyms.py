"""Synonym expansion for plain query terms."""

from __future__ import annotations

from types import MappingProxyType
from typing import Iterable, Mapping, Sequence

from LawSearch.core.tokens import Token, TokenType, normalize_text, phrase

DEFAULT_SYNONYMS: Mapping[str, tuple[str, ...]] = MappingProxyType(
    {
        "beddoe": (
            '"Beddoe order"',
            '"Re Beddoe"',
            '"trustee authorisation to litigate"',
            '"consent to litigation"',
            '"authorisation to commence proceedings"',
            '"trustee indemnity"',
            '"indemnity for litigation"',
        ),
        "trustee": ("trustees",),
        "trusts": ("trust",),
    }
)


def build_synonym_table(raw: Mapping[str, Sequence[str]]) -> Mapping[str, tuple[str, ...]]:
    """Normalize keys and synonym phrases of a synonym mapping.

    Synonyms may be written with surrounding double quotes; the quotes are
    dropped since every synonym is inserted as a phrase anyway.

    Args:
        raw: Mapping of term to synonym strings.

    Returns:
        Read-only mapping of normalized term to normalized phrases.
    """
    table: dict[str, tuple[str, ...]] = {}
    for key, values in raw.items():
        phrases = tuple(normalize_text(_strip_quotes(v)) for v in values)
        table[normalize_text(key.strip())] = phrases
    return MappingProxyType(table)


def expand_synonyms(tokens: Iterable[Token], table: Mapping[str, Sequence[str]]) -> list[Token]:
    """Insert synonym phrases after each plain term found in ``table``.

    Only TERM tokens are expanded. The result is de-duplicated by
    structural equality, keeping the first occurrence, so repeated operators
    and parentheses collapse as well.

    Args:
        tokens: Tokenized query.
        table: Normalized synonym table (see :func:`build_synonym_table`).

    Returns:
        Expanded token list.
    """
    out: list[Token] = []
    for token in tokens:
        out.append(token)
        if token.type is not TokenType.TERM:
            continue
        for synonym in table.get(token.text or "", ()):
            out.append(phrase(_strip_quotes(synonym)))
    return unique_tokens(out)


def unique_tokens(tokens: Iterable[Token]) -> list[Token]:
    seen: set[Token] = set()
    out: list[Token] = []
    for token in tokens:
        if token in seen:
            continue
        seen.add(token)
        out.append(token)
    return out


def _strip_quotes(value: str) -> str:
    # only one quote at each end, like the catalog convention '"Re Beddoe"'
    if value.startswith('"'):
        value = value[1:]
    if value.endswith('"'):
        value = value[:-1]
    return value
