from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping, Sequence

from LawSearch.core.compiler import Predicate, build_relaxed_node, collect_needles, compile_predicate
from LawSearch.core.parser import Node, parse
from LawSearch.core.synonyms import DEFAULT_SYNONYMS, expand_synonyms
from LawSearch.core.tokens import Token, tokenize


@dataclass(frozen=True, slots=True)
class CompiledQuery:
    """A query compiled once and shared by every document of a search.

    Attributes:
        raw: Query string as typed.
        tokens: Tokens after synonym expansion.
        tree: Parsed expression tree (strict semantics).
        relaxed_tree: OR of every positive term/phrase.
        strict: Predicate compiled from ``tree``.
        relaxed: Predicate compiled from ``relaxed_tree``.
        needles: Distinct terms/phrases to locate for snippets.
    """

    raw: str
    tokens: Sequence[Token]
    tree: Node
    relaxed_tree: Node
    strict: Predicate
    relaxed: Predicate
    needles: Sequence[str]

    @classmethod
    def build(
        cls,
        query: str,
        synonyms: Mapping[str, Sequence[str]] = DEFAULT_SYNONYMS,
    ) -> CompiledQuery:
        """Tokenize, expand, parse and compile ``query``.

        Args:
            query: Raw query string.
            synonyms: Normalized synonym table.

        Returns:
            Compiled query. Never raises for malformed input.
        """
        tokens = tuple(expand_synonyms(tokenize(query), synonyms))
        tree = parse(tokens)
        relaxed_tree = build_relaxed_node(tokens)
        return cls(
            raw=query,
            tokens=tokens,
            tree=tree,
            relaxed_tree=relaxed_tree,
            strict=compile_predicate(tree),
            relaxed=compile_predicate(relaxed_tree),
            needles=collect_needles(tokens),
        )
