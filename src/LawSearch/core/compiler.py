"""Compile expression trees into text predicates.

Predicates take already-normalized document text and test plain substring
containment; there is no word-boundary requirement at this layer.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Iterable

from LawSearch.core.parser import (
    TRUE,
    AndNode,
    Node,
    NotNode,
    OrNode,
    PhraseNode,
    TermNode,
    TrueNode,
    leaf_for,
)
from LawSearch.core.tokens import Token

Predicate = Callable[[str], bool]


def _always(text: str) -> bool:
    return True


def compile_predicate(node: Node) -> Predicate:
    """Compile ``node`` into a ``text -> bool`` function.

    Args:
        node: Expression tree.

    Returns:
        Pure predicate over normalized text.

    Raises:
        TypeError: If ``node`` is not an expression node.
    """
    if isinstance(node, TrueNode):
        return _always
    if isinstance(node, (TermNode, PhraseNode)):
        needle = node.q
        return lambda text: needle in text
    if isinstance(node, NotNode):
        child = compile_predicate(node.child)
        return lambda text: not child(text)
    if isinstance(node, AndNode):
        left, right = compile_predicate(node.left), compile_predicate(node.right)
        return lambda text: left(text) and right(text)
    if isinstance(node, OrNode):
        left, right = compile_predicate(node.left), compile_predicate(node.right)
        return lambda text: left(text) or right(text)
    raise TypeError(f"Unsupported expression node: {node!r}")


def build_relaxed_node(tokens: Iterable[Token]) -> Node:
    """OR together every positive term and phrase.

    NOT_TERM tokens, operators and grouping are ignored.

    Args:
        tokens: Tokens after synonym expansion.

    Returns:
        Left-folded OR tree, or ``TRUE`` when the query has no positive term.
    """
    node: Node | None = None
    for token in tokens:
        if not token.is_positive:
            continue
        leaf = leaf_for(token)
        node = leaf if node is None else OrNode(node, leaf)
    return TRUE if node is None else node


def collect_needles(tokens: Iterable[Token]) -> tuple[str, ...]:
    """Return distinct positive token texts in first-seen order."""
    seen: dict[str, None] = {}
    for token in tokens:
        if token.is_positive and token.text is not None:
            seen.setdefault(token.text, None)
    return tuple(seen)
