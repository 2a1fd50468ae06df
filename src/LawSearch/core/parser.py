"""Boolean expression parser.

Grammar (precedence: NOT, then implicit AND, then OR; all left-associative)::

    or_expr  := and_expr (OR and_expr)*
    and_expr := unary unary*          # while next is not OR / ')' / end
    unary    := NOT unary | NOT_TERM | '(' or_expr ')' | TERM | PHRASE

The parser is permissive: an empty query, a missing operand or an
unexpected token becomes a ``TrueNode``, an unmatched ``(`` runs to the end
of input, and tokens left after the top-level expression are ignored.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence, Union

from LawSearch.core.tokens import Token, TokenType


@dataclass(frozen=True, slots=True)
class TrueNode:
    pass


@dataclass(frozen=True, slots=True)
class TermNode:
    q: str


@dataclass(frozen=True, slots=True)
class PhraseNode:
    q: str


@dataclass(frozen=True, slots=True)
class NotNode:
    child: Node


@dataclass(frozen=True, slots=True)
class AndNode:
    left: Node
    right: Node


@dataclass(frozen=True, slots=True)
class OrNode:
    left: Node
    right: Node


Node = Union[TrueNode, TermNode, PhraseNode, NotNode, AndNode, OrNode]

TRUE = TrueNode()


def leaf_for(token: Token) -> Node:
    """Build the TERM or PHRASE leaf for a positive token."""
    if token.type is TokenType.PHRASE:
        return PhraseNode(token.text or "")
    return TermNode(token.text or "")


class _Parser:
    def __init__(self, tokens: Sequence[Token]) -> None:
        self._tokens = tokens
        self._pos = 0

    def _peek(self) -> Token | None:
        if self._pos < len(self._tokens):
            return self._tokens[self._pos]
        return None

    def _next_is(self, *types: TokenType) -> bool:
        tok = self._peek()
        return tok is not None and tok.type in types

    def parse(self) -> Node:
        return self._or_expr()

    def _or_expr(self) -> Node:
        left = self._and_expr()
        while self._next_is(TokenType.OR_OP):
            self._pos += 1
            left = OrNode(left, self._and_expr())
        return left

    def _and_expr(self) -> Node:
        left = self._unary()
        while self._peek() is not None and not self._next_is(TokenType.OR_OP, TokenType.RPAREN):
            left = AndNode(left, self._unary())
        return left

    def _unary(self) -> Node:
        tok = self._peek()
        if tok is None:
            return TRUE
        self._pos += 1

        if tok.type is TokenType.LPAREN:
            inner = self._or_expr()
            closing = self._peek()
            if closing is not None and closing.type is TokenType.RPAREN:
                self._pos += 1
            return inner
        if tok.type is TokenType.NOT_OP:
            return NotNode(self._unary())
        if tok.type is TokenType.NOT_TERM:
            return NotNode(TermNode(tok.text or ""))
        if tok.is_positive:
            return leaf_for(tok)
        # OR / ')' / AND where an operand was expected
        return TRUE


def parse(tokens: Sequence[Token]) -> Node:
    """Parse tokens into an expression tree.

    Args:
        tokens: Tokens, usually after synonym expansion.

    Returns:
        Root node. Never raises; an empty input yields ``TRUE``.
    """
    return _Parser(tokens).parse()
