"""Query tokenizer.

Turns a raw query string into a flat list of tokens. The tokenizer never
fails: a dangling quote turns the rest of the input into one term and ends
the scan.
"""

from __future__ import annotations

import unicodedata
from dataclasses import dataclass
from enum import Enum


class TokenType(str, Enum):
    TERM = "TERM"
    PHRASE = "PHRASE"
    NOT_TERM = "NOT_TERM"
    AND_OP = "AND"
    OR_OP = "OR"
    NOT_OP = "NOT"
    LPAREN = "("
    RPAREN = ")"


@dataclass(frozen=True, slots=True)
class Token:
    """One lexical token.

    ``text`` is only set for TERM, PHRASE and NOT_TERM, and is always
    normalized with :func:`normalize_text`.
    """

    type: TokenType
    text: str | None = None

    @property
    def is_positive(self) -> bool:
        return self.type in (TokenType.TERM, TokenType.PHRASE)


_STRUCTURAL = {"(": TokenType.LPAREN, ")": TokenType.RPAREN}
_WORD_STOP = frozenset('()"')


def normalize_text(text: str) -> str:
    """Lower-case and NFKD-decompose ``text``.

    Used for both query tokens and document bodies so containment tests are
    consistent.
    """
    return unicodedata.normalize("NFKD", text.lower())


def term(text: str) -> Token:
    return Token(TokenType.TERM, normalize_text(text))


def phrase(text: str) -> Token:
    return Token(TokenType.PHRASE, normalize_text(text))


def tokenize(query: str) -> list[Token]:
    """Split a query into tokens.

    Args:
        query: Raw user query.

    Returns:
        Tokens in input order.
    """
    tokens: list[Token] = []
    i = 0
    n = len(query)
    while i < n:
        c = query[i]
        if c.isspace():
            i += 1
            continue
        if c == '"':
            close = query.find('"', i + 1)
            if close == -1:
                tokens.append(term(query[i + 1:]))
                break
            tokens.append(phrase(query[i + 1:close]))
            i = close + 1
            continue
        if c in _STRUCTURAL:
            tokens.append(Token(_STRUCTURAL[c]))
            i += 1
            continue

        j = i
        while j < n and not query[j].isspace() and query[j] not in _WORD_STOP:
            j += 1
        tokens.append(_word_token(query[i:j]))
        i = j
    return tokens


def _word_token(word: str) -> Token:
    upper = word.upper()
    if upper == "OR":
        return Token(TokenType.OR_OP)
    if upper == "NOT":
        return Token(TokenType.NOT_OP)
    if word.startswith("-"):
        return Token(TokenType.NOT_TERM, normalize_text(word[1:]))
    return term(word)
