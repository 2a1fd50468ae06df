"""Tests for query tokenization."""

from __future__ import annotations

import sys
import unicodedata
import unittest
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT / "src"))

from LawSearch.core.tokens import Token, TokenType, normalize_text, tokenize


def _shape(tokens: list[Token]) -> list[tuple[TokenType, str | None]]:
    return [(t.type, t.text) for t in tokens]


class TestTokenize(unittest.TestCase):
    def test_two_plain_words(self) -> None:
        self.assertEqual(
            _shape(tokenize("hello world")),
            [(TokenType.TERM, "hello"), (TokenType.TERM, "world")],
        )

    def test_phrase_then_term(self) -> None:
        self.assertEqual(
            _shape(tokenize('"a b" c')),
            [(TokenType.PHRASE, "a b"), (TokenType.TERM, "c")],
        )

    def test_dash_prefix_is_not_term(self) -> None:
        self.assertEqual(_shape(tokenize("-foo")), [(TokenType.NOT_TERM, "foo")])

    def test_or_operator(self) -> None:
        self.assertEqual(
            _shape(tokenize("a OR b")),
            [(TokenType.TERM, "a"), (TokenType.OR_OP, None), (TokenType.TERM, "b")],
        )

    def test_operators_are_case_insensitive(self) -> None:
        self.assertEqual(
            [t.type for t in tokenize("x or Not y")],
            [TokenType.TERM, TokenType.OR_OP, TokenType.NOT_OP, TokenType.TERM],
        )

    def test_and_is_a_plain_term(self) -> None:
        self.assertEqual(
            _shape(tokenize("a AND b")),
            [(TokenType.TERM, "a"), (TokenType.TERM, "and"), (TokenType.TERM, "b")],
        )

    def test_unterminated_quote_swallows_rest(self) -> None:
        self.assertEqual(_shape(tokenize('"abc')), [(TokenType.TERM, "abc")])

    def test_unterminated_quote_discards_following_operators(self) -> None:
        self.assertEqual(
            _shape(tokenize('x "abc OR (y')),
            [(TokenType.TERM, "x"), (TokenType.TERM, "abc or (y")],
        )

    def test_parentheses_are_standalone(self) -> None:
        self.assertEqual(
            [t.type for t in tokenize("(a)b")],
            [TokenType.LPAREN, TokenType.TERM, TokenType.RPAREN, TokenType.TERM],
        )

    def test_quote_ends_a_word(self) -> None:
        self.assertEqual(
            _shape(tokenize('a"b c"')),
            [(TokenType.TERM, "a"), (TokenType.PHRASE, "b c")],
        )

    def test_text_is_lowercased_and_decomposed(self) -> None:
        tokens = tokenize('Café "Œuvre FInale"')
        self.assertEqual(tokens[0].text, unicodedata.normalize("NFKD", "café"))
        self.assertEqual(tokens[1].text, "œuvre finale")

    def test_empty_and_blank_queries(self) -> None:
        self.assertEqual(tokenize(""), [])
        self.assertEqual(tokenize("   \t\n"), [])

    def test_tokens_are_immutable(self) -> None:
        token = tokenize("a")[0]
        with self.assertRaises(AttributeError):
            token.text = "b"  # type: ignore[misc]


class TestNormalizeText(unittest.TestCase):
    def test_document_and_query_normalize_identically(self) -> None:
        doc = normalize_text("The TRUSTÉE said")
        self.assertIn(tokenize("trustée")[0].text, doc)


if __name__ == "__main__":
    unittest.main()
