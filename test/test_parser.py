"""Tests for the boolean expression parser."""

from __future__ import annotations

import sys
import unittest
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT / "src"))

from LawSearch.core.parser import TRUE, AndNode, NotNode, OrNode, PhraseNode, TermNode, parse
from LawSearch.core.tokens import tokenize


def _parse(query: str):
    return parse(tokenize(query))


class TestParse(unittest.TestCase):
    def test_empty_query_is_true(self) -> None:
        self.assertEqual(_parse(""), TRUE)

    def test_single_term(self) -> None:
        self.assertEqual(_parse("alpha"), TermNode("alpha"))

    def test_phrase_leaf(self) -> None:
        self.assertEqual(_parse('"re beddoe"'), PhraseNode("re beddoe"))

    def test_implicit_and_binds_tighter_than_or(self) -> None:
        self.assertEqual(
            _parse("alpha beta OR gamma"),
            OrNode(AndNode(TermNode("alpha"), TermNode("beta")), TermNode("gamma")),
        )

    def test_and_is_left_associative(self) -> None:
        self.assertEqual(
            _parse("a b c"),
            AndNode(AndNode(TermNode("a"), TermNode("b")), TermNode("c")),
        )

    def test_or_is_left_associative(self) -> None:
        self.assertEqual(
            _parse("a OR b OR c"),
            OrNode(OrNode(TermNode("a"), TermNode("b")), TermNode("c")),
        )

    def test_not_binds_to_the_next_unary(self) -> None:
        self.assertEqual(
            _parse("NOT alpha beta"),
            AndNode(NotNode(TermNode("alpha")), TermNode("beta")),
        )

    def test_not_term(self) -> None:
        self.assertEqual(
            _parse("a -b"),
            AndNode(TermNode("a"), NotNode(TermNode("b"))),
        )

    def test_parentheses_group(self) -> None:
        self.assertEqual(
            _parse("a (b OR c)"),
            AndNode(TermNode("a"), OrNode(TermNode("b"), TermNode("c"))),
        )

    def test_unmatched_open_paren_runs_to_end(self) -> None:
        self.assertEqual(
            _parse("(a OR b"),
            OrNode(TermNode("a"), TermNode("b")),
        )

    def test_missing_or_operand_is_true(self) -> None:
        self.assertEqual(_parse("a OR"), OrNode(TermNode("a"), TRUE))

    def test_leading_or_is_true_operand(self) -> None:
        self.assertEqual(_parse("OR a"), AndNode(TRUE, TermNode("a")))

    def test_trailing_tokens_after_close_paren_are_ignored(self) -> None:
        self.assertEqual(_parse("a ) b"), TermNode("a"))

    def test_dangling_not_negates_true(self) -> None:
        self.assertEqual(_parse("NOT"), NotNode(TRUE))


if __name__ == "__main__":
    unittest.main()
