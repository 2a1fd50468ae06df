"""Tests for snippet extraction and highlighting."""

from __future__ import annotations

import sys
import unittest
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT / "src"))

from LawSearch.engine.snippets import (
    ELLIPSIS,
    MAX_OCCURRENCES,
    extract_snippets,
    find_occurrences,
    highlight,
)


def _text_with(needle: str, positions: list[int], length: int = 1200) -> str:
    chars = ["."] * length
    for pos in positions:
        chars[pos:pos + len(needle)] = needle
    return "".join(chars)


class TestFindOccurrences(unittest.TestCase):
    def test_sorted_across_needles(self) -> None:
        hits = find_occurrences("beta alpha beta", ["beta", "alpha"])
        self.assertEqual(hits, [(0, "beta"), (5, "alpha"), (11, "beta")])

    def test_empty_needles_are_skipped(self) -> None:
        self.assertEqual(find_occurrences("abc", ["", "b"]), [(1, "b")])

    def test_occurrences_are_capped(self) -> None:
        hits = find_occurrences("a" * 500, ["a"])
        self.assertEqual(len(hits), MAX_OCCURRENCES + 1)


class TestExtractSnippets(unittest.TestCase):
    def test_close_hits_are_merged(self) -> None:
        text = _text_with("zz", [300, 310])
        self.assertEqual(len(extract_snippets(text, ["zz"], window=240)), 1)

    def test_distant_hits_get_own_snippets(self) -> None:
        text = _text_with("zz", [300, 800])
        self.assertEqual(len(extract_snippets(text, ["zz"], window=240)), 2)

    def test_short_text_has_no_ellipsis(self) -> None:
        self.assertEqual(extract_snippets("alpha beta", ["alpha"]), ["alpha beta"])

    def test_cut_edges_get_ellipsis(self) -> None:
        text = _text_with("zz", [600])
        (snippet,) = extract_snippets(text, ["zz"], window=100)
        self.assertTrue(snippet.startswith(ELLIPSIS))
        self.assertTrue(snippet.endswith(ELLIPSIS))
        self.assertIn("zz", snippet)
        self.assertEqual(len(snippet), 100 + 2 * len(ELLIPSIS))

    def test_window_at_document_start(self) -> None:
        text = _text_with("zz", [0])
        (snippet,) = extract_snippets(text, ["zz"], window=100)
        self.assertTrue(snippet.startswith("zz"))
        self.assertTrue(snippet.endswith(ELLIPSIS))

    def test_whitespace_is_collapsed(self) -> None:
        snippets = extract_snippets("a\n\n  alpha \t b", ["alpha"])
        self.assertEqual(snippets, ["a alpha b"])

    def test_max_snippets(self) -> None:
        text = _text_with("zz", [0, 300, 600, 900])
        self.assertEqual(len(extract_snippets(text, ["zz"], window=100, max_snippets=2)), 2)
        self.assertEqual(extract_snippets(text, ["zz"], window=100, max_snippets=0), [])

    def test_no_needles(self) -> None:
        self.assertEqual(extract_snippets("alpha", []), [])
        self.assertEqual(extract_snippets("alpha", ["omega"]), [])


class TestHighlight(unittest.TestCase):
    def test_longest_needle_wins(self) -> None:
        self.assertEqual(
            highlight("re beddoe order", ["beddoe", "re beddoe"]),
            "[[re beddoe]] order",
        )

    def test_case_insensitive(self) -> None:
        self.assertEqual(highlight("Trust deed", ["trust"]), "[[Trust]] deed")

    def test_custom_marks(self) -> None:
        self.assertEqual(highlight("a b", ["b"], open_mark="<", close_mark=">"), "a <b>")

    def test_regex_characters_are_literal(self) -> None:
        self.assertEqual(highlight("s.1(a) x", ["s.1(a)"]), "[[s.1(a)]] x")

    def test_no_needles_is_unchanged(self) -> None:
        self.assertEqual(highlight("text", ["", ""]), "text")


if __name__ == "__main__":
    unittest.main()
