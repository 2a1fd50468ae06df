"""Tests for predicate compilation and compiled queries."""

from __future__ import annotations

import sys
import unittest
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT / "src"))

from LawSearch.core.compiler import build_relaxed_node, collect_needles, compile_predicate
from LawSearch.core.parser import TRUE, OrNode, PhraseNode, TermNode
from LawSearch.core.query import CompiledQuery
from LawSearch.core.synonyms import DEFAULT_SYNONYMS
from LawSearch.core.tokens import normalize_text, tokenize


def _strict(query: str):
    return CompiledQuery.build(query, synonyms={}).strict


class TestCompilePredicate(unittest.TestCase):
    def test_true_matches_everything(self) -> None:
        predicate = compile_predicate(TRUE)
        self.assertTrue(predicate(""))
        self.assertTrue(predicate("anything"))

    def test_substring_containment(self) -> None:
        predicate = compile_predicate(TermNode("trust"))
        self.assertTrue(predicate("the trustees met"))
        self.assertFalse(predicate("the settlor"))

    def test_precedence_or_over_and(self) -> None:
        predicate = _strict("alpha beta OR gamma")
        self.assertTrue(predicate("gamma"))
        self.assertTrue(predicate("alpha beta"))
        self.assertFalse(predicate("alpha"))

    def test_not_binds_tightly(self) -> None:
        predicate = _strict("NOT alpha beta")
        self.assertFalse(predicate(""))
        self.assertTrue(predicate("beta"))
        self.assertFalse(predicate("alpha beta"))

    def test_not_term(self) -> None:
        predicate = _strict("trust -charity")
        self.assertTrue(predicate("a trust deed"))
        self.assertFalse(predicate("a charity trust"))

    def test_phrase_requires_contiguous_text(self) -> None:
        predicate = _strict('"re beddoe"')
        self.assertTrue(predicate("in re beddoe the court"))
        self.assertFalse(predicate("re the beddoe"))

    def test_and_word_is_a_required_term(self) -> None:
        predicate = _strict("alpha AND beta")
        self.assertFalse(predicate("alpha beta"))
        self.assertTrue(predicate("alpha and beta"))

    def test_unknown_node_raises(self) -> None:
        with self.assertRaises(TypeError):
            compile_predicate("alpha")  # type: ignore[arg-type]


class TestRelaxedNode(unittest.TestCase):
    def test_or_of_positive_leaves(self) -> None:
        node = build_relaxed_node(tokenize('a "b c" -d NOT e'))
        self.assertEqual(node, OrNode(OrNode(TermNode("a"), PhraseNode("b c")), TermNode("e")))

    def test_no_positive_terms_is_true(self) -> None:
        self.assertEqual(build_relaxed_node(tokenize("-a -b")), TRUE)

    def test_relaxed_accepts_any_term(self) -> None:
        query = CompiledQuery.build("alpha AND beta", synonyms={})
        self.assertFalse(query.strict("beta gamma"))
        self.assertTrue(query.relaxed("beta gamma"))
        self.assertFalse(query.relaxed("gamma"))


class TestCollectNeedles(unittest.TestCase):
    def test_distinct_positive_texts(self) -> None:
        needles = collect_needles(tokenize('trust "re beddoe" -charity trust'))
        self.assertEqual(needles, ("trust", "re beddoe"))


class TestCompiledQuery(unittest.TestCase):
    def test_synonym_makes_all_phrases_required(self) -> None:
        query = CompiledQuery.build("trustee", synonyms=DEFAULT_SYNONYMS)
        self.assertFalse(query.strict("the trustee decided"))
        self.assertTrue(query.strict("the trustees decided"))
        self.assertTrue(query.relaxed("the trustee decided"))

    def test_needles_include_synonyms(self) -> None:
        query = CompiledQuery.build("trustee", synonyms=DEFAULT_SYNONYMS)
        self.assertEqual(tuple(query.needles), ("trustee", "trustees"))

    def test_synonym_dedup_changes_grouping(self) -> None:
        query = CompiledQuery.build("a OR b OR c", synonyms={})
        self.assertTrue(query.strict("a"))
        self.assertFalse(query.strict("c"))
        self.assertTrue(query.strict("b c"))

    def test_empty_query(self) -> None:
        query = CompiledQuery.build("", synonyms={})
        self.assertEqual(query.tree, TRUE)
        self.assertTrue(query.strict(""))
        self.assertEqual(tuple(query.needles), ())

    def test_pure_negative_query(self) -> None:
        query = CompiledQuery.build("-charity", synonyms={})
        self.assertFalse(query.strict("charity"))
        self.assertTrue(query.relaxed("charity"))

    def test_accents_normalize_on_both_sides(self) -> None:
        query = CompiledQuery.build("Société", synonyms={})
        self.assertTrue(query.strict(normalize_text("La SOCIÉTÉ anonyme")))


if __name__ == "__main__":
    unittest.main()
