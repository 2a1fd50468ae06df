"""Tests for the simple AND-only search."""

from __future__ import annotations

import sys
import unittest
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT / "src"))

from LawSearch.core.models import CandidateDocument, DocumentKind
from LawSearch.engine.matcher import content_hash
from LawSearch.engine.simple import SimpleMatcher, normalize_plain, simple_snippets, split_terms


class _StubFetcher:
    def __init__(self, texts: dict[str, str]) -> None:
        self.texts = texts
        self.calls: list[str] = []

    def fetch_text(self, url: str) -> str:
        self.calls.append(url)
        if url not in self.texts:
            raise ConnectionError(url)
        return self.texts[url]


def _doc(name: str) -> CandidateDocument:
    return CandidateDocument(kind=DocumentKind.LAW, title=name, url=f"https://example.test/{name}.txt")


class TestHelpers(unittest.TestCase):
    def test_split_terms(self) -> None:
        self.assertEqual(split_terms("Trust+Deed   x"), ["trust", "deed", "x"])
        self.assertEqual(split_terms("  + "), [])

    def test_normalize_plain_blanks_punctuation(self) -> None:
        self.assertEqual(normalize_plain("Trustee’s deed!"), "trustee s deed ")
        self.assertEqual(normalize_plain("s-1"), "s-1")

    def test_snippets_need_every_term_in_window(self) -> None:
        text = "Trust here. " + "x" * 400 + " trust and deed."
        snippets = simple_snippets(text, ["trust", "deed"])
        self.assertEqual(len(snippets), 1)
        self.assertTrue(snippets[0].startswith("…"))
        self.assertTrue(snippets[0].endswith("…"))
        self.assertIn("trust and deed", snippets[0])

    def test_snippets_are_capped(self) -> None:
        text = " ".join(["trust"] * 50)
        self.assertEqual(len(simple_snippets(text, ["trust"], max_snippets=2)), 2)

    def test_no_terms_no_snippets(self) -> None:
        self.assertEqual(simple_snippets("trust", []), [])


class TestSimpleMatcher(unittest.TestCase):
    def test_all_terms_required(self) -> None:
        both, one = _doc("both"), _doc("one")
        fetcher = _StubFetcher({both.url: "A trust deed.", one.url: "A trust."})
        records, stats = SimpleMatcher(fetcher).match("trust deed", [both, one])

        self.assertEqual([r.title for r in records], ["both"])
        self.assertEqual(records[0].content_hash, content_hash("A trust deed."))
        self.assertEqual(records[0].byte_size, 13)
        self.assertTrue(records[0].matched_strict)
        self.assertEqual((stats.documents_scanned, stats.bytes_scanned, stats.hit_count), (2, 21, 1))

    def test_empty_query_fetches_nothing(self) -> None:
        fetcher = _StubFetcher({})
        records, stats = SimpleMatcher(fetcher).match("   ", [_doc("a")])
        self.assertEqual(records, [])
        self.assertEqual(stats.documents_scanned, 0)
        self.assertEqual(fetcher.calls, [])

    def test_fetch_failure_is_skipped(self) -> None:
        ok = _doc("ok")
        fetcher = _StubFetcher({ok.url: "trust"})
        with self.assertLogs("LawSearch", level="WARNING"):
            records, stats = SimpleMatcher(fetcher).match("trust", [_doc("dead"), ok])
        self.assertEqual([r.title for r in records], ["ok"])
        self.assertEqual(stats.documents_scanned, 1)

    def test_max_documents(self) -> None:
        docs = [_doc(f"d{i}") for i in range(4)]
        fetcher = _StubFetcher({d.url: "trust" for d in docs})
        records, _ = SimpleMatcher(fetcher, max_documents=2).match("trust", docs)
        self.assertEqual(len(records), 2)
        self.assertEqual(len(fetcher.calls), 2)


if __name__ == "__main__":
    unittest.main()
