"""Snippet extraction and highlighting.

Windows are carved from normalized document text around needle
occurrences. Occurrences closer than half a window to an accepted centre
are dropped so adjacent hits do not produce near-identical snippets.
"""

from __future__ import annotations

import re
from typing import Iterable, Sequence

DEFAULT_WINDOW = 240
DEFAULT_MAX_SNIPPETS = 6
MAX_OCCURRENCES = 200
ELLIPSIS = "…"

_WS_RE = re.compile(r"\s+")


def find_occurrences(text: str, needles: Iterable[str]) -> list[tuple[int, str]]:
    """Locate needle occurrences, sorted by position.

    Each needle is scanned left to right without overlap. Collection stops
    for a needle once more than ``MAX_OCCURRENCES`` hits are recorded in
    total, so each further needle contributes at most one more hit.

    Args:
        text: Normalized document text.
        needles: Normalized needles; empty and repeated ones are skipped.

    Returns:
        ``(position, needle)`` pairs ordered by position.
    """
    hits: list[tuple[int, str]] = []
    for needle in dict.fromkeys(needles):
        if not needle:
            continue
        idx = text.find(needle)
        while idx != -1:
            hits.append((idx, needle))
            if len(hits) > MAX_OCCURRENCES:
                break
            idx = text.find(needle, idx + len(needle))
    hits.sort(key=lambda hit: hit[0])
    return hits


def extract_snippets(
    text: str,
    needles: Sequence[str],
    *,
    window: int = DEFAULT_WINDOW,
    max_snippets: int = DEFAULT_MAX_SNIPPETS,
) -> list[str]:
    """Build up to ``max_snippets`` excerpt windows around needle hits.

    Args:
        text: Normalized document text.
        needles: Normalized terms/phrases of the query.
        window: Window width in characters.
        max_snippets: Maximum number of windows.

    Returns:
        Whitespace-collapsed excerpts, ellipsized where they are cut.
    """
    half = window / 2
    centres: list[int] = []
    snippets: list[str] = []
    for pos, _needle in find_occurrences(text, needles):
        if len(snippets) >= max_snippets:
            break
        if any(abs(centre - pos) < half for centre in centres):
            continue
        centres.append(pos)
        start = max(0, pos - window // 2)
        end = min(len(text), start + window)
        snippets.append(_clip(text, start, end))
    return snippets


def _clip(text: str, start: int, end: int) -> str:
    body = _WS_RE.sub(" ", text[start:end]).strip()
    if start > 0:
        body = ELLIPSIS + body
    if end < len(text):
        body = body + ELLIPSIS
    return body


def highlight(snippet: str, needles: Iterable[str], *, open_mark: str = "[[", close_mark: str = "]]") -> str:
    """Wrap needle occurrences in ``snippet`` with markers.

    Longer needles win where needles overlap, so a phrase is marked as a
    whole rather than around its first word.

    Args:
        snippet: Excerpt text (normalized).
        needles: Normalized needles.
        open_mark: Marker inserted before a match.
        close_mark: Marker inserted after a match.

    Returns:
        Highlighted snippet; unchanged when no needle occurs.
    """
    ordered = sorted({n for n in needles if n}, key=len, reverse=True)
    if not ordered:
        return snippet
    pattern = re.compile("|".join(re.escape(n) for n in ordered), re.IGNORECASE)
    return pattern.sub(lambda m: f"{open_mark}{m.group(0)}{close_mark}", snippet)
