# src/tidy_tasks/categorization/keywords.py

from __future__ import annotations

from collections.abc import Iterable

from .lexicon import CATEGORY_KEYWORDS, DEFAULT_CATEGORY, TaskCategory


def combine_text(description: str, title: str | None = None) -> str:
    """Text sent to classifiers: "<title>: <description>" or just the description."""
    return f"{title}: {description}" if title else description


def keyword_score(text: str, keywords: Iterable[str]) -> int:
    """Number of distinct keywords found as substrings of `text` (already lowercased)."""
    return sum(1 for kw in set(keywords) if kw in text)


def categorize_by_keywords(text: str) -> TaskCategory:
    """
    Deterministic fallback categorizer.

    The category with the strictly highest score wins; on a tie the category
    declared first in the lexicon keeps the lead. No match -> general.
    """
    lowered = (text or "").lower()

    best = DEFAULT_CATEGORY
    best_score = 0
    for category, keywords in CATEGORY_KEYWORDS:
        score = keyword_score(lowered, keywords)
        if score > best_score:
            best, best_score = category, score

    return best
