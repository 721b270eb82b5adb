"""Keyword confidence scoring for agent routing."""

from __future__ import annotations

from typing import Sequence

# Longer keywords are more specific; each matched character adds 1/10.
KEYWORD_WEIGHT_DIVISOR = 10
MAX_CONFIDENCE = 1.0


def keyword_weight(keyword: str) -> float:
    return len(keyword) / KEYWORD_WEIGHT_DIVISOR


def keyword_confidence(query_lower: str, keywords: Sequence[str]) -> float:
    """Score how well a lower-cased query matches a keyword list.

    Each keyword contained in the query (substring match) counts once and
    adds its length-based weight. The match ratio plus the weight per
    keyword is clamped to ``MAX_CONFIDENCE``. Several short matches can
    reach the ceiling quickly; callers rely on that.

    Returns:
        Score in [0.0, 1.0]; 0.0 for an empty keyword list.
    """
    if not keywords:
        return 0.0

    match_count = 0
    match_weight = 0.0
    for keyword in keywords:
        keyword_lower = keyword.lower()
        if keyword_lower in query_lower:
            match_count += 1
            match_weight += keyword_weight(keyword_lower)

    base_score = match_count / len(keywords)
    return min(MAX_CONFIDENCE, base_score + match_weight / len(keywords))


def matched_keywords(query_lower: str, keywords: Sequence[str]) -> list[str]:
    """Keywords (in list order) contained in the query."""
    return [kw for kw in keywords if kw.lower() in query_lower]
