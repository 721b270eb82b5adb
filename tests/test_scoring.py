"""Tests for keyword confidence scoring."""

import pytest

from oneassist.routing.scoring import keyword_confidence, keyword_weight, matched_keywords


def test_empty_keyword_list_scores_zero():
    assert keyword_confidence("anything at all", []) == 0.0


def test_no_match_scores_zero():
    assert keyword_confidence("hello there", ["traffic", "bounce", "sessions"]) == 0.0


def test_single_match_uses_length_weight():
    """One match of 'bounce' among 12 keywords: 1/12 + 0.6/12."""
    keywords = [
        "traffic", "visitors", "bounce", "engagement", "sessions", "pageviews",
        "users", "analytics", "website", "landing page", "exit", "time on site",
    ]
    score = keyword_confidence("why is my bounce rate so high on mobile", keywords)

    assert score == pytest.approx(1 / 12 + 0.6 / 12)


def test_score_clamped_to_one():
    """Many short matches hit the ceiling rather than exceeding it."""
    assert keyword_confidence("abc", ["a", "b", "c"]) == 1.0


def test_keyword_order_does_not_matter():
    query = "google ads roas dropped"
    forward = ["ads", "roas", "cpc", "google ads"]

    assert keyword_confidence(query, forward) == keyword_confidence(query, list(reversed(forward)))


def test_keywords_are_case_folded():
    assert keyword_confidence("my roas", ["ROAS"]) == keyword_confidence("my roas", ["roas"])


def test_substring_containment_counts():
    """'ads' is found inside 'google ads' and inside 'downloads'."""
    assert keyword_confidence("downloads", ["ads"]) > 0


@pytest.mark.parametrize(
    "query",
    ["", "budget", "why did my traffic drop on the landing page", "x" * 500],
)
def test_score_always_in_unit_interval(query):
    keywords = ["traffic", "drop", "landing page", "budget", "why did", "x"]
    score = keyword_confidence(query, keywords)

    assert 0.0 <= score <= 1.0


def test_keyword_weight_is_length_over_ten():
    assert keyword_weight("bounce") == pytest.approx(0.6)
    assert keyword_weight("time on site") == pytest.approx(1.2)


def test_matched_keywords_preserves_list_order():
    assert matched_keywords("spend and cpc by campaign", ["campaign", "cpc", "ctr", "spend"]) == [
        "campaign",
        "cpc",
        "spend",
    ]
