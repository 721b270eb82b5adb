"""Tests for the Google Analytics context sections."""

from oneassist.config import ContextLimits
from oneassist.context.google_analytics import (
    NO_TRAFFIC_LINE,
    format_google_analytics_multi,
    format_google_analytics_single,
)
from oneassist.models.platform import GAMultiPropertyData, GASinglePropertyData


def _multi(payload, property_id=None, limits=None):
    data = GAMultiPropertyData.model_validate(payload)
    return format_google_analytics_multi(data, property_id, limits or ContextLimits())


def test_property_metrics(ga_multi_payload):
    text = _multi(ga_multi_payload)

    assert "### Google Analytics (Last 30 days)" in text
    assert "#### Main Site (ID: 111)" in text
    assert "- Active Users Right Now: 12" in text
    assert "- Sessions: 12,500" in text
    assert "- Pageviews: 40,210" in text
    assert "- Bounce Rate: 45.2%" in text
    assert "- Engagement Rate: 61.0%" in text
    assert "- Avg Session Duration: 3m 12s" in text


def test_device_performance_block(ga_multi_payload):
    text = _multi(ga_multi_payload)

    assert "**Device Performance:**" in text
    assert "- mobile: 8,000 sessions (64.0% of traffic), bounce rate 58.0%" in text


def test_zero_traffic_property_gets_status_line_only(ga_multi_payload):
    text = _multi(ga_multi_payload)
    blog_section = text.split("#### Blog (ID: 222)", 1)[1]

    assert NO_TRAFFIC_LINE in blog_section
    assert "- Sessions:" not in blog_section
    assert "- Bounce Rate:" not in blog_section
    assert "Active Users" not in blog_section


def test_sources_truncated_to_first_five(ga_multi_payload):
    text = _multi(ga_multi_payload)

    assert "- google / organic: 6,000 sessions" in text
    assert "newsletter / email" in text
    assert "bing / organic" not in text


def test_limits_respected(ga_multi_payload):
    text = _multi(ga_multi_payload, limits=ContextLimits(max_sources=1))

    assert "google / organic" in text
    assert "(direct)" not in text


def test_combined_line_without_selection(ga_multi_payload):
    text = _multi(ga_multi_payload)

    assert "**Combined across 2 properties:** 12,500 sessions, 9,800 users, 40,210 pageviews" in text


def test_selected_property_callout_comes_first(ga_multi_payload):
    text = _multi(ga_multi_payload, property_id="111")

    assert text.startswith('> **SELECTED PROPERTY:** The user is looking at "Main Site" (ID: 111)')
    assert text.index("SELECTED PROPERTY") < text.index("### Google Analytics")
    assert "Combined across" not in text


def test_selected_property_from_payload(ga_multi_payload):
    ga_multi_payload["selectedPropertyId"] = "222"
    text = _multi(ga_multi_payload)

    assert '"Blog" (ID: 222)' in text.splitlines()[0]


def test_all_selection_gets_cumulative_callout(ga_multi_payload):
    text = _multi(ga_multi_payload, property_id="all")

    assert text.startswith("> **CUMULATIVE VIEW:**")
    assert "SELECTED PROPERTY" not in text
    assert "Combined across 2 properties" in text


def test_unknown_property_has_no_callout(ga_multi_payload):
    text = _multi(ga_multi_payload, property_id="999")

    assert not text.startswith(">")
    assert text.lstrip().startswith("### Google Analytics")


def test_no_properties():
    text = _multi({"properties": []})

    assert "No Google Analytics properties are available" in text


def test_single_property_fallback():
    data = GASinglePropertyData.model_validate(
        {
            "propertyName": "My Site",
            "metrics": {"sessions": 900, "users": 700, "pageviews": 2000, "bounceRate": 0.5},
            "dimensions": {"devices": [{"device": "tablet", "sessions": 100}]},
        }
    )
    text = format_google_analytics_single(data, None, ContextLimits())

    assert "### Google Analytics - My Site" in text
    assert "- Sessions: 900" in text
    assert "- Bounce Rate: 50.0%" in text
    assert "- tablet: 100 sessions" in text


def test_single_property_without_traffic():
    data = GASinglePropertyData.model_validate({"propertyName": "Empty", "metrics": {}})
    text = format_google_analytics_single(data, None, ContextLimits())

    assert NO_TRAFFIC_LINE in text
    assert "- Sessions:" not in text
