"""Quick-reply suggestions shown under the chat input.

Each suggestion's emoji hints at the agent that will pick it up when sent.
Selection is deterministic: same client, message count and last message
always yield the same list.
"""

from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

from .models.agent import Client

MAX_SUGGESTIONS = 3
MAX_PLATFORM_SUGGESTIONS = 2

SuggestionCategory = Literal["general", "metrics", "campaigns", "platforms", "insights"]


class Suggestion(BaseModel):
    """One quick-reply chip."""

    id: str = Field(description="Stable identifier")
    text: str = Field(description="Text sent as the user's message")
    category: SuggestionCategory

    model_config = ConfigDict(frozen=True)


def _pool(category: SuggestionCategory, *items: tuple[str, str]) -> tuple[Suggestion, ...]:
    return tuple(Suggestion(id=id_, text=text, category=category) for id_, text in items)


GENERAL = _pool(
    "general",
    ("audit-cpa", "💰 Audit my cross-channel CPA"),
    ("wasted-spend", "📊 Find wasted ad spend"),
    ("growth-plan", "🚦 Generate a 30-day growth plan"),
)

METRICS = _pool(
    "metrics",
    ("conversion-drop", "🎯 Analyze conversion drop-offs"),
    ("roas-compare", "💰 Compare ROAS by platform"),
    ("revenue-drivers", "📊 Identify top 3 revenue drivers"),
    ("traffic-quality", "🚦 Audit traffic quality"),
    ("engagement-audit", "🚦 Analyze engagement depth"),
)

CAMPAIGNS = _pool(
    "campaigns",
    ("bid-adjust", "💰 Suggest bid adjustments"),
    ("creative-fatigue", "💰 Find creative fatigue"),
    ("budget-optimize", "📊 Optimize budget allocation"),
    ("campaign-scale", "💰 Which campaigns should I scale?"),
)

INSIGHTS = _pool(
    "insights",
    ("opportunity", "📊 What is my biggest opportunity?"),
    ("execution-plan", "📊 Generate execution plan"),
    ("prediction", "⚠️ Predict next month's trend"),
    ("competitor", "📊 How do I beat the competition?"),
)

# Keyed by the client's platform connection keys, in priority order
PLATFORM_SUGGESTIONS = {
    "googleAnalytics": _pool(
        "platforms",
        ("ga-leaks", "🚦 Where am I losing visitors?"),
        ("ga-high-value", "🚦 Who are my best users?"),
        ("ga-landing", "🎯 Audit landing page performance"),
    ),
    "googleAds": _pool(
        "platforms",
        ("ads-waste", "💰 Find negative keyword opportunities"),
        ("ads-quality", "💰 Check Quality Score issues"),
        ("ads-cpa", "💰 Reduce Google Ads CPA"),
    ),
    "metaAds": _pool(
        "platforms",
        ("meta-creative", "💰 Audit creative performance"),
        ("meta-audience", "💰 Find audience saturation"),
        ("meta-scale", "💰 Scale winning ad sets"),
    ),
    "linkedInAds": _pool(
        "platforms",
        ("li-quality", "💰 Audit lead quality"),
        ("li-targeting", "💰 Refine B2B targeting"),
        ("li-cpl", "💰 Reduce Cost Per Lead"),
    ),
}

CATEGORY_POOLS: dict[str, tuple[Suggestion, ...]] = {
    "general": GENERAL,
    "metrics": METRICS,
    "campaigns": CAMPAIGNS,
    "insights": INSIGHTS,
    # Lead suggestion of each platform
    "platforms": tuple(pool[0] for pool in PLATFORM_SUGGESTIONS.values()),
}


def _connected(client: Client) -> list[str]:
    connected = set(client.connected_platforms())
    return [key for key in PLATFORM_SUGGESTIONS if key in connected]


def _platform_suggestions(connected: list[str]) -> list[Suggestion]:
    """First suggestion of up to two connected platforms, padded with a metric."""
    picked = [PLATFORM_SUGGESTIONS[key][0] for key in connected[:MAX_PLATFORM_SUGGESTIONS]]
    if len(picked) < MAX_PLATFORM_SUGGESTIONS:
        picked.append(METRICS[0])
    return picked


def _topical(message: str) -> Optional[list[Suggestion]]:
    lower = message.lower()
    if "campaign" in lower:
        return [CAMPAIGNS[0], CAMPAIGNS[1], METRICS[2]]
    if "traffic" in lower or "visitor" in lower:
        return [METRICS[3], METRICS[4], INSIGHTS[2]]
    if "conversion" in lower or "roi" in lower:
        return [METRICS[1], METRICS[2], CAMPAIGNS[2]]
    if "help" in lower or "can you" in lower:
        return [GENERAL[1], METRICS[0], INSIGHTS[1]]
    return None


def generate_suggestions(
    client: Optional[Client],
    message_count: int,
    last_message: Optional[str] = None,
) -> list[Suggestion]:
    """Pick up to three quick replies for the current conversation state.

    Args:
        client: Selected client, or None
        message_count: Messages in the conversation so far
        last_message: Most recent message text, if any

    Returns:
        At most three suggestions
    """
    if message_count <= 1:
        return [GENERAL[0], METRICS[0], INSIGHTS[0]]

    if client is None:
        return [GENERAL[2], GENERAL[0]]

    connected = _connected(client)

    if last_message:
        suggestions = _topical(last_message)
        if suggestions is None:
            suggestions = _platform_suggestions(connected) + [INSIGHTS[3]]
    else:
        suggestions = _platform_suggestions(connected) + [GENERAL[1], INSIGHTS[0]]

    return suggestions[:MAX_SUGGESTIONS]


def suggestions_for_category(category: str, count: int = MAX_SUGGESTIONS) -> list[Suggestion]:
    """First ``count`` suggestions of a category; empty for unknown categories."""
    return list(CATEGORY_POOLS.get(category, ()))[:count]
