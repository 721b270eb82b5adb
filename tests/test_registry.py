"""Tests for the agent registry and catalog."""

import pytest

from oneassist.agents.generalists import DATA_MENTOR, GROWTH_STRATEGIST
from oneassist.agents.registry import AgentRegistry, build_default_registry
from oneassist.agents.specialists import build_specialists
from oneassist.models.agent import AgentMetadata


def test_registration_order(registry):
    assert [agent.id for agent in registry.all()] == [
        "traffic-intelligence",
        "ad-performance",
        "budget-optimization",
        "conversion-funnel",
        "anomaly-detection",
    ]


def test_generalists_not_scored(registry):
    assert "data-mentor" not in registry
    assert "growth-strategist" not in registry
    assert len(registry) == 5
    assert DATA_MENTOR.keywords == ()
    assert GROWTH_STRATEGIST.keywords == ()


def test_duplicate_id_rejected():
    specialists = build_specialists()

    with pytest.raises(ValueError, match="traffic-intelligence"):
        AgentRegistry(specialists + specialists[:1])


def test_get_and_require(registry):
    assert registry.get("ad-performance").display_name == "Ad Performance Agent"
    assert registry.get("nope") is None

    with pytest.raises(KeyError):
        registry.require("nope")


def test_by_capability(registry):
    assert [a.id for a in registry.by_capability("anomaly-detection")] == ["anomaly-detection"]
    assert registry.by_capability("time-travel") == []


def test_by_keyword_first_registered_wins(registry):
    """'budget' belongs to ad-performance and budget-optimization; ad-performance registered first."""
    assert registry.by_keyword("my BUDGET").id == "ad-performance"
    assert registry.by_keyword("nothing relevant here") is None


def test_metadata_covers_generalists(registry):
    assert registry.metadata("data-mentor") == AgentMetadata(
        id="data-mentor", name="Data Mentor", emoji="👨‍🏫"
    )
    assert registry.metadata("traffic-intelligence").emoji == "🚦"
    assert registry.metadata("nope") is None


def test_iteration_matches_all(registry):
    assert tuple(registry) == registry.all()


def test_registry_is_read_only(registry):
    with pytest.raises(TypeError):
        registry._agents["rogue"] = DATA_MENTOR


def test_agents_are_immutable(registry):
    agent = registry.require("traffic-intelligence")

    with pytest.raises(AttributeError):
        agent.keywords = ("hacked",)


def test_default_registry_builds_fresh_agents():
    first = build_default_registry()
    second = build_default_registry()

    assert first.require("ad-performance") == second.require("ad-performance")
