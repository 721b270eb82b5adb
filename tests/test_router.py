"""Tests for agent routing."""

import logging

import pytest

from oneassist.agents.registry import AgentRegistry
from oneassist.config import RoutingConfig
from oneassist.models.agent import AccountMode, Agent, AgentContext
from oneassist.routing.router import FALLBACK_REASONING, TUTORING_REASONING, AgentRouter


def _agent(agent_id: str, keywords: tuple[str, ...]) -> Agent:
    return Agent(
        id=agent_id,
        display_name=agent_id.title(),
        emoji="*",
        description="test agent",
        capabilities=frozenset(),
        keywords=keywords,
        prompt_template=lambda ctx: agent_id,
    )


class TestTutoringModes:
    """Education and instructor accounts always get the Data Mentor."""

    @pytest.mark.parametrize("mode", [AccountMode.EDUCATION, AccountMode.INSTRUCTOR])
    def test_tutor_regardless_of_query(self, router, mode):
        context = AgentContext(mode=mode)

        for query in ["why is my bounce rate so high", "roas on google ads", "hello"]:
            decision = router.route(query, context)

            assert decision.primary_agent.id == "data-mentor"
            assert decision.confidence == 1.0
            assert decision.reasoning == TUTORING_REASONING
            assert decision.supporting_agents == []

    def test_account_type_alias_selects_tutor(self, router):
        context = AgentContext.model_validate({"accountType": "education"})

        assert router.route("campaign spend", context).primary_agent.id == "data-mentor"


class TestBusinessMode:
    """Business accounts are scored against every registered specialist."""

    def test_bounce_query_routes_to_traffic_intelligence(self, router):
        decision = router.route("Why is my bounce rate so high on mobile", AgentContext())

        assert decision.primary_agent.id == "traffic-intelligence"
        assert decision.confidence > 0.1
        assert decision.reasoning.startswith("Keyword match: 0.13 confidence for Traffic Intelligence Agent")

    @pytest.mark.parametrize(
        "query,expected",
        [
            ("Show me the funnel", "conversion-funnel"),
            ("Any unusual spike this week", "anomaly-detection"),
            ("Is there a checkout problem", "conversion-funnel"),
            ("What is my ROAS on google ads", "ad-performance"),
            ("Should I reallocate money", "budget-optimization"),
        ],
    )
    def test_keyword_routes(self, router, query, expected):
        assert router.route(query, AgentContext()).primary_agent.id == expected

    def test_unmatched_query_falls_back_to_growth_strategist(self, router):
        decision = router.route("hello there", AgentContext())

        assert decision.primary_agent.id == "growth-strategist"
        assert decision.confidence == 0.5
        assert decision.reasoning == FALLBACK_REASONING

    def test_weak_match_below_floor_falls_back(self, router):
        """A single 'ads' match scores 1/18 + 0.3/18, under the 0.1 floor."""
        decision = router.route("any thoughts on ads", AgentContext())

        assert decision.primary_agent.id == "growth-strategist"

    def test_ties_go_to_first_registered(self):
        registry = AgentRegistry([_agent("first", ("report",)), _agent("second", ("report",))])
        router = AgentRouter(registry)

        decision = router.route("monthly report", AgentContext())

        assert decision.primary_agent.id == "first"

    def test_scores_sorted_best_first(self, router):
        ranked = router.scores("Why did my traffic drop")
        confidences = [confidence for _, confidence in ranked]

        assert confidences == sorted(confidences, reverse=True)
        assert len(ranked) == 5

    def test_custom_floor(self, registry):
        router = AgentRouter(registry, RoutingConfig(confidence_floor=0.5, fallback_confidence=0.4))

        decision = router.route("Why is my bounce rate so high on mobile", AgentContext())

        assert decision.primary_agent.id == "growth-strategist"
        assert decision.confidence == 0.4

    def test_deterministic(self, router):
        context = AgentContext()
        first = router.route("what happened to my campaign spend", context)
        second = router.route("what happened to my campaign spend", context)

        assert first.primary_agent.id == second.primary_agent.id
        assert first.confidence == second.confidence
        assert first.reasoning == second.reasoning


def test_empty_registry_rejected():
    with pytest.raises(ValueError):
        AgentRouter(AgentRegistry([]))


def test_decision_logged_at_info(router, caplog):
    with caplog.at_level(logging.INFO, logger="oneassist.routing.router"):
        router.route("hello there", AgentContext())

    assert "growth-strategist" in caplog.text
