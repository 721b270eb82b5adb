"""Select which agent answers a query.

Two policies:
- tutoring modes (education, instructor) always get the Data Mentor
- business mode scores every registered specialist by keyword match and
  falls back to the Growth Strategist when nothing clears the floor
"""

import logging
from typing import Optional

from ..agents.registry import AgentRegistry
from ..config import RoutingConfig
from ..models.agent import Agent, AgentContext, RouteDecision
from .scoring import keyword_confidence

logger = logging.getLogger(__name__)

TUTORING_REASONING = "Education mode: Using Data Mentor for guided learning"
FALLBACK_REASONING = "No specific keyword match - using general Growth Strategist"


class AgentRouter:
    """Deterministic keyword router over an :class:`AgentRegistry`.

    Same query and context always produce the same decision.
    """

    def __init__(self, registry: AgentRegistry, config: Optional[RoutingConfig] = None):
        """Initialize router.

        Args:
            registry: Specialists to score, plus the tutor and fallback agents
            config: Confidence thresholds (defaults when None)

        Raises:
            ValueError: If the registry has no agents to score
        """
        if len(registry) == 0:
            raise ValueError("AgentRouter needs at least one registered agent")
        self.registry = registry
        self.config = config or RoutingConfig()

    def scores(self, query: str) -> list[tuple[Agent, float]]:
        """Confidence for every registered agent, best first.

        Ties keep registration order (``sorted`` is stable).
        """
        query_lower = query.lower()
        scored = [(agent, keyword_confidence(query_lower, agent.keywords)) for agent in self.registry]
        return sorted(scored, key=lambda pair: pair[1], reverse=True)

    def route(self, query: str, context: AgentContext) -> RouteDecision:
        """Route a query to one agent.

        Args:
            query: User's question
            context: Per-query context; only ``mode`` affects selection

        Returns:
            RouteDecision with primary agent, reasoning and confidence
        """
        if context.mode.is_tutoring:
            decision = RouteDecision(
                primary_agent=self.registry.tutor,
                reasoning=TUTORING_REASONING,
                confidence=self.config.tutoring_confidence,
            )
            logger.info("Routed %s query to %s", context.mode.value, decision.primary_agent.id)
            return decision

        ranked = self.scores(query)
        for agent, confidence in ranked:
            logger.debug("Score %.3f for %s", confidence, agent.id)

        best_agent, best_confidence = ranked[0]
        if best_confidence < self.config.confidence_floor:
            decision = RouteDecision(
                primary_agent=self.registry.fallback,
                reasoning=FALLBACK_REASONING,
                confidence=self.config.fallback_confidence,
            )
        else:
            decision = RouteDecision(
                primary_agent=best_agent,
                reasoning=(
                    f"Keyword match: {best_confidence:.2f} confidence for {best_agent.display_name}"
                ),
                confidence=best_confidence,
            )

        logger.info(
            "Routed query to %s (confidence %.2f)",
            decision.primary_agent.id,
            decision.confidence,
        )
        return decision
