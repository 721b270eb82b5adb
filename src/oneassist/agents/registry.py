"""Immutable agent registry.

Built once at startup and passed explicitly to the router; there is no
module-level catalog.
"""

from types import MappingProxyType
from typing import Iterable, Iterator, Optional

from ..config import ContextLimits
from ..models.agent import Agent, AgentMetadata
from .generalists import DATA_MENTOR, GROWTH_STRATEGIST, make_data_mentor, make_growth_strategist
from .specialists import build_specialists


class AgentRegistry:
    """Keyword-routed specialists plus the two generalists.

    Registration order is preserved and is the routing tie-break order.
    The generalists (``tutor`` and ``fallback``) are reachable through
    :meth:`metadata` but are never scored.
    """

    def __init__(
        self,
        agents: Iterable[Agent],
        *,
        tutor: Agent = DATA_MENTOR,
        fallback: Agent = GROWTH_STRATEGIST,
    ):
        """Register agents.

        Raises:
            ValueError: If two agents share an id
        """
        by_id: dict[str, Agent] = {}
        for agent in agents:
            if agent.id in by_id:
                raise ValueError(f"Duplicate agent id: {agent.id}")
            by_id[agent.id] = agent

        self._agents = MappingProxyType(by_id)
        self.tutor = tutor
        self.fallback = fallback

    def get(self, agent_id: str) -> Optional[Agent]:
        return self._agents.get(agent_id)

    def require(self, agent_id: str) -> Agent:
        """Like :meth:`get` but raises ``KeyError`` for an unknown id."""
        agent = self._agents.get(agent_id)
        if agent is None:
            raise KeyError(f"Unknown agent id: {agent_id}")
        return agent

    def all(self) -> tuple[Agent, ...]:
        return tuple(self._agents.values())

    def by_capability(self, capability: str) -> list[Agent]:
        return [agent for agent in self._agents.values() if capability in agent.capabilities]

    def by_keyword(self, query: str) -> Optional[Agent]:
        """First agent (registration order) with any keyword in the query."""
        query_lower = query.lower()
        for agent in self._agents.values():
            if any(keyword.lower() in query_lower for keyword in agent.keywords):
                return agent
        return None

    def metadata(self, agent_id: str) -> Optional[AgentMetadata]:
        agent = self._agents.get(agent_id)
        if agent is None:
            agent = next((g for g in (self.tutor, self.fallback) if g.id == agent_id), None)
        return agent.metadata() if agent is not None else None

    def __contains__(self, agent_id: object) -> bool:
        return agent_id in self._agents

    def __len__(self) -> int:
        return len(self._agents)

    def __iter__(self) -> Iterator[Agent]:
        return iter(self._agents.values())


def build_default_registry(limits: Optional[ContextLimits] = None) -> AgentRegistry:
    """Registry with the standard specialists and generalists.

    Args:
        limits: Context row caps baked into every agent's prompt template
    """
    return AgentRegistry(
        build_specialists(limits),
        tutor=make_data_mentor(limits),
        fallback=make_growth_strategist(limits),
    )
