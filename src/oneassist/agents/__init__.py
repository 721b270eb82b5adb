"""Agent catalog: specialists, generalists and the registry."""

from .generalists import DATA_MENTOR, DATA_MENTOR_ID, GROWTH_STRATEGIST, GROWTH_STRATEGIST_ID
from .registry import AgentRegistry, build_default_registry
from .specialists import build_specialists

__all__ = [
    "AgentRegistry",
    "DATA_MENTOR",
    "DATA_MENTOR_ID",
    "GROWTH_STRATEGIST",
    "GROWTH_STRATEGIST_ID",
    "build_default_registry",
    "build_specialists",
]
