"""Pydantic models for OneAssist."""

from .agent import (
    AccountMode,
    Agent,
    AgentContext,
    AgentMetadata,
    Client,
    DateRange,
    Message,
    Persona,
    PlatformConnection,
    RouteDecision,
    SelectedFilters,
)
from .platform import (
    GAMultiPropertyData,
    GAProperty,
    GASinglePropertyData,
    GoogleAdsData,
    LinkedInAdsData,
    MetaAdsData,
    PlatformDataBundle,
)

__all__ = [
    # Agents and routing
    "AccountMode",
    "Agent",
    "AgentContext",
    "AgentMetadata",
    "Persona",
    "RouteDecision",
    # Query context
    "Client",
    "DateRange",
    "Message",
    "PlatformConnection",
    "SelectedFilters",
    # Platform payloads
    "PlatformDataBundle",
    "GAMultiPropertyData",
    "GAProperty",
    "GASinglePropertyData",
    "GoogleAdsData",
    "MetaAdsData",
    "LinkedInAdsData",
]
