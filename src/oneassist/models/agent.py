"""Models for agents, per-query context and routing decisions."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Callable, Optional

from pydantic import BaseModel, ConfigDict, Field, InstanceOf, model_validator
from pydantic.alias_generators import to_camel

from .platform import PlatformDataBundle


class AccountMode(str, Enum):
    """Account type of the user asking the question."""

    BUSINESS = "business"
    EDUCATION = "education"
    INSTRUCTOR = "instructor"

    @property
    def is_tutoring(self) -> bool:
        return self in (AccountMode.EDUCATION, AccountMode.INSTRUCTOR)


class Persona(str, Enum):
    """Instructional voice of the composed prompt."""

    TUTOR = "tutor"
    STRATEGIST = "strategist"

    @classmethod
    def for_mode(cls, mode: AccountMode) -> "Persona":
        return cls.TUTOR if mode.is_tutoring else cls.STRATEGIST


class _InboundModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        coerce_numbers_to_str=True,
        frozen=True,
        extra="ignore",
    )


class Message(_InboundModel):
    """One turn of the conversation history."""

    role: str = Field(description="user, assistant or system")
    content: str = Field(default="")
    timestamp: Optional[datetime] = Field(default=None)
    agent_id: Optional[str] = Field(default=None, description="Agent that produced the reply")
    agent_name: Optional[str] = Field(default=None)


class PlatformConnection(_InboundModel):
    """Connection state of one platform for a client."""

    connected: bool = Field(default=False)
    status: str = Field(default="disconnected")

    model_config = ConfigDict(extra="allow")


class Client(_InboundModel):
    """Client whose data is being discussed. Owned by client management."""

    id: str = Field(default="")
    name: str = Field(description="Client display name")
    platforms: dict[str, PlatformConnection] = Field(default_factory=dict)

    @model_validator(mode="before")
    @classmethod
    def _drop_unknown_platforms(cls, data: Any) -> Any:
        if not isinstance(data, dict) or "platforms" not in data:
            return data
        platforms = data["platforms"]
        # Unconfigured platforms may arrive as null
        return {
            **data,
            "platforms": {
                key: conn
                for key, conn in (platforms.items() if isinstance(platforms, dict) else ())
                if isinstance(conn, (dict, PlatformConnection))
            },
        }

    def connected_platforms(self) -> list[str]:
        """Platform keys with an active connection, in stored order."""
        return [key for key, conn in self.platforms.items() if conn.connected]


class DateRange(_InboundModel):
    start_date: Optional[str] = Field(default=None)
    end_date: Optional[str] = Field(default=None)


class SelectedFilters(_InboundModel):
    """User-selected drill-down entities for the current query."""

    property_id: Optional[str] = Field(default=None)
    meta_campaign_id: Optional[str] = Field(default=None)
    google_ads_campaign_id: Optional[str] = Field(default=None)
    linked_in_campaign_group_id: Optional[str] = Field(default=None)
    linked_in_campaign_id: Optional[str] = Field(default=None)

    @model_validator(mode="before")
    @classmethod
    def _drop_unusable_ids(cls, data: Any) -> Any:
        if isinstance(data, BaseModel):
            return data
        if not isinstance(data, dict):
            return {}
        return {
            key: value
            for key, value in data.items()
            if isinstance(value, (str, int, float)) and not isinstance(value, bool)
        }


# Flat keys used by the chat layer before filters were grouped
_LEGACY_FILTER_KEYS = {
    "selectedPropertyId": "propertyId",
    "selectedMetaCampaignId": "metaCampaignId",
    "selectedGoogleAdsCampaignId": "googleAdsCampaignId",
    "selectedLinkedInCampaignGroupId": "linkedInCampaignGroupId",
    "selectedLinkedInCampaignId": "linkedInCampaignId",
}


class AgentContext(_InboundModel):
    """Everything known about one incoming query.

    Built fresh per query by the chat layer and never shared between calls.
    """

    client: Optional[Client] = Field(default=None)
    platform_data: Optional[PlatformDataBundle] = Field(default=None)
    conversation_history: list[Message] = Field(default_factory=list)
    query: str = Field(default="")
    date_range: Optional[DateRange] = Field(default=None)
    mode: AccountMode = Field(default=AccountMode.BUSINESS)
    selected_filters: SelectedFilters = Field(default_factory=SelectedFilters)

    @model_validator(mode="before")
    @classmethod
    def _lift_legacy_keys(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        data = {k: v for k, v in data.items() if v is not None}

        if "accountType" in data and "mode" not in data:
            data["mode"] = data.pop("accountType")

        legacy = {
            new: data.pop(old) for old, new in _LEGACY_FILTER_KEYS.items() if old in data
        }
        if legacy:
            filters = data.get("selectedFilters") or data.get("selected_filters") or {}
            if isinstance(filters, dict):
                data["selectedFilters"] = {**legacy, **filters}
                data.pop("selected_filters", None)
        return data

    @property
    def persona(self) -> Persona:
        return Persona.for_mode(self.mode)

    @property
    def platforms(self) -> PlatformDataBundle:
        """Platform data, never None."""
        return self.platform_data or PlatformDataBundle()


@dataclass(frozen=True)
class AgentMetadata:
    id: str
    name: str
    emoji: str


@dataclass(frozen=True)
class Agent:
    """A named persona with routing keywords and a prompt template.

    Immutable once registered; identity is ``id``.
    """

    id: str
    display_name: str
    emoji: str
    description: str
    capabilities: frozenset[str]
    keywords: tuple[str, ...]
    prompt_template: Callable[[AgentContext], str] = field(compare=False, repr=False)

    def metadata(self) -> AgentMetadata:
        return AgentMetadata(id=self.id, name=self.display_name, emoji=self.emoji)


class RouteDecision(BaseModel):
    """Which agent should answer a query, and why."""

    primary_agent: InstanceOf[Agent] = Field(description="Agent that answers the query")
    supporting_agents: list[InstanceOf[Agent]] = Field(default_factory=list)
    reasoning: str = Field(default="", description="Human-readable explanation of routing decision")
    confidence: float = Field(ge=0.0, le=1.0, description="Confidence score (0.0-1.0)")

    model_config = ConfigDict(frozen=True)
