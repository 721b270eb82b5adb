"""Pydantic models for platform analytics payloads.

Payloads arrive from the platform-fetch layer as loosely shaped JSON with
camelCase keys. Every record here defaults at the boundary: a missing, null
or non-numeric number becomes 0, a missing list becomes empty, and a nested
record of the wrong shape falls back to its empty default. Formatters can
read any field without guarding it.
"""

import math
import types
from typing import Any, Optional, Union, get_args, get_origin

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel

_MISSING = object()


def _as_number(value: Any) -> float:
    """Coerce a raw payload value to a finite float, 0.0 when impossible."""
    if isinstance(value, bool):
        return 0.0
    if isinstance(value, (int, float)):
        number = float(value)
    elif isinstance(value, str):
        try:
            number = float(value.strip().replace(",", ""))
        except ValueError:
            return 0.0
    else:
        return 0.0
    if math.isnan(number) or math.isinf(number):
        return 0.0
    return number


def _unwrap_optional(annotation: Any) -> Any:
    origin = get_origin(annotation)
    if origin is Union or origin is types.UnionType:
        args = [arg for arg in get_args(annotation) if arg is not type(None)]
        if len(args) == 1:
            return args[0]
    return annotation


def _is_model(annotation: Any) -> bool:
    return isinstance(annotation, type) and issubclass(annotation, BaseModel)


def _accepts_item(item_type: Any, item: Any) -> bool:
    if _is_model(item_type):
        return isinstance(item, (dict, BaseModel))
    if item_type is str:
        return isinstance(item, str)
    return item is not None


def _coerce_field(annotation: Any, value: Any) -> Any:
    target = _unwrap_optional(annotation)

    if target is float:
        return _as_number(value)
    if target is int:
        return int(_as_number(value))
    if target is str:
        if isinstance(value, str):
            return value
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return str(value)
        # Error records collapse to their message
        if isinstance(value, dict) and isinstance(value.get("message"), str):
            return value["message"]
        return _MISSING
    if get_origin(target) is list:
        if not isinstance(value, (list, tuple)):
            return _MISSING
        args = get_args(target)
        item_type = args[0] if args else Any
        return [item for item in value if _accepts_item(item_type, item)]
    if _is_model(target):
        return value if isinstance(value, (dict, BaseModel)) else _MISSING
    return value


def _payload_keys(name: str, field: Any) -> list[str]:
    """Keys a field may arrive under, in lookup order."""
    keys = [field.alias] if field.alias else []
    alias = field.validation_alias
    if isinstance(alias, AliasChoices):
        keys.extend(choice for choice in alias.choices if isinstance(choice, str))
    elif isinstance(alias, str):
        keys.append(alias)
    keys.append(name)
    return keys


class PayloadModel(BaseModel):
    """Base for platform payload records with boundary defaulting."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        extra="ignore",
    )

    @model_validator(mode="before")
    @classmethod
    def _default_at_boundary(cls, data: Any) -> Any:
        if isinstance(data, BaseModel):
            return data
        if not isinstance(data, dict):
            return {}
        data = cls._flatten(data)

        cleaned: dict[str, Any] = {}
        for name, field in cls.model_fields.items():
            key = next((k for k in _payload_keys(name, field) if data.get(k) is not None), None)
            if key is None:
                continue
            value = _coerce_field(field.annotation, data[key])
            if value is not _MISSING:
                cleaned[name] = value
        return cleaned

    @classmethod
    def _flatten(cls, data: dict[str, Any]) -> dict[str, Any]:
        """Hook for records whose figures may arrive nested."""
        return data


# ---------------------------------------------------------------------------
# Google Analytics
# ---------------------------------------------------------------------------


class TrafficSource(PayloadModel):
    source: str = "(not set)"
    medium: str = ""
    sessions: float = 0
    users: float = 0


class DeviceRow(PayloadModel):
    device: str = "unknown"
    sessions: float = 0
    users: float = 0
    percentage: float = 0
    bounce_rate: float = 0
    avg_session_duration: float = 0


class PageRow(PayloadModel):
    page: str = ""
    title: str = ""
    views: float = 0
    avg_time: float = 0


class CountryRow(PayloadModel):
    country: str = "(not set)"
    users: float = 0
    sessions: float = 0


class CityRow(PayloadModel):
    city: str = "(not set)"
    country: str = ""
    users: float = 0
    sessions: float = 0


class RegionRow(PayloadModel):
    region: str = "(not set)"
    country: str = ""
    users: float = 0
    sessions: float = 0


class DailyRow(PayloadModel):
    date: str = ""
    sessions: float = 0
    users: float = 0
    pageviews: float = 0


class RealtimeDevice(PayloadModel):
    device: str = "unknown"
    users: float = 0


class GARealtime(PayloadModel):
    active_users: float = 0
    by_device: list[RealtimeDevice] = Field(default_factory=list)


class GAMetrics(PayloadModel):
    sessions: float = 0
    users: float = 0
    new_users: float = 0
    pageviews: float = 0
    bounce_rate: float = 0
    avg_session_duration: float = 0
    engagement_rate: float = 0
    sessions_per_user: float = 0
    event_count: float = 0


class GADimensions(PayloadModel):
    top_sources: list[TrafficSource] = Field(default_factory=list)
    devices: list[DeviceRow] = Field(default_factory=list)
    top_pages: list[PageRow] = Field(default_factory=list)
    countries: list[CountryRow] = Field(default_factory=list)
    cities: list[CityRow] = Field(default_factory=list)
    regions: list[RegionRow] = Field(default_factory=list)
    daily: list[DailyRow] = Field(default_factory=list)


class GAProperty(PayloadModel):
    property_id: str = ""
    property_name: str = ""
    realtime: Optional[GARealtime] = None
    metrics: GAMetrics = Field(default_factory=GAMetrics)
    dimensions: GADimensions = Field(default_factory=GADimensions)

    @property
    def label(self) -> str:
        return self.property_name or self.property_id or "Unnamed property"

    @property
    def has_traffic(self) -> bool:
        m = self.metrics
        active = self.realtime.active_users if self.realtime else 0
        return any(v > 0 for v in (m.sessions, m.users, m.pageviews, active))


class GAMultiPropertyData(PayloadModel):
    properties: list[GAProperty] = Field(default_factory=list)
    date_range: str = ""
    selected_property_id: str = ""

    def find(self, property_id: str) -> Optional[GAProperty]:
        for prop in self.properties:
            if prop.property_id == property_id:
                return prop
        return None


class GASinglePropertyData(PayloadModel):
    """Older single-property shape, kept as a fallback."""

    property_name: str = ""
    metrics: GAMetrics = Field(default_factory=GAMetrics)
    dimensions: GADimensions = Field(default_factory=GADimensions)
    date_range: str = ""


# ---------------------------------------------------------------------------
# Google Ads
# ---------------------------------------------------------------------------


class GoogleAdsCustomer(PayloadModel):
    id: str = ""
    name: str = ""
    currency: str = ""
    time_zone: str = ""


class GoogleAdsMetrics(PayloadModel):
    """Account totals. Practice scenarios report ``spend``/``cpc`` instead of ``cost``/``avgCpc``."""

    impressions: float = 0
    clicks: float = 0
    cost: float = Field(default=0, validation_alias=AliasChoices("cost", "spend"))
    conversions: float = 0
    conversion_value: float = Field(
        default=0, validation_alias=AliasChoices("conversionValue", "conversionsValue")
    )
    # Already a percentage
    ctr: float = 0
    avg_cpc: float = Field(default=0, validation_alias=AliasChoices("avgCpc", "cpc"))
    currency: str = ""


class GoogleAdsCampaign(PayloadModel):
    id: str = ""
    name: str = "Unnamed campaign"
    status: str = ""
    type: str = ""
    impressions: float = 0
    clicks: float = 0
    cost: float = Field(default=0, validation_alias=AliasChoices("cost", "spend"))
    conversions: float = 0
    ctr: float = 0


class GoogleAdsData(PayloadModel):
    customers: list[GoogleAdsCustomer] = Field(default_factory=list)
    metrics: GoogleAdsMetrics = Field(default_factory=GoogleAdsMetrics)
    campaigns: list[GoogleAdsCampaign] = Field(default_factory=list)
    date_range: str = ""
    developer_token_status: str = "active"
    api_error: str = ""

    @property
    def currency(self) -> str:
        if self.metrics.currency:
            return self.metrics.currency
        for customer in self.customers:
            if customer.currency:
                return customer.currency
        return ""


# ---------------------------------------------------------------------------
# Meta Ads
# ---------------------------------------------------------------------------


class MetaAccount(PayloadModel):
    id: str = ""
    name: str = ""
    status: str = ""
    currency: str = ""


class MetaCampaignMetrics(PayloadModel):
    impressions: float = 0
    reach: float = 0
    clicks: float = 0
    spend: float = 0
    ctr: float = 0
    cpc: float = 0
    cpm: float = 0
    frequency: float = 0
    inline_link_clicks: float = 0
    purchases: float = 0
    leads: float = 0
    cost_per_purchase: float = 0
    cost_per_lead: float = 0
    roas: float = 0
    registrations: float = 0
    add_to_carts: float = 0
    checkouts: float = 0
    content_views: float = 0


class MetaMetrics(MetaCampaignMetrics):
    video_p25_watched_actions: float = 0
    video_p50_watched_actions: float = 0
    video_p100_watched_actions: float = 0
    cost_per_registration: float = 0
    cost_per_add_to_cart: float = 0
    currency: str = ""


class MetaCampaign(PayloadModel):
    id: str = ""
    name: str = "Unnamed campaign"
    status: str = ""
    objective: str = ""
    metrics: MetaCampaignMetrics = Field(default_factory=MetaCampaignMetrics)


class MetaDemographic(PayloadModel):
    age: str = "unknown"
    gender: str = "unknown"
    impressions: float = 0
    clicks: float = 0
    spend: float = 0


class MetaGeography(PayloadModel):
    country: str = ""
    region: str = ""
    impressions: float = 0
    clicks: float = 0
    spend: float = 0


class MetaDevice(PayloadModel):
    device_platform: str = "unknown"
    impressions: float = 0
    clicks: float = 0
    spend: float = 0


class MetaPublisherPlatform(PayloadModel):
    publisher_platform: str = "unknown"
    impressions: float = 0
    clicks: float = 0
    spend: float = 0


class MetaAdsData(PayloadModel):
    accounts: list[MetaAccount] = Field(default_factory=list)
    metrics: MetaMetrics = Field(default_factory=MetaMetrics)
    campaigns: list[MetaCampaign] = Field(default_factory=list)
    demographics: list[MetaDemographic] = Field(default_factory=list)
    geography: list[MetaGeography] = Field(default_factory=list)
    devices: list[MetaDevice] = Field(default_factory=list)
    publisher_platforms: list[MetaPublisherPlatform] = Field(default_factory=list)
    date_range: str = ""
    api_error: str = ""

    @property
    def currency(self) -> str:
        if self.metrics.currency:
            return self.metrics.currency
        for account in self.accounts:
            if account.currency:
                return account.currency
        return ""


# ---------------------------------------------------------------------------
# LinkedIn Ads
# ---------------------------------------------------------------------------


class LinkedInAccount(PayloadModel):
    id: str = ""
    name: str = ""
    status: str = ""
    currency: str = ""


class LinkedInEngagement(PayloadModel):
    likes: float = 0
    comments: float = 0
    shares: float = 0
    total_engagements: float = 0
    reactions: float = 0
    follows: float = 0
    company_page_clicks: float = 0
    other_engagements: float = 0
    engagement_rate: float = 0
    cost_per_engagement: float = 0


class LinkedInConversions(PayloadModel):
    total: float = 0
    post_click: float = 0
    post_view: float = 0
    landing_page_clicks: float = 0
    cost_per_conversion: float = 0


class LinkedInLeads(PayloadModel):
    total: float = 0
    qualified: float = 0
    form_opens: float = 0
    quality_rate: float = 0
    cost_per_lead: float = 0


class LinkedInVideo(PayloadModel):
    starts: float = 0
    views: float = 0
    completions: float = 0
    completion_rate: float = 0


class LinkedInReach(PayloadModel):
    unique_members: float = 0
    average_dwell_time: float = 0


class LinkedInMetrics(PayloadModel):
    impressions: float = 0
    clicks: float = 0
    ctr: float = 0
    spend: float = 0
    cpc: float = 0
    currency: str = ""
    engagement: LinkedInEngagement = Field(default_factory=LinkedInEngagement)
    conversions: LinkedInConversions = Field(default_factory=LinkedInConversions)
    leads: LinkedInLeads = Field(default_factory=LinkedInLeads)
    video: Optional[LinkedInVideo] = None
    reach: Optional[LinkedInReach] = None


class LinkedInCampaignGroup(PayloadModel):
    id: str = ""
    name: str = "Unnamed campaign group"
    status: str = ""
    impressions: float = 0
    clicks: float = 0
    spend: float = 0


class LinkedInCampaign(PayloadModel):
    id: str = ""
    name: str = "Unnamed campaign"
    status: str = ""
    type: str = ""
    campaign_group_id: str = ""
    impressions: float = 0
    clicks: float = 0
    spend: float = 0
    conversions: float = 0
    leads: float = 0

    @classmethod
    def _flatten(cls, data: dict[str, Any]) -> dict[str, Any]:
        # Practice scenarios nest figures under "metrics"; top-level keys win
        nested = data.get("metrics")
        if not isinstance(nested, dict):
            return data
        return {**nested, **{k: v for k, v in data.items() if v is not None}}


class LinkedInAdsData(PayloadModel):
    accounts: list[LinkedInAccount] = Field(default_factory=list)
    metrics: LinkedInMetrics = Field(default_factory=LinkedInMetrics)
    campaign_groups: list[LinkedInCampaignGroup] = Field(default_factory=list)
    campaigns: list[LinkedInCampaign] = Field(default_factory=list)
    date_range: str = ""
    api_error: str = ""

    @property
    def currency(self) -> str:
        if self.metrics.currency:
            return self.metrics.currency
        for account in self.accounts:
            if account.currency:
                return account.currency
        return ""


# ---------------------------------------------------------------------------
# Bundle
# ---------------------------------------------------------------------------


PRACTICE_SOURCES = frozenset({"mock", "mock-cached"})


class PlatformDataBundle(PayloadModel):
    """All platform payloads available for one query."""

    google_analytics: Optional[GASinglePropertyData] = None
    google_analytics_multi: Optional[GAMultiPropertyData] = None
    google_ads: Optional[GoogleAdsData] = None
    meta_ads: Optional[MetaAdsData] = None
    linked_in_ads: Optional[LinkedInAdsData] = None

    # Present when the data came from a practice scenario
    data_source: str = Field(default="", alias="_source")
    scenario_name: str = ""
    scenario_id: str = ""
    difficulty: str = ""

    @classmethod
    def from_payload(cls, payload: Any) -> "PlatformDataBundle":
        if isinstance(payload, cls):
            return payload
        return cls.model_validate(payload if isinstance(payload, dict) else {})

    @property
    def is_empty(self) -> bool:
        return all(
            platform is None
            for platform in (
                self.google_analytics,
                self.google_analytics_multi,
                self.google_ads,
                self.meta_ads,
                self.linked_in_ads,
            )
        )

    @property
    def is_practice(self) -> bool:
        return self.data_source in PRACTICE_SOURCES
