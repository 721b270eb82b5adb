"""Google Analytics sections of the platform context."""

from __future__ import annotations

import logging
from typing import Optional

from ..config import ContextLimits
from ..models.platform import (
    GADimensions,
    GAMetrics,
    GAMultiPropertyData,
    GAProperty,
    GARealtime,
    GASinglePropertyData,
)
from .formatting import (
    callout,
    format_duration,
    format_number,
    format_percent,
    is_all_selection,
)

logger = logging.getLogger(__name__)

NO_TRAFFIC_LINE = "- Status: no traffic in range for this property. Do not report metrics for it."


def _metric_lines(metrics: GAMetrics) -> list[str]:
    lines = [
        f"- Sessions: {format_number(metrics.sessions)}",
        f"- Users: {format_number(metrics.users)}",
    ]
    if metrics.new_users:
        lines.append(f"- New Users: {format_number(metrics.new_users)}")
    lines.append(f"- Pageviews: {format_number(metrics.pageviews)}")
    lines.append(f"- Bounce Rate: {format_percent(metrics.bounce_rate)}")
    if metrics.engagement_rate:
        lines.append(f"- Engagement Rate: {format_percent(metrics.engagement_rate)}")
    lines.append(f"- Avg Session Duration: {format_duration(metrics.avg_session_duration)}")
    if metrics.sessions_per_user:
        lines.append(f"- Sessions per User: {metrics.sessions_per_user:.2f}")
    if metrics.event_count:
        lines.append(f"- Events: {format_number(metrics.event_count)}")
    return lines


def _realtime_lines(realtime: GARealtime, limits: ContextLimits) -> list[str]:
    lines = [f"- Active Users Right Now: {format_number(realtime.active_users)}"]
    devices = realtime.by_device[: limits.max_realtime_devices]
    if devices:
        breakdown = ", ".join(f"{d.device} {format_number(d.users)}" for d in devices)
        lines.append(f"  - By device: {breakdown}")
    return lines


def _dimension_lines(dimensions: GADimensions, limits: ContextLimits) -> list[str]:
    lines: list[str] = []

    sources = dimensions.top_sources[: limits.max_sources]
    if sources:
        lines.append("\n**Traffic Sources:**")
        for src in sources:
            name = f"{src.source} / {src.medium}" if src.medium else src.source
            entry = f"- {name}: {format_number(src.sessions)} sessions"
            if src.users:
                entry += f" ({format_number(src.users)} users)"
            lines.append(entry)

    devices = dimensions.devices[: limits.max_devices]
    if devices:
        lines.append("\n**Device Performance:**")
        for dev in devices:
            entry = f"- {dev.device}: {format_number(dev.sessions)} sessions"
            if dev.percentage:
                entry += f" ({format_percent(dev.percentage, fraction=False)} of traffic)"
            if dev.bounce_rate:
                entry += f", bounce rate {format_percent(dev.bounce_rate)}"
            if dev.avg_session_duration:
                entry += f", avg session {format_duration(dev.avg_session_duration)}"
            lines.append(entry)

    pages = dimensions.top_pages[: limits.max_pages]
    if pages:
        lines.append("\n**Top Pages:**")
        for page in pages:
            entry = f"- {page.page or page.title or '(unknown page)'}: {format_number(page.views)} views"
            if page.avg_time:
                entry += f", avg time {format_duration(page.avg_time)}"
            lines.append(entry)

    countries = dimensions.countries[: limits.max_countries]
    if countries:
        lines.append("\n**Top Countries:**")
        lines.extend(f"- {c.country}: {format_number(c.users)} users" for c in countries)

    cities = dimensions.cities[: limits.max_cities]
    if cities:
        lines.append("\n**Top Cities:**")
        for city in cities:
            name = f"{city.city}, {city.country}" if city.country else city.city
            lines.append(f"- {name}: {format_number(city.users)} users")

    regions = dimensions.regions[: limits.max_regions]
    if regions:
        lines.append("\n**Top Regions:**")
        lines.extend(f"- {r.region}: {format_number(r.users)} users" for r in regions)

    return lines


def _property_lines(prop: GAProperty, limits: ContextLimits) -> list[str]:
    header = f"\n#### {prop.label}"
    if prop.property_id:
        header += f" (ID: {prop.property_id})"
    lines = [header]

    if not prop.has_traffic:
        lines.append(NO_TRAFFIC_LINE)
        return lines

    if prop.realtime is not None:
        lines.extend(_realtime_lines(prop.realtime, limits))
    lines.extend(_metric_lines(prop.metrics))
    lines.extend(_dimension_lines(prop.dimensions, limits))
    return lines


def _combined_line(properties: list[GAProperty]) -> str:
    sessions = sum(p.metrics.sessions for p in properties)
    users = sum(p.metrics.users for p in properties)
    pageviews = sum(p.metrics.pageviews for p in properties)
    return (
        f"**Combined across {len(properties)} properties:** "
        f"{format_number(sessions)} sessions, {format_number(users)} users, "
        f"{format_number(pageviews)} pageviews"
    )


def format_google_analytics_multi(
    data: GAMultiPropertyData,
    property_id: Optional[str],
    limits: ContextLimits,
) -> str:
    """Format multi-property Google Analytics data.

    A selected property gets a callout naming it ahead of everything else;
    the ``all`` selection gets a cumulative-view callout instead.
    """
    lines: list[str] = []
    selected_id = property_id or data.selected_property_id or None
    cumulative = is_all_selection(selected_id)

    if cumulative:
        lines.append(
            callout(
                "CUMULATIVE VIEW",
                f"The user selected all Google Analytics properties ({len(data.properties)}). "
                "Answer with combined totals across every property and compare them where useful.",
            )
        )
    elif selected_id:
        selected = data.find(selected_id)
        if selected is not None:
            lines.append(
                callout(
                    "SELECTED PROPERTY",
                    f'The user is looking at "{selected.label}" (ID: {selected.property_id}). '
                    "Focus your answer on this property unless asked otherwise.",
                )
            )
        else:
            logger.debug("Selected GA property %s not in payload", selected_id)

    heading = "\n### Google Analytics"
    if data.date_range:
        heading += f" ({data.date_range})"
    lines.append(heading)

    if not data.properties:
        lines.append("- No Google Analytics properties are available for this client.")
        return "\n".join(lines)

    if len(data.properties) > 1 and (cumulative or not selected_id):
        lines.append(_combined_line(data.properties))

    for prop in data.properties:
        lines.extend(_property_lines(prop, limits))

    return "\n".join(lines)


def format_google_analytics_single(
    data: GASinglePropertyData,
    property_id: Optional[str],
    limits: ContextLimits,
) -> str:
    """Format the older single-property payload."""
    lines: list[str] = []
    name = data.property_name or "your website"

    if is_all_selection(property_id):
        lines.append(
            callout("CUMULATIVE VIEW", "The user selected all Google Analytics properties.")
        )
    elif property_id:
        lines.append(
            callout(
                "SELECTED PROPERTY",
                f'The user is looking at "{name}". Focus your answer on this property.',
            )
        )

    heading = f"\n### Google Analytics - {name}"
    if data.date_range:
        heading += f" ({data.date_range})"
    lines.append(heading)

    m = data.metrics
    if not any(v > 0 for v in (m.sessions, m.users, m.pageviews)):
        lines.append(NO_TRAFFIC_LINE)
        return "\n".join(lines)

    lines.extend(_metric_lines(m))
    lines.extend(_dimension_lines(data.dimensions, limits))
    return "\n".join(lines)
