"""Turn platform analytics payloads into a bounded context block.

Sections are emitted in a fixed order: practice notice, Google Analytics
(multi-property preferred over the single-property payload), Google Ads,
Meta Ads, LinkedIn Ads. Output is deterministic for a given input.
"""

from __future__ import annotations

import logging
from typing import Any, Optional, Union

from ..config import ContextLimits
from ..models.agent import SelectedFilters
from ..models.platform import PlatformDataBundle
from .google_ads import format_google_ads
from .google_analytics import format_google_analytics_multi, format_google_analytics_single
from .linkedin_ads import format_linkedin_ads
from .meta_ads import format_meta_ads

logger = logging.getLogger(__name__)

CONTEXT_HEADING = "\n\n## Current Platform Data\n"
CONTEXT_FOOTER = (
    "\n\nUse this data to answer user questions accurately. Cite specific numbers when relevant."
)


def _practice_notice(bundle: PlatformDataBundle) -> str:
    name = bundle.scenario_name or "Practice scenario"
    lines = ["\n### Practice Scenario", f"- Scenario: {name}"]
    if bundle.difficulty:
        lines.append(f"- Difficulty: {bundle.difficulty}")
    lines.append(
        "- This is simulated training data. Treat it as an exercise: guide the learner "
        "to find the issues rather than listing every answer."
    )
    return "\n".join(lines)


def _coerce_filters(filters: Union[SelectedFilters, dict, None]) -> SelectedFilters:
    if isinstance(filters, SelectedFilters):
        return filters
    if isinstance(filters, dict):
        return SelectedFilters.model_validate(filters)
    return SelectedFilters()


def build_platform_context(
    platform_data: Union[PlatformDataBundle, dict, Any, None],
    filters: Union[SelectedFilters, dict, None] = None,
    *,
    limits: Optional[ContextLimits] = None,
) -> str:
    """Format platform data for the instruction text.

    Args:
        platform_data: Bundle or raw payload mapping (may be None)
        filters: User-selected drill-down entities
        limits: Row caps for list sections (defaults apply when None)

    Returns:
        Context block starting with a blank line and heading, or "" when
        there is no platform data.
    """
    if platform_data is None:
        return ""
    bundle = PlatformDataBundle.from_payload(platform_data)
    if bundle.is_empty:
        return ""

    selected = _coerce_filters(filters)
    caps = limits or ContextLimits()
    sections: list[str] = []

    if bundle.is_practice:
        sections.append(_practice_notice(bundle))

    if bundle.google_analytics_multi is not None:
        sections.append(
            format_google_analytics_multi(bundle.google_analytics_multi, selected.property_id, caps)
        )
    elif bundle.google_analytics is not None:
        sections.append(
            format_google_analytics_single(bundle.google_analytics, selected.property_id, caps)
        )

    if bundle.google_ads is not None:
        sections.append(format_google_ads(bundle.google_ads, selected.google_ads_campaign_id, caps))

    if bundle.meta_ads is not None:
        sections.append(format_meta_ads(bundle.meta_ads, selected.meta_campaign_id, caps))

    if bundle.linked_in_ads is not None:
        sections.append(
            format_linkedin_ads(
                bundle.linked_in_ads,
                selected.linked_in_campaign_group_id,
                selected.linked_in_campaign_id,
                caps,
            )
        )

    logger.debug("Built platform context with %d section(s)", len(sections))
    return CONTEXT_HEADING + "\n".join(sections) + CONTEXT_FOOTER
