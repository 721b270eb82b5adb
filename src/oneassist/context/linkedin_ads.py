"""LinkedIn Ads section of the platform context."""

from __future__ import annotations

import logging
from typing import Optional

from ..config import ContextLimits
from ..models.platform import LinkedInAdsData, LinkedInMetrics
from .formatting import (
    callout,
    format_currency,
    format_duration,
    format_number,
    format_percent,
    idle_campaign_lines,
    is_all_selection,
)

logger = logging.getLogger(__name__)


def _selection_lines(
    data: LinkedInAdsData,
    group_id: Optional[str],
    campaign_id: Optional[str],
) -> list[str]:
    lines: list[str] = []

    if is_all_selection(group_id) or (is_all_selection(campaign_id) and not group_id):
        lines.append(
            callout(
                "CUMULATIVE VIEW",
                "The user selected all LinkedIn campaigns. Answer with account-level totals.",
            )
        )
    elif group_id:
        group = next((g for g in data.campaign_groups if g.id == group_id), None)
        if group is not None:
            in_group = sum(1 for c in data.campaigns if c.campaign_group_id == group_id)
            lines.append(
                callout(
                    "SELECTED CAMPAIGN GROUP",
                    f'The user is looking at the LinkedIn campaign group "{group.name}" '
                    f"(ID: {group.id}, {in_group} campaigns). Focus your answer on this group.",
                )
            )

    if campaign_id and not is_all_selection(campaign_id):
        campaign = next((c for c in data.campaigns if c.id == campaign_id), None)
        if campaign is not None:
            lines.append(
                callout(
                    "SELECTED CAMPAIGN",
                    f'The user is looking at the LinkedIn campaign "{campaign.name}" '
                    f"(ID: {campaign.id}). Focus your answer on this campaign.",
                )
            )
    return lines


def _metric_lines(m: LinkedInMetrics, currency: str) -> list[str]:
    lines = [
        f"- Spend: {format_currency(m.spend, currency)}",
        f"- Impressions: {format_number(m.impressions)}",
        f"- Clicks: {format_number(m.clicks)}",
        # LinkedIn rates arrive already multiplied by 100
        f"- CTR: {format_percent(m.ctr, 2, fraction=False)}",
        f"- CPC: {format_currency(m.cpc, currency)}",
    ]

    e = m.engagement
    if e.total_engagements:
        lines.append(
            f"- Engagements: {format_number(e.total_engagements)} "
            f"({format_percent(e.engagement_rate, 2, fraction=False)} engagement rate; "
            f"{format_number(e.likes)} likes, {format_number(e.comments)} comments, "
            f"{format_number(e.shares)} shares, {format_number(e.follows)} follows)"
        )
        if e.cost_per_engagement:
            lines.append(f"- Cost per Engagement: {format_currency(e.cost_per_engagement, currency)}")

    conv = m.conversions
    if conv.total:
        lines.append(
            f"- Conversions: {format_number(conv.total)} "
            f"({format_number(conv.post_click)} post-click, {format_number(conv.post_view)} post-view)"
        )
        if conv.cost_per_conversion:
            lines.append(f"- Cost per Conversion: {format_currency(conv.cost_per_conversion, currency)}")
    if conv.landing_page_clicks:
        lines.append(f"- Landing Page Clicks: {format_number(conv.landing_page_clicks)}")

    leads = m.leads
    if leads.total:
        lines.append(
            f"- Leads: {format_number(leads.total)} ({format_number(leads.qualified)} qualified, "
            f"{format_percent(leads.quality_rate, 1, fraction=False)} quality rate)"
        )
        if leads.cost_per_lead:
            lines.append(f"- Cost per Lead: {format_currency(leads.cost_per_lead, currency)}")
    if leads.form_opens:
        lines.append(f"- Lead Form Opens: {format_number(leads.form_opens)}")

    if m.video is not None and m.video.starts:
        lines.append(
            f"- Video: {format_number(m.video.starts)} starts, {format_number(m.video.views)} views, "
            f"{format_percent(m.video.completion_rate, 1, fraction=False)} completion rate"
        )
    if m.reach is not None and m.reach.unique_members:
        line = f"- Approximate Member Reach: {format_number(m.reach.unique_members)}"
        if m.reach.average_dwell_time:
            line += f" (avg dwell time {format_duration(m.reach.average_dwell_time)})"
        lines.append(line)

    return lines


def format_linkedin_ads(
    data: LinkedInAdsData,
    group_id: Optional[str],
    campaign_id: Optional[str],
    limits: ContextLimits,
) -> str:
    currency = data.currency
    lines = _selection_lines(data, group_id, campaign_id)

    heading = "\n### LinkedIn Ads"
    if data.date_range:
        heading += f" ({data.date_range})"
    lines.append(heading)

    if data.api_error:
        logger.warning("Suppressing LinkedIn Ads figures: %s", data.api_error)
        lines.append(f"- Data unavailable: the LinkedIn Marketing API returned an error ({data.api_error}).")
        lines.append("- Do not report LinkedIn spend or results. Explain the gap to the user.")
        return "\n".join(lines)

    if data.accounts:
        lines.append("- Ad Accounts: " + ", ".join(a.name or a.id for a in data.accounts))

    m = data.metrics
    if not any(v > 0 for v in (m.impressions, m.clicks, m.spend)):
        lines.append("- Status: no ad delivery in range for this account.")
        lines.extend(idle_campaign_lines(data.campaigns, limits.max_campaigns))
        return "\n".join(lines)

    lines.extend(_metric_lines(m, currency))

    groups = data.campaign_groups[: limits.max_campaign_groups]
    if groups:
        lines.append("\n**Campaign Groups:**")
        for g in groups:
            entry = f"- **{g.name}**" + (f" [{g.status}]" if g.status else "")
            if g.spend or g.impressions:
                entry += (
                    f": {format_currency(g.spend, currency)} spend, "
                    f"{format_number(g.impressions)} impressions, {format_number(g.clicks)} clicks"
                )
            lines.append(entry)

    campaigns = data.campaigns[: limits.max_campaigns]
    if campaigns:
        lines.append(f"\n**Top Campaigns ({len(campaigns)} of {len(data.campaigns)}):**")
        for c in campaigns:
            tags = ", ".join(t for t in (c.status, c.type) if t)
            label = f"**{c.name}**" + (f" [{tags}]" if tags else "")
            entry = (
                f"- {label}: {format_currency(c.spend, currency)} spend, "
                f"{format_number(c.impressions)} impressions, {format_number(c.clicks)} clicks"
            )
            if c.conversions:
                entry += f", {format_number(c.conversions)} conversions"
            if c.leads:
                entry += f", {format_number(c.leads)} leads"
            lines.append(entry)

    return "\n".join(lines)
