"""Meta (Facebook / Instagram) Ads section of the platform context."""

from __future__ import annotations

import logging
from typing import Optional

from ..config import ContextLimits
from ..models.platform import MetaAdsData, MetaCampaignMetrics, MetaMetrics
from .formatting import (
    callout,
    format_currency,
    format_number,
    format_percent,
    format_ratio,
    idle_campaign_lines,
    is_all_selection,
)

logger = logging.getLogger(__name__)


def _result_lines(m: MetaCampaignMetrics, currency: str) -> list[str]:
    """Conversion-type results, only those that actually occurred."""
    lines: list[str] = []
    if m.purchases:
        line = f"- Purchases: {format_number(m.purchases)}"
        if m.cost_per_purchase:
            line += f" ({format_currency(m.cost_per_purchase, currency)} each)"
        lines.append(line)
    if m.leads:
        line = f"- Leads: {format_number(m.leads)}"
        if m.cost_per_lead:
            line += f" ({format_currency(m.cost_per_lead, currency)} each)"
        lines.append(line)
    if m.roas:
        lines.append(f"- ROAS: {format_ratio(m.roas)}")
    if m.registrations:
        lines.append(f"- Registrations: {format_number(m.registrations)}")
    if m.add_to_carts:
        lines.append(f"- Add to Carts: {format_number(m.add_to_carts)}")
    if m.checkouts:
        lines.append(f"- Checkouts Initiated: {format_number(m.checkouts)}")
    if m.content_views:
        lines.append(f"- Content Views: {format_number(m.content_views)}")
    return lines


def _video_line(m: MetaMetrics) -> Optional[str]:
    if not (m.video_p25_watched_actions or m.video_p50_watched_actions or m.video_p100_watched_actions):
        return None
    return (
        f"- Video Views: {format_number(m.video_p25_watched_actions)} watched 25%, "
        f"{format_number(m.video_p50_watched_actions)} watched 50%, "
        f"{format_number(m.video_p100_watched_actions)} watched to completion"
    )


def _breakdown_lines(data: MetaAdsData, currency: str, limits: ContextLimits) -> list[str]:
    lines: list[str] = []

    demographics = sorted(data.demographics, key=lambda d: d.spend, reverse=True)
    if demographics:
        lines.append("\n**Top Demographics by Spend:**")
        for d in demographics[: limits.max_demographics]:
            lines.append(
                f"- {d.age} {d.gender}: {format_currency(d.spend, currency)} spend, "
                f"{format_number(d.impressions)} impressions, {format_number(d.clicks)} clicks"
            )

    geography = sorted(data.geography, key=lambda g: g.spend, reverse=True)
    if geography:
        lines.append("\n**Top Locations by Spend:**")
        for g in geography[: limits.max_geography]:
            place = ", ".join(p for p in (g.region, g.country) if p) or "(unknown)"
            lines.append(
                f"- {place}: {format_currency(g.spend, currency)} spend, "
                f"{format_number(g.impressions)} impressions, {format_number(g.clicks)} clicks"
            )

    devices = data.devices[: limits.max_devices]
    if devices:
        lines.append("\n**Devices:**")
        lines.extend(
            f"- {d.device_platform}: {format_currency(d.spend, currency)} spend, "
            f"{format_number(d.clicks)} clicks"
            for d in devices
        )

    placements = data.publisher_platforms[: limits.max_devices]
    if placements:
        lines.append("\n**Placements:**")
        lines.extend(
            f"- {p.publisher_platform}: {format_currency(p.spend, currency)} spend, "
            f"{format_number(p.impressions)} impressions"
            for p in placements
        )

    return lines


def format_meta_ads(
    data: MetaAdsData,
    campaign_id: Optional[str],
    limits: ContextLimits,
) -> str:
    currency = data.currency
    lines: list[str] = []

    if is_all_selection(campaign_id):
        lines.append(
            callout(
                "CUMULATIVE VIEW",
                "The user selected all Meta campaigns. Answer with account-level totals.",
            )
        )
    elif campaign_id:
        selected = next((c for c in data.campaigns if c.id == campaign_id), None)
        if selected is not None:
            lines.append(
                callout(
                    "SELECTED CAMPAIGN",
                    f'The user is looking at the Meta campaign "{selected.name}" '
                    f"(ID: {selected.id}). Focus your answer on this campaign.",
                )
            )

    heading = "\n### Meta Ads"
    if data.date_range:
        heading += f" ({data.date_range})"
    lines.append(heading)

    if data.api_error:
        logger.warning("Suppressing Meta Ads figures: %s", data.api_error)
        lines.append(f"- Data unavailable: the Meta Marketing API returned an error ({data.api_error}).")
        lines.append("- Do not report Meta spend or results. Explain the gap to the user.")
        return "\n".join(lines)

    if data.accounts:
        lines.append("- Ad Accounts: " + ", ".join(a.name or a.id for a in data.accounts))

    m = data.metrics
    if not any(v > 0 for v in (m.impressions, m.reach, m.clicks, m.spend)):
        lines.append("- Status: no ad delivery in range for this account.")
        lines.extend(idle_campaign_lines(data.campaigns, limits.max_campaigns))
        return "\n".join(lines)

    lines.extend(
        [
            f"- Spend: {format_currency(m.spend, currency)}",
            f"- Impressions: {format_number(m.impressions)}",
            f"- Reach: {format_number(m.reach)}",
            f"- Frequency: {m.frequency:.2f}",
            f"- Clicks: {format_number(m.clicks)}",
        ]
    )
    if m.inline_link_clicks:
        lines.append(f"- Link Clicks: {format_number(m.inline_link_clicks)}")
    # Meta reports CTR already as a percentage
    lines.append(f"- CTR: {format_percent(m.ctr, 2, fraction=False)}")
    lines.append(f"- CPC: {format_currency(m.cpc, currency)}")
    lines.append(f"- CPM: {format_currency(m.cpm, currency)}")
    lines.extend(_result_lines(m, currency))
    if m.cost_per_registration:
        lines.append(f"- Cost per Registration: {format_currency(m.cost_per_registration, currency)}")
    if m.cost_per_add_to_cart:
        lines.append(f"- Cost per Add to Cart: {format_currency(m.cost_per_add_to_cart, currency)}")
    video = _video_line(m)
    if video:
        lines.append(video)

    campaigns = data.campaigns[: limits.max_campaigns]
    if campaigns:
        lines.append(f"\n**Top Campaigns ({len(campaigns)} of {len(data.campaigns)}):**")
        for c in campaigns:
            tags = ", ".join(t for t in (c.status, c.objective) if t)
            label = f"**{c.name}**" + (f" [{tags}]" if tags else "")
            cm = c.metrics
            entry = (
                f"- {label}: {format_currency(cm.spend, currency)} spend, "
                f"{format_number(cm.impressions)} impressions, {format_number(cm.clicks)} clicks, "
                f"CTR {format_percent(cm.ctr, 2, fraction=False)}"
            )
            if cm.purchases:
                entry += f", {format_number(cm.purchases)} purchases"
            if cm.leads:
                entry += f", {format_number(cm.leads)} leads"
            if cm.roas:
                entry += f", ROAS {format_ratio(cm.roas)}"
            lines.append(entry)

    lines.extend(_breakdown_lines(data, currency, limits))
    return "\n".join(lines)
