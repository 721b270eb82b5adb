"""Google Ads section of the platform context."""

from __future__ import annotations

import logging
from typing import Optional

from ..config import ContextLimits
from ..models.platform import GoogleAdsData
from .formatting import (
    callout,
    format_currency,
    format_number,
    format_percent,
    idle_campaign_lines,
    is_all_selection,
)

logger = logging.getLogger(__name__)

DEVELOPER_TOKEN_NOTICES = {
    "pending": (
        "The Google Ads developer token is still pending approval from Google, so campaign "
        "data cannot be retrieved yet. Tell the user their Google Ads numbers will appear "
        "once the token is approved."
    ),
    "missing": (
        "Google Ads access is not configured on the server (no developer token), so no "
        "campaign data is available. Do not guess at Google Ads figures."
    ),
}


def _error_lines(data: GoogleAdsData) -> Optional[list[str]]:
    """Lines explaining why the data is missing, or None when it is usable."""
    if data.api_error:
        return [
            f"- Data unavailable: the Google Ads API returned an error ({data.api_error}).",
            "- Do not report spend, clicks or conversions for Google Ads. Explain the gap "
            "and suggest reconnecting the account.",
        ]
    notice = DEVELOPER_TOKEN_NOTICES.get(data.developer_token_status.lower())
    if notice:
        return [f"- Data unavailable: {notice}"]
    return None


def format_google_ads(
    data: GoogleAdsData,
    campaign_id: Optional[str],
    limits: ContextLimits,
) -> str:
    currency = data.currency
    lines: list[str] = []

    if is_all_selection(campaign_id):
        lines.append(
            callout(
                "CUMULATIVE VIEW",
                "The user selected all Google Ads campaigns. Answer with account-level totals.",
            )
        )
    elif campaign_id:
        selected = next((c for c in data.campaigns if c.id == campaign_id), None)
        if selected is not None:
            lines.append(
                callout(
                    "SELECTED CAMPAIGN",
                    f'The user is looking at the Google Ads campaign "{selected.name}" '
                    f"(ID: {selected.id}). Focus your answer on this campaign.",
                )
            )

    heading = "\n### Google Ads"
    if data.date_range:
        heading += f" ({data.date_range})"
    lines.append(heading)

    errors = _error_lines(data)
    if errors is not None:
        logger.warning("Suppressing Google Ads figures: %s", data.api_error or data.developer_token_status)
        lines.extend(errors)
        return "\n".join(lines)

    if data.customers:
        accounts = ", ".join(
            f"{c.name or c.id} ({c.currency})" if c.currency else (c.name or c.id)
            for c in data.customers
        )
        lines.append(f"- Accounts: {accounts}")

    m = data.metrics
    if not any(v > 0 for v in (m.impressions, m.clicks, m.cost)):
        lines.append("- Status: no ad activity in range for this account.")
        lines.extend(idle_campaign_lines(data.campaigns, limits.max_campaigns))
        return "\n".join(lines)

    lines.extend(
        [
            f"- Impressions: {format_number(m.impressions)}",
            f"- Clicks: {format_number(m.clicks)}",
            f"- Spend: {format_currency(m.cost, currency)}",
            f"- CTR: {format_percent(m.ctr, 2, fraction=False)}",
            f"- Avg CPC: {format_currency(m.avg_cpc, currency)}",
            f"- Conversions: {format_number(m.conversions)}",
        ]
    )
    if m.conversions > 0:
        lines.append(f"- Cost per Conversion: {format_currency(m.cost / m.conversions, currency)}")
    if m.conversion_value > 0:
        lines.append(f"- Conversion Value: {format_currency(m.conversion_value, currency)}")

    campaigns = data.campaigns[: limits.max_campaigns]
    if campaigns:
        lines.append(f"\n**Top Campaigns ({len(campaigns)} of {len(data.campaigns)}):**")
        for c in campaigns:
            tags = ", ".join(t for t in (c.status, c.type) if t)
            label = f"**{c.name}**" + (f" [{tags}]" if tags else "")
            entry = (
                f"- {label}: {format_currency(c.cost, currency)} spend, "
                f"{format_number(c.clicks)} clicks, {format_number(c.impressions)} impressions"
            )
            if c.conversions:
                entry += f", {format_number(c.conversions)} conversions"
            lines.append(entry)

    return "\n".join(lines)
