"""Compose the final instruction text for a routed query."""

import logging
from typing import Optional

from ..config import ContextLimits
from ..context.assembler import build_platform_context
from ..models.agent import Agent, AgentContext, Client
from .personas import template_for

logger = logging.getLogger(__name__)

PLATFORM_LABELS = {
    "googleAnalytics": "📊 Google Analytics - Website traffic and user behavior",
    "googleAds": "🎯 Google Ads - Search and display advertising",
    "metaAds": "📱 Meta Ads - Facebook and Instagram advertising",
    "linkedInAds": "💼 LinkedIn Ads - B2B advertising",
}

NO_CLIENT_GUIDANCE = """

## Getting Started
To provide insights, the user needs to:
1. Select or create a client
2. Connect marketing platforms (Settings → Integrations)
3. Ask questions about their data"""

NO_PLATFORMS_GUIDANCE = """

## No Platforms Connected
The user hasn't connected any marketing platforms yet. Guide them to:
1. Go to Settings → Integrations
2. Connect their Google Analytics, Ads, Meta, or LinkedIn accounts
3. Return here to start getting insights"""

DATA_AVAILABLE_NOTE = (
    "\n## Available Data\nYou have access to recent data from these platforms. "
    "When answering questions, use this real data to provide accurate insights."
)

DATA_SYNCING_NOTE = (
    "\n## Data Status\nNote: Platform data is currently being synced. For now, let the user "
    "know you'll be able to provide insights once the data sync is complete. You can still "
    "explain what kind of insights you'll be able to provide."
)


def connected_platforms_section(client: Optional[Client], has_data: bool) -> str:
    """Describe which platforms the client has connected.

    Args:
        client: Selected client, or None when nothing is selected
        has_data: Whether any platform payload accompanies the query

    Returns:
        Markdown section starting with a blank line
    """
    if client is None:
        return NO_CLIENT_GUIDANCE

    connected = client.connected_platforms()
    if not connected:
        return NO_PLATFORMS_GUIDANCE

    lines = [
        f"\n\n## Connected Platforms for {client.name}",
        "The user has connected the following platforms:",
    ]
    lines.extend(f"- {PLATFORM_LABELS.get(key, key)}" for key in connected)
    section = "\n".join(lines) + "\n"
    return section + (DATA_AVAILABLE_NOTE if has_data else DATA_SYNCING_NOTE)


def build_system_prompt(
    context: AgentContext,
    brief: Optional[str] = None,
    *,
    limits: Optional[ContextLimits] = None,
) -> str:
    """Build the instruction text for one query.

    Order: persona intro, agent brief, connected platforms, platform data
    context, persona footer. Deterministic for a given context.
    """
    template = template_for(context.persona)
    has_data = not context.platforms.is_empty

    parts = [template.intro]
    if brief:
        parts.append("\n\n" + brief.strip())
    parts.append(connected_platforms_section(context.client, has_data))
    parts.append(
        build_platform_context(context.platform_data, context.selected_filters, limits=limits)
    )
    parts.append(template.footer())
    return "".join(parts)


def compose_prompt(agent: Agent, context: AgentContext) -> str:
    """Render the routed agent's prompt template for this context."""
    prompt = agent.prompt_template(context)
    logger.debug("Composed %d-char prompt for %s", len(prompt), agent.id)
    return prompt
