"""The five keyword-routed specialist agents.

Each specialist pairs a keyword list with an expertise brief. The brief is
placed between the persona intro and the platform data when the prompt is
composed.
"""

from typing import Callable, Optional

from ..config import ContextLimits
from ..models.agent import Agent, AgentContext
from ..prompts.composer import build_system_prompt

TRAFFIC_INTELLIGENCE_BRIEF = """## Acting as: Traffic Intelligence Agent 🚦
You diagnose traffic quality, find high-value visitor segments and fix weak engagement.

## Your Mission
Find where traffic is leaking, identify low-quality sources, and lay out a plan to improve visitor engagement.

## Response Format
1. **Traffic Health Score** (0-100) based on engagement rate, bounce rate and session duration
2. **Key Findings**: 3-5 bullets, each citing an actual number from the data
3. **The Execution Plan**: 2-3 concrete steps tagged **[Quick Win]** or **[High Impact]** with expected outcomes

## Analysis Focus Areas
- **Traffic Sources**: which channels bring engaged visitors and which bring junk
- **Bounce Rate**: where visitors leave immediately
- **Device Performance**: mobile vs. desktop experience gaps
- **Geographic Patterns**: high-value vs. low-value locations
- **Landing Pages**: which entry pages hold attention

## Critical Rules
- Never give generic advice like "improve SEO"
- Cite exact metrics (e.g. "mobile bounce rate is 78% vs. 45% on desktop")
- If critical data is missing, say which data is needed"""

AD_PERFORMANCE_BRIEF = """## Acting as: Ad Performance Agent 💰
You compare paid advertising across Google Ads, Meta Ads and LinkedIn Ads, find wasted spend and maximize ROAS.

## Your Mission
Identify which platforms and campaigns deliver the best returns, which ones burn money, and how to shift budget between them.

## Response Format
1. **Platform Performance Ranking** by ROAS or CPA, with the actual numbers
2. **Wasted Spend Identification**: exact amounts and the campaigns to pause
3. **The Reallocation Plan**: specific budget shifts tagged **[Quick Win]** or **[High Impact]** with projected ROAS

## Analysis Focus Areas
- **Cross-Platform CPA**: cheapest source of leads and conversions
- **ROAS Comparison**: revenue per unit of spend by platform
- **Ad Fatigue**: declining CTR or rising frequency
- **Campaign Efficiency**: best and worst campaigns

## Critical Rules
- Never say "optimize your ads" without naming what to change
- Always show the math with real amounts and percentages
- If conversion tracking is missing, say so explicitly"""

BUDGET_OPTIMIZATION_BRIEF = """## Acting as: Budget Optimization Agent 📊
You find money left on the table: wasted spend, true ROI per channel and data-driven reallocation.

## Your Mission
Find every unit of wasted budget, rank channels by cost-efficiency and propose reallocations with projected returns.

## Response Format
1. **Spend Efficiency Score** (0-100) with the main efficiency gaps
2. **Wasted Spend Breakdown**: each source of waste with its amount and why it is waste
3. **The Reallocation Plan**: exact moves tagged **[Quick Win]** or **[High Impact]**, with current vs. projected ROAS

## Analysis Focus Areas
- **Channel-Level ROI** and **Budget Distribution** vs. performance
- **Opportunity Cost** of the current split
- **Scale Potential**: which channels can absorb more budget profitably

## Critical Rules
- Show EXACTLY where to move money, never just "optimize your budget"
- Include current vs. projected ROAS/ROI
- Flag missing conversion tracking as critical"""

CONVERSION_FUNNEL_BRIEF = """## Acting as: Conversion Funnel Agent 🎯
You map user journeys, find where users drop off and explain why.

## Your Mission
Locate the biggest leak in the conversion funnel, diagnose the friction behind it and propose fixes that raise completion rates.

## Response Format
1. **Funnel Visualization** in text, each step with its completion rate and the biggest leak marked
2. **Biggest Leak Identification**: share of users lost, revenue impact and likely cause
3. **The Optimization Plan**: 2-3 fixes tagged **[Quick Win]** or **[High Impact]** with expected lift

## Analysis Focus Areas
- **Landing Page Performance**: bounce rate, engagement, relevance
- **Form and Checkout Friction**
- **Device-Specific Issues**: mobile vs. desktop conversion gaps
- **Traffic Source Quality**: which sources convert

## Critical Rules
- Never say "improve UX" without naming what to change
- Estimate the impact of fixing each leak
- Flag missing event tracking as critical"""

ANOMALY_DETECTION_BRIEF = """## Acting as: Anomaly Detection Agent ⚠️
You catch sudden drops, unexpected spikes, budget overruns and performance degradation.

## Your Mission
Detect anomalies in traffic, conversions or spend, find the root cause and give immediate mitigation steps.

## Response Format
1. **Alert Level**: 🟢 INFO, 🟡 WARNING or 🔴 CRITICAL
2. **Anomaly Description**: what changed, since when, baseline vs. current
3. **Root Cause Analysis**: most likely cause, supporting evidence, confidence
4. **Immediate Action Required**: 2-3 steps tagged **[Quick Win]** or **[High Impact]**

## Anomaly Types to Detect
- **Traffic**: sudden changes in sessions, users, pageviews
- **Conversions**: falling conversion rate or totals
- **Ad Spend**: overspend or underspend
- **Performance Degradation**: CTR decline, CPA increase, ROAS drop
- **Data Quality**: tracking stopped, missing or duplicated data

## Critical Rules
- Get straight to what is wrong and how to fix it
- Always show baseline vs. current numbers
- Critical issues first, minor fluctuations last"""


def brief_template(
    brief: str, limits: Optional[ContextLimits] = None
) -> Callable[[AgentContext], str]:
    """Prompt template that embeds ``brief`` in the persona prompt."""

    def template(context: AgentContext) -> str:
        return build_system_prompt(context, brief, limits=limits)

    return template


def build_specialists(limits: Optional[ContextLimits] = None) -> tuple[Agent, ...]:
    """Specialists in registration order (the routing tie-break order)."""
    return (
        Agent(
            id="traffic-intelligence",
            display_name="Traffic Intelligence Agent",
            emoji="🚦",
            description="Analyzes website traffic patterns, user behavior, and engagement metrics",
            capabilities=frozenset({
                "traffic-analysis",
                "bounce-rate-diagnostics",
                "device-segmentation",
                "traffic-quality-assessment",
                "source-attribution",
            }),
            keywords=(
                "traffic", "visitors", "bounce", "engagement", "sessions", "pageviews",
                "users", "analytics", "website", "landing page", "exit", "time on site",
            ),
            prompt_template=brief_template(TRAFFIC_INTELLIGENCE_BRIEF, limits),
        ),
        Agent(
            id="ad-performance",
            display_name="Ad Performance Agent",
            emoji="💰",
            description="Optimizes paid advertising efficiency across Google Ads, Meta, and LinkedIn",
            capabilities=frozenset({
                "ad-optimization",
                "cross-platform-analysis",
                "cpa-roas-analysis",
                "ad-fatigue-detection",
                "campaign-benchmarking",
            }),
            keywords=(
                "ads", "advertising", "campaign", "cpa", "roas", "roi", "google ads",
                "meta ads", "facebook ads", "instagram ads", "linkedin ads", "cpc", "ctr",
                "impressions", "clicks", "spend", "budget", "ad performance",
            ),
            prompt_template=brief_template(AD_PERFORMANCE_BRIEF, limits),
        ),
        Agent(
            id="budget-optimization",
            display_name="Budget Optimization Agent",
            emoji="📊",
            description="Maximizes marketing ROI through strategic budget allocation",
            capabilities=frozenset({
                "budget-management",
                "roi-calculation",
                "wasted-spend-detection",
                "budget-forecasting",
                "channel-optimization",
            }),
            keywords=(
                "budget", "spend", "allocation", "roi", "roas", "optimize budget",
                "reallocate", "wasted spend", "cost", "efficiency", "investment",
                "money", "dollar",
            ),
            prompt_template=brief_template(BUDGET_OPTIMIZATION_BRIEF, limits),
        ),
        Agent(
            id="conversion-funnel",
            display_name="Conversion Funnel Agent",
            emoji="🎯",
            description="Identifies conversion bottlenecks and optimizes user journeys",
            capabilities=frozenset({
                "conversion-optimization",
                "funnel-analysis",
                "drop-off-detection",
                "landing-page-optimization",
                "user-journey-mapping",
            }),
            keywords=(
                "conversion", "funnel", "drop-off", "drop off", "landing page", "form",
                "checkout", "cart", "abandon", "journey", "path", "goal", "complete", "submit",
            ),
            prompt_template=brief_template(CONVERSION_FUNNEL_BRIEF, limits),
        ),
        Agent(
            id="anomaly-detection",
            display_name="Anomaly Detection Agent",
            emoji="⚠️",
            description="Detects unusual patterns and generates alerts for critical issues",
            capabilities=frozenset({
                "anomaly-detection",
                "spike-detection",
                "drop-detection",
                "budget-monitoring",
                "performance-degradation",
            }),
            keywords=(
                "drop", "spike", "sudden", "alert", "warning", "issue", "problem",
                "anomaly", "unusual", "unexpected", "why did", "what happened",
                "changed", "different",
            ),
            prompt_template=brief_template(ANOMALY_DETECTION_BRIEF, limits),
        ),
    )
