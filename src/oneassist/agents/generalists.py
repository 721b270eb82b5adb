"""Generalist agents used outside keyword scoring.

Neither is registered for scoring: the Data Mentor answers every tutoring
query and the Growth Strategist takes business queries no specialist
matched. Both carry empty keyword lists.
"""

from typing import Optional

from ..config import ContextLimits
from ..models.agent import Agent
from .specialists import brief_template

DATA_MENTOR_ID = "data-mentor"
GROWTH_STRATEGIST_ID = "growth-strategist"


def make_data_mentor(limits: Optional[ContextLimits] = None) -> Agent:
    return Agent(
        id=DATA_MENTOR_ID,
        display_name="Data Mentor",
        emoji="👨‍🏫",
        description="Your personal marketing data tutor",
        capabilities=frozenset({"education", "socratic-method", "pattern-recognition"}),
        keywords=(),
        prompt_template=brief_template("", limits),
    )


def make_growth_strategist(limits: Optional[ContextLimits] = None) -> Agent:
    return Agent(
        id=GROWTH_STRATEGIST_ID,
        display_name="Growth Strategist",
        emoji="📈",
        description="General marketing growth and optimization expert",
        capabilities=frozenset({"growth-strategy", "cross-channel-analysis", "general-consulting"}),
        keywords=(),
        prompt_template=brief_template("", limits),
    )


DATA_MENTOR = make_data_mentor()
GROWTH_STRATEGIST = make_growth_strategist()
