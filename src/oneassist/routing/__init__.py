"""Keyword scoring and agent routing."""

from .router import AgentRouter
from .scoring import keyword_confidence, keyword_weight, matched_keywords

__all__ = ["AgentRouter", "keyword_confidence", "keyword_weight", "matched_keywords"]
