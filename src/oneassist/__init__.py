"""OneAssist - agent routing and context assembly for marketing analytics."""

__version__ = "0.4.0"
