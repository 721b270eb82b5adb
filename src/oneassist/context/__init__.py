"""Context assembly: platform payloads to bounded prompt text."""

from .assembler import build_platform_context
from .formatting import (
    ALL_SELECTION,
    CURRENCY_SYMBOLS,
    currency_symbol,
    format_currency,
    format_duration,
    format_number,
    format_percent,
)

__all__ = [
    "ALL_SELECTION",
    "CURRENCY_SYMBOLS",
    "build_platform_context",
    "currency_symbol",
    "format_currency",
    "format_duration",
    "format_number",
    "format_percent",
]
