"""Number, rate, duration and currency formatting for prompt context."""

from __future__ import annotations

from typing import Any, Sequence

CURRENCY_SYMBOLS = {
    "INR": "₹",
    "EUR": "€",
    "GBP": "£",
}
DEFAULT_CURRENCY_SYMBOL = "$"

# Filter value meaning "every property / campaign"
ALL_SELECTION = "all"


def format_number(value: float) -> str:
    """Thousands separators; up to two decimals for fractional values."""
    if float(value).is_integer():
        return f"{int(value):,}"
    return f"{value:,.2f}".rstrip("0").rstrip(".")


def format_percent(value: float, decimals: int = 1, *, fraction: bool = True) -> str:
    """Render a rate as a percentage.

    ``fraction=True`` means the value is a 0-1 ratio and is multiplied by 100.
    """
    pct = value * 100 if fraction else value
    return f"{pct:.{decimals}f}%"


def format_duration(seconds: float) -> str:
    """Bucketed duration: ``45s``, ``3m 12s`` or ``2h 5m``."""
    total = max(0, int(round(seconds)))
    if total < 60:
        return f"{total}s"
    if total < 3600:
        return f"{total // 60}m {total % 60}s"
    return f"{total // 3600}h {(total % 3600) // 60}m"


def currency_symbol(code: str | None) -> str:
    if not code:
        return DEFAULT_CURRENCY_SYMBOL
    return CURRENCY_SYMBOLS.get(code.strip().upper(), DEFAULT_CURRENCY_SYMBOL)


def format_currency(amount: float, code: str | None) -> str:
    return f"{currency_symbol(code)}{amount:,.2f}"


def format_ratio(value: float) -> str:
    """Return-on-spend style multiplier, e.g. ``3.25x``."""
    return f"{value:.2f}x"


def is_all_selection(value: str | None) -> bool:
    return bool(value) and value.strip().lower() == ALL_SELECTION


def callout(label: str, text: str) -> str:
    """Distinguished line that tells the model what the user is focused on."""
    return f"> **{label}:** {text}"


def idle_campaign_lines(campaigns: Sequence[Any], limit: int) -> list[str]:
    """Name and status of campaigns on an account with no delivery, no figures."""
    shown = list(campaigns[:limit])
    if not shown:
        return []
    lines = [f"\n**Campaigns ({len(shown)} of {len(campaigns)}):**"]
    for c in shown:
        lines.append(f"- **{c.name}**" + (f" [{c.status}]" if c.status else ""))
    return lines
