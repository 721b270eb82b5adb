"""Tests for context number formatting helpers."""

import pytest

from oneassist.context.formatting import (
    callout,
    currency_symbol,
    format_currency,
    format_duration,
    format_number,
    format_percent,
    format_ratio,
    is_all_selection,
)


@pytest.mark.parametrize(
    "value,expected",
    [(0, "0"), (1234, "1,234"), (1234567.0, "1,234,567"), (12.5, "12.5"), (3.14159, "3.14")],
)
def test_format_number(value, expected):
    assert format_number(value) == expected


def test_format_percent_fraction_and_already_percent():
    assert format_percent(0.4523) == "45.2%"
    assert format_percent(0.025, 2) == "2.50%"
    assert format_percent(1.8, 2, fraction=False) == "1.80%"


@pytest.mark.parametrize(
    "seconds,expected",
    [(0, "0s"), (45, "45s"), (59.6, "1m 0s"), (192, "3m 12s"), (3599, "59m 59s"), (7500, "2h 5m")],
)
def test_format_duration_buckets(seconds, expected):
    assert format_duration(seconds) == expected


def test_format_duration_negative_clamped():
    assert format_duration(-5) == "0s"


@pytest.mark.parametrize(
    "code,symbol",
    [("INR", "₹"), ("EUR", "€"), ("GBP", "£"), ("USD", "$"), ("inr", "₹"), ("", "$"), (None, "$"), ("JPY", "$")],
)
def test_currency_symbol(code, symbol):
    assert currency_symbol(code) == symbol


def test_format_currency():
    assert format_currency(1234.5, "INR") == "₹1,234.50"
    assert format_currency(0, None) == "$0.00"


def test_format_ratio():
    assert format_ratio(3.25) == "3.25x"


def test_is_all_selection():
    assert is_all_selection("all")
    assert is_all_selection(" ALL ")
    assert not is_all_selection("111")
    assert not is_all_selection(None)
    assert not is_all_selection("")


def test_callout():
    assert callout("SELECTED PROPERTY", "Main Site") == "> **SELECTED PROPERTY:** Main Site"
