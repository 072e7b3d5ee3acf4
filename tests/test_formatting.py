"""Display formatting helpers."""

import pytest

from pricing_intel.analytics import (
    format_currency,
    format_percent,
    format_price_per_unit,
)
from pricing_intel.analytics.formatting import to_fixed


@pytest.mark.parametrize(
    "amount,expected",
    [
        (0, "$0"),
        (999.49, "$999"),
        (1234.5, "$1,235"),
        (1234567.89, "$1,234,568"),
        (-1234.4, "-$1,234"),
        (-2.5, "-$3"),
        (-0.4, "-$0"),
        (float("nan"), "NaN"),
        (float("inf"), "$∞"),
        (float("-inf"), "-$∞"),
    ],
)
def test_format_currency(amount, expected):
    assert format_currency(amount) == expected


@pytest.mark.parametrize(
    "value,expected",
    [
        (0, "+0.0%"),
        (-0.0, "+0.0%"),
        (-0.04, "-0.0%"),
        (12.34, "+12.3%"),
        (0.25, "+0.3%"),
        (-4, "-4.0%"),
        (-0.25, "-0.3%"),
        (150, "+150.0%"),
    ],
)
def test_format_percent(value, expected):
    assert format_percent(value) == expected


@pytest.mark.parametrize(
    "price,expected",
    [
        (0.015, "$0.0150"),
        (0.05, "$0.0500"),
        (0.00125, "$0.0013"),
        (1, "$1.0000"),
    ],
)
def test_format_price_per_unit(price, expected):
    assert format_price_per_unit(price) == expected


def test_to_fixed_zero_digits():
    assert to_fixed(49.6, 0) == "50"
    assert to_fixed(50.0, 0) == "50"
