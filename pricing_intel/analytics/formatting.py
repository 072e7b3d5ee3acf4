"""Display formatting for currency, percentages and unit prices."""

import math
from decimal import ROUND_HALF_UP, Decimal


def to_fixed(value: float, digits: int) -> str:
    """
    Render value with a fixed number of decimals, rounding the exact binary
    value half away from zero.
    """
    quantum = Decimal(1).scaleb(-digits)
    return str(Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP))


def format_currency(amount: float) -> str:
    """Whole US dollars with thousands separators, e.g. ``$1,235`` or ``-$40``."""
    if math.isnan(amount):
        return "NaN"
    # Sign comes from the unrounded amount: -0.4 renders as -$0
    sign = "-" if math.copysign(1, amount) < 0 else ""
    if math.isinf(amount):
        return f"{sign}$∞"
    rounded = Decimal(repr(abs(amount))).quantize(Decimal(1), rounding=ROUND_HALF_UP)
    return f"{sign}${rounded:,}"


def format_percent(value: float) -> str:
    """Signed percentage with one decimal, e.g. ``+12.3%``."""
    if value == 0:
        value = 0.0
    sign = "+" if value >= 0 else ""
    return f"{sign}{to_fixed(value, 1)}%"


def format_price_per_unit(price: float) -> str:
    """Unit price with four decimals, e.g. ``$0.0150``."""
    return f"${to_fixed(price, 4)}"
