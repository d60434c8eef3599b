#!/usr/bin/env python3
"""
Cost Parsing and Display Utilities

Subscription costs are held as Decimal so that sums of prices such as
15.99 + 9.99 are exact. Nothing is rounded until a value is formatted for
display.

Key Principles:
- Never build a Decimal from a binary float literal; go through str()
- Keep full precision through monthly/yearly normalization
- Round half-up to cents only in format_dollars()
"""

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Union

CENTS = Decimal("0.01")
WHOLE = Decimal("1")
ZERO = Decimal("0")


def parse_cost(value: Union[str, int, float, Decimal]) -> Decimal:
    """
    Convert a stored cost into a Decimal.

    Args:
        value: Cost like 9.99, "9.99", "$1,299.00" or Decimal("9.99")

    Returns:
        Decimal cost

    Raises:
        ValueError: If the value is not numeric or is negative

    Examples:
        parse_cost("$15.99") -> Decimal("15.99")
        parse_cost(9.99) -> Decimal("9.99")
    """
    if isinstance(value, bool):
        raise ValueError(f"Invalid cost: {value!r}")

    if isinstance(value, Decimal):
        amount = value
    elif isinstance(value, (int, float)):
        amount = Decimal(str(value))
    else:
        clean = str(value).replace("$", "").replace(",", "").strip()
        try:
            amount = Decimal(clean)
        except InvalidOperation as e:
            raise ValueError(f"Invalid cost: {value!r}") from e

    if not amount.is_finite():
        raise ValueError(f"Invalid cost: {value!r}")
    if amount < 0:
        raise ValueError(f"Cost must be non-negative: {value!r}")
    return amount


def round_cents(amount: Decimal) -> Decimal:
    """Round to whole cents, half-up."""
    return amount.quantize(CENTS, rounding=ROUND_HALF_UP)


def round_whole(amount: Decimal) -> int:
    """Round to a whole number, half-up."""
    return int(amount.quantize(WHOLE, rounding=ROUND_HALF_UP))


def format_dollars(amount: Decimal) -> str:
    """
    Format an amount for display.

    Example:
        format_dollars(Decimal("25.98")) -> "$25.98"
        format_dollars(Decimal("8.3333")) -> "$8.33"
    """
    rounded = round_cents(amount)
    sign = "-" if rounded < 0 else ""
    return f"{sign}${abs(rounded):,.2f}"


def format_percentage(percentage: Decimal) -> str:
    """Format a 0-100 percentage as a whole number, e.g. "42%"."""
    return f"{round_whole(percentage)}%"
