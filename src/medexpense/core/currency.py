#!/usr/bin/env python3
"""
Currency Conversion and Handling Utilities

Expense amounts are stored as integer cents to avoid floating-point errors.
Tax arithmetic (AGI thresholds, percentages) is done in Decimal dollars so
that no rounding is introduced before display.

Currency Systems:
- Stored amounts use cents: 100 cents = $1.00
- Tax calculations use Decimal dollars: Decimal("12.34")
- Display uses dollar strings: "$12.34"
"""

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Union

DecimalInput = Union[int, float, str, Decimal]

_CENT = Decimal("0.01")


def cents_to_dollars_str(cents: int) -> str:
    """
    Convert cents to a dollar string without a currency symbol.

    Example:
        cents_to_dollars_str(4599) -> "45.99"
        cents_to_dollars_str(-5) -> "-0.05"
    """
    dollars, remainder = divmod(abs(int(cents)), 100)
    sign = "-" if cents < 0 else ""
    return f"{sign}{dollars}.{remainder:02d}"


def to_decimal(value: DecimalInput) -> Decimal:
    """
    Convert a dollar amount to Decimal without binary rounding artifacts.

    Strings may carry a "$" and thousands separators. Floats go through str()
    so 0.1 becomes Decimal("0.1"), not
    Decimal("0.1000000000000000055511151231257827021181583404541015625").

    Raises:
        ValueError: If the value is not a finite number
    """
    if isinstance(value, bool):
        raise ValueError(f"Not a monetary amount: {value!r}")
    try:
        if isinstance(value, Decimal):
            result = value
        elif isinstance(value, float):
            result = Decimal(str(value))
        elif isinstance(value, int):
            result = Decimal(value)
        else:
            result = Decimal(str(value).replace("$", "").replace(",", "").strip())
    except InvalidOperation as e:
        raise ValueError(f"Not a monetary amount: {value!r}") from e

    if not result.is_finite():
        raise ValueError(f"Not a finite monetary amount: {value!r}")
    return result


def parse_dollars_to_cents(dollars: Union[str, float]) -> int:
    """
    Parse a dollar amount to integer cents, rounding half-cents up.

    An empty string is zero.

    Examples:
        parse_dollars_to_cents("12.34") -> 1234
        parse_dollars_to_cents("$1,234.56") -> 123456
        parse_dollars_to_cents("12") -> 1200
        parse_dollars_to_cents(45.99) -> 4599

    Raises:
        ValueError: If the amount cannot be parsed
    """
    if isinstance(dollars, str) and not dollars.replace("$", "").strip():
        return 0
    amount = to_decimal(dollars).quantize(_CENT, rounding=ROUND_HALF_UP)
    return int(amount * 100)


def format_cents(cents: int) -> str:
    """Format cents as dollar string with $ prefix."""
    return f"${cents_to_dollars_str(cents)}"


def format_decimal_dollars(amount: Decimal) -> str:
    """
    Format a Decimal dollar amount for display, rounded to the cent.

    Example:
        format_decimal_dollars(Decimal("7500")) -> "$7,500.00"
    """
    return f"${amount.quantize(_CENT):,}"
