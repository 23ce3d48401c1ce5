#!/usr/bin/env python3
"""
Money Primitive Type

Expense amounts as integer cents. Tax arithmetic converts to Decimal dollars
via to_decimal(); nothing here ever touches a float except on input.
"""

from dataclasses import dataclass
from decimal import Decimal

from .currency import cents_to_dollars_str, parse_dollars_to_cents


@dataclass(frozen=True, order=True)
class Money:
    """
    Immutable money value in cents (USD).

    Examples:
        >>> copay = Money.from_dollars("$45.99")
        >>> str(copay)
        '$45.99'
        >>> copay.to_decimal()
        Decimal('45.99')
        >>> str(copay + Money.from_cents(1))
        '$46.00'
    """

    cents: int

    @classmethod
    def from_cents(cls, cents: int) -> "Money":
        return cls(cents=int(cents))

    @classmethod
    def from_dollars(cls, dollars: str | int | float) -> "Money":
        """
        Parse from dollar string like '$123.45', integer dollars or a float.

        Float amounts are what the expense storage service hands back as JSON
        numbers; they are converted through Decimal, never multiplied as floats.
        """
        if isinstance(dollars, bool):
            raise ValueError(f"Not a dollar amount: {dollars!r}")
        if isinstance(dollars, int):
            return cls(cents=dollars * 100)
        return cls(cents=parse_dollars_to_cents(dollars))

    def to_cents(self) -> int:
        return self.cents

    def to_decimal(self) -> Decimal:
        """Exact Decimal dollars."""
        return Decimal(self.cents) / 100

    def to_dollars(self) -> str:
        return str(self)

    def __add__(self, other: "Money") -> "Money":
        if not isinstance(other, Money):
            return NotImplemented
        return Money(cents=self.cents + other.cents)

    def __sub__(self, other: "Money") -> "Money":
        if not isinstance(other, Money):
            return NotImplemented
        return Money(cents=self.cents - other.cents)

    def __str__(self) -> str:
        return f"${cents_to_dollars_str(self.cents)}"

    def __repr__(self) -> str:
        return f"Money(cents={self.cents})"
