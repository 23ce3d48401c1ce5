#!/usr/bin/env python3
"""
Expense Dates

Calendar dates of expense records, with the tax year they are reported in.
"""

from dataclasses import dataclass
from datetime import date, datetime


@dataclass(frozen=True, order=True)
class FinancialDate:
    """An expense date. Ordering and equality follow the wrapped date."""

    date: date

    @classmethod
    def from_string(cls, date_str: str, format: str = "%Y-%m-%d") -> "FinancialDate":
        """
        Parse a date string.

        Expense storage timestamps such as "2024-03-05T14:22:00Z" are accepted
        for the default ISO format; only the date part is kept.

        Raises:
            ValueError: If the string does not match the format
        """
        if format == "%Y-%m-%d" and "T" in date_str:
            date_str = date_str.split("T", 1)[0]
        return cls(date=datetime.strptime(date_str.strip(), format).date())

    @classmethod
    def today(cls) -> "FinancialDate":
        return cls(date=date.today())

    @property
    def tax_year(self) -> int:
        """Calendar year the expense is reported in."""
        return self.date.year

    def to_iso_string(self) -> str:
        return self.date.isoformat()

    def __str__(self) -> str:
        return self.to_iso_string()
