#!/usr/bin/env python3
"""
Schedule A Medical Expense Summary

Selects the medical expenses for a tax year, breaks them down by taxonomy
category and applies the AGI threshold. The CSV export mirrors the layout
users attach to their Schedule A worksheet.
"""

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field
from decimal import Decimal
from pathlib import Path
from typing import Any

import pandas as pd

from ..classification.resolver import CategoryResolver
from ..core.currency import format_decimal_dollars
from ..core.models import ExpenseRecord
from ..core.money import Money
from .calculator import DeductionCalculator, DeductionSummary

logger = logging.getLogger(__name__)

CSV_COLUMNS = ["Date", "Category", "Description", "Amount", "Vendor", "Care Recipient"]


@dataclass(frozen=True)
class CategoryBreakdown:
    """Expense count and total for one category."""

    category: str
    count: int
    total: Money


def filter_medical_expenses(
    expenses: Iterable[ExpenseRecord],
    resolver: CategoryResolver,
    tax_year: int | None = None,
) -> list[ExpenseRecord]:
    """
    Keep expenses filed under a taxonomy category, optionally for one tax year.

    Args:
        expenses: Records from the expense storage service
        resolver: Resolver over the taxonomy used for the membership test
        tax_year: Calendar year to keep, or None for all years

    Returns:
        Matching records in their original order
    """
    return [
        expense
        for expense in expenses
        if resolver.is_medical_category(expense.category)
        and (tax_year is None or expense.date.tax_year == tax_year)
    ]


def available_tax_years(expenses: Iterable[ExpenseRecord]) -> list[int]:
    """Distinct expense years, most recent first."""
    return sorted({expense.date.tax_year for expense in expenses}, reverse=True)


def expenses_to_dataframe(expenses: Iterable[ExpenseRecord]) -> pd.DataFrame:
    """
    Convert expense records to a DataFrame with amounts in cents.

    Columns: id, date, category, subcategory, description, vendor,
    care_recipient, amount_cents.
    """
    rows = [
        {
            "id": expense.id,
            "date": expense.date.to_iso_string(),
            "category": expense.category,
            "subcategory": expense.subcategory or "",
            "description": expense.description or "",
            "vendor": expense.vendor or "",
            "care_recipient": expense.care_recipient or "",
            "amount_cents": expense.amount.to_cents(),
        }
        for expense in expenses
    ]
    columns = [
        "id",
        "date",
        "category",
        "subcategory",
        "description",
        "vendor",
        "care_recipient",
        "amount_cents",
    ]
    df = pd.DataFrame(rows, columns=columns)
    if not df.empty:
        df = df.sort_values("date", kind="stable").reset_index(drop=True)
    return df


def breakdown_by_category(df: pd.DataFrame) -> list[CategoryBreakdown]:
    """Group an expense DataFrame by category, ordered by first appearance."""
    if df.empty:
        return []

    grouped = df.groupby("category", sort=False)["amount_cents"].agg(["count", "sum"])
    return [
        CategoryBreakdown(category=str(category), count=int(row["count"]), total=Money.from_cents(int(row["sum"])))
        for category, row in grouped.iterrows()
    ]


@dataclass
class ScheduleASummary:
    """Schedule A medical and dental expense summary for one tax year."""

    tax_year: int
    expenses: list[ExpenseRecord]
    deduction: DeductionSummary
    breakdown: list[CategoryBreakdown] = field(default_factory=list)

    @classmethod
    def build(
        cls,
        expenses: Iterable[ExpenseRecord],
        agi: Decimal | int | float | str,
        tax_year: int,
        resolver: CategoryResolver,
        calculator: DeductionCalculator | None = None,
    ) -> "ScheduleASummary":
        calculator = calculator or DeductionCalculator()

        medical = filter_medical_expenses(expenses, resolver, tax_year)
        df = expenses_to_dataframe(medical)

        total = Money.from_cents(int(df["amount_cents"].sum()) if not df.empty else 0)
        deduction = calculator.summarize(total, agi)

        logger.info(
            "Schedule A %d: %d medical expenses totalling %s, deductible %s",
            tax_year,
            len(medical),
            total,
            format_decimal_dollars(deduction.deductible),
        )

        return cls(
            tax_year=tax_year,
            expenses=medical,
            deduction=deduction,
            breakdown=breakdown_by_category(df),
        )

    @property
    def total_medical_expenses(self) -> Decimal:
        return self.deduction.total_medical_expenses

    def to_dict(self) -> dict[str, Any]:
        return {
            "tax_year": self.tax_year,
            "adjusted_gross_income": str(self.deduction.agi),
            "total_medical_expenses": str(self.deduction.total_medical_expenses),
            "agi_threshold": str(self.deduction.threshold),
            "deductible_amount": str(self.deduction.deductible),
            "expense_breakdown": [
                {"category": item.category, "count": item.count, "total": item.total.to_cents()}
                for item in self.breakdown
            ],
        }

    def header_lines(self) -> list[str]:
        d = self.deduction
        return [
            "Schedule A - Medical and Dental Expenses",
            "",
            f"Tax Year: {self.tax_year}",
            f"Adjusted Gross Income: {format_decimal_dollars(d.agi)}",
            f"7.5% AGI Threshold: {format_decimal_dollars(d.threshold)}",
            f"Total Medical Expenses: {format_decimal_dollars(d.total_medical_expenses)}",
            f"Deductible Amount (Line 4): {format_decimal_dollars(d.deductible)}",
            "",
            "Detailed Expense Breakdown:",
        ]

    def to_csv(self, path: Path) -> Path:
        """Write the summary header and one row per expense."""
        df = expenses_to_dataframe(self.expenses)
        rows = pd.DataFrame(
            {
                "Date": df["date"],
                "Category": df["category"],
                "Description": df["description"],
                "Amount": [Money.from_cents(int(c)).to_dollars().lstrip("$") for c in df["amount_cents"]],
                "Vendor": df["vendor"],
                "Care Recipient": df["care_recipient"],
            },
            columns=CSV_COLUMNS,
        )

        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w", newline="") as f:
            f.write("\n".join(self.header_lines()) + "\n")
            rows.to_csv(f, index=False, lineterminator="\n")

        logger.info("Wrote Schedule A export with %d rows to %s", len(rows), path)
        return path
