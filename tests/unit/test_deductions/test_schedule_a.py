#!/usr/bin/env python3
"""Tests for Schedule A medical expense summaries."""

from decimal import Decimal

import pytest

from medexpense.core.dates import FinancialDate
from medexpense.core.models import ExpenseRecord
from medexpense.core.money import Money
from medexpense.deductions.schedule_a import (
    CSV_COLUMNS,
    CategoryBreakdown,
    ScheduleASummary,
    available_tax_years,
    breakdown_by_category,
    expenses_to_dataframe,
    filter_medical_expenses,
)


def _expense(expense_id, date_str, cents, category, description="", vendor=None, recipient=None):
    return ExpenseRecord(
        id=expense_id,
        date=FinancialDate.from_string(date_str),
        amount=Money.from_cents(cents),
        category=category,
        description=description,
        vendor=vendor,
        care_recipient=recipient,
    )


@pytest.fixture
def expenses():
    return [
        _expense("e1", "2024-03-01", 10000, "Dental & Vision", "Cleaning", "Sample Dental Group", "Self"),
        _expense("e2", "2024-01-15", 5000, "Doctor & Medical Services", "Checkup", "Test Family Clinic", "Self"),
        _expense("e3", "2024-05-01", 3000, "Groceries", "Weekly shop"),
        _expense("e4", "2023-12-31", 99900, "Dental & Vision", "Crown"),
        _expense("e5", "2024-06-01", 2550, "Dental & Vision", "Contacts", "Mock Vision Center", "Spouse"),
    ]


@pytest.mark.deductions
class TestFiltering:
    """Test selecting medical expenses."""

    def test_filter_by_year_and_membership(self, expenses, resolver):
        selected = filter_medical_expenses(expenses, resolver, 2024)
        assert [e.id for e in selected] == ["e1", "e2", "e5"]

    def test_filter_all_years(self, expenses, resolver):
        selected = filter_medical_expenses(expenses, resolver)
        assert [e.id for e in selected] == ["e1", "e2", "e4", "e5"]

    def test_available_tax_years_most_recent_first(self, expenses):
        assert available_tax_years(expenses) == [2024, 2023]
        assert available_tax_years([]) == []


@pytest.mark.deductions
class TestDataFrame:
    """Test DataFrame conversion and grouping."""

    def test_sorted_by_date(self, expenses):
        df = expenses_to_dataframe(expenses)

        assert list(df["id"]) == ["e4", "e2", "e1", "e3", "e5"]
        assert df["amount_cents"].sum() == 10000 + 5000 + 3000 + 99900 + 2550

    def test_empty(self):
        df = expenses_to_dataframe([])

        assert df.empty
        assert "amount_cents" in df.columns
        assert breakdown_by_category(df) == []

    def test_breakdown_in_first_appearance_order(self, expenses, resolver):
        df = expenses_to_dataframe(filter_medical_expenses(expenses, resolver, 2024))

        assert breakdown_by_category(df) == [
            CategoryBreakdown(category="Doctor & Medical Services", count=1, total=Money.from_cents(5000)),
            CategoryBreakdown(category="Dental & Vision", count=2, total=Money.from_cents(12550)),
        ]


@pytest.mark.deductions
class TestScheduleASummary:
    """Test summary construction and export."""

    def test_build(self, expenses, resolver):
        summary = ScheduleASummary.build(expenses, 1000, 2024, resolver)

        assert summary.tax_year == 2024
        assert len(summary.expenses) == 3
        assert summary.total_medical_expenses == Decimal("175.50")
        assert summary.deduction.threshold == Decimal("75")
        assert summary.deduction.deductible == Decimal("100.50")

    def test_build_no_expenses(self, resolver):
        summary = ScheduleASummary.build([], 50000, 2024, resolver)

        assert summary.expenses == []
        assert summary.breakdown == []
        assert summary.deduction.deductible == 0

    def test_to_dict(self, expenses, resolver):
        data = ScheduleASummary.build(expenses, 1000, 2024, resolver).to_dict()

        assert data["tax_year"] == 2024
        assert Decimal(data["deductible_amount"]) == Decimal("100.50")
        assert data["expense_breakdown"][1] == {"category": "Dental & Vision", "count": 2, "total": 12550}

    def test_header_lines(self, expenses, resolver):
        lines = ScheduleASummary.build(expenses, 1000, 2024, resolver).header_lines()

        assert lines[0] == "Schedule A - Medical and Dental Expenses"
        assert "Tax Year: 2024" in lines
        assert "Adjusted Gross Income: $1,000.00" in lines
        assert "7.5% AGI Threshold: $75.00" in lines
        assert "Total Medical Expenses: $175.50" in lines
        assert "Deductible Amount (Line 4): $100.50" in lines
        assert lines[-1] == "Detailed Expense Breakdown:"

    def test_to_csv(self, expenses, resolver, tmp_path):
        summary = ScheduleASummary.build(expenses, 1000, 2024, resolver)
        output = summary.to_csv(tmp_path / "exports" / "schedule_a_2024.csv")

        lines = output.read_text().splitlines()
        header_count = len(summary.header_lines())

        assert lines[:header_count] == summary.header_lines()
        assert lines[header_count] == ",".join(CSV_COLUMNS)
        assert lines[header_count + 1] == "2024-01-15,Doctor & Medical Services,Checkup,50.00,Test Family Clinic,Self"
        assert lines[header_count + 3] == "2024-06-01,Dental & Vision,Contacts,25.50,Mock Vision Center,Spouse"
        assert len(lines) == header_count + 4

    def test_to_csv_empty(self, resolver, tmp_path):
        summary = ScheduleASummary.build([], 1000, 2024, resolver)
        lines = summary.to_csv(tmp_path / "empty.csv").read_text().splitlines()

        assert lines[-1] == ",".join(CSV_COLUMNS)
