"""
Medical Expense Deductions Package

Schedule A arithmetic over already-classified expenses.

Key Components:
- calculator: 7.5%-of-AGI threshold, deductible excess and progress
- schedule_a: Tax-year filtering, category breakdown and CSV export
"""

from .calculator import (
    AGI_THRESHOLD_RATE,
    DeductionCalculator,
    DeductionSummary,
    compute_deductible,
    compute_threshold,
    progress_percent,
)
from .schedule_a import (
    CategoryBreakdown,
    ScheduleASummary,
    available_tax_years,
    breakdown_by_category,
    expenses_to_dataframe,
    filter_medical_expenses,
)

__all__ = [
    "AGI_THRESHOLD_RATE",
    "CategoryBreakdown",
    "DeductionCalculator",
    "DeductionSummary",
    "ScheduleASummary",
    "available_tax_years",
    "breakdown_by_category",
    "compute_deductible",
    "compute_threshold",
    "expenses_to_dataframe",
    "filter_medical_expenses",
    "progress_percent",
]
