#!/usr/bin/env python3
"""
Medical Expense Deduction Calculator

Schedule A allows medical and dental expenses only to the extent they exceed
7.5% of adjusted gross income (AGI). All arithmetic is Decimal and nothing is
rounded here; rounding for display is the caller's job.
"""

from dataclasses import dataclass
from decimal import Decimal

from ..core.currency import DecimalInput, to_decimal
from ..core.money import Money

AGI_THRESHOLD_RATE = Decimal("0.075")

_ZERO = Decimal(0)
_HUNDRED = Decimal(100)

Amount = DecimalInput | Money


def _amount(value: Amount, name: str) -> Decimal:
    result = value.to_decimal() if isinstance(value, Money) else to_decimal(value)
    if result < 0:
        raise ValueError(f"{name} must not be negative, got {value}")
    return result


@dataclass(frozen=True)
class DeductionSummary:
    """Threshold position of a year's medical expenses."""

    agi: Decimal
    total_medical_expenses: Decimal
    threshold: Decimal
    deductible: Decimal
    progress_percent: Decimal

    @property
    def remaining_to_threshold(self) -> Decimal:
        """Additional spending needed before anything becomes deductible."""
        return max(_ZERO, self.threshold - self.total_medical_expenses)

    @property
    def threshold_reached(self) -> bool:
        return self.progress_percent >= _HUNDRED


class DeductionCalculator:
    """
    AGI threshold arithmetic.

    Example:
        >>> calc = DeductionCalculator()
        >>> calc.compute_threshold(100000)
        Decimal('7500.000')
        >>> calc.compute_deductible(10000, 100000)
        Decimal('2500.000')
    """

    def __init__(self, rate: DecimalInput = AGI_THRESHOLD_RATE):
        self.rate = to_decimal(rate)
        if not _ZERO < self.rate < 1:
            raise ValueError(f"AGI threshold rate must be between 0 and 1, got {rate}")

    def compute_threshold(self, agi: Amount) -> Decimal:
        """AGI times the threshold rate, unrounded."""
        return _amount(agi, "agi") * self.rate

    def compute_deductible(self, total_medical_expenses: Amount, agi: Amount) -> Decimal:
        """Expenses above the threshold; never negative."""
        total = _amount(total_medical_expenses, "total_medical_expenses")
        return max(_ZERO, total - self.compute_threshold(agi))

    def progress_percent(self, total_medical_expenses: Amount, agi: Amount) -> Decimal:
        """
        How far expenses are toward the threshold, capped at 100.

        A zero threshold (AGI of 0) gives 100 when there are any expenses
        and 0 otherwise.
        """
        total = _amount(total_medical_expenses, "total_medical_expenses")
        threshold = self.compute_threshold(agi)

        if threshold == 0:
            return _HUNDRED if total > 0 else _ZERO

        return min(_HUNDRED, total / threshold * _HUNDRED)

    def summarize(self, total_medical_expenses: Amount, agi: Amount) -> DeductionSummary:
        return DeductionSummary(
            agi=_amount(agi, "agi"),
            total_medical_expenses=_amount(total_medical_expenses, "total_medical_expenses"),
            threshold=self.compute_threshold(agi),
            deductible=self.compute_deductible(total_medical_expenses, agi),
            progress_percent=self.progress_percent(total_medical_expenses, agi),
        )


_default_calculator = DeductionCalculator()


def compute_threshold(agi: Amount) -> Decimal:
    """7.5% of AGI."""
    return _default_calculator.compute_threshold(agi)


def compute_deductible(total_medical_expenses: Amount, agi: Amount) -> Decimal:
    """max(0, total - 7.5% of AGI)."""
    return _default_calculator.compute_deductible(total_medical_expenses, agi)


def progress_percent(total_medical_expenses: Amount, agi: Amount) -> Decimal:
    """Percent of the 7.5% threshold reached, in [0, 100]."""
    return _default_calculator.progress_percent(total_medical_expenses, agi)
