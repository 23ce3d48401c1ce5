#!/usr/bin/env python3
"""
Core Data Models for Medical Expense Tracking

Expense records as handed over by the expense storage service. The engine
never creates or persists these; it reads them to build Schedule A summaries
and returns annotated copies after prescription disclosure.
"""

from dataclasses import dataclass, replace
from typing import Any

from .dates import FinancialDate
from .money import Money


@dataclass(frozen=True)
class ExpenseRecord:
    """
    A single classified expense.

    `category` and `subcategory` hold taxonomy display labels, since that is
    what the expense forms round-trip. `prescription_confirmed` is
    tri-state: True (prescribed), False (not prescribed), None (unsure or
    never asked).
    """

    id: str
    date: FinancialDate
    amount: Money
    category: str

    # Optional fields
    subcategory: str | None = None
    description: str | None = None
    vendor: str | None = None
    care_recipient: str | None = None
    is_tax_deductible: bool | None = None
    irs_reference_tag: str | None = None
    prescription_confirmed: bool | None = None
    prescription_note: str | None = None

    def with_prescription(self, prescribed: bool | None, note: str | None) -> "ExpenseRecord":
        """Return a copy annotated with a prescription disclosure answer."""
        return replace(self, prescription_confirmed=prescribed, prescription_note=note)

    def with_irs_reference_tag(self, tag: str) -> "ExpenseRecord":
        return replace(self, irs_reference_tag=tag)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization (amount in cents)."""
        return {
            "id": self.id,
            "date": self.date.to_iso_string(),
            "amount": self.amount.to_cents(),
            "category": self.category,
            "subcategory": self.subcategory,
            "description": self.description,
            "vendor": self.vendor,
            "care_recipient": self.care_recipient,
            "is_tax_deductible": self.is_tax_deductible,
            "irs_reference_tag": self.irs_reference_tag,
            "prescription_confirmed": self.prescription_confirmed,
            "prescription_note": self.prescription_note,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ExpenseRecord":
        """
        Create ExpenseRecord from a storage record.

        Amounts are dollar values (JSON numbers or strings like "$45.99").
        Both snake_case and camelCase keys are accepted.
        """

        def pick(snake: str, camel: str) -> Any:
            return data[snake] if snake in data else data.get(camel)

        return cls(
            id=str(data["id"]),
            date=FinancialDate.from_string(data["date"]),
            amount=Money.from_dollars(data["amount"]),
            category=data["category"],
            subcategory=data.get("subcategory") or None,
            description=data.get("description"),
            vendor=data.get("vendor"),
            care_recipient=pick("care_recipient", "careRecipientName"),
            is_tax_deductible=pick("is_tax_deductible", "isTaxDeductible"),
            irs_reference_tag=pick("irs_reference_tag", "irsReferenceTag"),
            prescription_confirmed=pick("prescription_confirmed", "prescriptionConfirmed"),
            prescription_note=pick("prescription_note", "prescriptionNote"),
        )
