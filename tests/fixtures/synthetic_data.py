#!/usr/bin/env python3
"""
Synthetic Test Data Generators

Generates synthetic, anonymized expense records for integration and CLI tests.
All amounts, dates, ids, vendors and names are synthetic.

Note: Uses a seeded random.Random (not cryptographic use) so runs are repeatable.
"""

import json
import random
from datetime import date, timedelta
from pathlib import Path
from typing import Any

from medexpense.core.currency import cents_to_dollars_str

SYNTHETIC_VENDORS = [
    "Example Pharmacy",
    "Test Family Clinic",
    "Sample Dental Group",
    "Mock Vision Center",
    "Demo Medical Supply",
]

# Category labels that exist in the default taxonomy, with a subcategory each
SYNTHETIC_MEDICAL_SELECTIONS = [
    ("Doctor & Medical Services", "Doctor Visits"),
    ("Dental & Vision", "Dental Care"),
    ("Dental & Vision", "Glasses & Contacts"),
    ("Prescriptions & Medical Supplies", "Prescription Medications"),
    ("Transportation & Travel", "Mileage & Parking"),
]

# Labels that are not taxonomy categories
SYNTHETIC_OTHER_CATEGORIES = [
    "Groceries",
    "Dining Out",
    "Office Supplies",
]

SYNTHETIC_RECIPIENTS = ["Self", "Spouse", "Dependent A"]


def generate_synthetic_expenses(
    num_medical: int = 10,
    num_other: int = 5,
    tax_year: int = 2024,
    seed: int = 502,
) -> list[dict[str, Any]]:
    """
    Generate expense storage records (dollar amounts as strings).

    Args:
        num_medical: Number of records filed under taxonomy categories
        num_other: Number of non-medical records
        tax_year: Calendar year for all dates
        seed: Random seed

    Returns:
        List of expense record dictionaries
    """
    rng = random.Random(seed)
    start = date(tax_year, 1, 1)
    records = []

    for i in range(num_medical + num_other):
        expense_date = start + timedelta(days=rng.randint(0, 364))
        amount_cents = rng.randint(1000, 50000)

        if i < num_medical:
            category, subcategory = rng.choice(SYNTHETIC_MEDICAL_SELECTIONS)
        else:
            category, subcategory = rng.choice(SYNTHETIC_OTHER_CATEGORIES), None

        records.append(
            {
                "id": f"expense-{i:04d}",
                "date": expense_date.isoformat(),
                "amount": cents_to_dollars_str(amount_cents),
                "category": category,
                "subcategory": subcategory,
                "description": f"Synthetic expense {i}",
                "vendor": rng.choice(SYNTHETIC_VENDORS),
                "care_recipient": rng.choice(SYNTHETIC_RECIPIENTS),
                "is_tax_deductible": i < num_medical,
            }
        )

    return records


def write_expenses_file(path: Path, records: list[dict[str, Any]]) -> Path:
    """Write expense records as a JSON export."""
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w") as f:
        json.dump(records, f, indent=2)
    return path
