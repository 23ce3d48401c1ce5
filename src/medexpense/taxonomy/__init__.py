"""
Medical Expense Taxonomy Package

IRS Publication 502 aligned category tree used for classifying expenses.

Key Components:
- models: Immutable MedicalCategory / MedicalSubcategory records
- data: Compiled-in category data
- store: Validated, read-only TaxonomyStore with id and label lookups
"""

from .data import MEDICAL_CATEGORY_DATA, default_categories
from .models import DOCTOR_PRESCRIBED_ONLY, MedicalCategory, MedicalSubcategory
from .store import TaxonomyError, TaxonomyStore

__all__ = [
    "DOCTOR_PRESCRIBED_ONLY",
    "MEDICAL_CATEGORY_DATA",
    "MedicalCategory",
    "MedicalSubcategory",
    "TaxonomyError",
    "TaxonomyStore",
    "default_categories",
]
