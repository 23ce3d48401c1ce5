"""
Expense Classification Package

Resolves form selections to IRS metadata and runs the doctor-prescription
disclosure for conditionally deductible categories.
"""

from .disclosure import (
    ConditionalDisclosureFlow,
    DisclosureState,
    DisclosureStateError,
    PrescriptionAnswer,
)
from .resolver import CategoryResolver, IrsMetadata, Resolution

__all__ = [
    "CategoryResolver",
    "ConditionalDisclosureFlow",
    "DisclosureState",
    "DisclosureStateError",
    "IrsMetadata",
    "PrescriptionAnswer",
    "Resolution",
]
