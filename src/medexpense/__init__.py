"""
Medical Expense Classification and Deduction Engine

Classifies expenses against an IRS Publication 502 aligned taxonomy and
computes the Schedule A medical expense deduction.

Domain Packages:
- core: Currency handling, expense records, configuration
- taxonomy: Immutable category/subcategory tree
- search: Relevance-ranked free-text category search
- classification: Label resolution and doctor-prescription disclosure
- deductions: 7.5%-of-AGI threshold arithmetic and Schedule A summaries
- cli: Command-line interface

Example Usage:
    from medexpense import TaxonomyStore, SearchEngine, CategoryResolver

    store = TaxonomyStore.default()
    results = SearchEngine(store).search("hearing aid batteries")
    resolution = CategoryResolver(store).resolve("Dental & Vision", "Dental Care")
"""

__version__ = "0.1.0"
__author__ = "Medexpense Contributors"

from .classification import (
    CategoryResolver,
    ConditionalDisclosureFlow,
    DisclosureState,
    PrescriptionAnswer,
    Resolution,
)
from .core.config import Environment, get_config
from .core.models import ExpenseRecord
from .core.money import Money
from .deductions import (
    DeductionCalculator,
    ScheduleASummary,
    compute_deductible,
    compute_threshold,
    progress_percent,
)
from .search import SearchEngine, SearchResult
from .taxonomy import MedicalCategory, MedicalSubcategory, TaxonomyError, TaxonomyStore

__all__ = [
    # Taxonomy
    "MedicalCategory",
    "MedicalSubcategory",
    "TaxonomyError",
    "TaxonomyStore",
    # Search
    "SearchEngine",
    "SearchResult",
    # Classification
    "CategoryResolver",
    "ConditionalDisclosureFlow",
    "DisclosureState",
    "PrescriptionAnswer",
    "Resolution",
    # Deductions
    "DeductionCalculator",
    "ScheduleASummary",
    "compute_deductible",
    "compute_threshold",
    "progress_percent",
    # Core
    "Environment",
    "ExpenseRecord",
    "Money",
    "get_config",
]
