#!/usr/bin/env python3
"""
Category Resolver

Turns a (category label, subcategory label) selection from an expense form
into the authoritative IRS metadata for that expense.
"""

import logging
from dataclasses import dataclass

from ..taxonomy.models import MedicalCategory, MedicalSubcategory
from ..taxonomy.store import TaxonomyStore

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class IrsMetadata:
    """IRS Publication 502 reference attached to a classified expense."""

    irs_reference_tag: str
    description: str


@dataclass(frozen=True)
class Resolution:
    """A confirmed taxonomy selection."""

    category: MedicalCategory
    subcategory: MedicalSubcategory | None = None

    @property
    def irs_reference_tag(self) -> str:
        """Subcategory tag when one is selected, since it is the more specific guidance."""
        if self.subcategory:
            return self.subcategory.irs_reference_tag
        return self.category.irs_reference_tag

    @property
    def description(self) -> str:
        if self.subcategory:
            return self.subcategory.description
        return self.category.description

    @property
    def requires_prescription(self) -> bool:
        """Whether the doctor-prescription disclosure must be asked."""
        if self.category.requires_prescription:
            return True
        return self.subcategory is not None and self.subcategory.requires_prescription

    def metadata(self) -> IrsMetadata:
        return IrsMetadata(irs_reference_tag=self.irs_reference_tag, description=self.description)


class CategoryResolver:
    """Label-based adapter over a TaxonomyStore for form call sites."""

    def __init__(self, store: TaxonomyStore):
        self.store = store

    def resolve(self, category_label: str, subcategory_label: str | None = None) -> Resolution | None:
        """
        Resolve a selection by exact label.

        Args:
            category_label: Category display label
            subcategory_label: Optional subcategory display label

        Returns:
            Resolution, or None when the category does not exist. An unknown
            subcategory label falls back to the category alone, so its IRS tag
            and description apply.
        """
        category = self.store.find_category_by_label(category_label)
        if category is None:
            logger.debug("Unknown category label: %r", category_label)
            return None

        if not subcategory_label:
            return Resolution(category=category)

        subcategory = self.store.find_subcategory_by_label(category, subcategory_label)
        if subcategory is None:
            logger.debug("Unknown subcategory %r under %r", subcategory_label, category_label)
            return Resolution(category=category)

        return Resolution(category=category, subcategory=subcategory)

    def resolve_ids(self, category_id: str, subcategory_id: str | None = None) -> Resolution | None:
        """Resolve a selection by canonical ids."""
        category = self.store.find_category_by_id(category_id)
        if category is None:
            return None
        if not subcategory_id:
            return Resolution(category=category)

        found = self.store.find_subcategory_by_id(subcategory_id)
        if found is None or found[0] is not category:
            return None
        return Resolution(category=category, subcategory=found[1])

    def all_category_labels(self) -> list[str]:
        """Category labels in declaration order."""
        return self.store.category_labels()

    def subcategory_labels_for(self, category_label: str) -> list[str]:
        """Subcategory labels for a category, or [] when the category is unknown."""
        category = self.store.find_category_by_label(category_label)
        if category is None:
            return []
        return [sub.label for sub in category.subcategories]

    def is_medical_category(self, category_label: str | None) -> bool:
        """Membership test used to decide whether a stored expense counts as medical."""
        return bool(category_label) and category_label in self.store
