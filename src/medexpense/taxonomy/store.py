#!/usr/bin/env python3
"""
Taxonomy Store

Read-only repository over the medical expense category tree. Built once and
passed explicitly to the search engine and resolver; there is no module-level
taxonomy instance.

Ids are the canonical keys. Label lookups exist because expense forms
round-trip display labels, so label uniqueness is checked at construction.
"""

import logging
from collections.abc import Iterable, Iterator

from .data import default_categories
from .models import MedicalCategory, MedicalSubcategory

logger = logging.getLogger(__name__)


class TaxonomyError(ValueError):
    """Raised when a taxonomy violates its structural invariants."""


class TaxonomyStore:
    """
    Immutable, validated collection of medical expense categories.

    Example:
        >>> store = TaxonomyStore.default()
        >>> store.find_category_by_label("Dental & Vision").id
        'dental-vision'
    """

    def __init__(self, categories: Iterable[MedicalCategory]):
        self._categories: tuple[MedicalCategory, ...] = tuple(categories)
        _validate(self._categories)

        self._by_id: dict[str, MedicalCategory] = {c.id: c for c in self._categories}
        self._by_label: dict[str, MedicalCategory] = {c.label: c for c in self._categories}
        self._subcategories_by_id: dict[str, tuple[MedicalCategory, MedicalSubcategory]] = {
            sub.id: (category, sub) for category in self._categories for sub in category.subcategories
        }

        logger.debug(
            "Loaded taxonomy with %d categories and %d subcategories",
            len(self._categories),
            len(self._subcategories_by_id),
        )

    @classmethod
    def default(cls) -> "TaxonomyStore":
        """Build a store over the compiled-in IRS Publication 502 taxonomy."""
        return cls(default_categories())

    def list_categories(self) -> tuple[MedicalCategory, ...]:
        """All categories in declaration order."""
        return self._categories

    def category_labels(self) -> list[str]:
        return [category.label for category in self._categories]

    def find_category_by_label(self, label: str) -> MedicalCategory | None:
        """Exact, case-sensitive label lookup."""
        return self._by_label.get(label)

    def find_subcategory_by_label(self, category: MedicalCategory, label: str) -> MedicalSubcategory | None:
        """Exact, case-sensitive lookup within one category's subcategories."""
        for subcategory in category.subcategories:
            if subcategory.label == label:
                return subcategory
        return None

    def find_category_by_id(self, category_id: str) -> MedicalCategory | None:
        return self._by_id.get(category_id)

    def find_subcategory_by_id(self, subcategory_id: str) -> tuple[MedicalCategory, MedicalSubcategory] | None:
        """Return the (parent category, subcategory) pair for a subcategory id."""
        return self._subcategories_by_id.get(subcategory_id)

    def __len__(self) -> int:
        return len(self._categories)

    def __iter__(self) -> Iterator[MedicalCategory]:
        return iter(self._categories)

    def __contains__(self, label: object) -> bool:
        return label in self._by_label


def _validate(categories: tuple[MedicalCategory, ...]) -> None:
    """Fail fast on duplicate ids or labels, missing IRS tags and shared subcategories."""
    seen_ids: set[str] = set()
    seen_labels: set[str] = set()
    seen_subcategories: set[int] = set()

    for category in categories:
        if not category.id:
            raise TaxonomyError(f"Category '{category.label}' has an empty id")
        if category.id in seen_ids:
            raise TaxonomyError(f"Duplicate taxonomy id: {category.id}")
        seen_ids.add(category.id)

        if category.label in seen_labels:
            raise TaxonomyError(f"Duplicate category label: {category.label}")
        seen_labels.add(category.label)

        if not category.irs_reference_tag.strip():
            raise TaxonomyError(f"Category '{category.id}' has no IRS reference tag")

        sub_labels: set[str] = set()
        for subcategory in category.subcategories:
            if id(subcategory) in seen_subcategories:
                raise TaxonomyError(f"Subcategory '{subcategory.id}' is shared between categories")
            seen_subcategories.add(id(subcategory))

            if not subcategory.id:
                raise TaxonomyError(f"Subcategory '{subcategory.label}' has an empty id")
            if subcategory.id in seen_ids:
                raise TaxonomyError(f"Duplicate taxonomy id: {subcategory.id}")
            seen_ids.add(subcategory.id)

            if subcategory.label in sub_labels:
                raise TaxonomyError(
                    f"Duplicate subcategory label '{subcategory.label}' in category '{category.label}'"
                )
            sub_labels.add(subcategory.label)

            if not subcategory.irs_reference_tag.strip():
                raise TaxonomyError(f"Subcategory '{subcategory.id}' has no IRS reference tag")
