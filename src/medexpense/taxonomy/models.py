#!/usr/bin/env python3
"""
Taxonomy Domain Models

Immutable category and subcategory records. Collections are tuples so a
loaded taxonomy cannot be mutated after construction.
"""

from dataclasses import dataclass, field
from typing import Any

# IRS reference tag (and category id) of items deductible only when prescribed
DOCTOR_PRESCRIBED_ONLY = "doctor-prescribed-only"


@dataclass(frozen=True)
class MedicalSubcategory:
    """A specific kind of medical expense within a category."""

    id: str
    label: str
    irs_reference_tag: str
    description: str
    search_terms: tuple[str, ...] = ()
    examples: tuple[str, ...] = ()

    @property
    def requires_prescription(self) -> bool:
        return self.irs_reference_tag == DOCTOR_PRESCRIBED_ONLY

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "label": self.label,
            "irs_reference_tag": self.irs_reference_tag,
            "description": self.description,
            "search_terms": list(self.search_terms),
            "examples": list(self.examples),
        }


@dataclass(frozen=True)
class MedicalCategory:
    """A top-level IRS Publication 502 medical expense category."""

    id: str
    label: str
    irs_reference_tag: str
    description: str
    search_terms: tuple[str, ...] = ()
    subcategories: tuple[MedicalSubcategory, ...] = field(default_factory=tuple)

    @property
    def requires_prescription(self) -> bool:
        return DOCTOR_PRESCRIBED_ONLY in (self.id, self.irs_reference_tag)

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "label": self.label,
            "irs_reference_tag": self.irs_reference_tag,
            "description": self.description,
            "search_terms": list(self.search_terms),
            "subcategories": [sub.to_dict() for sub in self.subcategories],
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "MedicalCategory":
        """Build a category (and its subcategories) from plain data."""
        return cls(
            id=data["id"],
            label=data["label"],
            irs_reference_tag=data["irs_reference_tag"],
            description=data["description"],
            search_terms=tuple(data.get("search_terms", ())),
            subcategories=tuple(
                MedicalSubcategory(
                    id=sub["id"],
                    label=sub["label"],
                    irs_reference_tag=sub["irs_reference_tag"],
                    description=sub["description"],
                    search_terms=tuple(sub.get("search_terms", ())),
                    examples=tuple(sub.get("examples", ())),
                )
                for sub in data.get("subcategories", ())
            ),
        )
