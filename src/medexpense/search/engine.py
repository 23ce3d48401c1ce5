#!/usr/bin/env python3
"""
Category Search Engine

Ranks the whole taxonomy against a free-text query and returns the best
suggestions for an expense category picker.
"""

import logging
from dataclasses import dataclass
from typing import Any

from ..taxonomy.models import MedicalCategory, MedicalSubcategory
from ..taxonomy.store import TaxonomyStore
from .scorer import MatchLevel, RelevanceScorer, normalize_query

logger = logging.getLogger(__name__)

DEFAULT_MAX_RESULTS = 10


@dataclass(frozen=True)
class SearchResult:
    """One ranked suggestion: a category, optionally narrowed to a subcategory."""

    category: MedicalCategory
    relevance: int
    subcategory: MedicalSubcategory | None = None

    @property
    def level(self) -> MatchLevel:
        return MatchLevel.SUBCATEGORY if self.subcategory else MatchLevel.CATEGORY

    @property
    def category_label(self) -> str:
        return self.category.label

    @property
    def subcategory_label(self) -> str | None:
        return self.subcategory.label if self.subcategory else None

    @property
    def display_label(self) -> str:
        """Most specific label, as shown in the suggestion list."""
        return self.subcategory.label if self.subcategory else self.category.label

    @property
    def description(self) -> str:
        return self.subcategory.description if self.subcategory else self.category.description

    @property
    def breadcrumb(self) -> str:
        if self.subcategory:
            return f"{self.category.label} → {self.subcategory.label}"
        return self.category.label

    def to_dict(self) -> dict[str, Any]:
        return {
            "category_label": self.category_label,
            "subcategory_label": self.subcategory_label,
            "relevance": self.relevance,
            "level": self.level.value,
        }


class SearchEngine:
    """
    Relevance-ranked search over a TaxonomyStore.

    Results are sorted by descending relevance. Ties keep taxonomy traversal
    order (each category before its own subcategories, everything in declared
    order), which relies on sorted() being stable.
    """

    def __init__(
        self,
        store: TaxonomyStore,
        scorer: RelevanceScorer | None = None,
        max_results: int = DEFAULT_MAX_RESULTS,
    ):
        if max_results <= 0:
            raise ValueError(f"max_results must be positive, got {max_results}")
        self.store = store
        self.scorer = scorer or RelevanceScorer()
        self.max_results = max_results

    def search(self, query: str) -> list[SearchResult]:
        """
        Search the taxonomy.

        Args:
            query: Raw user input; surrounding whitespace and case are ignored

        Returns:
            Up to max_results results, each with relevance > 0. An empty list
            means "no matches".
        """
        term = normalize_query(query)
        if not term:
            return []

        candidates = [
            SearchResult(category=entry.category, relevance=entry.relevance, subcategory=entry.subcategory)
            for category in self.store.list_categories()
            for entry in self.scorer.score_entries(term, category)
        ]

        ranked = sorted(candidates, key=lambda result: result.relevance, reverse=True)
        results = ranked[: self.max_results]

        logger.debug("Search %r matched %d entries, returning %d", term, len(candidates), len(results))
        return results
