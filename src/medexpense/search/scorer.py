#!/usr/bin/env python3
"""
Relevance Scoring

Additive substring scoring of a search query against taxonomy entries.
Every matching field adds its weight, so an entry matching on both label and
search terms outranks one matching on search terms alone.
"""

from dataclasses import dataclass
from enum import Enum

from ..taxonomy.models import MedicalCategory, MedicalSubcategory


class MatchLevel(Enum):
    """Which level of the taxonomy a search result refers to"""

    CATEGORY = "category"
    SUBCATEGORY = "subcategory"


@dataclass(frozen=True)
class ScoringWeights:
    """Per-field weights. Subcategory weights are higher since they are more specific."""

    category_label: int = 10
    category_search_term: int = 8
    category_description: int = 5

    subcategory_label: int = 15
    subcategory_search_term: int = 12
    subcategory_example: int = 10
    subcategory_description: int = 7


@dataclass(frozen=True)
class ScoredEntry:
    """A category, or a category+subcategory pair, with its relevance score."""

    category: MedicalCategory
    relevance: int
    subcategory: MedicalSubcategory | None = None


def normalize_query(query: str) -> str:
    """Trim and lower-case a raw query."""
    return query.strip().lower()


def _contains(text: str, term: str) -> bool:
    return term in text.lower()


def _any_contains(texts: tuple[str, ...], term: str) -> bool:
    return any(term in text.lower() for text in texts)


class RelevanceScorer:
    """Scores normalized queries against categories and subcategories"""

    def __init__(self, weights: ScoringWeights | None = None):
        self.weights = weights or ScoringWeights()

    def score_category(self, term: str, category: MedicalCategory) -> int:
        """
        Category-level score for an already-normalized query.

        Subcategory matches never roll up into this score.
        """
        if not term:
            return 0

        w = self.weights
        score = 0
        if _contains(category.label, term):
            score += w.category_label
        if _any_contains(category.search_terms, term):
            score += w.category_search_term
        if _contains(category.description, term):
            score += w.category_description
        return score

    def score_subcategory(self, term: str, subcategory: MedicalSubcategory) -> int:
        """Subcategory-level score for an already-normalized query."""
        if not term:
            return 0

        w = self.weights
        score = 0
        if _contains(subcategory.label, term):
            score += w.subcategory_label
        if _any_contains(subcategory.search_terms, term):
            score += w.subcategory_search_term
        if _any_contains(subcategory.examples, term):
            score += w.subcategory_example
        if _contains(subcategory.description, term):
            score += w.subcategory_description
        return score

    def score_entries(self, term: str, category: MedicalCategory) -> list[ScoredEntry]:
        """
        Score a category and each of its subcategories independently.

        Returns only entries with a positive score, in traversal order:
        the category first, then its subcategories in declared order.
        """
        entries = []

        category_score = self.score_category(term, category)
        if category_score > 0:
            entries.append(ScoredEntry(category=category, relevance=category_score))

        for subcategory in category.subcategories:
            sub_score = self.score_subcategory(term, subcategory)
            if sub_score > 0:
                entries.append(ScoredEntry(category=category, relevance=sub_score, subcategory=subcategory))

        return entries
