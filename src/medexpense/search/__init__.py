"""
Category Search Package

Free-text search over the medical expense taxonomy.

Key Components:
- scorer: Additive weighted substring relevance scoring
- engine: Taxonomy-wide ranking, filtering and truncation
"""

from .engine import DEFAULT_MAX_RESULTS, SearchEngine, SearchResult
from .scorer import MatchLevel, RelevanceScorer, ScoredEntry, ScoringWeights, normalize_query

__all__ = [
    "DEFAULT_MAX_RESULTS",
    "MatchLevel",
    "RelevanceScorer",
    "ScoredEntry",
    "ScoringWeights",
    "SearchEngine",
    "SearchResult",
    "normalize_query",
]
