"""
Core domain models and pipeline stages.

This package contains data types and the pure, single-threaded stages
that run after collection: deduplication, recency filtering, scoring
and ranking.
"""

from .types import AggregationResult, Article, Entity, HeadlinePolicy, MissingInputError, TermStat
from .entity import build_entities, build_queries, make_entity, normalize_entity_name
from .dedup import canonical_url, dedup_articles
from .recency import filter_recent
from .scoring import build_excluded_terms, score_terms, tokenize
from .ranking import rank

__all__ = [
    "AggregationResult",
    "Article",
    "Entity",
    "HeadlinePolicy",
    "MissingInputError",
    "TermStat",
    "build_entities",
    "build_queries",
    "make_entity",
    "normalize_entity_name",
    "canonical_url",
    "dedup_articles",
    "filter_recent",
    "build_excluded_terms",
    "score_terms",
    "tokenize",
    "rank",
]
