"""
Core data types for the match news engine.

This module defines the fundamental data structures used throughout the pipeline:
- Entity: A participant name in display and canonical form
- Article: A normalized news item produced by a source adapter
- TermStat: TF-IDF statistics for one term of the corpus
- AggregationResult: The ranked keywords and headlines returned to callers
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any


class MissingInputError(ValueError):
    """Raised when a required entity name is missing or normalizes to nothing."""


class HeadlinePolicy(str, Enum):
    """How headlines are selected from the corpus."""

    PRIORITY = "priority"
    KEYWORD = "keyword"

    @classmethod
    def parse(cls, value: str | HeadlinePolicy) -> HeadlinePolicy:
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            supported = ", ".join(p.value for p in cls)
            raise ValueError(f"Unsupported headline policy: {value}. Supported: {supported}") from None


@dataclass(frozen=True)
class Entity:
    """A match participant.

    Attributes:
        display: The name as supplied by the caller (e.g. "Manchester United FC")
        canonical: Lower-cased, suffix-stripped search form (e.g. "manchester")
    """
    display: str
    canonical: str

    @property
    def name_parts(self) -> tuple[str, ...]:
        return tuple(self.canonical.split())


@dataclass(frozen=True)
class Article:
    """A news item normalized by a source adapter.

    Either published_at holds a timezone-aware UTC datetime, or it is None
    when the provider gave no parseable date.

    Attributes:
        title: Cleaned headline (entity-decoded, publisher suffix removed)
        url: Link to the article; identity for deduplication
        source: Publisher display name (e.g. "BBC Sport", "Naver News")
        published_at: Publication time, or None if unknown
        description: Optional short description used for term scoring
        provider: Name of the adapter that produced the article
        is_native: True when the headline is in the native-language corpus
    """
    title: str
    url: str
    source: str
    published_at: datetime | None = None
    description: str | None = None
    provider: str = ""
    is_native: bool = False

    @property
    def text(self) -> str:
        if self.description:
            return f"{self.title} {self.description}"
        return self.title


@dataclass(frozen=True)
class TermStat:
    """TF-IDF statistics for one term.

    Attributes:
        term: The token
        term_frequency: Total occurrences across all articles
        document_frequency: Number of articles containing the term
        score: term_frequency * ln(N / (document_frequency + 1))
    """
    term: str
    term_frequency: int
    document_frequency: int
    score: float


@dataclass
class AggregationResult:
    """Ranked output of one aggregation run."""
    keywords: list[TermStat] = field(default_factory=list)
    headlines: list[Article] = field(default_factory=list)
    total_articles: int = 0
    per_source_counts: dict[str, int] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the flat structure consumed by the display layer."""
        return {
            "keywords": [
                {
                    "keyword": stat.term,
                    "count": stat.term_frequency,
                    "relevance": round(stat.score, 4),
                }
                for stat in self.keywords
            ],
            "headlines": [
                {
                    "title": article.title,
                    "url": article.url,
                    "source": article.source,
                    "date": article.published_at.date().isoformat() if article.published_at else "",
                }
                for article in self.headlines
            ],
            "totalArticles": self.total_articles,
            "sources": dict(self.per_source_counts),
        }
