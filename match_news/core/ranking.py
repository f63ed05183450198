"""
Keyword and headline selection.

Keywords are ordered by score, then term frequency, then alphabetically,
so equal scores never depend on dictionary iteration order. Headlines use
one of two policies (see HeadlinePolicy).
"""

from __future__ import annotations

from datetime import datetime

from .text import contains_term
from .types import AggregationResult, Article, HeadlinePolicy, TermStat


DEFAULT_KEYWORDS = 5
DEFAULT_HEADLINES = 15
CORRELATION_KEYWORDS = 3


def top_keywords(stats: list[TermStat], k: int = DEFAULT_KEYWORDS) -> list[TermStat]:
    ordered = sorted(stats, key=lambda s: (-s.score, -s.term_frequency, s.term))
    return ordered[: max(k, 0)]


def keyword_headlines(articles: list[Article], keywords: list[TermStat], m: int) -> list[Article]:
    """Articles whose title contains one of the top keywords as a word, in corpus order."""
    terms = [stat.term for stat in keywords[:CORRELATION_KEYWORDS]]
    if not terms:
        return []
    matched = [article for article in articles if any(contains_term(article.title, term) for term in terms)]
    return matched[: max(m, 0)]


def priority_headlines(articles: list[Article], m: int) -> list[Article]:
    """Native-language articles first, then newest first; undated last.

    sorted() is stable, so ties keep corpus order.
    """
    def sort_key(article: Article) -> tuple[int, int, float]:
        published: datetime | None = article.published_at
        return (
            0 if article.is_native else 1,
            0 if published is not None else 1,
            -published.timestamp() if published is not None else 0.0,
        )

    return sorted(articles, key=sort_key)[: max(m, 0)]


def rank(
    stats: list[TermStat],
    articles: list[Article],
    k: int = DEFAULT_KEYWORDS,
    m: int = DEFAULT_HEADLINES,
    policy: HeadlinePolicy | str = HeadlinePolicy.PRIORITY,
    source_counts: dict[str, int] | None = None,
) -> AggregationResult:
    """Assemble the final result from scored terms and the corpus."""
    policy = HeadlinePolicy.parse(policy)
    keywords = top_keywords(stats, k)
    if policy is HeadlinePolicy.KEYWORD:
        headlines = keyword_headlines(articles, keywords, m)
    else:
        headlines = priority_headlines(articles, m)
    return AggregationResult(
        keywords=keywords,
        headlines=headlines,
        total_articles=len(articles),
        per_source_counts=dict(source_counts or {}),
    )
