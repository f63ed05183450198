"""
Aggregation orchestration.

This module coordinates one aggregation run:
1. Validate and normalize the entity pair, build the query list
2. Fan out to every source adapter concurrently (one task per adapter)
3. Fan in, reassembling results in adapter registration order
4. Deduplicate, apply the recency window, score terms, rank

Adapters bound their own requests and never raise, so the join simply
waits for the slowest one. Everything after the join is synchronous.
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
import logging
import time
from typing import Sequence

from .config import AggregationConfig
from .core.dedup import dedup_articles
from .core.entity import build_entities, build_queries
from .core.ranking import rank
from .core.recency import filter_recent
from .core.scoring import build_excluded_terms, score_terms
from .core.types import AggregationResult, Article, HeadlinePolicy
from .sources.base import SourceAdapter
from .utils.logging import get_logger, log_event


@dataclass
class Collection:
    """Merged adapter output before deduplication.

    Attributes:
        articles: All articles, grouped by adapter in registration order
        per_source_counts: Articles returned by each adapter (0 on failure)
    """
    articles: list[Article] = field(default_factory=list)
    per_source_counts: dict[str, int] = field(default_factory=dict)


async def collect(
    queries: Sequence[str],
    sources: Sequence[SourceAdapter],
    window: timedelta,
    logger: logging.Logger | None = None,
) -> Collection:
    """Run every adapter concurrently and merge in registration order."""
    logger = logger or get_logger("aggregator")
    results = await asyncio.gather(
        *(source.fetch(queries, window) for source in sources),
        return_exceptions=True,
    )

    collection = Collection()
    for source, result in zip(sources, results):
        if isinstance(result, BaseException):
            # fetch() absorbs provider errors; this only triggers for adapter bugs.
            log_event(
                logger,
                f"{source.name}: adapter raised {type(result).__name__}: {result}",
                level=logging.ERROR,
                event="adapter_error",
                provider=source.name,
            )
            result = []
        tagged = [_tag(article, source.name) for article in result]
        collection.articles.extend(tagged)
        collection.per_source_counts[source.name] = len(tagged)
    return collection


def _tag(article: Article, provider: str) -> Article:
    if article.provider == provider:
        return article
    return Article(
        title=article.title,
        url=article.url,
        source=article.source,
        published_at=article.published_at,
        description=article.description,
        provider=provider,
        is_native=article.is_native,
    )


async def aggregate(
    home: str | None,
    away: str | None,
    sources: Sequence[SourceAdapter],
    cfg: AggregationConfig | None = None,
    now: datetime | None = None,
    logger: logging.Logger | None = None,
) -> AggregationResult:
    """Aggregate and rank match news for a home/away pair.

    Args:
        home: Home participant display name
        away: Away participant display name
        sources: Adapters to query, in merge order
        cfg: Window, ranking sizes and headline policy (defaults if None)
        now: Reference time for the recency window (UTC now if None)
        logger: Logger for pipeline events

    Returns:
        AggregationResult; empty but well-formed when nothing was found

    Raises:
        MissingInputError: If either name is missing, before any request
    """
    cfg = cfg or AggregationConfig()
    logger = logger or get_logger("aggregator")
    policy = HeadlinePolicy.parse(cfg.headline_policy)
    home_entity, away_entity = build_entities(home, away)
    queries = build_queries(home_entity, away_entity)
    window = timedelta(days=cfg.window_days)

    started = time.perf_counter()
    log_event(
        logger,
        f"Aggregating {home_entity.display} vs {away_entity.display}",
        event="aggregation_start",
        home=home_entity.canonical,
        away=away_entity.canonical,
        queries=list(queries),
        providers=[source.name for source in sources],
    )

    collection = await collect(queries, sources, window, logger)
    corpus = dedup_articles(collection.articles, cfg.title_similarity_threshold)
    corpus = filter_recent(corpus, window, now or datetime.now(timezone.utc))

    stats = score_terms(corpus, build_excluded_terms(home_entity, away_entity))
    result = rank(
        stats,
        corpus,
        k=cfg.keywords,
        m=cfg.headlines,
        policy=policy,
        source_counts=collection.per_source_counts,
    )

    log_event(
        logger,
        f"Collected {len(collection.articles)} articles, {result.total_articles} after dedup/recency",
        event="aggregation_done",
        collected=len(collection.articles),
        total_articles=result.total_articles,
        native_articles=sum(1 for article in corpus if article.is_native),
        per_source_counts=collection.per_source_counts,
        elapsed_ms=int((time.perf_counter() - started) * 1000),
    )
    return result
