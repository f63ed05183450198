"""
Synchronous entry point wiring config, sources, cache and aggregation.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Sequence

from .aggregator import aggregate
from .cache import ResultCache
from .config import AppConfig
from .core.entity import build_entities
from .core.types import AggregationResult
from .sources.base import SourceAdapter
from .sources.factory import create_sources
from .utils.logging import get_logger, log_event


def run_aggregation(
    home: str | None,
    away: str | None,
    cfg: AppConfig | None = None,
    sources: Sequence[SourceAdapter] | None = None,
    cache: ResultCache | None = None,
    logger: logging.Logger | None = None,
) -> AggregationResult:
    """Run one aggregation, consulting `cache` first when one is given.

    Args:
        home: Home participant display name
        away: Away participant display name
        cfg: Application configuration (defaults if None)
        sources: Adapters to use; built from cfg.sources when None
        cache: Optional result cache keyed by canonical names
        logger: Logger for pipeline events

    Returns:
        The ranked AggregationResult

    Raises:
        MissingInputError: If either name is missing
    """
    cfg = cfg or AppConfig()
    logger = logger or get_logger("runner")
    home_entity, away_entity = build_entities(home, away)
    key = (home_entity.canonical, away_entity.canonical)

    if cache is not None:
        cached = cache.get(key)
        if cached is not None:
            log_event(logger, "Result cache hit", event="cache_hit", home=key[0], away=key[1])
            return cached

    if sources is None:
        sources = create_sources(cfg)
    result = asyncio.run(aggregate(home, away, sources, cfg.aggregation, logger=logger))

    if cache is not None:
        cache.put(key, result)
    return result
