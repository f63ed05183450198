"""
Abstract base class for news source adapters.

New sources should inherit from SourceAdapter and implement search().
The base class owns the query fallback loop, the per-request timeout and
failure isolation, so a concrete adapter only describes one request and
how to parse its response.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
import asyncio
from datetime import datetime, timedelta, timezone
import logging
from typing import Any, Sequence

import httpx

from ..config import FetchConfig
from ..core.recency import filter_recent
from ..core.types import Article
from ..utils.logging import get_logger, log_event


class SourceAdapter(ABC):
    """Provider interface: turn an ordered query list into articles.

    fetch() never raises. Every failure mode (network error, non-2xx
    status, parse error, timeout) is logged and treated as "no results for
    this query"; a provider that fails on every query contributes [].

    Attributes:
        name: Registry name, also the key in per-source counts
        display_name: Publisher label used when the payload names none
    """

    name: str = ""
    display_name: str = ""

    def __init__(
        self,
        fetch_cfg: FetchConfig | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
        logger: logging.Logger | None = None,
    ):
        self.fetch_cfg = fetch_cfg or FetchConfig()
        self._transport = transport
        self.logger = logger or get_logger(f"sources.{self.name}")

    def is_configured(self) -> bool:
        """Whether the adapter has what it needs (e.g. credentials) to run."""
        return True

    async def fetch(self, queries: Sequence[str], window: timedelta) -> list[Article]:
        """Return articles for the first query that yields any, else []."""
        if not self.is_configured():
            log_event(
                self.logger,
                f"{self.name}: not configured, skipping",
                level=logging.WARNING,
                event="source_unconfigured",
                provider=self.name,
            )
            return []
        now = datetime.now(timezone.utc)
        try:
            async with self._client() as client:
                return await self._collect(client, queries, window, now)
        except Exception as exc:  # noqa: BLE001
            log_event(
                self.logger,
                f"{self.name}: failed: {type(exc).__name__}: {exc}",
                level=logging.WARNING,
                event="source_failed",
                provider=self.name,
            )
            return []

    async def _collect(
        self,
        client: httpx.AsyncClient,
        queries: Sequence[str],
        window: timedelta,
        now: datetime,
    ) -> list[Article]:
        for query in queries:
            try:
                articles = await self.search(client, query, window)
            except Exception as exc:  # noqa: BLE001
                log_event(
                    self.logger,
                    f"{self.name}: {query!r} failed: {type(exc).__name__}: {exc}",
                    level=logging.WARNING,
                    event="query_failed",
                    provider=self.name,
                    query=query,
                )
                continue
            articles = filter_recent(articles, window, now)
            log_event(
                self.logger,
                f"{self.name}: {query!r} -> {len(articles)}",
                level=logging.DEBUG,
                event="query_done",
                provider=self.name,
                query=query,
                count=len(articles),
            )
            if articles:
                return articles
        return []

    @abstractmethod
    async def search(self, client: httpx.AsyncClient, query: str, window: timedelta) -> list[Article]:
        """Issue one request for `query` and parse it.

        Implementations may raise; the caller treats any exception as an
        empty result for this query.
        """
        raise NotImplementedError

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            timeout=self.fetch_cfg.timeout_seconds,
            headers={"User-Agent": self.fetch_cfg.user_agent},
            follow_redirects=True,
            trust_env=self.fetch_cfg.trust_env,
            transport=self._transport,
        )

    async def _get(
        self,
        client: httpx.AsyncClient,
        url: str,
        params: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
    ) -> httpx.Response:
        """GET bounded by the configured timeout; raises on non-2xx."""
        response = await asyncio.wait_for(
            client.get(url, params=params, headers=headers),
            timeout=self.fetch_cfg.timeout_seconds,
        )
        response.raise_for_status()
        return response
