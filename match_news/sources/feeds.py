"""
Fixed RSS feed adapters (ESPN, BBC Sport).

These feeds are not searchable: the same document is served regardless of
the fixture. The feed is downloaded once per fetch and the query fallback
is applied as a title filter instead of as separate requests.
"""

from __future__ import annotations

from datetime import datetime, timedelta
import logging
from typing import Sequence

import feedparser
import httpx

from ..config import FetchConfig, SourcesConfig
from ..core.recency import filter_recent
from ..core.text import clean_title, contains_term, from_struct_time, has_hangul, html_to_text, is_valid_title
from ..core.types import Article
from ..utils.logging import log_event
from .base import SourceAdapter


ESPN_SOCCER_RSS_URL = "https://www.espn.com/espn/rss/soccer/news"
BBC_FOOTBALL_RSS_URL = "https://feeds.bbci.co.uk/sport/football/rss.xml"


def query_terms(query: str) -> list[str]:
    return [word for word in query.lower().split() if word != "vs"]


def matches_query(article: Article, query: str) -> bool:
    """True when every query word (except "vs") occurs in the title as a whole word."""
    terms = query_terms(query)
    if not terms:
        return False
    return all(contains_term(article.title, term) for term in terms)


class FeedSource(SourceAdapter):
    """Base for adapters backed by one fixed RSS document."""

    feed_url: str = ""

    def __init__(
        self,
        fetch_cfg: FetchConfig | None = None,
        sources_cfg: SourcesConfig | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
        logger: logging.Logger | None = None,
    ):
        super().__init__(fetch_cfg, transport, logger)
        self.sources_cfg = sources_cfg or SourcesConfig()

    async def _collect(
        self,
        client: httpx.AsyncClient,
        queries: Sequence[str],
        window: timedelta,
        now: datetime,
    ) -> list[Article]:
        candidates = filter_recent(await self.search(client, "", window), window, now)
        for query in queries:
            matched = [article for article in candidates if matches_query(article, query)]
            log_event(
                self.logger,
                f"{self.name}: {query!r} -> {len(matched)}",
                level=logging.DEBUG,
                event="query_done",
                provider=self.name,
                query=query,
                count=len(matched),
            )
            if matched:
                return matched[: self.sources_cfg.feed_max_items]
        return []

    async def search(self, client: httpx.AsyncClient, query: str, window: timedelta) -> list[Article]:
        """Download and parse the whole feed; the query is applied by _collect."""
        response = await self._get(client, self.feed_url)
        return self.parse(response.text)

    def parse(self, xml: str) -> list[Article]:
        feed = feedparser.parse(xml)
        if feed.bozo and not feed.entries:
            raise ValueError(f"unparseable feed: {feed.get('bozo_exception')}")

        articles: list[Article] = []
        for entry in feed.entries:
            title = clean_title(entry.get("title"))
            link = (entry.get("link") or "").strip()
            if not link or not is_valid_title(title):
                continue
            articles.append(
                Article(
                    title=title,
                    url=link,
                    source=self.display_name,
                    published_at=from_struct_time(entry.get("published_parsed")),
                    description=html_to_text(entry.get("summary")) or None,
                    provider=self.name,
                    is_native=has_hangul(title),
                )
            )
        return articles


class EspnSource(FeedSource):
    name = "espn"
    display_name = "ESPN"
    feed_url = ESPN_SOCCER_RSS_URL


class BbcSportSource(FeedSource):
    name = "bbc"
    display_name = "BBC Sport"
    feed_url = BBC_FOOTBALL_RSS_URL
