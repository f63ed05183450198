"""Google News RSS search adapter."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
import logging

import feedparser
import httpx

from ..config import FetchConfig, SourcesConfig
from ..core.text import clean_title, from_struct_time, has_hangul, is_valid_title
from ..core.types import Article
from .base import SourceAdapter


GOOGLE_NEWS_RSS_URL = "https://news.google.com/rss/search"


class GoogleNewsSource(SourceAdapter):
    """Searches Google News; one RSS request per query.

    The query is narrowed server-side with an `after:YYYY-MM-DD` operator
    derived from the recency window.
    """

    name = "google"
    display_name = "Google News"

    def __init__(
        self,
        fetch_cfg: FetchConfig | None = None,
        sources_cfg: SourcesConfig | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
        logger: logging.Logger | None = None,
    ):
        super().__init__(fetch_cfg, transport, logger)
        self.sources_cfg = sources_cfg or SourcesConfig()

    async def search(self, client: httpx.AsyncClient, query: str, window: timedelta) -> list[Article]:
        since = (datetime.now(timezone.utc) - window).date().isoformat()
        params = {
            "q": f"{query} after:{since}",
            "hl": self.sources_cfg.google_hl,
            "gl": self.sources_cfg.google_gl,
            "ceid": self.sources_cfg.google_ceid,
        }
        response = await self._get(client, GOOGLE_NEWS_RSS_URL, params=params)
        return self.parse(response.text)

    def parse(self, xml: str) -> list[Article]:
        feed = feedparser.parse(xml)
        if feed.bozo and not feed.entries:
            raise ValueError(f"unparseable feed: {feed.get('bozo_exception')}")

        articles: list[Article] = []
        for entry in feed.entries[: self.sources_cfg.google_max_items]:
            publisher = (entry.get("source") or {}).get("title") or ""
            title = clean_title(entry.get("title"), publisher)
            link = (entry.get("link") or "").strip()
            if not link or not is_valid_title(title):
                continue
            articles.append(
                Article(
                    title=title,
                    url=link,
                    source=publisher.strip() or self.display_name,
                    published_at=from_struct_time(entry.get("published_parsed")),
                    provider=self.name,
                    is_native=has_hangul(title),
                )
            )
        return articles
