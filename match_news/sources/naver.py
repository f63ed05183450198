"""Naver news search API adapter."""

from __future__ import annotations

from datetime import timedelta
import logging
from typing import Any

import httpx

from ..config import FetchConfig, SourcesConfig, get_naver_credentials
from ..core.text import clean_title, html_to_text, is_valid_title, parse_rfc822
from ..core.types import Article
from .base import SourceAdapter


NAVER_NEWS_API_URL = "https://openapi.naver.com/v1/search/news.json"


class NaverNewsSource(SourceAdapter):
    """Searches Naver news (Korean-language coverage).

    Requires a client id/secret pair; without one the adapter is skipped
    and contributes no articles. Every Naver article is native-language.
    """

    name = "naver"
    display_name = "Naver News"

    def __init__(
        self,
        fetch_cfg: FetchConfig | None = None,
        sources_cfg: SourcesConfig | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
        logger: logging.Logger | None = None,
        credentials: tuple[str, str] | None = None,
    ):
        super().__init__(fetch_cfg, transport, logger)
        self.sources_cfg = sources_cfg or SourcesConfig()
        self.credentials = credentials or get_naver_credentials(self.sources_cfg)

    def is_configured(self) -> bool:
        return self.credentials is not None

    async def search(self, client: httpx.AsyncClient, query: str, window: timedelta) -> list[Article]:
        client_id, client_secret = self.credentials
        headers = {
            "X-Naver-Client-Id": client_id,
            "X-Naver-Client-Secret": client_secret,
        }
        params = {"query": query, "display": self.sources_cfg.naver_display, "sort": "date"}
        response = await self._get(client, NAVER_NEWS_API_URL, params=params, headers=headers)
        return self.parse(response.json())

    def parse(self, payload: Any) -> list[Article]:
        if not isinstance(payload, dict):
            raise ValueError("unexpected Naver payload shape: expected an object")
        items = payload.get("items") or []

        articles: list[Article] = []
        for item in items:
            if not isinstance(item, dict):
                continue
            title = clean_title(item.get("title"))
            link = (item.get("originallink") or item.get("link") or "").strip()
            if not link or not is_valid_title(title):
                continue
            articles.append(
                Article(
                    title=title,
                    url=link,
                    source=self.display_name,
                    published_at=parse_rfc822(item.get("pubDate")),
                    description=html_to_text(item.get("description")) or None,
                    provider=self.name,
                    is_native=True,
                )
            )
        return articles
