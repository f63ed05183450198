from __future__ import annotations

from datetime import datetime, timedelta, timezone

from .types import Article


DEFAULT_WINDOW = timedelta(days=7)


def is_recent(article: Article, window: timedelta, now: datetime) -> bool:
    # Undated articles are kept.
    if article.published_at is None:
        return True
    return now - article.published_at <= window


def filter_recent(
    articles: list[Article],
    window: timedelta = DEFAULT_WINDOW,
    now: datetime | None = None,
) -> list[Article]:
    """Keep articles published within `window` of `now` (UTC now by default)."""
    now = now or datetime.now(timezone.utc)
    return [article for article in articles if is_recent(article, window, now)]
