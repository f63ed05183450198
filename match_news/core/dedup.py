"""
Article deduplication using URL matching and optional fuzzy title comparison.

This module removes duplicate articles based on:
1. Canonical URL matches (the same article returned by several providers)
2. Fuzzy title similarity, when a threshold is configured (syndicated copies)
"""

from __future__ import annotations

from urllib.parse import urlsplit, urlunsplit

from rapidfuzz import fuzz

from .types import Article


def canonical_url(url: str) -> str:
    """Normalize a URL for identity comparison.

    Scheme and host are lower-cased, the fragment is dropped and a trailing
    slash on the path is removed. The query string is kept: several
    publishers carry the article id there.

    Examples:
        >>> canonical_url("HTTPS://Example.com/News/1/#top")
        'https://example.com/News/1'
    """
    url = (url or "").strip()
    parts = urlsplit(url)
    if not parts.scheme and not parts.netloc:
        return url
    path = parts.path.rstrip("/")
    return urlunsplit((parts.scheme.lower(), parts.netloc.lower(), path, parts.query, ""))


def dedup_articles(articles: list[Article], title_similarity_threshold: int | None = None) -> list[Article]:
    """Remove duplicate articles from a list.

    The first occurrence wins, so the result is deterministic for a fixed
    input order.

    Args:
        articles: Articles in provider registration order
        title_similarity_threshold: Similarity (0-100) at which two titles are
            treated as the same story. None disables title matching.

    Returns:
        Deduplicated list of articles, preserving original order
    """
    seen_urls: set[str] = set()
    kept: list[Article] = []
    titles: list[str] = []

    for article in articles:
        key = canonical_url(article.url)
        if key in seen_urls:
            continue
        if title_similarity_threshold is not None and _is_similar_title(
            article.title, titles, title_similarity_threshold
        ):
            continue
        seen_urls.add(key)
        titles.append(article.title)
        kept.append(article)

    return kept


def _is_similar_title(title: str, titles: list[str], threshold: int) -> bool:
    for existing in titles:
        if fuzz.ratio(title, existing) >= threshold:
            return True
    return False
