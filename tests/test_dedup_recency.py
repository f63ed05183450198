"""Tests for URL deduplication and the recency window."""

from datetime import datetime, timedelta, timezone

from match_news.core.dedup import canonical_url, dedup_articles
from match_news.core.recency import filter_recent
from match_news.core.types import Article


NOW = datetime(2026, 10, 19, 12, 0, tzinfo=timezone.utc)


def _article(url, title="Spurs prepare for the derby", published_at=None, provider="google"):
    return Article(title=title, url=url, source="Test", published_at=published_at, provider=provider)


def test_dedup_keeps_first_occurrence():
    articles = [
        _article("https://a.example.com/1", provider="google"),
        _article("https://b.example.com/2", provider="google"),
        _article("https://a.example.com/1", provider="naver"),
    ]
    kept = dedup_articles(articles)
    assert [a.url for a in kept] == ["https://a.example.com/1", "https://b.example.com/2"]
    assert kept[0].provider == "google"


def test_dedup_matches_canonical_urls():
    articles = [
        _article("https://News.Example.com/story/1/"),
        _article("https://news.example.com/story/1#comments"),
        _article("https://news.example.com/story/1?idxno=2"),
    ]
    kept = dedup_articles(articles)
    assert len(kept) == 2
    assert kept[1].url.endswith("idxno=2")


def test_dedup_is_idempotent():
    articles = [
        _article("https://a.example.com/1"),
        _article("https://a.example.com/1/"),
        _article("https://b.example.com/2"),
    ]
    once = dedup_articles(articles)
    assert dedup_articles(once) == once


def test_dedup_fuzzy_titles_only_when_threshold_set():
    articles = [
        _article("https://a.example.com/1", title="Son returns from injury ahead of derby"),
        _article("https://b.example.com/2", title="Son returns from injury ahead of the derby"),
    ]
    assert len(dedup_articles(articles)) == 2
    assert len(dedup_articles(articles, title_similarity_threshold=90)) == 1


def test_canonical_url_leaves_relative_values_alone():
    assert canonical_url("  not-a-url ") == "not-a-url"
    assert canonical_url("HTTPS://Example.com/a/#x") == "https://example.com/a"


def test_recency_boundary():
    window = timedelta(days=7)
    too_old = _article("https://a.example.com/1", published_at=NOW - window - timedelta(seconds=1))
    just_in = _article("https://a.example.com/2", published_at=NOW - window + timedelta(seconds=1))
    on_edge = _article("https://a.example.com/3", published_at=NOW - window)

    kept = filter_recent([too_old, just_in, on_edge], window, NOW)
    assert kept == [just_in, on_edge]


def test_recency_keeps_undated_articles():
    undated = _article("https://a.example.com/1", published_at=None)
    assert filter_recent([undated], timedelta(days=1), NOW) == [undated]
