"""Tests for keyword ordering, headline policies and result serialization."""

from datetime import datetime, timedelta, timezone

import pytest

from match_news.core.ranking import priority_headlines, rank, top_keywords
from match_news.core.types import AggregationResult, Article, HeadlinePolicy, TermStat


NOW = datetime(2026, 10, 19, 12, 0, tzinfo=timezone.utc)


def _article(title, url, published_at=None, is_native=False, source="Test"):
    return Article(title=title, url=url, source=source, published_at=published_at, is_native=is_native)


def test_keywords_sorted_by_score_then_frequency_then_term():
    stats = [
        TermStat("injury", 2, 2, 0.5),
        TermStat("derby", 3, 1, 0.5),
        TermStat("lineup", 1, 1, 0.9),
        TermStat("clash", 2, 2, 0.5),
        TermStat("ticket", 1, 1, -0.2),
    ]
    assert [s.term for s in top_keywords(stats, 4)] == ["lineup", "derby", "clash", "injury"]


def test_keyword_policy_uses_top_three_keywords_in_corpus_order():
    stats = [
        TermStat("injury", 2, 1, 2.0),
        TermStat("lineup", 1, 1, 1.5),
        TermStat("tactics", 1, 1, 1.0),
        TermStat("ticket", 1, 1, 0.5),
    ]
    articles = [
        _article("Ticket prices rise for derby day", "https://e.com/1"),
        _article("Lineup leak ahead of the derby", "https://e.com/2"),
        _article("Injury blow for the visitors", "https://e.com/3"),
        _article("Tactics board: how the hosts press", "https://e.com/4"),
    ]
    result = rank(stats, articles, k=4, m=2, policy="keyword")
    assert [a.url for a in result.headlines] == ["https://e.com/2", "https://e.com/3"]
    assert result.total_articles == 4


def test_priority_policy_native_first_then_newest():
    old_en = _article("Preview: hosts look to extend run", "https://e.com/1", NOW - timedelta(days=3))
    new_en = _article("Team news confirmed for the derby", "https://e.com/2", NOW - timedelta(hours=1))
    undated_en = _article("Five things to watch this weekend", "https://e.com/3")
    old_ko = _article("토트넘 아스널 맞대결 앞두고 부상 변수", "https://e.com/4", NOW - timedelta(days=2), True)
    new_ko = _article("손흥민 선발 출전 유력 관측 나와", "https://e.com/5", NOW - timedelta(hours=2), True)

    ordered = priority_headlines([old_en, undated_en, old_ko, new_en, new_ko], m=10)
    assert [a.url for a in ordered] == [
        "https://e.com/5",
        "https://e.com/4",
        "https://e.com/2",
        "https://e.com/1",
        "https://e.com/3",
    ]


def test_rank_is_deterministic():
    stats = [TermStat("derby", 2, 1, 1.0), TermStat("clash", 2, 1, 1.0)]
    articles = [
        _article("Derby clash preview and team news", "https://e.com/1", NOW),
        _article("Derby day: clash of styles", "https://e.com/2", NOW),
    ]
    first = rank(stats, articles, policy=HeadlinePolicy.KEYWORD).to_dict()
    second = rank(list(reversed(stats)), articles, policy=HeadlinePolicy.KEYWORD).to_dict()
    assert first == second


def test_rank_respects_limits():
    stats = [TermStat(f"term{i}", 1, 1, float(i)) for i in range(10)]
    articles = [_article(f"Headline number {i} here", f"https://e.com/{i}") for i in range(20)]
    result = rank(stats, articles, k=3, m=5)
    assert len(result.keywords) == 3
    assert len(result.headlines) == 5
    assert rank(stats, articles, k=0, m=0).keywords == []


def test_unknown_policy_is_rejected():
    with pytest.raises(ValueError, match="Unsupported headline policy"):
        rank([], [], policy="random")


def test_to_dict_shape():
    result = AggregationResult(
        keywords=[TermStat("부상", 3, 1, 1.234567)],
        headlines=[_article("손흥민 부상 복귀 임박 소식", "https://e.com/1", NOW, True, "Naver News")],
        total_articles=1,
        per_source_counts={"google": 0, "naver": 1},
    )
    assert result.to_dict() == {
        "keywords": [{"keyword": "부상", "count": 3, "relevance": 1.2346}],
        "headlines": [{
            "title": "손흥민 부상 복귀 임박 소식",
            "url": "https://e.com/1",
            "source": "Naver News",
            "date": "2026-10-19",
        }],
        "totalArticles": 1,
        "sources": {"google": 0, "naver": 1},
    }


def test_empty_result_is_well_formed():
    assert rank([], [], source_counts={"google": 0}).to_dict() == {
        "keywords": [],
        "headlines": [],
        "totalArticles": 0,
        "sources": {"google": 0},
    }


def test_keyword_policy_matches_whole_words_only():
    stats = [TermStat("son", 2, 1, 1.0)]
    articles = [
        _article("Best start to the season for the hosts", "https://e.com/1"),
        _article("Son fit to start the derby", "https://e.com/2"),
    ]
    result = rank(stats, articles, k=1, m=5, policy=HeadlinePolicy.KEYWORD)
    assert [a.url for a in result.headlines] == ["https://e.com/2"]
