"""Tests for YAML config loading, the result cache and the sync runner."""

import tempfile
from pathlib import Path

import httpx

from match_news.cache import ResultCache
from match_news.config import AppConfig, get_naver_credentials, load_config
from match_news.core.types import AggregationResult
from match_news.runner import run_aggregation
from match_news.sources.base import SourceAdapter


def test_load_config_defaults():
    cfg = load_config(None)
    assert cfg.fetch.timeout_seconds == 5.0
    assert cfg.aggregation.window_days == 7
    assert cfg.aggregation.headline_policy == "priority"
    assert cfg.sources.enabled == ["google", "naver", "espn", "bbc"]


def test_load_config_merges_yaml_sections():
    with tempfile.TemporaryDirectory() as tmpdir:
        path = Path(tmpdir) / "config.yaml"
        path.write_text(
            "fetch:\n"
            "  timeout_seconds: 3\n"
            "sources:\n"
            "  enabled: [google, bbc]\n"
            "aggregation:\n"
            "  headline_policy: keyword\n"
            "  title_similarity_threshold: 90\n"
            "unknown_section:\n"
            "  ignored: true\n",
            encoding="utf-8",
        )
        cfg = load_config(str(path))

    assert cfg.fetch.timeout_seconds == 3
    assert cfg.fetch.trust_env is True
    assert cfg.sources.enabled == ["google", "bbc"]
    assert cfg.aggregation.headline_policy == "keyword"
    assert cfg.aggregation.title_similarity_threshold == 90
    assert cfg.aggregation.keywords == 5


def test_default_configs_are_independent():
    first = load_config(None)
    first.aggregation.keywords = 99
    assert load_config(None).aggregation.keywords == 5


def test_naver_credentials_from_environment(monkeypatch):
    cfg = AppConfig().sources
    monkeypatch.setenv("NAVER_CLIENT_ID", "id")
    monkeypatch.delenv("NAVER_CLIENT_SECRET", raising=False)
    assert get_naver_credentials(cfg) is None

    monkeypatch.setenv("NAVER_CLIENT_SECRET", "secret")
    assert get_naver_credentials(cfg) == ("id", "secret")


class FakeClock:
    def __init__(self):
        self.now = 0.0

    def __call__(self):
        return self.now


def test_cache_expires_after_ttl():
    clock = FakeClock()
    cache = ResultCache(ttl_seconds=300, clock=clock)
    result = AggregationResult(total_articles=3)
    cache.put(("tottenham hotspur", "arsenal"), result)

    clock.now = 299
    assert cache.get(("tottenham hotspur", "arsenal")) is result
    assert cache.get(("arsenal", "tottenham hotspur")) is None

    clock.now = 301
    assert cache.get(("tottenham hotspur", "arsenal")) is None
    assert len(cache) == 0


def test_cache_put_prunes_expired_entries():
    clock = FakeClock()
    cache = ResultCache(ttl_seconds=300, clock=clock)
    for i in range(3):
        cache.put((f"home {i}", "away"), AggregationResult())

    clock.now = 400
    cache.put(("tottenham hotspur", "arsenal"), AggregationResult(total_articles=1))
    assert len(cache) == 1
    assert cache.get(("tottenham hotspur", "arsenal")).total_articles == 1


class CountingSource(SourceAdapter):
    name = "counting"

    def __init__(self):
        super().__init__()
        self.calls = 0

    async def search(self, client, query, window):
        self.calls += 1
        raise httpx.ConnectError("offline")


def test_run_aggregation_uses_cache_by_canonical_names():
    source = CountingSource()
    cache = ResultCache(ttl_seconds=60)

    first = run_aggregation("Tottenham Hotspur FC", "Arsenal", sources=[source], cache=cache)
    calls_after_first = source.calls
    second = run_aggregation("Tottenham Hotspur", "Arsenal FC", sources=[source], cache=cache)

    assert calls_after_first == 4
    assert source.calls == calls_after_first
    assert second is first
    assert first.per_source_counts == {"counting": 0}


def test_run_aggregation_without_cache_always_fetches():
    source = CountingSource()
    run_aggregation("Tottenham Hotspur", "Arsenal", sources=[source])
    run_aggregation("Tottenham Hotspur", "Arsenal", sources=[source])
    assert source.calls == 8
