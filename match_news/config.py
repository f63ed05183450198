"""
Configuration management using YAML files and dataclasses.

This module defines all configuration dataclasses and provides loading
from YAML files with defaults. Configuration sections:
- FetchConfig: outbound HTTP settings shared by every news source
- SourcesConfig: which providers run and their provider-specific knobs
- AggregationConfig: recency window, ranking sizes and headline policy
- CacheConfig: result cache switch and TTL
- LoggingConfig: Logging behavior
- AppConfig: Root configuration container
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
import os
from typing import Any

import yaml


@dataclass
class FetchConfig:
    """Configuration for outbound provider requests.

    Attributes:
        timeout_seconds: Upper bound for a single provider request
        trust_env: Whether to respect system proxy settings
        user_agent: HTTP User-Agent header string
    """

    timeout_seconds: float = 5.0
    trust_env: bool = True
    user_agent: str = (
        "Mozilla/5.0 (Windows NT 10.0; Win64; x64) "
        "AppleWebKit/537.36 (KHTML, like Gecko) "
        "Chrome/120.0.0.0 Safari/537.36"
    )


@dataclass
class SourcesConfig:
    """Configuration for the news providers.

    Attributes:
        enabled: Provider names to run, in registration (merge) order
        google_hl: Google News interface language
        google_gl: Google News country
        google_ceid: Google News edition id
        google_max_items: Maximum items kept from one Google News response
        naver_client_id_env: Environment variable holding the Naver client id
        naver_client_secret_env: Environment variable holding the Naver client secret
        naver_display: Number of results requested from the Naver search API
        feed_max_items: Maximum items kept from a fixed RSS feed (ESPN, BBC)
    """

    enabled: list[str] = field(default_factory=lambda: ["google", "naver", "espn", "bbc"])
    google_hl: str = "en"
    google_gl: str = "US"
    google_ceid: str = "US:en"
    google_max_items: int = 10
    naver_client_id_env: str = "NAVER_CLIENT_ID"
    naver_client_secret_env: str = "NAVER_CLIENT_SECRET"
    naver_display: int = 10
    feed_max_items: int = 5


@dataclass
class AggregationConfig:
    """Configuration for filtering and ranking.

    Attributes:
        window_days: Trailing recency window in days
        keywords: Number of keywords returned (k)
        headlines: Number of headlines returned (m)
        headline_policy: "priority" (native language first, newest first) or "keyword"
        title_similarity_threshold: Optional fuzzy title dedup threshold (0-100); None disables it
    """

    window_days: int = 7
    keywords: int = 5
    headlines: int = 15
    headline_policy: str = "priority"
    title_similarity_threshold: int | None = None


@dataclass
class CacheConfig:
    """Configuration for the aggregation result cache.

    Attributes:
        enabled: Whether the CLI keeps results in a cache
        ttl_seconds: Time-to-live for a cached result
    """

    enabled: bool = True
    ttl_seconds: float = 300.0


@dataclass
class LoggingConfig:
    """Configuration for logging behavior.

    Attributes:
        level: Logging level ("DEBUG", "INFO", "WARNING", "ERROR")
        console: Whether to log to console
        file: Whether to log to file
        format: Log file format ("jsonl" or "plain")
        filename: Name of the log file
    """

    level: str = "INFO"
    console: bool = True
    file: bool = False
    format: str = "jsonl"
    filename: str = "match_news.jsonl"


@dataclass
class AppConfig:
    """Root configuration container aggregating all config sections."""

    fetch: FetchConfig = field(default_factory=FetchConfig)
    sources: SourcesConfig = field(default_factory=SourcesConfig)
    aggregation: AggregationConfig = field(default_factory=AggregationConfig)
    cache: CacheConfig = field(default_factory=CacheConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def load_config(path: str | None) -> AppConfig:
    """Load configuration from a YAML file with defaults."""
    if not path:
        return AppConfig()

    with open(path, "r", encoding="utf-8") as f:
        raw = yaml.safe_load(f) or {}

    return _merge_config(AppConfig(), raw)


def _merge_config(base: AppConfig, raw: dict[str, Any]) -> AppConfig:
    """Merge raw YAML config into base AppConfig."""
    data = asdict(base)
    for key, value in raw.items():
        if key not in data:
            continue
        if isinstance(value, dict) and isinstance(data[key], dict):
            data[key].update(value)
        else:
            data[key] = value
    return _fromdict(data)


def _fromdict(data: dict[str, Any]) -> AppConfig:
    """Reconstruct AppConfig from nested dictionary."""
    return AppConfig(
        fetch=FetchConfig(**data["fetch"]),
        sources=SourcesConfig(**data["sources"]),
        aggregation=AggregationConfig(**data["aggregation"]),
        cache=CacheConfig(**data["cache"]),
        logging=LoggingConfig(**data["logging"]),
    )


def get_naver_credentials(cfg: SourcesConfig) -> tuple[str, str] | None:
    """Get the Naver client id/secret pair from the environment, if both are set."""
    client_id = os.getenv(cfg.naver_client_id_env)
    client_secret = os.getenv(cfg.naver_client_secret_env)
    if not client_id or not client_secret:
        return None
    return client_id, client_secret
