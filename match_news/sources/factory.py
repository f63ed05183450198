"""Source registry: build adapters by name from runtime config."""

from __future__ import annotations

import httpx

from ..config import AppConfig
from .base import SourceAdapter
from .feeds import BbcSportSource, EspnSource
from .google_news import GoogleNewsSource
from .naver import NaverNewsSource


SourceBuilder = type[SourceAdapter]

_SOURCE_REGISTRY: dict[str, SourceBuilder] = {
    "google": GoogleNewsSource,
    "naver": NaverNewsSource,
    "espn": EspnSource,
    "bbc": BbcSportSource,
}


def available_sources() -> list[str]:
    """Return the registered source names."""
    return sorted(_SOURCE_REGISTRY.keys())


def create_source(
    name: str,
    cfg: AppConfig,
    transport: httpx.AsyncBaseTransport | None = None,
) -> SourceAdapter:
    """Build one adapter instance from runtime config."""
    builder = _SOURCE_REGISTRY.get(name.lower().strip())
    if builder is None:
        supported = ", ".join(available_sources())
        raise ValueError(f"Unsupported source: {name}. Supported: {supported}")
    return builder(cfg.fetch, cfg.sources, transport=transport)


def create_sources(
    cfg: AppConfig,
    transport: httpx.AsyncBaseTransport | None = None,
) -> list[SourceAdapter]:
    """Build the enabled adapters, in configured (merge) order."""
    return [create_source(name, cfg, transport) for name in cfg.sources.enabled]
