"""
News source adapters.

This package contains the abstract SourceAdapter and one implementation
per provider.

To add a new source:
1. Inherit from SourceAdapter and implement search()
2. Register the class in factory._SOURCE_REGISTRY
3. Add its name to SourcesConfig.enabled
"""

from .base import SourceAdapter
from .factory import available_sources, create_source, create_sources
from .feeds import BbcSportSource, EspnSource, FeedSource
from .google_news import GoogleNewsSource
from .naver import NaverNewsSource

__all__ = [
    "SourceAdapter",
    "FeedSource",
    "GoogleNewsSource",
    "NaverNewsSource",
    "EspnSource",
    "BbcSportSource",
    "available_sources",
    "create_source",
    "create_sources",
]
