"""
Match News - news aggregation and keyword ranking for a fixture.

Given a home and an away team, this package queries several news
providers concurrently, deduplicates and time-filters what they return,
scores terms with TF-IDF and returns ranked keywords and headlines.

Main entry point is the CLI via `match-news run` command.

Example:
    $ match-news run --home "Tottenham Hotspur" --away "Arsenal"
"""

__all__ = [
    "__version__",
    "aggregate",
    "run_aggregation",
    "AggregationResult",
    "Article",
    "MissingInputError",
    "ResultCache",
]
__version__ = "0.1.0"

from .aggregator import aggregate
from .cache import ResultCache
from .core.types import AggregationResult, Article, MissingInputError
from .runner import run_aggregation
