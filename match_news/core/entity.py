"""
Entity normalization and search query generation.

Team names carry generic organizational tokens ("FC", "United", "City")
that add noise to news searches. The canonical form drops them so the
remaining words can be used both as search terms and as terms to exclude
from keyword scoring.
"""

from __future__ import annotations

import re

from .types import Entity, MissingInputError


GENERIC_NAME_TOKENS: frozenset[str] = frozenset({
    "fc",
    "cf",
    "afc",
    "sc",
    "club",
    "united",
    "city",
})

_WORD_RE = re.compile(r"\S+")


def normalize_entity_name(name: str) -> str:
    """Return the canonical form of a display name.

    Removes whole-word generic tokens (dotted forms such as "F.C." too),
    collapses whitespace and lower-cases.
    Empty or all-noise input yields an empty string.

    Examples:
        >>> normalize_entity_name("Manchester United FC")
        'manchester'
        >>> normalize_entity_name("  Tottenham   Hotspur ")
        'tottenham hotspur'
    """
    words = [word for word in _WORD_RE.findall((name or "").lower()) if word.replace(".", "") not in GENERIC_NAME_TOKENS]
    return " ".join(words)


def make_entity(display: str | None) -> Entity:
    """Build an Entity, rejecting names that are blank or normalize to nothing."""
    display = (display or "").strip()
    if not display:
        raise MissingInputError("entity name is required")
    canonical = normalize_entity_name(display)
    if not canonical:
        raise MissingInputError(f"entity name has no searchable words: {display!r}")
    return Entity(display=display, canonical=canonical)


def build_entities(home: str | None, away: str | None) -> tuple[Entity, Entity]:
    """Validate and normalize a home/away pair."""
    if not (home or "").strip() or not (away or "").strip():
        raise MissingInputError("home and away entity names are required")
    return make_entity(home), make_entity(away)


def build_queries(home: Entity, away: Entity) -> tuple[str, ...]:
    """Build the ordered query list, most specific first.

    Order: "home away", "home vs away", "home", "away". Duplicates are
    removed keeping the first occurrence.
    """
    candidates = [
        f"{home.canonical} {away.canonical}",
        f"{home.canonical} vs {away.canonical}",
        home.canonical,
        away.canonical,
    ]
    queries: list[str] = []
    for query in candidates:
        if query not in queries:
            queries.append(query)
    return tuple(queries)
