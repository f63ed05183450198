"""
Text cleanup helpers shared by the source adapters.

Provider titles arrive HTML-escaped, sometimes with inline markup (Naver
highlights query words with <b>). Google News appends the publisher named
in the entry's <source> element after a " - " separator.
"""

from __future__ import annotations

from datetime import datetime, timezone
from email.utils import parsedate_to_datetime
import re
import time
import warnings

from bs4 import BeautifulSoup, MarkupResemblesLocatorWarning


MIN_TITLE_LENGTH = 10

HANGUL_RE = re.compile(r"[가-힣]")
_WHITESPACE_RE = re.compile(r"\s+")


def html_to_text(value: str | None) -> str:
    """Strip tags, decode entities and collapse whitespace."""
    if not value:
        return ""
    with warnings.catch_warnings():
        warnings.simplefilter("ignore", MarkupResemblesLocatorWarning)
        text = BeautifulSoup(value, "html.parser").get_text()
    return _WHITESPACE_RE.sub(" ", text).strip()


def clean_title(raw: str | None, publisher: str | None = None) -> str:
    """Return a display-ready headline.

    A trailing " - <publisher>" is removed only when it names the given
    publisher, so score lines such as "Spurs 2 - 1 Arsenal" stay intact.
    """
    title = html_to_text(raw)
    publisher = html_to_text(publisher)
    if publisher:
        suffix = re.compile(r"\s+-\s+" + re.escape(publisher) + r"$", re.IGNORECASE)
        title = suffix.sub("", title)
    return title.strip()


def contains_term(text: str, term: str) -> bool:
    """True when term occurs in text without Latin letters glued to either side.

    "son" matches "Son scores" but not "season". Hangul terms still match
    inside a word so that particles ("토트넘은") do not hide them.
    """
    term = (term or "").strip().lower()
    if not term:
        return False
    pattern = r"(?<![a-z0-9])" + re.escape(term) + r"(?![a-z0-9])"
    return re.search(pattern, (text or "").lower()) is not None


def is_valid_title(title: str) -> bool:
    return len(title.strip()) >= MIN_TITLE_LENGTH


def has_hangul(text: str) -> bool:
    return bool(HANGUL_RE.search(text or ""))


def parse_rfc822(value: str | None) -> datetime | None:
    """Parse an RSS-style date ("Tue, 14 Oct 2025 09:30:00 +0900") into UTC."""
    if not value:
        return None
    try:
        parsed = parsedate_to_datetime(value.strip())
    except (TypeError, ValueError, IndexError):
        return None
    if parsed is None:
        return None
    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=timezone.utc)
    return parsed.astimezone(timezone.utc)


def from_struct_time(value: time.struct_time | None) -> datetime | None:
    """Convert a feedparser *_parsed struct (always UTC) to a datetime."""
    if not value:
        return None
    try:
        return datetime(*value[:6], tzinfo=timezone.utc)
    except (TypeError, ValueError):
        return None
