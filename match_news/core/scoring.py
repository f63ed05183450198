"""
TF-IDF term scoring over a match corpus.

Headlines about a fixture come in two scripts: English (Google News, ESPN,
BBC) and Korean (Naver, Korean publishers on Google News). Each script has
its own extractor; both run over the same lower-cased text.

Score for a term t over N articles:

    score(t) = tf(t) * ln(N / (df(t) + 1))

where tf is the total number of occurrences and df the number of articles
containing t. A term present in every article scores at or below zero, so
boilerplate sinks and coverage specific to this match rises.
"""

from __future__ import annotations

from collections import Counter
import math
import re
from typing import Iterable

from .types import Article, Entity, TermStat


MIN_TOKEN_LENGTH = 2

LATIN_TOKEN_RE = re.compile(r"[a-z]+")
HANGUL_TOKEN_RE = re.compile(r"[가-힣]+")

ENGLISH_STOPWORDS: frozenset[str] = frozenset({
    "a", "about", "after", "again", "against", "all", "also", "am", "an", "and",
    "any", "are", "as", "at", "be", "because", "been", "before", "being", "but",
    "by", "can", "could", "did", "do", "does", "down", "during", "each", "for",
    "from", "further", "had", "has", "have", "he", "her", "here", "his", "how",
    "if", "in", "into", "is", "it", "its", "just", "me", "more", "most", "my",
    "new", "no", "not", "now", "of", "off", "on", "one", "only", "or", "other",
    "our", "out", "over", "says", "she", "should", "so", "some", "than", "that",
    "the", "their", "them", "then", "there", "these", "they", "this", "those",
    "through", "to", "too", "up", "us", "very", "was", "we", "were", "what",
    "when", "where", "which", "while", "who", "why", "will", "with", "would",
    "you", "your", "ll", "re", "ve",
})

KOREAN_STOPWORDS: frozenset[str] = frozenset({
    "그리고", "그러나", "하지만", "또한", "이번", "지난", "오늘", "어제", "내일",
    "위해", "대한", "통해", "관련", "있는", "없는", "했다", "한다", "하는", "있다",
    "없다", "것으로", "에서", "으로", "까지", "부터", "에게", "이다", "였다",
    "기자", "뉴스", "속보", "단독", "종합", "사진", "영상",
})

STOPWORDS: frozenset[str] = ENGLISH_STOPWORDS | KOREAN_STOPWORDS

# Nouns present in nearly every fixture headline.
DOMAIN_TERMS: frozenset[str] = frozenset({
    "match", "matches", "team", "teams", "player", "players", "game", "games",
    "vs", "fc", "club", "football", "soccer", "league",
    "경기", "팀", "선수", "축구", "리그", "구단",
})


def tokenize(text: str) -> list[str]:
    """Extract Latin and Hangul tokens of at least two characters."""
    lowered = (text or "").lower()
    tokens = LATIN_TOKEN_RE.findall(lowered) + HANGUL_TOKEN_RE.findall(lowered)
    return [token for token in tokens if len(token) >= MIN_TOKEN_LENGTH]


def build_excluded_terms(*entities: Entity, extra: Iterable[str] = ()) -> frozenset[str]:
    """Terms that must never surface as keywords for this entity pair.

    Covers each canonical name, its individual words, the words of the
    display name, and generic sport nouns.
    """
    excluded: set[str] = set(DOMAIN_TERMS)
    for entity in entities:
        excluded.add(entity.canonical)
        excluded.update(entity.name_parts)
        excluded.update(tokenize(entity.display))
        excluded.update(word.lower() for word in entity.display.split())
    excluded.update(term.lower() for term in extra)
    return frozenset(excluded)


def score_terms(articles: list[Article], excluded_terms: Iterable[str] = ()) -> list[TermStat]:
    """Compute TF-IDF statistics for every eligible term of the corpus.

    Args:
        articles: The deduplicated, recency-filtered corpus
        excluded_terms: Terms to skip in addition to the stopword list

    Returns:
        One TermStat per term, in first-seen order. Empty for an empty corpus.
    """
    total = len(articles)
    if total == 0:
        return []

    excluded = STOPWORDS | frozenset(term.lower() for term in excluded_terms)
    term_frequency: Counter[str] = Counter()
    document_frequency: Counter[str] = Counter()

    for article in articles:
        tokens = [token for token in tokenize(article.text) if token not in excluded]
        term_frequency.update(tokens)
        document_frequency.update(set(tokens))

    return [
        TermStat(
            term=term,
            term_frequency=tf,
            document_frequency=document_frequency[term],
            score=tf * math.log(total / (document_frequency[term] + 1)),
        )
        for term, tf in term_frequency.items()
    ]
