"""Pattern-based entity extraction and keyword matching.

All matchers expect lower-cased text. Keyword hits are anchored at a word
start so "art" does not fire inside "startup".
"""

from __future__ import annotations

import functools
import re

from dreamboard.analysis.lexicon import TIMEFRAMES, VALUE_KEYWORDS
from dreamboard.models.analysis import Entities
from dreamboard.models.vocab import TimeframeBucket

TOKEN_RE = re.compile(r"[\w']+")

TIME_RE = re.compile(
    r"(\d+)\s*(day|week|month|year|decade)s?|by\s+(\d{4}|summer|winter|spring|fall)",
    re.IGNORECASE,
)
GOAL_RE = re.compile(
    r"\b(achieve|accomplish|reach|attain|get|become|build|create|start|launch)\s+([^.!?]+)",
    re.IGNORECASE,
)
OBSTACLE_RE = re.compile(
    r"\b(but|however|although|challenge|difficult|hard|struggle|problem)\s+([^.!?]+)",
    re.IGNORECASE,
)
MOTIVATION_RE = re.compile(
    r"\b(because|since|so that|in order to|want to|need to)\s+([^.!?]+)",
    re.IGNORECASE,
)


def tokenize(text: str) -> list[str]:
    return TOKEN_RE.findall(text)


@functools.lru_cache(maxsize=1024)
def _term_pattern(term: str) -> re.Pattern[str]:
    return re.compile(r"\b" + re.escape(term))


def has_term(text: str, term: str) -> bool:
    return _term_pattern(term).search(text) is not None


def count_terms(text: str, terms: tuple[str, ...] | list[str]) -> int:
    return sum(1 for term in terms if has_term(text, term))


def _tails(pattern: re.Pattern[str], text: str) -> list[str]:
    return [m.group(2).strip() for m in pattern.finditer(text) if m.group(2).strip()]


def extract_entities(text: str) -> Entities:
    """Goals, timeframes, obstacles, motivations and values found in ``text``."""
    return Entities(
        goals=_tails(GOAL_RE, text),
        timeframes=[m.group(0) for m in TIME_RE.finditer(text)],
        obstacles=_tails(OBSTACLE_RE, text),
        motivations=_tails(MOTIVATION_RE, text),
        # Plain containment, not word-anchored
        values=[value for value in VALUE_KEYWORDS if value in text],
    )


def detect_timeframe(text: str) -> TimeframeBucket | None:
    """Most urgent timeframe bucket with a keyword hit, or None."""
    lowered = text.lower()
    for bucket, pattern in TIMEFRAMES.items():
        if any(has_term(lowered, keyword) for keyword in pattern.keywords):
            return bucket
    return None
