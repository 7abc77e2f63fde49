"""Closed vocabularies shared across the pipeline.

Values that arrive from outside (template style strings, emotion labels)
go through ``parse`` so unknown text lands on a known default.
"""

from __future__ import annotations

import enum
from typing import TypeVar

E = TypeVar("E", bound=enum.Enum)


class Category(str, enum.Enum):
    HEALTH_FITNESS = "health_fitness"
    CAREER_BUSINESS = "career_business"
    RELATIONSHIPS_LOVE = "relationships_love"
    TRAVEL_ADVENTURE = "travel_adventure"
    PERSONAL_GROWTH = "personal_growth"


DEFAULT_CATEGORY = Category.PERSONAL_GROWTH


class Emotion(str, enum.Enum):
    EXCITEMENT = "excitement"
    DETERMINATION = "determination"
    PEACE = "peace"
    AMBITION = "ambition"
    LOVE = "love"
    ADVENTURE = "adventure"


DEFAULT_EMOTION = Emotion.EXCITEMENT


class Sentiment(str, enum.Enum):
    POSITIVE = "positive"
    NEUTRAL = "neutral"
    NEGATIVE = "negative"


class IntentType(str, enum.Enum):
    ACHIEVEMENT = "achievement"
    TRANSFORMATION = "transformation"
    ACQUISITION = "acquisition"
    RELATIONSHIP = "relationship"
    EXPERIENCE = "experience"


class TimeframeBucket(str, enum.Enum):
    IMMEDIATE = "immediate"
    SHORT_TERM = "short_term"
    MEDIUM_TERM = "medium_term"
    LONG_TERM = "long_term"


class ElementKind(str, enum.Enum):
    IMAGE = "image"
    TEXT = "text"
    SHAPE = "shape"
    ICON = "icon"
    PROGRESS = "progress"
    QUOTE = "quote"


class Composition(str, enum.Enum):
    PORTRAIT = "portrait"
    LANDSCAPE = "landscape"
    SQUARE = "square"


class Orientation(str, enum.Enum):
    PORTRAIT = "portrait"
    LANDSCAPE = "landscape"
    SQUARE = "square"
    ANY = "any"


class LayoutStrategy(str, enum.Enum):
    GOLDEN_RATIO = "golden-ratio"
    MASONRY = "masonry"
    ASYMMETRIC = "asymmetric"
    FLOWING = "flowing"
    CENTERED = "centered"
    GRID = "grid"


class TemplateStyle(str, enum.Enum):
    MAGAZINE = "magazine"
    PINTEREST = "pinterest"
    MINIMALIST = "minimalist"
    COSMIC = "cosmic"
    LUXURY = "luxury"
    ORGANIC = "organic"
    UNKNOWN = "unknown"


def parse(enum_cls: type[E], value: object, default: E | None = None) -> E | None:
    """Map free text (or an enum member) onto ``enum_cls``; ``default`` if unknown."""
    if isinstance(value, enum_cls):
        return value
    if isinstance(value, str):
        key = value.strip().lower()
        for member in enum_cls:
            if member.value == key:
                return member
    return default
