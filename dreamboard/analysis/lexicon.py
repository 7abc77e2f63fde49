"""Static word lists and pattern tables for dream analysis.

Everything here is immutable and keyed by the closed vocabularies in
``dreamboard.models.vocab``. Declaration order matters: category ties are
broken by the order of ``CATEGORIES``.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType

from dreamboard.models.vocab import Category, Emotion, IntentType, TimeframeBucket


@dataclass(frozen=True)
class EmotionPattern:
    keywords: tuple[str, ...]
    intensity: float
    colors: tuple[str, ...]
    image_style: str


@dataclass(frozen=True)
class CategoryDefinition:
    primary_keywords: tuple[str, ...]
    clusters: MappingProxyType  # cluster name -> tuple of phrases
    emotional_patterns: tuple[Emotion, ...]
    timeframe_patterns: tuple[str, ...]
    visual_elements: tuple[str, ...]
    affirmations: tuple[str, ...] = ()


@dataclass(frozen=True)
class TimeframePattern:
    keywords: tuple[str, ...]
    weight: float
    urgency: float


POSITIVE_WORDS = frozenset({
    "amazing", "awesome", "fantastic", "incredible", "wonderful", "excellent", "perfect",
    "love", "excited", "thrilled", "happy", "joyful", "successful", "achieve", "accomplish",
    "dream", "goal", "aspire", "hope", "want", "desire", "passionate", "motivated",
})

NEGATIVE_WORDS = frozenset({
    "hard", "difficult", "struggle", "challenge", "problem", "issue", "worry", "fear",
    "anxious", "stressed", "overwhelmed", "impossible", "can't", "won't", "never",
})

EMOTIONS: MappingProxyType = MappingProxyType({
    Emotion.EXCITEMENT: EmotionPattern(
        keywords=("excited", "thrilled", "amazing", "incredible", "fantastic", "awesome", "pumped"),
        intensity=0.9,
        colors=("#FF6B6B", "#4ECDC4", "#45B7D1"),
        image_style="dynamic",
    ),
    Emotion.DETERMINATION: EmotionPattern(
        keywords=("determined", "focused", "committed", "dedicated", "persistent", "driven"),
        intensity=0.8,
        colors=("#96CEB4", "#FFEAA7", "#DDA0DD"),
        image_style="strong",
    ),
    Emotion.PEACE: EmotionPattern(
        keywords=("peaceful", "calm", "serene", "tranquil", "balanced", "centered"),
        intensity=0.6,
        colors=("#A8E6CF", "#B8B8FF", "#FFD3A5"),
        image_style="serene",
    ),
    Emotion.AMBITION: EmotionPattern(
        keywords=("ambitious", "successful", "wealthy", "powerful", "influential", "leader"),
        intensity=0.9,
        colors=("#FFD700", "#C0392B", "#2C3E50"),
        image_style="luxurious",
    ),
    Emotion.LOVE: EmotionPattern(
        keywords=("love", "romantic", "connection", "intimate", "caring", "devoted"),
        intensity=0.8,
        colors=("#FF69B4", "#FFB6C1", "#FFA07A"),
        image_style="warm",
    ),
    Emotion.ADVENTURE: EmotionPattern(
        keywords=("adventure", "explore", "travel", "discover", "freedom", "wild"),
        intensity=0.9,
        colors=("#32CD32", "#87CEEB", "#F4A460"),
        image_style="expansive",
    ),
})

DEFAULT_EMOTION_INTENSITY = 0.7

# Extra image queries added when an emotion is detected
EMOTION_IMAGE_QUERIES: MappingProxyType = MappingProxyType({
    Emotion.ADVENTURE: ("outdoor adventure", "mountain landscape", "travel destination"),
    Emotion.AMBITION: ("success lifestyle", "luxury office", "achievement trophy"),
    Emotion.LOVE: ("romantic couple", "heart symbol", "wedding inspiration"),
})

CATEGORIES: MappingProxyType = MappingProxyType({
    Category.HEALTH_FITNESS: CategoryDefinition(
        primary_keywords=(
            "health", "fitness", "weight", "body", "exercise", "workout", "gym", "diet", "nutrition",
        ),
        clusters=MappingProxyType({
            "weight_loss": ("lose weight", "slim down", "get lean", "reduce fat", "tone up"),
            "muscle_building": ("build muscle", "get strong", "bulk up", "gain mass", "strength"),
            "general_wellness": ("healthy lifestyle", "feel good", "energy", "vitality", "wellness"),
            "athletic_performance": ("performance", "compete", "athlete", "marathon", "sports"),
        }),
        emotional_patterns=(Emotion.DETERMINATION, Emotion.EXCITEMENT),
        timeframe_patterns=("summer body", "new year", "before wedding", "beach ready"),
        visual_elements=("progress charts", "before/after", "workout scenes", "healthy foods"),
        affirmations=("My body is strong and healthy", "I choose nourishing foods and movement"),
    ),
    Category.CAREER_BUSINESS: CategoryDefinition(
        primary_keywords=(
            "career", "job", "business", "work", "professional", "income", "money", "success",
        ),
        clusters=MappingProxyType({
            "career_advancement": ("promotion", "leadership", "manager", "executive", "senior"),
            "entrepreneurship": ("startup", "entrepreneur", "business owner", "company", "venture"),
            "financial_growth": ("wealth", "rich", "financial freedom", "income", "investment"),
            "skill_development": ("learn", "skills", "certification", "education", "training"),
        }),
        emotional_patterns=(Emotion.AMBITION, Emotion.DETERMINATION, Emotion.EXCITEMENT),
        timeframe_patterns=("by 30", "next year", "five years", "retirement"),
        visual_elements=("office scenes", "success symbols", "charts/graphs", "money imagery"),
        affirmations=("Success comes naturally to me", "I am a leader and innovator"),
    ),
    Category.RELATIONSHIPS_LOVE: CategoryDefinition(
        primary_keywords=(
            "love", "relationship", "partner", "marriage", "family", "friend", "connection",
        ),
        clusters=MappingProxyType({
            "romantic_love": ("soulmate", "husband", "wife", "boyfriend", "girlfriend", "dating"),
            "family_bonds": ("children", "kids", "family", "mother", "father", "parent"),
            "social_connections": ("friends", "community", "network", "social", "belonging"),
            "self_love": ("self-care", "confidence", "self-worth", "self-acceptance"),
        }),
        emotional_patterns=(Emotion.LOVE, Emotion.PEACE, Emotion.EXCITEMENT),
        timeframe_patterns=("this year", "before 35", "soon", "when ready"),
        visual_elements=("couples", "families", "hearts", "weddings", "intimate moments"),
        affirmations=("I attract loving relationships", "I am worthy of deep connection"),
    ),
    Category.TRAVEL_ADVENTURE: CategoryDefinition(
        primary_keywords=(
            "travel", "adventure", "explore", "world", "journey", "vacation", "trip",
        ),
        clusters=MappingProxyType({
            "world_travel": ("countries", "continents", "international", "passport", "culture"),
            "nature_adventure": ("mountains", "beach", "forest", "hiking", "camping", "outdoor"),
            "luxury_travel": ("first class", "resort", "luxury", "spa", "fine dining"),
            "spiritual_journey": ("pilgrimage", "retreat", "meditation", "spiritual", "enlightenment"),
        }),
        emotional_patterns=(Emotion.ADVENTURE, Emotion.EXCITEMENT, Emotion.PEACE),
        timeframe_patterns=("next vacation", "bucket list", "retirement", "gap year"),
        visual_elements=("landscapes", "transportation", "cultural sites", "adventure scenes"),
        affirmations=("The world is open to me", "Every journey expands who I am"),
    ),
    Category.PERSONAL_GROWTH: CategoryDefinition(
        primary_keywords=(
            "growth", "development", "learn", "improve", "change", "transform", "mindset",
        ),
        clusters=MappingProxyType({
            "spiritual_growth": ("spiritual", "meditation", "enlightenment", "consciousness", "awakening"),
            "mental_health": ("therapy", "healing", "mental health", "anxiety", "depression", "peace"),
            "habits_lifestyle": ("habits", "routine", "discipline", "productivity", "organization"),
            "creativity": ("creative", "art", "music", "writing", "expression", "artistic"),
        }),
        emotional_patterns=(Emotion.PEACE, Emotion.DETERMINATION, Emotion.EXCITEMENT),
        timeframe_patterns=("daily practice", "this year", "gradual change", "lifetime journey"),
        visual_elements=("nature", "meditation", "books", "art", "symbols of growth"),
        affirmations=("I grow stronger every day", "I embrace change with an open heart"),
    ),
})

# Ordered most urgent first; the first bucket with a keyword hit wins
TIMEFRAMES: MappingProxyType = MappingProxyType({
    TimeframeBucket.IMMEDIATE: TimeframePattern(
        keywords=("now", "today", "immediately", "asap", "urgent"), weight=1.0, urgency=0.9,
    ),
    TimeframeBucket.SHORT_TERM: TimeframePattern(
        keywords=("week", "month", "soon", "quickly", "by summer"), weight=0.8, urgency=0.7,
    ),
    TimeframeBucket.MEDIUM_TERM: TimeframePattern(
        keywords=("year", "by 30", "next year", "eventually"), weight=0.6, urgency=0.5,
    ),
    TimeframeBucket.LONG_TERM: TimeframePattern(
        keywords=("years", "decade", "lifetime", "someday", "retirement"), weight=0.4, urgency=0.3,
    ),
})

# First rule with a hit wins; ACHIEVEMENT is the default
INTENT_RULES: tuple[tuple[IntentType, tuple[str, ...]], ...] = (
    (IntentType.TRANSFORMATION, ("become", "transform", "change")),
    (IntentType.ACQUISITION, ("buy", "get", "own", "have")),
    (IntentType.RELATIONSHIP, ("meet", "find", "relationship", "love")),
    (IntentType.EXPERIENCE, ("experience", "travel", "adventure", "feel")),
)

FEASIBILITY_WORDS = ("realistic", "achievable", "possible", "plan", "step")
CHALLENGE_WORDS = ("impossible", "unrealistic", "difficult", "hard")

VALUE_KEYWORDS = (
    "family", "freedom", "security", "creativity", "adventure",
    "success", "health", "love", "peace", "growth",
)

# Curated per-category image queries, shared with the image agent's collections
CURATED_QUERIES: MappingProxyType = MappingProxyType({
    Category.HEALTH_FITNESS: (
        "workout gym fitness",
        "healthy food nutrition",
        "running exercise outdoor",
        "yoga meditation wellness",
    ),
    Category.CAREER_BUSINESS: (
        "office professional business",
        "success achievement trophy",
        "handshake meeting corporate",
        "laptop work productivity",
    ),
    Category.RELATIONSHIPS_LOVE: (
        "couple love romantic",
        "wedding marriage celebration",
        "family happiness together",
        "heart symbol love",
    ),
    Category.TRAVEL_ADVENTURE: (
        "mountain landscape adventure",
        "beach sunset travel",
        "backpack hiking outdoor",
        "airplane passport journey",
    ),
    Category.PERSONAL_GROWTH: (
        "meditation peaceful zen",
        "books learning wisdom",
        "nature growth transformation",
        "sunrise new beginning",
    ),
})

CATEGORY_QUERY_COUNT = 3
