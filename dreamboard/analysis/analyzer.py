"""Text analyzer: rule-based dream analysis in seven stages.

    sentiment -> entities -> intent -> categories -> emotions
              -> suggestions -> personalization

Every stage has a default, so ``analyze`` never raises for well-formed
``DreamInput``. The only side effect is appending to the personalization
store after the analysis has been assembled.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass

from dreamboard.analysis.entities import count_terms, detect_timeframe, extract_entities, has_term, tokenize
from dreamboard.analysis.history import HistoryEntry, PersonalizationStore
from dreamboard.analysis.lexicon import (
    CATEGORIES,
    CATEGORY_QUERY_COUNT,
    CHALLENGE_WORDS,
    CURATED_QUERIES,
    DEFAULT_EMOTION_INTENSITY,
    EMOTION_IMAGE_QUERIES,
    EMOTIONS,
    FEASIBILITY_WORDS,
    INTENT_RULES,
    NEGATIVE_WORDS,
    POSITIVE_WORDS,
    TIMEFRAMES,
)
from dreamboard.models.analysis import (
    DreamAnalysis,
    EmotionalTone,
    Entities,
    Intent,
    KeywordSuggestion,
    Personalization,
    Suggestions,
)
from dreamboard.models.dream import DreamInput
from dreamboard.models.vocab import (
    DEFAULT_CATEGORY,
    DEFAULT_EMOTION,
    Category,
    Emotion,
    IntentType,
    Sentiment,
)

logger = logging.getLogger(__name__)


@dataclass
class AnalyzerConfig:
    """Heuristic constants for the analyzer."""

    # Sentiment: intensity = |pos - neg| / tokens * scale, capped at 1
    sentiment_scale: float = 10.0

    # Specificity = tokens / divisor, capped at 1
    specificity_divisor: float = 100.0

    # Feasibility nudges
    feasibility_base: float = 0.6
    feasibility_step: float = 0.1
    feasibility_floor: float = 0.1

    # Urgency fallbacks when no timeframe keyword fires
    default_urgency: float = 0.5
    near_phrase_urgency: float = 0.7  # extracted "3 weeks", "2 months"
    year_phrase_urgency: float = 0.5
    far_phrase_urgency: float = 0.3

    # Category scoring
    primary_keyword_score: int = 2
    cluster_phrase_score: int = 3

    keyword_weight: float = 0.8


@dataclass(frozen=True)
class EmotionScore:
    emotion: Emotion
    intensity: float


class TextAnalyzer:
    """Turns a DreamInput into a DreamAnalysis."""

    def __init__(
        self,
        store: PersonalizationStore | None = None,
        config: AnalyzerConfig | None = None,
    ) -> None:
        self.store = store if store is not None else PersonalizationStore()
        self.config = config or AnalyzerConfig()

    def analyze(self, dream: DreamInput, user_id: str = "default") -> DreamAnalysis:
        start = time.perf_counter()
        text = dream.combined_text()
        tokens = tokenize(text)

        sentiment, intensity = self._sentiment(tokens)
        entities = extract_entities(text)
        intent = self._intent(text, tokens, entities)
        categories, clusters = self._categories(text)
        emotions = self._emotions(text)
        primary = categories or [DEFAULT_CATEGORY]
        suggestions = self._suggestions(primary, emotions, entities)

        # Personalization reflects history before this call
        personalization = self._personalization(user_id)

        analysis = DreamAnalysis(
            primary_categories=primary,
            clusters=clusters,
            emotional_tone=EmotionalTone(
                sentiment=sentiment,
                intensity=intensity,
                emotions=[score.emotion for score in emotions],
            ),
            entities=entities,
            intent=intent,
            timeframe=detect_timeframe(text),
            personalization=personalization,
            suggestions=suggestions,
        )

        self.store.record(
            user_id,
            HistoryEntry(
                dream_id=dream.id,
                title=dream.title,
                categories=tuple(primary),
                emotions=tuple(score.emotion for score in emotions),
            ),
        )

        elapsed = (time.perf_counter() - start) * 1000
        logger.info(
            "Analyzed dream %r: category=%s emotion=%s intent=%s in %.1fms",
            dream.title,
            analysis.top_category.value,
            analysis.top_emotion.value,
            intent.type.value,
            elapsed,
        )
        return analysis

    # ------------------------------------------------------------------
    # Stages
    # ------------------------------------------------------------------

    def _sentiment(self, tokens: list[str]) -> tuple[Sentiment, float]:
        if not tokens:
            return Sentiment.NEUTRAL, 0.0
        positive = sum(1 for t in tokens if t in POSITIVE_WORDS)
        negative = sum(1 for t in tokens if t in NEGATIVE_WORDS)
        total = positive - negative
        intensity = min(abs(total) / len(tokens) * self.config.sentiment_scale, 1.0)
        if total > 0:
            return Sentiment.POSITIVE, intensity
        if total < 0:
            return Sentiment.NEGATIVE, intensity
        return Sentiment.NEUTRAL, intensity

    def _intent(self, text: str, tokens: list[str], entities: Entities) -> Intent:
        cfg = self.config

        intent_type = IntentType.ACHIEVEMENT
        for candidate, keywords in INTENT_RULES:
            if any(has_term(text, kw) for kw in keywords):
                intent_type = candidate
                break

        feasibility = cfg.feasibility_base
        feasibility += cfg.feasibility_step * count_terms(text, FEASIBILITY_WORDS)
        feasibility -= cfg.feasibility_step * count_terms(text, CHALLENGE_WORDS)
        feasibility = max(cfg.feasibility_floor, min(1.0, feasibility))

        return Intent(
            type=intent_type,
            urgency=self._urgency(text, entities),
            specificity=min(len(tokens) / cfg.specificity_divisor, 1.0),
            feasibility=round(feasibility, 4),
        )

    def _urgency(self, text: str, entities: Entities) -> float:
        bucket = detect_timeframe(text)
        if bucket is not None:
            return TIMEFRAMES[bucket].urgency
        if not entities.timeframes:
            return self.config.default_urgency
        # Last extracted phrase decides
        phrase = entities.timeframes[-1].lower()
        if "week" in phrase or "month" in phrase:
            return self.config.near_phrase_urgency
        if "year" in phrase:
            return self.config.year_phrase_urgency
        return self.config.far_phrase_urgency

    def _categories(self, text: str) -> tuple[list[Category], list[str]]:
        """Categories with a positive score, best first, and the clusters that fired."""
        cfg = self.config
        scored: list[tuple[int, int, Category]] = []
        clusters: list[str] = []

        for order, (category, definition) in enumerate(CATEGORIES.items()):
            score = cfg.primary_keyword_score * count_terms(text, definition.primary_keywords)
            for cluster, phrases in definition.clusters.items():
                hits = count_terms(text, phrases)
                if hits:
                    score += cfg.cluster_phrase_score * hits
                    clusters.append(cluster)
            if score > 0:
                scored.append((-score, order, category))

        scored.sort()
        logger.debug("Category scores: %s", [(c.value, -s) for s, _, c in scored])
        return [category for _, _, category in scored], clusters

    def _emotions(self, text: str) -> list[EmotionScore]:
        scores: list[EmotionScore] = []
        for emotion, pattern in EMOTIONS.items():
            hits = count_terms(text, pattern.keywords)
            if hits:
                scores.append(EmotionScore(emotion, pattern.intensity * hits / len(pattern.keywords)))

        if not scores:
            return [EmotionScore(DEFAULT_EMOTION, DEFAULT_EMOTION_INTENSITY)]

        # Stable sort keeps declaration order on ties
        return sorted(scores, key=lambda s: -s.intensity)

    def _suggestions(
        self,
        categories: list[Category],
        emotions: list[EmotionScore],
        entities: Entities,
    ) -> Suggestions:
        keywords: list[KeywordSuggestion] = []
        visual_elements: list[str] = []
        for category in categories:
            definition = CATEGORIES[category]
            keywords.extend(
                KeywordSuggestion(word=word, weight=self.config.keyword_weight, category=category)
                for word in definition.primary_keywords
            )
            visual_elements.extend(definition.visual_elements)

        queries: list[str] = []
        for score in emotions:
            queries.append(f"{score.emotion.value} {EMOTIONS[score.emotion].image_style}")
            queries.extend(EMOTION_IMAGE_QUERIES.get(score.emotion, ()))
        queries.extend(CURATED_QUERIES[categories[0]][:CATEGORY_QUERY_COUNT])

        affirmations: list[str] = []
        for goal in entities.goals:
            affirmations.append(f"I am successfully {goal.lower()}")
            affirmations.append(f"{goal} flows easily into my life")
        for category in categories:
            affirmations.extend(CATEGORIES[category].affirmations)

        return Suggestions(
            keywords=keywords,
            image_queries=list(dict.fromkeys(queries)),
            affirmations=list(dict.fromkeys(affirmations)),
            visual_elements=list(dict.fromkeys(visual_elements)),
        )

    def _personalization(self, user_id: str) -> Personalization:
        history = self.store.snapshot(user_id)
        styles: list[str] = []
        colors: list[str] = []
        for entry in history:
            for emotion in entry.emotions:
                pattern = EMOTIONS[emotion]
                styles.append(pattern.image_style)
                colors.extend(pattern.colors)

        return Personalization(
            previous_categories=[entry.categories[0].value for entry in history if entry.categories],
            success_patterns=list(dict.fromkeys(self.store.success_factors(user_id))),
            preferred_image_styles=list(dict.fromkeys(styles)),
            color_preferences=list(dict.fromkeys(colors)),
        )
