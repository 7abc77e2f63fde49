"""Structured result of analysing a dream."""

from __future__ import annotations

from pydantic import BaseModel, Field

from dreamboard.models.vocab import (
    DEFAULT_CATEGORY,
    DEFAULT_EMOTION,
    Category,
    Emotion,
    IntentType,
    Sentiment,
    TimeframeBucket,
)


class EmotionalTone(BaseModel):
    sentiment: Sentiment = Sentiment.NEUTRAL
    intensity: float = Field(default=0.0, ge=0.0, le=1.0)
    emotions: list[Emotion] = Field(default_factory=lambda: [DEFAULT_EMOTION])


class Entities(BaseModel):
    goals: list[str] = Field(default_factory=list)
    timeframes: list[str] = Field(default_factory=list)
    obstacles: list[str] = Field(default_factory=list)
    motivations: list[str] = Field(default_factory=list)
    values: list[str] = Field(default_factory=list)


class Intent(BaseModel):
    type: IntentType = IntentType.ACHIEVEMENT
    urgency: float = Field(default=0.5, ge=0.0, le=1.0)
    specificity: float = Field(default=0.0, ge=0.0, le=1.0)
    feasibility: float = Field(default=0.6, ge=0.0, le=1.0)


class Personalization(BaseModel):
    previous_categories: list[str] = Field(default_factory=list)
    success_patterns: list[str] = Field(default_factory=list)
    preferred_image_styles: list[str] = Field(default_factory=list)
    color_preferences: list[str] = Field(default_factory=list)


class KeywordSuggestion(BaseModel):
    word: str
    weight: float = 0.8
    category: Category


class Suggestions(BaseModel):
    keywords: list[KeywordSuggestion] = Field(default_factory=list)
    image_queries: list[str] = Field(default_factory=list)
    affirmations: list[str] = Field(default_factory=list)
    visual_elements: list[str] = Field(default_factory=list)


class DreamAnalysis(BaseModel):
    primary_categories: list[Category] = Field(default_factory=lambda: [DEFAULT_CATEGORY])
    # Semantic cluster names that fired during category detection
    clusters: list[str] = Field(default_factory=list)
    emotional_tone: EmotionalTone = Field(default_factory=EmotionalTone)
    entities: Entities = Field(default_factory=Entities)
    intent: Intent = Field(default_factory=Intent)
    timeframe: TimeframeBucket | None = None
    personalization: Personalization = Field(default_factory=Personalization)
    suggestions: Suggestions = Field(default_factory=Suggestions)

    @property
    def top_category(self) -> Category:
        return self.primary_categories[0] if self.primary_categories else DEFAULT_CATEGORY

    @property
    def top_emotion(self) -> Emotion:
        emotions = self.emotional_tone.emotions
        return emotions[0] if emotions else DEFAULT_EMOTION
