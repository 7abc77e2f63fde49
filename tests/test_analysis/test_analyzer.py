"""Tests for the text analyzer."""

import pytest

from dreamboard.analysis.analyzer import TextAnalyzer
from dreamboard.analysis.history import PersonalizationStore
from dreamboard.models.dream import DreamInput
from dreamboard.models.vocab import Category, Emotion, IntentType, Sentiment, TimeframeBucket
from tests.conftest import CAREER_DREAM, TRAVEL_DREAM, VAGUE_DREAM


def test_career_dream(analyzer):
    analysis = analyzer.analyze(CAREER_DREAM, "user-1")
    assert analysis.primary_categories[0] == Category.CAREER_BUSINESS
    assert {Emotion.AMBITION, Emotion.DETERMINATION, Emotion.EXCITEMENT} & set(analysis.emotional_tone.emotions)
    assert "entrepreneurship" in analysis.clusters
    assert analysis.suggestions.image_queries


def test_vague_dream_gets_defaults(analyzer):
    analysis = analyzer.analyze(VAGUE_DREAM, "user-1")
    assert analysis.primary_categories == [Category.PERSONAL_GROWTH]
    assert analysis.emotional_tone.emotions == [Emotion.EXCITEMENT]
    assert analysis.emotional_tone.intensity == pytest.approx(0.0)
    assert analysis.emotional_tone.sentiment == Sentiment.NEUTRAL
    assert analysis.suggestions.image_queries
    assert analysis.intent.type == IntentType.ACHIEVEMENT


def test_travel_dream(analyzer):
    analysis = analyzer.analyze(TRAVEL_DREAM, "user-1")
    assert analysis.top_category == Category.TRAVEL_ADVENTURE
    assert analysis.top_emotion == Emotion.ADVENTURE
    assert analysis.intent.type == IntentType.EXPERIENCE
    assert "outdoor adventure" in analysis.suggestions.image_queries


def test_image_queries_are_unique(analyzer):
    analysis = analyzer.analyze(TRAVEL_DREAM, "user-1")
    queries = analysis.suggestions.image_queries
    assert len(queries) == len(set(queries))


def test_goal_affirmations(analyzer):
    dream = DreamInput(title="Run a marathon", description="I will achieve a sub four hour finish")
    analysis = analyzer.analyze(dream, "user-1")
    assert "I am successfully a sub four hour finish" in analysis.suggestions.affirmations


def test_urgency_from_timeframe_keyword(analyzer):
    dream = DreamInput(title="Get fit", description="start training today")
    analysis = analyzer.analyze(dream, "user-1")
    assert analysis.timeframe == TimeframeBucket.IMMEDIATE
    assert analysis.intent.urgency == pytest.approx(0.9)


def test_urgency_from_extracted_phrase(analyzer):
    dream = DreamInput(title="Write a novel", description="finish the draft in 9 weeks")
    analysis = analyzer.analyze(dream, "user-1")
    assert analysis.intent.urgency == pytest.approx(0.7)


def test_feasibility_nudges(analyzer):
    hopeful = analyzer.analyze(DreamInput(title="A realistic plan", description="achievable step"), "u")
    doubtful = analyzer.analyze(DreamInput(title="An impossible dream", description="hard and difficult"), "u")
    assert hopeful.intent.feasibility > 0.6
    assert doubtful.intent.feasibility < 0.6


@pytest.mark.parametrize("title,description", [
    ("x", ""),
    ("!!!", "???"),
    ("amazing " * 500, "awesome " * 500),
    ("hard impossible never", "fear worry struggle problem issue"),
    ("now today soon", "realistic achievable possible plan step " * 50),
])
def test_scores_stay_in_bounds(analyzer, title, description):
    analysis = analyzer.analyze(DreamInput(title=title, description=description), "bounds")
    for value in (
        analysis.emotional_tone.intensity,
        analysis.intent.urgency,
        analysis.intent.specificity,
        analysis.intent.feasibility,
    ):
        assert 0.0 <= value <= 1.0
    assert analysis.primary_categories
    assert analysis.emotional_tone.emotions
    assert analysis.suggestions.image_queries


def test_deterministic_with_empty_history():
    first = TextAnalyzer(store=PersonalizationStore()).analyze(CAREER_DREAM, "same-user")
    second = TextAnalyzer(store=PersonalizationStore()).analyze(CAREER_DREAM, "same-user")
    assert first == second


def test_personalization_reflects_prior_history(analyzer, store):
    first = analyzer.analyze(CAREER_DREAM, "user-1")
    assert first.personalization.previous_categories == []

    second = analyzer.analyze(TRAVEL_DREAM, "user-1")
    assert second.personalization.previous_categories == ["career_business"]
    assert second.personalization.color_preferences
    assert len(store.snapshot("user-1")) == 2


def test_history_is_per_user(analyzer):
    analyzer.analyze(CAREER_DREAM, "alice")
    analysis = analyzer.analyze(CAREER_DREAM, "bob")
    assert analysis.personalization.previous_categories == []
