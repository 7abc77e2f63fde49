"""Tests for the content generator."""

import pytest

from dreamboard.content.generator import ContentGenerator, resolve_category
from dreamboard.content.templates import ACTION_STEPS, AFFIRMATIONS, MILESTONES, POWER_WORDS, QUOTES
from dreamboard.models.content import ContentRequest
from dreamboard.models.vocab import Category, TimeframeBucket

generator = ContentGenerator()


def _request(**overrides) -> ContentRequest:
    fields = {"dream_title": "Launch my startup", "category": "career_business", "emotion": "success"}
    fields.update(overrides)
    return ContentRequest(**fields)


def test_career_content_comes_from_career_tables():
    content = generator.generate(_request())
    assert content.action_steps
    assert set(content.action_steps) <= set(ACTION_STEPS[Category.CAREER_BUSINESS])
    assert content.quotes == list(QUOTES[Category.CAREER_BUSINESS]["success"][:3])


def test_every_list_is_populated_and_bounded():
    content = generator.generate(_request())
    for field in ("affirmations", "quotes", "action_steps", "milestones", "success_metrics", "visual_cues"):
        values = getattr(content, field)
        assert 1 <= len(values) <= 7


def test_unknown_category_uses_generic_tables():
    content = generator.generate(_request(dream_title="x", category="underwater basket weaving"))
    assert resolve_category("underwater basket weaving") == Category.PERSONAL_GROWTH
    assert set(content.action_steps) <= set(ACTION_STEPS[Category.PERSONAL_GROWTH])
    assert content.affirmations and content.quotes and content.milestones


def test_immediate_keeps_no_more_steps_than_long_term():
    immediate = generator.generate(_request(timeframe=TimeframeBucket.IMMEDIATE))
    long_term = generator.generate(_request(timeframe=TimeframeBucket.LONG_TERM))
    assert len(immediate.action_steps) <= len(long_term.action_steps)
    assert len(immediate.action_steps) == 3
    assert len(long_term.action_steps) == 7


@pytest.mark.parametrize("timeframe,expected", [
    (TimeframeBucket.IMMEDIATE, 1),
    (TimeframeBucket.SHORT_TERM, 2),
    (TimeframeBucket.MEDIUM_TERM, 3),
])
def test_milestones_truncated_by_timeframe(timeframe, expected):
    content = generator.generate(_request(timeframe=timeframe))
    assert content.milestones == list(MILESTONES[Category.CAREER_BUSINESS][:expected])


def test_affirmations_include_dream_title():
    content = generator.generate(_request())
    assert len(content.affirmations) == 6
    assert "I am manifesting launch my startup with ease" in content.affirmations
    assert "Launch my startup is already mine in divine timing" in content.affirmations


def test_business_title_substitution():
    content = generator.generate(_request(dream_title="Grow my business"))
    assert content.affirmations[0] == "I am a successful entrepreneur in everything I do"


def test_personal_values_replace_fourth_affirmation():
    content = generator.generate(_request(personal_values=["freedom", "family"]))
    assert content.affirmations[3] == "My dreams are aligned with my values of freedom, family"
    assert content.affirmations[:3] == list(AFFIRMATIONS[Category.CAREER_BUSINESS][:3])


def test_previous_success_leads_the_plan():
    content = generator.generate(_request(previous_successes=["shipped a side project"], timeframe=TimeframeBucket.SHORT_TERM))
    assert content.action_steps[0] == "Build on your past success: shipped a side project"
    assert len(content.action_steps) == 3


@pytest.mark.parametrize("emotion,theme", [
    ("ambition", "leadership"),
    ("excitement", "success"),
    ("wanderlust", "success"),
])
def test_quote_theme_mapping(emotion, theme):
    quotes = generator.quotes(Category.CAREER_BUSINESS, emotion)
    assert quotes == list(QUOTES[Category.CAREER_BUSINESS][theme][:3])


def test_extra_generators():
    request = _request()
    assert len(generator.generate_reminders(request)) == 4
    assert "I deserve launch my startup" in generator.generate_mantras(request)
    assert generator.generate_power_words("career_business") == list(POWER_WORDS[Category.CAREER_BUSINESS])
    assert generator.generate_power_words("nonsense") == list(POWER_WORDS[Category.PERSONAL_GROWTH])


def test_generation_is_deterministic():
    assert generator.generate(_request()) == generator.generate(_request())


def test_phrasing_hint_leaves_content_unchanged():
    plain = generator.generate(_request())
    hinted = generator.generate(_request(phrasing="neutral"))
    assert hinted == plain
