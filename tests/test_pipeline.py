"""End-to-end pipeline tests. Unless a test injects providers, images come from the fallback set."""

from datetime import date

import pytest

from dreamboard.images.agent import FALLBACK_IMAGES, ImageDiscoveryAgent
from dreamboard.layout.templates import select_template
from dreamboard.models.dream import DreamInput
from dreamboard.models.vocab import ElementKind
from dreamboard.pipeline import QUERIES_PER_BOARD, VisionBoardGenerator, generate_vision_board
from dreamboard.style.resolver import palette_for, style_for, typography_for
from tests.conftest import CAREER_DREAM, VAGUE_DREAM, FakeProvider, make_image


@pytest.mark.asyncio
async def test_career_board_on_magazine_template():
    board = await VisionBoardGenerator().generate(CAREER_DREAM, "user-1", "magazine_hero", seed=1)

    assert board.template_id == "magazine_hero"
    assert board.layout_strategy == "asymmetric"
    assert board.layout_valid
    assert board.images == list(FALLBACK_IMAGES)
    assert [e.id for e in board.elements] == [
        "hero_image",
        "main_title",
        "affirmation_0",
        "affirmation_1",
        "affirmation_2",
        "quote_0",
        "power_word_0",
        "power_word_1",
    ]
    hero = board.elements[0]
    assert hero.image_url == FALLBACK_IMAGES[0].url
    assert hero.metadata["source"] == "unsplash"


@pytest.mark.asyncio
async def test_elements_are_styled():
    board = await VisionBoardGenerator().generate(CAREER_DREAM, template_id="magazine_hero", seed=1)
    by_id = {e.id: e for e in board.elements}

    emotion = board.analysis.top_emotion
    intensity = 0.8 + 0.2 * board.analysis.emotional_tone.intensity
    typography = typography_for(emotion)[0]

    title = by_id["main_title"]
    assert title.content == "LAUNCH MY STARTUP"
    assert title.font_size == pytest.approx(typography.font_size * intensity)
    assert title.font_family == typography.font_family
    assert title.color == palette_for(emotion).primary
    for element in board.elements:
        assert element.filter is not None
        assert element.background_color is not None
        assert element.border_radius == 6


@pytest.mark.asyncio
async def test_emotion_style_replaces_layout_text_style():
    board = await VisionBoardGenerator().generate(CAREER_DREAM, template_id="pinterest_grid", seed=3)
    emotion = board.analysis.top_emotion
    intensity = 0.8 + 0.2 * board.analysis.emotional_tone.intensity

    text = [e for e in board.elements if e.kind in (ElementKind.TEXT, ElementKind.QUOTE)]
    assert text
    for element in text:
        expected = style_for(element, emotion, intensity)
        assert element.font_size == pytest.approx(expected.font_size)
        assert element.color == expected.color
        assert element.background_color == expected.background_color
    # Headline, affirmations and power words no longer keep their layout sizes
    assert len({e.font_size for e in text}) == 1


@pytest.mark.asyncio
async def test_template_selected_from_analysis():
    board = await VisionBoardGenerator().generate(CAREER_DREAM)
    assert board.template_id == select_template(board.analysis).id


@pytest.mark.asyncio
async def test_unknown_template_falls_back_to_selection():
    board = await VisionBoardGenerator().generate(CAREER_DREAM, template_id="no_such_template")
    assert board.template_id == select_template(board.analysis).id
    assert board.layout_valid


@pytest.mark.asyncio
async def test_seeded_boards_are_identical():
    first = await VisionBoardGenerator().generate(CAREER_DREAM, "u", "cosmic_energy", seed=9)
    second = await VisionBoardGenerator().generate(CAREER_DREAM, "u", "cosmic_energy", seed=9)
    assert first.elements == second.elements
    assert first.content == second.content


@pytest.mark.asyncio
async def test_deadline_shortens_the_plan():
    with_deadline = CAREER_DREAM.model_copy(update={"deadline": date(2027, 6, 1)})
    short = await VisionBoardGenerator().generate(with_deadline, template_id="magazine_hero")
    long = await VisionBoardGenerator().generate(CAREER_DREAM, template_id="magazine_hero")
    assert len(short.content.action_steps) == 5
    assert len(long.content.action_steps) == 7


@pytest.mark.asyncio
async def test_vague_dream_still_produces_a_board():
    board = await VisionBoardGenerator().generate(VAGUE_DREAM)
    assert board.elements
    assert board.content.affirmations
    assert board.layout_valid


@pytest.mark.asyncio
async def test_generator_seed_used_when_call_has_none():
    first = await VisionBoardGenerator(layout_seed=4).generate(CAREER_DREAM, template_id="pinterest_grid")
    second = await VisionBoardGenerator(layout_seed=4).generate(CAREER_DREAM, template_id="pinterest_grid")
    assert [e.transform for e in first.elements] == [e.transform for e in second.elements]


def test_sync_entry_point():
    dream = DreamInput(title="Run a marathon", description="Train for my first marathon and get fit")
    board = generate_vision_board(dream, "runner", generator=VisionBoardGenerator())
    assert board.user_id == "runner"
    assert board.dream_title == "Run a marathon"
    assert board.elements


@pytest.mark.asyncio
async def test_board_queries_do_not_throttle_each_other():
    providers = [
        FakeProvider(name, [make_image(f"{name}_{i}", source=name) for i in range(2)], min_interval=0.5)
        for name in ("unsplash", "pexels", "pixabay")
    ]
    generator = VisionBoardGenerator(images=ImageDiscoveryAgent(providers=providers))

    board = await generator.generate(CAREER_DREAM, template_id="magazine_hero", seed=1)

    queries = board.analysis.suggestions.image_queries[:QUERIES_PER_BOARD]
    assert len(queries) > 1
    assert [p.calls for p in providers] == [len(queries)] * 3
    ids = [image.id for image in board.images]
    assert "fallback_1" not in ids
    assert {image.source for image in board.images} <= {"unsplash", "pexels", "pixabay"}
    assert board.elements[0].id == "hero_image"
    assert board.elements[0].image_url == board.images[0].url
