"""Geometry of each built-in strategy, with overlap resolution off."""

import math

import pytest

from dreamboard.layout.config import LayoutOptions
from dreamboard.layout.engine import LayoutEngine, validate_layout
from dreamboard.layout.templates import get_template
from dreamboard.models.layout import PartialElement
from dreamboard.models.vocab import ElementKind
from dreamboard.utils.geometry import boxes_overlap
from tests.conftest import make_elements

engine = LayoutEngine()
RAW = LayoutOptions(resolve_overlaps=False, seed=3)


def _layout(template_id, elements):
    return engine.layout(get_template(template_id), elements, RAW)


def test_asymmetric_hero_and_strip():
    hero, strip = _layout("magazine_hero", make_elements(2))
    assert (hero.x, hero.y, hero.width, hero.height) == pytest.approx((40, 40, 720, 400))
    assert (strip.x, strip.y, strip.width, strip.height) == pytest.approx((735, 40, 380, 240))
    assert strip.layout_weight == pytest.approx(0.8)
    assert strip.visual_weight == pytest.approx(0.7)


def test_asymmetric_lower_band_grid():
    elements = _layout("magazine_hero", make_elements(4))
    third, fourth = elements[2], elements[3]
    assert (third.x, third.y) == pytest.approx((40, 440))
    assert (third.width, third.height) == pytest.approx((552.5, 320))
    assert fourth.x == pytest.approx(607.5)
    assert fourth.layout_weight == pytest.approx(0.5)


def test_golden_ratio_partition():
    phi = 1.618
    hero, second, band = _layout("luxury_elegance", make_elements(3))
    primary_w, primary_h = 1400 / phi, 1000 / phi
    assert hero.width == pytest.approx(primary_w - 100)
    assert hero.height == pytest.approx(primary_h - 100)
    assert second.x == pytest.approx(primary_w + 20)
    assert second.width == pytest.approx(1400 - primary_w - 70)
    assert second.layout_weight == pytest.approx(1 / phi)
    assert band.y == pytest.approx(primary_h + 20)
    assert band.width == pytest.approx(primary_w / phi)
    assert band.height == pytest.approx(1000 - primary_h - 40)


def test_golden_ratio_bands_spill_into_columns():
    template = get_template("luxury_elegance").model_copy(update={"max_elements": 12})
    elements = engine.layout(template, make_elements(12), RAW)
    bands = elements[2:]
    min_height = engine.config.golden_min_band_height

    assert len(bands) == 10
    assert all(b.height >= min_height for b in bands)
    assert len({b.x for b in bands}) > 1
    for band in bands:
        assert band.x + band.width <= 1400
        assert band.y + band.height <= 1000
    for i, a in enumerate(bands):
        for b in bands[i + 1:]:
            assert not boxes_overlap((a.x, a.y, a.width, a.height), (b.x, b.y, b.width, b.height))


def test_golden_ratio_bands_keep_min_height_with_wide_gaps():
    template = get_template("luxury_elegance").model_copy(update={"max_elements": 12})
    template = template.model_copy(update={"spacing": template.spacing.model_copy(update={"gap": 120})})
    elements = engine.layout(template, make_elements(12), LayoutOptions(seed=3))
    assert all(e.height >= engine.config.golden_min_band_height for e in elements[2:])
    assert validate_layout(elements, template)


def test_masonry_fills_shortest_column():
    elements = _layout("pinterest_grid", make_elements(5))
    assert {e.width for e in elements} == {231}
    assert [e.height for e in elements] == pytest.approx([150, 195, 120, 165, 135])
    assert [e.x for e in elements[:4]] == pytest.approx([20, 263, 506, 749])
    fifth = elements[4]
    assert (fifth.x, fifth.y) == pytest.approx((506, 152))


def test_masonry_text_tiles_are_shorter():
    text = PartialElement(id="t", kind=ElementKind.TEXT, content="hi", layout_weight=1.0)
    (tile,) = _layout("pinterest_grid", [text])
    assert tile.height == pytest.approx(90)


def test_centered_hero_and_ring():
    hero, right, left = _layout("minimalist_zen", make_elements(3))
    assert (hero.x, hero.y, hero.width, hero.height) == pytest.approx((300, 160, 400, 280))
    assert (right.x, right.y) == pytest.approx((600, 290))
    assert (left.x, left.y) == pytest.approx((250, 290))
    assert (right.width, right.height) == (150, 120)


def test_flowing_centre_and_satellites():
    elements = _layout("cosmic_energy", make_elements(5))
    hero = elements[0]
    assert (hero.x, hero.y, hero.width, hero.height) == pytest.approx((500, 350, 200, 200))
    for i, e in enumerate(elements[1:], start=1):
        base = 120 - i * 10
        assert base <= e.width <= base + 40
        assert base <= e.height <= base + 40
        assert -7.5 <= e.rotation <= 7.5


def test_flowing_sizes_never_below_floor():
    elements = _layout("cosmic_energy", make_elements(10))
    assert min(min(e.width, e.height) for e in elements) >= 20


def test_grid_hero_cell_and_variation():
    elements = _layout("organic_grid", make_elements(4))
    hero = elements[0]
    assert (hero.x, hero.y) == pytest.approx((36, 36))
    assert hero.width == pytest.approx(506 * 1.3)
    assert hero.visual_weight == 1.0
    assert hero.z_index == 100
    second = elements[1]
    assert second.x == pytest.approx(36 + 506 + 16)
    assert 506 * 0.8 <= second.width <= 506 * 1.2
    assert math.isclose(second.width / 506, second.height / 381)
