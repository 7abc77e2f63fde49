"""Tests for the style resolver and design lookups."""

import pytest

from dreamboard.models.layout import LayoutElement
from dreamboard.models.vocab import ElementKind, Emotion
from dreamboard.style.resolver import (
    apply_style,
    custom_gradient,
    drop_shadow,
    effects_for,
    icons_for_category,
    palette_for,
    pattern_for_emotion,
    responsive_typography,
    search_icons,
    style_for,
    text_shadow,
    typography_for,
)


def _element(kind=ElementKind.TEXT, **fields) -> LayoutElement:
    return LayoutElement(id="e", kind=kind, x=0, y=0, width=100, height=50, **fields)


def test_ambition_text_style():
    style = style_for(_element(), "ambition", intensity=0.5)
    assert style.color == "#D4AF37"
    assert style.background_color == "#0F0F0F80"
    assert style.font_size == pytest.approx(24)
    assert style.font_weight == "700"
    assert style.text_fill == "gradient"
    assert style.gradient == "linear-gradient(135deg, #D4AF37, #FFD700)"
    assert style.transform == "perspective(1000px) rotateX(5deg)"


def test_image_gets_no_typography():
    style = style_for(_element(ElementKind.IMAGE), Emotion.PEACE)
    assert style.font_family is None
    assert style.font_size is None
    assert style.filter == effects_for("peace")[0].filter


def test_quote_counts_as_text():
    style = style_for(_element(ElementKind.QUOTE), "love", intensity=1.0)
    assert style.font_family == typography_for("love")[0].font_family


def test_unknown_emotion_uses_defaults():
    style = style_for(_element(), "melancholy", intensity=1.0)
    assert style.color == "#2ECC71"
    assert style.background_color == "#FFFFFFFF"
    assert style.font_size == pytest.approx(42)
    assert style.text_transform == "uppercase"
    assert style.text_fill is None


@pytest.mark.parametrize("intensity,expected", [(-1.0, 0.0), (2.0, 42.0), (0.25, 10.5)])
def test_intensity_is_clamped(intensity, expected):
    assert style_for(_element(), "determination", intensity).font_size == pytest.approx(expected)


def test_enum_and_string_emotions_agree():
    assert palette_for(Emotion.AMBITION) == palette_for(" Ambition ")
    assert palette_for("adventure").id == "ocean_dreams"
    assert [t.id for t in typography_for("luxury")] == ["luxury_header", "luxury_subheader"]


def test_apply_style_fills_unset_fields_only():
    element = _element(color="#123456", font_size=36)
    styled = apply_style(element, style_for(element, "ambition", 1.0))
    assert styled.color == "#123456"
    assert styled.font_size == 36
    assert styled.font_family == '"Playfair Display", serif'
    assert element.font_family is None


def test_apply_style_override():
    element = _element(color="#123456")
    styled = apply_style(element, style_for(element, "ambition", 1.0), override=True)
    assert styled.color == "#D4AF37"
    assert (styled.x, styled.width) == (element.x, element.width)


def test_patterns():
    assert pattern_for_emotion("peace").id == "zen_waves"
    assert pattern_for_emotion(Emotion.AMBITION).id == "luxury_marble"
    assert pattern_for_emotion("excitement") is None


def test_icon_lookups():
    assert [i.id for i in icons_for_category("success")] == ["star_success", "crown_leadership"]
    assert icons_for_category("none") == []
    assert [i.id for i in search_icons("LEAD")] == ["crown_leadership"]
    assert [i.id for i in search_icons("peace")] == ["lotus_growth"]


def test_css_helpers():
    assert custom_gradient(["#FFF", "#000"]) == "linear-gradient(45deg, #FFF, #000)"
    assert custom_gradient(["#FFF", "#000"], direction=90.5) == "linear-gradient(90.5deg, #FFF, #000)"
    assert text_shadow("#000") == "2px 2px 4px #000"
    assert text_shadow("#000", "strong") == "3px 3px 6px #000"
    assert drop_shadow("red", "large") == "drop-shadow(0 8px 16px red)"


@pytest.mark.parametrize("device,expected", [("mobile", 12.8), ("tablet", 14.4), ("desktop", 16.0)])
def test_responsive_typography_scales_by_device(device, expected):
    typography = responsive_typography(16, device)
    assert typography.font_size == pytest.approx(expected)
    assert typography.font_family == '"Inter", sans-serif'
    assert typography.line_height == 1.5


def test_responsive_typography_defaults_to_desktop():
    assert responsive_typography(20).font_size == pytest.approx(20)


def test_responsive_typography_rejects_unknown_device():
    with pytest.raises(ValueError):
        responsive_typography(16, "watch")
