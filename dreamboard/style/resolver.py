"""Style resolver: emotion + intensity -> concrete style fields for an element."""

from __future__ import annotations

import logging
from typing import Literal

from dreamboard.layout.context import TEXT_KINDS
from dreamboard.models.layout import LayoutElement
from dreamboard.models.style import BackgroundPattern, ColorPalette, IconSpec, StyleFields, TypographyStyle, VisualEffect
from dreamboard.style.tables import (
    DEFAULT_EFFECT,
    DEFAULT_PALETTE,
    DEFAULT_TYPOGRAPHY,
    EFFECTS,
    EMOTION_EFFECTS,
    EMOTION_PALETTES,
    EMOTION_PATTERNS,
    EMOTION_TYPOGRAPHY,
    ICONS,
    PALETTES,
    PATTERNS,
    TYPOGRAPHY,
)
from dreamboard.utils.colors import with_alpha

logger = logging.getLogger(__name__)

_SHADOW_OFFSETS = {
    "subtle": "1px 1px 2px",
    "moderate": "2px 2px 4px",
    "strong": "3px 3px 6px",
}

_DROP_SHADOW_OFFSETS = {
    "small": "0 2px 4px",
    "medium": "0 4px 8px",
    "large": "0 8px 16px",
}

_DEVICE_SCALE = {
    "mobile": 0.8,
    "tablet": 0.9,
    "desktop": 1.0,
}


def _key(emotion: object) -> str:
    value = getattr(emotion, "value", emotion)
    return str(value or "").strip().lower()


def typography_for(emotion: object) -> list[TypographyStyle]:
    ids = EMOTION_TYPOGRAPHY.get(_key(emotion), (DEFAULT_TYPOGRAPHY,))
    return [TYPOGRAPHY[i] for i in ids]


def palette_for(emotion: object) -> ColorPalette:
    return PALETTES[EMOTION_PALETTES.get(_key(emotion), DEFAULT_PALETTE)]


def effects_for(emotion: object) -> list[VisualEffect]:
    ids = EMOTION_EFFECTS.get(_key(emotion), (DEFAULT_EFFECT,))
    return [EFFECTS[i] for i in ids]


def pattern_for_emotion(emotion: object) -> BackgroundPattern | None:
    pattern_id = EMOTION_PATTERNS.get(_key(emotion))
    return PATTERNS[pattern_id] if pattern_id else None


def icons_for_category(category: str) -> list[IconSpec]:
    return [icon for icon in ICONS if icon.category == category]


def search_icons(query: str) -> list[IconSpec]:
    """Case-insensitive substring match on icon name and tags."""
    needle = query.lower()
    return [
        icon
        for icon in ICONS
        if needle in icon.name.lower() or any(needle in tag.lower() for tag in icon.tags)
    ]


def custom_gradient(colors: list[str], direction: float = 45) -> str:
    return f"linear-gradient({direction:g}deg, {', '.join(colors)})"


def text_shadow(color: str, intensity: Literal["subtle", "moderate", "strong"] = "moderate") -> str:
    return f"{_SHADOW_OFFSETS[intensity]} {color}"


def drop_shadow(color: str, size: Literal["small", "medium", "large"] = "medium") -> str:
    return f"drop-shadow({_DROP_SHADOW_OFFSETS[size]} {color})"


def responsive_typography(
    base_size: float,
    device: Literal["mobile", "tablet", "desktop"] = "desktop",
) -> TypographyStyle:
    """Plain body typography with ``base_size`` scaled for the device."""
    if device not in _DEVICE_SCALE:
        raise ValueError(f"Unknown device {device!r}; expected one of {sorted(_DEVICE_SCALE)}")
    return TypographyStyle(
        id=f"responsive_{device}",
        font_family='"Inter", sans-serif',
        font_size=base_size * _DEVICE_SCALE[device],
        font_weight="400",
        line_height=1.5,
        letter_spacing="0.01em",
    )


def style_for(element: LayoutElement, emotion: object, intensity: float = 0.7) -> StyleFields:
    """Resolve the emotion's bundles into concrete values for one element.

    ``intensity`` is clamped to [0, 1]. It scales the background alpha for
    every element and the font size for text elements.
    """
    intensity = min(max(intensity, 0.0), 1.0)
    palette = palette_for(emotion)
    effect = effects_for(emotion)[0]

    fields: dict[str, object] = {
        "color": palette.primary,
        "background_color": with_alpha(palette.background, intensity),
        "opacity": element.opacity,
        "filter": effect.filter,
        "transform": effect.transform,
    }

    if element.kind in TEXT_KINDS:
        typography = typography_for(emotion)[0]
        fields.update(
            font_family=typography.font_family,
            font_size=typography.font_size * intensity,
            font_weight=typography.font_weight,
            line_height=typography.line_height,
            letter_spacing=typography.letter_spacing,
            text_transform=typography.text_transform,
            text_shadow=typography.text_shadow,
        )
        if typography.gradient:
            fields.update(text_fill="gradient", gradient=typography.gradient)

    return StyleFields(**fields)


def apply_style(element: LayoutElement, style: StyleFields, override: bool = False) -> LayoutElement:
    """Return a copy of ``element`` with the style merged in.

    By default only fields the element leaves unset are filled, so values the
    layout already chose (harmony colours, headline sizes) survive. With
    ``override`` every style value wins.
    """
    updates = {}
    for name, value in style.model_dump(exclude_none=True).items():
        if override or getattr(element, name) is None:
            updates[name] = value
    return element.model_copy(update=updates)
