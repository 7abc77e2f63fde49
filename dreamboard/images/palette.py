"""Colour psychology and image style tables."""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType

from dreamboard.analysis.lexicon import EMOTIONS
from dreamboard.models.vocab import Emotion, parse

COLOR_PSYCHOLOGY: MappingProxyType = MappingProxyType({
    "success": ("#FFD700", "#228B22", "#4169E1"),
    "love": ("#FF69B4", "#DC143C", "#FFB6C1"),
    "peace": ("#87CEEB", "#98FB98", "#F0E68C"),
    "energy": ("#FF4500", "#FF6347", "#FFA500"),
    "growth": ("#32CD32", "#00FF7F", "#ADFF2F"),
    "luxury": ("#800080", "#B8860B", "#2F4F4F"),
    "adventure": ("#FF8C00", "#20B2AA", "#32CD32"),
    "wisdom": ("#4B0082", "#191970", "#483D8B"),
})


@dataclass(frozen=True)
class ImageStyle:
    keywords: tuple[str, ...]
    composition: str
    lighting: str


IMAGE_STYLES: MappingProxyType = MappingProxyType({
    "dynamic": ImageStyle(
        keywords=("action", "movement", "energy", "vibrant", "bold"),
        composition="diagonal lines, dynamic angles",
        lighting="dramatic, high contrast",
    ),
    "serene": ImageStyle(
        keywords=("calm", "peaceful", "minimalist", "soft", "gentle"),
        composition="symmetrical, balanced",
        lighting="soft, natural, golden hour",
    ),
    "luxurious": ImageStyle(
        keywords=("elegant", "premium", "sophisticated", "rich", "opulent"),
        composition="clean lines, luxury materials",
        lighting="professional, polished",
    ),
    "warm": ImageStyle(
        keywords=("cozy", "intimate", "friendly", "welcoming", "comfortable"),
        composition="close-up, personal",
        lighting="warm tones, soft shadows",
    ),
    "expansive": ImageStyle(
        keywords=("vast", "open", "freedom", "limitless", "horizon"),
        composition="wide shots, panoramic",
        lighting="natural, outdoor",
    ),
    "strong": ImageStyle(
        keywords=("powerful", "determined", "focused", "intense", "resilient"),
        composition="strong focal point, bold contrast",
        lighting="dramatic, directional",
    ),
})


def emotion_colors(label: str) -> tuple[str, ...]:
    """Canonical colours for an emotion or mood label; empty if unknown.

    Analyzer emotions use the analyzer's palette so both components agree;
    other mood labels (success, energy, ...) use the colour psychology table.
    """
    emotion = parse(Emotion, label)
    if emotion is not None:
        return EMOTIONS[emotion].colors
    return COLOR_PSYCHOLOGY.get(label.strip().lower(), ()) if label else ()
