"""Image search parameters and normalised candidates."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from dreamboard.models.vocab import Composition, Orientation


class ImageSearchParams(BaseModel):
    model_config = ConfigDict(frozen=True)

    query: str
    category: str = ""
    emotional_tone: str = ""
    color_preferences: tuple[str, ...] = ()
    style: str | None = None
    orientation: Orientation = Orientation.LANDSCAPE
    limit: int = Field(default=20, ge=1, le=80)
    exclude_ids: tuple[str, ...] = ()

    def cache_key(self) -> tuple:
        return (
            self.query,
            self.category,
            self.emotional_tone,
            self.color_preferences,
            self.style,
            self.orientation.value,
            self.limit,
            self.exclude_ids,
        )


class ImageCandidate(BaseModel):
    id: str
    source: str
    url: str
    thumbnail_url: str
    high_res_url: str | None = None
    alt: str = "Vision board image"
    photographer: str | None = None
    photographer_url: str | None = None
    width: int = 0
    height: int = 0
    composition: Composition = Composition.LANDSCAPE
    color_palette: list[str] = Field(default_factory=list)
    style: str = "dynamic"
    tags: list[str] = Field(default_factory=list)
    relevance_score: float = Field(default=0.5, ge=0.0, le=1.0)
    emotional_resonance: float = Field(default=0.6, ge=0.0, le=1.0)


class ImageEnhancement(BaseModel):
    brightness: int | None = None
    contrast: int | None = None
    saturation: int | None = None
    blur: int | None = None
    crop_focus: Literal["center", "face", "entropy"] | None = None


def composition_for(width: int, height: int) -> Composition:
    if width > height:
        return Composition.LANDSCAPE
    if width < height:
        return Composition.PORTRAIT
    return Composition.SQUARE
