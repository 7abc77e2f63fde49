"""Layout templates and elements."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from dreamboard.models.vocab import ElementKind


class Typography(BaseModel):
    model_config = ConfigDict(frozen=True)

    primary: str
    secondary: str
    accent: str


class Spacing(BaseModel):
    model_config = ConfigDict(frozen=True)

    margin: float
    padding: float
    gap: float


class LayoutTemplate(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    description: str = ""
    canvas_width: float
    canvas_height: float
    background_color: str
    background_pattern: str | None = None
    # Free text, parsed leniently into TemplateStyle / LayoutStrategy
    style: str
    layout: str
    color_scheme: tuple[str, ...] = Field(..., min_length=3, max_length=5)
    typography: Typography
    spacing: Spacing
    max_elements: int = Field(..., ge=1)


class PartialElement(BaseModel):
    """Abstract element handed to the layout engine, before positioning."""

    id: str | None = None
    kind: ElementKind = ElementKind.IMAGE
    content: str | None = None
    image_url: str | None = None
    layout_weight: float | None = None
    visual_weight: float | None = None
    rotation: float = 0.0
    opacity: float = 1.0
    color: str | None = None
    font_size: float | None = None
    font_weight: str | None = None
    metadata: dict[str, Any] = Field(default_factory=dict)


class LayoutElement(BaseModel):
    """Positioned element. Frozen: style application returns a copy."""

    model_config = ConfigDict(frozen=True)

    id: str
    kind: ElementKind
    x: float
    y: float
    width: float
    height: float
    rotation: float = 0.0
    z_index: int = 0
    opacity: float = 1.0
    content: str | None = None
    image_url: str | None = None
    layout_weight: float = Field(default=0.5, ge=0.0, le=1.0)
    visual_weight: float = Field(default=0.5, ge=0.0, le=1.0)
    metadata: dict[str, Any] = Field(default_factory=dict)

    # Style fields
    color: str | None = None
    background_color: str | None = None
    font_family: str | None = None
    font_size: float | None = None
    font_weight: str | None = None
    line_height: float | None = None
    letter_spacing: str | None = None
    text_align: str | None = None
    text_transform: str | None = None
    text_shadow: str | None = None
    text_fill: str | None = None
    gradient: str | None = None
    filter: str | None = None
    box_shadow: str | None = None
    transform: str | None = None
    border_radius: float | None = None

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height
