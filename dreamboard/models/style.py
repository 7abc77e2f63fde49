"""Style resolver output and design-table records."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class TypographyStyle(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    font_family: str
    font_size: float
    font_weight: str
    line_height: float
    letter_spacing: str
    font_style: str | None = None
    text_transform: str | None = None
    text_shadow: str | None = None
    # Set => render text with this gradient instead of a flat colour
    gradient: str | None = None


class ColorPalette(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    primary: str
    secondary: str
    accent: str
    background: str
    text: str
    muted: str
    gradients: tuple[str, ...] = ()


class VisualEffect(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    filter: str
    transform: str | None = None
    animation: str | None = None
    background_effect: str | None = None


class IconSpec(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    category: str
    svg: str
    tags: tuple[str, ...] = ()


class BackgroundPattern(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    type: str
    css: str
    preview: str = ""


class StyleFields(BaseModel):
    """Concrete style values for one element."""

    color: str | None = None
    background_color: str | None = None
    opacity: float = Field(default=1.0, ge=0.0, le=1.0)
    font_family: str | None = None
    font_size: float | None = None
    font_weight: str | None = None
    line_height: float | None = None
    letter_spacing: str | None = None
    text_transform: str | None = None
    text_shadow: str | None = None
    # "gradient" asks the renderer to paint text with ``gradient`` instead of ``color``
    text_fill: str | None = None
    gradient: str | None = None
    filter: str | None = None
    box_shadow: str | None = None
    transform: str | None = None
