"""LayoutContext: the mutable state a strategy positions in place.

Per-element geometry -> Placement
Canvas, template and randomness -> LayoutContext
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

import numpy as np

from dreamboard.layout.config import DEFAULT_LAYOUT_CONFIG, LayoutConfig, LayoutOptions
from dreamboard.models.layout import LayoutElement, LayoutTemplate, PartialElement
from dreamboard.models.vocab import ElementKind, TemplateStyle, parse

TEXT_KINDS = frozenset({ElementKind.TEXT, ElementKind.QUOTE})


@dataclass
class Placement:
    """One element being positioned."""

    id: str
    kind: ElementKind
    x: float = 0.0
    y: float = 0.0
    width: float = 200.0
    height: float = 200.0
    rotation: float = 0.0
    opacity: float = 1.0
    layout_weight: float = 1.0
    visual_weight: float = 0.8
    content: str | None = None
    image_url: str | None = None
    color: str | None = None
    # Rendering hints merged into the final element (border_radius, filter, font_*, ...)
    style: dict[str, Any] = field(default_factory=dict)
    metadata: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_partial(
        cls,
        partial: PartialElement,
        index: int,
        config: LayoutConfig = DEFAULT_LAYOUT_CONFIG,
    ) -> Placement:
        style: dict[str, Any] = {}
        if partial.font_size is not None:
            style["font_size"] = partial.font_size
        if partial.font_weight is not None:
            style["font_weight"] = partial.font_weight
        layout_weight = partial.layout_weight
        if layout_weight is None:
            layout_weight = 1.0 - index * config.default_layout_weight_step
        visual_weight = partial.visual_weight
        if visual_weight is None:
            visual_weight = config.default_visual_weight
        return cls(
            id=partial.id or f"element_{index}",
            kind=partial.kind,
            width=config.default_size,
            height=config.default_size,
            rotation=partial.rotation,
            opacity=partial.opacity,
            layout_weight=layout_weight,
            visual_weight=visual_weight,
            content=partial.content,
            image_url=partial.image_url,
            color=partial.color,
            style=style,
            metadata=dict(partial.metadata),
        )

    @property
    def is_text(self) -> bool:
        return self.kind in TEXT_KINDS

    @property
    def box(self) -> tuple[float, float, float, float]:
        return (self.x, self.y, self.width, self.height)

    def to_element(self) -> LayoutElement:
        return LayoutElement(
            id=self.id,
            kind=self.kind,
            x=self.x,
            y=self.y,
            width=self.width,
            height=self.height,
            rotation=self.rotation,
            z_index=int(np.floor(self.visual_weight * 100)),
            opacity=self.opacity,
            content=self.content,
            image_url=self.image_url,
            layout_weight=self.layout_weight,
            visual_weight=self.visual_weight,
            color=self.color,
            metadata=self.metadata,
            **self.style,
        )


@dataclass
class LayoutContext:
    """Shared state for one layout call."""

    template: LayoutTemplate
    placements: list[Placement]
    rng: np.random.Generator
    options: LayoutOptions = field(default_factory=LayoutOptions)
    config: LayoutConfig = DEFAULT_LAYOUT_CONFIG
    # Name of the strategy that ran, recorded by the engine
    strategy_name: str = ""

    @property
    def width(self) -> float:
        return self.template.canvas_width

    @property
    def height(self) -> float:
        return self.template.canvas_height

    @property
    def margin(self) -> float:
        return self.template.spacing.margin

    @property
    def gap(self) -> float:
        return self.template.spacing.gap

    @property
    def count(self) -> int:
        return len(self.placements)

    @property
    def style(self) -> TemplateStyle:
        return parse(TemplateStyle, self.template.style, TemplateStyle.UNKNOWN)
