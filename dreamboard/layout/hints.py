"""Per-template-style visual hints applied after positioning."""

from __future__ import annotations

from typing import Callable

from dreamboard.layout.context import LayoutContext
from dreamboard.models.vocab import TemplateStyle


def _luxury(ctx: LayoutContext) -> None:
    for p in ctx.placements:
        p.style["border_radius"] = 8
        p.style["filter"] = "drop-shadow(0 4px 8px rgba(0,0,0,0.3))"
        if p.is_text:
            p.style["font_family"] = ctx.template.typography.primary
            p.style["text_shadow"] = "2px 2px 4px rgba(0,0,0,0.5)"


def _minimalist(ctx: LayoutContext) -> None:
    for p in ctx.placements:
        p.style["border_radius"] = 4
        p.style["filter"] = "drop-shadow(0 2px 4px rgba(0,0,0,0.1))"
        if p.is_text:
            p.style["font_family"] = ctx.template.typography.primary
            p.color = ctx.template.color_scheme[0]


def _cosmic(ctx: LayoutContext) -> None:
    for p in ctx.placements:
        p.style["border_radius"] = 12
        p.style["filter"] = "drop-shadow(0 0 10px rgba(74,144,226,0.4))"
        p.style["transform"] = f"rotate({p.rotation:g}deg)"
        if p.is_text:
            p.style["font_family"] = ctx.template.typography.accent
            p.style["gradient"] = "linear-gradient(45deg, #4A90E2, #9B59B6)"


def _pinterest(ctx: LayoutContext) -> None:
    for p in ctx.placements:
        p.style["border_radius"] = 16
        p.style["filter"] = "drop-shadow(0 3px 6px rgba(0,0,0,0.15))"
        if not p.is_text:
            scale = 1 + float(ctx.rng.random()) * 0.1
            p.style["transform"] = f"scale({scale:.3f})"


def _magazine(ctx: LayoutContext) -> None:
    headline_done = False
    for p in ctx.placements:
        p.style["border_radius"] = 6
        p.style["filter"] = "drop-shadow(0 2px 8px rgba(0,0,0,0.2))"
        if p.is_text and not headline_done:
            p.style["font_size"] = 36
            p.style["font_weight"] = "bold"
            p.style["font_family"] = ctx.template.typography.primary
            headline_done = True


def _organic(ctx: LayoutContext) -> None:
    for p in ctx.placements:
        p.style["border_radius"] = 20
        p.style["filter"] = "drop-shadow(0 4px 12px rgba(85,107,47,0.2))"
        if p.is_text:
            p.style["font_family"] = ctx.template.typography.secondary


STYLE_HINTS: dict[TemplateStyle, Callable[[LayoutContext], None]] = {
    TemplateStyle.LUXURY: _luxury,
    TemplateStyle.MINIMALIST: _minimalist,
    TemplateStyle.COSMIC: _cosmic,
    TemplateStyle.PINTEREST: _pinterest,
    TemplateStyle.MAGAZINE: _magazine,
    TemplateStyle.ORGANIC: _organic,
}


def apply_style_hints(ctx: LayoutContext) -> None:
    """Unknown template styles get no hints."""
    hint = STYLE_HINTS.get(ctx.style)
    if hint is not None:
        hint(ctx)
