"""Magazine-style asymmetric layout."""

from __future__ import annotations

import math

from dreamboard.layout.context import LayoutContext
from dreamboard.layout.registry import strategy
from dreamboard.models.vocab import LayoutStrategy


@strategy(
    name=LayoutStrategy.ASYMMETRIC,
    description="Hero block, complementary strip, dynamic grid in the lower band",
)
def asymmetric(ctx: LayoutContext) -> None:
    cfg = ctx.config
    margin, gap = ctx.margin, ctx.gap
    w, h = ctx.width, ctx.height

    rest = ctx.count - 2
    cols = rows = 1
    cell_w = cell_h = 0.0
    if rest > 0:
        cols = math.ceil(math.sqrt(rest))
        rows = math.ceil(rest / cols)
        avail_w = w - 2 * margin
        avail_h = h * cfg.lower_band_height_frac
        cell_w = (avail_w - gap * (cols - 1)) / cols
        cell_h = (avail_h - gap * (rows - 1)) / rows

    for i, p in enumerate(ctx.placements):
        if i == 0:
            p.x, p.y = margin, margin
            p.width = w * cfg.hero_width_frac
            p.height = h * cfg.hero_height_frac
            p.layout_weight, p.visual_weight = 1.0, 1.0
        elif i == 1:
            p.x = w * cfg.hero_width_frac + gap
            p.y = margin
            p.width = w * cfg.strip_width_frac - margin
            p.height = h * cfg.strip_height_frac
            p.layout_weight, p.visual_weight = 0.8, 0.7
        else:
            cell = i - 2
            col, row = cell % cols, cell // cols
            p.width, p.height = cell_w, cell_h
            p.x = margin + col * (cell_w + gap)
            p.y = h * cfg.lower_band_top_frac + row * (cell_h + gap)
            p.layout_weight = 0.6 - cell * 0.1
            p.visual_weight = 0.5 - cell * 0.05
