"""Grid with an enlarged first cell and randomised size variation elsewhere."""

from __future__ import annotations

import math

from dreamboard.layout.context import LayoutContext
from dreamboard.layout.registry import strategy
from dreamboard.models.vocab import LayoutStrategy


@strategy(name=LayoutStrategy.GRID, description="n x n grid, 1.3x hero, 0.8-1.2x variation")
def grid(ctx: LayoutContext) -> None:
    cfg = ctx.config
    margin, gap = ctx.margin, ctx.gap
    cols = math.ceil(math.sqrt(ctx.count))
    rows = math.ceil(ctx.count / cols)
    cell_w = (ctx.width - 2 * margin - gap * (cols - 1)) / cols
    cell_h = (ctx.height - 2 * margin - gap * (rows - 1)) / rows

    for i, p in enumerate(ctx.placements):
        col, row = i % cols, i // cols
        if i == 0:
            variation = cfg.grid_hero_scale
        else:
            variation = cfg.grid_min_variation + float(ctx.rng.random()) * cfg.grid_variation_range
        p.width = cell_w * variation
        p.height = cell_h * variation
        p.x = margin + col * (cell_w + gap)
        p.y = margin + row * (cell_h + gap)
        p.layout_weight = 1.0 - i * 0.1
        p.visual_weight = variation
