"""Masonry packing: fixed-width columns, each element dropped into the shortest one."""

from __future__ import annotations

import numpy as np

from dreamboard.layout.context import LayoutContext, Placement
from dreamboard.layout.registry import strategy
from dreamboard.models.vocab import LayoutStrategy


def masonry_height(ctx: LayoutContext, p: Placement, index: int) -> float:
    cfg = ctx.config
    multiplier = cfg.masonry_multipliers[index % len(cfg.masonry_multipliers)]
    if p.is_text:
        return max(cfg.masonry_text_min_height, cfg.masonry_base_height * cfg.masonry_text_factor * multiplier)
    return cfg.masonry_base_height * multiplier


@strategy(name=LayoutStrategy.MASONRY, description="Shortest-column packing with a height rhythm")
def masonry(ctx: LayoutContext) -> None:
    margin, gap = ctx.margin, ctx.gap
    columns = max(1, int(ctx.width // ctx.config.masonry_min_column_width))
    column_w = (ctx.width - 2 * margin - gap * (columns - 1)) / columns
    heights = np.full(columns, margin, dtype=float)

    for i, p in enumerate(ctx.placements):
        # argmin returns the leftmost column on ties
        col = int(np.argmin(heights))
        p.width = column_w
        p.height = masonry_height(ctx, p, i)
        p.x = margin + col * (column_w + gap)
        p.y = float(heights[col])
        heights[col] += p.height + gap

        p.layout_weight = 1.0 - i * 0.1
        # Taller tiles read heavier
        p.visual_weight = p.height / column_w
