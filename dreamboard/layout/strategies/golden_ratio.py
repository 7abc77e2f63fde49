"""Golden-ratio partition: hero in the primary rectangle, one element beside it, the rest in bands below."""

from __future__ import annotations

import math

from dreamboard.layout.context import LayoutContext
from dreamboard.layout.registry import strategy
from dreamboard.models.vocab import LayoutStrategy


@strategy(
    name=LayoutStrategy.GOLDEN_RATIO,
    description="Primary/secondary golden rectangles with stacked bands for the rest",
)
def golden_ratio(ctx: LayoutContext) -> None:
    phi = ctx.config.golden_ratio
    min_band_h = ctx.config.golden_min_band_height
    margin, gap = ctx.margin, ctx.gap

    primary_w = ctx.width / phi
    primary_h = ctx.height / phi
    secondary_w = ctx.width - primary_w
    secondary_h = ctx.height - primary_h

    # Bands stack under the primary rectangle; once they would drop below
    # min_band_h they spill into further columns across the canvas width.
    rest = ctx.count - 2
    band_w = primary_w / phi
    band_h = 0.0
    rows = 1
    if rest > 0:
        remaining_h = ctx.height - primary_h - gap
        max_rows = max(1, int(remaining_h // (min_band_h + gap)))
        columns = math.ceil(rest / max_rows)
        rows = math.ceil(rest / columns)
        band_h = max(min_band_h, (remaining_h - gap * rows) / rows)
        if columns > 1:
            band_w = min(band_w, (ctx.width - 2 * margin - gap * (columns - 1)) / columns)

    for i, p in enumerate(ctx.placements):
        if i == 0:
            p.x, p.y = margin, margin
            p.width = primary_w - 2 * margin
            p.height = primary_h - 2 * margin
            p.layout_weight, p.visual_weight = 1.0, 1.0
        elif i == 1:
            p.x, p.y = primary_w + gap, margin
            p.width = secondary_w - gap - margin
            p.height = secondary_h - margin
            p.layout_weight, p.visual_weight = 1 / phi, 0.8
        else:
            band = i - 2
            column, row = divmod(band, rows)
            p.x = margin + column * (band_w + gap)
            p.y = primary_h + gap + row * (band_h + gap)
            p.width = band_w
            p.height = band_h
            p.layout_weight = 0.4 - band * 0.1
            p.visual_weight = 0.6 - band * 0.1
