"""Minimalist centred layout: lifted hero, satellites on a ring."""

from __future__ import annotations

import math

from dreamboard.layout.context import LayoutContext
from dreamboard.layout.registry import strategy
from dreamboard.models.vocab import LayoutStrategy


@strategy(name=LayoutStrategy.CENTERED, description="Hero above centre, others evenly spaced around it")
def centered(ctx: LayoutContext) -> None:
    cfg = ctx.config
    cx, cy = ctx.width / 2, ctx.height / 2
    radius = min(ctx.width, ctx.height) * cfg.centered_radius_frac
    satellites = ctx.count - 1

    for i, p in enumerate(ctx.placements):
        if i == 0:
            p.width = min(cfg.centered_hero_max_width, ctx.width * cfg.centered_hero_width_frac)
            p.height = min(cfg.centered_hero_max_height, ctx.height * cfg.centered_hero_height_frac)
            p.x = cx - p.width / 2
            p.y = cy - p.height / 2 - cfg.centered_hero_lift
            p.layout_weight, p.visual_weight = 1.0, 1.0
            continue

        angle = (i - 1) * (2 * math.pi / satellites)
        p.width = cfg.centered_satellite_width
        p.height = cfg.centered_satellite_height
        p.x = cx + math.cos(angle) * radius - p.width / 2
        p.y = cy + math.sin(angle) * radius - p.height / 2
        p.layout_weight, p.visual_weight = 0.6, 0.6
