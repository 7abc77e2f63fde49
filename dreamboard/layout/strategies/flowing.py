"""Flowing layout: centre element plus a three-armed spiral with slight random tilt."""

from __future__ import annotations

import math

from dreamboard.layout.context import LayoutContext
from dreamboard.layout.registry import strategy
from dreamboard.models.vocab import LayoutStrategy


@strategy(name=LayoutStrategy.FLOWING, description="Centred hero, spiral of jittered satellites")
def flowing(ctx: LayoutContext) -> None:
    cfg = ctx.config
    cx, cy = ctx.width / 2, ctx.height / 2
    max_radius = min(ctx.width, ctx.height) / 2 - ctx.margin
    n = ctx.count

    for i, p in enumerate(ctx.placements):
        if i == 0:
            p.width = p.height = cfg.flowing_center_size
            p.x = cx - p.width / 2
            p.y = cy - p.height / 2
            p.layout_weight, p.visual_weight = 1.0, 1.0
            continue

        angle = (i - 1) * (2 * math.pi / cfg.flowing_arms)
        radius = max_radius / n * (i + 1)

        base = max(cfg.flowing_min_size, cfg.flowing_base_size - i * cfg.flowing_size_step)
        p.width = base + float(ctx.rng.random()) * cfg.flowing_size_jitter
        p.height = base + float(ctx.rng.random()) * cfg.flowing_size_jitter
        p.x = cx + math.cos(angle) * radius - p.width / 2
        p.y = cy + math.sin(angle) * radius - p.height / 2
        p.rotation = (float(ctx.rng.random()) - 0.5) * cfg.flowing_max_rotation

        p.layout_weight = 1.0 - i * 0.15
        p.visual_weight = 0.8 - i * 0.1
