"""Axis-aligned box helpers for layout post-processing."""

from __future__ import annotations

from shapely.geometry import box


def boxes_overlap(
    a: tuple[float, float, float, float],
    b: tuple[float, float, float, float],
) -> bool:
    """True if two (x, y, w, h) boxes intersect. Touching edges count."""
    ax, ay, aw, ah = a
    bx, by, bw, bh = b
    return box(ax, ay, ax + aw, ay + ah).intersects(box(bx, by, bx + bw, by + bh))


def fit_into(
    x: float,
    y: float,
    width: float,
    height: float,
    canvas_width: float,
    canvas_height: float,
) -> tuple[float, float, float, float]:
    """Move (and if needed shrink) a box so it lies inside the canvas."""
    width = min(max(width, 0.0), canvas_width)
    height = min(max(height, 0.0), canvas_height)
    x = min(max(x, 0.0), canvas_width - width)
    y = min(max(y, 0.0), canvas_height - height)
    return x, y, width, height


def inside(
    x: float,
    y: float,
    width: float,
    height: float,
    canvas_width: float,
    canvas_height: float,
    eps: float = 1e-6,
) -> bool:
    return (
        x >= -eps
        and y >= -eps
        and x + width <= canvas_width + eps
        and y + height <= canvas_height + eps
    )
