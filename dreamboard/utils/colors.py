"""Hex colour helpers."""

from __future__ import annotations

import re

import numpy as np

_HEX_RE = re.compile(r"^#?([0-9a-f]{2})([0-9a-f]{2})([0-9a-f]{2})$", re.IGNORECASE)

# Distance returned when either colour fails to parse; above every threshold in use
UNPARSEABLE_DISTANCE = 100.0


def hex_to_rgb(value: str) -> tuple[int, int, int] | None:
    match = _HEX_RE.match(value.strip()) if value else None
    if not match:
        return None
    return tuple(int(part, 16) for part in match.groups())  # type: ignore[return-value]


def color_distance(a: str, b: str) -> float:
    """Euclidean distance in RGB space."""
    rgb_a = hex_to_rgb(a)
    rgb_b = hex_to_rgb(b)
    if rgb_a is None or rgb_b is None:
        return UNPARSEABLE_DISTANCE
    return float(np.linalg.norm(np.subtract(rgb_a, rgb_b)))


def any_within(palette: list[str], targets: list[str] | tuple[str, ...], threshold: float) -> bool:
    return any(color_distance(c, t) < threshold for c in palette for t in targets)


def with_alpha(value: str, alpha: float) -> str:
    """Append an alpha byte (``round(alpha * 255)``) to a 6-digit hex colour."""
    rgb = hex_to_rgb(value)
    if rgb is None:
        return value
    byte = int(round(min(max(alpha, 0.0), 1.0) * 255))
    return "#{:02X}{:02X}{:02X}{:02X}".format(*rgb, byte)
