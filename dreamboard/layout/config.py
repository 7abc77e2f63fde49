"""Layout configuration: per-call options and geometry constants."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class LayoutOptions:
    """Per-call switches for the layout engine."""

    # Explicit id order; ids not listed keep their relative order after the listed ones
    priority_order: list[str] | None = None
    color_harmony: bool = False
    resolve_overlaps: bool = True
    symmetric_balance: bool = False
    # None => fresh entropy on every call
    seed: int | None = None


@dataclass(frozen=True)
class LayoutConfig:
    """Geometry constants shared by the strategies."""

    golden_ratio: float = 1.618

    # Defaults for an element before a strategy positions it
    default_size: float = 200.0
    default_visual_weight: float = 0.8
    default_layout_weight_step: float = 0.1
    # Sort key for elements without a layout weight
    unweighted_priority: float = 0.5

    # Masonry
    masonry_min_column_width: float = 250.0
    masonry_base_height: float = 150.0
    masonry_text_factor: float = 0.6
    masonry_text_min_height: float = 80.0
    masonry_multipliers: tuple[float, ...] = (1.0, 1.3, 0.8, 1.1, 0.9, 1.2)

    # Asymmetric
    hero_width_frac: float = 0.6
    hero_height_frac: float = 0.5
    strip_width_frac: float = 0.35
    strip_height_frac: float = 0.3
    lower_band_top_frac: float = 0.55
    lower_band_height_frac: float = 0.4

    # Flowing
    flowing_center_size: float = 200.0
    flowing_base_size: float = 120.0
    flowing_size_step: float = 10.0
    flowing_size_jitter: float = 40.0
    flowing_min_size: float = 20.0
    flowing_max_rotation: float = 15.0  # degrees, full range centred on 0
    flowing_arms: int = 3

    # Centered
    centered_hero_max_width: float = 400.0
    centered_hero_max_height: float = 300.0
    centered_hero_width_frac: float = 0.6
    centered_hero_height_frac: float = 0.4
    centered_hero_lift: float = 50.0
    centered_satellite_width: float = 150.0
    centered_satellite_height: float = 120.0
    centered_radius_frac: float = 0.25

    # Grid
    grid_hero_scale: float = 1.3
    grid_min_variation: float = 0.8
    grid_variation_range: float = 0.4

    # Golden ratio: shortest band before the rest spill into another column
    golden_min_band_height: float = 60.0

    # Adaptive fallback thresholds
    adaptive_centered_max: int = 3
    adaptive_golden_max: int = 6


DEFAULT_LAYOUT_CONFIG = LayoutConfig()
