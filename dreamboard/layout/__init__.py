"""Vision board layout engine."""

from dreamboard.layout.config import LayoutConfig, LayoutOptions
from dreamboard.layout.context import LayoutContext, Placement
from dreamboard.layout.engine import LayoutEngine, layout_violations, load_strategies, validate_layout
from dreamboard.layout.registry import get_registry, strategy
from dreamboard.layout.templates import find_template, get_template, list_templates, select_template

__all__ = [
    "LayoutConfig",
    "LayoutOptions",
    "LayoutContext",
    "Placement",
    "LayoutEngine",
    "layout_violations",
    "load_strategies",
    "validate_layout",
    "get_registry",
    "strategy",
    "find_template",
    "get_template",
    "list_templates",
    "select_template",
]
