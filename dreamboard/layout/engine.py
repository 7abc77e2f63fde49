"""Layout engine: sort, position with a registered strategy, then post-process.

Post-processing order (always the same, whichever strategy ran):
    style hints -> weight clamping + z-order -> overlap resolution + canvas fit
    -> colour harmony -> symmetric balance
"""

from __future__ import annotations

import importlib
import logging
import pkgutil
import time

import numpy as np

from dreamboard.layout.config import DEFAULT_LAYOUT_CONFIG, LayoutConfig, LayoutOptions
from dreamboard.layout.context import LayoutContext, Placement
from dreamboard.layout.hints import apply_style_hints
from dreamboard.layout.registry import StrategyRegistry, StrategySpec, get_registry
from dreamboard.models.layout import LayoutElement, LayoutTemplate, PartialElement
from dreamboard.models.vocab import LayoutStrategy, TemplateStyle, parse
from dreamboard.utils.geometry import boxes_overlap, fit_into, inside

logger = logging.getLogger(__name__)

STRATEGY_PACKAGE = "dreamboard.layout.strategies"


def load_strategies() -> None:
    """Import every strategy module so @strategy decorators fire. Safe to call repeatedly."""
    package = importlib.import_module(STRATEGY_PACKAGE)
    for _, module_name, _ in pkgutil.iter_modules(package.__path__):
        importlib.import_module(f"{STRATEGY_PACKAGE}.{module_name}")


class LayoutEngine:
    """Positions abstract elements on a template's canvas."""

    def __init__(
        self,
        registry: StrategyRegistry | None = None,
        config: LayoutConfig = DEFAULT_LAYOUT_CONFIG,
    ) -> None:
        if registry is None:
            load_strategies()
            registry = get_registry()
        self.registry = registry
        self.config = config

    def layout(
        self,
        template: LayoutTemplate,
        elements: list[PartialElement],
        options: LayoutOptions | None = None,
    ) -> list[LayoutElement]:
        options = options or LayoutOptions()
        start = time.perf_counter()

        ordered = self.sort_elements(elements, options.priority_order)
        if len(ordered) > template.max_elements:
            logger.debug(
                "Template %s holds %d elements; dropping %d",
                template.id,
                template.max_elements,
                len(ordered) - template.max_elements,
            )
            ordered = ordered[: template.max_elements]

        ctx = LayoutContext(
            template=template,
            placements=[Placement.from_partial(e, i, self.config) for i, e in enumerate(ordered)],
            rng=np.random.default_rng(options.seed),
            options=options,
            config=self.config,
        )
        if not ctx.placements:
            return []

        spec = self.resolve_strategy(template, ctx.count)
        ctx.strategy_name = spec.name.value
        spec.fn(ctx)

        apply_style_hints(ctx)
        _clamp_weights(ctx)
        if options.resolve_overlaps:
            _resolve_overlaps(ctx)
        if options.color_harmony:
            _apply_color_harmony(ctx)
        if options.symmetric_balance:
            _balance(ctx)

        result = [p.to_element() for p in ctx.placements]
        logger.info(
            "Layout %s/%s: %d elements in %.1fms",
            template.id,
            ctx.strategy_name,
            len(result),
            (time.perf_counter() - start) * 1000,
        )
        return result

    def sort_elements(
        self,
        elements: list[PartialElement],
        priority_order: list[str] | None = None,
    ) -> list[PartialElement]:
        """Explicit id order first (unlisted keep input order, after listed); else layout weight descending."""
        if priority_order is not None:
            rank = {element_id: i for i, element_id in enumerate(priority_order)}
            unlisted = len(rank)
            return sorted(elements, key=lambda e: rank.get(e.id or "", unlisted))

        def weight(e: PartialElement) -> float:
            return e.layout_weight if e.layout_weight is not None else self.config.unweighted_priority

        return sorted(elements, key=weight, reverse=True)

    def resolve_strategy(self, template: LayoutTemplate, count: int) -> StrategySpec:
        declared = self.registry.find(parse(LayoutStrategy, template.layout))
        if declared is not None:
            return declared
        fallback = self._adaptive(template, count)
        logger.debug("Template %s declares %r; adaptive choice %s", template.id, template.layout, fallback.value)
        return self.registry.get(fallback)

    def _adaptive(self, template: LayoutTemplate, count: int) -> LayoutStrategy:
        style = parse(TemplateStyle, template.style, TemplateStyle.UNKNOWN)
        if count <= self.config.adaptive_centered_max:
            return LayoutStrategy.CENTERED
        if count <= self.config.adaptive_golden_max and style == TemplateStyle.LUXURY:
            return LayoutStrategy.GOLDEN_RATIO
        if style == TemplateStyle.PINTEREST:
            return LayoutStrategy.MASONRY
        return LayoutStrategy.ASYMMETRIC


def _clamp_weights(ctx: LayoutContext) -> None:
    for p in ctx.placements:
        p.layout_weight = min(max(p.layout_weight, 0.0), 1.0)
        p.visual_weight = min(max(p.visual_weight, 0.0), 1.0)


def _resolve_overlaps(ctx: LayoutContext) -> None:
    """Push each later element below any earlier one it touches, then fit everything into the canvas.

    Single forward pass; fitting can reintroduce overlaps near the bottom edge.
    """
    placements = ctx.placements
    for i, a in enumerate(placements):
        for b in placements[i + 1:]:
            if boxes_overlap(a.box, b.box):
                b.y += a.height + ctx.gap
    for p in placements:
        p.x, p.y, p.width, p.height = fit_into(p.x, p.y, p.width, p.height, ctx.width, ctx.height)


def _apply_color_harmony(ctx: LayoutContext) -> None:
    scheme = ctx.template.color_scheme
    for i, p in enumerate(ctx.placements):
        if p.is_text and not p.color:
            p.color = scheme[i % len(scheme)]


def _balance(ctx: LayoutContext) -> None:
    """Shift horizontally so the weighted centre of mass sits on the canvas centre, never pushing a box out."""
    boxes = np.array([p.box for p in ctx.placements], dtype=float)
    mass = boxes[:, 2] * boxes[:, 3] * np.array([p.visual_weight for p in ctx.placements])
    total = float(mass.sum())
    if total <= 0:
        return
    centre = float(((boxes[:, 0] + boxes[:, 2] / 2) * mass).sum() / total)

    low = -float(boxes[:, 0].min())
    high = ctx.width - float((boxes[:, 0] + boxes[:, 2]).max())
    if low > high:
        return
    shift = min(max(ctx.width / 2 - centre, low), high)
    for p in ctx.placements:
        p.x += shift


def layout_violations(elements: list[LayoutElement], template: LayoutTemplate) -> list[str]:
    """Ids of elements whose box leaves the canvas."""
    return [
        e.id
        for e in elements
        if not inside(e.x, e.y, e.width, e.height, template.canvas_width, template.canvas_height)
    ]


def validate_layout(elements: list[LayoutElement], template: LayoutTemplate) -> bool:
    return not layout_violations(elements, template)
