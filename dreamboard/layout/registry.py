"""Strategy registry: every layout strategy is a standalone function registered via decorator.

Usage:
    @strategy(name=LayoutStrategy.GRID, description="n x n grid with a 1.3x hero cell")
    def grid(ctx: LayoutContext) -> None:
        for p in ctx.placements:
            p.x, p.y = ...

Adding a new strategy = creating one module under ``dreamboard.layout.strategies``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable

from dreamboard.models.vocab import LayoutStrategy

if TYPE_CHECKING:
    from dreamboard.layout.context import LayoutContext

logger = logging.getLogger(__name__)


@dataclass
class StrategySpec:
    name: LayoutStrategy
    fn: Callable[["LayoutContext"], None]
    description: str = ""


class StrategyRegistry:
    """Registry of layout strategies keyed by name."""

    def __init__(self) -> None:
        self._strategies: dict[LayoutStrategy, StrategySpec] = {}

    def register(self, spec: StrategySpec) -> None:
        if spec.name in self._strategies:
            raise ValueError(f"Duplicate layout strategy: {spec.name.value}")
        self._strategies[spec.name] = spec
        logger.debug("Registered layout strategy %s", spec.name.value)

    def get(self, name: LayoutStrategy) -> StrategySpec:
        return self._strategies[name]

    def find(self, name: LayoutStrategy | None) -> StrategySpec | None:
        if name is None:
            return None
        return self._strategies.get(name)

    def all(self) -> list[StrategySpec]:
        return sorted(self._strategies.values(), key=lambda s: s.name.value)

    def __contains__(self, name: object) -> bool:
        return name in self._strategies

    @property
    def count(self) -> int:
        return len(self._strategies)


# Module-level singleton
_registry = StrategyRegistry()


def get_registry() -> StrategyRegistry:
    return _registry


def strategy(*, name: LayoutStrategy, description: str = ""):
    """Decorator to register a layout strategy function."""

    def decorator(fn: Callable[["LayoutContext"], None]):
        _registry.register(StrategySpec(name=name, fn=fn, description=description))
        return fn

    return decorator
