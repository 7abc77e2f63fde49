"""Shared test fixtures."""

from __future__ import annotations

from typing import Any

import pytest

from dreamboard.analysis.analyzer import TextAnalyzer
from dreamboard.analysis.history import PersonalizationStore
from dreamboard.images.providers.base import ImageProvider
from dreamboard.models.dream import DreamInput
from dreamboard.models.images import ImageCandidate, ImageSearchParams, composition_for
from dreamboard.models.layout import PartialElement
from dreamboard.models.vocab import ElementKind, Orientation


CAREER_DREAM = DreamInput(
    id="dream-career",
    title="Launch my startup",
    description="Build and launch a revolutionary app",
    category="career",
)

VAGUE_DREAM = DreamInput(title="x", description="")

TRAVEL_DREAM = DreamInput(
    id="dream-travel",
    title="Backpack across South America",
    description="I want to explore the mountains and experience new culture with total freedom",
    category="travel",
)


def make_image(
    id: str,
    *,
    source: str = "fake",
    width: int = 800,
    height: int = 600,
    photographer: str | None = None,
    alt: str = "Vision board image",
    tags: list[str] | None = None,
    palette: list[str] | None = None,
    style: str = "dynamic",
) -> ImageCandidate:
    return ImageCandidate(
        id=id,
        source=source,
        url=f"https://img.test/{id}.jpg",
        thumbnail_url=f"https://img.test/{id}_thumb.jpg",
        alt=alt,
        photographer=photographer if photographer is not None else f"photographer-{id}",
        width=width,
        height=height,
        composition=composition_for(width, height),
        color_palette=palette or [],
        style=style,
        tags=tags or [],
    )


class FakeProvider(ImageProvider):
    """In-memory provider: returns canned candidates or raises ``error``."""

    endpoint = "https://fake.test/search"
    results_key = "items"

    def __init__(
        self,
        name: str,
        images: list[ImageCandidate] | None = None,
        error: BaseException | None = None,
        api_key: str = "test-key",
        min_interval: float = 0.0,
    ) -> None:
        super().__init__(api_key, min_interval)
        self.name = name
        self.images = images or []
        self.error = error
        self.calls = 0

    def query_params(self, enhanced_query: str, orientation: Orientation, limit: int) -> dict[str, Any]:
        return {"q": enhanced_query, "limit": limit}

    def normalize(self, raw: dict[str, Any], params: ImageSearchParams) -> ImageCandidate:
        return ImageCandidate(**raw)

    async def fetch(self, client, enhanced_query, params) -> list[ImageCandidate]:
        self.calls += 1
        if self.error is not None:
            raise self.error
        return list(self.images)


class ManualClock:
    """Monotonic clock the test advances by hand."""

    def __init__(self, start: float = 1000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


def make_elements(count: int, text_every: int = 0) -> list[PartialElement]:
    """``count`` elements with descending weights; every ``text_every``-th one is text."""
    elements = []
    for i in range(count):
        is_text = text_every and i % text_every == text_every - 1
        elements.append(PartialElement(
            id=f"el_{i}",
            kind=ElementKind.TEXT if is_text else ElementKind.IMAGE,
            content=f"Text {i}" if is_text else None,
            image_url=None if is_text else f"https://img.test/{i}.jpg",
            layout_weight=1.0 - i * 0.05,
        ))
    return elements


@pytest.fixture
def store() -> PersonalizationStore:
    return PersonalizationStore(limit=5)


@pytest.fixture
def analyzer(store: PersonalizationStore) -> TextAnalyzer:
    return TextAnalyzer(store=store)


@pytest.fixture
def clock() -> ManualClock:
    return ManualClock()
