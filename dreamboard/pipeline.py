"""Vision board pipeline: analyze -> content -> images -> layout -> style."""

from __future__ import annotations

import asyncio
import logging
import time

import httpx

from dreamboard.analysis.analyzer import TextAnalyzer
from dreamboard.analysis.history import PersonalizationStore
from dreamboard.config import Settings, settings as default_settings
from dreamboard.content.generator import ContentGenerator
from dreamboard.images.agent import ImageDiscoveryAgent
from dreamboard.layout.config import LayoutOptions
from dreamboard.layout.engine import LayoutEngine, layout_violations
from dreamboard.layout.templates import find_template, select_template
from dreamboard.models.analysis import DreamAnalysis
from dreamboard.models.board import VisionBoard
from dreamboard.models.content import ContentRequest, GeneratedContent
from dreamboard.models.dream import DreamInput
from dreamboard.models.images import ImageCandidate, ImageSearchParams
from dreamboard.models.layout import LayoutTemplate, PartialElement
from dreamboard.models.vocab import ElementKind, Emotion, Orientation, TimeframeBucket
from dreamboard.style.resolver import apply_style, style_for

logger = logging.getLogger(__name__)

# Image queries searched per board, results per query, images kept
QUERIES_PER_BOARD = 3
IMAGES_PER_QUERY = 4
MAX_BOARD_IMAGES = 8

SUPPORTING_IMAGES = 4
BOARD_AFFIRMATIONS = 3
BOARD_POWER_WORDS = 2


class VisionBoardGenerator:
    """Wires the five stages together. Every component is injectable."""

    def __init__(
        self,
        analyzer: TextAnalyzer | None = None,
        content: ContentGenerator | None = None,
        images: ImageDiscoveryAgent | None = None,
        layout: LayoutEngine | None = None,
        layout_seed: int | None = None,
    ) -> None:
        self.analyzer = analyzer or TextAnalyzer()
        self.content = content or ContentGenerator()
        self.images = images or ImageDiscoveryAgent()
        self.layout = layout or LayoutEngine()
        self.layout_seed = layout_seed

    async def generate(
        self,
        dream: DreamInput,
        user_id: str = "anonymous",
        template_id: str | None = None,
        seed: int | None = None,
    ) -> VisionBoard:
        start = time.perf_counter()

        analysis = self.analyzer.analyze(dream, user_id)
        emotion = analysis.top_emotion

        content = self.content.generate(self._content_request(dream, analysis))
        images = await self._discover_images(analysis)

        template = self._template(analysis, template_id)
        elements = self._board_elements(dream, analysis, content, images)
        options = LayoutOptions(
            priority_order=[e.id for e in elements if e.id],
            color_harmony=True,
            resolve_overlaps=True,
            seed=seed if seed is not None else self.layout_seed,
        )
        positioned = self.layout.layout(template, elements, options)

        # The emotion style wins over layout-chosen colours and sizes; geometry is untouched
        intensity = 0.8 + 0.2 * analysis.emotional_tone.intensity
        styled = [apply_style(e, style_for(e, emotion, intensity), override=True) for e in positioned]

        violations = layout_violations(styled, template)
        if violations:
            logger.warning("Layout %s left the canvas for %s", template.id, violations)

        elapsed = (time.perf_counter() - start) * 1000
        logger.info(
            "Vision board for %r: template=%s, %d images, %d elements in %.0fms",
            dream.title,
            template.id,
            len(images),
            len(styled),
            elapsed,
        )
        return VisionBoard(
            dream_title=dream.title,
            user_id=user_id,
            analysis=analysis,
            content=content,
            images=images,
            elements=styled,
            template_id=template.id,
            layout_strategy=self.layout.resolve_strategy(template, len(styled)).name.value,
            layout_valid=not violations,
            processing_time_ms=round(elapsed, 1),
        )

    # ------------------------------------------------------------------
    # Stages
    # ------------------------------------------------------------------

    def _content_request(self, dream: DreamInput, analysis: DreamAnalysis) -> ContentRequest:
        timeframe = analysis.timeframe
        if timeframe is None:
            timeframe = TimeframeBucket.MEDIUM_TERM if dream.deadline else TimeframeBucket.LONG_TERM
        return ContentRequest(
            dream_title=dream.title,
            dream_description=dream.description,
            category=analysis.top_category.value,
            emotion=analysis.top_emotion.value,
            timeframe=timeframe,
            personal_values=analysis.entities.values,
        )

    async def _discover_images(self, analysis: DreamAnalysis) -> list[ImageCandidate]:
        emotion = analysis.top_emotion
        queries = analysis.suggestions.image_queries[:QUERIES_PER_BOARD]
        batch = [
            ImageSearchParams(
                query=query,
                category=analysis.top_category.value,
                emotional_tone=emotion.value,
                color_preferences=tuple(analysis.personalization.color_preferences),
                style="dynamic" if emotion == Emotion.EXCITEMENT else "serene",
                orientation=Orientation.LANDSCAPE,
                limit=IMAGES_PER_QUERY,
            )
            for query in queries
        ]
        results = await self.images.search_many(batch)

        selected: dict[str, ImageCandidate] = {}
        for images in results:
            for image in images:
                selected.setdefault(image.id, image)
        return list(selected.values())[:MAX_BOARD_IMAGES]

    def _template(self, analysis: DreamAnalysis, template_id: str | None) -> LayoutTemplate:
        template = find_template(template_id)
        if template is None:
            if template_id:
                logger.warning("Unknown template %r; selecting from analysis", template_id)
            template = select_template(analysis)
        return template

    def _board_elements(
        self,
        dream: DreamInput,
        analysis: DreamAnalysis,
        content: GeneratedContent,
        images: list[ImageCandidate],
    ) -> list[PartialElement]:
        emotion = analysis.top_emotion.value
        category = analysis.top_category.value
        elements: list[PartialElement] = []

        if images:
            hero = images[0]
            elements.append(PartialElement(
                id="hero_image",
                kind=ElementKind.IMAGE,
                image_url=hero.url,
                layout_weight=1.0,
                visual_weight=1.0,
                metadata={"source": hero.source, "emotion": emotion, "category": category,
                          "relevance_score": hero.relevance_score},
            ))

        elements.append(PartialElement(
            id="main_title",
            kind=ElementKind.TEXT,
            content=dream.title.upper(),
            layout_weight=0.9,
            visual_weight=0.9,
            font_size=42,
            font_weight="bold",
            metadata={"emotion": emotion, "category": "title"},
        ))

        for i, image in enumerate(images[1:1 + SUPPORTING_IMAGES]):
            elements.append(PartialElement(
                id=f"support_image_{i}",
                kind=ElementKind.IMAGE,
                image_url=image.url,
                layout_weight=0.7 - i * 0.1,
                visual_weight=0.6 - i * 0.05,
                metadata={"source": image.source, "emotion": emotion, "category": category,
                          "relevance_score": image.relevance_score},
            ))

        for i, affirmation in enumerate(content.affirmations[:BOARD_AFFIRMATIONS]):
            elements.append(PartialElement(
                id=f"affirmation_{i}",
                kind=ElementKind.TEXT,
                content=affirmation,
                layout_weight=0.5 - i * 0.1,
                visual_weight=0.4,
                font_size=18,
                font_weight="500",
                metadata={"emotion": emotion, "category": "affirmation"},
            ))

        if content.quotes:
            elements.append(PartialElement(
                id="quote_0",
                kind=ElementKind.QUOTE,
                content=content.quotes[0],
                layout_weight=0.35,
                visual_weight=0.45,
                font_size=20,
                metadata={"emotion": emotion, "category": "quote"},
            ))

        for i, word in enumerate(self.content.generate_power_words(category)[:BOARD_POWER_WORDS]):
            elements.append(PartialElement(
                id=f"power_word_{i}",
                kind=ElementKind.TEXT,
                content=word,
                layout_weight=0.4,
                visual_weight=0.5,
                font_size=28,
                font_weight="bold",
                metadata={"emotion": emotion, "category": "power_word"},
            ))

        return elements


def create_generator(
    settings: Settings | None = None,
    client: httpx.AsyncClient | None = None,
) -> VisionBoardGenerator:
    """Build a generator with components configured from settings."""
    settings = settings or default_settings
    return VisionBoardGenerator(
        analyzer=TextAnalyzer(store=PersonalizationStore(settings.history_limit)),
        images=ImageDiscoveryAgent.from_settings(settings, client=client),
        layout_seed=settings.layout_seed,
    )


def generate_vision_board(
    dream: DreamInput,
    user_id: str = "anonymous",
    template_id: str | None = None,
    generator: VisionBoardGenerator | None = None,
) -> VisionBoard:
    """Synchronous entry point for callers without an event loop."""
    generator = generator or create_generator()
    return asyncio.run(generator.generate(dream, user_id, template_id))
