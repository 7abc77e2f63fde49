"""Content generator: affirmations, quotes, plan and cues for one dream."""

from __future__ import annotations

import logging

from dreamboard.content.templates import (
    ACTION_STEP_COUNTS,
    ACTION_STEPS,
    AFFIRMATION_SUBSTITUTIONS,
    AFFIRMATIONS,
    BASE_AFFIRMATION_COUNT,
    BUILD_ON_SUCCESS_STEP,
    DREAM_AFFIRMATION_COUNT,
    DREAM_AFFIRMATIONS,
    MANTRAS,
    METRIC_COUNT,
    MILESTONE_COUNTS,
    MILESTONES,
    POWER_WORDS,
    QUOTE_COUNT,
    QUOTE_THEMES,
    QUOTES,
    REMINDER_COUNT,
    REMINDERS,
    SUCCESS_METRICS,
    VALUES_AFFIRMATION,
    VISUAL_CUE_COUNT,
    VISUAL_CUES,
)
from dreamboard.models.content import ContentRequest, GeneratedContent
from dreamboard.models.vocab import DEFAULT_CATEGORY, Category, parse

logger = logging.getLogger(__name__)


def resolve_category(value: str | Category) -> Category:
    """Known category or the personal_growth fallback."""
    return parse(Category, value, DEFAULT_CATEGORY)


class ContentGenerator:
    """Stateless; every method is a pure function of the request."""

    def generate(self, request: ContentRequest) -> GeneratedContent:
        category = resolve_category(request.category)
        if category.value != request.category.strip().lower():
            logger.debug("Unknown category %r, using %s tables", request.category, category.value)

        return GeneratedContent(
            affirmations=self.affirmations(request, category),
            quotes=self.quotes(category, request.emotion),
            action_steps=self.action_steps(request, category),
            milestones=self.milestones(request, category),
            success_metrics=list(SUCCESS_METRICS[category][:METRIC_COUNT]),
            visual_cues=list(VISUAL_CUES[category][:VISUAL_CUE_COUNT]),
        )

    def affirmations(self, request: ContentRequest, category: Category) -> list[str]:
        title = request.dream_title.strip()
        lowered = title.lower()

        base: list[str] = []
        for affirmation in AFFIRMATIONS[category]:
            for trigger, generic, specific in AFFIRMATION_SUBSTITUTIONS:
                if trigger in lowered:
                    affirmation = affirmation.replace(generic, specific)
            base.append(affirmation)
        base = base[:BASE_AFFIRMATION_COUNT]

        if request.personal_values:
            values = ", ".join(v.strip() for v in request.personal_values if v.strip())
            if values:
                base[-1] = VALUES_AFFIRMATION.format(values=values)

        dream_specific = [
            template.format(title=title, lower=lowered)
            for template in DREAM_AFFIRMATIONS[:DREAM_AFFIRMATION_COUNT]
        ]
        return base + dream_specific

    def quotes(self, category: Category, emotion: str) -> list[str]:
        themes = QUOTES[category]
        theme = QUOTE_THEMES.get(emotion.strip().lower())
        if theme not in themes:
            theme = next(iter(themes))
        return list(themes[theme][:QUOTE_COUNT])

    def action_steps(self, request: ContentRequest, category: Category) -> list[str]:
        steps = list(ACTION_STEPS[category])
        if request.previous_successes:
            steps.insert(0, BUILD_ON_SUCCESS_STEP.format(success=request.previous_successes[0]))
        return steps[:ACTION_STEP_COUNTS[request.timeframe]]

    def milestones(self, request: ContentRequest, category: Category) -> list[str]:
        count = MILESTONE_COUNTS[request.timeframe]
        roadmap = MILESTONES[category]
        return list(roadmap if count is None else roadmap[:count])

    def generate_reminders(self, request: ContentRequest) -> list[str]:
        return list(REMINDERS[:REMINDER_COUNT])

    def generate_mantras(self, request: ContentRequest) -> list[str]:
        title = request.dream_title.strip()
        return [template.format(title=title, lower=title.lower()) for template in MANTRAS]

    def generate_power_words(self, category: str | Category) -> list[str]:
        return list(POWER_WORDS[resolve_category(category)])
