"""Relevance / resonance scoring, ranking and filtering of candidates."""

from __future__ import annotations

from dataclasses import dataclass

from dreamboard.images.palette import IMAGE_STYLES, emotion_colors
from dreamboard.models.images import ImageCandidate, ImageSearchParams
from dreamboard.models.vocab import Orientation
from dreamboard.utils.colors import any_within


@dataclass(frozen=True)
class ScoringConfig:
    base_relevance: float = 0.5
    term_bonus: float = 0.2
    style_bonus: float = 0.2
    orientation_bonus: float = 0.1
    color_bonus: float = 0.15
    preferred_color_threshold: float = 50.0

    base_resonance: float = 0.6
    emotion_color_bonus: float = 0.3
    emotion_color_threshold: float = 60.0

    relevance_weight: float = 0.6
    resonance_weight: float = 0.4

    min_width: int = 400
    min_height: int = 300
    min_relevance: float = 0.3


DEFAULT_SCORING = ScoringConfig()


def enhanced_query(params: ImageSearchParams) -> str:
    """Caller query plus style keywords and an orientation hint."""
    parts = [params.query.strip()]
    style = IMAGE_STYLES.get(params.style or "")
    if style is not None:
        parts.extend(style.keywords[:2])
    if params.orientation == Orientation.PORTRAIT:
        parts.append("vertical")
    elif params.orientation == Orientation.LANDSCAPE:
        parts.append("horizontal wide")
    return " ".join(p for p in parts if p)


def score_candidate(
    candidate: ImageCandidate,
    params: ImageSearchParams,
    config: ScoringConfig = DEFAULT_SCORING,
) -> ImageCandidate:
    """Return a copy of ``candidate`` with relevance and resonance filled in."""
    relevance = config.base_relevance
    haystack = f"{candidate.alt} {' '.join(candidate.tags)}".lower()
    for term in params.query.lower().split():
        if term in haystack:
            relevance += config.term_bonus

    if params.style and candidate.style == params.style:
        relevance += config.style_bonus

    if params.orientation != Orientation.ANY and candidate.composition.value == params.orientation.value:
        relevance += config.orientation_bonus

    if params.color_preferences and any_within(
        candidate.color_palette, params.color_preferences, config.preferred_color_threshold
    ):
        relevance += config.color_bonus

    resonance = config.base_resonance
    mood_colors = emotion_colors(params.emotional_tone)
    if mood_colors and any_within(candidate.color_palette, mood_colors, config.emotion_color_threshold):
        resonance += config.emotion_color_bonus

    return candidate.model_copy(update={
        "relevance_score": min(relevance, 1.0),
        "emotional_resonance": min(resonance, 1.0),
    })


def combined_score(candidate: ImageCandidate, config: ScoringConfig = DEFAULT_SCORING) -> float:
    return candidate.relevance_score * config.relevance_weight + candidate.emotional_resonance * config.resonance_weight


def rank(
    candidates: list[ImageCandidate],
    params: ImageSearchParams,
    config: ScoringConfig = DEFAULT_SCORING,
) -> list[ImageCandidate]:
    """Score every candidate and order best first (stable on ties)."""
    scored = [score_candidate(c, params, config) for c in candidates]
    return sorted(scored, key=lambda c: -combined_score(c, config))


def filter_candidates(
    ranked: list[ImageCandidate],
    params: ImageSearchParams,
    config: ScoringConfig = DEFAULT_SCORING,
) -> list[ImageCandidate]:
    """Drop excluded, low-resolution, low-relevance and near-duplicate candidates."""
    kept: list[ImageCandidate] = []
    seen: set[str] = set()
    excluded = set(params.exclude_ids)

    for candidate in ranked:
        if candidate.id in excluded:
            continue
        if candidate.width < config.min_width or candidate.height < config.min_height:
            continue
        if candidate.relevance_score < config.min_relevance:
            continue
        key = f"{candidate.width}x{candidate.height}_{candidate.photographer or 'unknown'}"
        if key in seen:
            continue
        seen.add(key)
        kept.append(candidate)
        if len(kept) >= params.limit:
            break

    return kept
