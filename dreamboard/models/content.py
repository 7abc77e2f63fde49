"""Content generator request/response records."""

from __future__ import annotations

from pydantic import BaseModel, Field

from dreamboard.models.vocab import TimeframeBucket


class ContentRequest(BaseModel):
    dream_title: str
    dream_description: str = ""
    # Unknown categories fall back to personal_growth
    category: str = "personal_growth"
    emotion: str = "success"
    timeframe: TimeframeBucket | None = None
    # Pronoun hint from the client. Every template is first person, so it never
    # changes the generated text; it is kept so clients may send it.
    phrasing: str | None = Field(default=None, description="Phrasing hint, e.g. 'neutral'; no effect on output")
    personal_values: list[str] = Field(default_factory=list)
    previous_successes: list[str] = Field(default_factory=list)


class GeneratedContent(BaseModel):
    affirmations: list[str] = Field(default_factory=list, max_length=7)
    quotes: list[str] = Field(default_factory=list, max_length=7)
    action_steps: list[str] = Field(default_factory=list, max_length=7)
    milestones: list[str] = Field(default_factory=list, max_length=7)
    success_metrics: list[str] = Field(default_factory=list, max_length=7)
    visual_cues: list[str] = Field(default_factory=list, max_length=7)
