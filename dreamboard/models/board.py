"""Pipeline output."""

from __future__ import annotations

from pydantic import BaseModel, Field

from dreamboard.models.analysis import DreamAnalysis
from dreamboard.models.content import GeneratedContent
from dreamboard.models.images import ImageCandidate
from dreamboard.models.layout import LayoutElement


class VisionBoard(BaseModel):
    dream_title: str
    user_id: str
    analysis: DreamAnalysis
    content: GeneratedContent
    images: list[ImageCandidate] = Field(default_factory=list)
    elements: list[LayoutElement] = Field(default_factory=list)
    template_id: str
    layout_strategy: str
    layout_valid: bool = True
    processing_time_ms: float = 0.0
