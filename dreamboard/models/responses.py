"""API response models."""

from __future__ import annotations

from pydantic import BaseModel, Field

from dreamboard.models.analysis import DreamAnalysis
from dreamboard.models.layout import LayoutTemplate


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"
    strategies_registered: int = 0
    templates_available: int = 0
    providers_configured: list[str] = Field(default_factory=list)


class TemplatesResponse(BaseModel):
    templates: list[LayoutTemplate] = Field(default_factory=list)


class AnalyzeResponse(BaseModel):
    analysis: DreamAnalysis
    processing_time_ms: float = 0.0
