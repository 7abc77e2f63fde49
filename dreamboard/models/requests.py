"""API request models."""

from __future__ import annotations

from pydantic import BaseModel, Field

from dreamboard.models.dream import DreamInput


class AnalyzeRequest(BaseModel):
    dream: DreamInput
    user_id: str = Field(default="anonymous", min_length=1)


class BoardRequest(BaseModel):
    dream: DreamInput
    user_id: str = Field(default="anonymous", min_length=1)
    template_id: str | None = Field(default=None, description="Template id; chosen from the analysis when omitted")
    seed: int | None = Field(default=None, description="Seed for randomised layout strategies")
