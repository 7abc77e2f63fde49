"""Inbound dream record. Together with a user id it is the whole pipeline input."""

from __future__ import annotations

from datetime import date

from pydantic import BaseModel, ConfigDict, Field, field_validator


class DreamInput(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str | None = None
    title: str = Field(..., description="Short name of the goal")
    description: str = Field(default="", description="Free-text description of the goal")
    why_important: str | None = Field(default=None, description="Why the goal matters")
    category: str = Field(default="", description="Caller-supplied category hint")
    deadline: date | None = None
    milestones: list[str] = Field(default_factory=list)

    @field_validator("title")
    @classmethod
    def _title_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("title must not be blank")
        return value

    def combined_text(self) -> str:
        """Lower-cased concatenation that every analysis stage reads."""
        parts = [
            self.title,
            self.description,
            self.why_important or "",
            self.category,
            *self.milestones,
        ]
        return " ".join(parts).lower()
