"""GET /api/templates: the layout template catalog."""

from __future__ import annotations

from fastapi import APIRouter

from dreamboard.layout.templates import list_templates
from dreamboard.models.responses import TemplatesResponse

router = APIRouter()


@router.get("/templates", response_model=TemplatesResponse)
async def templates() -> TemplatesResponse:
    return TemplatesResponse(templates=list_templates())
