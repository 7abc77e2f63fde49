"""Health check."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from dreamboard import __version__
from dreamboard.dependencies import get_generator
from dreamboard.layout.registry import get_registry
from dreamboard.layout.templates import list_templates
from dreamboard.models.responses import HealthResponse
from dreamboard.pipeline import VisionBoardGenerator

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health(generator: VisionBoardGenerator = Depends(get_generator)) -> HealthResponse:
    return HealthResponse(
        status="ok",
        version=__version__,
        strategies_registered=get_registry().count,
        templates_available=len(list_templates()),
        providers_configured=generator.images.configured_providers,
    )
