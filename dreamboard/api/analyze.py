"""POST /api/analyze: text analysis only, no images or layout."""

from __future__ import annotations

import time

from fastapi import APIRouter, Depends

from dreamboard.dependencies import get_generator
from dreamboard.models.requests import AnalyzeRequest
from dreamboard.models.responses import AnalyzeResponse
from dreamboard.pipeline import VisionBoardGenerator

router = APIRouter()


@router.post("/analyze", response_model=AnalyzeResponse)
async def analyze(
    req: AnalyzeRequest,
    generator: VisionBoardGenerator = Depends(get_generator),
) -> AnalyzeResponse:
    start = time.perf_counter()
    analysis = generator.analyzer.analyze(req.dream, req.user_id)
    elapsed = (time.perf_counter() - start) * 1000
    return AnalyzeResponse(analysis=analysis, processing_time_ms=round(elapsed, 1))
