"""POST /api/board: full vision board generation."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from dreamboard.dependencies import get_generator
from dreamboard.models.board import VisionBoard
from dreamboard.models.requests import BoardRequest
from dreamboard.pipeline import VisionBoardGenerator

router = APIRouter()


@router.post("/board", response_model=VisionBoard)
async def board(
    req: BoardRequest,
    generator: VisionBoardGenerator = Depends(get_generator),
) -> VisionBoard:
    return await generator.generate(req.dream, req.user_id, req.template_id, seed=req.seed)
