"""POST /api/score — score one finished stroke; GET /api/reference — guide circle."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, Query

from circlescore.config import Settings
from circlescore.dependencies import get_score_store, get_settings
from circlescore.engine.capture import (
    INCOMPLETE_FEEDBACK,
    MAX_CANVAS_SIZE,
    canvas_size_for_viewport,
    clamp_canvas_size,
    reference_for_canvas,
)
from circlescore.engine.results import RETRY_MESSAGE, feedback_for, to_percentage
from circlescore.engine.scorer import score_breakdown
from circlescore.engine.types import FreeformMode, ReferenceCircle, ReferenceMode
from circlescore.models.requests import ScoreRequest
from circlescore.models.responses import BreakdownOut, ReferenceResponse, ScoreResponse
from circlescore.storage.score_store import ScoreStore

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/reference", response_model=ReferenceResponse)
async def reference(
    size: float = Query(MAX_CANVAS_SIZE, gt=0, description="Requested canvas edge in px"),
    viewport: float | None = Query(None, gt=0, description="Viewport width; overrides size"),
) -> ReferenceResponse:
    try:
        edge = canvas_size_for_viewport(viewport) if viewport is not None else clamp_canvas_size(size)
        circle = reference_for_canvas(edge)
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))
    return ReferenceResponse(size=edge, x=circle.x, y=circle.y, radius=circle.radius)


# Plain def: ScoreStore does blocking file I/O, so FastAPI runs this in its threadpool
@router.post("/score", response_model=ScoreResponse)
def score_stroke(
    req: ScoreRequest,
    store: ScoreStore = Depends(get_score_store),
    cfg: Settings = Depends(get_settings),
) -> ScoreResponse:
    store_best = store.best()

    # Capture-side threshold, stricter than the scorer's own minimum
    if len(req.points) < cfg.min_stroke_points:
        return ScoreResponse(feedback=INCOMPLETE_FEEDBACK, accepted=False, best=store_best)

    if req.resolved_mode == ReferenceMode.name:
        ref = req.reference
        mode = ReferenceMode(ReferenceCircle(x=ref.x, y=ref.y, radius=ref.radius))
    else:
        mode = FreeformMode()

    result = score_breakdown([(p.x, p.y) for p in req.points], mode)
    percentage = to_percentage(result.score)
    if percentage is None:
        logger.error("Scorer returned unusable value %r", result.score)
        raise HTTPException(status_code=500, detail=RETRY_MESSAGE)

    breakdown = BreakdownOut(**{k: v for k, v in result.as_dict().items() if k != "score"})
    response = ScoreResponse(
        score=result.score,
        percentage=percentage,
        feedback=feedback_for(percentage),
        breakdown=breakdown,
        best=store_best,
    )

    if req.save:
        saved = store.save(percentage)
        response.new_best = saved.new_best
        response.best = saved.best
        response.saved = saved.persisted

    return response
