"""GET/DELETE /api/scores — the score board.

Handlers are plain ``def``: the store reads and writes a JSON file.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends

from circlescore.dependencies import get_score_store
from circlescore.models.responses import ScoreBoardResponse, ScoreRecordOut
from circlescore.storage.score_store import ScoreStore

router = APIRouter()


def _board_response(store: ScoreStore) -> ScoreBoardResponse:
    board = store.board()
    return ScoreBoardResponse(
        best=board.best,
        recent=[ScoreRecordOut(score=r.score, timestamp=r.timestamp) for r in board.recent],
    )


@router.get("/scores", response_model=ScoreBoardResponse)
def get_scores(store: ScoreStore = Depends(get_score_store)) -> ScoreBoardResponse:
    return _board_response(store)


@router.delete("/scores", response_model=ScoreBoardResponse)
def clear_scores(store: ScoreStore = Depends(get_score_store)) -> ScoreBoardResponse:
    store.clear()
    return _board_response(store)
