"""Health check + meta endpoints."""

from __future__ import annotations

from fastapi import APIRouter

from circlescore import __version__
from circlescore.engine.registry import get_registry
from circlescore.models.responses import HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    return HealthResponse(
        status="ok",
        version=__version__,
        modes=get_registry().names,
    )
