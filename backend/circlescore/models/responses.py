"""API response models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"
    modes: list[str] = Field(default_factory=list)


class ReferenceResponse(BaseModel):
    size: float
    x: float
    y: float
    radius: float


class BreakdownOut(BaseModel):
    mode: str
    point_count: int
    closed: bool = False
    deviation: float | None = None
    radius_consistency: float | None = None
    smoothness: float | None = None
    closure: float | None = None


class ScoreResponse(BaseModel):
    score: float = 0.0
    percentage: int = 0
    feedback: str = ""
    accepted: bool = True
    breakdown: BreakdownOut | None = None
    new_best: bool = False
    best: int = 0
    saved: bool = False


class ScoreRecordOut(BaseModel):
    score: int
    timestamp: float


class ScoreBoardResponse(BaseModel):
    best: int = 0
    recent: list[ScoreRecordOut] = Field(default_factory=list)
