"""CircleScore circularity scoring engine."""

from circlescore.engine.capture import StrokeRecorder, StrokeResult, reference_for_canvas
from circlescore.engine.config import DEFAULT_CONFIG, ScoringConfig
from circlescore.engine.registry import get_registry, scoring_mode
from circlescore.engine.scorer import score, score_breakdown
from circlescore.engine.types import (
    FreeformMode,
    Point,
    ReferenceCircle,
    ReferenceMode,
    ScoreBreakdown,
    ScoringMode,
)

__all__ = [
    "score",
    "score_breakdown",
    "ScoringConfig",
    "DEFAULT_CONFIG",
    "get_registry",
    "scoring_mode",
    "Point",
    "ReferenceCircle",
    "ReferenceMode",
    "FreeformMode",
    "ScoringMode",
    "ScoreBreakdown",
    "StrokeRecorder",
    "StrokeResult",
    "reference_for_canvas",
]
