"""CircleScore: how close a hand-drawn stroke comes to a circle."""

from circlescore.engine import (
    FreeformMode,
    Point,
    ReferenceCircle,
    ReferenceMode,
    ScoreBreakdown,
    StrokeRecorder,
    score,
    score_breakdown,
)

__version__ = "0.1.0"

__all__ = [
    "score",
    "score_breakdown",
    "Point",
    "ReferenceCircle",
    "ReferenceMode",
    "FreeformMode",
    "ScoreBreakdown",
    "StrokeRecorder",
]
