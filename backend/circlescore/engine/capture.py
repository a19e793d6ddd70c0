"""Stroke capture — turns raw pointer samples into a scorable stroke.

One ``StrokeRecorder`` per drawing surface. It owns the in-progress gesture,
drops samples closer than ``min_distance`` to the last kept point, stops
growing at ``max_points``, and refuses strokes shorter than ``min_points``.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass

from circlescore.engine.types import Point, ReferenceCircle

logger = logging.getLogger(__name__)

INCOMPLETE_FEEDBACK = "Draw a complete circle"

# Canvas is square: min(viewport - 40, 600) px, never below 100 px; guide ring at 35% of its size
MIN_CANVAS_SIZE = 100.0
MAX_CANVAS_SIZE = 600.0
CANVAS_MARGIN = 40.0
REFERENCE_RADIUS_RATIO = 0.35


@dataclass(frozen=True)
class StrokeResult:
    points: tuple[Point, ...] = ()
    feedback: str = ""

    @property
    def accepted(self) -> bool:
        return not self.feedback


class StrokeRecorder:
    """Collects one gesture at a time."""

    def __init__(
        self,
        min_distance: float = 2.0,
        max_points: int = 2000,
        min_points: int = 20,
    ) -> None:
        if max_points < min_points:
            raise ValueError("max_points must be >= min_points")
        self.min_distance = min_distance
        self.max_points = max_points
        self.min_points = min_points
        self._points: list[Point] = []
        self._recording = False

    @property
    def is_recording(self) -> bool:
        return self._recording

    @property
    def points(self) -> tuple[Point, ...]:
        return tuple(self._points)

    def begin(self, x: float, y: float) -> None:
        """Start a new gesture at (x, y), discarding anything recorded before."""
        self._points = []
        self._recording = True
        self.add(x, y)

    def add(self, x: float, y: float) -> bool:
        """Offer a pointer sample. Returns True if it was kept."""
        if not self._recording:
            return False
        if not (math.isfinite(x) and math.isfinite(y)):
            return False
        if len(self._points) >= self.max_points:
            return False
        if self._points:
            last = self._points[-1]
            if math.hypot(x - last.x, y - last.y) < self.min_distance:
                return False
        self._points.append(Point(float(x), float(y)))
        return True

    def finish(self) -> StrokeResult:
        """End the gesture (pointer released or left the canvas)."""
        if not self._recording:
            return StrokeResult(feedback=INCOMPLETE_FEEDBACK)
        self._recording = False
        points = tuple(self._points)
        self._points = []
        if len(points) < self.min_points:
            logger.debug("Gesture too short: %d points", len(points))
            return StrokeResult(feedback=INCOMPLETE_FEEDBACK)
        return StrokeResult(points=points)


def clamp_canvas_size(size: float) -> float:
    """Fit a requested canvas edge into ``[MIN_CANVAS_SIZE, MAX_CANVAS_SIZE]``."""
    if not math.isfinite(size) or size <= 0:
        raise ValueError(f"Canvas size must be positive, got {size}")
    return min(max(size, MIN_CANVAS_SIZE), MAX_CANVAS_SIZE)


def canvas_size_for_viewport(viewport_width: float) -> float:
    """Square canvas edge for a given viewport width."""
    return min(max(viewport_width - CANVAS_MARGIN, MIN_CANVAS_SIZE), MAX_CANVAS_SIZE)


def reference_for_canvas(size: float) -> ReferenceCircle:
    """Guide circle centred on a ``size``×``size`` canvas, after clamping ``size``."""
    size = clamp_canvas_size(size)
    return ReferenceCircle(x=size / 2, y=size / 2, radius=size * REFERENCE_RADIUS_RATIO)
