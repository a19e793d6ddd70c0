"""Stroke, reference circle and scoring-mode types.

A stroke reaches the scorer as any ordered sequence of points (``Point``,
``(x, y)`` pairs, ``{"x": .., "y": ..}`` mappings) or an Nx2 array, and is
copied into a float64 array before any math runs.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import asdict, dataclass
from typing import Any, ClassVar, Union

import numpy as np
from numpy.typing import NDArray


@dataclass(frozen=True)
class Point:
    x: float
    y: float


@dataclass(frozen=True)
class ReferenceCircle:
    """The guide circle the user is asked to trace."""

    x: float
    y: float
    radius: float

    @property
    def center(self) -> tuple[float, float]:
        return (self.x, self.y)


@dataclass(frozen=True)
class ReferenceMode:
    """Judge the stroke against a fixed target ring."""

    circle: ReferenceCircle
    name: ClassVar[str] = "reference"


@dataclass(frozen=True)
class FreeformMode:
    """Judge the stroke on its own, around its inferred centroid."""

    name: ClassVar[str] = "freeform"


ScoringMode = Union[ReferenceMode, FreeformMode]


@dataclass(frozen=True)
class ScoreBreakdown:
    """Final score plus the sub-scores it was blended from.

    Sub-scores that a mode does not use stay ``None``.
    """

    score: float
    mode: str
    point_count: int
    closed: bool = False
    deviation: float | None = None
    radius_consistency: float | None = None
    smoothness: float | None = None
    closure: float | None = None

    def as_dict(self) -> dict[str, Any]:
        return asdict(self)


def _coords(point: Any) -> tuple[float, float]:
    if isinstance(point, Point):
        return (point.x, point.y)
    if isinstance(point, Mapping):
        return (float(point["x"]), float(point["y"]))
    x, y = point
    return (float(x), float(y))


def as_points(stroke: Any) -> NDArray[np.float64]:
    """Copy a stroke into an Nx2 float64 array.

    Raises ValueError/TypeError/KeyError for input that cannot be read as points.
    """
    if isinstance(stroke, np.ndarray):
        arr = np.array(stroke, dtype=np.float64)
        if arr.size == 0:
            return np.empty((0, 2))
    else:
        rows = [_coords(p) for p in stroke]
        if not rows:
            return np.empty((0, 2))
        arr = np.array(rows, dtype=np.float64)

    if arr.ndim != 2 or arr.shape[1] != 2:
        raise ValueError(f"Expected Nx2 points, got shape {arr.shape}")
    return arr


def resolve_mode(reference: Any) -> ScoringMode:
    """Turn the caller's ``reference`` argument into a scoring mode.

    ``None`` selects freeform mode. A ``ReferenceCircle`` or a mapping with
    ``x``/``y``/``radius`` selects reference mode. Circle fields that are not
    numbers raise ``TypeError``.
    """
    if reference is None:
        return FreeformMode()
    if isinstance(reference, FreeformMode):
        return reference
    if isinstance(reference, ReferenceMode):
        return ReferenceMode(_checked_circle(reference.circle))
    if isinstance(reference, ReferenceCircle):
        return ReferenceMode(_checked_circle(reference))
    if isinstance(reference, Mapping):
        return ReferenceMode(
            ReferenceCircle(
                x=float(reference["x"]),
                y=float(reference["y"]),
                radius=float(reference["radius"]),
            )
        )
    raise TypeError(f"Unsupported reference: {type(reference).__name__}")


def _checked_circle(circle: Any) -> ReferenceCircle:
    # Dataclass fields are not type-checked on construction
    if not isinstance(circle, ReferenceCircle):
        raise TypeError(f"ReferenceMode needs a ReferenceCircle, got {type(circle).__name__}")
    fields = (circle.x, circle.y, circle.radius)
    for value in fields:
        if isinstance(value, bool) or not isinstance(value, (int, float, np.number)):
            raise TypeError(f"Reference circle fields must be numbers, got {type(value).__name__}")
    x, y, radius = (float(v) for v in fields)
    return ReferenceCircle(x=x, y=y, radius=radius)
