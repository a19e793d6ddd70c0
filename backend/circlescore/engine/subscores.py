"""Sub-scores shared by the scoring modes. Each returns a value in [0, 1].

Every function degrades to 0 on degenerate input instead of raising.
"""

from __future__ import annotations

import math

import numpy as np
from numpy.typing import NDArray

from circlescore.engine.config import ScoringConfig
from circlescore.engine.types import ReferenceCircle
from circlescore.utils.geometry import (
    closure_distance,
    distances_to,
    finite_mask,
    sampling_stride,
    turn_angles,
)
from circlescore.utils.math_helpers import coefficient_of_variation, linear_penalty

# Worst-case per-point deviation, used for non-finite samples
_MAX_DEVIATION = 1.0


def _valid_circle(circle: ReferenceCircle) -> bool:
    return (
        math.isfinite(circle.x)
        and math.isfinite(circle.y)
        and math.isfinite(circle.radius)
        and circle.radius > 0
    )


def closure_gate(points: NDArray[np.float64], circle: ReferenceCircle, config: ScoringConfig) -> bool:
    """True when the stroke ends within ``closure_gate_ratio`` radii of its start."""
    if not _valid_circle(circle):
        return False
    gap = closure_distance(points)
    return math.isfinite(gap) and gap <= circle.radius * config.closure_gate_ratio


def deviation_score(points: NDArray[np.float64], circle: ReferenceCircle, config: ScoringConfig) -> float:
    """How tightly the points hug the reference ring.

    Mean of |dist - r| / r over all points, mapped through a linear penalty.
    """
    if len(points) == 0 or not _valid_circle(circle):
        return 0.0

    with np.errstate(all="ignore"):
        deviations = np.abs(distances_to(points, circle.center) - circle.radius) / circle.radius
    deviations = np.where(finite_mask(points), deviations, _MAX_DEVIATION)

    return linear_penalty(float(np.mean(deviations)), config.deviation_penalty)


def smoothness_score(points: NDArray[np.float64], config: ScoringConfig) -> float:
    """Compare the accumulated turning with that of a circle traversed at the same rate.

    A full loop turns 2π over N points, so a turn sampled across ``stride``
    steps should contribute 2π·stride/N.
    """
    n = len(points)
    if n < 3:
        return 0.0

    stride = sampling_stride(n, config.smoothness_samples)
    angles = turn_angles(points, stride, config.min_step_length)
    valid = len(angles)
    if valid == 0:
        return 0.0

    expected = 2 * math.pi * valid * stride / n
    actual = float(np.sum(angles))
    return linear_penalty(abs(actual - expected) / expected, config.smoothness_penalty)


def radius_consistency(
    points: NDArray[np.float64],
    center: tuple[float, float],
    config: ScoringConfig,
) -> tuple[float, float]:
    """Score how constant the distance to ``center`` is. Returns (score, avg_radius).

    Non-finite points count as sitting on the center (distance 0).
    """
    if len(points) == 0 or not all(math.isfinite(c) for c in center):
        return 0.0, float("nan")

    with np.errstate(all="ignore"):
        distances = distances_to(points, center)
    distances = np.where(finite_mask(points) & np.isfinite(distances), distances, 0.0)

    avg_radius = float(np.mean(distances))
    if not math.isfinite(avg_radius) or avg_radius < config.min_inferred_radius:
        return 0.0, avg_radius

    cv = coefficient_of_variation(distances)
    return linear_penalty(cv, config.radius_cv_penalty), avg_radius


def closure_score(points: NDArray[np.float64], avg_radius: float, config: ScoringConfig) -> float:
    """Soft closure: 1 when the ends meet, 0 once the gap reaches 0.3·avg_radius."""
    if not math.isfinite(avg_radius) or avg_radius <= 0:
        return 0.0
    gap = closure_distance(points)
    return linear_penalty(gap / (avg_radius * config.closure_soft_ratio), 1.0)
