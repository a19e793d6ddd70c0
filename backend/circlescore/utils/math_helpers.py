"""Math helpers — CV, clamping, linear penalties. No engine imports."""

from __future__ import annotations

import math

import numpy as np
from numpy.typing import NDArray


def coefficient_of_variation(values: NDArray[np.float64]) -> float:
    """CV = std / mean (population std). inf when the mean is ~0 or undefined."""
    if len(values) == 0:
        return float("inf")
    mean = float(np.mean(values))
    if not math.isfinite(mean) or abs(mean) < 1e-10:
        return float("inf")
    return float(np.std(values) / mean)


def clamp01(value: float) -> float:
    """Clamp to [0, 1]. NaN maps to 0."""
    if math.isnan(value):
        return 0.0
    return min(1.0, max(0.0, value))


def linear_penalty(error: float, slope: float) -> float:
    """max(0, 1 - slope·error), with a non-finite error scoring 0."""
    if not math.isfinite(error):
        return 0.0
    return max(0.0, 1.0 - slope * error)
