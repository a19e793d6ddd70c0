"""Leaf-node geometry helpers. No engine imports.

Point sets are Nx2 float64 arrays. Rows may hold NaN/inf coordinates, so every
helper here either masks them out or lets them propagate for the caller to map.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray


def finite_mask(points: NDArray[np.float64]) -> NDArray[np.bool_]:
    """True for rows whose x and y are both finite."""
    if len(points) == 0:
        return np.zeros(0, dtype=bool)
    return np.all(np.isfinite(points), axis=1)


def centroid(points: NDArray[np.float64]) -> tuple[float, float]:
    """Centroid of the finite points. (nan, nan) when there are none."""
    finite = points[finite_mask(points)]
    if len(finite) == 0:
        return (float("nan"), float("nan"))
    return (float(np.mean(finite[:, 0])), float(np.mean(finite[:, 1])))


def distances_to(points: NDArray[np.float64], center: tuple[float, float]) -> NDArray[np.float64]:
    """Euclidean distance from ``center`` to each point."""
    cx, cy = center
    return np.hypot(points[:, 0] - cx, points[:, 1] - cy)


def closure_distance(points: NDArray[np.float64]) -> float:
    """Gap between the first and last point of a stroke."""
    if len(points) == 0:
        return float("nan")
    dx, dy = points[-1] - points[0]
    return float(np.hypot(dx, dy))


def sampling_stride(n: int, target_samples: int = 50) -> int:
    """Index step so that roughly ``target_samples`` triples are inspected."""
    return max(1, n // target_samples)


def turn_angles(
    points: NDArray[np.float64],
    stride: int,
    min_step: float = 0.1,
) -> NDArray[np.float64]:
    """Unsigned turn angle (radians) at every ``stride``-th point.

    Each sample compares the direction prev→curr with curr→next, where prev and
    next sit ``stride`` indices away. Samples whose direction vectors are shorter
    than ``min_step`` or non-finite are dropped, so the result length is the
    number of valid samples.
    """
    n = len(points)
    if n < 3 or stride < 1:
        return np.empty(0)

    idx = np.arange(stride, n - stride, stride)
    if len(idx) == 0:
        return np.empty(0)

    v1 = points[idx] - points[idx - stride]
    v2 = points[idx + stride] - points[idx]

    with np.errstate(all="ignore"):
        mag1 = np.hypot(v1[:, 0], v1[:, 1])
        mag2 = np.hypot(v2[:, 0], v2[:, 1])
        valid = (
            np.isfinite(mag1) & np.isfinite(mag2) & (mag1 >= min_step) & (mag2 >= min_step)
        )
        dot = np.sum(v1[valid] * v2[valid], axis=1)
        cos = dot / (mag1[valid] * mag2[valid])

    # Overflowing products give nan here even when both magnitudes are finite
    cos = cos[np.isfinite(cos)]
    return np.arccos(np.clip(cos, -1.0, 1.0))
