"""Circularity scorer — the single public entry point.

score(points, reference) → float in [0, 1]. Pure: never mutates its inputs,
never raises, same inputs give bit-identical output.
"""

from __future__ import annotations

import logging
from typing import Any

import numpy as np

import circlescore.engine.modes  # noqa: F401  (registers scoring modes)
from circlescore.engine.config import DEFAULT_CONFIG, ScoringConfig
from circlescore.engine.registry import get_registry
from circlescore.engine.types import ScoreBreakdown, as_points, resolve_mode
from circlescore.utils.math_helpers import clamp01

logger = logging.getLogger(__name__)


def _zero(mode: str, point_count: int) -> ScoreBreakdown:
    return ScoreBreakdown(score=0.0, mode=mode, point_count=point_count)


def score_breakdown(
    stroke: Any,
    reference: Any = None,
    config: ScoringConfig | None = None,
) -> ScoreBreakdown:
    """Score a stroke and return the sub-scores alongside the final value.

    ``reference`` selects the mode: a ``ReferenceCircle`` (or ``{x, y, radius}``
    mapping, or ``ReferenceMode``) scores against that ring; ``None`` or
    ``FreeformMode()`` scores around the stroke's own centroid.
    """
    config = config or DEFAULT_CONFIG

    try:
        mode = resolve_mode(reference)
    except (TypeError, ValueError, KeyError) as e:
        logger.warning("Unreadable reference, scoring 0: %s", e)
        return _zero("invalid", 0)

    try:
        points = as_points(stroke)
    except (TypeError, ValueError, KeyError) as e:
        logger.warning("Unreadable stroke, scoring 0: %s", e)
        return _zero(mode.name, 0)

    n = len(points)
    if n < config.min_points:
        logger.debug("Stroke too short (%d < %d points)", n, config.min_points)
        return _zero(mode.name, n)

    spec = get_registry().for_mode(mode)
    with np.errstate(all="ignore"):
        result = spec.fn(points, mode, config)

    final = clamp01(result.score)
    logger.debug("Scored %d-point stroke in %s mode: %.4f", n, spec.name, final)
    if final != result.score:
        return ScoreBreakdown(**{**result.as_dict(), "score": final})
    return result


def score(stroke: Any, reference: Any = None, config: ScoringConfig | None = None) -> float:
    """Circularity of ``stroke`` in [0, 1]; 1 is a perfect circle."""
    return score_breakdown(stroke, reference, config).score
