"""Reference mode — trace a fixed guide circle.

Hard closure gate at 0.4·r, then 0.8·deviation + 0.2·smoothness.
"""

from __future__ import annotations

import logging

import numpy as np
from numpy.typing import NDArray

from circlescore.engine.config import ScoringConfig
from circlescore.engine.registry import scoring_mode
from circlescore.engine.subscores import closure_gate, deviation_score, smoothness_score
from circlescore.engine.types import ReferenceMode, ScoreBreakdown
from circlescore.utils.math_helpers import clamp01

logger = logging.getLogger(__name__)


@scoring_mode(
    name=ReferenceMode.name,
    variant=ReferenceMode,
    description="Score against a fixed reference circle",
)
def reference_mode(
    points: NDArray[np.float64],
    mode: ReferenceMode,
    config: ScoringConfig,
) -> ScoreBreakdown:
    closed = closure_gate(points, mode.circle, config)
    deviation = deviation_score(points, mode.circle, config)
    smoothness = smoothness_score(points, config)

    if closed:
        final = clamp01(
            deviation * config.reference_deviation_weight
            + smoothness * config.reference_smoothness_weight
        )
    else:
        logger.debug("Stroke not closed (%d points), scoring 0", len(points))
        final = 0.0

    return ScoreBreakdown(
        score=final,
        mode=ReferenceMode.name,
        point_count=len(points),
        closed=closed,
        deviation=deviation,
        smoothness=smoothness,
    )
