"""Freeform mode — no guide circle, judge the loop around its own centroid.

0.5·radius consistency + 0.3·smoothness + 0.2·soft closure.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray

from circlescore.engine.config import ScoringConfig
from circlescore.engine.registry import scoring_mode
from circlescore.engine.subscores import closure_score, radius_consistency, smoothness_score
from circlescore.engine.types import FreeformMode, ScoreBreakdown
from circlescore.utils.geometry import centroid
from circlescore.utils.math_helpers import clamp01


@scoring_mode(
    name=FreeformMode.name,
    variant=FreeformMode,
    description="Score circularity around the inferred centroid",
)
def freeform_mode(
    points: NDArray[np.float64],
    mode: FreeformMode,
    config: ScoringConfig,
) -> ScoreBreakdown:
    radius, avg_radius = radius_consistency(points, centroid(points), config)

    # Too small or unreadable to be a meaningful loop
    if not avg_radius >= config.min_inferred_radius:
        return ScoreBreakdown(
            score=0.0,
            mode=FreeformMode.name,
            point_count=len(points),
            radius_consistency=0.0,
        )

    smoothness = smoothness_score(points, config)
    closure = closure_score(points, avg_radius, config)
    final = clamp01(
        radius * config.freeform_radius_weight
        + smoothness * config.freeform_smoothness_weight
        + closure * config.freeform_closure_weight
    )

    return ScoreBreakdown(
        score=final,
        mode=FreeformMode.name,
        point_count=len(points),
        closed=closure > 0.0,
        radius_consistency=radius,
        smoothness=smoothness,
        closure=closure,
    )
