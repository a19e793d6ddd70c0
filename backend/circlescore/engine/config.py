"""Scoring configuration — one canonical weighting per mode."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ScoringConfig:
    """Constants for both scoring modes."""

    # Below this many points the stroke scores 0
    min_points: int = 10

    # Smoothness: ~50 sampled triples per stroke, skip steps shorter than 0.1px
    smoothness_samples: int = 50
    min_step_length: float = 0.1
    smoothness_penalty: float = 0.5

    # Reference mode
    closure_gate_ratio: float = 0.4  # max start/end gap as a fraction of the radius
    deviation_penalty: float = 1.5  # score hits 0 at ~67% mean relative deviation
    reference_deviation_weight: float = 0.8
    reference_smoothness_weight: float = 0.2

    # Freeform mode
    min_inferred_radius: float = 10.0  # px; smaller loops are not judged
    radius_cv_penalty: float = 2.0
    closure_soft_ratio: float = 0.3
    freeform_radius_weight: float = 0.5
    freeform_smoothness_weight: float = 0.3
    freeform_closure_weight: float = 0.2


DEFAULT_CONFIG = ScoringConfig()
