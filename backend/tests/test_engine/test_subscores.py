"""Tests for the individual sub-scores."""

from __future__ import annotations

import numpy as np
import pytest

from circlescore.engine.config import DEFAULT_CONFIG
from circlescore.engine.subscores import (
    closure_gate,
    closure_score,
    deviation_score,
    radius_consistency,
    smoothness_score,
)
from circlescore.engine.types import ReferenceCircle
from tests.conftest import CENTER, RADIUS, circle_points, closed_circle_points, line_points

REF = ReferenceCircle(x=CENTER[0], y=CENTER[1], radius=RADIUS)


def _arr(points):
    return np.array(points, dtype=np.float64)


def test_deviation_on_ring_is_one():
    assert deviation_score(_arr(circle_points(100)), REF, DEFAULT_CONFIG) == pytest.approx(1.0)


def test_deviation_linear_penalty():
    # Every point at 1.5·r: mean relative deviation 0.5 → 1 - 0.75
    pts = _arr(circle_points(100, r=1.5 * RADIUS))
    assert deviation_score(pts, REF, DEFAULT_CONFIG) == pytest.approx(0.25)


def test_deviation_floors_at_zero():
    pts = _arr([CENTER] * 20)
    assert deviation_score(pts, REF, DEFAULT_CONFIG) == 0.0


def test_deviation_non_finite_point_counts_as_one():
    pts = _arr(circle_points(10))
    pts[4] = [np.nan, np.nan]
    # mean deviation 0.1 → 1 - 0.15
    assert deviation_score(pts, REF, DEFAULT_CONFIG) == pytest.approx(0.85)


def test_deviation_invalid_radius():
    pts = _arr(circle_points(20))
    assert deviation_score(pts, ReferenceCircle(300, 300, 0), DEFAULT_CONFIG) == 0.0
    assert deviation_score(pts, ReferenceCircle(np.nan, 300, 200), DEFAULT_CONFIG) == 0.0


def test_closure_gate_threshold():
    assert closure_gate(_arr(line_points(20, end=(179.0, 300.0))), REF, DEFAULT_CONFIG)
    assert not closure_gate(_arr(line_points(20, end=(181.0, 300.0))), REF, DEFAULT_CONFIG)


def test_smoothness_circle_is_one():
    assert smoothness_score(_arr(circle_points(360)), DEFAULT_CONFIG) == pytest.approx(1.0)
    assert smoothness_score(_arr(closed_circle_points(100)), DEFAULT_CONFIG) > 0.99


def test_smoothness_straight_line_is_half():
    # No turning at all: deviation from expected turning is 1 → 1 - 0.5
    assert smoothness_score(_arr(line_points(60)), DEFAULT_CONFIG) == pytest.approx(0.5, abs=1e-6)


def test_smoothness_zigzag_is_zero():
    zigzag = _arr([(i * 10.0, (i % 2) * 10.0) for i in range(60)])
    assert smoothness_score(zigzag, DEFAULT_CONFIG) == 0.0


def test_smoothness_degenerate_inputs():
    assert smoothness_score(_arr([(0.0, 0.0), (1.0, 1.0)]), DEFAULT_CONFIG) == 0.0
    assert smoothness_score(_arr([(5.0, 5.0)] * 30), DEFAULT_CONFIG) == 0.0


def test_smoothness_skips_tiny_steps():
    # Steps of 0.05px are below the 0.1px threshold
    jitter = _arr([(i * 0.05, 0.0) for i in range(40)])
    assert smoothness_score(jitter, DEFAULT_CONFIG) == 0.0


def test_radius_consistency_circle():
    value, avg = radius_consistency(_arr(circle_points(100)), CENTER, DEFAULT_CONFIG)
    assert value == pytest.approx(1.0)
    assert avg == pytest.approx(RADIUS)


def test_radius_consistency_small_radius():
    value, avg = radius_consistency(_arr(circle_points(100, r=4.0)), CENTER, DEFAULT_CONFIG)
    assert value == 0.0
    assert avg == pytest.approx(4.0)


def test_radius_consistency_bad_center():
    value, _ = radius_consistency(_arr(circle_points(20)), (np.nan, 0.0), DEFAULT_CONFIG)
    assert value == 0.0


def test_closure_score_soft():
    closed = _arr(closed_circle_points(50))
    assert closure_score(closed, RADIUS, DEFAULT_CONFIG) == pytest.approx(1.0)
    # Gap of 30px against a 0.3·200 = 60px tolerance
    half_gap = _arr(line_points(20, end=(130.0, 300.0)))
    assert closure_score(half_gap, RADIUS, DEFAULT_CONFIG) == pytest.approx(0.5)
    assert closure_score(closed, 0.0, DEFAULT_CONFIG) == 0.0
