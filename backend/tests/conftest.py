"""Shared test fixtures."""

from __future__ import annotations

import math

import pytest

from circlescore.engine.types import ReferenceCircle

# Guide circle used throughout: a 600px canvas would use (300, 300, 210)
CENTER = (300.0, 300.0)
RADIUS = 200.0


def circle_points(
    n: int,
    cx: float = CENTER[0],
    cy: float = CENTER[1],
    r: float = RADIUS,
    sweep: float = 2 * math.pi,
) -> list[tuple[float, float]]:
    """``n`` evenly spaced points over ``sweep`` radians, last point not repeated."""
    return [
        (cx + r * math.cos(sweep * i / n), cy + r * math.sin(sweep * i / n))
        for i in range(n)
    ]


def closed_circle_points(n: int, **kwargs) -> list[tuple[float, float]]:
    """``n`` evenly spaced points with the start repeated at the end (closure 0)."""
    pts = circle_points(n, **kwargs)
    return pts + [pts[0]]


def line_points(n: int, start=(100.0, 300.0), end=(500.0, 300.0)) -> list[tuple[float, float]]:
    return [
        (start[0] + (end[0] - start[0]) * i / (n - 1), start[1] + (end[1] - start[1]) * i / (n - 1))
        for i in range(n)
    ]


@pytest.fixture
def reference() -> ReferenceCircle:
    return ReferenceCircle(x=CENTER[0], y=CENTER[1], radius=RADIUS)


@pytest.fixture
def perfect_circle() -> list[tuple[float, float]]:
    return circle_points(360)
