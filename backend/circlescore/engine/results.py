"""Turning a raw score into what the result screen shows."""

from __future__ import annotations

import math

RETRY_MESSAGE = "Something went wrong, please retry"

# (minimum percentage, message), highest first
_FEEDBACK_TIERS: list[tuple[int, str]] = [
    (95, "Perfect! You're a circle master!"),
    (90, "Almost perfect! Impressive!"),
    (80, "Great job! Very circular!"),
    (70, "Good effort! Keep practicing!"),
    (50, "Not bad, but you can do better!"),
]
_FALLBACK_FEEDBACK = "That's more of an... abstract shape."


def to_percentage(score: float) -> int | None:
    """round(score·100) clamped to [0, 100]; None if the score is unusable."""
    if not isinstance(score, (int, float)) or not math.isfinite(score):
        return None
    if score < 0 or score > 1:
        return None
    return max(0, min(100, round(score * 100)))


def feedback_for(percentage: int) -> str:
    for threshold, message in _FEEDBACK_TIERS:
        if percentage >= threshold:
            return message
    return _FALLBACK_FEEDBACK
