"""Scoring-mode registry — each mode is a standalone function registered via decorator.

Usage:
    @scoring_mode(name="reference", variant=ReferenceMode)
    def reference_mode(points, mode, config) -> ScoreBreakdown:
        ...

The scorer dispatches on the type of the mode value it is given, so adding a
mode = one new variant class + one decorated function.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable

if TYPE_CHECKING:
    import numpy as np
    from numpy.typing import NDArray

    from circlescore.engine.config import ScoringConfig
    from circlescore.engine.types import ScoreBreakdown

    ModeFn = Callable[[NDArray[np.float64], object, ScoringConfig], ScoreBreakdown]

logger = logging.getLogger(__name__)


@dataclass
class ModeSpec:
    name: str
    variant: type
    fn: ModeFn
    description: str = ""


class ModeRegistry:
    """Registry of scoring modes, keyed by name and by variant type."""

    def __init__(self) -> None:
        self._modes: dict[str, ModeSpec] = {}

    def register(self, spec: ModeSpec) -> None:
        if spec.name in self._modes:
            raise ValueError(f"Duplicate scoring mode: {spec.name}")
        for other in self._modes.values():
            if other.variant is spec.variant:
                raise ValueError(
                    f"Variant {spec.variant.__name__} already handled by {other.name}"
                )
        self._modes[spec.name] = spec
        logger.debug("Registered scoring mode %s (%s)", spec.name, spec.variant.__name__)

    def get(self, name: str) -> ModeSpec:
        return self._modes[name]

    def for_mode(self, mode: object) -> ModeSpec:
        for spec in self._modes.values():
            if isinstance(mode, spec.variant):
                return spec
        raise KeyError(f"No scoring mode registered for {type(mode).__name__}")

    def all(self) -> list[ModeSpec]:
        return sorted(self._modes.values(), key=lambda s: s.name)

    @property
    def names(self) -> list[str]:
        return [s.name for s in self.all()]

    @property
    def count(self) -> int:
        return len(self._modes)


# Module-level singleton
_registry = ModeRegistry()


def get_registry() -> ModeRegistry:
    return _registry


def scoring_mode(*, name: str, variant: type, description: str = ""):
    """Decorator to register a scoring mode function."""

    def decorator(fn: ModeFn) -> ModeFn:
        _registry.register(ModeSpec(name=name, variant=variant, fn=fn, description=description))
        return fn

    return decorator
