"""Tests for the scoring-mode registry."""

from dataclasses import dataclass

import pytest

from circlescore.engine.registry import ModeRegistry, ModeSpec, get_registry
from circlescore.engine.types import FreeformMode, ReferenceCircle, ReferenceMode, ScoreBreakdown


@dataclass(frozen=True)
class _DummyMode:
    pass


def _noop(points, mode, config) -> ScoreBreakdown:
    return ScoreBreakdown(score=0.0, mode="dummy", point_count=len(points))


def test_register_and_get():
    reg = ModeRegistry()
    spec = ModeSpec(name="dummy", variant=_DummyMode, fn=_noop)
    reg.register(spec)
    assert reg.get("dummy") is spec
    assert reg.for_mode(_DummyMode()) is spec
    assert reg.count == 1


def test_duplicate_name_rejected():
    reg = ModeRegistry()
    reg.register(ModeSpec(name="dummy", variant=_DummyMode, fn=_noop))
    with pytest.raises(ValueError):
        reg.register(ModeSpec(name="dummy", variant=FreeformMode, fn=_noop))


def test_duplicate_variant_rejected():
    reg = ModeRegistry()
    reg.register(ModeSpec(name="a", variant=_DummyMode, fn=_noop))
    with pytest.raises(ValueError):
        reg.register(ModeSpec(name="b", variant=_DummyMode, fn=_noop))


def test_unknown_mode():
    with pytest.raises(KeyError):
        ModeRegistry().for_mode(_DummyMode())


def test_default_registry_has_both_modes():
    import circlescore.engine  # noqa: F401

    reg = get_registry()
    assert reg.names == ["freeform", "reference"]
    assert reg.for_mode(FreeformMode()).name == "freeform"
    assert reg.for_mode(ReferenceMode(ReferenceCircle(0, 0, 1))).name == "reference"
