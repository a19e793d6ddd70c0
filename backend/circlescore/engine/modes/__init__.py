"""Scoring modes. Importing this package registers every mode."""

from circlescore.engine.modes import freeform, reference

__all__ = ["freeform", "reference"]
