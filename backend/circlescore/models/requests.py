"""API request models."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field, model_validator

# Upper bound on a submitted stroke; the recorder itself caps at 2000
MAX_REQUEST_POINTS = 10_000


class PointIn(BaseModel):
    # Plain floats: NaN/inf are scored as worst-case, not rejected here
    x: float
    y: float


class ReferenceIn(BaseModel):
    x: float = Field(..., description="Center x (canvas px)")
    y: float = Field(..., description="Center y (canvas px)")
    radius: float = Field(..., description="Radius (canvas px)")


class ScoreRequest(BaseModel):
    points: list[PointIn] = Field(
        ...,
        max_length=MAX_REQUEST_POINTS,
        description="Stroke samples in drawing order",
    )
    reference: ReferenceIn | None = Field(
        default=None,
        description="Guide circle; required in reference mode",
    )
    mode: Literal["reference", "freeform"] | None = Field(
        default=None,
        description="Defaults to reference when a reference is given, else freeform",
    )
    save: bool = Field(default=True, description="Record the result on the score board")

    @model_validator(mode="after")
    def _reference_for_mode(self) -> ScoreRequest:
        if self.mode == "reference" and self.reference is None:
            raise ValueError("reference mode requires a reference circle")
        return self

    @property
    def resolved_mode(self) -> str:
        if self.mode is not None:
            return self.mode
        return "reference" if self.reference is not None else "freeform"
