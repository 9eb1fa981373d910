"""Ramp models - steps, hue behavior and hue families."""

from __future__ import annotations

from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field

from chromaramp.core.curves.models import ChromaCurve, HueCurve, LightnessCurve

# Clamp bounds for generated steps
MIN_LIGHTNESS = 0.05
MAX_LIGHTNESS = 0.98
MAX_CHROMA = 0.4


class Step(BaseModel):
    """One OKLCH color in a ramp.

    Attributes:
        l: Lightness, [0, 1].
        c: Chroma, [0, 0.4].
        h: Hue angle in degrees, [0, 360).
    """

    model_config = ConfigDict(extra="forbid", frozen=True, allow_inf_nan=False)

    l: float = Field(..., ge=0.0, le=1.0)
    c: float = Field(..., ge=0.0, le=MAX_CHROMA)
    h: float = Field(..., ge=0.0, lt=360.0)


class FixedHue(BaseModel):
    """Every step uses the family's base hue."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    kind: Literal["fixed"] = "fixed"


class RampedHue(BaseModel):
    """Hue follows a curve across the steps (optical hue correction)."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    kind: Literal["ramped"] = "ramped"
    curve: HueCurve


HueBehavior = Annotated[FixedHue | RampedHue, Field(discriminator="kind")]


class FamilyParameters(BaseModel):
    """Full parameter set driving one hue family's ramp.

    Attributes:
        hue: Base hue angle in degrees, [0, 360).
        lightness: Reference lightness (informational).
        chroma: Reference chroma (informational).
        lightness_curve: Lightness progression.
        chroma_curve: Chroma progression.
        hue_behavior: Fixed base hue or a hue ramp.
        gamut_aware: Clamp chroma to the sRGB boundary during generation.
    """

    model_config = ConfigDict(extra="forbid", frozen=True, allow_inf_nan=False)

    hue: float = Field(..., ge=0.0, lt=360.0)
    lightness: float = Field(default=0.5, ge=0.0, le=1.0)
    chroma: float = Field(default=0.0, ge=0.0)
    lightness_curve: LightnessCurve
    chroma_curve: ChromaCurve
    hue_behavior: HueBehavior = Field(default_factory=FixedHue)
    gamut_aware: bool = True

    @property
    def use_hue_ramping(self) -> bool:
        return isinstance(self.hue_behavior, RampedHue)

    @property
    def hue_curve(self) -> HueCurve | None:
        if isinstance(self.hue_behavior, RampedHue):
            return self.hue_behavior.curve
        return None


class HueFamily(BaseModel):
    """A named hue family and its derived step sequence.

    Steps are replaced wholesale by regeneration or bulk adjustment;
    parameters and steps are committed together.
    """

    model_config = ConfigDict(extra="forbid", validate_assignment=True)

    name: str = Field(..., min_length=1)
    params: FamilyParameters
    steps: list[Step] = Field(default_factory=list)

    @property
    def reference_index(self) -> int:
        """Index of the middle step used as reference by bulk adjustments."""
        return len(self.steps) // 2

    @property
    def reference_step(self) -> Step | None:
        if not self.steps:
            return None
        return self.steps[self.reference_index]


__all__ = [
    "FamilyParameters",
    "FixedHue",
    "HueBehavior",
    "HueFamily",
    "MAX_CHROMA",
    "MAX_LIGHTNESS",
    "MIN_LIGHTNESS",
    "RampedHue",
    "Step",
]
