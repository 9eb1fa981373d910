"""Curve parameter models for lightness, chroma and hue ramps."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class EasingType(str, Enum):
    """Easing remap applied to the normalized step position.

    Attributes:
        LINEAR: t' = t
        EASE_IN: t' = t^2
        EASE_OUT: t' = 1 - (1 - t)^2
        S_CURVE: quadratic ease-in-out
    """

    LINEAR = "linear"
    EASE_IN = "easeIn"
    EASE_OUT = "easeOut"
    S_CURVE = "sCurve"


class LightnessCurve(BaseModel):
    """Lightness progression from the first to the last step.

    Attributes:
        start: Lightness of the first step, [0, 1].
        end: Lightness of the last step, [0, 1].
        type: Easing remap between start and end.
    """

    model_config = ConfigDict(extra="forbid", frozen=True, allow_inf_nan=False)

    start: float = Field(..., ge=0.0, le=1.0)
    end: float = Field(..., ge=0.0, le=1.0)
    type: EasingType = EasingType.LINEAR


class ChromaCurve(BaseModel):
    """Piecewise-linear chroma through (0, start), (peak_position, peak), (1, end).

    Attributes:
        start: Chroma at the first step.
        peak: Chroma at peak_position.
        end: Chroma at the last step.
        peak_position: Normalized position of the peak, strictly inside (0, 1).
    """

    model_config = ConfigDict(extra="forbid", frozen=True, allow_inf_nan=False)

    start: float = Field(..., ge=0.0)
    peak: float = Field(..., ge=0.0)
    end: float = Field(..., ge=0.0)
    peak_position: float = Field(..., gt=0.0, lt=1.0)


class HueCurve(BaseModel):
    """Hue angle progression in degrees (used for hue ramping)."""

    model_config = ConfigDict(extra="forbid", frozen=True, allow_inf_nan=False)

    start: float
    end: float
    type: EasingType = EasingType.LINEAR


__all__ = [
    "ChromaCurve",
    "EasingType",
    "HueCurve",
    "LightnessCurve",
]
