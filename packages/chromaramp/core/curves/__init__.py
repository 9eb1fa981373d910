"""Curve models, easing remaps and evaluators."""

from chromaramp.core.curves.easing import ease, get_easing
from chromaramp.core.curves.evaluators import (
    evaluate_chroma,
    evaluate_hue,
    evaluate_lightness,
    step_positions,
)
from chromaramp.core.curves.models import ChromaCurve, EasingType, HueCurve, LightnessCurve

__all__ = [
    "ChromaCurve",
    "EasingType",
    "HueCurve",
    "LightnessCurve",
    "ease",
    "evaluate_chroma",
    "evaluate_hue",
    "evaluate_lightness",
    "get_easing",
    "step_positions",
]
