"""Ramp models, generation and bulk adjustments."""

from chromaramp.core.ramps.adjust import adjust_chroma, adjust_hue, adjust_lightness
from chromaramp.core.ramps.generator import RampGenerator, wrap_hue
from chromaramp.core.ramps.models import (
    FamilyParameters,
    FixedHue,
    HueBehavior,
    HueFamily,
    RampedHue,
    Step,
)

__all__ = [
    # Models
    "FamilyParameters",
    "FixedHue",
    "HueBehavior",
    "HueFamily",
    "RampedHue",
    "Step",
    # Generation
    "RampGenerator",
    "wrap_hue",
    # Adjustments
    "adjust_chroma",
    "adjust_hue",
    "adjust_lightness",
]
