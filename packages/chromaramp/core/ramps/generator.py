"""Ramp generator.

Turns a family's parameters into an ordered sequence of OKLCH steps:

1. Evaluate the lightness and chroma curves (and the hue curve when the
   family ramps its hue; otherwise every step uses the base hue).
2. Clamp lightness to [0.05, 0.98] and chroma to [0, 0.4]; wrap hue into
   [0, 360).
3. For gamut-aware families, cap chroma at the sRGB boundary.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from chromaramp.core.color.gamut import GamutBoundary
from chromaramp.core.curves.evaluators import evaluate_chroma, evaluate_hue, evaluate_lightness
from chromaramp.core.errors import ConfigurationError
from chromaramp.core.ramps.models import (
    MAX_CHROMA,
    MAX_LIGHTNESS,
    MIN_LIGHTNESS,
    FamilyParameters,
    HueFamily,
    Step,
)
from chromaramp.core.utils.logging import log_performance

logger = logging.getLogger(__name__)

MIN_STEP_COUNT = 2


def clamp(x: float, lo: float, hi: float) -> float:
    return max(lo, min(hi, x))


def wrap_hue(h: float) -> float:
    """Wrap a hue angle into [0, 360)."""
    wrapped = h % 360.0
    # -1e-17 % 360.0 == 360.0
    return 0.0 if wrapped >= 360.0 else wrapped


def validate_step_count(step_count: int) -> None:
    if step_count < MIN_STEP_COUNT:
        raise ConfigurationError(f"step_count must be >= {MIN_STEP_COUNT}, got {step_count}")


class RampGenerator:
    """Generates hue-family ramps, clamping to the sRGB gamut when asked.

    Args:
        boundary: Boundary search used for gamut-aware families.

    Example:
        >>> generator = RampGenerator(build_gamut_boundary("formula"))
        >>> steps = generator.compute(params, 12)
        >>> len(steps)
        12
    """

    def __init__(self, boundary: GamutBoundary) -> None:
        self.boundary = boundary

    def compute(self, params: FamilyParameters, step_count: int) -> list[Step]:
        """Compute steps for a parameter set without touching any family.

        Raises:
            ConfigurationError: If step_count < 2 or a curve is malformed.
        """
        validate_step_count(step_count)

        lightness = evaluate_lightness(params.lightness_curve, step_count)
        chroma = evaluate_chroma(params.chroma_curve, step_count)
        hue_curve = params.hue_curve
        hues = evaluate_hue(hue_curve, step_count) if hue_curve is not None else None

        steps: list[Step] = []
        for i in range(step_count):
            l = clamp(lightness[i], MIN_LIGHTNESS, MAX_LIGHTNESS)
            c = clamp(chroma[i], 0.0, MAX_CHROMA)
            h = wrap_hue(hues[i]) if hues is not None else params.hue

            if params.gamut_aware:
                c = min(c, self.boundary.find_max_chroma(l, h))

            steps.append(Step(l=l, c=c, h=h))

        return steps

    def generate(self, family: HueFamily, step_count: int) -> list[Step]:
        """Regenerate a family's steps in place and return them."""
        steps = self.compute(family.params, step_count)
        family.steps = steps
        logger.debug(f"Generated {step_count} steps for {family.name}")
        return steps

    @log_performance
    def regenerate_all(self, families: Iterable[HueFamily], step_count: int) -> None:
        """Regenerate every family; nothing is committed unless all succeed."""
        families = list(families)
        computed = [self.compute(family.params, step_count) for family in families]
        for family, steps in zip(families, computed, strict=True):
            family.steps = steps
        logger.debug(f"Regenerated {len(families)} families at {step_count} steps")


__all__ = [
    "MIN_STEP_COUNT",
    "RampGenerator",
    "clamp",
    "validate_step_count",
    "wrap_hue",
]
