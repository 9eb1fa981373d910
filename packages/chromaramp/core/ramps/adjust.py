"""Bulk adjustments applied to an already generated ramp.

These bypass the curve evaluators and never re-run gamut clamping, so they
stay cheap for interactive repositioning. The reference step is the middle
step (``len(steps) // 2``).
"""

from __future__ import annotations

import logging

from chromaramp.core.errors import ConfigurationError
from chromaramp.core.ramps.generator import clamp
from chromaramp.core.ramps.models import MAX_CHROMA, FixedHue, HueFamily, Step

logger = logging.getLogger(__name__)


def _require_steps(family: HueFamily) -> Step:
    reference = family.reference_step
    if reference is None:
        raise ConfigurationError(f"Family {family.name!r} has no generated steps to adjust")
    return reference


def adjust_lightness(family: HueFamily, value: float) -> list[Step]:
    """Shift every step's lightness so the reference step lands on value.

    Each shifted lightness is clamped to [0, 1].

    Raises:
        ConfigurationError: If value is outside [0, 1] or the family is empty.
    """
    if not 0.0 <= value <= 1.0:
        raise ConfigurationError(f"Target lightness must be in [0, 1], got {value}")
    reference = _require_steps(family)

    offset = value - reference.l
    family.steps = [
        Step(l=clamp(s.l + offset, 0.0, 1.0), c=s.c, h=s.h) for s in family.steps
    ]
    logger.debug(f"Shifted {family.name} lightness by {offset:+.3f}")
    return family.steps


def adjust_chroma(family: HueFamily, value: float) -> list[Step]:
    """Scale every step's chroma so the reference step lands on value.

    The ratio is 1 when the reference chroma is 0. Each scaled chroma is
    clamped to [0, 0.4].

    Raises:
        ConfigurationError: If value is outside [0, 0.4] or the family is empty.
    """
    if not 0.0 <= value <= MAX_CHROMA:
        raise ConfigurationError(f"Target chroma must be in [0, {MAX_CHROMA}], got {value}")
    reference = _require_steps(family)

    ratio = value / reference.c if reference.c > 0 else 1.0
    family.steps = [
        Step(l=s.l, c=clamp(s.c * ratio, 0.0, MAX_CHROMA), h=s.h) for s in family.steps
    ]
    logger.debug(f"Scaled {family.name} chroma by x{ratio:.3f}")
    return family.steps


def adjust_hue(family: HueFamily, value: float) -> list[Step]:
    """Set the base hue and every step's hue to value.

    Any hue ramp is discarded; the family switches to a fixed hue.

    Raises:
        ConfigurationError: If value is outside [0, 360).
    """
    if not 0.0 <= value < 360.0:
        raise ConfigurationError(f"Hue must be in [0, 360), got {value}")

    params = family.params.model_copy(update={"hue": value, "hue_behavior": FixedHue()})
    steps = [Step(l=s.l, c=s.c, h=value) for s in family.steps]
    family.params = params
    family.steps = steps
    logger.debug(f"Set {family.name} hue to {value:.1f}")
    return family.steps


__all__ = [
    "adjust_chroma",
    "adjust_hue",
    "adjust_lightness",
]
