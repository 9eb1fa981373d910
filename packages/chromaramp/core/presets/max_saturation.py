"""Max-saturation preset calculator.

Samples the sRGB gamut boundary along a linear lightness ramp at each
family's base hue and derives a chroma curve that follows it, scaled down by
a safety margin.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from chromaramp.core.curves.evaluators import evaluate_lightness
from chromaramp.core.curves.models import ChromaCurve, LightnessCurve
from chromaramp.core.errors import ConfigurationError, reraise_validation
from chromaramp.core.presets.models import Preset
from chromaramp.core.ramps.models import FamilyParameters
from chromaramp.core.utils.logging import log_performance

if TYPE_CHECKING:
    from chromaramp.core.store import PaletteStore

logger = logging.getLogger(__name__)

# Peak position must stay strictly inside (0, 1)
_MIN_PEAK_POSITION = 0.01
_MAX_PEAK_POSITION = 0.99


@log_performance
def calculate_max_saturation_preset(
    store: PaletteStore,
    *,
    steps: int = 12,
    l_start: float = 0.95,
    l_end: float = 0.20,
    safety: float = 0.95,
    preset_id: str = "max",
    name: str = "Max Saturation",
) -> Preset:
    """Build a preset whose chroma curves hug each family's gamut boundary.

    Args:
        store: Store providing the families and the boundary search.
        steps: Number of lightness samples.
        l_start: Lightness of the first sample.
        l_end: Lightness of the last sample.
        safety: Multiplier applied to sampled chroma, (0, 1].
        preset_id: Id of the resulting preset.
        name: Name of the resulting preset.

    Returns:
        Preset with one entry per store family.

    Raises:
        ConfigurationError: If steps < 2 or safety is outside (0, 1].
    """
    if steps < 2:
        raise ConfigurationError(f"steps must be >= 2, got {steps}")
    if not 0.0 < safety <= 1.0:
        raise ConfigurationError(f"safety must be in (0, 1], got {safety}")

    with reraise_validation("Invalid max-saturation lightness range"):
        lightness_curve = LightnessCurve(start=l_start, end=l_end)
    lightness = evaluate_lightness(lightness_curve, steps)

    families: dict[str, FamilyParameters] = {}
    for family in store.families():
        hue = family.params.hue
        boundary = [store.boundary.find_max_chroma(l, hue) for l in lightness]

        max_chroma = max(boundary)
        peak_index = boundary.index(max_chroma)
        peak_position = min(
            _MAX_PEAK_POSITION, max(_MIN_PEAK_POSITION, peak_index / (steps - 1))
        )

        families[family.name] = FamilyParameters(
            hue=hue,
            lightness=family.params.lightness,
            chroma=max_chroma * safety,
            lightness_curve=lightness_curve,
            chroma_curve=ChromaCurve(
                start=boundary[0] * safety,
                peak=max_chroma * safety,
                end=boundary[-1] * safety,
                peak_position=peak_position,
            ),
        )
        logger.debug(
            f"{family.name}: peak C={max_chroma * safety:.3f} at pos={peak_position:.2f}"
        )

    return Preset(preset_id=preset_id, name=name, families=families)


__all__ = [
    "calculate_max_saturation_preset",
]
