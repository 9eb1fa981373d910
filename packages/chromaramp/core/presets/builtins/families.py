"""Builtin hue families.

Ten families, cyan through gray, with their default curves. Yellow carries
the optical corrections: it ramps hue from 95.8° toward orange (71.5°) so
dark yellows keep reading as yellow, starts from a higher lightness, and is
not gamut-clamped by default so it may use wide-gamut displays.
"""

from __future__ import annotations

from chromaramp.core.curves.models import ChromaCurve, EasingType, HueCurve, LightnessCurve
from chromaramp.core.ramps.models import FamilyParameters, FixedHue, HueFamily, RampedHue


def family_params(
    hue: float,
    lightness: float,
    chroma: float,
    *,
    l_curve: tuple[float, float],
    c_curve: tuple[float, float, float, float],
    hue_ramp: tuple[float, float] | None = None,
    gamut_aware: bool = True,
    easing: EasingType = EasingType.LINEAR,
) -> FamilyParameters:
    """Compact constructor for FamilyParameters.

    Args:
        hue: Base hue angle.
        lightness: Reference lightness.
        chroma: Reference chroma.
        l_curve: (start, end) lightness.
        c_curve: (start, peak, end, peak_position) chroma.
        hue_ramp: Optional (start, end) linear hue ramp.
        gamut_aware: Clamp to sRGB during generation.
        easing: Lightness easing.
    """
    c_start, c_peak, c_end, peak_position = c_curve
    return FamilyParameters(
        hue=hue,
        lightness=lightness,
        chroma=chroma,
        lightness_curve=LightnessCurve(start=l_curve[0], end=l_curve[1], type=easing),
        chroma_curve=ChromaCurve(
            start=c_start, peak=c_peak, end=c_end, peak_position=peak_position
        ),
        hue_behavior=(
            RampedHue(curve=HueCurve(start=hue_ramp[0], end=hue_ramp[1]))
            if hue_ramp is not None
            else FixedHue()
        ),
        gamut_aware=gamut_aware,
    )


def default_family_params() -> dict[str, FamilyParameters]:
    """Default parameters for every builtin family, in display order."""
    return {
        "cyan": family_params(
            195.6, 0.70, 0.106, l_curve=(0.96, 0.21), c_curve=(0.060, 0.114, 0.036, 0.36)
        ),
        "green": family_params(
            144.2, 0.75, 0.153, l_curve=(0.96, 0.20), c_curve=(0.070, 0.153, 0.064, 0.64)
        ),
        "yellow": family_params(
            92.0,
            0.80,
            0.165,
            l_curve=(0.966, 0.152),
            c_curve=(0.093, 0.201, 0.068, 0.36),
            hue_ramp=(95.8, 71.5),
            gamut_aware=False,
        ),
        "orange": family_params(
            46.5, 0.62, 0.176, l_curve=(0.96, 0.22), c_curve=(0.025, 0.176, 0.070, 0.55)
        ),
        "red": family_params(
            24.9, 0.57, 0.218, l_curve=(0.95, 0.16), c_curve=(0.024, 0.218, 0.064, 0.36)
        ),
        "pink": family_params(
            343.2, 0.52, 0.132, l_curve=(0.96, 0.15), c_curve=(0.024, 0.132, 0.064, 0.73)
        ),
        "purple": family_params(
            312.1, 0.45, 0.139, l_curve=(0.95, 0.15), c_curve=(0.032, 0.139, 0.075, 0.82)
        ),
        "violet": family_params(
            283.5, 0.50, 0.158, l_curve=(0.95, 0.15), c_curve=(0.024, 0.158, 0.087, 0.82)
        ),
        "blue": family_params(
            263.8, 0.55, 0.171, l_curve=(0.95, 0.15), c_curve=(0.023, 0.171, 0.087, 0.82)
        ),
        "gray": family_params(
            0.0, 0.50, 0.0, l_curve=(0.98, 0.10), c_curve=(0.0, 0.0, 0.0, 0.5)
        ),
    }


def default_families() -> list[HueFamily]:
    """Fresh builtin families with default parameters and no steps yet."""
    return [HueFamily(name=name, params=params) for name, params in default_family_params().items()]


__all__ = [
    "default_families",
    "default_family_params",
    "family_params",
]
