"""Builtin preset definitions.

Each preset is a different palette design approach:

- 01 User Tuned: very dark endpoints for dramatic contrast, yellow hue ramp.
- 02 Balanced Hybrid: endpoints between 01 and 03, keeps the yellow ramp.
- 03 Scientifically Balanced: normalized peak positions, no hue ramping.
- 04 Low Saturation: chroma reduced ~30% for long reading sessions.
- 05 Perceptual Uniformity: every peak at 0.50, reversed yellow ramp.
- 06 Chroma-Matched: every hue peaks at C=0.208.
- 07 Vibrant Warm: boosted warm chroma, yellow/orange not gamut clamped.
"""

from __future__ import annotations

from chromaramp.core.presets.builtins.families import family_params as fp
from chromaramp.core.presets.catalog import PresetCatalog
from chromaramp.core.presets.models import Preset


def _preset_01() -> Preset:
    return Preset(
        preset_id="01",
        name="User Tuned",
        description="Optically balanced with very dark endpoints; high-contrast and dark-mode UIs.",
        families={
            "cyan": fp(207.3, 0.50, 0.121, l_curve=(0.98, 0.078), c_curve=(0.017, 0.121, 0.014, 0.27)),
            "green": fp(140.0, 0.50, 0.228, l_curve=(0.98, 0.073), c_curve=(0.031, 0.228, 0.025, 0.27)),
            "yellow": fp(
                92.0,
                0.62,
                0.201,
                l_curve=(0.966, 0.152),
                c_curve=(0.093, 0.201, 0.068, 0.36),
                hue_ramp=(95.8, 71.5),
            ),
            "orange": fp(46.6, 0.59, 0.201, l_curve=(0.958, 0.221), c_curve=(0.022, 0.201, 0.062, 0.36)),
            "red": fp(27.0, 0.56, 0.201, l_curve=(0.95, 0.159), c_curve=(0.023, 0.201, 0.064, 0.36)),
            "pink": fp(337.1, 0.52, 0.219, l_curve=(0.97, 0.084), c_curve=(0.021, 0.219, 0.019, 0.45)),
            "purple": fp(312.8, 0.53, 0.221, l_curve=(0.98, 0.082), c_curve=(0.013, 0.221, 0.020, 0.45)),
            "violet": fp(291.0, 0.53, 0.226, l_curve=(0.979, 0.078), c_curve=(0.011, 0.226, 0.018, 0.45)),
            "blue": fp(275.2, 0.53, 0.258, l_curve=(0.971, 0.084), c_curve=(0.014, 0.258, 0.012, 0.45)),
            "gray": fp(275.0, 0.54, 0.022, l_curve=(0.98, 0.15), c_curve=(0.02, 0.03, 0.04, 0.50)),
        },
    )


def _preset_02() -> Preset:
    return Preset(
        preset_id="02",
        name="Balanced Hybrid",
        description="Medium-dark endpoints; versatile UI systems and data visualization.",
        families={
            "cyan": fp(207.3, 0.50, 0.121, l_curve=(0.98, 0.11), c_curve=(0.017, 0.121, 0.020, 0.30)),
            "green": fp(140.0, 0.50, 0.228, l_curve=(0.98, 0.11), c_curve=(0.031, 0.228, 0.033, 0.30)),
            "yellow": fp(
                92.0,
                0.62,
                0.201,
                l_curve=(0.966, 0.18),
                c_curve=(0.093, 0.201, 0.068, 0.36),
                hue_ramp=(95.8, 71.5),
            ),
            "orange": fp(46.6, 0.59, 0.201, l_curve=(0.958, 0.22), c_curve=(0.022, 0.201, 0.066, 0.36)),
            "red": fp(27.0, 0.56, 0.201, l_curve=(0.95, 0.16), c_curve=(0.023, 0.201, 0.067, 0.36)),
            "pink": fp(337.1, 0.52, 0.219, l_curve=(0.97, 0.12), c_curve=(0.021, 0.219, 0.025, 0.42)),
            "purple": fp(312.8, 0.53, 0.221, l_curve=(0.98, 0.12), c_curve=(0.013, 0.221, 0.025, 0.42)),
            "violet": fp(291.0, 0.53, 0.226, l_curve=(0.979, 0.12), c_curve=(0.011, 0.226, 0.023, 0.42)),
            "blue": fp(275.2, 0.53, 0.258, l_curve=(0.971, 0.12), c_curve=(0.014, 0.258, 0.019, 0.42)),
            "gray": fp(0.0, 0.50, 0.0, l_curve=(0.98, 0.12), c_curve=(0.0, 0.0, 0.0, 0.5)),
        },
    )


def _preset_03() -> Preset:
    return Preset(
        preset_id="03",
        name="Scientifically Balanced",
        description="Normalized peak positions and a stable darkest step; no hue ramping.",
        families={
            "cyan": fp(207.3, 0.50, 0.121, l_curve=(0.98, 0.15), c_curve=(0.017, 0.121, 0.025, 0.35)),
            "green": fp(140.0, 0.50, 0.228, l_curve=(0.98, 0.15), c_curve=(0.031, 0.228, 0.040, 0.35)),
            "yellow": fp(95.4, 0.62, 0.200, l_curve=(0.98, 0.25), c_curve=(0.032, 0.200, 0.065, 0.35)),
            "orange": fp(46.6, 0.59, 0.200, l_curve=(0.958, 0.22), c_curve=(0.022, 0.200, 0.070, 0.38)),
            "red": fp(27.0, 0.56, 0.201, l_curve=(0.95, 0.16), c_curve=(0.023, 0.201, 0.070, 0.38)),
            "pink": fp(337.1, 0.52, 0.219, l_curve=(0.97, 0.15), c_curve=(0.021, 0.219, 0.030, 0.40)),
            "purple": fp(312.8, 0.53, 0.221, l_curve=(0.98, 0.15), c_curve=(0.013, 0.221, 0.030, 0.40)),
            "violet": fp(291.0, 0.53, 0.226, l_curve=(0.979, 0.15), c_curve=(0.011, 0.226, 0.028, 0.40)),
            "blue": fp(275.2, 0.53, 0.258, l_curve=(0.971, 0.15), c_curve=(0.014, 0.258, 0.025, 0.40)),
            "gray": fp(0.0, 0.50, 0.0, l_curve=(0.98, 0.15), c_curve=(0.0, 0.0, 0.0, 0.5)),
        },
    )


def _preset_04() -> Preset:
    return Preset(
        preset_id="04",
        name="Low Saturation",
        description="Chroma reduced ~30% from 01; code editors and long-form reading.",
        families={
            "cyan": fp(207.3, 0.50, 0.090, l_curve=(0.98, 0.15), c_curve=(0.012, 0.090, 0.018, 0.35)),
            "green": fp(140.0, 0.50, 0.165, l_curve=(0.98, 0.15), c_curve=(0.022, 0.165, 0.028, 0.35)),
            "yellow": fp(
                92.0,
                0.62,
                0.145,
                l_curve=(0.966, 0.18),
                c_curve=(0.065, 0.145, 0.048, 0.36),
                hue_ramp=(95.8, 71.5),
            ),
            "orange": fp(46.6, 0.59, 0.145, l_curve=(0.958, 0.22), c_curve=(0.015, 0.145, 0.046, 0.36)),
            "red": fp(27.0, 0.56, 0.145, l_curve=(0.95, 0.16), c_curve=(0.016, 0.145, 0.047, 0.36)),
            "pink": fp(337.1, 0.52, 0.155, l_curve=(0.97, 0.15), c_curve=(0.015, 0.155, 0.021, 0.40)),
            "purple": fp(312.8, 0.53, 0.155, l_curve=(0.98, 0.15), c_curve=(0.009, 0.155, 0.021, 0.40)),
            "violet": fp(291.0, 0.53, 0.160, l_curve=(0.979, 0.15), c_curve=(0.008, 0.160, 0.020, 0.40)),
            "blue": fp(275.2, 0.53, 0.180, l_curve=(0.971, 0.15), c_curve=(0.010, 0.180, 0.018, 0.40)),
            "gray": fp(275.0, 0.54, 0.018, l_curve=(0.98, 0.15), c_curve=(0.014, 0.021, 0.028, 0.50)),
        },
    )


def _preset_05() -> Preset:
    return Preset(
        preset_id="05",
        name="Perceptual Uniformity",
        description="All chroma peaks centered at 0.50; data visualization and charts.",
        families={
            "cyan": fp(207.3, 0.50, 0.121, l_curve=(0.98, 0.15), c_curve=(0.015, 0.121, 0.020, 0.50)),
            "green": fp(140.0, 0.50, 0.228, l_curve=(0.98, 0.15), c_curve=(0.028, 0.228, 0.035, 0.50)),
            "yellow": fp(
                95.0,
                0.89,
                0.181,
                l_curve=(0.96, 0.18),
                c_curve=(0.080, 0.181, 0.060, 0.50),
                hue_ramp=(90.0, 103.0),
            ),
            "orange": fp(46.6, 0.59, 0.201, l_curve=(0.96, 0.22), c_curve=(0.025, 0.201, 0.065, 0.50)),
            "red": fp(27.0, 0.56, 0.201, l_curve=(0.95, 0.16), c_curve=(0.025, 0.201, 0.065, 0.50)),
            "pink": fp(337.1, 0.52, 0.219, l_curve=(0.97, 0.15), c_curve=(0.020, 0.219, 0.028, 0.50)),
            "purple": fp(312.8, 0.53, 0.221, l_curve=(0.98, 0.15), c_curve=(0.015, 0.221, 0.028, 0.50)),
            "violet": fp(291.0, 0.53, 0.226, l_curve=(0.98, 0.15), c_curve=(0.012, 0.226, 0.026, 0.50)),
            "blue": fp(275.2, 0.53, 0.258, l_curve=(0.97, 0.15), c_curve=(0.015, 0.258, 0.023, 0.50)),
            "gray": fp(0.0, 0.50, 0.0, l_curve=(0.98, 0.15), c_curve=(0.0, 0.0, 0.0, 0.5)),
        },
    )


def _preset_06() -> Preset:
    matched = (0.020, 0.208, 0.030, 0.40)
    return Preset(
        preset_id="06",
        name="Chroma-Matched",
        description="Every hue peaks at C=0.208 for equal saturation; brand systems.",
        families={
            "cyan": fp(207.3, 0.50, 0.208, l_curve=(0.98, 0.15), c_curve=matched),
            "green": fp(140.0, 0.50, 0.208, l_curve=(0.98, 0.15), c_curve=matched),
            "yellow": fp(90.0, 0.65, 0.208, l_curve=(0.96, 0.18), c_curve=matched),
            "orange": fp(46.6, 0.59, 0.208, l_curve=(0.96, 0.22), c_curve=matched),
            "red": fp(27.0, 0.56, 0.208, l_curve=(0.95, 0.16), c_curve=matched),
            "pink": fp(337.1, 0.52, 0.208, l_curve=(0.97, 0.15), c_curve=matched),
            "purple": fp(312.8, 0.53, 0.208, l_curve=(0.98, 0.15), c_curve=matched),
            "violet": fp(291.0, 0.53, 0.208, l_curve=(0.98, 0.15), c_curve=matched),
            "blue": fp(275.2, 0.53, 0.208, l_curve=(0.97, 0.15), c_curve=matched),
            "gray": fp(0.0, 0.50, 0.0, l_curve=(0.98, 0.15), c_curve=(0.0, 0.0, 0.0, 0.5)),
        },
    )


def _preset_07() -> Preset:
    return Preset(
        preset_id="07",
        name="Vibrant Warm",
        description="Boosted warm chroma; yellow and orange may exceed sRGB on wide-gamut displays.",
        families={
            "cyan": fp(207.3, 0.50, 0.121, l_curve=(0.98, 0.078), c_curve=(0.017, 0.121, 0.014, 0.27)),
            "green": fp(140.0, 0.50, 0.228, l_curve=(0.98, 0.073), c_curve=(0.031, 0.228, 0.025, 0.27)),
            "yellow": fp(
                84.5,
                0.75,
                0.1689,
                l_curve=(0.9717, 0.15),
                c_curve=(0.0332, 0.1689, 0.08, 0.25),
                hue_ramp=(88.1, 72.0),
                gamut_aware=False,
            ),
            "orange": fp(
                46.6,
                0.59,
                0.220,
                l_curve=(0.958, 0.221),
                c_curve=(0.035, 0.220, 0.080, 0.36),
                gamut_aware=False,
            ),
            "red": fp(27.0, 0.56, 0.220, l_curve=(0.95, 0.159), c_curve=(0.035, 0.220, 0.080, 0.36)),
            "pink": fp(337.1, 0.52, 0.219, l_curve=(0.97, 0.084), c_curve=(0.021, 0.219, 0.019, 0.45)),
            "purple": fp(312.8, 0.53, 0.221, l_curve=(0.98, 0.082), c_curve=(0.013, 0.221, 0.020, 0.45)),
            "violet": fp(291.0, 0.53, 0.226, l_curve=(0.979, 0.078), c_curve=(0.011, 0.226, 0.018, 0.45)),
            "blue": fp(275.2, 0.53, 0.258, l_curve=(0.971, 0.084), c_curve=(0.014, 0.258, 0.012, 0.45)),
            "gray": fp(275.0, 0.54, 0.022, l_curve=(0.98, 0.15), c_curve=(0.02, 0.03, 0.04, 0.50)),
        },
    )


def builtin_presets() -> list[Preset]:
    """All builtin presets in id order."""
    return [
        _preset_01(),
        _preset_02(),
        _preset_03(),
        _preset_04(),
        _preset_05(),
        _preset_06(),
        _preset_07(),
    ]


def build_builtin_catalog() -> PresetCatalog:
    """Create a fresh catalog holding every builtin preset."""
    catalog = PresetCatalog()
    for preset in builtin_presets():
        catalog.register(preset, aliases=(f"Preset {preset.preset_id}",))
    return catalog


__all__ = [
    "build_builtin_catalog",
    "builtin_presets",
]
