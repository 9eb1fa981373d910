"""OKLCH to sRGB conversion.

Implements Björn Ottosson's OKLab transforms:

1. OKLCH -> OKLab (polar to Cartesian, hue in degrees)
2. OKLab -> non-linear LMS (matrix M1)
3. cube each component -> linear LMS
4. linear LMS -> linear sRGB (matrix M2, D65)
5. sRGB transfer function (gamma encode)

Reference: https://bottosson.github.io/posts/oklab/
"""

from __future__ import annotations

import math

import numpy as np

# OKLab -> LMS' (inverse of Ottosson's M2)
M1 = np.array(
    [
        [1.0, 0.3963377774, 0.2158037573],
        [1.0, -0.1055613458, -0.0638541728],
        [1.0, -0.0894841775, -1.2914855480],
    ]
)

# LMS -> linear sRGB (inverse of Ottosson's M1)
M2 = np.array(
    [
        [4.0767416621, -3.3077115913, 0.2309699292],
        [-1.2684380046, 2.6097574011, -0.3413193965],
        [-0.0041960863, -0.7034186147, 1.7076147010],
    ]
)

# Gamma-encoded channels within this distance of [0, 1] count as in gamut
IN_GAMUT_TOLERANCE = 1e-6


def oklch_to_oklab(l: float, c: float, h: float) -> tuple[float, float, float]:
    """Convert OKLCH (hue in degrees) to OKLab."""
    h_rad = math.radians(h)
    return (l, c * math.cos(h_rad), c * math.sin(h_rad))


def oklch_to_linear_srgb(l: float, c: float, h: float) -> tuple[float, float, float]:
    """Convert OKLCH to linear-light sRGB.

    Channels are not clipped; out-of-gamut colors produce values
    outside [0, 1].

    Example:
        >>> r, g, b = oklch_to_linear_srgb(1.0, 0.0, 0.0)
        >>> round(r, 4), round(g, 4), round(b, 4)
        (1.0, 1.0, 1.0)
    """
    lab = np.array(oklch_to_oklab(l, c, h))
    lms = (M1 @ lab) ** 3
    r, g, b = M2 @ lms
    return (float(r), float(g), float(b))


def srgb_encode(v: float) -> float:
    """Apply the sRGB transfer function to a linear channel value."""
    if v <= 0.0031308:
        return 12.92 * v
    return 1.055 * v ** (1 / 2.4) - 0.055


def oklch_to_srgb(l: float, c: float, h: float) -> tuple[float, float, float]:
    """Convert OKLCH to gamma-encoded sRGB (unclipped)."""
    r, g, b = oklch_to_linear_srgb(l, c, h)
    return (srgb_encode(r), srgb_encode(g), srgb_encode(b))


def is_in_srgb_gamut(l: float, c: float, h: float, tolerance: float = IN_GAMUT_TOLERANCE) -> bool:
    """Check sRGB gamut membership using the closed-form conversion.

    Holds iff every gamma-encoded channel lies in [0, 1] (within tolerance).
    """
    return all(-tolerance <= ch <= 1.0 + tolerance for ch in oklch_to_srgb(l, c, h))


def oklch_to_rgb255(l: float, c: float, h: float) -> tuple[int, int, int]:
    """Convert OKLCH to clipped 8-bit sRGB for swatch display."""
    return tuple(  # type: ignore[return-value]
        round(max(0.0, min(1.0, ch)) * 255) for ch in oklch_to_srgb(l, c, h)
    )


__all__ = [
    "IN_GAMUT_TOLERANCE",
    "M1",
    "M2",
    "is_in_srgb_gamut",
    "oklch_to_linear_srgb",
    "oklch_to_oklab",
    "oklch_to_rgb255",
    "oklch_to_srgb",
    "srgb_encode",
]
