"""OKLCH color conversion and sRGB gamut boundary search."""

from chromaramp.core.color.conversion import (
    is_in_srgb_gamut,
    oklch_to_linear_srgb,
    oklch_to_oklab,
    oklch_to_rgb255,
    oklch_to_srgb,
    srgb_encode,
)
from chromaramp.core.color.gamut import (
    ColorAideGamutChecker,
    FormulaGamutChecker,
    GamutBoundary,
    GamutCache,
    GamutChecker,
    build_gamut_boundary,
    get_gamut_checker,
)

__all__ = [
    # Conversion
    "is_in_srgb_gamut",
    "oklch_to_linear_srgb",
    "oklch_to_oklab",
    "oklch_to_rgb255",
    "oklch_to_srgb",
    "srgb_encode",
    # Gamut
    "ColorAideGamutChecker",
    "FormulaGamutChecker",
    "GamutBoundary",
    "GamutCache",
    "GamutChecker",
    "build_gamut_boundary",
    "get_gamut_checker",
]
