"""Shared pytest fixtures for chromaramp tests."""

from __future__ import annotations

import pytest

from chromaramp.core.color.gamut import GamutBoundary, build_gamut_boundary
from chromaramp.core.curves.models import ChromaCurve, LightnessCurve
from chromaramp.core.presets.builtins import build_builtin_catalog, default_families
from chromaramp.core.presets.catalog import PresetCatalog
from chromaramp.core.ramps.generator import RampGenerator
from chromaramp.core.ramps.models import FamilyParameters, HueFamily
from chromaramp.core.store import PaletteStore

# ============================================================================
# Gamut Fixtures
# ============================================================================


@pytest.fixture
def boundary() -> GamutBoundary:
    """Boundary search using the self-contained formula predicate."""
    return build_gamut_boundary("formula")


@pytest.fixture
def generator(boundary: GamutBoundary) -> RampGenerator:
    """Ramp generator over the formula boundary."""
    return RampGenerator(boundary)


# ============================================================================
# Parameter Fixtures
# ============================================================================


@pytest.fixture
def cyan_params() -> FamilyParameters:
    """Default cyan parameters (linear lightness 0.96 -> 0.21)."""
    return FamilyParameters(
        hue=195.6,
        lightness=0.70,
        chroma=0.106,
        lightness_curve=LightnessCurve(start=0.96, end=0.21),
        chroma_curve=ChromaCurve(start=0.060, peak=0.114, end=0.036, peak_position=0.36),
    )


@pytest.fixture
def vivid_params() -> FamilyParameters:
    """Red parameters whose chroma exceeds sRGB at most lightnesses."""
    return FamilyParameters(
        hue=30.0,
        lightness=0.6,
        chroma=0.35,
        lightness_curve=LightnessCurve(start=0.95, end=0.15),
        chroma_curve=ChromaCurve(start=0.30, peak=0.40, end=0.30, peak_position=0.5),
    )


@pytest.fixture
def cyan_family(cyan_params: FamilyParameters, generator: RampGenerator) -> HueFamily:
    """Cyan family with 12 generated steps."""
    family = HueFamily(name="cyan", params=cyan_params)
    generator.generate(family, 12)
    return family


# ============================================================================
# Store Fixtures
# ============================================================================


@pytest.fixture
def catalog() -> PresetCatalog:
    """Fresh catalog with the builtin presets."""
    return build_builtin_catalog()


@pytest.fixture
def store(boundary: GamutBoundary, catalog: PresetCatalog) -> PaletteStore:
    """Store with builtin families generated at 12 steps."""
    palette = PaletteStore(default_families(), boundary=boundary, catalog=catalog, step_count=12)
    palette.regenerate_all()
    return palette
