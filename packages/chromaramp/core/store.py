"""Palette store - the owned state every ramp operation works against.

The store holds the fixed set of hue families, the global step count, the
gamut boundary search (and its cache) and the preset catalog. Each store is
independent, so tests and concurrent callers can build their own.

Every mutating operation computes first and commits parameters and steps
together, so a failed edit leaves the store unchanged.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any

from chromaramp.core.color.gamut import GamutBoundary, build_gamut_boundary
from chromaramp.core.config.models import AppConfig
from chromaramp.core.curves.models import ChromaCurve, HueCurve, LightnessCurve
from chromaramp.core.errors import ConfigurationError, UnknownFamilyError, reraise_validation
from chromaramp.core.presets.apply import apply_preset, snapshot_preset
from chromaramp.core.presets.builtins import build_builtin_catalog, default_families
from chromaramp.core.presets.catalog import PresetCatalog
from chromaramp.core.presets.models import Preset
from chromaramp.core.ramps import adjust
from chromaramp.core.ramps.generator import RampGenerator, validate_step_count
from chromaramp.core.ramps.models import FamilyParameters, FixedHue, HueFamily, RampedHue, Step

logger = logging.getLogger(__name__)


class PaletteStore:
    """Registry of hue families plus the machinery to regenerate them.

    Args:
        families: Hue families, in display order. Names must be unique.
        boundary: Gamut boundary search (owns the gamut cache).
        catalog: Preset catalog used to resolve preset keys.
        step_count: Global number of steps per family.

    Example:
        >>> store = PaletteStore.from_config(AppConfig())
        >>> len(store.steps("cyan"))
        12
    """

    def __init__(
        self,
        families: Iterable[HueFamily],
        *,
        boundary: GamutBoundary | None = None,
        catalog: PresetCatalog | None = None,
        step_count: int = 12,
    ) -> None:
        validate_step_count(step_count)

        self._families: dict[str, HueFamily] = {}
        for family in families:
            if family.name in self._families:
                raise ConfigurationError(f"Duplicate hue family: {family.name}")
            self._families[family.name] = family

        self.boundary = boundary if boundary is not None else build_gamut_boundary()
        self.catalog = catalog if catalog is not None else PresetCatalog()
        self.generator = RampGenerator(self.boundary)
        self._step_count = step_count

    @classmethod
    def from_config(cls, config: AppConfig) -> PaletteStore:
        """Build a store with the builtin families and presets.

        Applies ``config.ramp.default_preset`` when set, otherwise generates
        the builtin default parameters.
        """
        gamut = config.gamut
        boundary = build_gamut_boundary(
            gamut.backend,
            max_chroma=gamut.max_chroma,
            precision=gamut.precision,
            lightness_decimals=gamut.lightness_decimals,
            hue_decimals=gamut.hue_decimals,
        )
        store = cls(
            default_families(),
            boundary=boundary,
            catalog=build_builtin_catalog(),
            step_count=config.ramp.step_count,
        )
        if config.ramp.default_preset is not None:
            store.apply_preset(config.ramp.default_preset)
        else:
            store.regenerate_all()
        return store

    # ------------------------------------------------------------------
    # Read accessors
    # ------------------------------------------------------------------

    @property
    def step_count(self) -> int:
        return self._step_count

    def family(self, name: str) -> HueFamily:
        """Lookup a family by name.

        Raises:
            UnknownFamilyError: If no family has this name.
        """
        family = self._families.get(name)
        if family is None:
            raise UnknownFamilyError(f"Unknown hue family: {name}")
        return family

    def families(self) -> list[HueFamily]:
        return list(self._families.values())

    def names(self) -> list[str]:
        return list(self._families)

    def steps(self, name: str) -> list[Step]:
        """Current steps of a family, for rendering."""
        return list(self.family(name).steps)

    def __contains__(self, name: str) -> bool:
        return name in self._families

    def __len__(self) -> int:
        return len(self._families)

    # ------------------------------------------------------------------
    # Regeneration
    # ------------------------------------------------------------------

    def regenerate_all(self) -> None:
        self.generator.regenerate_all(self.families(), self._step_count)

    def regenerate(self, name: str) -> list[Step]:
        return self.generator.generate(self.family(name), self._step_count)

    def set_step_count(self, step_count: int) -> None:
        """Change the global step count, clear the gamut cache and regenerate.

        Raises:
            ConfigurationError: If step_count < 2.
        """
        validate_step_count(step_count)
        families = self.families()
        computed = [self.generator.compute(f.params, step_count) for f in families]

        self._step_count = step_count
        self.boundary.invalidate()
        for family, steps in zip(families, computed, strict=True):
            family.steps = steps
        logger.debug(f"Step count set to {step_count}")

    def _commit_params(self, family: HueFamily, params: FamilyParameters) -> list[Step]:
        steps = self.generator.compute(params, self._step_count)
        family.params = params
        family.steps = steps
        return steps

    def _update_params(self, name: str, **changes: Any) -> list[Step]:
        family = self.family(name)
        with reraise_validation(f"Invalid parameters for {name}"):
            params = FamilyParameters.model_validate({**family.params.model_dump(), **changes})
        return self._commit_params(family, params)

    # ------------------------------------------------------------------
    # Curve edits (single family)
    # ------------------------------------------------------------------

    def update_lightness_curve(self, name: str, **changes: Any) -> list[Step]:
        """Edit fields of a family's lightness curve and regenerate it.

        Raises:
            ConfigurationError: If the edited curve is invalid.
        """
        family = self.family(name)
        with reraise_validation(f"Invalid lightness curve for {name}"):
            curve = LightnessCurve.model_validate(
                {**family.params.lightness_curve.model_dump(), **changes}
            )
        return self._commit_params(
            family, family.params.model_copy(update={"lightness_curve": curve})
        )

    def update_chroma_curve(self, name: str, **changes: Any) -> list[Step]:
        """Edit fields of a family's chroma curve and regenerate it.

        Raises:
            ConfigurationError: If the edited curve is invalid (e.g.
                peak_position at 0 or 1).
        """
        family = self.family(name)
        with reraise_validation(f"Invalid chroma curve for {name}"):
            curve = ChromaCurve.model_validate(
                {**family.params.chroma_curve.model_dump(), **changes}
            )
        return self._commit_params(family, family.params.model_copy(update={"chroma_curve": curve}))

    def update_hue_curve(self, name: str, curve: HueCurve | None) -> list[Step]:
        """Enable hue ramping with a curve, or disable it with None."""
        family = self.family(name)
        behavior = RampedHue(curve=curve) if curve is not None else FixedHue()
        return self._commit_params(family, family.params.model_copy(update={"hue_behavior": behavior}))

    def update_params(self, name: str, **changes: Any) -> list[Step]:
        """Edit top-level parameters (hue, lightness, chroma, ...) and regenerate."""
        return self._update_params(name, **changes)

    def set_gamut_aware(self, value: bool, name: str | None = None) -> None:
        """Toggle gamut clamping for one family, or every family when name is None.

        Clears the gamut cache and regenerates the affected families.
        """
        targets = [self.family(name)] if name is not None else self.families()
        computed = [
            (family, family.params.model_copy(update={"gamut_aware": value})) for family in targets
        ]
        self.boundary.invalidate()
        for family, params in computed:
            self._commit_params(family, params)
        logger.debug(f"Gamut clamping {'on' if value else 'off'} for {[f.name for f in targets]}")

    # ------------------------------------------------------------------
    # Presets
    # ------------------------------------------------------------------

    def apply_preset(self, preset: Preset | str) -> Preset:
        """Apply a preset (instance or catalog key) and regenerate everything."""
        return apply_preset(self, preset)

    def save_as_preset(self, name: str | None = None, description: str | None = None) -> Preset:
        """Snapshot the current parameters as a new preset in the catalog."""
        preset_id = self.catalog.next_id()
        preset = snapshot_preset(self, preset_id, name or f"Preset {preset_id}", description)
        self.catalog.register(preset)
        logger.info(f"Saved current parameters as preset {preset_id}")
        return preset

    # ------------------------------------------------------------------
    # Bulk adjustments
    # ------------------------------------------------------------------

    def adjust_lightness(self, name: str, value: float) -> list[Step]:
        return adjust.adjust_lightness(self.family(name), value)

    def adjust_chroma(self, name: str, value: float) -> list[Step]:
        return adjust.adjust_chroma(self.family(name), value)

    def adjust_hue(self, name: str, value: float) -> list[Step]:
        return adjust.adjust_hue(self.family(name), value)

    # ------------------------------------------------------------------
    # Gamut
    # ------------------------------------------------------------------

    def find_max_chroma(self, l: float, h: float) -> float:
        return self.boundary.find_max_chroma(l, h)


__all__ = [
    "PaletteStore",
]
