"""Applying presets to a palette store and capturing the store as a preset."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from chromaramp.core.presets.models import Preset
from chromaramp.core.ramps.models import FamilyParameters

if TYPE_CHECKING:
    from chromaramp.core.store import PaletteStore

logger = logging.getLogger(__name__)


def apply_preset(store: PaletteStore, preset: Preset | str) -> Preset:
    """Overwrite matching families' parameters with a preset and regenerate.

    Families named by the preset but absent from the store are ignored.
    Families the preset does not mention keep their parameters but are
    regenerated too. The gamut cache is cleared first.

    Args:
        store: Palette store to update.
        preset: Preset instance, or id/name/alias to look up in the store's catalog.

    Returns:
        The applied preset.

    Raises:
        UnknownPresetError: If a preset key is not in the catalog. The store
            is left untouched.
    """
    if isinstance(preset, str):
        preset = store.catalog.get(preset)

    updates: dict[str, FamilyParameters] = {}
    for name, params in preset.families.items():
        if name in store:
            updates[name] = params
        else:
            logger.debug(f"Preset {preset.preset_id} names unknown family {name!r}; skipped")

    store.boundary.invalidate()

    families = store.families()
    new_params = [updates.get(family.name, family.params) for family in families]
    new_steps = [store.generator.compute(params, store.step_count) for params in new_params]

    for family, params, steps in zip(families, new_params, new_steps, strict=True):
        family.params = params
        family.steps = steps

    logger.info(f"Loaded preset {preset.preset_id} ({preset.name}) into {len(updates)} families")
    return preset


def snapshot_preset(
    store: PaletteStore,
    preset_id: str,
    name: str,
    description: str | None = None,
) -> Preset:
    """Capture every family's current parameters as a new preset.

    The snapshot includes hue behavior and gamut policy, so applying it
    restores the store exactly (bulk lightness/chroma adjustments are not
    part of the parameters and are not captured).
    """
    return Preset(
        preset_id=preset_id,
        name=name,
        description=description,
        families={family.name: family.params for family in store.families()},
    )


__all__ = [
    "apply_preset",
    "snapshot_preset",
]
