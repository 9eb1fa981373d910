"""Presets - immutable parameter templates for hue families.

Usage:
    from chromaramp.core.presets import apply_preset, build_builtin_catalog

    catalog = build_builtin_catalog()
    preset = catalog.get("01")
"""

from chromaramp.core.presets.apply import apply_preset, snapshot_preset
from chromaramp.core.presets.builtins import (
    build_builtin_catalog,
    builtin_presets,
    default_families,
    default_family_params,
    family_params,
)
from chromaramp.core.presets.catalog import PresetCatalog, PresetInfo, normalize_key
from chromaramp.core.presets.max_saturation import calculate_max_saturation_preset
from chromaramp.core.presets.models import Preset

__all__ = [
    # Models
    "Preset",
    # Catalog
    "PresetCatalog",
    "PresetInfo",
    "normalize_key",
    # Builtins
    "build_builtin_catalog",
    "builtin_presets",
    "default_families",
    "default_family_params",
    "family_params",
    # Operations
    "apply_preset",
    "calculate_max_saturation_preset",
    "snapshot_preset",
]
