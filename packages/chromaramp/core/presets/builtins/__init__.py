"""Builtin hue families and presets."""

from chromaramp.core.presets.builtins.families import (
    default_families,
    default_family_params,
    family_params,
)
from chromaramp.core.presets.builtins.presets import build_builtin_catalog, builtin_presets

__all__ = [
    "build_builtin_catalog",
    "builtin_presets",
    "default_families",
    "default_family_params",
    "family_params",
]
