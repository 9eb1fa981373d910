"""Preset models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from chromaramp.core.ramps.models import FamilyParameters


class Preset(BaseModel):
    """Immutable template of parameters for a set of hue families.

    Attributes:
        preset_id: Stable identifier (e.g., '01').
        name: Human-readable preset name.
        description: Optional description of the design intent.
        families: Full parameter set per hue-family name.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    preset_id: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1)
    description: str | None = None
    families: dict[str, FamilyParameters] = Field(..., min_length=1)


__all__ = [
    "Preset",
]
