"""Preset catalog.

Registry of immutable presets with id, name and alias lookup. Presets are
registered directly (no factories) since they are frozen models.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass

from chromaramp.core.errors import UnknownPresetError
from chromaramp.core.presets.models import Preset

logger = logging.getLogger(__name__)


def normalize_key(s: str) -> str:
    """Normalize key for lookup (lowercase, alphanumeric/underscore only)."""
    return "".join(ch.lower() if ch.isalnum() else "_" for ch in s).strip("_")


@dataclass(frozen=True)
class PresetInfo:
    """Lightweight preset metadata for listing."""

    preset_id: str
    name: str
    description: str | None
    families: tuple[str, ...]


class PresetCatalog:
    """Registry for presets.

    Example:
        >>> catalog = PresetCatalog()
        >>> catalog.register(my_preset)
        >>> preset = catalog.get("01")
    """

    def __init__(self) -> None:
        """Initialize empty catalog."""
        self._items: dict[str, Preset] = {}
        self._aliases: dict[str, str] = {}  # normalized_key -> preset_id
        self._info: dict[str, PresetInfo] = {}

    def register(
        self,
        item: Preset,
        *,
        aliases: Iterable[str] = (),
    ) -> None:
        """Register a preset.

        Args:
            item: Preset to register.
            aliases: Additional aliases for lookup.

        Raises:
            ValueError: If preset_id already registered.
        """
        pid = item.preset_id

        if pid in self._items:
            raise ValueError(f"Preset already registered: {pid}")

        self._items[pid] = item

        # Ids win over names and aliases of other presets
        for a in (item.name, *aliases):
            self._aliases.setdefault(normalize_key(a), pid)
        self._aliases[normalize_key(pid)] = pid

        self._info[pid] = PresetInfo(
            preset_id=pid,
            name=item.name,
            description=item.description,
            families=tuple(item.families),
        )

        logger.debug(f"Registered preset: {pid}")

    def get(self, key: str) -> Preset:
        """Lookup preset by id, name or alias.

        Raises:
            UnknownPresetError: If preset not found.
        """
        if key in self._items:
            return self._items[key]

        pid = self._aliases.get(normalize_key(key))
        if pid is None:
            raise UnknownPresetError(f"Unknown preset: {key}")
        return self._items[pid]

    def has(self, key: str) -> bool:
        """Check if preset exists."""
        return key in self._items or normalize_key(key) in self._aliases

    def list_all(self) -> list[PresetInfo]:
        """List all registered presets."""
        return sorted(self._info.values(), key=lambda x: x.preset_id)

    def list_ids(self) -> list[str]:
        """List all registered preset IDs."""
        return sorted(self._items.keys())

    def next_id(self) -> str:
        """Next free two-digit numeric id after the largest numeric id."""
        numeric = [int(pid) for pid in self._items if pid.isdigit()]
        next_num = max(numeric) + 1 if numeric else 1
        return f"{next_num:02d}"

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, key: str) -> bool:
        return self.has(key)


__all__ = [
    "PresetCatalog",
    "PresetInfo",
    "normalize_key",
]
