"""Tests for applying and snapshotting presets."""

from __future__ import annotations

import pytest

from chromaramp.core.curves.evaluators import evaluate_chroma
from chromaramp.core.errors import UnknownPresetError
from chromaramp.core.presets.apply import apply_preset, snapshot_preset
from chromaramp.core.presets.models import Preset
from chromaramp.core.store import PaletteStore


class TestApplyPreset:
    """Tests for bulk parameter overwrite."""

    def test_applies_parameters(self, store: PaletteStore):
        preset = apply_preset(store, "01")

        assert preset.name == "User Tuned"
        assert store.family("cyan").params == preset.families["cyan"]
        assert store.family("blue").params.hue == 275.2

    def test_regenerates_every_family(self, store: PaletteStore):
        apply_preset(store, "03")
        expected_first_l = {
            name: min(0.98, params.lightness_curve.start)
            for name, params in store.catalog.get("03").families.items()
        }

        for family in store.families():
            assert len(family.steps) == store.step_count
            assert family.steps[0].l == pytest.approx(expected_first_l[family.name])

    def test_lookup_by_name(self, store: PaletteStore):
        assert apply_preset(store, "Low Saturation").preset_id == "04"

    def test_unknown_preset_leaves_store_unchanged(self, store: PaletteStore):
        """A failed lookup mutates nothing."""
        before = {f.name: (f.params, list(f.steps)) for f in store.families()}
        with pytest.raises(UnknownPresetError):
            apply_preset(store, "99")

        assert {f.name: (f.params, list(f.steps)) for f in store.families()} == before

    def test_clears_gamut_cache(self, store: PaletteStore):
        """The cache is rebuilt from scratch for the new parameters."""
        store.find_max_chroma(0.123, 45.6)
        apply_preset(store, "02")
        assert (0.123, 45.6) not in store.boundary.cache

    def test_gamut_unaware_family_keeps_raw_chroma(self, store: PaletteStore):
        """Vibrant Warm's orange is generated without boundary clamping."""
        preset = apply_preset(store, "07")
        params = preset.families["orange"]

        raw = [min(0.4, max(0.0, c)) for c in evaluate_chroma(params.chroma_curve, 12)]
        assert [s.c for s in store.steps("orange")] == raw

    def test_unknown_family_ignored(self, store: PaletteStore, cyan_params):
        """Preset entries for families the store lacks are skipped."""
        preset = Preset(
            preset_id="x1",
            name="Extra",
            families={"cyan": cyan_params, "teal": cyan_params},
        )
        apply_preset(store, preset)

        assert "teal" not in store
        assert store.family("cyan").params == cyan_params

    def test_unmentioned_families_keep_parameters(self, store: PaletteStore, cyan_params):
        before = store.family("red").params
        apply_preset(store, Preset(preset_id="x2", name="Cyan", families={"cyan": cyan_params}))
        assert store.family("red").params == before


class TestSnapshotPreset:
    """Tests for capturing the current parameters."""

    def test_snapshot_captures_all_families(self, store: PaletteStore):
        snapshot = snapshot_preset(store, "50", "Mine")

        assert list(snapshot.families) == store.names()
        assert snapshot.families["yellow"] == store.family("yellow").params

    def test_snapshot_restores_state(self, store: PaletteStore):
        """Applying a snapshot after other edits restores the ramps."""
        apply_preset(store, "05")
        snapshot = snapshot_preset(store, "50", "After 05")
        steps_before = {f.name: list(f.steps) for f in store.families()}

        apply_preset(store, "07")
        apply_preset(store, snapshot)

        assert {f.name: list(f.steps) for f in store.families()} == steps_before
