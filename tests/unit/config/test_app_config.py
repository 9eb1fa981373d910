"""Tests for configuration models and loading."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from pydantic import ValidationError

from chromaramp.core.config.loader import detect_format, load_app_config, load_config
from chromaramp.core.config.models import AppConfig, GamutConfig, RampConfig


class TestModels:
    def test_defaults(self):
        config = AppConfig()

        assert config.ramp.step_count == 12
        assert config.ramp.default_preset == "01"
        assert config.gamut.backend == "coloraide"
        assert config.gamut.max_chroma == 0.4
        assert config.gamut.precision == 0.001
        assert config.logging.level == "INFO"

    @pytest.mark.parametrize("step_count", [1, 21])
    def test_step_count_range(self, step_count: int):
        with pytest.raises(ValidationError):
            RampConfig(step_count=step_count)

    def test_unknown_backend(self):
        with pytest.raises(ValidationError):
            GamutConfig(backend="p3")  # type: ignore[arg-type]

    def test_extra_fields_forbidden(self):
        with pytest.raises(ValidationError):
            AppConfig.model_validate({"ramp": {"steps": 10}})

    def test_invalid_log_level(self):
        with pytest.raises(ValidationError):
            AppConfig.model_validate({"logging": {"level": "LOUD"}})


class TestDetectFormat:
    @pytest.mark.parametrize(
        ("name", "expected"),
        [("a.json", "json"), ("a.yaml", "yaml"), ("a.YML", "yaml")],
    )
    def test_known_formats(self, name: str, expected: str):
        assert detect_format(name) == expected

    def test_unknown_format(self):
        with pytest.raises(ValueError, match="Unsupported"):
            detect_format("config.toml")


class TestLoader:
    """Tests for reading config files."""

    def test_load_json(self, tmp_path: Path):
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"ramp": {"step_count": 9}, "gamut": {"backend": "formula"}}))

        config = load_app_config(path)

        assert config.ramp.step_count == 9
        assert config.gamut.backend == "formula"
        assert config.ramp.default_preset == "01"

    def test_load_yaml(self, tmp_path: Path):
        path = tmp_path / "config.yaml"
        path.write_text("ramp:\n  default_preset: null\nlogging:\n  structured: true\n")

        config = load_app_config(path)

        assert config.ramp.default_preset is None
        assert config.logging.structured is True

    def test_empty_yaml_is_defaults(self, tmp_path: Path):
        path = tmp_path / "config.yml"
        path.write_text("")
        assert load_config(path) == {}
        assert load_app_config(path) == AppConfig()

    def test_missing_file_uses_defaults(self, tmp_path: Path):
        assert load_app_config(tmp_path / "absent.json") == AppConfig()

    def test_none_uses_defaults(self):
        assert load_app_config(None) == AppConfig()

    def test_load_config_missing_file_raises(self, tmp_path: Path):
        with pytest.raises(FileNotFoundError):
            load_config(tmp_path / "absent.json")

    def test_invalid_json(self, tmp_path: Path):
        path = tmp_path / "config.json"
        path.write_text("{not json")
        with pytest.raises(ValueError, match="Invalid JSON"):
            load_config(path)

    def test_invalid_values(self, tmp_path: Path):
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"ramp": {"step_count": 50}}))
        with pytest.raises(ValidationError):
            load_app_config(path)
