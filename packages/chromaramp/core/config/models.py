"""Configuration models for chromaramp."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class RampConfig(BaseModel):
    """Ramp generation settings."""

    model_config = ConfigDict(extra="forbid")

    step_count: int = Field(default=12, ge=2, le=20, description="Steps per hue family")

    default_preset: str | None = Field(
        default="01",
        description="Preset applied when the store is built (None keeps builtin defaults)",
    )


class GamutConfig(BaseModel):
    """Gamut predicate and boundary search settings."""

    model_config = ConfigDict(extra="forbid")

    backend: Literal["coloraide", "formula"] = Field(
        default="coloraide",
        description="'coloraide' (CSS Color 4 accurate) or 'formula' (self-contained Ottosson math)",
    )

    max_chroma: float = Field(default=0.4, gt=0.0, le=0.5, description="Upper search bound")

    precision: float = Field(default=0.001, gt=0.0, le=0.1, description="Search stop width")

    lightness_decimals: int = Field(
        default=3, ge=0, le=6, description="Lightness rounding for cache keys"
    )

    hue_decimals: int = Field(default=1, ge=0, le=6, description="Hue rounding for cache keys")


class LoggingConfig(BaseModel):
    """Logging configuration."""

    model_config = ConfigDict(extra="forbid")

    level: str = Field(
        default="INFO",
        pattern="^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$",
        description="Logging level",
    )

    format: str = Field(
        default="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        description="Log format string (ignored when structured)",
    )

    structured: bool = Field(default=False, description="Emit JSON log lines")


class AppConfig(BaseModel):
    """Application configuration."""

    model_config = ConfigDict(extra="forbid")

    ramp: RampConfig = Field(default_factory=RampConfig)
    gamut: GamutConfig = Field(default_factory=GamutConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


__all__ = [
    "AppConfig",
    "GamutConfig",
    "LoggingConfig",
    "RampConfig",
]
