"""Application configuration models and loaders."""

from chromaramp.core.config.loader import detect_format, load_app_config, load_config
from chromaramp.core.config.models import AppConfig, GamutConfig, LoggingConfig, RampConfig

__all__ = [
    "AppConfig",
    "GamutConfig",
    "LoggingConfig",
    "RampConfig",
    "detect_format",
    "load_app_config",
    "load_config",
]
