"""Error types raised by the ramp engine."""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager

from pydantic import ValidationError


class ChromaRampError(Exception):
    """Base class for all chromaramp errors."""

    pass


class ConfigurationError(ChromaRampError, ValueError):
    """Raised for invalid curve parameters, step counts or adjustment targets.

    Raised before any family state is mutated.
    """

    pass


class UnknownPresetError(ChromaRampError, KeyError):
    """Raised when a preset id, name or alias is not in the catalog."""

    pass


class UnknownFamilyError(ChromaRampError, KeyError):
    """Raised when a hue family name is not in the store."""

    pass


class GamutSearchDegenerateError(ChromaRampError, ValueError):
    """Raised when a boundary search is requested outside valid L/H ranges."""

    pass


@contextmanager
def reraise_validation(context: str) -> Iterator[None]:
    """Re-raise pydantic validation failures as ConfigurationError."""
    try:
        yield
    except ValidationError as e:
        raise ConfigurationError(f"{context}: {e}") from e


__all__ = [
    "ChromaRampError",
    "ConfigurationError",
    "GamutSearchDegenerateError",
    "UnknownFamilyError",
    "UnknownPresetError",
    "reraise_validation",
]
