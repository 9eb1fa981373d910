"""sRGB gamut checking and maximum-chroma boundary search.

Two interchangeable gamut predicates are provided:

- ``ColorAideGamutChecker`` delegates to coloraide (CSS Color 4 accurate).
- ``FormulaGamutChecker`` uses the closed-form Ottosson conversion in
  ``chromaramp.core.color.conversion``.

Both agree within ~1e-3 chroma at the boundary. ``GamutBoundary`` binary
searches the largest in-gamut chroma for a lightness/hue pair and memoizes
results in a ``GamutCache``.
"""

from __future__ import annotations

import logging
import threading
from typing import Literal, Protocol, runtime_checkable

from coloraide import Color

from chromaramp.core.color.conversion import is_in_srgb_gamut
from chromaramp.core.errors import ConfigurationError, GamutSearchDegenerateError

logger = logging.getLogger(__name__)

GamutBackend = Literal["coloraide", "formula"]

DEFAULT_MAX_CHROMA = 0.4
DEFAULT_PRECISION = 0.001


@runtime_checkable
class GamutChecker(Protocol):
    """Predicate deciding whether an OKLCH color is displayable in sRGB."""

    def in_gamut(self, l: float, c: float, h: float) -> bool:
        """Return True if (l, c, h) maps inside the sRGB cube."""
        ...


class ColorAideGamutChecker:
    """Gamut predicate backed by coloraide's sRGB gamut test."""

    name = "coloraide"

    def in_gamut(self, l: float, c: float, h: float) -> bool:
        return Color("oklch", [l, c, h]).in_gamut("srgb")


class FormulaGamutChecker:
    """Gamut predicate using the self-contained Ottosson formula."""

    name = "formula"

    def in_gamut(self, l: float, c: float, h: float) -> bool:
        return is_in_srgb_gamut(l, c, h)


def get_gamut_checker(backend: GamutBackend = "coloraide") -> GamutChecker:
    """Create the gamut predicate for a configured backend name.

    Raises:
        ConfigurationError: If backend is not a known name.
    """
    if backend == "coloraide":
        return ColorAideGamutChecker()
    if backend == "formula":
        return FormulaGamutChecker()
    raise ConfigurationError(f"Unknown gamut backend: {backend!r}")


class GamutCache:
    """Memoizing map from quantized (lightness, hue) to max in-gamut chroma.

    Keys round lightness to ``lightness_decimals`` and hue to ``hue_decimals``
    places. Access is guarded by a single lock.

    Example:
        >>> cache = GamutCache()
        >>> cache.key(0.50004, 30.04)
        (0.5, 30.0)
    """

    def __init__(self, lightness_decimals: int = 3, hue_decimals: int = 1) -> None:
        self._lightness_decimals = lightness_decimals
        self._hue_decimals = hue_decimals
        self._entries: dict[tuple[float, float], float] = {}
        self._lock = threading.Lock()
        self.hits = 0
        self.misses = 0

    def key(self, l: float, h: float) -> tuple[float, float]:
        return (round(l, self._lightness_decimals), round(h, self._hue_decimals))

    def get(self, l: float, h: float) -> float | None:
        with self._lock:
            value = self._entries.get(self.key(l, h))
            if value is None:
                self.misses += 1
            else:
                self.hits += 1
            return value

    def put(self, l: float, h: float, max_chroma: float) -> None:
        with self._lock:
            self._entries[self.key(l, h)] = max_chroma

    def clear(self) -> None:
        with self._lock:
            count = len(self._entries)
            self._entries.clear()
        logger.debug(f"Cleared gamut cache ({count} entries)")

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, lh: tuple[float, float]) -> bool:
        return self.key(*lh) in self._entries


class GamutBoundary:
    """Binary search for the maximum in-gamut chroma at a lightness/hue pair.

    Invariant during the search: ``in_gamut(l, low, h)`` holds and
    ``in_gamut(l, high, h)`` does not. When ``max_chroma`` itself is in gamut
    the search is skipped and ``max_chroma`` is returned.

    Example:
        >>> boundary = GamutBoundary(FormulaGamutChecker())
        >>> c = boundary.find_max_chroma(0.5, 30.0)
        >>> 0.0 < c < 0.4
        True
    """

    def __init__(
        self,
        checker: GamutChecker | None = None,
        cache: GamutCache | None = None,
        *,
        max_chroma: float = DEFAULT_MAX_CHROMA,
        precision: float = DEFAULT_PRECISION,
    ) -> None:
        if precision <= 0:
            raise ConfigurationError("precision must be > 0")
        if max_chroma <= 0:
            raise ConfigurationError("max_chroma must be > 0")
        self.checker = checker if checker is not None else ColorAideGamutChecker()
        self.cache = cache if cache is not None else GamutCache()
        self.max_chroma = max_chroma
        self.precision = precision
        self.searches = 0

    def in_gamut(self, l: float, c: float, h: float) -> bool:
        return self.checker.in_gamut(l, c, h)

    def find_max_chroma(self, l: float, h: float) -> float:
        """Find the largest chroma displayable in sRGB at lightness l, hue h.

        Args:
            l: OKLCH lightness in [0, 1].
            h: Hue angle in degrees, [0, 360).

        Returns:
            Max in-gamut chroma, accurate to ``precision`` (never above the
            true boundary by more than the checker's tolerance).

        Raises:
            GamutSearchDegenerateError: If l or h is outside its range.
        """
        if not 0.0 <= l <= 1.0:
            raise GamutSearchDegenerateError(f"Lightness must be in [0, 1], got {l}")
        if not 0.0 <= h < 360.0:
            raise GamutSearchDegenerateError(f"Hue must be in [0, 360), got {h}")

        cached = self.cache.get(l, h)
        if cached is not None:
            return cached

        result = self._search(l, h)
        self.cache.put(l, h, result)
        return result

    def _search(self, l: float, h: float) -> float:
        self.searches += 1

        if self.in_gamut(l, self.max_chroma, h):
            return self.max_chroma

        low = 0.0
        high = self.max_chroma
        while high - low > self.precision:
            mid = (low + high) / 2
            if self.in_gamut(l, mid, h):
                low = mid
            else:
                high = mid
        return low

    def invalidate(self) -> None:
        """Drop all memoized boundary values."""
        self.cache.clear()


def build_gamut_boundary(
    backend: GamutBackend = "coloraide",
    *,
    max_chroma: float = DEFAULT_MAX_CHROMA,
    precision: float = DEFAULT_PRECISION,
    lightness_decimals: int = 3,
    hue_decimals: int = 1,
) -> GamutBoundary:
    """Create a boundary search with a fresh cache for the given backend."""
    return GamutBoundary(
        get_gamut_checker(backend),
        GamutCache(lightness_decimals=lightness_decimals, hue_decimals=hue_decimals),
        max_chroma=max_chroma,
        precision=precision,
    )


__all__ = [
    "ColorAideGamutChecker",
    "DEFAULT_MAX_CHROMA",
    "DEFAULT_PRECISION",
    "FormulaGamutChecker",
    "GamutBackend",
    "GamutBoundary",
    "GamutCache",
    "GamutChecker",
    "build_gamut_boundary",
    "get_gamut_checker",
]
