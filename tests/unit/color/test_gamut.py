"""Tests for gamut predicates, the boundary search and its cache."""

from __future__ import annotations

import pytest

from chromaramp.core.color.gamut import (
    ColorAideGamutChecker,
    FormulaGamutChecker,
    GamutBoundary,
    GamutCache,
    GamutChecker,
    build_gamut_boundary,
    get_gamut_checker,
)
from chromaramp.core.errors import ConfigurationError, GamutSearchDegenerateError


class CountingChecker:
    """Formula predicate that records how often it is called."""

    def __init__(self) -> None:
        self.calls = 0
        self._inner = FormulaGamutChecker()

    def in_gamut(self, l: float, c: float, h: float) -> bool:
        self.calls += 1
        return self._inner.in_gamut(l, c, h)


class AlwaysInGamut:
    """Predicate that accepts every color."""

    def in_gamut(self, l: float, c: float, h: float) -> bool:
        return True


class TestGamutCheckers:
    """Tests for checker selection and backend agreement."""

    def test_checkers_satisfy_protocol(self):
        """Both backends are GamutCheckers."""
        assert isinstance(ColorAideGamutChecker(), GamutChecker)
        assert isinstance(FormulaGamutChecker(), GamutChecker)

    def test_get_checker_by_name(self):
        """Backend names map to checker classes."""
        assert isinstance(get_gamut_checker("coloraide"), ColorAideGamutChecker)
        assert isinstance(get_gamut_checker("formula"), FormulaGamutChecker)

    def test_unknown_backend_raises(self):
        """Unknown backend names are configuration errors."""
        with pytest.raises(ConfigurationError, match="Unknown gamut backend"):
            get_gamut_checker("p3")  # type: ignore[arg-type]

    def test_coloraide_accepts_gray(self):
        """coloraide agrees grays are displayable."""
        assert ColorAideGamutChecker().in_gamut(0.5, 0.0, 0.0)

    def test_coloraide_rejects_high_chroma(self):
        """coloraide rejects C=0.4 at mid lightness."""
        assert not ColorAideGamutChecker().in_gamut(0.5, 0.4, 200.0)

    @pytest.mark.parametrize(("l", "h"), [(0.5, 30.0), (0.7, 140.0), (0.4, 264.0), (0.85, 95.0)])
    def test_backends_agree_on_boundary(self, l: float, h: float):
        """Both predicates place the boundary within a few thousandths."""
        formula = GamutBoundary(FormulaGamutChecker()).find_max_chroma(l, h)
        coloraide = GamutBoundary(ColorAideGamutChecker()).find_max_chroma(l, h)
        assert formula == pytest.approx(coloraide, abs=0.005)


class TestGamutBoundary:
    """Tests for the max-chroma binary search."""

    def test_result_in_gamut(self, boundary: GamutBoundary):
        """The returned chroma is displayable."""
        c = boundary.find_max_chroma(0.5, 30.0)
        assert boundary.in_gamut(0.5, c, 30.0)

    def test_result_is_tight(self, boundary: GamutBoundary):
        """Slightly more chroma than the result leaves the gamut."""
        c = boundary.find_max_chroma(0.5, 30.0)
        assert not boundary.in_gamut(0.5, c + 0.002, 30.0)

    def test_result_within_bounds(self, boundary: GamutBoundary):
        """Results lie in [0, max_chroma]."""
        for l in (0.0, 0.1, 0.5, 0.9, 1.0):
            for h in (0.0, 90.0, 180.0, 270.0, 359.9):
                c = boundary.find_max_chroma(l, h)
                assert 0.0 <= c <= boundary.max_chroma

    def test_white_has_no_chroma(self, boundary: GamutBoundary):
        """White admits (almost) no chroma."""
        assert boundary.find_max_chroma(1.0, 120.0) < 0.002

    def test_max_chroma_shortcut(self):
        """When max_chroma is in gamut it is returned without searching."""
        boundary = GamutBoundary(AlwaysInGamut())
        assert boundary.find_max_chroma(0.5, 30.0) == 0.4

    def test_repeated_call_hits_cache(self):
        """A second identical call returns the same value without searching."""
        checker = CountingChecker()
        boundary = GamutBoundary(checker)

        first = boundary.find_max_chroma(0.5, 30.0)
        calls_after_first = checker.calls
        second = boundary.find_max_chroma(0.5, 30.0)

        assert first == second
        assert checker.calls == calls_after_first
        assert boundary.searches == 1
        assert boundary.cache.hits == 1
        assert boundary.cache.misses == 1

    def test_nearby_inputs_share_cache_entry(self, boundary: GamutBoundary):
        """Inputs equal after rounding share one search."""
        boundary.find_max_chroma(0.5, 30.0)
        boundary.find_max_chroma(0.50004, 30.04)
        assert boundary.searches == 1

    def test_invalidate_forces_new_search(self, boundary: GamutBoundary):
        """Clearing the cache re-runs the search."""
        boundary.find_max_chroma(0.5, 30.0)
        boundary.invalidate()
        boundary.find_max_chroma(0.5, 30.0)
        assert boundary.searches == 2
        assert len(boundary.cache) == 1

    @pytest.mark.parametrize(("l", "h"), [(-0.1, 30.0), (1.1, 30.0), (0.5, -1.0), (0.5, 360.0)])
    def test_out_of_range_inputs_raise(self, boundary: GamutBoundary, l: float, h: float):
        """Lightness outside [0, 1] or hue outside [0, 360) is degenerate."""
        with pytest.raises(GamutSearchDegenerateError):
            boundary.find_max_chroma(l, h)

    def test_invalid_precision_raises(self):
        """precision must be positive."""
        with pytest.raises(ConfigurationError):
            GamutBoundary(FormulaGamutChecker(), precision=0.0)

    def test_build_gamut_boundary(self):
        """The factory wires backend and cache rounding."""
        boundary = build_gamut_boundary("formula", lightness_decimals=2, hue_decimals=0)
        assert isinstance(boundary.checker, FormulaGamutChecker)
        assert boundary.cache.key(0.504, 30.4) == (0.5, 30.0)


class TestGamutCache:
    """Tests for the memoization map."""

    def test_key_rounding(self):
        """Keys round lightness to 3 and hue to 1 decimal by default."""
        assert GamutCache().key(0.12345, 200.06) == (0.123, 200.1)

    def test_get_miss_then_hit(self):
        """Misses and hits are counted."""
        cache = GamutCache()
        assert cache.get(0.5, 30.0) is None
        cache.put(0.5, 30.0, 0.123)
        assert cache.get(0.5, 30.0) == 0.123
        assert (cache.hits, cache.misses) == (1, 1)

    def test_zero_chroma_is_cached(self):
        """A boundary of 0.0 is a real entry, not a miss."""
        cache = GamutCache()
        cache.put(1.0, 0.0, 0.0)
        assert cache.get(1.0, 0.0) == 0.0
        assert cache.hits == 1

    def test_contains_and_clear(self):
        """Membership uses rounded keys; clear empties the map."""
        cache = GamutCache()
        cache.put(0.5, 30.0, 0.1)
        assert (0.50001, 30.01) in cache
        cache.clear()
        assert len(cache) == 0
