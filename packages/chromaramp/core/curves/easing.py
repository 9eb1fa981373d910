"""Easing remaps backed by easing-functions."""

from __future__ import annotations

from typing import Any, Protocol

from easing_functions import QuadEaseIn, QuadEaseInOut, QuadEaseOut

from chromaramp.core.curves.models import EasingType


class EasingFn(Protocol):
    def __call__(self, t: float) -> float: ...


_EASING_DEFAULTS: dict[str, float] = {
    "start": 0.0,
    "end": 1.0,
    "duration": 1.0,
}


def _make_easing(easing_cls: type[Any]) -> EasingFn:
    obj = easing_cls(**_EASING_DEFAULTS)
    return lambda t: obj.ease(t)


def _linear(t: float) -> float:
    return t


_EASINGS: dict[EasingType, EasingFn] = {
    EasingType.LINEAR: _linear,
    EasingType.EASE_IN: _make_easing(QuadEaseIn),
    EasingType.EASE_OUT: _make_easing(QuadEaseOut),
    EasingType.S_CURVE: _make_easing(QuadEaseInOut),
}


def get_easing(easing: EasingType | str) -> EasingFn:
    """Resolve an easing remap by type.

    Example:
        >>> get_easing("easeIn")(0.5)
        0.25
    """
    return _EASINGS[EasingType(easing)]


def ease(t: float, easing: EasingType | str = EasingType.LINEAR) -> float:
    """Remap a normalized position t in [0, 1]."""
    return float(get_easing(easing)(t))


__all__ = [
    "EasingFn",
    "ease",
    "get_easing",
]
