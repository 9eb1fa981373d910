"""Curve evaluators.

Each evaluator maps a curve and a step count to one value per step. All are
pure functions of their inputs.
"""

from __future__ import annotations

from chromaramp.core.curves.easing import get_easing
from chromaramp.core.curves.models import ChromaCurve, EasingType, HueCurve, LightnessCurve
from chromaramp.core.errors import ConfigurationError


def step_positions(step_count: int) -> list[float]:
    """Normalized positions t = i / (step_count - 1) for each step.

    A single step sits at t = 0.

    Raises:
        ConfigurationError: If step_count < 1.

    Example:
        >>> step_positions(5)
        [0.0, 0.25, 0.5, 0.75, 1.0]
    """
    if step_count < 1:
        raise ConfigurationError(f"step_count must be >= 1, got {step_count}")
    if step_count == 1:
        return [0.0]
    return [i / (step_count - 1) for i in range(step_count)]


def _evaluate_eased(start: float, end: float, easing: EasingType, step_count: int) -> list[float]:
    remap = get_easing(easing)
    return [start + (end - start) * remap(t) for t in step_positions(step_count)]


def evaluate_lightness(curve: LightnessCurve, step_count: int) -> list[float]:
    """Evaluate a lightness curve at every step.

    Example:
        >>> evaluate_lightness(LightnessCurve(start=1.0, end=0.0), 3)
        [1.0, 0.5, 0.0]
    """
    return _evaluate_eased(curve.start, curve.end, curve.type, step_count)


def evaluate_hue(curve: HueCurve, step_count: int) -> list[float]:
    """Evaluate a hue curve (degrees) at every step. Values are not wrapped."""
    return _evaluate_eased(curve.start, curve.end, curve.type, step_count)


def evaluate_chroma(curve: ChromaCurve, step_count: int) -> list[float]:
    """Evaluate a chroma curve at every step.

    Piecewise linear: start -> peak over [0, peak_position], then
    peak -> end over (peak_position, 1].

    Raises:
        ConfigurationError: If peak_position is not strictly inside (0, 1).
    """
    peak_pos = curve.peak_position
    if not 0.0 < peak_pos < 1.0:
        raise ConfigurationError(f"peak_position must be in (0, 1), got {peak_pos}")

    values: list[float] = []
    for t in step_positions(step_count):
        if t <= peak_pos:
            values.append(_lerp(curve.start, curve.peak, t / peak_pos))
        else:
            values.append(_lerp(curve.peak, curve.end, (t - peak_pos) / (1 - peak_pos)))
    return values


def _lerp(a: float, b: float, u: float) -> float:
    # Weighted form returns a and b exactly at u == 0 and u == 1
    return a * (1.0 - u) + b * u


__all__ = [
    "evaluate_chroma",
    "evaluate_hue",
    "evaluate_lightness",
    "step_positions",
]
