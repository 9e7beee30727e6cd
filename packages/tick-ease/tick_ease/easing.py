"""Easing formulas mapping linear progress in [0, 1] to eased progress.

Every formula satisfies ``f(0.0) == 0.0`` and ``f(1.0) == 1.0`` exactly, so a
sequence built on it starts at its start value and lands on its end value.
Input outside [0, 1] is not part of the contract.
"""
from __future__ import annotations

import math
from typing import Callable

_HALF_PI = math.pi / 2


def _clamp(t: float) -> float:
    # math.sin raises on infinite input.
    return min(max(t, 0.0), 1.0)


def linear(t: float) -> float:
    return t


def quad_in(t: float) -> float:
    return t * t


def quad_out(t: float) -> float:
    return t * (2 - t)


def quad_inout(t: float) -> float:
    if t < 0.5:
        return 2 * t * t
    u = 1 - t
    return 1 - 2 * u * u


def cubic_in(t: float) -> float:
    return t * t * t


def cubic_out(t: float) -> float:
    u = 1 - t
    return 1 - u * u * u


def cubic_inout(t: float) -> float:
    if t < 0.5:
        return 4 * t * t * t
    u = 1 - t
    return 1 - 4 * u * u * u


def quartic_in(t: float) -> float:
    return t * t * t * t


def quartic_out(t: float) -> float:
    u = 1 - t
    return 1 - u * u * u * u


def quartic_inout(t: float) -> float:
    if t < 0.5:
        return 8 * t * t * t * t
    u = 1 - t
    return 1 - 8 * u * u * u * u


def sin_in(t: float) -> float:
    """Equal to ``1 - cos(t * pi/2)``; the sine form hits 0 and 1 exactly."""
    t = _clamp(t)
    return math.sin((t - 1) * _HALF_PI) + 1


def sin_out(t: float) -> float:
    return math.sin(_clamp(t) * _HALF_PI)


def sin_inout(t: float) -> float:
    """Equal to ``-(cos(pi * t) - 1) / 2``; the sine form gives f(0.5) == 0.5."""
    t = _clamp(t)
    return (1 + math.sin(math.pi * (t - 0.5))) / 2


def exp_in(t: float) -> float:
    # 2 ** -10 at t=0 is not 0, so the lower edge is pinned.
    if t <= 0.0:
        return 0.0
    if t >= 1.0:
        return 1.0
    return 2.0 ** (10 * (t - 1))


def exp_out(t: float) -> float:
    if t <= 0.0:
        return 0.0
    if t >= 1.0:
        return 1.0
    return 1 - 2.0 ** (-10 * t)


def exp_inout(t: float) -> float:
    """Base-2 exponential in each half, meeting at exactly 0.5."""
    if t <= 0.0:
        return 0.0
    if t >= 1.0:
        return 1.0
    if t < 0.5:
        return 2.0 ** (20 * t - 10) / 2
    return 1 - 2.0 ** (10 - 20 * t) / 2


EASINGS: dict[str, Callable[[float], float]] = {
    "linear": linear,
    "linear_in": linear,
    "linear_out": linear,
    "linear_inout": linear,
    "quad_in": quad_in,
    "quad_out": quad_out,
    "quad_inout": quad_inout,
    "cubic_in": cubic_in,
    "cubic_out": cubic_out,
    "cubic_inout": cubic_inout,
    "quartic_in": quartic_in,
    "quartic_out": quartic_out,
    "quartic_inout": quartic_inout,
    "sin_in": sin_in,
    "sin_out": sin_out,
    "sin_inout": sin_inout,
    "exp_in": exp_in,
    "exp_out": exp_out,
    "exp_inout": exp_inout,
}
