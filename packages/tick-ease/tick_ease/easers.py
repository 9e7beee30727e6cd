"""Named sequence constructors, one per easing curve."""
from __future__ import annotations

from typing import Callable

from tick_ease import easing
from tick_ease.sequence import EasingSequence, make_easer

linear = make_easer(easing.linear)
linear_in = linear
linear_out = linear
linear_inout = linear

quad_in = make_easer(easing.quad_in)
quad_out = make_easer(easing.quad_out)
quad_inout = make_easer(easing.quad_inout)

cubic_in = make_easer(easing.cubic_in)
cubic_out = make_easer(easing.cubic_out)
cubic_inout = make_easer(easing.cubic_inout)

quartic_in = make_easer(easing.quartic_in)
quartic_out = make_easer(easing.quartic_out)
quartic_inout = make_easer(easing.quartic_inout)

sin_in = make_easer(easing.sin_in)
sin_out = make_easer(easing.sin_out)
sin_inout = make_easer(easing.sin_inout)

exp_in = make_easer(easing.exp_in)
exp_out = make_easer(easing.exp_out)
exp_inout = make_easer(easing.exp_inout)

EASERS: dict[str, Callable[[float, float, int], EasingSequence]] = {
    "linear": linear,
    "linear_in": linear_in,
    "linear_out": linear_out,
    "linear_inout": linear_inout,
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


def ease(name: str, start: float, end: float, steps: int) -> EasingSequence:
    """Build a sequence for the curve registered as ``name``.

    Raises KeyError if no such curve exists.
    """
    easer = EASERS.get(name)
    if easer is None:
        raise KeyError(f"Unknown easing: '{name}'")
    return easer(start, end, steps)
