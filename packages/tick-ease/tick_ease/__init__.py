"""tick-ease - Lazy eased value sequences along named easing curves."""
from __future__ import annotations

from tick_ease.easers import (
    EASERS,
    cubic_in,
    cubic_inout,
    cubic_out,
    ease,
    exp_in,
    exp_inout,
    exp_out,
    linear,
    linear_in,
    linear_inout,
    linear_out,
    quad_in,
    quad_inout,
    quad_out,
    quartic_in,
    quartic_inout,
    quartic_out,
    sin_in,
    sin_inout,
    sin_out,
)
from tick_ease.easing import EASINGS
from tick_ease.sequence import EasingSequence, make_easer

__all__ = [
    "EasingSequence",
    "make_easer",
    "ease",
    "EASINGS",
    "EASERS",
    "linear",
    "linear_in",
    "linear_out",
    "linear_inout",
    "quad_in",
    "quad_out",
    "quad_inout",
    "cubic_in",
    "cubic_out",
    "cubic_inout",
    "quartic_in",
    "quartic_out",
    "quartic_inout",
    "sin_in",
    "sin_out",
    "sin_inout",
    "exp_in",
    "exp_out",
    "exp_inout",
]
