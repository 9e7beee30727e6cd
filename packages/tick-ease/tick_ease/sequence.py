"""Lazy eased sequences and the factory that builds their constructors."""
from __future__ import annotations

from typing import Callable


class EasingSequence:
    """Finite iterator of ``steps`` values eased from ``start`` to ``end``.

    Value ``i`` is ``start + (end - start) * easing(i / (steps - 1))``. Nothing
    is computed until a value is pulled. A consumed sequence stays exhausted;
    construct a new one to iterate again. The first value is ``start`` itself
    and the final value of a longer sequence is ``end`` itself, so
    ``steps == 1`` yields ``[start]``.

    NaN or infinite ``start``/``end`` are not checked and give unspecified
    values.
    """

    __slots__ = ("_start", "_end", "_dist", "_steps", "_easing", "_index")

    def __init__(
        self,
        start: float,
        end: float,
        steps: int,
        easing: Callable[[float], float],
    ) -> None:
        if steps < 0:
            raise ValueError(f"steps must be >= 0, got {steps}")
        self._start = start
        self._end = end
        self._dist = end - start
        self._steps = steps
        self._easing = easing
        self._index = 0

    @property
    def start(self) -> float:
        return self._start

    @property
    def end(self) -> float:
        return self._end

    @property
    def steps(self) -> int:
        return self._steps

    @property
    def easing(self) -> Callable[[float], float]:
        return self._easing

    @property
    def index(self) -> int:
        """Index of the next value to produce."""
        return self._index

    @property
    def remaining(self) -> int:
        return max(self._steps - self._index, 0)

    @property
    def exhausted(self) -> bool:
        return self._index >= self._steps

    def __iter__(self) -> EasingSequence:
        return self

    def __next__(self) -> float:
        i = self._index
        if i >= self._steps:
            raise StopIteration
        self._index = i + 1
        if i == 0:
            return self._start
        last = self._steps - 1
        if i == last:
            return self._end
        return self._start + self._dist * self._easing(i / last)

    def __length_hint__(self) -> int:
        return self.remaining

    def __repr__(self) -> str:
        name = getattr(self._easing, "__name__", repr(self._easing))
        return (
            f"EasingSequence({name}, start={self._start!r}, end={self._end!r}, "
            f"steps={self._steps}, index={self._index})"
        )


def make_easer(
    easing_fn: Callable[[float], float],
    name: str | None = None,
) -> Callable[[float, float, int], EasingSequence]:
    """Return a ``(start, end, steps)`` constructor bound to ``easing_fn``."""
    easer_name = name or easing_fn.__name__

    def easer(start: float, end: float, steps: int) -> EasingSequence:
        return EasingSequence(start, end, steps, easing_fn)

    easer.__name__ = easer_name
    easer.__qualname__ = easer_name
    easer.__doc__ = (
        f"Ease from start to end over steps values along the {easer_name} curve."
    )
    return easer
