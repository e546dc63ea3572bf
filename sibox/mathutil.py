"""Axis-aligned rectangles and smoothing helpers."""

from __future__ import annotations

from dataclasses import dataclass
from numbers import Real
from typing import Sequence, Union

Number = Union[int, float]


@dataclass
class Rect:
    """An axis-aligned rectangle given by its corner position and size."""

    x: Number
    y: Number
    width: Number
    height: Number

    @property
    def position(self) -> tuple[Number, Number]:
        return (self.x, self.y)

    @property
    def size(self) -> tuple[Number, Number]:
        return (self.width, self.height)

    @property
    def center(self) -> tuple[float, float]:
        return (self.x + self.width / 2.0, self.y + self.height / 2.0)

    def overlaps_with(self, other: Rect) -> bool:
        """True if the interiors intersect; rectangles that only touch do not overlap."""
        return (
            self.x < other.x + other.width
            and self.x + self.width > other.x
            and self.y < other.y + other.height
            and self.y + self.height > other.y
        )

    def contains_rect(self, other: Rect) -> bool:
        """True if ``other`` lies entirely inside this rectangle, edges included."""
        return (
            self.x <= other.x
            and self.x + self.width >= other.x + other.width
            and self.y <= other.y
            and self.y + self.height >= other.y + other.height
        )

    def contains_point(self, point: Sequence[Number]) -> bool:
        """True if the ``(x, y)`` point lies inside or on the edge."""
        px, py = point
        return self.x <= px <= self.x + self.width and self.y <= py <= self.y + self.height


def _lerp_scalar(a: float, b: float, r: float, delta: float) -> float:
    return (a - b) * r**delta + b


def lerp_smooth(a, b, r: float, delta: float):
    """Frame-rate independent approach of ``a`` towards ``b``.

    ``r`` is the fraction of the distance remaining after one unit of time.
    Works on numbers or on equal-length sequences of numbers.
    """
    if isinstance(a, Real) and isinstance(b, Real):
        return _lerp_scalar(a, b, r, delta)
    return tuple(_lerp_scalar(x, y, r, delta) for x, y in zip(a, b, strict=True))