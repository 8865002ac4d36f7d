"""
Planar (Cartesian 2-D) points.

A "point" here is anything we can read `x`/`y` from:
- an object exposing `x` and `y` attributes (dataclass, namedtuple, pydantic model, ...)
- a 2-element indexable sequence such as `(x, y)` or `[x, y]`

Distances are written once against that capability, so callers never need to wrap
their own point types or inherit from a base class.
"""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Protocol, Union, runtime_checkable


@runtime_checkable
class Cartesian2(Protocol):
    """Anything with planar `x`/`y` coordinates."""

    @property
    def x(self) -> float: ...

    @property
    def y(self) -> float: ...


PointLike = Union[Cartesian2, Sequence[float]]


def xy(point: PointLike) -> tuple[float, float]:
    """Return `(x, y)` as floats for any supported point representation."""
    if isinstance(point, Cartesian2):
        return float(point.x), float(point.y)
    if isinstance(point, Sequence) and not isinstance(point, (str, bytes)) and len(point) == 2:
        return float(point[0]), float(point[1])
    raise TypeError(f"Expected an object with x/y or a 2-element sequence, got {point!r}")


def distance_square(a: PointLike, b: PointLike) -> float:
    """Squared Euclidean distance (`dx² + dy²`)."""
    ax, ay = xy(a)
    bx, by = xy(b)
    dx = ax - bx
    dy = ay - by
    return dx * dx + dy * dy


def distance(a: PointLike, b: PointLike) -> float:
    """Euclidean distance."""
    return math.sqrt(distance_square(a, b))


def taxicab_distance(a: PointLike, b: PointLike) -> float:
    """Manhattan distance (`|dx| + |dy|`)."""
    ax, ay = xy(a)
    bx, by = xy(b)
    return abs(ax - bx) + abs(ay - by)


@dataclass(frozen=True, slots=True)
class Point2:
    """A plain planar point."""

    x: float
    y: float

    @classmethod
    def from_xy(cls, x: float, y: float) -> "Point2":
        return cls(x=float(x), y=float(y))

    def distance_square(self, other: PointLike) -> float:
        return distance_square(self, other)

    def distance(self, other: PointLike) -> float:
        return distance(self, other)

    def taxicab_distance(self, other: PointLike) -> float:
        return taxicab_distance(self, other)
