"""
Line segments over point sequences.

A `Segment` pairs two points taken from a sequence. It keeps references to the
caller's own point objects (no coordinate copies), so it is cheap to create and
meant to live only for the duration of a traversal.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Generic, TypeVar

from geoprims.geometry.cartesian import distance, xy

P = TypeVar("P")


@dataclass(frozen=True, slots=True)
class Segment(Generic[P]):
    """Two adjacent points of a polyline or contour."""

    start: P
    end: P

    def length(self) -> float:
        """Euclidean distance between the endpoints."""
        return distance(self.start, self.end)

    def determinant(self) -> float:
        """`x1*y2 - x2*y1`: twice the signed area of the triangle (origin, start, end)."""
        x1, y1 = xy(self.start)
        x2, y2 = xy(self.end)
        return x1 * y2 - x2 * y1

    def determinant_shifted(self, dx: float, dy: float) -> float:
        """Same as `determinant()`, computed after translating both endpoints by `(dx, dy)`.

        Large absolute coordinates (UTM-like values in the millions) lose precision when
        multiplied directly; moving the shape next to the origin first keeps the products small.
        """
        x1, y1 = xy(self.start)
        x2, y2 = xy(self.end)
        x1 += dx
        y1 += dy
        x2 += dx
        y2 += dy
        return x1 * y2 - x2 * y1


def iter_segments(points: Iterable[P]) -> Iterator[Segment[P]]:
    """Yield segments pairing consecutive points: (p0, p1), (p1, p2), ...

    Fewer than two points yield nothing.
    """
    it = iter(points)
    try:
        prev = next(it)
    except StopIteration:
        return
    for point in it:
        yield Segment(prev, point)
        prev = point
