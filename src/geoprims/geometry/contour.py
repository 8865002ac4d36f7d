"""
Closed point sequences (polygon rings).

A `Contour` stores its vertices once; the edge from the last vertex back to the first
is implicit and shows up only in `points_closed()` / `segments()`.
"""

from __future__ import annotations

import itertools
from collections.abc import Iterator
from typing import TypeVar

from geoprims.geometry.cartesian import xy
from geoprims.geometry.polyline import PointSequence
from geoprims.geometry.segment import Segment, iter_segments

P = TypeVar("P")


class Contour(PointSequence[P]):
    """Closed ring of vertices.

    >>> square = Contour([(0, 0), (0, 10), (10, 10), (10, 0)])
    >>> square.points_count()
    4
    >>> square.length()
    40.0
    >>> square.area()
    100.0
    """

    __slots__ = ()

    def points_closed(self) -> Iterator[P]:
        """Vertices followed by the first vertex again (n+1 items, or none when empty)."""
        return itertools.chain(self.points(), itertools.islice(self.points(), 1))

    def segments(self) -> Iterator[Segment[P]]:
        """Edges of the ring; the last one runs from the last vertex back to the first."""
        return iter_segments(self.points_closed())

    def length(self) -> float:
        """Perimeter."""
        return sum((s.length() for s in self.segments()), 0.0)

    perimeter = length

    def signed_area(self) -> float:
        """Shoelace area, positive for counter-clockwise vertex order.

        Coordinates are shifted so the first vertex sits at the origin before the
        products are summed. For self-intersecting rings the result is
        `area(ccw parts) - area(cw parts)`, not a geometric area.
        """
        if self.points_count() < 3:
            return 0.0
        x0, y0 = xy(self[0])
        dx, dy = -x0, -y0
        total = sum((s.determinant_shifted(dx, dy) for s in self.segments()), 0.0)
        return total / 2.0

    def area(self) -> float:
        """Unsigned area; 0 for fewer than three vertices."""
        return abs(self.signed_area())

    def is_counter_clockwise(self) -> bool:
        return self.signed_area() > 0
