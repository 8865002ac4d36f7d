"""
Open point sequences.

`PointSequence` is the shared vertex contract (count, indexing, fresh iteration).
`Polyline` adds open-chain semantics: n points make n-1 segments.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Generic, TypeVar, overload

from geoprims.geometry.segment import Segment, iter_segments

P = TypeVar("P")


class PointSequence(Generic[P]):
    """Immutable, ordered, indexable sequence of points."""

    __slots__ = ("_points",)

    def __init__(self, points: Iterable[P] = ()):
        self._points: tuple[P, ...] = tuple(points)

    @classmethod
    def of(cls, *points: P):
        return cls(points)

    def points_count(self) -> int:
        """Number of vertices (no virtual closing point)."""
        return len(self._points)

    def points(self) -> Iterator[P]:
        """A fresh iterator over the vertices in stored order."""
        return iter(self._points)

    def __len__(self) -> int:
        return len(self._points)

    def __iter__(self) -> Iterator[P]:
        return iter(self._points)

    @overload
    def __getitem__(self, index: int) -> P: ...

    @overload
    def __getitem__(self, index: slice) -> tuple[P, ...]: ...

    def __getitem__(self, index):
        return self._points[index]

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._points == other._points

    def __hash__(self) -> int:
        return hash((type(self).__name__, self._points))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self._points)!r})"


class Polyline(PointSequence[P]):
    """Open chain of vertices."""

    __slots__ = ()

    def segments(self) -> Iterator[Segment[P]]:
        return iter_segments(self.points())

    def length(self) -> float:
        """Sum of segment lengths; 0 for fewer than two points."""
        return sum((s.length() for s in self.segments()), 0.0)
