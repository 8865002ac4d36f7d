import math

import pytest

from geoprims.geometry.cartesian import Point2
from geoprims.geometry.polyline import Polyline


@pytest.mark.parametrize("count", [2, 3, 10])
def test_segments_of_open_chain(count):
    polyline = Polyline((float(i), float(i)) for i in range(count))

    assert len(list(polyline.segments())) == count - 1
    for seg in polyline.segments():
        assert seg.end[0] - seg.start[0] == 1.0
        assert seg.end[1] - seg.start[1] == 1.0


@pytest.mark.parametrize("count", [0, 1])
def test_no_segments_below_two_points(count):
    assert list(Polyline([(0.0, 0.0)] * count).segments()) == []


def test_zero_length():
    assert Polyline([]).length() == 0.0
    assert Polyline([(1.0, 1.0)]).length() == 0.0
    assert Polyline([(1.0, 1.0), (1.0, 1.0)]).length() == 0.0
    assert Polyline([(1.0, 1.0)] * 10).length() == 0.0


def test_length():
    assert Polyline([(0.0, 0.0), (1.0, 0.0)]).length() == 1.0
    assert Polyline([(0.0, 0.0), (1.0, 0.0), (2.0, 1.0)]).length() == pytest.approx(1.0 + math.sqrt(2.0))
    assert Polyline.of(Point2(0, 0), Point2(3, 4), Point2(3, 0)).length() == 9.0


@pytest.mark.parametrize("count", [0, 1, 2, 10])
def test_points_count(count):
    polyline = Polyline([(0.0, 0.0)] * count)
    assert polyline.points_count() == count
    assert len(polyline) == count


def test_points_are_restartable_and_ordered():
    polyline = Polyline([(0.0, 0.0), (1.0, 0.0), (2.0, 0.0)])

    for i, p in enumerate(polyline.points()):
        assert p[0] == float(i)

    first = polyline.points()
    second = polyline.points()
    next(first)
    assert list(second) == [(0.0, 0.0), (1.0, 0.0), (2.0, 0.0)]
    assert list(first) == [(1.0, 0.0), (2.0, 0.0)]
    assert polyline[1] == (1.0, 0.0)
    assert polyline[-1] == (2.0, 0.0)


def test_polyline_does_not_share_caller_list():
    points = [(0.0, 0.0), (1.0, 0.0)]
    polyline = Polyline(points)
    points.append((5.0, 0.0))

    assert polyline.points_count() == 2
    assert polyline.length() == 1.0


def test_equality_and_repr():
    a = Polyline([(0.0, 0.0), (1.0, 0.0)])
    b = Polyline.of((0.0, 0.0), (1.0, 0.0))
    assert a == b
    assert hash(a) == hash(b)
    assert "Polyline" in repr(a)
