"""
Forward map projections (geographic -> planar).

Leaving a projection's domain (Web Mercator near the poles) is an expected outcome,
not a bug, so `project()` returns a `Success`/`Failure` result instead of raising.
`Failure.unwrap()` raises the carried `InvalidLatitude` for callers who prefer
exceptions.
"""

from __future__ import annotations

import logging
import math
from abc import ABC, abstractmethod
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Any, Generic, TypeVar, Union

from geoprims.config.settings import get_settings
from geoprims.core.errors import InvalidLatitude
from geoprims.geodesy.geo import Geo, datum_of
from geoprims.geometry.cartesian import Point2
from geoprims.geometry.polyline import PointSequence

logger = logging.getLogger(__name__)

T = TypeVar("T")
D = TypeVar("D")

Constructor = Callable[[float, float], Any]


@dataclass(frozen=True, slots=True)
class Success(Generic[T]):
    value: T

    @property
    def ok(self) -> bool:
        return True

    def unwrap(self) -> T:
        return self.value

    def unwrap_or(self, default: D) -> T | D:
        return self.value


@dataclass(frozen=True, slots=True)
class Failure:
    error: InvalidLatitude

    @property
    def ok(self) -> bool:
        return False

    def unwrap(self):
        raise self.error

    def unwrap_or(self, default: D) -> D:
        return default


Projected = Union[Success[T], Failure]


def _rebuild_like(source: Iterable[Any], items: list[Any]) -> Any:
    """Collect projected points into the same kind of container as `source`."""
    if isinstance(source, PointSequence):
        return type(source)(items)
    if isinstance(source, tuple):
        return tuple(items)
    return items


class Projection(ABC):
    """Maps geographic points to planar coordinates."""

    @abstractmethod
    def project(self, point: Geo, constructor: Constructor = Point2) -> Projected[Any]:
        """Project one point; `constructor(x, y)` builds the target point."""

    def project_line(self, source: Iterable[Geo], constructor: Constructor = Point2) -> Projected[Any]:
        """Project every point of a polyline/contour/sequence (all-or-nothing).

        Returns the first `Failure` encountered, or a `Success` holding a container of
        the same structural kind as `source`.
        """
        items: list[Any] = []
        for point in source:
            result = self.project(point, constructor)
            if isinstance(result, Failure):
                return result
            items.append(result.value)
        return Success(_rebuild_like(source, items))


class WebMercator(Projection):
    """Spherical (Web) Mercator forward projection, EPSG:3857 style.

    `x = a * lon`, `y = a * ln(tan(pi/4 + lat/2))` with angles in radians and `a` the
    semi-major axis of the point's datum.

    `max_latitude` is an exclusive bound on `|lat|` (defaults to the
    `projection.web_mercator_max_latitude` setting, 90.0). At the poles the ordinate
    diverges, so `|lat| >= 90` always fails even though the float tangent stays finite.
    """

    def __init__(self, max_latitude: float | None = None):
        if max_latitude is None:
            max_latitude = get_settings().projection.web_mercator_max_latitude
        max_latitude = float(max_latitude)
        if not 0 < max_latitude <= 90:
            raise ValueError("max_latitude must be in (0, 90]")
        self.max_latitude = max_latitude

    def __repr__(self) -> str:
        return f"WebMercator(max_latitude={self.max_latitude!r})"

    def project(self, point: Geo, constructor: Constructor = Point2) -> Projected[Any]:
        lat = float(point.lat)
        lon = float(point.lon)
        a = datum_of(point).a

        y = math.nan
        if abs(lat) < self.max_latitude:
            t = math.tan(math.pi / 4 + math.radians(lat) / 2)
            if t > 0:
                y = a * math.log(t)

        if not math.isfinite(y):
            logger.debug("Web Mercator undefined for lat=%s lon=%s", lat, lon)
            return Failure(InvalidLatitude(lat))

        x = a * math.radians(lon)
        return Success(constructor(x, y))
