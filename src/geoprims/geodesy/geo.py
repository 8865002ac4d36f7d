"""
Geographic (latitude/longitude) points.

Any object with `lat`/`lon` attributes in decimal degrees works. A point type can
opt in to a specific ellipsoid by exposing a `datum` attribute; otherwise WGS84 is
assumed. The point itself is never tied to a global datum.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, runtime_checkable

from geoprims.geodesy.datum import Datum, wgs84


@runtime_checkable
class Geo(Protocol):
    """Anything with `lat`/`lon` in decimal degrees."""

    @property
    def lat(self) -> float: ...

    @property
    def lon(self) -> float: ...


def datum_of(point: Geo) -> Datum:
    """The datum a point is expressed in (its `datum` attribute, else WGS84)."""
    datum = getattr(point, "datum", None)
    if isinstance(datum, Datum):
        return datum
    return wgs84()


def geo_distance(a: Geo, b: Geo, *, datum: Datum | None = None) -> float:
    """Geodesic distance in meters between two points."""
    return (datum or datum_of(a)).distance(a, b)


@dataclass(frozen=True, slots=True)
class Wgs84Point:
    """A latitude/longitude pair on the WGS84 ellipsoid.

    Latitude is not validated and longitude is not normalized.
    """

    lat: float
    lon: float

    @classmethod
    def latlon(cls, lat: float, lon: float) -> "Wgs84Point":
        return cls(lat=lat, lon=lon)

    @classmethod
    def lonlat(cls, lon: float, lat: float) -> "Wgs84Point":
        return cls(lat=lat, lon=lon)

    @property
    def datum(self) -> Datum:
        return wgs84()

    def distance(self, other: Geo) -> float:
        """Geodesic distance in meters on WGS84."""
        return wgs84().distance(self, other)
