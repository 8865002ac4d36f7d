"""
Earth ellipsoids and geodesic distance.

A `Datum` is an ellipsoid (semi-major axis + inverse flattening) bound to a
geographiclib `Geodesic` solver. The solver is built once per datum; WGS84 is a
process-wide instance created on first use.
"""

from __future__ import annotations

import logging
import math
import threading
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from geographiclib.geodesic import Geodesic

if TYPE_CHECKING:
    from geoprims.geodesy.geo import Geo

logger = logging.getLogger(__name__)

WGS84_A = 6378137.0
WGS84_INV_F = 298.257223563


@dataclass(frozen=True)
class Datum:
    """Ellipsoidal earth model.

    `a` is the semi-major axis in meters, `inv_f` the inverse flattening
    (`math.inf` for a sphere).
    """

    a: float
    inv_f: float
    _geodesic: Geodesic = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        a = float(self.a)
        inv_f = float(self.inv_f)
        if not (math.isfinite(a) and a > 0):
            raise ValueError("a must be a finite number > 0")
        if not inv_f > 0:
            raise ValueError("inv_f must be > 0")
        object.__setattr__(self, "a", a)
        object.__setattr__(self, "inv_f", inv_f)
        object.__setattr__(self, "_geodesic", Geodesic(a, 1.0 / inv_f))

    @property
    def f(self) -> float:
        """Flattening."""
        return 1.0 / self.inv_f

    def distance(self, p1: Geo, p2: Geo) -> float:
        """Geodesic distance in meters between two lat/lon points on this ellipsoid."""
        result = self._geodesic.Inverse(
            float(p1.lat), float(p1.lon), float(p2.lat), float(p2.lon), Geodesic.DISTANCE
        )
        return float(result["s12"])


_wgs84: Datum | None = None
_wgs84_lock = threading.Lock()


def wgs84() -> Datum:
    """Return the shared WGS84 datum (constructed exactly once)."""
    global _wgs84
    datum = _wgs84
    if datum is None:
        with _wgs84_lock:
            if _wgs84 is None:
                logger.debug("Initializing WGS84 datum a=%s inv_f=%s", WGS84_A, WGS84_INV_F)
                _wgs84 = Datum(WGS84_A, WGS84_INV_F)
            datum = _wgs84
    return datum
