"""
Error types.

Only projections have a domain failure (`InvalidLatitude`). Everything else in the
library is total over its documented input, so the hierarchy stays tiny.
"""

from __future__ import annotations


class GeoprimsError(Exception):
    """Base class for errors raised by geoprims."""


class InvalidLatitude(GeoprimsError, ValueError):
    """A geographic point lies outside the projection's domain of validity."""

    def __init__(self, lat: float):
        self.lat = float(lat)
        super().__init__(f"invalid latitude value: {self.lat}")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, InvalidLatitude):
            return NotImplemented
        return self.lat == other.lat

    def __hash__(self) -> int:
        return hash(("InvalidLatitude", self.lat))

    def __reduce__(self):
        return (type(self), (self.lat,))
