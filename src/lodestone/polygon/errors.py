"""Exception types raised by the polygon feature.

Construction errors are programmer errors: a ring list that breaks one of
the LinearRing rules. Each rule has its own class so callers can tell
which one broke. Decode errors come from untrusted text and are meant to
be caught.
"""
from typing import Optional


class PolygonError(ValueError):
    """Base class for rejected polygon coordinates."""

    def __init__(self, message: str, ring_index: Optional[int] = None):
        super().__init__(message)
        self.ring_index = ring_index


class EmptyPolygonError(PolygonError):
    """The polygon has no rings at all."""


class RingTooShortError(PolygonError):
    """A ring has fewer positions than a closed triangle needs."""


class RingNotClosedError(PolygonError):
    """A ring's first position differs from its last position."""


class InvalidPositionError(PolygonError):
    """A position is not a pair of numbers."""


class GeoJSONDecodeError(ValueError):
    """Text or mapping could not be read as a Polygon feature."""
