"""
convexity.py

Convexity test for the shell of a polygon on the sphere.

The shell's interior angles are derived from initial geodesic bearings
between consecutive vertices, so a planar square drawn in lon/lat will
not come out at exactly 90 degrees. The raw values are returned; any
tolerance belongs to the caller.

Public functions:
- `is_clockwise(ring)` -> bool
- `ring_bearings(ring)` -> (N-1,) ndarray of bearings in [0, 360)
- `inner_angles(ring)` -> (N-1,) ndarray of interior angles in [0, 360)
- `is_convex(polygon_or_ring)` -> bool

"""
from typing import Sequence
import logging

import numpy as np

from lodestone.polygon.angle_utils import bearings, normalize_angle
from lodestone.polygon.config import STRAIGHT_ANGLE_DEG

logger = logging.getLogger(__name__)


def _as_array(ring) -> np.ndarray:
    pts = np.asarray(ring, dtype=float)
    if pts.ndim != 2 or pts.shape[1] != 2:
        raise ValueError(f"ring must be an Nx2 array of (lon, lat), got shape {pts.shape}")
    return pts


def is_clockwise(ring: Sequence[Sequence[float]]) -> bool:
    """Winding direction of a closed ring.

    Uses the shoelace-style sum of (x2 - x1) * (y2 + y1) over the edges.
    A positive sum is clockwise; zero or negative is counter-clockwise.
    """
    pts = _as_array(ring)
    x1, y1 = pts[:-1, 0], pts[:-1, 1]
    x2, y2 = pts[1:, 0], pts[1:, 1]
    total = float(np.sum((x2 - x1) * (y2 + y1)))
    return total > 0.0


def ring_bearings(ring: Sequence[Sequence[float]]) -> np.ndarray:
    """Normalized initial bearing of every edge of a closed ring."""
    pts = _as_array(ring)
    raw = bearings(pts[:-1, 0], pts[:-1, 1], pts[1:, 0], pts[1:, 1])
    return normalize_angle(raw)


def inner_angles(ring: Sequence[Sequence[float]]) -> np.ndarray:
    """Interior angle at each vertex of a closed ring, in degrees.

    For a ring of N positions (N-1 edges) the angle at vertex i pairs the
    bearing of edge i with the bearing of edge (i + N - 2) % (N - 1), so
    vertex 0 looks back along the closing edge. The bearing delta is
    flipped for counter-clockwise rings.
    """
    pts = _as_array(ring)
    b = ring_bearings(pts)
    # prev[i] is the bearing of the edge arriving at vertex i
    prev = np.roll(b, 1)
    sign = 1.0 if is_clockwise(pts) else -1.0
    delta = sign * (b - prev)
    return normalize_angle(STRAIGHT_ANGLE_DEG - delta)


def is_convex(polygon) -> bool:
    """True if no interior angle of the shell exceeds 180 degrees.

    A shell with any non-finite angle is reported as not convex.

    Accepts a `FeaturePolygon` (only its first ring is inspected) or a
    bare closed ring.
    """
    coords = getattr(polygon, 'coordinates', None)
    shell = coords[0] if coords is not None else polygon
    angles = inner_angles(shell)
    for i, angle in enumerate(angles):
        # NaN compares False against anything
        if not np.isfinite(angle):
            logger.debug('angle at vertex %d could not be computed', i)
            return False
        if angle > STRAIGHT_ANGLE_DEG:
            logger.debug('shell is concave at vertex %d (%.6f deg)', i, angle)
            return False
    return True
