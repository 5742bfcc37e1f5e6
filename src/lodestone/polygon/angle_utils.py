"""Small utilities for angle normalization and geodesic bearings.

`normalize_angle` is pure numpy. The bearing helpers wrap `pyproj.Geod`
so the rest of the package never talks to pyproj directly.
"""
from typing import Sequence

import numpy as np
from pyproj import Geod

from lodestone.polygon.config import FULL_TURN_DEG, GEOD_ELLIPSOID

_GEOD = Geod(ellps=GEOD_ELLIPSOID)


def normalize_angle(x):
    """Wrap degrees to [0, 360).

    Accepts scalars or numpy arrays; returns same-shaped output.
    """
    x_arr = np.asarray(x, dtype=float)
    return x_arr % FULL_TURN_DEG


def bearings(lons1, lats1, lons2, lats2) -> np.ndarray:
    """Initial geodesic bearings (degrees, in (-180, 180]) for each point pair.

    Inputs are array-like longitudes/latitudes of equal length.
    """
    fwd_az, _back_az, _dist = _GEOD.inv(
        np.asarray(lons1, dtype=float),
        np.asarray(lats1, dtype=float),
        np.asarray(lons2, dtype=float),
        np.asarray(lats2, dtype=float),
    )
    return np.asarray(fwd_az, dtype=float)


def bearing(a: Sequence[float], b: Sequence[float]) -> float:
    """Initial bearing in degrees from point `a` to point `b`.

    Points are (lon, lat). The sign and range are whatever the geodesic
    solver returns; use `normalize_angle` for compass form.
    """
    fwd_az, _back_az, _dist = _GEOD.inv(a[0], a[1], b[0], b[1])
    return float(fwd_az)
