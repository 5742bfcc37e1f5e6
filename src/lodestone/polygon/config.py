# -*- coding: utf-8 -*-

"""
polygon/config.py

This module centralizes the numeric constants used by the polygon feature
and its convexity analyzer. Keeping them in one place keeps validation,
equality and the angle pipeline consistent with each other.

Contents:
---------
1. RING_RULES:
   - Minimum number of positions in a LinearRing (a triangle plus the
     closing position).
   - Latitude bound for a valid position.

2. EQUALITY:
   - Absolute per-axis tolerance used when comparing two polygons.
     1e-7 degrees is roughly 11 mm on the ground.

3. ANGLES:
   - Straight angle and full turn, in degrees. An interior angle above
     the straight angle makes the shell concave.

4. GEODESY:
   - Ellipsoid handed to `pyproj.Geod` for initial bearings. A sphere, so
     bearings are great-circle bearings.

5. ENCODING:
   - Separators for the compact GeoJSON text form.

Usage:
------
    from lodestone.polygon.config import COORDINATE_TOLERANCE, MIN_RING_POSITIONS

"""

# ───────────────────────────────────────────────────────────────────────────────
# 1) RING RULES
# ───────────────────────────────────────────────────────────────────────────────
MIN_RING_POSITIONS = 4          # first == last, so 4 positions is a triangle
MAX_LATITUDE_DEG = 90.0         # positions are (lon, lat)

# ───────────────────────────────────────────────────────────────────────────────
# 2) EQUALITY
# ───────────────────────────────────────────────────────────────────────────────
COORDINATE_TOLERANCE = 1e-7     # degrees, ~11 mm

# ───────────────────────────────────────────────────────────────────────────────
# 3) ANGLES (degrees)
# ───────────────────────────────────────────────────────────────────────────────
STRAIGHT_ANGLE_DEG = 180.0
FULL_TURN_DEG = 360.0

# ───────────────────────────────────────────────────────────────────────────────
# 4) GEODESY
# ───────────────────────────────────────────────────────────────────────────────
GEOD_ELLIPSOID = "sphere"

# ───────────────────────────────────────────────────────────────────────────────
# 5) ENCODING
# ───────────────────────────────────────────────────────────────────────────────
JSON_SEPARATORS = (",", ":")
