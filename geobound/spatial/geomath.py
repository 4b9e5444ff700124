"""
Scalar geo helpers
==================
Degree/radian conversion, domain constants, and the two distance modes:

    haversine     d = 2R · atan2(√a, √(1−a))
    flat-Earth    d = R · √(Δφ² + (Δλ · cos φ̄)²)

The flat-Earth (equirectangular) form is the default: it is cheaper and
accurate to well under a percent for distances of a few hundred kilometres.
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from geobound.spatial.point import Point


# ── Domain constants ─────────────────────────────────────────────
MIN_LATITUDE = -85.05112878
MAX_LATITUDE = 85.05112878
MIN_LONGITUDE = -180.0
MAX_LONGITUDE = 180.0

# Mean Earth radius in metres.
EARTH_RADIUS = 6371000.0

METERS_PER_DEGREE_LATITUDE = 111131.75


def deg2rad(d: float) -> float:
    return d * math.pi / 180.0


def rad2deg(r: float) -> float:
    return r * 180.0 / math.pi


def planar_distance(a: Point, b: Point) -> float:
    """Euclidean distance in the raw units of the points."""
    return math.hypot(b.x - a.x, b.y - a.y)


def geo_distance(a: Point, b: Point, haversine: bool = False) -> float:
    """
    Approximate distance in metres between two lng/lat points.

    Parameters
    ----------
    a, b : Point
        Points in degrees.
    haversine : bool
        Use the great-circle formula instead of the flat-Earth
        approximation.
    """
    d_lat = deg2rad(b.lat - a.lat)
    d_lng = deg2rad(b.lng - a.lng)

    if haversine:
        s_lat = math.sin(d_lat / 2.0)
        s_lng = math.sin(d_lng / 2.0)
        h = (
            s_lat * s_lat
            + math.cos(deg2rad(a.lat)) * math.cos(deg2rad(b.lat)) * s_lng * s_lng
        )
        h = min(1.0, h)
        return 2.0 * EARTH_RADIUS * math.atan2(math.sqrt(h), math.sqrt(1.0 - h))

    x = d_lng * math.cos(deg2rad((a.lat + b.lat) / 2.0))
    return math.sqrt(d_lat * d_lat + x * x) * EARTH_RADIUS
