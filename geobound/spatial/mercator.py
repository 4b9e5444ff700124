"""
Scalar Web-Mercator projection
==============================
Maps lng/lat degrees to unsigned integer pixel coordinates at a given
bit depth ``level`` and back:

    x = (λ + 180) / 360 · 2^level
    y = (½ − ln(tan(π/4 + φ/2)) / 2π) · 2^level

y grows southward, matching the slippy-map tile convention.
"""

from __future__ import annotations

import math

from geobound.spatial.geomath import MAX_LATITUDE, MIN_LATITUDE, deg2rad


def project(lng: float, lat: float, level: int) -> tuple[int, int]:
    """Project a lng/lat pair to ``(x, y)`` in ``[0, 2**level)``."""
    factor = 1 << level
    max_index = factor - 1

    x = int((lng + 180.0) / 360.0 * factor)

    lat = min(max(lat, MIN_LATITUDE), MAX_LATITUDE)
    merc = math.log(math.tan(math.pi / 4.0 + deg2rad(lat) / 2.0))
    y = int((0.5 - merc / (2.0 * math.pi)) * factor)

    return min(max(x, 0), max_index), min(max(y, 0), max_index)


def inverse(x: int, y: int, level: int) -> tuple[float, float]:
    """Inverse of :func:`project`; returns ``(lng, lat)`` in degrees."""
    factor = float(1 << level)

    lng = 360.0 * (x / factor - 0.5)
    lat = (
        2.0 * math.atan(math.exp(math.pi - (2.0 * math.pi) * y / factor))
    ) * (180.0 / math.pi) - 90.0

    return lng, lat


def tile_for_point(lng: float, lat: float, zoom: int) -> tuple[int, int]:
    """Return the ``(x, y)`` map tile containing the point at ``zoom``."""
    return project(lng, lat, zoom)
