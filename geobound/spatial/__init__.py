"""Spatial subpackage — points, bounds, and the GeoHash / Mercator transforms."""

from geobound.spatial.bound import Bound
from geobound.spatial.point import Point

__all__ = [
    "Bound",
    "Point",
]
