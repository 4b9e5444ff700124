"""geobound — points, bounding boxes, GeoHash and map-tile transforms."""

from geobound.errors import (
    GeoBoundError,
    InvalidArgumentError,
    InvalidEncodingError,
    OutOfRangeError,
)
from geobound.spatial import Bound, Point

__version__ = "0.1.0"
__all__ = [
    "Bound",
    "Point",
    "GeoBoundError",
    "InvalidArgumentError",
    "InvalidEncodingError",
    "OutOfRangeError",
]
