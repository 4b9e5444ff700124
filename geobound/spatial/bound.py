"""
Bound — axis-aligned box
========================
A box in the 2D Cartesian plane, or a lng/lat box in degrees, stored as
its south-west (minimum) and north-east (maximum) corners.

The box knows nothing about the anti-meridian.  A box whose south-west
corner lies beyond its north-east corner on either axis is *empty*; an
excessive negative :meth:`Bound.pad` produces one and :meth:`Bound.empty`
reports it.
"""

from __future__ import annotations

import logging
import math

from shapely.geometry import Polygon, box
from shapely.geometry.base import BaseGeometry

from geobound.errors import InvalidArgumentError, OutOfRangeError
from geobound.spatial import geohash, mercator
from geobound.spatial.geomath import (
    EARTH_RADIUS,
    MAX_LATITUDE,
    MAX_LONGITUDE,
    METERS_PER_DEGREE_LATITUDE,
    MIN_LATITUDE,
    MIN_LONGITUDE,
    deg2rad,
    rad2deg,
)
from geobound.spatial.point import Point

logger = logging.getLogger(__name__)

# Pixel precision used when inverse-projecting map tiles.
TILE_PRECISION = 31


class Bound:
    """
    An axis-aligned box defined by its south-west and north-east corners.

    ``Bound(west, east, south, north)`` accepts the edges in any order and
    normalises them.  Mutating operations (:meth:`extend`, :meth:`union`,
    :meth:`pad`, :meth:`geo_pad`) change the box in place and return it,
    so they chain.  They are not safe to call concurrently on one
    instance.
    """

    __slots__ = ("_sw", "_ne")

    def __init__(self, west: float, east: float, south: float, north: float) -> None:
        self._sw = Point(min(east, west), min(north, south))
        self._ne = Point(max(east, west), max(north, south))

    @classmethod
    def _from_corners(cls, sw: Point, ne: Point) -> Bound:
        # Stores the corners as given, without normalising.
        b = cls.__new__(cls)
        b._sw = sw
        b._ne = ne
        return b

    # ── Alternate constructors ────────────────────────────────

    @classmethod
    def from_points(cls, corner: Point, opposite_corner: Point) -> Bound:
        """Bound from two opposite corners, either sw/ne or se/nw."""
        b = cls._from_corners(corner, corner)
        return b.extend(opposite_corner)

    @classmethod
    def around_point(cls, center: Point, distance: float) -> Bound:
        """
        Bound enclosing the circle of ``distance`` metres around ``center``.

        Uses the great-circle bounding-box formula.  When the circle
        reaches past the Mercator latitude limits the latitudes are
        clamped and the box spans every longitude.

        Raises
        ------
        InvalidArgumentError
            If ``distance`` is negative.
        """
        if distance < 0:
            raise InvalidArgumentError(
                f"invalid distance around center: {distance}"
            )

        rad_dist = distance / EARTH_RADIUS
        rad_lat = deg2rad(center.lat)
        rad_lng = deg2rad(center.lng)
        min_lat = rad_lat - rad_dist
        max_lat = rad_lat + rad_dist

        if min_lat > deg2rad(MIN_LATITUDE) and max_lat < deg2rad(MAX_LATITUDE):
            delta_lng = math.asin(math.sin(rad_dist) / math.cos(rad_lat))
            min_lng = rad_lng - delta_lng
            if min_lng < -math.pi:
                min_lng += 2 * math.pi
            max_lng = rad_lng + delta_lng
            if max_lng > math.pi:
                max_lng -= 2 * math.pi

            return cls._from_corners(
                Point(rad2deg(min_lng), rad2deg(min_lat)),
                Point(rad2deg(max_lng), rad2deg(max_lat)),
            )

        logger.debug(
            "Circle of %.1fm around %s reaches a pole; spanning all longitudes",
            distance,
            center,
        )
        return cls._from_corners(
            Point(MIN_LONGITUDE, max(rad2deg(min_lat), MIN_LATITUDE)),
            Point(MAX_LONGITUDE, min(rad2deg(max_lat), MAX_LATITUDE)),
        )

    @classmethod
    def from_map_tile(cls, x: int, y: int, zoom: int) -> Bound:
        """
        Bound of a slippy-map tile.

        Raises
        ------
        OutOfRangeError
            If ``x`` or ``y`` is outside ``[0, 2**zoom)``.
        """
        if zoom < 0:
            raise OutOfRangeError(f"zoom must be >= 0, got {zoom}")

        max_index = 1 << zoom
        if x < 0 or y < 0 or x >= max_index or y >= max_index:
            raise OutOfRangeError(
                f"tile index ({x}, {y}) out of range for zoom {zoom}"
            )

        shift = TILE_PRECISION - zoom
        if zoom > TILE_PRECISION:
            logger.debug("Zoom %d exceeds tile precision; no upscaling", zoom)
            shift = 0

        lng1, lat1 = mercator.inverse(x << shift, y << shift, TILE_PRECISION)
        lng2, lat2 = mercator.inverse(
            (x + 1) << shift, (y + 1) << shift, TILE_PRECISION
        )

        return cls(lng1, lng2, lat1, lat2)

    @classmethod
    def from_geohash(cls, code: str) -> Bound:
        """Bound of the region defined by a base-32 geohash."""
        return cls(*geohash.decode_ranges(code))

    @classmethod
    def from_geohash_int(cls, code: int, bits: int) -> Bound:
        """Bound of a packed integer geohash with ``bits`` of precision."""
        return cls(*geohash.decode_int_ranges(code, bits))

    @classmethod
    def from_shapely(cls, geom: BaseGeometry) -> Bound:
        """Bound enclosing any Shapely geometry."""
        min_x, min_y, max_x, max_y = geom.bounds
        return cls(min_x, max_x, min_y, max_y)

    # ── Growth ────────────────────────────────────────────────

    def extend(self, point: Point) -> Bound:
        """Grow the bound to include ``point``."""
        if self.contains(point):
            return self

        self._sw = Point(min(self._sw.x, point.x), min(self._sw.y, point.y))
        self._ne = Point(max(self._ne.x, point.x), max(self._ne.y, point.y))
        return self

    def union(self, other: Bound) -> Bound:
        """Extend to the smallest box containing this bound and ``other``."""
        self.extend(other.south_west())
        self.extend(other.north_west())
        self.extend(other.south_east())
        self.extend(other.north_east())
        return self

    def pad(self, amount: float) -> Bound:
        """
        Expand every side by ``amount``, in the units of the bound.

        A negative amount shrinks the box and may leave it empty.
        """
        self._sw = Point(self._sw.x - amount, self._sw.y - amount)
        self._ne = Point(self._ne.x + amount, self._ne.y + amount)
        return self

    def geo_pad(self, meters: float) -> Bound:
        """Expand every side by roughly ``meters``.  Lng/lat bounds only."""
        dy = meters / METERS_PER_DEGREE_LATITUDE
        dx = dy / math.cos(deg2rad((self._ne.lat + self._sw.lat) / 2.0))

        self._sw = Point(self._sw.lng - dx, self._sw.lat - dy)
        self._ne = Point(self._ne.lng + dx, self._ne.lat + dy)
        return self

    # ── Predicates ────────────────────────────────────────────

    def contains(self, point: Point) -> bool:
        """Whether ``point`` is inside; the boundary counts as inside."""
        if point.y < self._sw.y or self._ne.y < point.y:
            return False

        if point.x < self._sw.x or self._ne.x < point.x:
            return False

        return True

    def intersects(self, other: Bound) -> bool:
        """Whether the two boxes overlap.  Touching edges count."""
        return (
            self._sw.x <= other._ne.x
            and other._sw.x <= self._ne.x
            and self._sw.y <= other._ne.y
            and other._sw.y <= self._ne.y
        )

    def empty(self) -> bool:
        """True for zero area or an inverted (over-shrunk) box."""
        return self._sw.x >= self._ne.x or self._sw.y >= self._ne.y

    def equals(self, other: Bound) -> bool:
        return self._sw == other._sw and self._ne == other._ne

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Bound):
            return NotImplemented
        return self.equals(other)

    # ── Measurements ──────────────────────────────────────────

    def center(self) -> Point:
        return Point(
            (self._ne.x + self._sw.x) / 2.0,
            (self._ne.y + self._sw.y) / 2.0,
        )

    def height(self) -> float:
        return self._ne.y - self._sw.y

    def width(self) -> float:
        return self._ne.x - self._sw.x

    def geo_height(self) -> float:
        """Approximate height in metres.  Lng/lat bounds only."""
        return METERS_PER_DEGREE_LATITUDE * self.height()

    def geo_width(self, haversine: bool = False) -> float:
        """
        Approximate width in metres, measured across the vertical center.

        Narrows toward the poles.  Lng/lat bounds only.
        """
        c = self.center()
        a = Point(self._sw.x, c.y)
        b = Point(self._ne.x, c.y)
        return a.geo_distance_from(b, haversine)

    # ── Corners ───────────────────────────────────────────────

    def south_west(self) -> Point:
        return self._sw

    def north_east(self) -> Point:
        return self._ne

    def south_east(self) -> Point:
        return Point(self._ne.lng, self._sw.lat)

    def north_west(self) -> Point:
        return Point(self._sw.lng, self._ne.lat)

    @property
    def west(self) -> float:
        return self._sw.x

    @property
    def east(self) -> float:
        return self._ne.x

    @property
    def south(self) -> float:
        return self._sw.y

    @property
    def north(self) -> float:
        return self._ne.y

    def clone(self) -> Bound:
        return Bound._from_corners(self._sw, self._ne)

    # ── Output ────────────────────────────────────────────────

    def to_list(self) -> list[list[float]]:
        return [[self.west, self.east], [self.south, self.north]]

    def to_shapely(self) -> Polygon:
        """Return a Shapely box for use with spatial predicates."""
        return box(self.west, self.south, self.east, self.north)

    def to_wkt(self) -> str:
        return self.to_shapely().wkt

    def to_mysql_polygon(self) -> str:
        """Closed ring sw, nw, ne, se, sw for a MySQL spatial query."""
        w, s, e, n = self.west, self.south, self.east, self.north
        return (
            f"POLYGON(({w:f} {s:f}, {w:f} {n:f}, {e:f} {n:f}, "
            f"{e:f} {s:f}, {w:f} {s:f}))"
        )

    def to_mysql_intersects_condition(self, column: str) -> str:
        """
        ``INTERSECTS`` condition between ``column`` and this bound.

        ``column`` is inserted verbatim; nothing is escaped.
        """
        return f"INTERSECTS({column}, GEOMFROMTEXT('{self.to_mysql_polygon()}'))"

    def __str__(self) -> str:
        """``[[west, east], [south, north]]``"""
        return (
            f"[[{self.west:f}, {self.east:f}], "
            f"[{self.south:f}, {self.north:f}]]"
        )

    def __repr__(self) -> str:
        return f"Bound({self.west!r}, {self.east!r}, {self.south!r}, {self.north!r})"
