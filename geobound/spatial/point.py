"""Immutable 2D point with X/Y and Lng/Lat accessors."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Iterator

from shapely.geometry import Point as ShapelyPoint

from geobound.spatial import geohash, geomath


@dataclass(frozen=True, slots=True)
class Point:
    """
    A point in the plane, or a lng/lat pair in degrees.

    Axis 0 is X / longitude, axis 1 is Y / latitude.  Instances are
    immutable; the ``with_*`` builders return a new point.
    """

    x: float = 0.0
    y: float = 0.0

    @property
    def lng(self) -> float:
        return self.x

    @property
    def lat(self) -> float:
        return self.y

    def with_x(self, x: float) -> Point:
        return replace(self, x=x)

    def with_y(self, y: float) -> Point:
        return replace(self, y=y)

    def with_lng(self, lng: float) -> Point:
        return replace(self, x=lng)

    def with_lat(self, lat: float) -> Point:
        return replace(self, y=lat)

    def equals(self, other: Point) -> bool:
        return self.x == other.x and self.y == other.y

    def clone(self) -> Point:
        return Point(self.x, self.y)

    # ── Distances ─────────────────────────────────────────────

    def distance_from(self, other: Point) -> float:
        return geomath.planar_distance(self, other)

    def geo_distance_from(self, other: Point, haversine: bool = False) -> float:
        """Distance in metres, treating both points as lng/lat degrees."""
        return geomath.geo_distance(self, other, haversine)

    # ── Encodings ─────────────────────────────────────────────

    def geohash(self, precision: int = 12) -> str:
        return geohash.encode(self.lng, self.lat, precision)

    def geohash_int(self, bits: int = 52) -> int:
        return geohash.encode_int(self.lng, self.lat, bits)

    def to_shapely(self) -> ShapelyPoint:
        return ShapelyPoint(self.x, self.y)

    def to_list(self) -> list[float]:
        return [self.x, self.y]

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def __str__(self) -> str:
        return f"[{self.x:f}, {self.y:f}]"
