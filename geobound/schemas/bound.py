"""
Pydantic schemas for API request/response serialization.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from geobound.spatial.bound import Bound
from geobound.spatial.point import Point


# ═══════════════════════════════════════════════════════════════════
# Point schemas
# ═══════════════════════════════════════════════════════════════════
class PointIn(BaseModel):
    lng: float = Field(ge=-180, le=180, description="Longitude / X")
    lat: float = Field(ge=-90, le=90, description="Latitude / Y")

    def to_point(self) -> Point:
        return Point(self.lng, self.lat)


class PointOut(BaseModel):
    lng: float
    lat: float

    @classmethod
    def from_point(cls, p: Point) -> PointOut:
        return cls(lng=p.lng, lat=p.lat)


# ═══════════════════════════════════════════════════════════════════
# Bound schemas
# ═══════════════════════════════════════════════════════════════════
class BoundIn(BaseModel):
    """Edges in any order; they are normalised on conversion."""

    west: float
    east: float
    south: float
    north: float

    def to_bound(self) -> Bound:
        return Bound(self.west, self.east, self.south, self.north)


class BoundOut(BaseModel):
    west: float
    east: float
    south: float
    north: float
    center: PointOut
    width: float = Field(description="East-west extent in degrees")
    height: float = Field(description="North-south extent in degrees")
    geo_width_m: float = Field(description="Geodesic width across the center, metres")
    geo_height_m: float = Field(description="Approximate height, metres")
    empty: bool
    wkt: str

    @classmethod
    def from_bound(cls, b: Bound, haversine: bool = False) -> BoundOut:
        return cls(
            west=b.west,
            east=b.east,
            south=b.south,
            north=b.north,
            center=PointOut.from_point(b.center()),
            width=b.width(),
            height=b.height(),
            geo_width_m=b.geo_width(haversine),
            geo_height_m=b.geo_height(),
            empty=b.empty(),
            wkt=b.to_wkt(),
        )


# ═══════════════════════════════════════════════════════════════════
# Requests
# ═══════════════════════════════════════════════════════════════════
class AroundPointRequest(BaseModel):
    center: PointIn
    radius_m: float = Field(description="Radius around the center, metres")


class BoundPairRequest(BaseModel):
    a: BoundIn
    b: BoundIn


# ═══════════════════════════════════════════════════════════════════
# Responses
# ═══════════════════════════════════════════════════════════════════
class IntersectsResponse(BaseModel):
    intersects: bool


class GeoHashOut(BaseModel):
    geohash: str
    precision: int
    bound: BoundOut
