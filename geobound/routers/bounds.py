"""
Bound Endpoints
===============
Build bounds from map tiles, geohashes and circles, and combine them.
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException, Path, Query

from geobound.config import get_settings
from geobound.errors import GeoBoundError
from geobound.schemas.bound import (
    AroundPointRequest,
    BoundOut,
    BoundPairRequest,
    GeoHashOut,
    IntersectsResponse,
)
from geobound.spatial.bound import Bound
from geobound.spatial.point import Point

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/bounds", tags=["Bounds"])
settings = get_settings()


def _out(b: Bound) -> BoundOut:
    return BoundOut.from_bound(b, haversine=settings.use_haversine)


# ── Map tile ──────────────────────────────────────────────────────
@router.get("/tile/{zoom}/{x}/{y}", response_model=BoundOut)
async def tile_bound(
    zoom: int = Path(..., le=64),
    x: int = Path(...),
    y: int = Path(...),
):
    """Lng/lat bound of the slippy-map tile ``(x, y)`` at ``zoom``."""
    try:
        b = Bound.from_map_tile(x, y, zoom)
    except GeoBoundError as e:
        logger.info("Rejected bound request: %s", e)
        raise HTTPException(400, str(e)) from e
    return _out(b)


# ── GeoHash ───────────────────────────────────────────────────────
@router.get("/geohash/{code}", response_model=BoundOut)
async def geohash_bound(code: str):
    """Bound of the cell named by a base-32 geohash."""
    try:
        b = Bound.from_geohash(code)
    except GeoBoundError as e:
        logger.info("Rejected bound request: %s", e)
        raise HTTPException(400, str(e)) from e
    return _out(b)


@router.get("/encode", response_model=GeoHashOut)
async def encode_point(
    lng: float = Query(..., ge=-180, le=180),
    lat: float = Query(..., ge=-90, le=90),
    precision: int | None = Query(None, ge=1, le=24),
):
    """Geohash of a point, along with the bound of its cell."""
    precision = precision or settings.geohash_precision
    code = Point(lng, lat).geohash(precision)
    return GeoHashOut(
        geohash=code,
        precision=precision,
        bound=_out(Bound.from_geohash(code)),
    )


# ── Circle around a point ─────────────────────────────────────────
@router.post("/around", response_model=BoundOut)
async def around_point(req: AroundPointRequest):
    """Bound enclosing ``radius_m`` metres around ``center``."""
    try:
        b = Bound.around_point(req.center.to_point(), req.radius_m)
    except GeoBoundError as e:
        logger.info("Rejected bound request: %s", e)
        raise HTTPException(400, str(e)) from e
    return _out(b)


# ── Combining two bounds ──────────────────────────────────────────
@router.post("/union", response_model=BoundOut)
async def union(req: BoundPairRequest):
    """Smallest bound containing both ``a`` and ``b``."""
    return _out(req.a.to_bound().union(req.b.to_bound()))


@router.post("/intersects", response_model=IntersectsResponse)
async def intersects(req: BoundPairRequest):
    """Whether ``a`` and ``b`` overlap; touching edges count."""
    return IntersectsResponse(
        intersects=req.a.to_bound().intersects(req.b.to_bound())
    )
