"""Schemas subpackage — Pydantic request/response models."""

from geobound.schemas.bound import (
    AroundPointRequest,
    BoundIn,
    BoundOut,
    BoundPairRequest,
    GeoHashOut,
    IntersectsResponse,
    PointIn,
    PointOut,
)

__all__ = [
    "AroundPointRequest",
    "BoundIn",
    "BoundOut",
    "BoundPairRequest",
    "GeoHashOut",
    "IntersectsResponse",
    "PointIn",
    "PointOut",
]
