"""
Shared fixtures for the geobound test suite.

This conftest provides:
- Well-known sample coordinates
- Reusable bound factories
"""
from __future__ import annotations

import pytest

from geobound.spatial.bound import Bound
from geobound.spatial.point import Point


# ---------------------------------------------------------------------------
# Sample data
# ---------------------------------------------------------------------------
SF_LNG = -122.4194
SF_LAT = 37.7749
SF_GEOHASH = "9q8yyk8ytpxr"


@pytest.fixture()
def sf_point() -> Point:
    """San Francisco city hall, roughly."""
    return Point(SF_LNG, SF_LAT)


@pytest.fixture()
def unit_bound() -> Bound:
    """A 1×1 degree box with its south-west corner at the origin."""
    return Bound(0.0, 1.0, 0.0, 1.0)


def make_bound(west: float, east: float, south: float, north: float) -> Bound:
    return Bound(west, east, south, north)
