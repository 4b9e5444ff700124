"""
Tests for geobound.spatial.geomath — scalar helpers and constants.
"""
from __future__ import annotations

import math

import pytest

from geobound.spatial import geomath
from geobound.spatial.point import Point


class TestConversions:
    @pytest.mark.parametrize("deg,rad", [
        (0.0, 0.0),
        (180.0, math.pi),
        (-90.0, -math.pi / 2),
        (45.0, math.pi / 4),
    ])
    def test_deg2rad(self, deg, rad):
        assert math.isclose(geomath.deg2rad(deg), rad, abs_tol=1e-15)

    @pytest.mark.parametrize("value", [-123.456, 0.0, 37.7749, 179.999])
    def test_round_trip(self, value):
        assert math.isclose(
            geomath.rad2deg(geomath.deg2rad(value)), value, abs_tol=1e-12
        )


class TestConstants:
    def test_mercator_latitude_limits(self):
        assert geomath.MAX_LATITUDE == 85.05112878
        assert geomath.MIN_LATITUDE == -geomath.MAX_LATITUDE

    def test_longitude_limits(self):
        assert geomath.MIN_LONGITUDE == -180.0
        assert geomath.MAX_LONGITUDE == 180.0

    def test_earth_radius_is_mean_radius(self):
        assert geomath.EARTH_RADIUS == pytest.approx(6_371_000, rel=1e-3)


class TestDistances:
    def test_planar(self):
        assert geomath.planar_distance(Point(1, 1), Point(4, 5)) == 5.0

    def test_zero_distance(self):
        p = Point(10, 20)
        assert geomath.geo_distance(p, p) == 0.0
        assert geomath.geo_distance(p, p, haversine=True) == 0.0

    def test_flat_earth_is_default(self):
        a, b = Point(0, 0), Point(30, 30)
        assert geomath.geo_distance(a, b) == geomath.geo_distance(a, b, False)
        assert geomath.geo_distance(a, b) != geomath.geo_distance(a, b, True)

    def test_haversine_quarter_meridian(self):
        d = geomath.geo_distance(Point(0, 0), Point(0, 90), haversine=True)
        assert math.isclose(d, math.pi / 2 * geomath.EARTH_RADIUS, rel_tol=1e-12)

    def test_longitude_degrees_shrink_with_latitude(self):
        at_equator = geomath.geo_distance(Point(0, 0), Point(1, 0))
        at_sixty = geomath.geo_distance(Point(0, 60), Point(1, 60))
        assert math.isclose(at_sixty, at_equator / 2, rel_tol=1e-9)

    @pytest.mark.parametrize("lat", [x * 0.25 for x in range(-360, 361)])
    def test_haversine_antipodal_pairs(self, lat):
        d = Point(0, lat).geo_distance_from(Point(180, -lat), haversine=True)
        assert math.isclose(d, math.pi * geomath.EARTH_RADIUS, rel_tol=1e-6)
