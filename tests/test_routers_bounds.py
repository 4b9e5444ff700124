"""
Tests for geobound.routers.bounds — HTTP surface over the bound algebra.
"""
from __future__ import annotations

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from geobound.routers.bounds import router
from tests.conftest import SF_GEOHASH, SF_LAT, SF_LNG


def _create_test_app() -> FastAPI:
    app = FastAPI()
    app.include_router(router, prefix="/api")
    return app


@pytest.fixture()
def client():
    transport = ASGITransport(app=_create_test_app())
    return AsyncClient(transport=transport, base_url="http://testserver")


# ═══════════════════════════════════════════════════════════════════
# GET /bounds/tile/{zoom}/{x}/{y}
# ═══════════════════════════════════════════════════════════════════
class TestTileBound:
    @pytest.mark.asyncio
    async def test_world_tile(self, client):
        resp = await client.get("/api/bounds/tile/0/0/0")
        assert resp.status_code == 200
        body = resp.json()
        assert body["west"] == -180.0
        assert body["east"] == 180.0
        assert body["north"] == pytest.approx(85.0511287798, abs=1e-9)
        assert body["empty"] is False
        assert body["wkt"].startswith("POLYGON")

    @pytest.mark.asyncio
    async def test_contains_point(self, client):
        resp = await client.get("/api/bounds/tile/10/163/395")
        body = resp.json()
        assert body["west"] <= SF_LNG <= body["east"]
        assert body["south"] <= SF_LAT <= body["north"]

    @pytest.mark.asyncio
    @pytest.mark.parametrize("path", [
        "/api/bounds/tile/1/2/0",
        "/api/bounds/tile/1/0/2",
        "/api/bounds/tile/-1/0/0",
    ])
    async def test_out_of_range(self, client, path):
        resp = await client.get(path)
        assert resp.status_code == 400
        assert "out of range" in resp.json()["detail"] or "zoom" in resp.json()["detail"]

    @pytest.mark.asyncio
    async def test_zoom_too_large(self, client):
        resp = await client.get("/api/bounds/tile/65/0/0")
        assert resp.status_code == 422


# ═══════════════════════════════════════════════════════════════════
# GeoHash endpoints
# ═══════════════════════════════════════════════════════════════════
class TestGeoHash:
    @pytest.mark.asyncio
    async def test_decode(self, client):
        resp = await client.get(f"/api/bounds/geohash/{SF_GEOHASH}")
        assert resp.status_code == 200
        body = resp.json()
        assert body["west"] <= SF_LNG <= body["east"]
        assert body["south"] <= SF_LAT <= body["north"]

    @pytest.mark.asyncio
    async def test_decode_invalid(self, client):
        resp = await client.get("/api/bounds/geohash/9qa")
        assert resp.status_code == 400
        assert "Invalid geohash character" in resp.json()["detail"]

    @pytest.mark.asyncio
    async def test_encode(self, client):
        resp = await client.get(
            "/api/bounds/encode",
            params={"lng": SF_LNG, "lat": SF_LAT, "precision": 12},
        )
        assert resp.status_code == 200
        body = resp.json()
        assert body["geohash"] == SF_GEOHASH
        assert body["precision"] == 12
        assert body["bound"]["west"] <= SF_LNG <= body["bound"]["east"]

    @pytest.mark.asyncio
    async def test_encode_short(self, client):
        resp = await client.get(
            "/api/bounds/encode",
            params={"lng": SF_LNG, "lat": SF_LAT, "precision": 5},
        )
        assert resp.json()["geohash"] == SF_GEOHASH[:5]

    @pytest.mark.asyncio
    async def test_encode_rejects_bad_latitude(self, client):
        resp = await client.get("/api/bounds/encode", params={"lng": 0, "lat": 91})
        assert resp.status_code == 422


# ═══════════════════════════════════════════════════════════════════
# POST /bounds/around
# ═══════════════════════════════════════════════════════════════════
class TestAround:
    @pytest.mark.asyncio
    async def test_around(self, client):
        resp = await client.post("/api/bounds/around", json={
            "center": {"lng": SF_LNG, "lat": SF_LAT},
            "radius_m": 1000,
        })
        assert resp.status_code == 200
        body = resp.json()
        assert body["west"] < SF_LNG < body["east"]
        assert body["geo_height_m"] == pytest.approx(2000, rel=0.01)

    @pytest.mark.asyncio
    async def test_negative_radius(self, client):
        resp = await client.post("/api/bounds/around", json={
            "center": {"lng": 0, "lat": 0},
            "radius_m": -5,
        })
        assert resp.status_code == 400

    @pytest.mark.asyncio
    async def test_rejects_bad_latitude(self, client):
        resp = await client.post("/api/bounds/around", json={
            "center": {"lng": 0, "lat": 95},
            "radius_m": 1000,
        })
        assert resp.status_code == 422


# ═══════════════════════════════════════════════════════════════════
# Combining bounds
# ═══════════════════════════════════════════════════════════════════
class TestCombine:
    @pytest.mark.asyncio
    async def test_union(self, client):
        resp = await client.post("/api/bounds/union", json={
            "a": {"west": 0, "east": 1, "south": 0, "north": 1},
            "b": {"west": 3, "east": 2, "south": 0.5, "north": -1},
        })
        assert resp.status_code == 200
        body = resp.json()
        assert (body["west"], body["east"], body["south"], body["north"]) == (0, 3, -1, 1)
        assert body["center"] == {"lng": 1.5, "lat": 0.0}

    @pytest.mark.asyncio
    async def test_intersects_cross(self, client):
        resp = await client.post("/api/bounds/intersects", json={
            "a": {"west": 0, "east": 10, "south": 4, "north": 6},
            "b": {"west": 4, "east": 6, "south": 0, "north": 10},
        })
        assert resp.status_code == 200
        assert resp.json() == {"intersects": True}

    @pytest.mark.asyncio
    async def test_intersects_disjoint(self, client):
        resp = await client.post("/api/bounds/intersects", json={
            "a": {"west": 0, "east": 1, "south": 0, "north": 1},
            "b": {"west": 2, "east": 3, "south": 2, "north": 3},
        })
        assert resp.json() == {"intersects": False}
