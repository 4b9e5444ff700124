"""Routers subpackage — HTTP layer for all API endpoints."""

from geobound.routers import bounds

__all__ = ["bounds"]
