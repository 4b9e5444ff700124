"""
geobound — Configuration via pydantic-settings.

Environment variables override defaults.  The core geometry never reads
settings; only the HTTP and SQL layers do.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import ClassVar

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    env_path: ClassVar[str] = str(Path(__file__).resolve().parents[1] / ".env")
    model_config = SettingsConfigDict(
        env_file=env_path,
        env_file_encoding="utf-8",
        env_prefix="GEOBOUND_",
        extra="ignore",
    )

    # ── Application ────────────────────────────────────────────────
    app_name: str = "geobound"
    debug: bool = False
    log_level: str = "INFO"

    # ── Geometry defaults ──────────────────────────────────────────
    # Characters in a geohash returned by the encode endpoint.
    # 12 chars ≈ 3.7cm × 1.9cm cells.
    geohash_precision: int = 12
    # Geodesic widths use the great-circle formula instead of the
    # flat-Earth approximation.
    use_haversine: bool = False

    # ── Spatial SQL ────────────────────────────────────────────────
    # SRID stamped on envelopes built for PostGIS queries (WGS 84).
    srid: int = 4326

    # ── CORS ───────────────────────────────────────────────────────
    cors_origins: str = "http://localhost:5173,http://localhost:3000"

    @property
    def cors_origins_list(self) -> list[str]:
        """Parse the comma-separated CORS origins into a list."""
        return [o.strip() for o in self.cors_origins.split(",") if o.strip()]


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
