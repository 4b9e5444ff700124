"""
geobound — FastAPI Application
==============================
HTTP surface over the bound algebra: map tiles, geohashes, circles,
unions and intersection tests.
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from geobound import __version__
from geobound.config import get_settings
from geobound.routers import bounds

logger = logging.getLogger(__name__)
settings = get_settings()


def configure_logging() -> None:
    level = logging.DEBUG if settings.debug else settings.log_level.upper()
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


# ── Lifespan (startup / shutdown) ─────────────────────────────────
@asynccontextmanager
async def lifespan(app: FastAPI):
    configure_logging()
    logger.info(
        "%s starting up (srid=%d, geohash_precision=%d)",
        settings.app_name,
        settings.srid,
        settings.geohash_precision,
    )
    yield
    logger.info("%s shut down.", settings.app_name)


# ── App factory ───────────────────────────────────────────────────
def create_app() -> FastAPI:
    app = FastAPI(
        title=settings.app_name,
        description=(
            "Bounding boxes over lng/lat space: map tiles, geohashes, "
            "circles, unions and intersections."
        ),
        version=__version__,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(bounds.router, prefix="/api")

    @app.get("/health")
    async def health():
        return {"status": "ok", "service": settings.app_name}

    return app


# ── Module-level app instance (for `uvicorn geobound.main:app`) ──
app = create_app()  # pragma: no cover
