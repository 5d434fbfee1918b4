"""Master API router: mounts all endpoint routers."""

from __future__ import annotations

from fastapi import APIRouter

from symbology.api import health, legend, match, zoom

api_router = APIRouter(prefix="/api")

api_router.include_router(health.router)
api_router.include_router(legend.router)
api_router.include_router(match.router)
api_router.include_router(zoom.router)
