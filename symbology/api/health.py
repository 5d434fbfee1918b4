"""Health check + meta endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from symbology import __version__
from symbology.config import Settings
from symbology.dependencies import get_settings
from symbology.engine.rasterizer import symbol_drawers
from symbology.models.responses import HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health(settings: Settings = Depends(get_settings)) -> HealthResponse:
    return HealthResponse(
        status="ok",
        version=__version__,
        environment=settings.symbology_env,
        symbol_types_registered=symbol_drawers.count,
    )


@router.get("/symbol-types")
async def symbol_types() -> dict[str, list[str]]:
    from symbology.svg.fills import fill_styles
    from symbology.svg.shapes import marker_shapes

    return {
        "symbols": list(symbol_drawers.keys()),
        "marker_styles": list(marker_shapes.keys()),
        "fill_styles": list(fill_styles.keys()),
    }
