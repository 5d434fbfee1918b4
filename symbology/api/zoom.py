"""POST /api/zoom-level: scale limit → level of detail index."""

from __future__ import annotations

from fastapi import APIRouter

from symbology.engine.zoom import resolve_zoom_level
from symbology.models.requests import ZoomLevelRequest
from symbology.models.responses import ZoomLevelResponse

router = APIRouter()


@router.post("/zoom-level", response_model=ZoomLevelResponse)
async def zoom_level(req: ZoomLevelRequest) -> ZoomLevelResponse:
    return ZoomLevelResponse(level=resolve_zoom_level(req.lods, req.max_scale))
