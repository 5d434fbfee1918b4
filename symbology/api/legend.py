"""POST /api/legend/*: legends and symbology items."""

from __future__ import annotations

from fastapi import APIRouter

from symbology.engine.legend import map_server_to_local_legend, renderer_to_legend
from symbology.engine.placeholder import generate_placeholder_symbology, generate_wms_symbology
from symbology.models.legend import Legend, LegendEntry
from symbology.models.requests import (
    LegendRequest,
    MapServerLegendRequest,
    PlaceholderRequest,
    WmsSymbologyRequest,
)

router = APIRouter()


@router.post("/legend", response_model=Legend)
async def legend(req: LegendRequest) -> Legend:
    return await renderer_to_legend(req.renderer, req.layer_id)


@router.post("/legend/map-server", response_model=Legend)
async def map_server_legend(req: MapServerLegendRequest) -> Legend:
    return await map_server_to_local_legend(req.url, req.layer_index)


@router.post("/placeholder", response_model=LegendEntry)
async def placeholder(req: PlaceholderRequest) -> LegendEntry:
    return await generate_placeholder_symbology(req.name, req.colour)


@router.post("/wms", response_model=LegendEntry)
async def wms(req: WmsSymbologyRequest) -> LegendEntry:
    return await generate_wms_symbology(req.name, req.image_uri)
