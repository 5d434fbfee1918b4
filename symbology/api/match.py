"""POST /api/match: icon and symbol for one feature."""

from __future__ import annotations

import logging

from fastapi import APIRouter

from symbology.engine.enhancer import enhance_renderer
from symbology.engine.legend import build_legend_entries
from symbology.engine.matcher import search_renderer
from symbology.models.requests import MatchRequest
from symbology.models.responses import MatchResponse

router = APIRouter()
logger = logging.getLogger(__name__)


@router.post("/match", response_model=MatchResponse)
async def match(req: MatchRequest) -> MatchResponse:
    pending = build_legend_entries(req.renderer)
    legend_size = len(pending)
    enhanced = await enhance_renderer(req.renderer, pending)

    result = search_renderer(req.attributes, enhanced)
    logger.debug("Matched %s renderer over %d legend entries", req.renderer.type, legend_size)

    return MatchResponse(
        svg=result.icon.svg,
        symbol=result.symbol.to_wire() if result.symbol is not None else None,
        legend_size=legend_size,
    )
