"""API response models."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"
    environment: str = "development"
    symbol_types_registered: int = 0


class MatchResponse(BaseModel):
    svg: str
    symbol: dict[str, Any] | None = None
    legend_size: int = 0


class ZoomLevelResponse(BaseModel):
    level: int