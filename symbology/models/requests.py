"""API request models."""

from __future__ import annotations

from typing import Any, Union

from pydantic import BaseModel, Field

from symbology.models.lod import Lod
from symbology.models.renderers import Renderer


class LegendRequest(BaseModel):
    renderer: Renderer = Field(..., description="ESRI renderer in server JSON form")
    layer_id: Union[int, str, None] = Field(default=0, description="Layer id to stamp on the legend")


class MapServerLegendRequest(BaseModel):
    url: str = Field(..., description="Map service url (root service, not a layer endpoint)")
    layer_index: Union[int, str, None] = Field(
        default=None,
        description="Sub-layer to build the legend for; omit to merge every layer",
    )


class MatchRequest(BaseModel):
    renderer: Renderer = Field(..., description="ESRI renderer in server JSON form")
    attributes: dict[str, Any] = Field(default_factory=dict, description="Feature attributes")


class ZoomLevelRequest(BaseModel):
    lods: list[Lod] = Field(..., description="Levels of detail, index 0 most zoomed out")
    max_scale: float = Field(..., description="Scale limit; 0 means no limit")


class PlaceholderRequest(BaseModel):
    name: str = Field(..., description="Label whose first letter is drawn")
    colour: str = Field(default="#000", description="Square background colour")


class WmsSymbologyRequest(BaseModel):
    name: str = Field(..., description="Label of the symbology item")
    image_uri: str | None = Field(default=None, description="Legend image url or data URL")
