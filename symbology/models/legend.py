"""Legend models, shaped like the ESRI REST legend response."""

from __future__ import annotations

from typing import Union

from pydantic import BaseModel, ConfigDict, Field

from symbology.models.icon import IconImage
from symbology.models.symbols import EsriModel


class LegendEntry(BaseModel):
    model_config = ConfigDict(frozen=True)

    label: str = ""
    icon: IconImage

    @property
    def svgcode(self) -> str:
        return self.icon.svg


class LayerLegend(EsriModel):
    layer_id: Union[int, str, None] = None
    legend: list[LegendEntry] = Field(default_factory=list)


class Legend(EsriModel):
    layers: list[LayerLegend] = Field(default_factory=list)

    @property
    def entries(self) -> list[LegendEntry]:
        """Entries of the first layer (legends built here hold exactly one)."""
        if not self.layers:
            return []
        return self.layers[0].legend
