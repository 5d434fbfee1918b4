"""Wire-format and artifact models."""

from symbology.models.icon import IconImage
from symbology.models.symbols import Symbol, parse_symbol
from symbology.models.renderers import Renderer, parse_renderer
from symbology.models.legend import LayerLegend, Legend, LegendEntry
from symbology.models.lod import Lod

__all__ = [
    "IconImage",
    "Symbol",
    "parse_symbol",
    "Renderer",
    "parse_renderer",
    "LayerLegend",
    "Legend",
    "LegendEntry",
    "Lod",
]
