"""ESRI renderers to SVG icons, and feature → icon matching."""

from symbology.engine.enhancer import enhance_renderer
from symbology.engine.legend import map_server_to_local_legend, renderer_to_legend
from symbology.engine.matcher import get_graphic_icon, get_graphic_symbol
from symbology.engine.placeholder import generate_placeholder_symbology, generate_wms_symbology
from symbology.engine.rasterizer import rasterize
from symbology.engine.zoom import resolve_zoom_level

__version__ = "0.1.0"

__all__ = [
    "enhance_renderer",
    "map_server_to_local_legend",
    "renderer_to_legend",
    "get_graphic_icon",
    "get_graphic_symbol",
    "generate_placeholder_symbology",
    "generate_wms_symbology",
    "rasterize",
    "resolve_zoom_level",
]
