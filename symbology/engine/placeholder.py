"""Symbology for layers that have no renderer to draw from."""

from __future__ import annotations

import logging

import httpx

from symbology.config import settings
from symbology.exceptions import ResourceFetchError
from symbology.models.icon import CONTAINER_SIZE
from symbology.models.legend import LegendEntry
from symbology.svg.canvas import drawing_surface
from symbology.svg.images import load_image
from symbology.svg.shapes import CONTAINER_CENTER

logger = logging.getLogger(__name__)

_PLACEHOLDER_SQUARE = 28
_PLACEHOLDER_FONT_SIZE = 23


async def generate_placeholder_symbology(name: str, colour: str = "#000") -> LegendEntry:
    """Coloured square with the first letter of ``name``."""
    with drawing_surface() as surface:
        offset = CONTAINER_CENTER - _PLACEHOLDER_SQUARE / 2
        surface.add({
            "tag": "rect",
            "x": offset,
            "y": offset,
            "width": _PLACEHOLDER_SQUARE,
            "height": _PLACEHOLDER_SQUARE,
            "fill": colour,
        })
        surface.add({
            "tag": "text",
            "x": CONTAINER_CENTER,
            "y": CONTAINER_CENTER,
            "font-size": _PLACEHOLDER_FONT_SIZE,
            "font-weight": "bold",
            "font-family": settings.placeholder_font_family,
            "fill": "#fff",
            "text-anchor": "middle",
            "dominant-baseline": "central",
            "text": name[:1].upper(),
        })
        return LegendEntry(label=name, icon=surface.to_icon())


async def generate_wms_symbology(
    name: str,
    image_uri: str | None = None,
    client: httpx.AsyncClient | None = None,
) -> LegendEntry:
    """Wrap an externally rendered legend image (url or data URL).

    No image, or an image that fails to load, gives an empty icon.
    """
    with drawing_surface(CONTAINER_SIZE, CONTAINER_SIZE, view_box=(0, 0, 0, 0)) as surface:
        if image_uri:
            try:
                image = await load_image(image_uri, client)
            except ResourceFetchError as e:
                logger.error("Cannot draw wms legend image; returning empty: %s", e)
            else:
                surface.add({
                    "tag": "image",
                    "xlink:href": image.data_uri,
                    "x": 0,
                    "y": 0,
                    "width": image.width,
                    "height": image.height,
                })
                surface.set_view_box(0, 0, image.width, image.height)
        return LegendEntry(label=name, icon=surface.to_icon())
