"""Symbol rasterizer: turns one ESRI symbol into a 32x32 SVG icon.

Each symbol type has a drawing function registered in ``symbol_drawers``.
Drawing happens on a scoped surface; whatever goes wrong inside a drawer
(unknown type or style, unreadable picture) is logged and the caller gets the
empty container instead of an exception.
"""

from __future__ import annotations

import logging
from typing import Any

import httpx

from symbology.config import settings
from symbology.engine.registry import DispatchTable
from symbology.exceptions import ImageResourceError, ResourceFetchError, UnsupportedTypeError
from symbology.models.icon import CONTAINER_SIZE, IconImage
from symbology.models.legend import LegendEntry
from symbology.models.symbols import (
    CartographicLineSymbol,
    EsriModel,
    PictureFillSymbol,
    PictureMarkerSymbol,
    SimpleFillSymbol,
    SimpleLineSymbol,
    SimpleMarkerSymbol,
    Symbol,
    TextSymbol,
    parse_symbol,
)
from symbology.svg.canvas import EMPTY_ICON, DrawingSurface, drawing_surface
from symbology.svg.fills import fill_styles
from symbology.svg.images import image_reference, load_image
from symbology.svg.shapes import CONTAINER_CENTER, fit_scale, marker_shapes, rectangle, transform_attr
from symbology.svg.style import (
    ESRI_CAP_MAPS,
    ESRI_JOIN_MAPS,
    dash_array,
    fill_attrs,
    make_stroke,
    outline_stroke,
    parse_esri_colour,
)

logger = logging.getLogger(__name__)

CONTENT_SIZE = 24  # size of the symbol graphic
CONTENT_IMAGE_SIZE = 28  # pictures already carry a white border, so they get more room
CONTENT_PADDING = (CONTAINER_SIZE - CONTENT_SIZE) / 2

# symbol type → async fn(surface, symbol, client)
symbol_drawers: DispatchTable = DispatchTable("symbol")


async def rasterize(symbol: Symbol | dict[str, Any] | None, client: httpx.AsyncClient | None = None) -> IconImage:
    """Draw ``symbol`` into an icon. Never raises; failures give the empty icon."""
    if symbol is None:
        return EMPTY_ICON
    try:
        symbol = parse_symbol(symbol)
    except ValueError as e:
        logger.warning("Cannot parse symbol, drawing empty icon: %s", e)
        return EMPTY_ICON

    with drawing_surface() as surface:
        try:
            drawer = symbol_drawers.get(symbol.type)
            await drawer(surface, symbol, client)
            return surface.to_icon()
        except UnsupportedTypeError as e:
            logger.warning("Skipping symbol: %s", e)
        except ResourceFetchError as e:
            logger.error("Cannot draw %s picture; returning empty icon: %s", symbol.type, e)
        except Exception as e:
            logger.warning("Drawing %s symbol FAILED: %s", symbol.type, e)
    return EMPTY_ICON


async def symbol_to_legend(
    symbol: Symbol | dict[str, Any] | None,
    label: str,
    client: httpx.AsyncClient | None = None,
) -> LegendEntry:
    """Generate a legend entry for one symbol."""
    icon = await rasterize(symbol, client)
    return LegendEntry(label=label or "", icon=icon)


def _content_rect() -> dict[str, Any]:
    return {
        "tag": "rect",
        "x": CONTENT_PADDING,
        "y": CONTENT_PADDING,
        "width": CONTENT_SIZE,
        "height": CONTENT_SIZE,
    }


@symbol_drawers.register("esriSMS")
async def simple_marker(surface: DrawingSurface, symbol: SimpleMarkerSymbol, client: Any = None) -> None:
    colour = parse_esri_colour(symbol.color)
    stroke = outline_stroke(symbol.outline)
    size = symbol.size if symbol.size is not None else settings.default_marker_size

    shape = marker_shapes.get(symbol.style)(size, symbol.path)
    angle = symbol.angle or 0
    scale = fit_scale(shape.geometry, CONTENT_SIZE, angle)

    surface.add({
        **shape.element,
        **fill_attrs(colour),
        **stroke.attrs(),
        "transform": transform_attr(angle, scale),
    })


def _diagonal_line(stroke_attrs: dict[str, Any]) -> dict[str, Any]:
    low, high = CONTENT_PADDING, CONTAINER_SIZE - CONTENT_PADDING
    return {"tag": "line", "x1": low, "y1": low, "x2": high, "y2": high, **stroke_attrs}


@symbol_drawers.register("esriSLS")
async def simple_line(surface: DrawingSurface, symbol: SimpleLineSymbol, client: Any = None) -> None:
    colour = parse_esri_colour(symbol.color)
    stroke = make_stroke(
        color=colour.colour,
        opacity=colour.opacity,
        width=symbol.width,
        linecap="butt",
        dasharray=dash_array(symbol.style),
    )
    surface.add(_diagonal_line(stroke.attrs()))


@symbol_drawers.register("esriCLS")
async def cartographic_line(surface: DrawingSurface, symbol: CartographicLineSymbol, client: Any = None) -> None:
    colour = parse_esri_colour(symbol.color)
    stroke = make_stroke(
        color=colour.colour,
        opacity=colour.opacity,
        width=symbol.width,
        linecap=ESRI_CAP_MAPS.get(symbol.cap or "", "butt"),
        linejoin=ESRI_JOIN_MAPS.get(symbol.join or ""),
        miterlimit=symbol.miter_limit,
        dasharray=dash_array(symbol.style),
    )
    surface.add(_diagonal_line(stroke.attrs()))


@symbol_drawers.register("esriSFS")
async def simple_fill(surface: DrawingSurface, symbol: SimpleFillSymbol, client: Any = None) -> None:
    colour = parse_esri_colour(symbol.color)
    # hatch lines are drawn in the symbol colour
    hatch_stroke = make_stroke(color=colour.colour, opacity=colour.opacity)
    fill = fill_styles.get(symbol.style)(surface, colour, hatch_stroke)
    outline = outline_stroke(symbol.outline, linecap="butt")

    surface.add({**_content_rect(), **fill, **outline.attrs()})


@symbol_drawers.register("esriTS")
async def text(surface: DrawingSurface, symbol: TextSymbol, client: Any = None) -> None:
    logger.error("No support for legends of text symbols; drawing empty icon")


@symbol_drawers.register("esriPFS")
async def picture_fill(surface: DrawingSurface, symbol: PictureFillSymbol, client: httpx.AsyncClient | None = None) -> None:
    uri = _require_image(symbol)
    outline = outline_stroke(symbol.outline)
    image = await load_image(uri, client)

    tile_w = symbol.width * symbol.xscale or image.width
    tile_h = symbol.height * symbol.yscale or image.height
    fill = surface.add_pattern(tile_w, tile_h, [{
        "tag": "image",
        "xlink:href": image.data_uri,
        "x": 0,
        "y": 0,
        "width": tile_w,
        "height": tile_h,
        "preserveAspectRatio": "none",
    }])

    surface.add({**_content_rect(), "fill": fill, **outline.attrs()})


@symbol_drawers.register("esriPMS")
async def picture_marker(surface: DrawingSurface, symbol: PictureMarkerSymbol, client: httpx.AsyncClient | None = None) -> None:
    uri = _require_image(symbol)
    image = await load_image(uri, client)

    x = CONTAINER_CENTER - image.width / 2
    y = CONTAINER_CENTER - image.height / 2
    angle = symbol.angle or 0
    scale = fit_scale(rectangle(x, y, image.width, image.height), CONTENT_IMAGE_SIZE, angle)

    surface.add({
        "tag": "image",
        "xlink:href": image.data_uri,
        "x": x,
        "y": y,
        "width": image.width,
        "height": image.height,
        "transform": transform_attr(angle, scale),
    })


def _require_image(symbol: EsriModel) -> str:
    uri = image_reference(symbol.image_data, symbol.content_type, symbol.url)
    if not uri:
        raise ImageResourceError(f"{symbol.type} symbol has neither imageData nor url")
    return uri
