"""Legend construction: renderer → legend, and map server legend → local legend.

Layers without a renderer (tile, image and raster services) only publish a
server-side legend. That legend is turned into a fake unique value renderer of
picture markers so it flows through the same symbology code as real renderers.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Coroutine
from typing import Any, Union

import httpx

from symbology.engine.rasterizer import symbol_to_legend
from symbology.exceptions import LegendFetchError, MalformedInputError
from symbology.models.legend import LayerLegend, Legend, LegendEntry
from symbology.models.renderers import (
    ClassBreaksRenderer,
    Renderer,
    SimpleRenderer,
    UniqueValueInfo,
    UniqueValueRenderer,
)
from symbology.models.symbols import PictureMarkerSymbol
from symbology.remote import get_json

logger = logging.getLogger(__name__)

LayerIndex = Union[int, str]


def build_legend_entries(
    renderer: Renderer,
    client: httpx.AsyncClient | None = None,
) -> list[Coroutine[Any, Any, LegendEntry]]:
    """One pending legend entry per branch, the default (if any) last."""
    if isinstance(renderer, SimpleRenderer):
        return [symbol_to_legend(renderer.symbol, renderer.label, client)]

    if isinstance(renderer, (UniqueValueRenderer, ClassBreaksRenderer)):
        branches = (
            renderer.unique_value_infos
            if isinstance(renderer, UniqueValueRenderer)
            else renderer.class_break_infos
        )
        pending = [symbol_to_legend(branch.symbol, branch.label, client) for branch in branches]
        if renderer.default_symbol is not None:
            # class breaks renderers often have no default label
            pending.append(symbol_to_legend(renderer.default_symbol, renderer.default_label or "", client))
        return pending

    logger.error("encountered unsupported renderer legend type: %s", getattr(renderer, "type", None))
    return []


async def renderer_to_legend(
    renderer: Renderer,
    layer_id: LayerIndex | None = 0,
    client: httpx.AsyncClient | None = None,
) -> Legend:
    """Generate a legend shaped like an ESRI REST legend for one layer."""
    entries = await asyncio.gather(*build_legend_entries(renderer, client))
    return Legend(layers=[LayerLegend(layer_id=layer_id, legend=list(entries))])


async def get_map_server_legend(service_url: str, client: httpx.AsyncClient | None = None) -> dict[str, Any]:
    """Fetch the legend JSON of a map service (root service url, not a layer)."""
    url = f"{service_url.rstrip('/')}/legend"
    try:
        result = await get_json(url, {"f": "json"}, client)
    except httpx.HTTPError as e:
        logger.error("Legend request to %s failed: %s", url, e)
        raise LegendFetchError(f"legend request to {url} failed: {e}") from e
    except ValueError as e:
        raise LegendFetchError(f"legend response from {url} is not a JSON object: {e}") from e

    if result.get("error"):
        logger.error("Legend service %s returned an error: %s", url, result["error"])
        raise LegendFetchError(f"legend service {url} returned an error", server_error=result["error"])
    return result


def _legend_branches(layer: dict[str, Any]) -> list[UniqueValueInfo]:
    return [
        UniqueValueInfo(
            value=item.get("label", ""),
            label=item.get("label", ""),
            symbol=PictureMarkerSymbol(
                type="esriPMS",
                image_data=item.get("imageData"),
                content_type=item.get("contentType"),
                url=item.get("url"),
            ),
        )
        for item in layer.get("legend", [])
    ]


def server_legend_to_renderer(server_legend: dict[str, Any], layer_index: LayerIndex | None = None) -> UniqueValueRenderer:
    """Build a fake unique value renderer from a map server legend.

    Args:
        server_legend: Legend JSON from a map server.
        layer_index: Sub-layer to take entries from. ``None`` merges every layer.
    """
    layers = server_legend.get("layers", [])
    if layer_index is None:
        branches = [branch for layer in layers for branch in _legend_branches(layer)]
    else:
        layer = next((l for l in layers if str(l.get("layerId")) == str(layer_index)), None)
        if layer is None:
            raise MalformedInputError(f"legend has no layer with id {layer_index}")
        branches = _legend_branches(layer)

    return UniqueValueRenderer(type="uniqueValue", unique_value_infos=branches)


async def map_server_to_local_legend(
    service_url: str,
    layer_index: LayerIndex | None = None,
    client: httpx.AsyncClient | None = None,
) -> Legend:
    """Fetch a map server legend and convert it to a local legend.

    - fetch the legend from the server
    - take the entries of one sub-layer (or all of them)
    - convert them to a temporary renderer
    - convert the renderer to a legend with generated icons
    """
    server_legend = await get_map_server_legend(service_url, client)
    fake_renderer = server_legend_to_renderer(server_legend, layer_index)
    return await renderer_to_legend(fake_renderer, layer_index, client)
