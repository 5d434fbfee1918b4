"""Legend enhancement: attach legend icons to a renderer's branches.

The input renderer is never modified. A new renderer is built with icons on
its default and on every branch, looked up by label.
"""

from __future__ import annotations

import asyncio
import inspect
import logging
from collections.abc import Awaitable, Iterable
from typing import Union

from symbology.models.icon import IconImage
from symbology.models.legend import Legend, LegendEntry
from symbology.models.renderers import (
    ClassBreaksRenderer,
    Renderer,
    SimpleRenderer,
    UniqueValueRenderer,
)

logger = logging.getLogger(__name__)

LegendItem = Union[LegendEntry, Awaitable[LegendEntry]]


async def _resolve(item: LegendItem) -> LegendEntry:
    if inspect.isawaitable(item):
        return await item
    return item


async def collect_legend_lookup(legend: Legend | Iterable[LegendItem]) -> dict[str, IconImage]:
    """Join every (possibly still running) legend entry and map label → icon.

    Any failing entry fails the whole lookup. When two entries share a label
    the later one wins.
    """
    # our legends are generated per layer, so a Legend only has layer 0
    items = legend.entries if isinstance(legend, Legend) else list(legend)
    entries = await asyncio.gather(*(_resolve(item) for item in items))

    lookup: dict[str, IconImage] = {}
    for entry in entries:
        if entry.label in lookup:
            logger.debug("Legend label %r appears more than once; keeping the last icon", entry.label)
        lookup[entry.label] = entry.icon
    return lookup


async def enhance_renderer(renderer: Renderer, legend: Legend | Iterable[LegendItem]) -> Renderer:
    """Return a copy of ``renderer`` with icons attached from ``legend``.

    Args:
        renderer: A renderer in server JSON model form. Left untouched.
        legend: A legend for this renderer's layer, or its entries. Entries may
            be awaitables still being rasterized.

    Returns:
        The enhanced renderer.
    """
    lookup = await collect_legend_lookup(legend)

    if isinstance(renderer, SimpleRenderer):
        return renderer.model_copy(update={"icon": lookup.get(renderer.label)})

    if isinstance(renderer, UniqueValueRenderer):
        return renderer.model_copy(update={
            "default_icon": _default_icon(renderer, lookup),
            "unique_value_infos": [
                uvi.model_copy(update={"icon": lookup.get(uvi.label)})
                for uvi in renderer.unique_value_infos
            ],
        })

    if isinstance(renderer, ClassBreaksRenderer):
        return renderer.model_copy(update={
            "default_icon": _default_icon(renderer, lookup),
            "class_break_infos": [
                cbi.model_copy(update={"icon": lookup.get(cbi.label)})
                for cbi in renderer.class_break_infos
            ],
        })

    logger.warning("encountered unsupported renderer type: %s", getattr(renderer, "type", None))
    return renderer.model_copy()


def _default_icon(
    renderer: UniqueValueRenderer | ClassBreaksRenderer,
    lookup: dict[str, IconImage],
) -> IconImage | None:
    if renderer.default_label:
        return lookup.get(renderer.default_label)
    return None
