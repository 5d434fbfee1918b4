"""Renderer matching: given feature attributes, find the renderer branch that draws it."""

from __future__ import annotations

import logging
import math
import re
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from symbology.models.icon import IconImage
from symbology.models.renderers import (
    ClassBreaksRenderer,
    Renderer,
    SimpleRenderer,
    UniqueValueRenderer,
    format_key_value,
)
from symbology.models.symbols import Symbol
from symbology.svg.canvas import EMPTY_ICON

logger = logging.getLogger(__name__)

KEY_DELIMITER = ", "

# Leading float literal, the way a lenient numeric parse reads "12.5 km"
_LEADING_FLOAT_RE = re.compile(r"^\s*[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


@dataclass(frozen=True)
class RendererMatch:
    icon: IconImage
    symbol: Symbol | None


def unique_value_key(attributes: Mapping[str, Any], renderer: UniqueValueRenderer) -> str:
    """Composite key of the configured fields, joined with ``", "``."""
    key = format_key_value(attributes.get(renderer.field1)) if renderer.field1 else ""
    if renderer.field2:
        key += KEY_DELIMITER + format_key_value(attributes.get(renderer.field2))
        if renderer.field3:
            key += KEY_DELIMITER + format_key_value(attributes.get(renderer.field3))
    return key


def parse_numeric(value: Any) -> float:
    """Read an attribute as a float. Unparseable values give NaN."""
    if value is None or isinstance(value, bool):
        return math.nan
    if isinstance(value, (int, float)):
        return float(value)
    match = _LEADING_FLOAT_RE.match(str(value))
    return float(match.group(0)) if match else math.nan


def _match_unique_value(attributes: Mapping[str, Any], renderer: UniqueValueRenderer) -> tuple[IconImage | None, Symbol | None]:
    key = unique_value_key(attributes, renderer)
    for uvi in renderer.unique_value_infos:
        if uvi.key == key:
            return uvi.icon, uvi.symbol
    return renderer.default_icon, renderer.default_symbol


def _match_class_breaks(attributes: Mapping[str, Any], renderer: ClassBreaksRenderer) -> tuple[IconImage | None, Symbol | None]:
    value = parse_numeric(attributes.get(renderer.field)) if renderer.field else math.nan
    lower = renderer.min_value if renderer.min_value is not None else -math.inf

    # outside the range on the low end (NaN compares false everywhere)
    if value < lower:
        return renderer.default_icon, renderer.default_symbol

    previous_max = lower - 1
    for cbi in renderer.class_break_infos:
        if previous_max < value <= cbi.class_max_value:
            return cbi.icon, cbi.symbol
        previous_max = cbi.class_max_value

    # outside the range on the high end
    return renderer.default_icon, renderer.default_symbol


def search_renderer(attributes: Mapping[str, Any], renderer: Renderer) -> RendererMatch:
    """Find the icon and symbol of the renderer branch matching ``attributes``.

    Never fails: unknown renderers and branches without an attached icon give
    the empty icon.
    """
    icon: IconImage | None = None
    symbol: Symbol | None = None

    if isinstance(renderer, SimpleRenderer):
        icon, symbol = renderer.icon, renderer.symbol
    elif isinstance(renderer, UniqueValueRenderer):
        icon, symbol = _match_unique_value(attributes, renderer)
    elif isinstance(renderer, ClassBreaksRenderer):
        icon, symbol = _match_class_breaks(attributes, renderer)
    else:
        logger.warning("Unknown renderer type encountered - %s", getattr(renderer, "type", None))

    return RendererMatch(icon=icon if icon is not None else EMPTY_ICON, symbol=symbol)


def get_graphic_icon(attributes: Mapping[str, Any], renderer: Renderer) -> IconImage:
    """Icon for a feature, from an enhanced renderer."""
    return search_renderer(attributes, renderer).icon


def get_graphic_symbol(attributes: Mapping[str, Any], renderer: Renderer) -> Symbol | None:
    """Symbol (server JSON model) for a feature."""
    return search_renderer(attributes, renderer).symbol
