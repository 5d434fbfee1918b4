"""Feature attribute sets: object id indexing and table rows with matched icons."""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any

import httpx

from symbology.engine.matcher import get_graphic_icon
from symbology.exceptions import AttributeFetchError, MalformedInputError
from symbology.models.renderers import Renderer
from symbology.remote import get_json

logger = logging.getLogger(__name__)

OID_FIELD_TYPE = "esriFieldTypeOID"
SYMBOL_COLUMN = "rvSymbol"
INTERACTIVE_COLUMN = "rvInteractive"


@dataclass
class AttributeSet:
    features: list[dict[str, Any]]
    # object id (as string) → position in ``features``
    oid_index: dict[str, int] = field(default_factory=dict)


@dataclass
class FormattedAttributes:
    columns: list[dict[str, str]]
    rows: list[dict[str, Any]]
    fields: list[dict[str, Any]]
    oid_field: str
    oid_index: dict[str, int]
    renderer: Renderer


def find_oid_field(fields: Sequence[Mapping[str, Any]]) -> str | None:
    """Name of the object id field, if the layer has one."""
    for f in fields:
        if f.get("type") == OID_FIELD_TYPE:
            return f.get("name")
    return None


def index_features(features: Sequence[Mapping[str, Any]], oid_field: str) -> AttributeSet:
    """Index features by object id. Every feature must carry the id attribute."""
    result = AttributeSet(features=[dict(f) for f in features])
    for idx, feature in enumerate(result.features):
        attributes = feature.get("attributes") or {}
        if attributes.get(oid_field) is None:
            raise MalformedInputError(f"feature {idx} has no {oid_field!r} attribute")
        # object ids are integers; index them as strings so lookups don't depend on type
        result.oid_index[str(attributes[oid_field])] = idx
    return result


async def fetch_attribute_set(
    layer_url: str,
    oid_field: str,
    client: httpx.AsyncClient | None = None,
) -> AttributeSet:
    """Download every feature's attributes from a layer query endpoint."""
    url = f"{layer_url.rstrip('/')}/query"
    params = {"where": "1=1", "outFields": "*", "returnGeometry": "false", "f": "json"}
    try:
        result = await get_json(url, params, client)
    except (httpx.HTTPError, ValueError) as e:
        logger.warning("error getting attribute data from %s: %s", url, e)
        raise AttributeFetchError(f"attribute request to {url} failed: {e}") from e

    if result.get("error"):
        raise AttributeFetchError(f"attribute service {url} returned an error: {result['error']}")
    return index_features(result.get("features", []), oid_field)


def format_attributes(
    attribute_set: AttributeSet,
    fields: Sequence[Mapping[str, Any]],
    renderer: Renderer,
    oid_field: str | None = None,
) -> FormattedAttributes:
    """Build table columns and rows, each row carrying the icon of its feature.

    ``renderer`` should already be enhanced, otherwise every row gets the
    empty icon.
    """
    oid_field = oid_field or find_oid_field(fields)
    if oid_field is None:
        raise MalformedInputError("layer fields have no object id field")

    first = attribute_set.features[0].get("attributes", {}) if attribute_set.features else {}
    # only fields that actually have attribute data
    columns = [
        {"data": f["name"], "title": f.get("alias") or f["name"]}
        for f in fields
        if f.get("name") in first
    ]

    rows = []
    for feature in attribute_set.features:
        row = dict(feature.get("attributes", {}))
        row[INTERACTIVE_COLUMN] = ""
        row[SYMBOL_COLUMN] = get_graphic_icon(row, renderer)
        rows.append(row)

    return FormattedAttributes(
        columns=columns,
        rows=rows,
        fields=[dict(f) for f in fields],
        oid_field=oid_field,
        oid_index=dict(attribute_set.oid_index),
        renderer=renderer,
    )
