"""ESRI symbol models in server JSON form.

Every model keeps unknown keys and dumps with camelCase aliases so a parsed
symbol re-emits the JSON it was built from.
"""

from __future__ import annotations

from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Discriminator, Tag, TypeAdapter
from pydantic.alias_generators import to_camel

Number = Union[int, float]
Color = list[Number]


class EsriModel(BaseModel):
    """Base for all wire-format models."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="allow",
    )

    def to_wire(self) -> dict[str, Any]:
        """Dump back to server JSON (only keys that were present on input)."""
        return self.model_dump(by_alias=True, exclude_unset=True, mode="json")


class Outline(EsriModel):
    type: str | None = None
    style: str | None = None
    color: Color | None = None
    width: Number | None = None


class SimpleMarkerSymbol(EsriModel):
    type: Literal["esriSMS"] = "esriSMS"
    style: str = "esriSMSCircle"
    color: Color | None = None
    size: Number | None = None
    angle: Number | None = None
    path: str | None = None
    outline: Outline | None = None


class SimpleLineSymbol(EsriModel):
    type: Literal["esriSLS"] = "esriSLS"
    style: str = "esriSLSSolid"
    color: Color | None = None
    width: Number | None = None


class CartographicLineSymbol(EsriModel):
    type: Literal["esriCLS"] = "esriCLS"
    style: str = "esriSLSSolid"
    color: Color | None = None
    width: Number | None = None
    cap: str | None = None
    join: str | None = None
    miter_limit: Number | None = None


class SimpleFillSymbol(EsriModel):
    type: Literal["esriSFS"] = "esriSFS"
    style: str = "esriSFSSolid"
    color: Color | None = None
    outline: Outline | None = None


class PictureMarkerSymbol(EsriModel):
    type: Literal["esriPMS"] = "esriPMS"
    url: str | None = None
    image_data: str | None = None
    content_type: str | None = None
    width: Number | None = None
    height: Number | None = None
    angle: Number | None = None


class PictureFillSymbol(EsriModel):
    type: Literal["esriPFS"] = "esriPFS"
    url: str | None = None
    image_data: str | None = None
    content_type: str | None = None
    width: Number = 0
    height: Number = 0
    xscale: Number = 1
    yscale: Number = 1
    outline: Outline | None = None


class TextSymbol(EsriModel):
    type: Literal["esriTS"] = "esriTS"
    text: str | None = None
    color: Color | None = None


class UnsupportedSymbol(EsriModel):
    """Any symbol whose ``type`` has no model. Kept so parsing never fails."""

    type: str | None = None


_SYMBOL_TAGS = {"esriSMS", "esriSLS", "esriCLS", "esriSFS", "esriPMS", "esriPFS", "esriTS"}


def _symbol_tag(value: Any) -> str:
    type_name = value.get("type") if isinstance(value, dict) else getattr(value, "type", None)
    return type_name if type_name in _SYMBOL_TAGS else "unsupported"


Symbol = Annotated[
    Union[
        Annotated[SimpleMarkerSymbol, Tag("esriSMS")],
        Annotated[SimpleLineSymbol, Tag("esriSLS")],
        Annotated[CartographicLineSymbol, Tag("esriCLS")],
        Annotated[SimpleFillSymbol, Tag("esriSFS")],
        Annotated[PictureMarkerSymbol, Tag("esriPMS")],
        Annotated[PictureFillSymbol, Tag("esriPFS")],
        Annotated[TextSymbol, Tag("esriTS")],
        Annotated[UnsupportedSymbol, Tag("unsupported")],
    ],
    Discriminator(_symbol_tag),
]

_symbol_adapter: TypeAdapter[Symbol] = TypeAdapter(Symbol)


def parse_symbol(data: dict[str, Any] | EsriModel) -> Symbol:
    """Validate a symbol dict into its model."""
    if isinstance(data, EsriModel):
        return data
    return _symbol_adapter.validate_python(data)
