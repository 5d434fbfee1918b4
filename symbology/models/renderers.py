"""ESRI renderer models in server JSON form.

Branches carry an ``icon`` slot that only the legend enhancer fills. It is
excluded from ``to_wire`` so enhanced renderers still dump to server JSON.
"""

from __future__ import annotations

from typing import Annotated, Any, Literal, Union

from pydantic import Discriminator, Field, Tag, TypeAdapter, model_validator

from symbology.models.icon import IconImage
from symbology.models.symbols import EsriModel, Number, Symbol

SIMPLE = "simple"
UNIQUE_VALUE = "uniqueValue"
CLASS_BREAKS = "classBreaks"


class SimpleRenderer(EsriModel):
    type: Literal["simple"] = SIMPLE
    symbol: Symbol | None = None
    label: str = ""
    description: str | None = None
    icon: IconImage | None = Field(default=None, exclude=True)


class UniqueValueInfo(EsriModel):
    # raw wire value; matching compares its string form
    value: Union[str, Number] = ""
    label: str = ""
    description: str | None = None
    symbol: Symbol | None = None
    icon: IconImage | None = Field(default=None, exclude=True)

    @property
    def key(self) -> str:
        """The value as the server writes composite keys."""
        return format_key_value(self.value)


class UniqueValueRenderer(EsriModel):
    type: Literal["uniqueValue"] = UNIQUE_VALUE
    field1: str | None = None
    field2: str | None = None
    field3: str | None = None
    default_symbol: Symbol | None = None
    default_label: str | None = None
    unique_value_infos: list[UniqueValueInfo] = Field(default_factory=list)
    default_icon: IconImage | None = Field(default=None, exclude=True)


class ClassBreakInfo(EsriModel):
    class_max_value: Number
    class_min_value: Number | None = None
    label: str = ""
    description: str | None = None
    symbol: Symbol | None = None
    icon: IconImage | None = Field(default=None, exclude=True)


class ClassBreaksRenderer(EsriModel):
    type: Literal["classBreaks"] = CLASS_BREAKS
    field: str | None = None
    min_value: Number | None = None
    default_symbol: Symbol | None = None
    default_label: str | None = None
    class_break_infos: list[ClassBreakInfo] = Field(default_factory=list)
    default_icon: IconImage | None = Field(default=None, exclude=True)

    @model_validator(mode="after")
    def _breaks_ascending(self) -> ClassBreaksRenderer:
        maxima = [cbi.class_max_value for cbi in self.class_break_infos]
        if maxima != sorted(maxima):
            raise ValueError("classBreakInfos must be sorted ascending by classMaxValue")
        return self


class UnsupportedRenderer(EsriModel):
    """Any renderer whose ``type`` is not simple, uniqueValue or classBreaks."""

    type: str | None = None


_RENDERER_TAGS = {SIMPLE, UNIQUE_VALUE, CLASS_BREAKS}


def _renderer_tag(value: Any) -> str:
    type_name = value.get("type") if isinstance(value, dict) else getattr(value, "type", None)
    return type_name if type_name in _RENDERER_TAGS else "unsupported"


Renderer = Annotated[
    Union[
        Annotated[SimpleRenderer, Tag(SIMPLE)],
        Annotated[UniqueValueRenderer, Tag(UNIQUE_VALUE)],
        Annotated[ClassBreaksRenderer, Tag(CLASS_BREAKS)],
        Annotated[UnsupportedRenderer, Tag("unsupported")],
    ],
    Discriminator(_renderer_tag),
]

_renderer_adapter: TypeAdapter[Renderer] = TypeAdapter(Renderer)


def parse_renderer(data: dict[str, Any] | EsriModel) -> Renderer:
    """Validate a renderer dict into its model. Unknown types never fail."""
    if isinstance(data, EsriModel):
        return data
    return _renderer_adapter.validate_python(data)


def format_key_value(value: Any) -> str:
    """Stringify an attribute value the way the server writes unique value keys."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)
