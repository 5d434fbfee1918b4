"""Write SVG markup from element definitions."""

from __future__ import annotations

from html import escape
from typing import Any

SVG_NS = "http://www.w3.org/2000/svg"
XLINK_NS = "http://www.w3.org/1999/xlink"

# Keys of an element dict that are not attributes
_RESERVED = ("tag", "children", "text")


def serialize_svg(
    elements: list[dict[str, Any]],
    width: float,
    height: float,
    view_box: tuple[float, float, float, float],
    defs: list[dict[str, Any]] | None = None,
) -> str:
    """Generate SVG markup. An element dict holds ``tag``, attributes and
    optionally ``children`` (nested element dicts) or ``text``."""
    root_attrs = {
        "xmlns": SVG_NS,
        "xmlns:xlink": XLINK_NS,
        "version": "1.1",
        "width": format_number(width),
        "height": format_number(height),
        "viewBox": " ".join(format_number(v) for v in view_box),
    }
    body: list[dict[str, Any]] = []
    if defs:
        body.append({"tag": "defs", "children": defs})
    body.extend(elements)

    return _serialize_element({"tag": "svg", **root_attrs, "children": body})


def _serialize_element(elem: dict[str, Any]) -> str:
    tag = elem.get("tag", "path")
    attrs = {k: v for k, v in elem.items() if k not in _RESERVED and v is not None}
    attr_str = "".join(f' {k}="{escape(_attr_value(v), quote=True)}"' for k, v in attrs.items())

    children = elem.get("children") or []
    text = elem.get("text")
    if not children and text is None:
        return f"<{tag}{attr_str}/>"

    inner = escape(text) if text is not None else ""
    inner += "".join(_serialize_element(child) for child in children)
    return f"<{tag}{attr_str}>{inner}</{tag}>"


def _attr_value(value: Any) -> str:
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return format_number(value)
    return str(value)


def format_number(value: float) -> str:
    """Compact number formatting: integers without a trailing ``.0``, at most
    three decimals otherwise."""
    rounded = round(float(value), 3)
    if rounded.is_integer():
        return str(int(rounded))
    return f"{rounded:g}"
