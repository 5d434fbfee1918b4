"""Colour, stroke and dash conversion from ESRI symbol JSON to SVG attributes."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any

from symbology.models.symbols import Outline

# ESRI line style → SVG stroke-dasharray
ESRI_DASH_MAPS: dict[str, str] = {
    "esriSLSSolid": "none",
    "esriSLSDash": "5.333,4",
    "esriSLSDashDot": "5.333,4,1.333,4",
    "esriSLSLongDashDotDot": "10.666,4,1.333,4,1.333,4",
    "esriSLSDot": "1.333,4",
    "esriSLSLongDash": "10.666,4",
    "esriSLSLongDashDot": "10.666,4,1.333,4",
    "esriSLSShortDash": "5.333,1.333",
    "esriSLSShortDashDot": "5.333,1.333,1.333,1.333",
    "esriSLSShortDashDotDot": "5.333,1.333,1.333,1.333,1.333,1.333",
    "esriSLSShortDot": "1.333,1.333",
    "esriSLSNull": "none",
}

# Cartographic line cap/join → SVG
ESRI_CAP_MAPS = {"esriLCSButt": "butt", "esriLCSRound": "round", "esriLCSSquare": "square"}
ESRI_JOIN_MAPS = {"esriLJSMiter": "miter", "esriLJSRound": "round", "esriLJSBevel": "bevel"}

# Null outline for symbols that don't carry one
DEFAULT_OUTLINE = Outline(color=[0, 0, 0, 0], width=0, style="esriSLSNull")


@dataclass(frozen=True)
class Colour:
    colour: str
    opacity: float


@dataclass(frozen=True)
class Stroke:
    color: str = "#000"
    opacity: float = 1
    width: float = 1
    linecap: str = "square"
    linejoin: str = "miter"
    miterlimit: float = 4
    dasharray: str = "none"

    def attrs(self) -> dict[str, Any]:
        return {
            "stroke": self.color,
            "stroke-opacity": self.opacity,
            "stroke-width": self.width,
            "stroke-linecap": self.linecap,
            "stroke-linejoin": self.linejoin,
            "stroke-miterlimit": self.miterlimit,
            "stroke-dasharray": self.dasharray,
        }


DEFAULT_STROKE = Stroke()


def parse_esri_colour(c: list[float] | None) -> Colour:
    """Convert an ESRI RGBA array (alpha 0-255) to an SVG colour and opacity."""
    if c:
        alpha = c[3] if len(c) > 3 else 255
        r, g, b = (round(v) for v in c[:3])
        return Colour(colour=f"rgb({r},{g},{b})", opacity=alpha / 255)
    return Colour(colour="rgb(0, 0, 0)", opacity=0)


def dash_array(style: str | None) -> str:
    """Dash pattern for a line style; unknown styles draw solid."""
    return ESRI_DASH_MAPS.get(style or "", "none")


def make_stroke(**overrides: Any) -> Stroke:
    """Apply overrides field by field on top of the default stroke. ``None``
    values leave the default in place."""
    return replace(DEFAULT_STROKE, **{k: v for k, v in overrides.items() if v is not None})


def outline_stroke(outline: Outline | None, linecap: str | None = None) -> Stroke:
    outline = outline or DEFAULT_OUTLINE
    colour = parse_esri_colour(outline.color)
    return make_stroke(
        color=colour.colour,
        opacity=colour.opacity,
        width=outline.width,
        linecap=linecap,
        dasharray=dash_array(outline.style),
    )


def fill_attrs(colour: Colour) -> dict[str, Any]:
    return {"fill": colour.colour, "fill-opacity": colour.opacity}