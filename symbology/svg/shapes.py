"""Marker primitives and fit-into-box geometry, measured with svgpathtools."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from svgpathtools import Path, parse_path

from symbology.engine.registry import DispatchTable
from symbology.models.icon import CONTAINER_SIZE

CONTAINER_CENTER = CONTAINER_SIZE // 2
_CENTER = complex(CONTAINER_CENTER, CONTAINER_CENTER)


@dataclass
class MarkerShape:
    """Marker geometry centred on the container, before rotation and scaling."""

    geometry: Path | None
    element: dict[str, Any]


# style → builder(size, path) -> MarkerShape
marker_shapes: DispatchTable = DispatchTable("marker style")

# Fixed shapes drawn in a 20x20 cell, resized to the symbol size
_CELL_PATHS = {
    "esriSMSCross": "M 0,10 L 20,10 M 10,0 L 10,20",
    "esriSMSX": "M 0,0 L 20,20 M 20,0 L 0,20",
    "esriSMSTriangle": "M 20,20 L 10,0 0,20 Z",
    "esriSMSDiamond": "M 20,10 L 10,0 0,10 10,20 Z",
    "esriSMSSquare": "M 0,0 20,0 20,20 0,20 Z",
}


@marker_shapes.register("esriSMSCircle")
def circle(size: float, path: str | None = None) -> MarkerShape:
    r = max(size / 2, 0)
    element = {"tag": "circle", "cx": CONTAINER_CENTER, "cy": CONTAINER_CENTER, "r": r}
    if r == 0:
        return MarkerShape(geometry=None, element=element)
    geometry = parse_path(
        f"M {CONTAINER_CENTER - r},{CONTAINER_CENTER} "
        f"A {r},{r} 0 1,0 {CONTAINER_CENTER + r},{CONTAINER_CENTER} "
        f"A {r},{r} 0 1,0 {CONTAINER_CENTER - r},{CONTAINER_CENTER} Z"
    )
    return MarkerShape(geometry=geometry, element=element)


def _path_marker(d: str, size: float) -> MarkerShape:
    geometry = centre(resize_to_width(parse_path(d), size))
    return MarkerShape(geometry=geometry, element={"tag": "path", "d": geometry.d()})


@marker_shapes.register("esriSMSPath")
def custom_path(size: float, path: str | None = None) -> MarkerShape:
    if not path:
        raise ValueError("esriSMSPath marker has no path")
    return _path_marker(path, size)


def _cell_marker(style: str):
    def build(size: float, path: str | None = None) -> MarkerShape:
        return _path_marker(_CELL_PATHS[style], size)

    build.__name__ = style
    return build


for _style in _CELL_PATHS:
    marker_shapes.add(_style, _cell_marker(_style))


def bbox_size(geometry: Path) -> tuple[float, float]:
    xmin, xmax, ymin, ymax = geometry.bbox()
    return xmax - xmin, ymax - ymin


def resize_to_width(geometry: Path, width: float) -> Path:
    """Scale proportionally so the bounding box is ``width`` wide (height for
    zero-width shapes), moving its top-left corner to the origin."""
    xmin, xmax, ymin, ymax = geometry.bbox()
    extent = (xmax - xmin) or (ymax - ymin)
    moved = geometry.translated(complex(-xmin, -ymin))
    if extent <= 0:
        return moved
    return moved.scaled(width / extent)


def centre(geometry: Path, center: complex = _CENTER) -> Path:
    xmin, xmax, ymin, ymax = geometry.bbox()
    current = complex((xmin + xmax) / 2, (ymin + ymax) / 2)
    return geometry.translated(center - current)


def rectangle(x: float, y: float, width: float, height: float) -> Path:
    return parse_path(f"M {x},{y} L {x + width},{y} L {x + width},{y + height} L {x},{y + height} Z")


def fit_scale(geometry: Path | None, content_size: float, angle: float = 0) -> float:
    """Uniform scale that fits the rotated bounding box into ``content_size``.

    Never above 1: shapes are shrunk to fit, never enlarged.
    """
    if geometry is None:
        return 1.0
    rotated = geometry.rotated(angle, origin=_CENTER) if angle else geometry
    extent = max(bbox_size(rotated))
    if extent <= 0:
        return 1.0
    return min(1.0, content_size / extent)


def transform_attr(angle: float = 0, scale: float = 1.0) -> str | None:
    """SVG transform rotating and then scaling about the container centre."""
    parts = []
    if scale != 1.0:
        c = CONTAINER_CENTER
        parts.append(f"translate({c} {c}) scale({round(scale, 6)}) translate({-c} {-c})")
    if angle:
        parts.append(f"rotate({angle} {CONTAINER_CENTER} {CONTAINER_CENTER})")
    return " ".join(parts) or None
