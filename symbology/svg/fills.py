"""Area fill styles: solid, null and tileable hatch patterns.

Hatch cells are 5x5 (7x7 for diagonal cross). Diagonal cells repeat the main
stroke shifted by one cell so the corners that the main line leaves uncovered
are painted too, hiding seams between tiles.
"""

from __future__ import annotations

from typing import Any

from symbology.engine.registry import DispatchTable
from symbology.svg.canvas import DrawingSurface
from symbology.svg.style import Colour, Stroke

_CELL = 5
_CROSS_CELL = 7

# style → fn(surface, colour, stroke) -> fill attributes
fill_styles: DispatchTable = DispatchTable("fill style")


def _line(x1: float, y1: float, x2: float, y2: float, stroke: Stroke) -> dict[str, Any]:
    return {"tag": "line", "x1": x1, "y1": y1, "x2": x2, "y2": y2, **stroke.attrs()}


def _pattern_fill(surface: DrawingSurface, cell: float, lines: list[dict[str, Any]]) -> dict[str, Any]:
    return {"fill": surface.add_pattern(cell, cell, lines)}


@fill_styles.register("esriSFSSolid")
def solid(surface: DrawingSurface, colour: Colour, stroke: Stroke) -> dict[str, Any]:
    return {"fill": colour.colour, "fill-opacity": colour.opacity}


@fill_styles.register("esriSFSNull")
def null(surface: DrawingSurface, colour: Colour, stroke: Stroke) -> dict[str, Any]:
    return {"fill": "transparent"}


@fill_styles.register("esriSFSHorizontal")
def horizontal(surface: DrawingSurface, colour: Colour, stroke: Stroke) -> dict[str, Any]:
    half = _CELL / 2
    return _pattern_fill(surface, _CELL, [_line(0, half, _CELL, half, stroke)])


@fill_styles.register("esriSFSVertical")
def vertical(surface: DrawingSurface, colour: Colour, stroke: Stroke) -> dict[str, Any]:
    half = _CELL / 2
    return _pattern_fill(surface, _CELL, [_line(half, 0, half, _CELL, stroke)])


@fill_styles.register("esriSFSForwardDiagonal")
def forward_diagonal(surface: DrawingSurface, colour: Colour, stroke: Stroke) -> dict[str, Any]:
    return _pattern_fill(surface, _CELL, [
        _line(0, 0, _CELL, _CELL, stroke),
        _line(0, _CELL, _CELL, 2 * _CELL, stroke),
        _line(_CELL, 0, 2 * _CELL, _CELL, stroke),
    ])


@fill_styles.register("esriSFSBackwardDiagonal")
def backward_diagonal(surface: DrawingSurface, colour: Colour, stroke: Stroke) -> dict[str, Any]:
    half = _CELL / 2
    return _pattern_fill(surface, _CELL, [
        _line(_CELL, 0, 0, _CELL, stroke),
        _line(_CELL + half, half, half, _CELL + half, stroke),
        _line(half, -half, -half, half, stroke),
    ])


@fill_styles.register("esriSFSCross")
def cross(surface: DrawingSurface, colour: Colour, stroke: Stroke) -> dict[str, Any]:
    half = _CELL / 2
    return _pattern_fill(surface, _CELL, [
        _line(half, 0, half, _CELL, stroke),
        _line(0, half, _CELL, half, stroke),
    ])


@fill_styles.register("esriSFSDiagonalCross")
def diagonal_cross(surface: DrawingSurface, colour: Colour, stroke: Stroke) -> dict[str, Any]:
    return _pattern_fill(surface, _CROSS_CELL, [
        _line(0, 0, _CROSS_CELL, _CROSS_CELL, stroke),
        _line(_CROSS_CELL, 0, 0, _CROSS_CELL, stroke),
    ])
