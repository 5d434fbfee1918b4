"""Scoped off-screen drawing surface.

A surface collects element dicts and pattern definitions for one icon and is
serialized once into an ``IconImage``. Surfaces are acquired through
``drawing_surface()`` and released when the ``with`` block exits, whether the
drawing succeeded or raised.
"""

from __future__ import annotations

import itertools
import logging
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

from symbology.models.icon import CONTAINER_SIZE, IconImage
from symbology.svg.serializer import serialize_svg

logger = logging.getLogger(__name__)

# Pattern ids must stay unique when several icons are inlined in one document
_pattern_ids = itertools.count(1000)


class SurfaceReleasedError(RuntimeError):
    """Raised when a released surface is drawn on or serialized."""


class DrawingSurface:
    """Collects SVG elements for a single icon."""

    def __init__(
        self,
        width: float = CONTAINER_SIZE,
        height: float = CONTAINER_SIZE,
        view_box: tuple[float, float, float, float] | None = None,
    ) -> None:
        self.width = width
        self.height = height
        self.view_box = view_box if view_box is not None else (0, 0, width, height)
        self._elements: list[dict[str, Any]] = []
        self._defs: list[dict[str, Any]] = []
        self.released = False

    @property
    def elements(self) -> list[dict[str, Any]]:
        return list(self._elements)

    def add(self, element: dict[str, Any]) -> dict[str, Any]:
        self._check_open()
        self._elements.append(element)
        return element

    def add_pattern(self, width: float, height: float, children: list[dict[str, Any]]) -> str:
        """Register a tiling pattern and return its ``url(#id)`` fill reference."""
        self._check_open()
        pattern_id = f"SymbologyPattern{next(_pattern_ids)}"
        self._defs.append({
            "tag": "pattern",
            "id": pattern_id,
            "x": 0,
            "y": 0,
            "width": width,
            "height": height,
            "patternUnits": "userSpaceOnUse",
            "children": children,
        })
        return f"url(#{pattern_id})"

    def set_view_box(self, x: float, y: float, w: float, h: float) -> None:
        self._check_open()
        self.view_box = (x, y, w, h)

    def to_icon(self) -> IconImage:
        self._check_open()
        svg = serialize_svg(
            self._elements,
            width=self.width,
            height=self.height,
            view_box=self.view_box,
            defs=self._defs,
        )
        return IconImage(
            svg=svg,
            width=self.width,
            height=self.height,
            view_box=self.view_box,
            element_count=len(self._elements),
        )

    def release(self) -> None:
        self._elements.clear()
        self._defs.clear()
        self.released = True

    def _check_open(self) -> None:
        if self.released:
            raise SurfaceReleasedError("drawing surface has already been released")


@contextmanager
def drawing_surface(
    width: float = CONTAINER_SIZE,
    height: float = CONTAINER_SIZE,
    view_box: tuple[float, float, float, float] | None = None,
) -> Iterator[DrawingSurface]:
    surface = DrawingSurface(width, height, view_box)
    try:
        yield surface
    finally:
        surface.release()


def empty_icon(view_box: tuple[float, float, float, float] | None = None) -> IconImage:
    """An icon container with nothing drawn in it."""
    with drawing_surface(view_box=view_box) as surface:
        return surface.to_icon()


EMPTY_ICON = empty_icon()
