"""Level-of-detail model."""

from __future__ import annotations

from symbology.models.symbols import EsriModel


class Lod(EsriModel):
    """One zoom level of a tiling scheme. Index 0 is the most zoomed out."""

    level: int | None = None
    resolution: float | None = None
    scale: float
