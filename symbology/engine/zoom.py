"""Scale → zoom level lookup over a tiling scheme's levels of detail."""

from __future__ import annotations

import logging
import math
from collections.abc import Mapping, Sequence
from typing import Any

from symbology.exceptions import MalformedInputError
from symbology.models.lod import Lod

logger = logging.getLogger(__name__)


def _scale(lod: Lod | Mapping[str, Any]) -> float:
    if isinstance(lod, Mapping):
        return lod["scale"]
    return lod.scale


def resolve_zoom_level(lods: Sequence[Lod | Mapping[str, Any]], max_scale: float) -> int:
    """Find the level as close to and above the scale limit.

    Args:
        lods: Levels of detail, index 0 most zoomed out (largest scale).
        max_scale: Scale limit of a layer. 0 means no limit.

    Returns:
        Index into ``lods``. The last index when ``max_scale`` is 0.
    """
    count = len(lods)
    if count == 0:
        raise MalformedInputError("cannot resolve a zoom level without levels of detail")

    if max_scale == 0:
        return count - 1

    # the midpoint split below needs at least three levels
    if count == 1:
        return 0
    if count == 2:
        return 1 if _scale(lods[1]) >= max_scale else 0

    low = 0
    high = count - 1
    # with three levels ceil(n/2) lands on ``high`` and the split never narrows
    current = min(math.ceil(count / 2), count - 2)
    steps = 0

    # Binary search
    while True:
        steps += 1
        if _scale(lods[current]) >= max_scale:
            low = current
        else:
            high = current
        current = (high + low) // 2
        if high == low + 1:
            break

    logger.debug("Zoom level %d for scale %s after %d steps", current, max_scale, steps)
    return current
