"""Generated icon artifact."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

CONTAINER_SIZE = 32


class IconImage(BaseModel):
    """Serialized SVG markup for one symbol. Immutable once built."""

    model_config = ConfigDict(frozen=True)

    svg: str
    width: float = CONTAINER_SIZE
    height: float = CONTAINER_SIZE
    view_box: tuple[float, float, float, float] = (0, 0, CONTAINER_SIZE, CONTAINER_SIZE)
    # number of drawn top-level elements; 0 for the empty container
    element_count: int = 0

    @property
    def svgcode(self) -> str:
        return self.svg

    @property
    def is_empty(self) -> bool:
        return self.element_count == 0
