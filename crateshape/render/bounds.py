"""Bounding box, texture size and pivot for a set of cell offsets."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from crateshape.core.errors import GeometryError
from crateshape.core.geometry import Offset


@dataclass(frozen=True)
class Bounds:
    # Bottom-left and top-right cells (grid units, inclusive)
    min: Offset
    max: Offset
    # Texture size in pixels: (width, height)
    size: tuple[int, int]
    # Normalized anchor of the (0, 0) cell's bottom-left corner
    pivot: tuple[float, float]

    @property
    def width(self) -> int:
        return self.size[0]

    @property
    def height(self) -> int:
        return self.size[1]

    @property
    def cols(self) -> int:
        return self.max.x - self.min.x + 1

    @property
    def rows(self) -> int:
        return self.max.y - self.min.y + 1

    def cell_origin(self, offset: Offset, cell_size: int) -> tuple[int, int]:
        """Pixel (x, y) of the bottom-left corner of ``offset`` in the texture."""
        return ((offset.x - self.min.x) * cell_size, (offset.y - self.min.y) * cell_size)


def compute_bounds(offsets: Iterable[Offset | tuple[int, int]], cell_size: int) -> Bounds:
    """Minimal box covering ``offsets``, plus pixel size and pivot.

    pivot.x = -min_x / cols and pivot.y = -min_y / rows, so the grid origin
    maps to the same texture point however far the shape reaches into
    negative offsets.
    """
    cells = [Offset.of(o) for o in offsets]
    if not cells:
        raise GeometryError("Cannot compute bounds of an empty offset list")

    min_x = min(c.x for c in cells)
    max_x = max(c.x for c in cells)
    min_y = min(c.y for c in cells)
    max_y = max(c.y for c in cells)

    cols = max_x - min_x + 1
    rows = max_y - min_y + 1
    return Bounds(
        min=Offset(min_x, min_y),
        max=Offset(max_x, max_y),
        size=(cols * cell_size, rows * cell_size),
        pivot=((0 - min_x) / cols, (0 - min_y) / rows),
    )
