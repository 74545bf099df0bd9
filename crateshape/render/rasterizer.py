"""Sprite rasterization: shape to fill and outline pixel buffers.

Both buffers share one Bounds, so they have the same size and pivot and
can be layered directly by the presentation layer.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass

from crateshape.core.edge import Edge
from crateshape.core.geometry import Direction, Offset
from crateshape.core.shape import Shape
from crateshape.render.bounds import Bounds, compute_bounds
from crateshape.render.buffer import FOREGROUND, PixelBuffer
from crateshape.render.config import RenderConfig
from crateshape.render.corner_repair import repair_inner_corners

logger = logging.getLogger(__name__)


@dataclass
class SpriteSet:
    """Everything the presentation layer needs to draw one crate."""

    bounds: Bounds
    background: PixelBuffer
    borders: PixelBuffer
    # Pixels added by the corner repair pass
    repaired: int = 0


def rasterize_fill(offsets: Iterable[Offset], bounds: Bounds, config: RenderConfig) -> PixelBuffer:
    """One opaque cell_size square per offset."""
    cs = config.cell_size
    buffer = PixelBuffer.blank(bounds, name="background")
    for offset in offsets:
        x0, y0 = bounds.cell_origin(offset, cs)
        buffer.pixels[y0 : y0 + cs, x0 : x0 + cs] = FOREGROUND
    return buffer


def _edge_strip(edge: Edge, bounds: Bounds, config: RenderConfig) -> tuple[slice, slice]:
    """(rows, cols) of the border strip drawn for ``edge``, inside its cell."""
    cs, b = config.cell_size, config.border_size
    x0, y0 = bounds.cell_origin(edge.position, cs)
    if edge.direction is Direction.UP:
        return slice(y0 + cs - b, y0 + cs), slice(x0, x0 + cs)
    if edge.direction is Direction.DOWN:
        return slice(y0, y0 + b), slice(x0, x0 + cs)
    if edge.direction is Direction.LEFT:
        return slice(y0, y0 + cs), slice(x0, x0 + b)
    return slice(y0, y0 + cs), slice(x0 + cs - b, x0 + cs)


def rasterize_outline(
    edges: Iterable[Edge],
    bounds: Bounds,
    config: RenderConfig,
    repair_corners: bool = True,
) -> tuple[PixelBuffer, int]:
    """Draw one border strip per edge, then run corner repair once.

    Returns the buffer and the number of pixels the repair filled.
    """
    buffer = PixelBuffer.blank(bounds, name="borders")
    count = 0
    for edge in edges:
        rows, cols = _edge_strip(edge, bounds, config)
        buffer.pixels[rows, cols] = FOREGROUND
        count += 1

    repaired = repair_inner_corners(buffer, config.border_size) if repair_corners else 0
    logger.debug("Rasterized %d border strips (%d corner pixels repaired)", count, repaired)
    return buffer, repaired


def render_sprites(shape: Shape, config: RenderConfig | None = None) -> SpriteSet:
    """Render the background (fill) and borders (outline) sprites for ``shape``."""
    config = config or RenderConfig.from_settings()
    bounds = compute_bounds(shape.offsets, config.cell_size)
    background = rasterize_fill(shape.offsets, bounds, config)
    borders, repaired = rasterize_outline(shape.boundary_edges, bounds, config)
    logger.info(
        "Rendered %d-cell shape: %dx%d px, pivot (%.3f, %.3f)",
        len(shape),
        bounds.width,
        bounds.height,
        bounds.pivot[0],
        bounds.pivot[1],
    )
    return SpriteSet(bounds=bounds, background=background, borders=borders, repaired=repaired)
