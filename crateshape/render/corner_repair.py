"""Inner-corner repair for outline sprites.

Outline strips sit inside their cell, flush with the edge. Where two strips
meet at a concave corner they leave a border_size × border_size notch
between them. This pass finds and fills those notches without touching
convex corners.
"""

from __future__ import annotations

import logging

import numpy as np
from numpy.typing import NDArray

from crateshape.core.geometry import DIAGONALS
from crateshape.render.buffer import PixelBuffer

logger = logging.getLogger(__name__)


def _shifted(mask: NDArray[np.bool_], dx: int, dy: int) -> NDArray[np.bool_]:
    """out[y, x] = mask[y + dy, x + dx]; reads outside the mask are False."""
    h, w = mask.shape
    out = np.zeros_like(mask)
    if abs(dx) >= w or abs(dy) >= h:
        return out
    src_y = slice(max(dy, 0), h + min(dy, 0))
    dst_y = slice(max(-dy, 0), h + min(-dy, 0))
    src_x = slice(max(dx, 0), w + min(dx, 0))
    dst_x = slice(max(-dx, 0), w + min(-dx, 0))
    out[dst_y, dst_x] = mask[src_y, src_x]
    return out


def find_corner_gaps(mask: NDArray[np.bool_], border_size: int) -> NDArray[np.bool_]:
    """Pixels to fill, judged entirely against ``mask`` as given.

    A background pixel is a gap for diagonal (dx, dy) when:
      - both orthogonal neighbours at border_size are foreground,
      - the diagonal neighbour at border_size is background,
      - at least one orthogonal neighbour at 2 × border_size is foreground.
    """
    b = border_size
    gaps = np.zeros_like(mask)
    for dx, dy in DIAGONALS:
        hit = (
            ~mask
            & _shifted(mask, dx * b, 0)
            & _shifted(mask, 0, dy * b)
            & ~_shifted(mask, dx * b, dy * b)
            & (_shifted(mask, 2 * dx * b, 0) | _shifted(mask, 0, 2 * dy * b))
        )
        gaps |= hit
    return gaps


def repair_inner_corners(buffer: PixelBuffer, border_size: int) -> int:
    """Fill concave-corner notches in place. Returns the number of pixels filled.

    All decisions are taken on the pre-pass state and applied afterwards, so
    the result does not depend on scan order.
    """
    gaps = find_corner_gaps(buffer.foreground_mask(), border_size)
    filled = int(np.count_nonzero(gaps))
    if filled:
        buffer.paint(gaps)
    logger.debug("Corner repair on %s: %d pixels filled", buffer.name or "buffer", filled)
    return filled
