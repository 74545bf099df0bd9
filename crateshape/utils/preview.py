"""Text previews of foreground masks, for logs and debugging.

Masks come in texture order (row 0 at the bottom); every renderer here
prints the top row first.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray


def mask_to_text(
    mask: NDArray[np.bool_],
    filled: str = "X",
    empty: str = ".",
) -> str:
    """One character per pixel, space-separated."""
    rows = []
    for row in np.flipud(mask):
        rows.append(" ".join(filled if cell else empty for cell in row))
    return "\n".join(rows)


_HALF_BLOCKS = {
    (False, False): " ",
    (True, False): "▀",
    (False, True): "▄",
    (True, True): "█",
}


def mask_to_halfblock(mask: NDArray[np.bool_]) -> str:
    """Two mask rows per text line; a leftover bottom row pairs with an empty one."""
    grid = np.flipud(mask)
    if grid.shape[0] % 2:
        grid = np.vstack([grid, np.zeros((1, grid.shape[1]), dtype=bool)])
    lines = []
    for top, bottom in zip(grid[0::2], grid[1::2]):
        lines.append("".join(_HALF_BLOCKS[bool(t), bool(b)] for t, b in zip(top, bottom)))
    return "\n".join(lines)


def fill_percentage(mask: NDArray[np.bool_]) -> float:
    total = mask.size
    if total == 0:
        return 0.0
    return float(np.count_nonzero(mask) / total * 100)
