"""Unified views of several shapes, for merge events.

Merge orchestration lives outside this package; the caller decides which
shapes join and where. This module only builds the combined shape so the
sticky-pair pass can run over the new interior seams.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any

from crateshape.core.edge import Edge, EdgeClass
from crateshape.core.errors import GeometryError
from crateshape.core.geometry import Offset
from crateshape.core.shape import EdgeKey, Shape

logger = logging.getLogger(__name__)


def combine_shapes(
    parts: Sequence[tuple[Shape, Offset | tuple[int, int]]],
    temperature: Any = None,
) -> tuple[Shape, list[EdgeKey]]:
    """Combine placed shapes into one and suppress sticky pairs across seams.

    Each part is ``(shape, placement)``; the part's cells land at
    ``placement + offset``. Non-conductive edge classes carry over as
    overrides, so sticky connectors survive until they meet a partner.
    Overlapping cells raise DuplicateCellError.

    Returns the combined shape and the edge keys suppressed while combining.
    """
    if not parts:
        raise GeometryError("Nothing to combine")

    offsets: list[Offset] = []
    overrides: list[Edge] = []
    sticky: list[EdgeKey] = []
    for shape, placement in parts:
        at = Offset.of(placement)
        offsets.extend(at + o for o in shape.offsets)
        for edge in shape.edges:
            if edge.kind is EdgeClass.CONDUCTIVE:
                continue
            overrides.append(Edge(at + edge.position, edge.direction, edge.kind))
            if edge.kind is EdgeClass.STICKY:
                sticky.append((at + edge.position, edge.direction))

    # The constructor runs the sticky-pair pass; read back which carried
    # sticky edges it consumed.
    combined = Shape(offsets, overrides, temperature=temperature)
    paired = [key for key in sticky if combined.edge(*key).kind is EdgeClass.SUPPRESSED]
    logger.info(
        "Combined %d shapes into %d cells (%d sticky edges paired)",
        len(parts),
        len(combined),
        len(paired),
    )
    return combined, paired
