"""Edge descriptors: one classified boundary segment of a unit cell."""

from __future__ import annotations

import enum
from dataclasses import dataclass

from crateshape.core.geometry import Direction, Offset


class EdgeClass(str, enum.Enum):
    CONDUCTIVE = "conductive"
    STICKY = "sticky"
    SUPPRESSED = "suppressed"


@dataclass
class Edge:
    """Boundary segment of the cell at ``position`` on side ``direction``.

    Position and direction are fixed once built; only ``kind`` changes, and
    only away from CONDUCTIVE/STICKY towards SUPPRESSED.
    """

    position: Offset
    direction: Direction
    kind: EdgeClass = EdgeClass.CONDUCTIVE

    def __post_init__(self) -> None:
        self.position = Offset.of(self.position)
        self.direction = Direction(self.direction)
        self.kind = EdgeClass(self.kind)

    @property
    def neighbor(self) -> Offset:
        """Cell on the other side of this edge."""
        return self.position + self.direction.vector

    @property
    def key(self) -> tuple[Offset, Direction]:
        return (self.position, self.direction)

    def faces(self, other: Edge) -> bool:
        """True when the two edges are opposite-facing adjacent."""
        return self.neighbor == other.position and other.direction == self.direction.opposite

    def copy(self) -> Edge:
        return Edge(self.position, self.direction, self.kind)
