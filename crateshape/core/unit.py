"""Unit: one grid cell of a shape, owning one edge slot per direction."""

from __future__ import annotations

from dataclasses import dataclass

from crateshape.core.geometry import DIRECTIONS, Direction, Offset


@dataclass(frozen=True)
class Unit:
    position: Offset
    # Arena indices into the owning shape's edge list, indexed by Direction
    edges: tuple[int, int, int, int]

    def __post_init__(self) -> None:
        if len(self.edges) != len(DIRECTIONS):
            raise ValueError(f"Unit needs exactly {len(DIRECTIONS)} edge slots, got {len(self.edges)}")

    def edge_index(self, direction: Direction) -> int:
        return self.edges[direction]

    def neighbor(self, direction: Direction) -> Offset:
        return self.position + direction.vector
