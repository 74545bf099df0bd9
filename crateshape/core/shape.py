"""Shape: a polyomino crate and its classified boundary.

A shape keeps every edge in a single arena list. Units and the boundary list
both hold arena indices, so ``shape.boundary_edges`` returns the very Edge
objects the units own and a class change is visible through either path.

Usage:
    shape = Shape([(0, 0), (1, 0)], overrides=[Edge((1, 0), Direction.UP, EdgeClass.STICKY)])
    for edge in shape.boundary_edges:
        ...
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from typing import Any

from crateshape.core.edge import Edge, EdgeClass
from crateshape.core.errors import DuplicateCellError, GeometryError, UnknownOffsetError
from crateshape.core.geometry import DIRECTIONS, Direction, Offset
from crateshape.core.unit import Unit

logger = logging.getLogger(__name__)

EdgeKey = tuple[Offset, Direction]


class Shape:
    """Ordered set of cell offsets plus derived units and boundary edges."""

    def __init__(
        self,
        offsets: Iterable[Offset | tuple[int, int]],
        overrides: Iterable[Edge] | None = None,
        temperature: Any = None,
    ) -> None:
        self.offsets: list[Offset] = [Offset.of(o) for o in offsets]
        self.overrides: list[Edge] = [e.copy() for e in overrides or ()]
        # Opaque to the core, passed through for the colouring layer
        self.temperature = temperature

        self.edges: list[Edge] = []
        self.units: dict[Offset, Unit] = {}
        self._boundary: list[int] = []

        self._validate()
        self._build_units()
        self._derive_boundary()
        self.suppress_sticky_pairs()

    # ── Construction ──

    def _validate(self) -> None:
        if not self.offsets:
            raise GeometryError("Shape needs at least one cell")
        seen: set[Offset] = set()
        for offset in self.offsets:
            if offset in seen:
                raise DuplicateCellError(offset)
            seen.add(offset)
        for edge in self.overrides:
            if edge.position not in seen:
                raise UnknownOffsetError(edge.position, edge.direction)

    def _build_units(self) -> None:
        slots: dict[EdgeKey, int] = {}
        for offset in self.offsets:
            indices = []
            for d in DIRECTIONS:
                slots[(offset, d)] = len(self.edges)
                indices.append(len(self.edges))
                self.edges.append(Edge(offset, d))
            self.units[offset] = Unit(offset, tuple(indices))

        # Overrides replace the default edge object in their slot; a later
        # override of the same slot wins.
        for edge in self.overrides:
            self.edges[slots[edge.key]] = edge.copy()

    def _derive_boundary(self) -> None:
        for offset in self.offsets:
            unit = self.units[offset]
            for d in DIRECTIONS:
                idx = unit.edge_index(d)
                edge = self.edges[idx]
                if edge.kind is not EdgeClass.CONDUCTIVE:
                    # Authored class is preserved as-is
                    if edge.kind is EdgeClass.STICKY:
                        self._boundary.append(idx)
                elif unit.neighbor(d) in self.units:
                    edge.kind = EdgeClass.SUPPRESSED
                else:
                    self._boundary.append(idx)

        logger.debug(
            "Derived boundary: %d cells, %d visible edges, %d suppressed",
            len(self.offsets),
            len(self._boundary),
            sum(1 for e in self.edges if e.kind is EdgeClass.SUPPRESSED),
        )

    # ── Merge support ──

    def suppress_sticky_pairs(self) -> list[EdgeKey]:
        """Suppress every pair of sticky edges facing each other across a seam.

        Pairings are keyed by (position, direction), so one cell can pair on
        several sides in the same pass. Returns the suppressed edge keys.
        Running it again is a no-op, since suppressed edges are never sticky.
        """
        paired: list[EdgeKey] = []
        dropped: set[int] = set()
        for offset in self.offsets:
            unit = self.units[offset]
            for d in DIRECTIONS:
                dest = unit.neighbor(d)
                other = self.units.get(dest)
                if other is None:
                    continue
                idx = unit.edge_index(d)
                opp = other.edge_index(d.opposite)
                if self.edges[idx].kind is EdgeClass.STICKY and self.edges[opp].kind is EdgeClass.STICKY:
                    self.edges[idx].kind = EdgeClass.SUPPRESSED
                    self.edges[opp].kind = EdgeClass.SUPPRESSED
                    dropped.update((idx, opp))
                    paired.extend([(offset, d), (dest, d.opposite)])

        if dropped:
            self._boundary = [i for i in self._boundary if i not in dropped]
            logger.info("Suppressed %d sticky edge pairs", len(paired) // 2)
        return paired

    # ── Queries ──

    @property
    def boundary_edges(self) -> list[Edge]:
        return [self.edges[i] for i in self._boundary]

    @property
    def boundary_indices(self) -> tuple[int, ...]:
        return tuple(self._boundary)

    def unit(self, position: Offset | tuple[int, int]) -> Unit:
        return self.units[Offset.of(position)]

    def edge(self, position: Offset | tuple[int, int], direction: Direction) -> Edge:
        return self.edges[self.unit(position).edge_index(direction)]

    def cells_at(self, position: Offset | tuple[int, int]) -> list[Offset]:
        """World grid cells covered when the shape's origin sits at ``position``."""
        origin = Offset.of(position)
        return [origin + o for o in self.offsets]

    def __len__(self) -> int:
        return len(self.offsets)

    def __iter__(self) -> Iterator[Offset]:
        return iter(self.offsets)

    def __contains__(self, position: object) -> bool:
        try:
            return Offset.of(position) in self.units  # type: ignore[arg-type]
        except (TypeError, ValueError):
            return False

    def __repr__(self) -> str:
        return f"Shape(cells={len(self.offsets)}, boundary={len(self._boundary)})"
