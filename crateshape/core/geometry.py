"""Grid primitives: integer offsets and cardinal directions.

The grid is y-up: Direction.UP is (0, 1), matching the texture convention
used by the rasterizer (row 0 is the bottom row).
"""

from __future__ import annotations

import enum
from collections.abc import Iterator
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Offset:
    """Integer grid vector relative to a shape origin. May be negative."""

    x: int
    y: int

    @classmethod
    def of(cls, value: Offset | tuple[int, int] | list[int]) -> Offset:
        if isinstance(value, Offset):
            return value
        x, y = value
        return cls(int(x), int(y))

    def __add__(self, other: Offset | tuple[int, int]) -> Offset:
        o = Offset.of(other)
        return Offset(self.x + o.x, self.y + o.y)

    def __sub__(self, other: Offset | tuple[int, int]) -> Offset:
        o = Offset.of(other)
        return Offset(self.x - o.x, self.y - o.y)

    def __neg__(self) -> Offset:
        return Offset(-self.x, -self.y)

    def __iter__(self) -> Iterator[int]:
        yield self.x
        yield self.y

    def __repr__(self) -> str:
        return f"Offset({self.x}, {self.y})"


class Direction(enum.IntEnum):
    """Cardinal direction, also used as a slot index into a unit's edges."""

    UP = 0
    DOWN = 1
    LEFT = 2
    RIGHT = 3

    @property
    def vector(self) -> Offset:
        return _VECTORS[self]

    @property
    def opposite(self) -> Direction:
        return _OPPOSITES[self]

    def __neg__(self) -> Direction:
        return self.opposite

    @classmethod
    def from_vector(cls, vector: Offset | tuple[int, int]) -> Direction:
        v = Offset.of(vector)
        for d, dv in _VECTORS.items():
            if dv == v:
                return d
        raise ValueError(f"Not a cardinal unit vector: {tuple(v)}")


_VECTORS: dict[Direction, Offset] = {
    Direction.UP: Offset(0, 1),
    Direction.DOWN: Offset(0, -1),
    Direction.LEFT: Offset(-1, 0),
    Direction.RIGHT: Offset(1, 0),
}

_OPPOSITES: dict[Direction, Direction] = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}

# Iteration order used by every per-cell scan.
DIRECTIONS: tuple[Direction, ...] = tuple(Direction)

# (dx, dy) diagonal steps for the corner repair pass
DIAGONALS: tuple[tuple[int, int], ...] = ((1, 1), (1, -1), (-1, 1), (-1, -1))
