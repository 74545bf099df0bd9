"""Shape core: grid primitives, edges, units and boundary derivation."""

from crateshape.core.edge import Edge, EdgeClass
from crateshape.core.errors import (
    CrateShapeError,
    DuplicateCellError,
    GeometryError,
    UnknownOffsetError,
    ValidationError,
)
from crateshape.core.geometry import DIAGONALS, DIRECTIONS, Direction, Offset
from crateshape.core.merge import combine_shapes
from crateshape.core.shape import EdgeKey, Shape
from crateshape.core.unit import Unit

__all__ = [
    "Edge",
    "EdgeClass",
    "EdgeKey",
    "CrateShapeError",
    "DuplicateCellError",
    "GeometryError",
    "UnknownOffsetError",
    "ValidationError",
    "DIAGONALS",
    "DIRECTIONS",
    "Direction",
    "Offset",
    "Shape",
    "Unit",
    "combine_shapes",
]
