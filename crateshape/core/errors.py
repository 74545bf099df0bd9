"""Exception hierarchy for shape construction and geometry."""

from __future__ import annotations


class CrateShapeError(Exception):
    """Base class for every error raised by crateshape."""


class ValidationError(CrateShapeError, ValueError):
    """Construction data is structurally invalid."""


class DuplicateCellError(ValidationError):
    def __init__(self, offset) -> None:
        self.offset = offset
        super().__init__(f"Duplicate cell offset: {tuple(offset)}")


class UnknownOffsetError(ValidationError):
    def __init__(self, offset, direction=None) -> None:
        self.offset = offset
        self.direction = direction
        where = f"{tuple(offset)}" if direction is None else f"{tuple(offset)} {direction.name}"
        super().__init__(f"Edge override references unknown offset: {where}")


class GeometryError(CrateShapeError, ValueError):
    """Geometry is undefined (empty shape, degenerate render settings)."""
