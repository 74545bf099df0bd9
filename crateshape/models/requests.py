"""API request models."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field

from crateshape.core.edge import EdgeClass
from crateshape.core.geometry import Direction


class EdgeOverride(BaseModel):
    position: tuple[int, int] = Field(..., description="Cell offset the edge belongs to")
    direction: Literal["up", "down", "left", "right"]
    kind: EdgeClass = Field(default=EdgeClass.STICKY, description="Authored edge class")

    def direction_enum(self) -> Direction:
        return Direction[self.direction.upper()]


class ShapeRequest(BaseModel):
    offsets: list[tuple[int, int]] = Field(..., description="Cell offsets in construction order")
    overrides: list[EdgeOverride] = Field(default_factory=list, description="Authored edge classes")
    temperature: str | int | None = Field(default=None, description="Opaque tag, echoed back")


class RenderRequest(ShapeRequest):
    cell_size: int | None = Field(default=None, description="Pixels per cell (defaults to settings)")
    border_size: int | None = Field(default=None, description="Outline thickness (defaults to settings)")


class ShapePart(BaseModel):
    shape: ShapeRequest
    placement: tuple[int, int] = Field(default=(0, 0), description="Where the part's origin lands")


class CombineRequest(BaseModel):
    parts: list[ShapePart] = Field(..., description="Shapes to join, with placements")
    temperature: str | int | None = None
