"""API response models."""

from __future__ import annotations

from pydantic import BaseModel, Field

from crateshape.core.edge import EdgeClass


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"


class EdgeModel(BaseModel):
    position: tuple[int, int]
    direction: str
    kind: EdgeClass


class BoundsModel(BaseModel):
    min: tuple[int, int]
    max: tuple[int, int]
    size: tuple[int, int]
    pivot: tuple[float, float]


class SpriteModel(BaseModel):
    name: str
    width: int
    height: int
    pivot: tuple[float, float]
    png_base64: str


class BoundaryResponse(BaseModel):
    cells: list[tuple[int, int]]
    edges: list[EdgeModel]
    temperature: str | int | None = None
    paired: list[EdgeModel] = Field(default_factory=list)


class RenderResponse(BaseModel):
    edges: list[EdgeModel]
    bounds: BoundsModel
    background: SpriteModel
    borders: SpriteModel
    repaired_pixels: int = 0
    temperature: str | int | None = None
