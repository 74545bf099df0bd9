"""POST /api/shapes/*: boundary classification, sprite rendering, combining.

Construction errors (CrateShapeError) propagate to the app-level handler,
which turns them into 422 responses.
"""

from __future__ import annotations

from fastapi import APIRouter

from crateshape.core.edge import Edge
from crateshape.core.merge import combine_shapes
from crateshape.core.shape import EdgeKey, Shape
from crateshape.models.requests import CombineRequest, RenderRequest, ShapeRequest
from crateshape.models.responses import (
    BoundaryResponse,
    BoundsModel,
    EdgeModel,
    RenderResponse,
    SpriteModel,
)
from crateshape.render.buffer import PixelBuffer
from crateshape.render.config import RenderConfig
from crateshape.render.rasterizer import render_sprites

router = APIRouter(prefix="/shapes")


def _build_shape(req: ShapeRequest) -> Shape:
    overrides = [Edge(o.position, o.direction_enum(), o.kind) for o in req.overrides]
    return Shape(req.offsets, overrides, temperature=req.temperature)


def _edge_model(edge: Edge) -> EdgeModel:
    return EdgeModel(
        position=tuple(edge.position),
        direction=edge.direction.name.lower(),
        kind=edge.kind,
    )


def _key_model(shape: Shape, key: EdgeKey) -> EdgeModel:
    return _edge_model(shape.edge(*key))


def _sprite_model(buffer: PixelBuffer) -> SpriteModel:
    return SpriteModel(
        name=buffer.name,
        width=buffer.width,
        height=buffer.height,
        pivot=buffer.pivot,
        png_base64=buffer.to_png_base64(),
    )


@router.post("/boundary", response_model=BoundaryResponse)
async def boundary(req: ShapeRequest) -> BoundaryResponse:
    shape = _build_shape(req)
    return BoundaryResponse(
        cells=[tuple(o) for o in shape.offsets],
        edges=[_edge_model(e) for e in shape.boundary_edges],
        temperature=shape.temperature,
    )


@router.post("/render", response_model=RenderResponse)
async def render(req: RenderRequest) -> RenderResponse:
    shape = _build_shape(req)
    defaults = RenderConfig.from_settings()
    config = RenderConfig(
        cell_size=req.cell_size if req.cell_size is not None else defaults.cell_size,
        border_size=req.border_size if req.border_size is not None else defaults.border_size,
    )
    sprites = render_sprites(shape, config)
    bounds = sprites.bounds
    return RenderResponse(
        edges=[_edge_model(e) for e in shape.boundary_edges],
        bounds=BoundsModel(
            min=tuple(bounds.min),
            max=tuple(bounds.max),
            size=bounds.size,
            pivot=bounds.pivot,
        ),
        background=_sprite_model(sprites.background),
        borders=_sprite_model(sprites.borders),
        repaired_pixels=sprites.repaired,
        temperature=shape.temperature,
    )


@router.post("/combine", response_model=BoundaryResponse)
async def combine(req: CombineRequest) -> BoundaryResponse:
    parts = [(_build_shape(p.shape), p.placement) for p in req.parts]
    shape, paired = combine_shapes(parts, temperature=req.temperature)
    return BoundaryResponse(
        cells=[tuple(o) for o in shape.offsets],
        edges=[_edge_model(e) for e in shape.boundary_edges],
        temperature=shape.temperature,
        paired=[_key_model(shape, k) for k in paired],
    )
