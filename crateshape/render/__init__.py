"""Sprite rendering: bounds, fill/outline rasterization and corner repair."""

from crateshape.render.bounds import Bounds, compute_bounds
from crateshape.render.buffer import FOREGROUND, PixelBuffer
from crateshape.render.config import RenderConfig
from crateshape.render.corner_repair import find_corner_gaps, repair_inner_corners
from crateshape.render.rasterizer import SpriteSet, rasterize_fill, rasterize_outline, render_sprites

__all__ = [
    "Bounds",
    "compute_bounds",
    "FOREGROUND",
    "PixelBuffer",
    "RenderConfig",
    "find_corner_gaps",
    "repair_inner_corners",
    "SpriteSet",
    "rasterize_fill",
    "rasterize_outline",
    "render_sprites",
]
