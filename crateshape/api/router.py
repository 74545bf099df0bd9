"""Master API router — mounts all endpoint routers."""

from __future__ import annotations

from fastapi import APIRouter

from crateshape.api import health, shapes

api_router = APIRouter(prefix="/api")

api_router.include_router(health.router)
api_router.include_router(shapes.router)
