"""FastAPI app factory."""

from __future__ import annotations

import logging

from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from crateshape import __version__
from crateshape.config import settings
from crateshape.core.errors import CrateShapeError

load_dotenv()

logging.basicConfig(
    level=getattr(logging, settings.crateshape_log_level.upper(), logging.DEBUG),
    format="%(asctime)s %(name)s %(levelname)s %(message)s",
)

logger = logging.getLogger(__name__)


async def _crate_shape_error(request: Request, exc: CrateShapeError) -> JSONResponse:
    logger.warning("Rejected %s %s: %s", request.method, request.url.path, exc)
    return JSONResponse(
        status_code=422,
        content={"detail": str(exc), "error": type(exc).__name__},
    )


def create_app() -> FastAPI:
    app = FastAPI(
        title="crateshape",
        description="Boundary classification and sprite rasterization for grid crates",
        version=__version__,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(CrateShapeError, _crate_shape_error)

    from crateshape.api.router import api_router

    app.include_router(api_router)

    return app


app = create_app()
