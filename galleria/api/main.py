"""FastAPI application factory."""

from __future__ import annotations
import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles

from galleria.config import Settings, configure_logging, load_settings
from galleria.errors import (
    CompositingError, GalleriaError, ImageDecodeError, MissingInputError,
    UpstreamFetchError,
)
from galleria.services.composite_service import CompositeService
from galleria.api.routes import health_router, router

logger = logging.getLogger(__name__)

ERROR_STATUS: list[tuple[type[GalleriaError], int]] = [
    (MissingInputError, 400),
    (ImageDecodeError, 422),
    (UpstreamFetchError, 502),
    (CompositingError, 500),
]


async def _galleria_error(_request: Request, exc: Exception) -> JSONResponse:
    status = 500
    for exc_type, code in ERROR_STATUS:
        if isinstance(exc, exc_type):
            status = code
            break
    return JSONResponse(status_code=status, content={"error": str(exc)})


def create_app(
    settings: Settings | None = None,
    service: CompositeService | None = None,
) -> FastAPI:
    if settings is None:
        settings = load_settings()
    configure_logging(settings.log_level)
    settings.ensure_dirs()

    app = FastAPI(
        title="Galleria Studio Compositor",
        description="Frames artwork and composites it into environment mockups",
        version="0.1.0",
    )

    # CORS — allow the studio client
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[settings.client_url],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.state.settings = settings
    app.state.composite_service = service or CompositeService(settings)

    app.add_exception_handler(GalleriaError, _galleria_error)

    app.include_router(router, prefix="/api")
    app.include_router(health_router)
    app.mount(
        settings.output_url_prefix,
        StaticFiles(directory=settings.output_dir),
        name="outputs",
    )

    logger.info("output directory %s, scratch directory %s",
                settings.output_dir, settings.upload_dir)
    return app
