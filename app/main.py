"""FastAPI application entrypoint for Genre Generator."""

from __future__ import annotations

import logging

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from app.api.errors import register_error_handlers
from app.api.routes import router as api_router
from app.config import Settings, configure_logging, get_settings

logger = logging.getLogger(__name__)


def health() -> dict:
    return {"ok": True}


def create_app(settings: Settings) -> FastAPI:
    app = FastAPI(title="Genre Generator", version="1.0.0")
    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(settings.cors_origins),
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_error_handlers(app)
    app.include_router(api_router)
    app.add_api_route("/api/health", health, methods=["GET"], tags=["GenreGenerator"])

    @app.on_event("startup")
    def _configure_logging() -> None:
        configure_logging(settings.log_level)

    # Mounted after the API routes so they always match first.
    if settings.static_dir.is_dir():
        app.mount("/", StaticFiles(directory=settings.static_dir, html=True), name="static")
    else:
        logger.info("No static directory at %s, serving API only", settings.static_dir)

    return app


settings = get_settings()
app = create_app(settings)


def run() -> None:
    configure_logging(settings.log_level)
    logger.info("Genre Generator listening on :%s", settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    run()
