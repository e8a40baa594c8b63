"""Serverless entrypoint: only `POST /api/generate`, no static files or health check."""

from __future__ import annotations

from fastapi import FastAPI

from app.api.errors import register_error_handlers
from app.api.routes import router
from app.config import configure_logging, get_settings

app = FastAPI(title="Genre Generator (serverless)", version="1.0.0", docs_url=None, redoc_url=None)
register_error_handlers(app)
app.include_router(router)


@app.on_event("startup")
def _configure_logging() -> None:
    configure_logging(get_settings().log_level)
