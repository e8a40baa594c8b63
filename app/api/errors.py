"""Map failures onto the `{"ok": false, "error": ...}` envelope."""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.domain.errors import GenreGenerationError

logger = logging.getLogger(__name__)

SERVER_ERROR_MESSAGE = "Server error"


def error_response(status_code: int, message: str, headers: dict[str, str] | None = None) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"ok": False, "error": message or SERVER_ERROR_MESSAGE},
        headers=headers,
    )


async def handle_generation_error(request: Request, exc: GenreGenerationError) -> JSONResponse:
    # Wrapped exceptions carry their traceback in __cause__.
    logger.error(
        "%s %s failed (%s): %s",
        request.method,
        request.url.path,
        exc.status_code,
        exc,
        exc_info=exc.__cause__,
    )
    return error_response(exc.status_code, str(exc))


async def handle_http_error(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    message = "Method not allowed" if exc.status_code == 405 else str(exc.detail)
    return error_response(exc.status_code, message, headers=getattr(exc, "headers", None))


async def handle_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    problems = "; ".join(
        f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}" for error in exc.errors()
    )
    return error_response(422, f"Invalid request body ({problems})")


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(GenreGenerationError, handle_generation_error)
    app.add_exception_handler(StarletteHTTPException, handle_http_error)
    app.add_exception_handler(RequestValidationError, handle_validation_error)
