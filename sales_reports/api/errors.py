"""
Error envelope: every failure is returned as ``{"message": ..., "error"?: ...}``.
"""
from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)


class ServerError(Exception):
    """Store or network failure surfaced to the caller as a 500."""

    def __init__(self, message: str, error: Exception) -> None:
        super().__init__(message)
        self.message = message
        self.error = error


async def _http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": exc.detail},
        headers=getattr(exc, "headers", None),
    )


async def _validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    return JSONResponse(
        status_code=400,
        content={"message": "Invalid request", "error": jsonable_encoder(exc.errors())},
    )


async def _server_error_handler(request: Request, exc: ServerError) -> JSONResponse:
    logger.error("%s %s failed: %s", request.method, request.url.path, exc.error, exc_info=exc.error)
    return JSONResponse(
        status_code=500,
        content={"message": exc.message, "error": str(exc.error)},
    )


async def _unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception(
        "%s %s raised %s: %s", request.method, request.url.path, type(exc).__name__, exc, exc_info=exc,
    )
    return JSONResponse(
        status_code=500,
        content={"message": "Internal server error", "error": str(exc)},
    )


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(StarletteHTTPException, _http_exception_handler)
    app.add_exception_handler(RequestValidationError, _validation_exception_handler)
    app.add_exception_handler(ServerError, _server_error_handler)
    app.add_exception_handler(Exception, _unhandled_exception_handler)
