"""
Simple error handling for the application.

Every error leaves the API as ``{"error": "<message>"}``.
"""

import logging
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from .exceptions import (
    ValidationError,
    NotFoundError,
    DatabaseError,
)

logger = logging.getLogger(__name__)


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Render application and framework HTTP errors."""

    if isinstance(exc, DatabaseError):
        # cause was already logged by the store
        logger.error(f"Store failure on {request.method} {request.url.path}: {exc.detail}")
    elif isinstance(exc, (ValidationError, NotFoundError)):
        logger.info(f"Rejected {request.method} {request.url.path}: {exc.detail}")
    else:
        logger.warning(f"HTTP exception: {exc.detail}")

    response = error_response(exc.status_code, str(exc.detail))
    if getattr(exc, "headers", None):
        response.headers.update(exc.headers)
    return response


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Malformed bodies count as invalid input, same as a rule violation."""
    logger.warning(f"Validation error: {exc.errors()}")
    return error_response(400, "Invalid request body")


async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Last-resort handler; never leaks the underlying message."""

    if isinstance(exc, SQLAlchemyError):
        logger.error(f"Database error: {str(exc)}")
        return error_response(500, "Database operation failed")

    logger.error(f"Unexpected error: {str(exc)}", exc_info=True)
    return error_response(500, "An unexpected error occurred")


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(Exception, global_exception_handler)
