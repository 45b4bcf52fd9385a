"""
Error types and their mapping to HTTP responses.

Validation failures become 400 responses carrying a list of
ValidationErrorRecord. A handler that returns None in spite of a non_null
contract, and any uncaught exception, become 500.
"""

import functools
from typing import Any, Awaitable, Callable

import structlog
from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from bookshelf.api.schemas.books import ErrorResponse, ValidationErrorRecord, violations_from
from bookshelf.config import get_settings

logger = structlog.get_logger(__name__)


class BookValidationError(Exception):
    """A book failed its field constraints."""

    def __init__(self, violations: list[ValidationErrorRecord]) -> None:
        super().__init__(f"{len(violations)} constraint violation(s)")
        self.violations = violations


class NullResultError(Exception):
    """A handler declared to never return None returned None."""

    def __init__(self, message: str, path: str) -> None:
        super().__init__(message)
        self.message = message
        self.path = path


def non_null(message: str = "Return NULL not allowed"):
    """Post-condition for async handlers: a None result raises NullResultError."""

    def decorator(func: Callable[..., Awaitable[Any]]):
        @functools.wraps(func)
        async def wrapper(*args, **kwargs):
            result = await func(*args, **kwargs)
            if result is None:
                raise NullResultError(message, path=f"{func.__name__}.<return value>")
            return result

        return wrapper

    return decorator


def _violations_response(status_code: int, violations: list[ValidationErrorRecord]) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=jsonable_encoder([v.model_dump() for v in violations]),
    )


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Reject malformed bodies, path and query parameters with 400."""
    violations = violations_from(list(exc.errors()))
    logger.debug("Request validation failed", path=request.url.path, violations=len(violations))
    return _violations_response(status.HTTP_400_BAD_REQUEST, violations)


async def book_validation_handler(request: Request, exc: BookValidationError) -> JSONResponse:
    logger.debug("Book validation failed", path=request.url.path, violations=len(exc.violations))
    return _violations_response(status.HTTP_400_BAD_REQUEST, exc.violations)


async def null_result_handler(request: Request, exc: NullResultError) -> JSONResponse:
    logger.error("Handler returned null", path=request.url.path, handler=exc.path)
    return _violations_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        [ValidationErrorRecord(message=exc.message, path=exc.path, type="not_null")],
    )


async def general_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle uncaught exceptions."""
    logger.error("Unhandled exception", error=str(exc), path=request.url.path, exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=ErrorResponse(
            error="Internal server error",
            detail=str(exc) if get_settings().debug else None,
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        ).model_dump(),
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(BookValidationError, book_validation_handler)
    app.add_exception_handler(NullResultError, null_result_handler)
    app.add_exception_handler(Exception, general_exception_handler)
