"""
Exception handlers.

Translates domain exceptions into JSON error responses. Every error body has
an ``error`` code and a human-readable ``message``; validation errors add an
``errors`` list of ``{msg, param}``.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from shared.exceptions import (
    AuthenticationError,
    BookshelfError,
    ConflictError,
    FieldError,
    InternalError,
    NotFoundError,
    ValidationError,
)

logger = logging.getLogger(__name__)

# Checked in order; the first matching base class wins.
STATUS_BY_ERROR: list[tuple[type[BookshelfError], int]] = [
    (ValidationError, status.HTTP_400_BAD_REQUEST),
    (ConflictError, status.HTTP_400_BAD_REQUEST),
    (AuthenticationError, status.HTTP_401_UNAUTHORIZED),
    (NotFoundError, status.HTTP_404_NOT_FOUND),
]


def status_for(exc: BookshelfError) -> int:
    for error_type, status_code in STATUS_BY_ERROR:
        if isinstance(exc, error_type):
            return status_code
    return status.HTTP_500_INTERNAL_SERVER_ERROR


async def bookshelf_error_handler(request: Request, exc: BookshelfError) -> JSONResponse:
    status_code = status_for(exc)
    headers = None
    if status_code == status.HTTP_401_UNAUTHORIZED:
        headers = {"WWW-Authenticate": "Bearer"}

    if status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
    else:
        logger.debug("%s %s rejected: %s", request.method, request.url.path, exc.code)

    return JSONResponse(status_code=status_code, content=exc.to_dict(), headers=headers)


async def request_validation_handler(
    request: Request,
    exc: RequestValidationError,
) -> JSONResponse:
    """
    Render body parsing failures in the same shape as field rule failures.

    FastAPI would answer 422; clients of this API expect 400.
    """
    errors = []
    for error in exc.errors():
        loc = [str(part) for part in error.get("loc", ()) if part != "body"]
        errors.append(FieldError(msg=error.get("msg", "Invalid value"), param=".".join(loc) or "body"))

    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=ValidationError(errors).to_dict(),
    )


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """
    Last-resort handler for store outages and bugs.

    The exception text is only exposed in the development environment.
    """
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)

    body = InternalError().to_dict()
    if request.app.state.settings.is_development:
        body["detail"] = str(exc)

    return JSONResponse(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content=body)


def register_exception_handlers(app: FastAPI) -> None:
    """Attach all handlers to ``app``."""
    app.add_exception_handler(BookshelfError, bookshelf_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
