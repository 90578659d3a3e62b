"""
Exception handlers - map domain errors to HTTP status codes.
Challenge: One consistent error body ({"error": message}) for every failure.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from shareit.core.exceptions import (
    ConflictError,
    ForbiddenError,
    NotFoundError,
    ShareItError,
    UnavailableError,
    ValidationError,
)

logger = logging.getLogger(__name__)

STATUS_BY_ERROR: dict[type[ShareItError], int] = {
    NotFoundError: status.HTTP_404_NOT_FOUND,
    ForbiddenError: status.HTTP_403_FORBIDDEN,
    ConflictError: status.HTTP_409_CONFLICT,
    UnavailableError: status.HTTP_400_BAD_REQUEST,
    ValidationError: status.HTTP_400_BAD_REQUEST,
}


def error_body(message: str) -> dict[str, str]:
    return {"error": message}


def describe_validation_error(exc: RequestValidationError) -> str:
    """First failing field as 'location: message'."""
    errors = exc.errors()
    if not errors:
        return "Validation failed"
    first = errors[0]
    location = ".".join(str(part) for part in first.get("loc", ()))
    return f"{location}: {first.get('msg', 'invalid value')}"


async def handle_domain_error(request: Request, exc: ShareItError) -> JSONResponse:
    status_code = STATUS_BY_ERROR.get(type(exc), status.HTTP_500_INTERNAL_SERVER_ERROR)
    logger.warning("%s %s -> %s %s: %s", request.method, request.url.path, status_code,
                   type(exc).__name__, exc.message)
    return JSONResponse(status_code=status_code, content=error_body(exc.message))


async def handle_request_validation(request: Request, exc: RequestValidationError) -> JSONResponse:
    message = describe_validation_error(exc)
    logger.warning("%s %s -> 400 invalid request: %s", request.method, request.url.path, message)
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=error_body(message))


async def handle_unexpected(request: Request, exc: Exception) -> JSONResponse:
    logger.error("%s %s -> 500: %s", request.method, request.url.path, exc, exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=error_body("Internal server error"),
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ShareItError, handle_domain_error)
    app.add_exception_handler(RequestValidationError, handle_request_validation)
    app.add_exception_handler(Exception, handle_unexpected)
