"""Error classifier: turns any failure raised while handling a request into a JSON response.

Classification order (first match wins):
    1. HTTPException        -> its own status/headers, body {"error": detail}
    2. Validation failure   -> 400 {"error": "Validation Error", "details": [...]}
    3. AppError             -> its status and body
    4. StoreError           -> 409 / 400 / 500 depending on the vendor code
    5. Anything else        -> 500, raw message only in development
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import ValidationError
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from blog_api.core.exceptions import AppError, StoreError, StoreErrorKind

logger = logging.getLogger(__name__)


def _http_exception_response(exc: StarletteHTTPException) -> JSONResponse:
    body = exc.detail if isinstance(exc.detail, dict) else {"error": exc.detail}
    return JSONResponse(status_code=exc.status_code, content=body, headers=getattr(exc, "headers", None))


def _store_error_response(exc: StoreError) -> JSONResponse:
    if exc.kind is StoreErrorKind.UNIQUE_VIOLATION:
        return JSONResponse(
            status_code=status.HTTP_409_CONFLICT,
            content={"error": "Resource already exists"},
        )
    if exc.kind is StoreErrorKind.FOREIGN_KEY_VIOLATION:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"error": "Referenced resource does not exist"},
        )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": "Database error"},
    )


def classify_error(request: Request, exc: Exception) -> JSONResponse:
    """Map a failure to the response sent to the client.

    Args:
        request: Request being handled (gives access to the app settings)
        exc: The raised failure

    Returns:
        JSONResponse: Error envelope with the classified status code
    """
    if isinstance(exc, StarletteHTTPException):
        logger.warning(f"HTTP {exc.status_code} on {request.method} {request.url.path}: {exc.detail}")
        return _http_exception_response(exc)

    if isinstance(exc, (RequestValidationError, ValidationError)):
        details = jsonable_encoder(exc.errors())
        logger.warning(f"Validation error on {request.method} {request.url.path}: {details}")
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"error": "Validation Error", "details": details},
        )

    if isinstance(exc, AppError):
        logger.warning(f"{type(exc).__name__} on {request.method} {request.url.path}: {exc.message}")
        return JSONResponse(status_code=exc.status_code, content=exc.to_body(), headers=exc.headers)

    if isinstance(exc, SQLAlchemyError):
        exc = StoreError.from_exception(exc)

    if isinstance(exc, StoreError):
        logger.error(
            f"Store error ({exc.kind.value}, code={exc.code}) on "
            f"{request.method} {request.url.path}: {exc.message}"
        )
        return _store_error_response(exc)

    logger.error(f"Unhandled exception on {request.method} {request.url.path}: {exc}", exc_info=exc)
    settings = request.app.state.settings
    message = str(exc) if settings.is_development else "Internal Server Error"
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": message},
    )


async def not_found_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Render 404s for paths no route matches."""
    logger.warning(f"No route for {request.method} {request.url.path}")
    return JSONResponse(
        status_code=status.HTTP_404_NOT_FOUND,
        content={
            "error": "Not Found",
            "message": f"The requested path {request.url.path} was not found",
            "method": request.method,
        },
    )


async def _classify_error_handler(request: Request, exc: Exception) -> JSONResponse:
    return classify_error(request, exc)


def register_error_handlers(app: FastAPI) -> None:
    """Route every failure type through the classifier."""
    app.add_exception_handler(404, not_found_handler)
    for exc_class in (
        StarletteHTTPException,
        RequestValidationError,
        ValidationError,
        AppError,
        StoreError,
        SQLAlchemyError,
        Exception,
    ):
        app.add_exception_handler(exc_class, _classify_error_handler)


__all__ = ["classify_error", "not_found_handler", "register_error_handlers"]
