"""Error Handlers — global exception handlers mapping failures to {"msg": ...} bodies.

Invariants:
    - ReviewsApiError → its own http_status and to_response()
    - RequestValidationError (bad path param, bad body) → 400 "Invalid input"
    - Unmatched route → 404 "Path Not Found"; other framework HTTP errors keep their status
    - Exception (catch-all) → 500, never leaks internal details

Design Decisions:
    - Four-layer handler: domain, validation, framework HTTP, catch-all
    - Kept out of main.py so tests can build an app with the same handlers
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from game_reviews.core.errors import (
    INTERNAL_ERROR_MESSAGE,
    InvalidInputError,
    ReviewsApiError,
    RouteNotFoundError,
)

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_domain_error_handler(app)
    _register_validation_error_handler(app)
    _register_http_error_handler(app)
    _register_generic_error_handler(app)


def _register_domain_error_handler(app: FastAPI) -> None:

    @app.exception_handler(ReviewsApiError)
    async def domain_error_handler(request: Request, exc: ReviewsApiError):
        """Handle all domain/infrastructure errors."""
        log = logger.error if exc.http_status >= 500 else logger.warning
        log(
            f"{type(exc).__name__}: {exc.message}",
            extra={
                "error_code": exc.code,
                "path": request.url.path,
                "method": request.method,
                "status_code": exc.http_status,
            },
        )
        return _error_response(exc)


def _register_validation_error_handler(app: FastAPI) -> None:

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        """Handle Pydantic validation errors on path, query and body."""
        logger.warning(
            f"Validation error on {request.url.path}: {exc.errors()}",
            extra={"error_code": "INVALID_INPUT", "path": request.url.path},
        )
        return _error_response(InvalidInputError(_first_field(exc)))


def _register_http_error_handler(app: FastAPI) -> None:

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(
        request: Request, exc: StarletteHTTPException,
    ):
        """Handle router-level HTTP errors (unmatched path, wrong method)."""
        if exc.status_code == status.HTTP_404_NOT_FOUND:
            logger.info(
                f"No route for {request.method} {request.url.path}",
                extra={"error_code": "ROUTE_NOT_FOUND", "path": request.url.path},
            )
            return _error_response(RouteNotFoundError())
        return JSONResponse(
            status_code=exc.status_code,
            content={"msg": exc.detail},
            headers=getattr(exc, "headers", None),
        )


def _register_generic_error_handler(app: FastAPI) -> None:

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all. Never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
            extra={"error_code": "INTERNAL_ERROR", "path": request.url.path},
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"msg": INTERNAL_ERROR_MESSAGE},
        )


def _error_response(exc: ReviewsApiError) -> JSONResponse:
    return JSONResponse(status_code=exc.http_status, content=exc.to_response())


def _first_field(exc: RequestValidationError) -> str | None:
    errors = exc.errors()
    if not errors:
        return None
    return ".".join(str(loc) for loc in errors[0]["loc"])
