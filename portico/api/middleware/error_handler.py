"""
Error Handler Middleware

Global exception handling for the API.

Provides consistent error responses across all endpoints by catching
exceptions and converting them to standardized JSON responses.

Error Response Format:
======================
    {
        "message": "Contact with id '12' not found",
        "code": "NOT_FOUND"
    }

Exception Handling:
===================
1. PorticoException subclasses → Use their status_code and to_dict()
2. Request / pydantic validation errors → 400 with a readable message
3. Other exceptions → 500 with generic message (details hidden)

Usage:
======
    from portico.api.middleware.error_handler import setup_exception_handlers

    app = FastAPI()
    setup_exception_handlers(app)
"""

from typing import Any, Iterable

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from portico.shared.core.exceptions import PorticoException
from portico.shared.core.logging import logger


def format_validation_errors(errors: Iterable[dict[str, Any]]) -> str:
    """
    Turn field-level validation errors into one human-readable message.

    Example:
        'Validation error: Field required at "name"; Input should be less
        than or equal to 5 at "relationshipStrength"'
    """
    parts = []
    for error in errors:
        # Drop the request section ("body", "query", "path") from the location
        location = [str(p) for p in error.get("loc", ()) if p not in ("body", "query", "path")]
        message = error.get("msg", "Invalid value")
        if location:
            parts.append(f'{message} at "{".".join(location)}"')
        else:
            parts.append(message)
    return "Validation error: " + "; ".join(parts)


def _validation_response(request: Request, errors: list[dict[str, Any]]) -> JSONResponse:
    logger.warning(
        "Validation error",
        errors=errors,
        path=request.url.path,
    )
    return JSONResponse(
        status_code=400,
        content={
            "message": format_validation_errors(errors),
            "code": "VALIDATION_ERROR",
            "details": {"errors": jsonable_encoder(errors)},
        },
    )


def setup_exception_handlers(app: FastAPI) -> None:
    """
    Set up global exception handlers.

    Should be called during application initialization to register
    exception handlers for all routes.

    Args:
        app: FastAPI application instance
    """

    @app.exception_handler(PorticoException)
    async def portico_exception_handler(
        request: Request,
        exc: PorticoException,
    ) -> JSONResponse:
        """
        Handle Portico-specific exceptions.

        All custom exceptions inherit from PorticoException and include:
        - status_code: HTTP status code
        - error_code: Machine-readable error code
        - message: Human-readable message
        - details: Additional context
        """
        logger.warning(
            "Application error",
            error_code=exc.error_code,
            message=exc.message,
            status_code=exc.status_code,
            path=request.url.path,
        )
        return JSONResponse(
            status_code=exc.status_code,
            content=exc.to_dict(),
        )

    @app.exception_handler(RequestValidationError)
    async def request_validation_exception_handler(
        request: Request,
        exc: RequestValidationError,
    ) -> JSONResponse:
        """
        Handle request parsing errors (body, query and path parameters).

        FastAPI would answer these with 422; the API contract uses 400.
        """
        return _validation_response(request, list(exc.errors()))

    @app.exception_handler(ValidationError)
    async def validation_exception_handler(
        request: Request,
        exc: ValidationError,
    ) -> JSONResponse:
        """
        Handle Pydantic validation errors raised inside handlers.
        """
        return _validation_response(request, list(exc.errors()))

    @app.exception_handler(Exception)
    async def general_exception_handler(
        request: Request,
        exc: Exception,
    ) -> JSONResponse:
        """
        Handle unexpected exceptions.

        Catches any unhandled exception and returns a generic error.
        Full error details are logged but not exposed to clients.
        """
        logger.error(
            "Unexpected error",
            error=str(exc),
            error_type=type(exc).__name__,
            path=request.url.path,
            exc_info=True,
        )
        return JSONResponse(
            status_code=500,
            content={
                "message": "An unexpected error occurred",
                "code": "INTERNAL_ERROR",
            },
        )
