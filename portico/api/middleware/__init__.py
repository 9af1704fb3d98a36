"""
API Middleware

Custom middleware for the FastAPI application.

Components:
===========
- error_handler: Global exception handling

Usage:
======
    from portico.api.middleware import setup_exception_handlers

    app = FastAPI()
    setup_exception_handlers(app)
"""

from portico.api.middleware.error_handler import (
    format_validation_errors,
    setup_exception_handlers,
)

__all__ = [
    "format_validation_errors",
    "setup_exception_handlers",
]
