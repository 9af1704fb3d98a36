"""
Route Registration

Centralizes all route registration for the FastAPI application.

Route Hierarchy:
================
    /health, /ready, /live  → Health check endpoints
    /api/clusters           → Cluster CRUD
    /api/contacts           → Contact CRUD
    /api/connections        → Manual connections
    /api/network            → Derived network projection

The ``/api`` prefix comes from settings.API_PREFIX.

Usage:
======
    from portico.api.routes import register_routes

    app = FastAPI()
    register_routes(app)
"""

from fastapi import FastAPI

from portico.api.handlers import (
    cluster_handler,
    connection_handler,
    contact_handler,
    health_handler,
    network_handler,
)
from portico.config.settings import settings
from portico.shared.schemas.common import ErrorResponse


ERROR_RESPONSES = {
    400: {"model": ErrorResponse, "description": "Validation error"},
    404: {"model": ErrorResponse, "description": "Resource not found"},
}


def register_routes(app: FastAPI) -> None:
    """
    Register all API routes.

    Args:
        app: FastAPI application instance
    """
    prefix = settings.API_PREFIX

    # Health check endpoints (no prefix, root level)
    app.include_router(
        health_handler.router,
        tags=["Health"],
    )

    # Cluster endpoints
    app.include_router(
        cluster_handler.router,
        prefix=f"{prefix}/clusters",
        tags=["Clusters"],
        responses={**ERROR_RESPONSES, 409: {"model": ErrorResponse, "description": "Duplicate cluster name"}},
    )

    # Contact endpoints
    app.include_router(
        contact_handler.router,
        prefix=f"{prefix}/contacts",
        tags=["Contacts"],
        responses=ERROR_RESPONSES,
    )

    # Connection endpoints
    app.include_router(
        connection_handler.router,
        prefix=f"{prefix}/connections",
        tags=["Connections"],
        responses=ERROR_RESPONSES,
    )

    # Network projection
    app.include_router(
        network_handler.router,
        prefix=f"{prefix}/network",
        tags=["Network"],
    )
