"""
Health Check Handler

Provides health check endpoints for monitoring and load balancers.
"""

from fastapi import APIRouter

from portico.api.dependencies.store import StoreDep
from portico.config.settings import settings
from portico.shared.schemas.common import HealthResponse


router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health_check():
    """
    Basic health check endpoint.

    Returns:
        HealthResponse with service status
    """
    return HealthResponse(
        status="healthy",
        service=settings.APP_NAME.lower(),
        version=settings.APP_VERSION,
    )


@router.get("/ready")
async def readiness_check(store: StoreDep):
    """
    Readiness check for load balancers.

    Ready once the store has been attached to the application.

    Returns:
        Ready status with collection sizes
    """
    return {
        "status": "ready",
        "clusters": store.clusters.count(),
        "contacts": store.contacts.count(),
        "connections": store.connections.count(),
    }


@router.get("/live")
async def liveness_check():
    """
    Liveness check.

    Returns:
        Simple alive status
    """
    return {"status": "alive"}
