"""
Service Dependencies

FastAPI dependencies for service injection.

Services are created per-request, which is fine because:
- Services are stateless (only hold a store reference)
- Every request sees the same NetworkStore instance

Usage:
======
    from portico.api.dependencies.services import get_cluster_service

    @router.post("")
    async def create_cluster(
        payload: ClusterCreate,
        cluster_service: ClusterService = Depends(get_cluster_service),
    ):
        return cluster_service.create_cluster(payload)
"""

from fastapi import Depends

from portico.api.dependencies.store import get_store
from portico.config.settings import settings
from portico.shared.db.store import NetworkStore
from portico.shared.services.cluster_service import ClusterService
from portico.shared.services.connection_service import ConnectionService
from portico.shared.services.contact_service import ContactService
from portico.shared.services.network_service import NetworkService


async def get_cluster_service(
    store: NetworkStore = Depends(get_store),
) -> ClusterService:
    """
    Dependency to get ClusterService instance.

    The duplicate-name rule follows settings.ENFORCE_UNIQUE_CLUSTER_NAMES.
    """
    return ClusterService(store, enforce_unique_names=settings.ENFORCE_UNIQUE_CLUSTER_NAMES)


async def get_contact_service(
    store: NetworkStore = Depends(get_store),
) -> ContactService:
    """
    Dependency to get ContactService instance.
    """
    return ContactService(store)


async def get_connection_service(
    store: NetworkStore = Depends(get_store),
) -> ConnectionService:
    """
    Dependency to get ConnectionService instance.
    """
    return ConnectionService(store)


async def get_network_service(
    store: NetworkStore = Depends(get_store),
) -> NetworkService:
    """
    Dependency to get NetworkService instance.
    """
    return NetworkService(store)
