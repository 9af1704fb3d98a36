"""
API Dependencies

FastAPI dependencies for injection into route handlers.

Dependencies:
=============
- Store: get_store(), StoreDep
- Services: get_*_service() functions

Usage:
======
    from portico.api.dependencies import StoreDep

    @router.get("/network")
    async def network(store: StoreDep):
        return store.get_network_data()
"""

from portico.api.dependencies.store import (
    get_store,
    StoreDep,
)
from portico.api.dependencies.services import (
    get_cluster_service,
    get_contact_service,
    get_connection_service,
    get_network_service,
)

__all__ = [
    # Store
    "get_store",
    "StoreDep",
    # Services
    "get_cluster_service",
    "get_contact_service",
    "get_connection_service",
    "get_network_service",
]
