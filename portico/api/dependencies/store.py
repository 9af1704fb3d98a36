"""
Store Dependency

FastAPI dependency for the process-wide NetworkStore.

The store is created by the application factory and attached to
``app.state.store``; handlers receive it through this dependency rather
than importing a module-level singleton.

Usage:
======
    from portico.api.dependencies.store import StoreDep

    @router.get("/clusters")
    async def list_clusters(store: StoreDep):
        return store.get_clusters()
"""

from typing import Annotated

from fastapi import Depends, Request

from portico.shared.db.store import NetworkStore


def get_store(request: Request) -> NetworkStore:
    """
    FastAPI dependency returning the application's NetworkStore.

    Returns:
        NetworkStore: The store created at application startup
    """
    return request.app.state.store


# Type alias for cleaner route signatures
StoreDep = Annotated[NetworkStore, Depends(get_store)]
