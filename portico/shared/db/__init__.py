"""
Store Module

Owns the process-wide NetworkStore lifecycle.

Architecture Overview:
======================
┌─────────────────────────────────────────────────────────────────────────────┐
│   FastAPI Route                                                             │
│       │  Dependency Injection: get_store()                                  │
│       ▼                                                                     │
│   Service (ClusterService, ContactService, ...)                             │
│       │                                                                     │
│       ▼                                                                     │
│   NetworkStore  ──►  ClusterRepository / ContactRepository /                │
│                      ConnectionRepository  (in-memory dicts)                │
└─────────────────────────────────────────────────────────────────────────────┘

Usage:
======
    from portico.shared.db import init_store, close_store

    store = init_store()          # at boot
    ...
    close_store(store)            # at shutdown
"""

from portico.config.settings import settings
from portico.shared.core.logging import logger
from portico.shared.db.store import NetworkStore


def init_store(seed_defaults: bool | None = None) -> NetworkStore:
    """
    Create the store for this process.

    Args:
        seed_defaults: Override for settings.SEED_DEFAULT_CLUSTERS
    """
    seed = settings.SEED_DEFAULT_CLUSTERS if seed_defaults is None else seed_defaults
    return NetworkStore(seed_defaults=seed)


def close_store(store: NetworkStore) -> None:
    """Release the store's collections at shutdown."""
    logger.info(
        "Closing network store",
        clusters=store.clusters.count(),
        contacts=store.contacts.count(),
        connections=store.connections.count(),
    )
    store.clusters.clear()
    store.contacts.clear()
    store.connections.clear()


__all__ = [
    "NetworkStore",
    "init_store",
    "close_store",
]
