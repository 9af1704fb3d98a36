"""
Repository Pattern Implementations

Repositories encapsulate access to the in-memory record collections and
provide a clean API for the store and services.

Repository Hierarchy:
=====================
    BaseRepository[ModelType]           ← Generic CRUD operations
         │
         ├── ClusterRepository          ← Seeding, name lookups
         ├── ContactRepository          ← Per-cluster queries
         └── ConnectionRepository       ← Membership edges, endpoint cleanup

Usage Example:
==============
    from portico.shared.repositories import ClusterRepository

    clusters = ClusterRepository()
    clusters.seed_defaults()
    sales = clusters.create(name="Sales", color="rgba(1, 2, 3, 0.4)")
"""

from portico.shared.repositories.base import BaseRepository
from portico.shared.repositories.cluster_repository import (
    ClusterRepository,
    normalize_cluster_name,
)
from portico.shared.repositories.contact_repository import ContactRepository
from portico.shared.repositories.connection_repository import ConnectionRepository

__all__ = [
    # Base class
    "BaseRepository",
    # Entity-specific repositories
    "ClusterRepository",
    "ContactRepository",
    "ConnectionRepository",
    "normalize_cluster_name",
]
