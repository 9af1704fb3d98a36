"""
Business Logic Services

Services encapsulate business logic and coordinate between the store
and domain rules.

Service Pattern:
================
    Handler → Service → NetworkStore → Repositories

Services should:
- Contain business logic and validation (reference checks, uniqueness)
- Translate "not found" results from the store into exceptions
- NOT handle HTTP concerns (that's for handlers)

Available Services:
===================
- ClusterService: Cluster CRUD with duplicate-name rule
- ContactService: Contact CRUD with cluster reference checks
- ConnectionService: Manual connection management
- NetworkService: Network projection

Usage:
======
    from portico.shared.services import ClusterService

    service = ClusterService(store)
    cluster = service.create_cluster(ClusterCreate(name="Sales", color="rgba(1,2,3,0.4)"))
"""

from portico.shared.services.cluster_service import ClusterService
from portico.shared.services.contact_service import ContactService
from portico.shared.services.connection_service import ConnectionService
from portico.shared.services.network_service import NetworkService

__all__ = [
    "ClusterService",
    "ContactService",
    "ConnectionService",
    "NetworkService",
]
