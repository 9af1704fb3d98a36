"""
Connection Repository

In-memory operations for connections (typed edges between entities).

Common Operations:
==================
- create_membership()   → cluster→contact edge for a contact
- delete_touching()     → Drop every edge with an endpoint on an entity
- delete_membership()   → Drop the cluster→contact edge of one pair
"""

from portico.shared.models.connection import Connection
from portico.shared.models.enums import EndpointType
from portico.shared.repositories.base import BaseRepository


class ConnectionRepository(BaseRepository[Connection]):
    """Repository for Connection records."""

    def __init__(self) -> None:
        super().__init__(Connection)

    def create_membership(self, cluster_id: int, contact_id: int) -> Connection:
        """Create the cluster→contact edge that mirrors a contact's cluster."""
        return self.create(
            source_id=str(cluster_id),
            target_id=str(contact_id),
            source_type=EndpointType.CLUSTER,
            target_type=EndpointType.CONTACT,
        )

    def delete_touching(self, endpoint_type: EndpointType, endpoint_id: int) -> list[Connection]:
        """Remove and return every connection touching the given entity."""
        return self.delete_where(lambda conn: conn.touches(endpoint_type, endpoint_id))

    def delete_membership(self, cluster_id: int, contact_id: int) -> list[Connection]:
        """Remove the cluster→contact edge(s) between ``cluster_id`` and ``contact_id``."""
        return self.delete_where(lambda conn: conn.is_membership_of(contact_id, cluster_id))
