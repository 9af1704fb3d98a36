"""
Contact Repository

In-memory operations for contacts.

Common Operations:
==================
- get_by_cluster()     → Contacts assigned to one cluster
- delete_by_cluster()  → Drop every contact of a cluster (cascade helper)
"""

from portico.shared.models.contact import Contact
from portico.shared.repositories.base import BaseRepository


class ContactRepository(BaseRepository[Contact]):
    """Repository for Contact records."""

    def __init__(self) -> None:
        super().__init__(Contact)

    def get_by_cluster(self, cluster_id: int) -> list[Contact]:
        """Contacts whose cluster_id equals ``cluster_id``, in id order."""
        return self.list(filters={"cluster_id": cluster_id})

    def delete_by_cluster(self, cluster_id: int) -> list[Contact]:
        """Remove and return every contact assigned to ``cluster_id``."""
        return self.delete_where(lambda contact: contact.cluster_id == cluster_id)
