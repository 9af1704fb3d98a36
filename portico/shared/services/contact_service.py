"""
Contact service.
Business logic for contact operations.

The store trusts cluster references; this service checks that a
contact's clusterId resolves before any create or update reaches it.
"""

from typing import List, Optional

from ..core.exceptions import ContactNotFoundError, ValidationError
from ..db.store import NetworkStore
from ..models.contact import Contact
from ..schemas.contact import ContactCreate, ContactUpdate


class ContactService:
    """Service for contact-related business logic."""

    def __init__(self, store: NetworkStore):
        self.store = store

    def list_contacts(self, cluster_id: Optional[int] = None) -> List[Contact]:
        """
        List contacts, optionally only those of one cluster.

        Args:
            cluster_id: Filter by owning cluster
        """
        if cluster_id is not None:
            return self.store.get_contacts_by_cluster(cluster_id)
        return self.store.get_contacts()

    def get_contact(self, contact_id: int) -> Contact:
        contact = self.store.get_contact(contact_id)
        if contact is None:
            raise ContactNotFoundError(contact_id)
        return contact

    def create_contact(self, payload: ContactCreate) -> Contact:
        """
        Create a contact in an existing cluster.

        Raises:
            ValidationError: If clusterId does not reference a cluster
        """
        self._ensure_cluster_exists(payload.cluster_id)
        return self.store.create_contact(payload.store_fields())

    def update_contact(self, contact_id: int, payload: ContactUpdate) -> Contact:
        """
        Merge the sent fields into a contact.

        Raises:
            ValidationError: If a new clusterId does not reference a cluster
            ContactNotFoundError: If the contact does not exist
        """
        if payload.cluster_id is not None:
            self._ensure_cluster_exists(payload.cluster_id)
        contact = self.store.update_contact(contact_id, payload.store_fields(partial=True))
        if contact is None:
            raise ContactNotFoundError(contact_id)
        return contact

    def delete_contact(self, contact_id: int) -> None:
        if not self.store.delete_contact(contact_id):
            raise ContactNotFoundError(contact_id)

    def _ensure_cluster_exists(self, cluster_id: int) -> None:
        if self.store.get_cluster(cluster_id) is None:
            raise ValidationError(
                "Specified cluster does not exist",
                details={"clusterId": cluster_id},
            )
