"""
Network Store

The single authority over cluster, contact and connection state, plus the
derived network projection.

Lifecycle:
==========
1. Created once at process start (see init_store()) and injected into the
   API layer through app.state.
2. Lives for the duration of the process; nothing is persisted across
   restarts.
3. Dropped by close_store() on shutdown.

Contract:
=========
- Never raises for well-typed input. Unknown ids are reported with
  ``None`` (reads/updates) or ``False`` (deletes).
- Does not validate references: create_contact() trusts that ``cluster_id``
  exists. The service layer checks this before calling.
- Every public method completes synchronously, so a cascade is never
  observable half-done by another request.

Cascades:
=========
    delete_cluster(c) ─► contacts with cluster_id == c
                     └─► connections touching c or any of those contacts
    delete_contact(p) ─► connections touching p
    update_contact(p, cluster_id=new) ─► membership edge old→p replaced by new→p
"""

from typing import Any, Optional

from portico.shared.core.logging import get_logger
from portico.shared.models.cluster import Cluster
from portico.shared.models.connection import Connection
from portico.shared.models.contact import Contact, NULLABLE_TEXT_FIELDS
from portico.shared.models.enums import EndpointType, NodeType
from portico.shared.models.network import (
    HUB_NODE_COLOR,
    HUB_NODE_ID,
    HUB_NODE_NAME,
    NetworkData,
    NetworkLink,
    NetworkNode,
    cluster_node_id,
    contact_node_id,
)
from portico.shared.repositories import (
    ClusterRepository,
    ConnectionRepository,
    ContactRepository,
)

logger = get_logger("portico.store")


# Collection fields copied (not shared) onto stored contacts
_COLLECTION_DEFAULTS: dict[str, type] = {
    "emails": list,
    "phones": list,
    "social_links": dict,
    "tags": list,
    "address": dict,
    "communication_preferences": dict,
    "custom_fields": list,
}


def _normalize_contact_fields(data: dict[str, Any]) -> dict[str, Any]:
    """Blank optional strings become None; collections are copied."""
    normalized = dict(data)
    for name in NULLABLE_TEXT_FIELDS:
        if name in normalized and not normalized[name]:
            normalized[name] = None
    for name, factory in _COLLECTION_DEFAULTS.items():
        if name in normalized:
            value = normalized[name]
            normalized[name] = factory() if value is None else factory(value)
    return normalized


class NetworkStore:
    """
    In-memory relational store for the contact network.

    Attributes:
        clusters: Cluster records
        contacts: Contact records
        connections: Connection records
    """

    def __init__(self, seed_defaults: bool = True) -> None:
        self.clusters = ClusterRepository()
        self.contacts = ContactRepository()
        self.connections = ConnectionRepository()
        seeded = self.clusters.seed_defaults() if seed_defaults else 0
        if not seed_defaults:
            # User-created clusters start after the reserved default ids
            self.clusters.next_id = 5
        logger.info("Network store initialized", seeded_clusters=seeded)

    # ═══════════════════════════════════════════════════════════════════════════
    # CLUSTERS
    # ═══════════════════════════════════════════════════════════════════════════

    def get_clusters(self) -> list[Cluster]:
        return self.clusters.list()

    def get_cluster(self, cluster_id: int) -> Optional[Cluster]:
        return self.clusters.get(cluster_id)

    def find_cluster_by_name(self, name: str, exclude_id: Optional[int] = None) -> Optional[Cluster]:
        return self.clusters.get_by_name(name, exclude_id=exclude_id)

    def create_cluster(self, data: dict[str, Any]) -> Cluster:
        """
        Store a new cluster under the next id.

        Duplicate names are accepted here; uniqueness is a service rule.
        """
        cluster = self.clusters.create(name=data["name"], color=data["color"])
        logger.info(
            "Cluster created",
            cluster_id=cluster.id,
            name=cluster.name,
            cluster_count=self.clusters.count(),
        )
        return cluster

    def update_cluster(self, cluster_id: int, changes: dict[str, Any]) -> Optional[Cluster]:
        cluster = self.clusters.update(cluster_id, **changes)
        if cluster is not None:
            logger.info("Cluster updated", cluster_id=cluster_id, fields=sorted(changes))
        return cluster

    def delete_cluster(self, cluster_id: int) -> bool:
        """
        Delete a cluster with its contacts and every connection touching
        either of them.

        Returns:
            True if the cluster existed
        """
        removed_contacts = self.contacts.delete_by_cluster(cluster_id)
        removed_connections = 0
        for contact in removed_contacts:
            removed_connections += len(
                self.connections.delete_touching(EndpointType.CONTACT, contact.id)
            )
        removed_connections += len(
            self.connections.delete_touching(EndpointType.CLUSTER, cluster_id)
        )
        existed = self.clusters.delete(cluster_id)
        logger.info(
            "Cluster deleted",
            cluster_id=cluster_id,
            existed=existed,
            removed_contacts=len(removed_contacts),
            removed_connections=removed_connections,
        )
        return existed

    # ═══════════════════════════════════════════════════════════════════════════
    # CONTACTS
    # ═══════════════════════════════════════════════════════════════════════════

    def get_contacts(self) -> list[Contact]:
        return self.contacts.list()

    def get_contact(self, contact_id: int) -> Optional[Contact]:
        return self.contacts.get(contact_id)

    def get_contacts_by_cluster(self, cluster_id: int) -> list[Contact]:
        return self.contacts.get_by_cluster(cluster_id)

    def create_contact(self, data: dict[str, Any]) -> Contact:
        """
        Store a new contact and its cluster→contact membership edge.

        Optional collections default to empty collections; blank optional
        strings are stored as None.
        """
        fields = _normalize_contact_fields(data)
        contact = self.contacts.create(**fields)
        self.connections.create_membership(contact.cluster_id, contact.id)
        logger.info("Contact created", contact_id=contact.id, cluster_id=contact.cluster_id)
        return contact

    def update_contact(self, contact_id: int, changes: dict[str, Any]) -> Optional[Contact]:
        """
        Merge ``changes`` into a contact. A changed cluster_id moves the
        membership edge to the new cluster.
        """
        existing = self.contacts.get(contact_id)
        if existing is None:
            return None

        fields = _normalize_contact_fields(changes)
        new_cluster_id = fields.get("cluster_id")
        if new_cluster_id is not None and new_cluster_id != existing.cluster_id:
            self.connections.delete_membership(existing.cluster_id, contact_id)
            self.connections.create_membership(new_cluster_id, contact_id)
            logger.info(
                "Contact moved",
                contact_id=contact_id,
                from_cluster=existing.cluster_id,
                to_cluster=new_cluster_id,
            )
        elif "cluster_id" in fields and new_cluster_id is None:
            del fields["cluster_id"]

        return self.contacts.update(contact_id, **fields)

    def delete_contact(self, contact_id: int) -> bool:
        removed = self.connections.delete_touching(EndpointType.CONTACT, contact_id)
        existed = self.contacts.delete(contact_id)
        logger.info(
            "Contact deleted",
            contact_id=contact_id,
            existed=existed,
            removed_connections=len(removed),
        )
        return existed

    # ═══════════════════════════════════════════════════════════════════════════
    # CONNECTIONS
    # ═══════════════════════════════════════════════════════════════════════════

    def get_connections(self) -> list[Connection]:
        return self.connections.list()

    def get_connection(self, connection_id: int) -> Optional[Connection]:
        return self.connections.get(connection_id)

    def create_connection(self, data: dict[str, Any]) -> Connection:
        connection = self.connections.create(
            source_id=data["source_id"],
            target_id=data["target_id"],
            source_type=EndpointType(data["source_type"]),
            target_type=EndpointType(data["target_type"]),
        )
        logger.info("Connection created", connection_id=connection.id)
        return connection

    def delete_connection(self, connection_id: int) -> bool:
        return self.connections.delete(connection_id)

    # ═══════════════════════════════════════════════════════════════════════════
    # NETWORK PROJECTION
    # ═══════════════════════════════════════════════════════════════════════════

    def get_network_data(self) -> NetworkData:
        """
        Assemble the hub/cluster/contact projection from current state.

        Pure with respect to the store: the same collections always give
        the same nodes and links, in id order. Contact links come before
        hub links.
        """
        clusters = self.get_clusters()
        contacts = self.get_contacts()

        nodes: list[NetworkNode] = [
            NetworkNode(
                id=HUB_NODE_ID,
                type=NodeType.CLUSTER,
                name=HUB_NODE_NAME,
                color=HUB_NODE_COLOR,
            )
        ]
        nodes.extend(
            NetworkNode(
                id=cluster_node_id(cluster.id),
                type=NodeType.CLUSTER,
                name=cluster.name,
                color=cluster.color,
                original_id=cluster.id,
            )
            for cluster in clusters
        )
        nodes.extend(self._contact_node(contact) for contact in contacts)

        links: list[NetworkLink] = [
            NetworkLink(
                id=f"link-cluster-contact-{contact.id}",
                source=cluster_node_id(contact.cluster_id),
                target=contact_node_id(contact.id),
                source_type=NodeType.CLUSTER,
                target_type=NodeType.CONTACT,
            )
            for contact in contacts
        ]
        links.extend(
            NetworkLink(
                id=f"link-portico-cluster-{cluster.id}",
                source=HUB_NODE_ID,
                target=cluster_node_id(cluster.id),
                source_type=NodeType.CLUSTER,
                target_type=NodeType.CLUSTER,
            )
            for cluster in clusters
        )

        logger.debug(
            "Network projection built",
            clusters=len(clusters),
            contacts=len(contacts),
        )
        return NetworkData(nodes=nodes, links=links)

    @staticmethod
    def _contact_node(contact: Contact) -> NetworkNode:
        record = contact.to_dict()
        record.pop("id")
        return NetworkNode(
            id=contact_node_id(contact.id),
            type=NodeType.CONTACT,
            original_id=contact.id,
            **record,
        )
