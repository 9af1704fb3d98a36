"""
Network Projection Model

Derived, never stored. Assembled on demand from the cluster, contact and
connection collections by NetworkStore.get_network_data().

Shape:
======
    portico ──► cluster-1 ──► contact-3
            └─► cluster-2 ──► contact-4
                          └─► contact-7

- One hub node (id "portico") that is always present.
- One node per cluster ("cluster-{id}") and per contact ("contact-{id}"),
  each carrying ``original_id`` for back-reference.
- One link hub→cluster per cluster and one cluster→contact per contact.
"""

from dataclasses import dataclass, field
from typing import Any, Optional

from portico.shared.models.enums import NodeType


HUB_NODE_ID = "portico"
HUB_NODE_NAME = "Portico"
HUB_NODE_COLOR = "rgba(255, 144, 104, 0.6)"


def cluster_node_id(cluster_id: int) -> str:
    return f"cluster-{cluster_id}"


def contact_node_id(contact_id: int) -> str:
    return f"contact-{contact_id}"


@dataclass
class NetworkNode:
    """A node of the projection; contact nodes carry the extended contact fields."""

    id: str
    type: NodeType
    name: str
    color: Optional[str] = None
    original_id: Optional[int] = None
    role: Optional[str] = None
    cluster_id: Optional[int] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    notes: Optional[str] = None
    company: Optional[str] = None
    department: Optional[str] = None
    emails: Optional[list[str]] = None
    phones: Optional[list[str]] = None
    social_links: Optional[dict[str, str]] = None
    tags: Optional[list[str]] = None
    address: Optional[dict[str, str]] = None
    first_contact: Optional[str] = None
    last_contact: Optional[str] = None
    next_follow_up: Optional[str] = None
    relationship_status: Optional[str] = None
    relationship_strength: Optional[int] = None
    profile_image: Optional[str] = None
    communication_preferences: Optional[dict[str, Any]] = None
    custom_fields: Optional[list[str]] = None


@dataclass
class NetworkLink:
    """Directed edge of the projection."""

    id: str
    source: str
    target: str
    source_type: NodeType
    target_type: NodeType


@dataclass
class NetworkData:
    """The full projection: nodes and links."""

    nodes: list[NetworkNode] = field(default_factory=list)
    links: list[NetworkLink] = field(default_factory=list)
