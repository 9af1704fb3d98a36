"""
Entity Models

In-memory records held by the NetworkStore and the derived network
projection types.

Usage:
======
    from portico.shared.models import Cluster, Contact, Connection, NetworkData
"""

from portico.shared.models.base import Base
from portico.shared.models.enums import EndpointType, NodeType
from portico.shared.models.cluster import Cluster, DEFAULT_CLUSTERS
from portico.shared.models.contact import Contact, NULLABLE_TEXT_FIELDS
from portico.shared.models.connection import Connection
from portico.shared.models.network import (
    HUB_NODE_ID,
    HUB_NODE_NAME,
    HUB_NODE_COLOR,
    NetworkNode,
    NetworkLink,
    NetworkData,
    cluster_node_id,
    contact_node_id,
)

__all__ = [
    "Base",
    "EndpointType",
    "NodeType",
    "Cluster",
    "DEFAULT_CLUSTERS",
    "Contact",
    "NULLABLE_TEXT_FIELDS",
    "Connection",
    "HUB_NODE_ID",
    "HUB_NODE_NAME",
    "HUB_NODE_COLOR",
    "NetworkNode",
    "NetworkLink",
    "NetworkData",
    "cluster_node_id",
    "contact_node_id",
]
