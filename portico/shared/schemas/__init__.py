"""
Pydantic Schemas

Request and response models for the API. JSON keys are camelCase.

Schema Categories:
==================
- common: Base schema, error and health responses
- cluster: Cluster bodies
- contact: Contact bodies (with bounds on strength and custom fields)
- connection: Connection bodies
- network: The derived network projection

Usage:
======
    from portico.shared.schemas import ClusterCreate, ClusterResponse
    from portico.shared.schemas.network import NetworkResponse
"""

from portico.shared.schemas.common import (
    BaseSchema,
    ErrorResponse,
    HealthResponse,
)
from portico.shared.schemas.cluster import (
    ClusterCreate,
    ClusterUpdate,
    ClusterResponse,
)
from portico.shared.schemas.contact import (
    AddressSchema,
    ContactCreate,
    ContactUpdate,
    ContactResponse,
    MAX_CUSTOM_FIELDS,
    MAX_RELATIONSHIP_STRENGTH,
)
from portico.shared.schemas.connection import (
    ConnectionCreate,
    ConnectionResponse,
)
from portico.shared.schemas.network import (
    NetworkNodeSchema,
    NetworkLinkSchema,
    NetworkResponse,
)

__all__ = [
    # Common
    "BaseSchema",
    "ErrorResponse",
    "HealthResponse",
    # Cluster
    "ClusterCreate",
    "ClusterUpdate",
    "ClusterResponse",
    # Contact
    "AddressSchema",
    "ContactCreate",
    "ContactUpdate",
    "ContactResponse",
    "MAX_CUSTOM_FIELDS",
    "MAX_RELATIONSHIP_STRENGTH",
    # Connection
    "ConnectionCreate",
    "ConnectionResponse",
    # Network
    "NetworkNodeSchema",
    "NetworkLinkSchema",
    "NetworkResponse",
]
