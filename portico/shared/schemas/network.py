"""
Network projection schemas.

These describe the JSON of GET /api/network and are also what the graph
renderer and the client parse that JSON into. Optional node fields are
omitted from the response when unset.
"""

from typing import Any, Dict, List, Optional

from portico.shared.models.enums import NodeType
from portico.shared.schemas.common import BaseSchema


class NetworkNodeSchema(BaseSchema):
    """A hub, cluster or contact node."""

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
    emails: Optional[List[str]] = None
    phones: Optional[List[str]] = None
    social_links: Optional[Dict[str, str]] = None
    tags: Optional[List[str]] = None
    address: Optional[Dict[str, str]] = None
    first_contact: Optional[str] = None
    last_contact: Optional[str] = None
    next_follow_up: Optional[str] = None
    relationship_status: Optional[str] = None
    relationship_strength: Optional[int] = None
    profile_image: Optional[str] = None
    communication_preferences: Optional[Dict[str, Any]] = None
    custom_fields: Optional[List[str]] = None


class NetworkLinkSchema(BaseSchema):
    """A directed edge between two node ids."""

    id: str
    source: str
    target: str
    source_type: NodeType
    target_type: NodeType


class NetworkResponse(BaseSchema):
    """Body of GET /api/network."""

    nodes: List[NetworkNodeSchema]
    links: List[NetworkLinkSchema]
