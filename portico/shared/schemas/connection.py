"""
Connection-related Pydantic schemas.
"""

from pydantic import Field

from portico.shared.models.enums import EndpointType
from portico.shared.schemas.common import BaseSchema


class ConnectionCreate(BaseSchema):
    """Request body for POST /api/connections."""

    source_id: str = Field(min_length=1)
    target_id: str = Field(min_length=1)
    source_type: EndpointType
    target_type: EndpointType


class ConnectionResponse(BaseSchema):
    """A stored connection."""

    id: int
    source_id: str
    target_id: str
    source_type: EndpointType
    target_type: EndpointType
