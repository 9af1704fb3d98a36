"""
Cluster-related Pydantic schemas.
"""

from typing import Optional

from pydantic import Field, model_validator

from portico.shared.schemas.common import BaseSchema, non_nullable


class ClusterCreate(BaseSchema):
    """Request body for POST /api/clusters."""

    name: str = Field(min_length=1, description="Display name")
    color: str = Field(min_length=1, description="CSS color, e.g. 'rgba(173, 216, 230, 0.45)'")


class ClusterUpdate(BaseSchema):
    """Request body for PATCH /api/clusters/{id}; every field optional."""

    name: Optional[str] = Field(None, min_length=1)
    color: Optional[str] = Field(None, min_length=1)

    @model_validator(mode="after")
    def _reject_nulls(self) -> "ClusterUpdate":
        non_nullable(self, "name", "color")
        return self


class ClusterResponse(BaseSchema):
    """A stored cluster."""

    id: int
    name: str
    color: str
