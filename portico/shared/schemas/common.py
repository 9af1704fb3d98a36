"""
Common Schemas

Shared schemas used across the application for consistent API responses.

Schema Types:
=============
- BaseSchema: Base with common config (camelCase aliases, from_attributes)
- Standard responses: ErrorResponse, HealthResponse

JSON Naming:
============
Python attributes are snake_case; the wire format is camelCase. Every
schema derives from BaseSchema, which generates the aliases and accepts
either spelling on input:

    class ContactResponse(BaseSchema):
        cluster_id: int          # serialized as "clusterId"
"""

from datetime import datetime, timezone
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class BaseSchema(BaseModel):
    """
    Base schema with common configuration.

    Provides:
    - alias_generator: camelCase JSON keys
    - populate_by_name: Allow field population by name or alias
    - from_attributes: Allow creating from store records (dataclasses)
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


def non_nullable(model: BaseModel, *names: str) -> None:
    """
    Reject an explicit ``null`` for fields that may be omitted but not
    cleared (partial updates of required fields).
    """
    for name in names:
        if name in model.model_fields_set and getattr(model, name) is None:
            raise ValueError(f"{to_camel(name)} may not be null")


# ═══════════════════════════════════════════════════════════════════════════════
# STANDARD RESPONSES
# ═══════════════════════════════════════════════════════════════════════════════


class ErrorResponse(BaseModel):
    """
    Standard error response schema.

    Example:
        {
            "message": "Contact with id '12' not found",
            "code": "NOT_FOUND"
        }
    """

    message: str = Field(description="Human-readable error message")
    code: str = Field(description="Machine-readable error code")
    details: Optional[dict[str, Any]] = Field(
        default=None,
        description="Additional error context",
    )


class HealthResponse(BaseModel):
    """Health check response schema."""

    status: str = "healthy"
    service: str = "portico"
    version: str = "1.0.0"
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
