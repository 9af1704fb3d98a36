"""
Contact-related Pydantic schemas.

ContactCreate and ContactUpdate share every optional field through
ContactFields; they differ only in whether name, role and clusterId are
required. Bounds (relationshipStrength 0-5, at most five customFields) are
enforced here so both the API and client-side forms apply them.
"""

from datetime import date, datetime
from typing import Any, Dict, List, Optional

from pydantic import Field, field_validator, model_validator

from portico.shared.schemas.common import BaseSchema, non_nullable


MAX_CUSTOM_FIELDS = 5
MAX_RELATIONSHIP_STRENGTH = 5


class AddressSchema(BaseSchema):
    """Postal address; every part optional."""

    street: Optional[str] = None
    city: Optional[str] = None
    zip: Optional[str] = None
    country: Optional[str] = None
    timezone: Optional[str] = None


def _check_iso_date(value: Optional[str]) -> Optional[str]:
    if not value:
        return value
    try:
        date.fromisoformat(value)
    except ValueError:
        try:
            datetime.fromisoformat(value)
        except ValueError:
            raise ValueError(f"'{value}' is not an ISO date") from None
    return value


class ContactFields(BaseSchema):
    """Optional contact fields shared by create and update bodies."""

    email: Optional[str] = None
    phone: Optional[str] = None
    notes: Optional[str] = None
    company: Optional[str] = None
    department: Optional[str] = None
    emails: Optional[List[str]] = None
    phones: Optional[List[str]] = None
    social_links: Optional[Dict[str, str]] = None
    tags: Optional[List[str]] = None
    address: Optional[AddressSchema] = None
    first_contact: Optional[str] = None
    last_contact: Optional[str] = None
    next_follow_up: Optional[str] = None
    relationship_status: Optional[str] = None
    relationship_strength: Optional[int] = Field(None, ge=0, le=MAX_RELATIONSHIP_STRENGTH)
    profile_image: Optional[str] = None
    communication_preferences: Optional[Dict[str, bool]] = None
    custom_fields: Optional[List[str]] = Field(None, max_length=MAX_CUSTOM_FIELDS)

    @field_validator("first_contact", "last_contact", "next_follow_up")
    @classmethod
    def _iso_dates(cls, value: Optional[str]) -> Optional[str]:
        return _check_iso_date(value)

    def store_fields(self, partial: bool = False) -> dict[str, Any]:
        """
        Field values for the store, keyed by attribute name.

        Args:
            partial: Only include fields the client actually sent
        """
        data = self.model_dump(exclude_unset=partial)
        address = data.get("address")
        if address is not None:
            data["address"] = {k: v for k, v in address.items() if v is not None}
        return data


class ContactCreate(ContactFields):
    """Request body for POST /api/contacts."""

    name: str = Field(min_length=1)
    role: str
    cluster_id: int


class ContactUpdate(ContactFields):
    """Request body for PATCH /api/contacts/{id}; every field optional."""

    name: Optional[str] = Field(None, min_length=1)
    role: Optional[str] = None
    cluster_id: Optional[int] = None

    @model_validator(mode="after")
    def _reject_nulls(self) -> "ContactUpdate":
        non_nullable(self, "name", "role", "cluster_id")
        return self


class ContactResponse(BaseSchema):
    """A stored contact with every field present."""

    id: int
    name: str
    role: str
    cluster_id: int
    email: Optional[str] = None
    phone: Optional[str] = None
    notes: Optional[str] = None
    company: Optional[str] = None
    department: Optional[str] = None
    emails: List[str] = Field(default_factory=list)
    phones: List[str] = Field(default_factory=list)
    social_links: Dict[str, str] = Field(default_factory=dict)
    tags: List[str] = Field(default_factory=list)
    address: Dict[str, str] = Field(default_factory=dict)
    first_contact: Optional[str] = None
    last_contact: Optional[str] = None
    next_follow_up: Optional[str] = None
    relationship_status: Optional[str] = None
    relationship_strength: Optional[int] = None
    profile_image: Optional[str] = None
    communication_preferences: Dict[str, bool] = Field(default_factory=dict)
    custom_fields: List[str] = Field(default_factory=list)
