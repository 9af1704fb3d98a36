"""
Contact Entity Model

A person in the network. Each contact belongs to exactly one cluster and
is linked to it by an automatically managed cluster→contact Connection.

SAMPLE CONTACT RECORD:
┌──────────────────────────────────────────────────────────────────────────────┐
│ id                    │ 1                                                    │
│ name                  │ "Ana García"                                         │
│ role                  │ "Account Executive"                                  │
│ email                 │ "ana@example.com"                                    │
│ cluster_id            │ 5                                                    │
│ tags                  │ ["vip", "q3"]                                        │
│ relationship_strength │ 4                                                    │
└──────────────────────────────────────────────────────────────────────────────┘

Collection fields are never absent: they default to an empty list/dict so
that the projection can copy them without null checks.
"""

from dataclasses import dataclass, field
from typing import Optional

from portico.shared.models.base import Base


# Optional string fields where an empty string is stored as None
NULLABLE_TEXT_FIELDS: tuple[str, ...] = (
    "email",
    "phone",
    "notes",
    "company",
    "department",
    "first_contact",
    "last_contact",
    "next_follow_up",
    "relationship_status",
    "profile_image",
)


@dataclass
class Contact(Base):
    """
    Contact model.

    Attributes:
        id: Unique identifier
        name: Display name (non-empty)
        role: Job title or role
        cluster_id: Owning cluster id
        email/phone/notes: Primary contact details
        company/department: Organisation
        emails/phones: Additional addresses and numbers
        social_links: Network name → URL
        tags: Free-form labels
        address: street/city/zip/country/timezone
        first_contact/last_contact/next_follow_up: ISO dates
        relationship_status: Free-form status label
        relationship_strength: 0-5
        profile_image: Data URI or URL
        communication_preferences: Channel → opted in
        custom_fields: Up to five free-text values
    """

    name: str = ""
    role: str = ""
    cluster_id: int = 0
    email: Optional[str] = None
    phone: Optional[str] = None
    notes: Optional[str] = None
    company: Optional[str] = None
    department: Optional[str] = None
    emails: list[str] = field(default_factory=list)
    phones: list[str] = field(default_factory=list)
    social_links: dict[str, str] = field(default_factory=dict)
    tags: list[str] = field(default_factory=list)
    address: dict[str, str] = field(default_factory=dict)
    first_contact: Optional[str] = None
    last_contact: Optional[str] = None
    next_follow_up: Optional[str] = None
    relationship_status: Optional[str] = None
    relationship_strength: Optional[int] = None
    profile_image: Optional[str] = None
    communication_preferences: dict[str, bool] = field(default_factory=dict)
    custom_fields: list[str] = field(default_factory=list)

    def __repr__(self) -> str:
        return f"<Contact(id={self.id}, name={self.name}, cluster_id={self.cluster_id})>"
