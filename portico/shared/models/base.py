"""
Base Model Classes

Foundational record type for every entity kept by the in-memory store.

Records are plain dataclasses keyed by an integer ``id`` that the owning
repository assigns. They carry no persistence logic of their own; the
repositories decide when a record is stored, replaced or dropped.

Model Hierarchy:
================
    Base                    ← id + merge/to_dict helpers
       │
       ├── Cluster
       ├── Contact
       └── Connection

Usage:
======
    from portico.shared.models.base import Base

    @dataclass
    class Cluster(Base):
        name: str = ""
        color: str = ""
"""

from dataclasses import asdict, dataclass, fields, replace
from typing import Any, TypeVar


RecordT = TypeVar("RecordT", bound="Base")


@dataclass
class Base:
    """
    Base class for all in-memory records.

    Attributes:
        id: Unique integer identifier assigned by the repository
    """

    id: int

    @classmethod
    def field_names(cls) -> set[str]:
        """Names of all dataclass fields of this record type."""
        return {f.name for f in fields(cls)}

    def merge(self: RecordT, changes: dict[str, Any]) -> RecordT:
        """
        Return a copy with ``changes`` applied.

        Unknown keys and ``id`` are ignored so a partial update can never
        re-key a record.
        """
        allowed = self.field_names() - {"id"}
        return replace(self, **{k: v for k, v in changes.items() if k in allowed})

    def to_dict(self) -> dict[str, Any]:
        """Convert the record to a plain dictionary (deep copy)."""
        return asdict(self)
