"""
Base Repository

This module provides a generic in-memory repository with common CRUD
operations. All entity-specific repositories inherit from this class.

What This Provides:
===================
- get(id)        → Fetch single record by id
- list()         → List records with optional filtering
- count()        → Count records with filtering
- create()       → Create new record with the next id
- insert()       → Store a record with a preassigned id (seeding)
- update()       → Merge fields into an existing record
- delete()       → Remove a record
- delete_where() → Remove every record matching a predicate

Generic Type Pattern:
=====================
    class ClusterRepository(BaseRepository[Cluster]):
        def __init__(self) -> None:
            super().__init__(Cluster)

    repo = ClusterRepository()
    cluster = repo.get(1)  # Returns Cluster, not Any!

Storage Model:
==============
┌─────────────────────────────────────────────────────────────────────────────┐
│   records: dict[int, ModelType]   ← insertion-ordered, keyed by id          │
│   next_id: int                    ← monotonic counter, never reused         │
└─────────────────────────────────────────────────────────────────────────────┘

Iteration order is insertion order, which for records that were never
re-inserted is ascending id order. update() replaces the value in place
and therefore keeps the record's position.
"""

from typing import Any, Callable, Generic, List, Optional, Type, TypeVar

from portico.shared.models.base import Base


ModelType = TypeVar("ModelType", bound=Base)


class BaseRepository(Generic[ModelType]):
    """
    Generic base repository providing common CRUD operations.

    Type Parameter:
        ModelType: The record dataclass this repository manages

    Attributes:
        model: The record class
        next_id: The id the next create() call will assign
    """

    def __init__(self, model: Type[ModelType], start_id: int = 1) -> None:
        """
        Initialize the repository.

        Args:
            model: Record class (e.g., Cluster, Contact, Connection)
            start_id: First id handed out by create()
        """
        self.model = model
        self.next_id = start_id
        self._records: dict[int, ModelType] = {}

    # ═══════════════════════════════════════════════════════════════════════════
    # READ OPERATIONS
    # ═══════════════════════════════════════════════════════════════════════════

    def get(self, record_id: int) -> Optional[ModelType]:
        """
        Get a single record by its id.

        Returns:
            The record if found, None otherwise
        """
        return self._records.get(record_id)

    def list(self, filters: Optional[dict[str, Any]] = None) -> List[ModelType]:
        """
        List records in insertion order.

        Args:
            filters: Field name → required value (equality match)

        Example:
            contacts = repo.list(filters={"cluster_id": 5})
        """
        records = list(self._records.values())
        if filters:
            records = [
                r for r in records
                if all(getattr(r, key) == value for key, value in filters.items())
            ]
        return records

    def find(self, predicate: Callable[[ModelType], bool]) -> List[ModelType]:
        """Return all records for which ``predicate`` is true."""
        return [r for r in self._records.values() if predicate(r)]

    def count(self, filters: Optional[dict[str, Any]] = None) -> int:
        """Count records, optionally matching ``filters``."""
        if not filters:
            return len(self._records)
        return len(self.list(filters=filters))

    # ═══════════════════════════════════════════════════════════════════════════
    # WRITE OPERATIONS
    # ═══════════════════════════════════════════════════════════════════════════

    def create(self, **kwargs: Any) -> ModelType:
        """
        Create a new record with the next available id.

        Args:
            **kwargs: Field values for the new record (``id`` is ignored)

        Returns:
            The stored record
        """
        kwargs.pop("id", None)
        record_id = self.next_id
        self.next_id += 1
        instance = self.model(id=record_id, **kwargs)
        self._records[record_id] = instance
        return instance

    def insert(self, instance: ModelType) -> ModelType:
        """
        Store a record that already carries its id.

        Used for seeding fixed records; the id counter moves past the
        inserted id so create() never hands it out again.
        """
        self._records[instance.id] = instance
        self.next_id = max(self.next_id, instance.id + 1)
        return instance

    def update(self, record_id: int, **kwargs: Any) -> Optional[ModelType]:
        """
        Merge fields into an existing record.

        Returns:
            The updated record, or None if ``record_id`` is unknown
        """
        existing = self._records.get(record_id)
        if existing is None:
            return None
        updated = existing.merge(kwargs)
        self._records[record_id] = updated
        return updated

    def delete(self, record_id: int) -> bool:
        """
        Remove a record.

        Returns:
            True if the record existed
        """
        return self._records.pop(record_id, None) is not None

    def delete_where(self, predicate: Callable[[ModelType], bool]) -> List[ModelType]:
        """Remove every record matching ``predicate`` and return them."""
        doomed = self.find(predicate)
        for record in doomed:
            del self._records[record.id]
        return doomed

    def clear(self) -> None:
        """Drop all records; the id counter is left untouched."""
        self._records.clear()
