"""
Connection service.
Business logic for manually managed connections.
"""

from typing import List

from ..core.exceptions import ConnectionNotFoundError
from ..db.store import NetworkStore
from ..models.connection import Connection
from ..schemas.connection import ConnectionCreate


class ConnectionService:
    """Service for connection-related business logic."""

    def __init__(self, store: NetworkStore):
        self.store = store

    def list_connections(self) -> List[Connection]:
        return self.store.get_connections()

    def create_connection(self, payload: ConnectionCreate) -> Connection:
        return self.store.create_connection(payload.model_dump())

    def delete_connection(self, connection_id: int) -> None:
        if not self.store.delete_connection(connection_id):
            raise ConnectionNotFoundError(connection_id)
