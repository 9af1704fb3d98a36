"""
Network service.
Read-only access to the derived network projection.
"""

from ..db.store import NetworkStore
from ..models.network import NetworkData


class NetworkService:
    """Service for the hub/cluster/contact projection."""

    def __init__(self, store: NetworkStore):
        self.store = store

    def get_network(self) -> NetworkData:
        """Build the projection from the current collections (no side effects)."""
        return self.store.get_network_data()
