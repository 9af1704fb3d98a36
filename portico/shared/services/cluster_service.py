"""
Cluster service.
Business logic for cluster operations.

Rules enforced here (not in the store):
- Names are unique ignoring case and surrounding whitespace, checked in the
  same synchronous call that creates or renames the cluster.
- Unknown ids raise ClusterNotFoundError.
"""

from typing import List

from ..core.exceptions import ClusterNotFoundError, DuplicateClusterNameError
from ..db.store import NetworkStore
from ..models.cluster import Cluster
from ..schemas.cluster import ClusterCreate, ClusterUpdate


class ClusterService:
    """Service for cluster-related business logic."""

    def __init__(self, store: NetworkStore, enforce_unique_names: bool = True):
        self.store = store
        self.enforce_unique_names = enforce_unique_names

    def list_clusters(self) -> List[Cluster]:
        return self.store.get_clusters()

    def get_cluster(self, cluster_id: int) -> Cluster:
        """
        Get cluster by ID.

        Raises:
            ClusterNotFoundError: If the cluster does not exist
        """
        cluster = self.store.get_cluster(cluster_id)
        if cluster is None:
            raise ClusterNotFoundError(cluster_id)
        return cluster

    def create_cluster(self, payload: ClusterCreate) -> Cluster:
        """
        Create a cluster.

        Raises:
            DuplicateClusterNameError: If the name is already taken
        """
        self._ensure_name_available(payload.name)
        return self.store.create_cluster(payload.model_dump())

    def update_cluster(self, cluster_id: int, payload: ClusterUpdate) -> Cluster:
        """
        Merge the sent fields into a cluster.

        Raises:
            ClusterNotFoundError: If the cluster does not exist
            DuplicateClusterNameError: If renaming onto another cluster's name
        """
        self.get_cluster(cluster_id)
        changes = payload.model_dump(exclude_unset=True)
        if "name" in changes:
            self._ensure_name_available(changes["name"], exclude_id=cluster_id)
        cluster = self.store.update_cluster(cluster_id, changes)
        if cluster is None:
            raise ClusterNotFoundError(cluster_id)
        return cluster

    def delete_cluster(self, cluster_id: int) -> None:
        """
        Delete a cluster together with its contacts and connections.

        Raises:
            ClusterNotFoundError: If the cluster does not exist
        """
        if not self.store.delete_cluster(cluster_id):
            raise ClusterNotFoundError(cluster_id)

    def _ensure_name_available(self, name: str, exclude_id: int | None = None) -> None:
        if not self.enforce_unique_names:
            return
        existing = self.store.find_cluster_by_name(name, exclude_id=exclude_id)
        if existing is not None:
            raise DuplicateClusterNameError(name, existing.id)
