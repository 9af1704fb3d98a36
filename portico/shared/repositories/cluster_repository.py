"""
Cluster Repository

In-memory operations for clusters.

Common Operations:
==================
- seed_defaults()     → Insert the fixed default clusters
- get_by_name()       → Case-insensitive name lookup (duplicate checks)
"""

from typing import Iterable, Optional

from portico.shared.models.cluster import Cluster, DEFAULT_CLUSTERS
from portico.shared.repositories.base import BaseRepository


def normalize_cluster_name(name: str) -> str:
    """Key used for name comparisons: trimmed and casefolded."""
    return name.strip().casefold()


class ClusterRepository(BaseRepository[Cluster]):
    """Repository for Cluster records."""

    def __init__(self) -> None:
        super().__init__(Cluster)

    def seed_defaults(self, defaults: Iterable[Cluster] = DEFAULT_CLUSTERS) -> int:
        """
        Insert the default clusters with their fixed ids.

        Returns:
            Number of clusters inserted
        """
        inserted = 0
        for cluster in defaults:
            self.insert(Cluster(id=cluster.id, name=cluster.name, color=cluster.color))
            inserted += 1
        return inserted

    def get_by_name(self, name: str, exclude_id: Optional[int] = None) -> Optional[Cluster]:
        """
        Find a cluster whose name matches ``name`` ignoring case and
        surrounding whitespace.

        Args:
            name: Name to look up
            exclude_id: Cluster to ignore (the one being renamed)
        """
        key = normalize_cluster_name(name)
        for cluster in self.list():
            if cluster.id != exclude_id and normalize_cluster_name(cluster.name) == key:
                return cluster
        return None
