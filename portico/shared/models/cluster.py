"""
Cluster Entity Model

Named, colored group of contacts. Every cluster is attached to the central
hub node of the network projection.

SAMPLE CLUSTER RECORD:
┌──────────────────────────────────────────────────────────────────────────────┐
│ id     │ 5                                                                   │
│ name   │ "Sales"                                                             │
│ color  │ "rgba(173, 216, 230, 0.45)"                                         │
└──────────────────────────────────────────────────────────────────────────────┘

Deleting a cluster cascades to its contacts and to every connection that
touches the cluster or one of those contacts (see NetworkStore.delete_cluster).
"""

from dataclasses import dataclass

from portico.shared.models.base import Base


@dataclass
class Cluster(Base):
    """
    Cluster model.

    Attributes:
        id: Unique identifier (monotonic, never reused)
        name: Display name
        color: CSS color, usually rgba with alpha
    """

    name: str = ""
    color: str = ""

    def __repr__(self) -> str:
        return f"<Cluster(id={self.id}, name={self.name})>"


# Seed clusters created at boot; the first user-created cluster gets id 5.
DEFAULT_CLUSTERS: tuple[Cluster, ...] = (
    Cluster(id=1, name="Marketing", color="rgba(173, 216, 230, 0.45)"),
    Cluster(id=2, name="Finanzen", color="rgba(144, 238, 144, 0.45)"),
    Cluster(id=3, name="Technologie", color="rgba(221, 160, 221, 0.45)"),
    Cluster(id=4, name="Vertrieb", color="rgba(255, 255, 224, 0.45)"),
)
