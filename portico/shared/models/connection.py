"""
Connection Entity Model

Generic edge between two typed entities. Endpoints are referenced by the
string form of their numeric id together with their type.

SAMPLE CONNECTION RECORD:
┌──────────────────────────────────────────────────────────────────────────────┐
│ id           │ 1                                                             │
│ source_id    │ "5"                                                           │
│ target_id    │ "1"                                                           │
│ source_type  │ cluster                                                       │
│ target_type  │ contact                                                       │
└──────────────────────────────────────────────────────────────────────────────┘
"""

from dataclasses import dataclass

from portico.shared.models.base import Base
from portico.shared.models.enums import EndpointType


@dataclass
class Connection(Base):
    """
    Connection model.

    Attributes:
        id: Unique identifier
        source_id: String id of the source entity
        target_id: String id of the target entity
        source_type: Entity type of the source
        target_type: Entity type of the target
    """

    source_id: str = ""
    target_id: str = ""
    source_type: EndpointType = EndpointType.CLUSTER
    target_type: EndpointType = EndpointType.CONTACT

    def touches(self, endpoint_type: EndpointType, endpoint_id: int) -> bool:
        """True if either end of this connection is the given entity."""
        key = str(endpoint_id)
        return (self.source_type == endpoint_type and self.source_id == key) or (
            self.target_type == endpoint_type and self.target_id == key
        )

    def is_membership_of(self, contact_id: int, cluster_id: int) -> bool:
        """True if this is the cluster→contact membership edge for the pair."""
        return (
            self.source_type == EndpointType.CLUSTER
            and self.target_type == EndpointType.CONTACT
            and self.source_id == str(cluster_id)
            and self.target_id == str(contact_id)
        )
