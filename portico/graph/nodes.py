"""
Simulation Nodes

Mutable per-node layout state wrapped around the immutable network node
received from the API.

Node States:
============
    FREE ──drag start──► DRAGGING ──drag end──► PINNED
      ▲                                           │
      └──────────────── release() ────────────────┘

- FREE:     position governed by the simulation forces
- DRAGGING: position follows the pointer (fx/fy set), simulation heated
- PINNED:   position fixed at fx/fy; the simulation never moves it

The hub node is always PINNED at the canvas center.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, List, Optional

from portico.graph.styles import NodeGeometry, geometry_for, node_kind
from portico.shared.schemas.network import NetworkNodeSchema


class NodeState(str, Enum):
    """Interaction state of a laid-out node."""

    FREE = "free"
    DRAGGING = "dragging"
    PINNED = "pinned"


@dataclass(eq=False)
class SimNode:
    """A network node plus its position, velocity and pin."""

    data: NetworkNodeSchema
    x: Optional[float] = None
    y: Optional[float] = None
    vx: float = 0.0
    vy: float = 0.0
    fx: Optional[float] = None
    fy: Optional[float] = None
    state: NodeState = NodeState.FREE

    @property
    def id(self) -> str:
        return self.data.id

    @property
    def kind(self) -> str:
        return node_kind(self.data)

    @property
    def geometry(self) -> NodeGeometry:
        return geometry_for(self.data)

    @property
    def is_fixed(self) -> bool:
        return self.fx is not None and self.fy is not None

    def pin(self, x: float, y: float, state: NodeState = NodeState.PINNED) -> None:
        """Fix the node at (x, y); the simulation will not move it."""
        self.fx = x
        self.fy = y
        self.x = x
        self.y = y
        self.vx = 0.0
        self.vy = 0.0
        self.state = state

    def release(self) -> None:
        """Hand the node back to the simulation."""
        self.fx = None
        self.fy = None
        self.state = NodeState.FREE


def build_sim_nodes(nodes: Iterable[NetworkNodeSchema]) -> List[SimNode]:
    """Wrap network nodes for layout, preserving order."""
    return [SimNode(data=node) for node in nodes]
