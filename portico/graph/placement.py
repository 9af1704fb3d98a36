"""
Initial Placement

Deterministic starting positions for the network layout.

Rules:
======
    hub        pinned at the canvas center (always, saved position ignored)
    saved      any node with a saved position is pinned there
    cluster    pinned on a ring of radius 250 around the hub,
               at equal angular steps in node order
    contact    starts FREE inside its cluster's angular sector,
               at radius 420, siblings spread evenly over the sector

Saved positions for ids that are not in the network are ignored; nodes
missing from the saved map fall back to the rules above.

radial_sector_layout() computes the same ring/sector coordinates for
every node without pinning anything. It is the static layout variant
and the fallback for nodes that have no saved position.
"""

import math
from typing import Dict, Mapping, Optional, Sequence, Tuple

from portico.graph.nodes import SimNode
from portico.graph.styles import CLUSTER, CONTACT, HUB, node_kind
from portico.shared.models.network import cluster_node_id
from portico.shared.schemas.network import NetworkNodeSchema


CLUSTER_RING_RADIUS = 250.0
CONTACT_RING_RADIUS = 420.0

Point = Tuple[float, float]


def radial_sector_layout(
    nodes: Sequence[NetworkNodeSchema],
    width: float,
    height: float,
    cluster_radius: float = CLUSTER_RING_RADIUS,
    contact_radius: float = CONTACT_RING_RADIUS,
) -> Dict[str, Point]:
    """
    Ring and sector coordinates for every node, keyed by node id.

    Cluster i of n sits at angle 2πi/n. Its sector spans 2π/n centered on
    that angle; the sector is split evenly among the cluster's contacts.
    Contacts whose cluster is not among the nodes are spread evenly
    around the whole circle.
    """
    cx, cy = width / 2, height / 2
    positions: Dict[str, Point] = {}

    clusters = [n for n in nodes if node_kind(n) == CLUSTER]
    contacts = [n for n in nodes if node_kind(n) == CONTACT]

    sector = 2 * math.pi / len(clusters) if clusters else 2 * math.pi
    cluster_angles: Dict[str, float] = {}
    for index, node in enumerate(clusters):
        angle = index * sector
        cluster_angles[node.id] = angle
        positions[node.id] = (cx + cluster_radius * math.cos(angle), cy + cluster_radius * math.sin(angle))

    siblings: Dict[Optional[str], list] = {}
    for node in contacts:
        parent = cluster_node_id(node.cluster_id) if node.cluster_id is not None else None
        if parent not in cluster_angles:
            parent = None
        siblings.setdefault(parent, []).append(node)

    for parent, members in siblings.items():
        if parent is None:
            start, span = 0.0, 2 * math.pi
        else:
            start, span = cluster_angles[parent] - sector / 2, sector
        step = span / len(members)
        for k, node in enumerate(members):
            angle = start + (k + 0.5) * step
            positions[node.id] = (cx + contact_radius * math.cos(angle), cy + contact_radius * math.sin(angle))

    for node in nodes:
        if node_kind(node) == HUB:
            positions[node.id] = (cx, cy)

    return positions


def place_initial_positions(
    nodes: Sequence[SimNode],
    saved_positions: Mapping[str, Point],
    width: float,
    height: float,
) -> None:
    """
    Set starting positions and pin states on ``nodes`` in place.

    Args:
        nodes: Nodes about to be simulated
        saved_positions: node id → (x, y) from the layout state
        width: Canvas width
        height: Canvas height
    """
    defaults = radial_sector_layout([n.data for n in nodes], width, height)

    for node in nodes:
        if node.kind == HUB:
            node.pin(width / 2, height / 2)
            continue

        saved = saved_positions.get(node.id)
        if saved is not None:
            node.pin(*saved)
            continue

        x, y = defaults[node.id]
        if node.kind == CLUSTER:
            node.pin(x, y)
        else:
            node.release()
            node.x, node.y = x, y
            node.vx = node.vy = 0.0
