"""
Graph Styles

Per-kind geometry and colors for hub, cluster and contact nodes, plus
link stroke styles.

Node Kinds:
===========
    kind      box (w×h)   collide radius   fill alpha   stroke width
    ───────   ─────────   ──────────────   ──────────   ────────────
    hub       200 × 140        120             0.7           2
    cluster   180 × 120         90             0.55          1.5
    contact   170 × 110         85             0.65          1.5

Contacts are filled with their owning cluster's color. Fill colors keep
the RGB of the source color and replace its trailing alpha.

Link Kinds:
===========
- hub → cluster:      bluish, dashed "5,3", width 2
- cluster → contact:  greenish, width 1.5
- anything else:      grey, width 1.5
"""

import re
from dataclasses import dataclass
from typing import Mapping, Optional

from portico.shared.models.enums import NodeType
from portico.shared.models.network import HUB_NODE_ID
from portico.shared.schemas.network import NetworkLinkSchema, NetworkNodeSchema


HUB = "hub"
CLUSTER = "cluster"
CONTACT = "contact"

FALLBACK_COLOR = "rgba(200, 200, 200, 0.45)"
NODE_STROKE = "rgba(255, 255, 255, 0.9)"
LABEL_COLOR = "#0E1525"

_TRAILING_ALPHA = re.compile(r"[\d.]+\)$")


@dataclass(frozen=True)
class NodeGeometry:
    """Box size, collision radius and paint parameters of a node kind."""

    width: float
    height: float
    collide_radius: float
    fill_alpha: float
    stroke_width: float
    font_size: int
    font_weight: int

    @property
    def half_width(self) -> float:
        return self.width / 2

    @property
    def half_height(self) -> float:
        return self.height / 2

    @property
    def render_radius(self) -> float:
        # Circumscribing radius; used when framing the view
        return max(self.half_width, self.half_height)


NODE_GEOMETRY: dict[str, NodeGeometry] = {
    HUB: NodeGeometry(200, 140, 120, 0.7, 2.0, 16, 700),
    CLUSTER: NodeGeometry(180, 120, 90, 0.55, 1.5, 14, 600),
    CONTACT: NodeGeometry(170, 110, 85, 0.65, 1.5, 14, 600),
}


@dataclass(frozen=True)
class LinkStyle:
    stroke: str
    stroke_width: float
    dasharray: Optional[str] = None


HUB_LINK_STYLE = LinkStyle("rgba(120, 120, 180, 0.4)", 2.0, "5,3")
MEMBERSHIP_LINK_STYLE = LinkStyle("rgba(100, 160, 100, 0.4)", 1.5)
DEFAULT_LINK_STYLE = LinkStyle("rgba(150, 150, 150, 0.3)", 1.5)


def node_kind(node: NetworkNodeSchema) -> str:
    """Return ``hub``, ``cluster`` or ``contact``."""
    if node.id == HUB_NODE_ID:
        return HUB
    if node.type == NodeType.CONTACT:
        return CONTACT
    return CLUSTER


def geometry_for(node: NetworkNodeSchema) -> NodeGeometry:
    return NODE_GEOMETRY[node_kind(node)]


def with_alpha(color: Optional[str], alpha: float) -> str:
    """
    Replace the trailing alpha component of an ``rgba(...)`` color.

    Colors without a numeric trailing component are returned unchanged.

    Example:
        with_alpha("rgba(1, 2, 3, 0.45)", 0.7)  # "rgba(1, 2, 3, 0.7)"
    """
    base = color or FALLBACK_COLOR
    return _TRAILING_ALPHA.sub(f"{alpha})", base)


def node_fill(node: NetworkNodeSchema, cluster_colors: Mapping[int, str]) -> str:
    """
    Fill color of a node.

    Args:
        node: The node to paint
        cluster_colors: Cluster originalId → cluster color
    """
    geometry = geometry_for(node)
    if node.type == NodeType.CONTACT:
        color = cluster_colors.get(node.cluster_id) if node.cluster_id is not None else None
    else:
        color = node.color
    return with_alpha(color, geometry.fill_alpha)


def link_style(link: NetworkLinkSchema) -> LinkStyle:
    if link.source == HUB_NODE_ID or link.target == HUB_NODE_ID:
        return HUB_LINK_STYLE
    if link.source_type == NodeType.CLUSTER and link.target_type == NodeType.CONTACT:
        return MEMBERSHIP_LINK_STYLE
    return DEFAULT_LINK_STYLE
