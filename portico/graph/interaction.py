"""
Interaction

Drag and click handling for laid-out nodes.

Drag Lifecycle:
===============
    drag_start  node → DRAGGING, pinned at its current position,
                simulation heated (alpha_target 0.3) and restarted
    drag        pin follows the pointer
    drag_end    simulation cooled (alpha_target 0), node → PINNED at the
                final pointer position, position saved to the layout state

A released node stays pinned; it is not handed back to the simulation.
The hub cannot be dragged.

Click Disambiguation:
=====================
A click on the node that ends a drag which actually moved it is
swallowed; the next drag start or any other click clears that state.
Any other click on a node selects it (the callback receives the node's
full network data); a click on the background clears the selection.
"""

import math
from typing import Callable, Optional, Tuple

from portico.graph.layout_state import LayoutStateStore
from portico.graph.nodes import NodeState, SimNode
from portico.graph.simulation import ForceSimulation
from portico.graph.styles import HUB
from portico.shared.core.logging import get_logger
from portico.shared.schemas.network import NetworkNodeSchema

logger = get_logger("portico.graph.interaction")


DRAG_ALPHA_TARGET = 0.3
CLICK_TOLERANCE = 3.0


class DragController:
    """Applies pointer gestures to nodes of one simulation."""

    def __init__(
        self,
        simulation: ForceSimulation,
        layout_state: LayoutStateStore,
        on_select: Optional[Callable[[NetworkNodeSchema], None]] = None,
        on_clear: Optional[Callable[[], None]] = None,
        click_tolerance: float = CLICK_TOLERANCE,
    ):
        self.simulation = simulation
        self.layout_state = layout_state
        self.on_select = on_select
        self.on_clear = on_clear
        self.click_tolerance = click_tolerance
        self.active: Optional[SimNode] = None
        self._origin: Tuple[float, float] = (0.0, 0.0)
        self._moved = False
        self._suppress_click_on: Optional[str] = None

    def _node(self, node_id: str) -> Optional[SimNode]:
        node = self.simulation.find(node_id)
        if node is None or node.kind == HUB:
            return None
        return node

    # ═══════════════════════════════════════════════════════════════════════════
    # DRAG
    # ═══════════════════════════════════════════════════════════════════════════

    def drag_start(self, node_id: str) -> Optional[SimNode]:
        node = self._node(node_id)
        if node is None:
            return None
        self.simulation.alpha_target(DRAG_ALPHA_TARGET).restart()
        node.fx, node.fy = node.x, node.y
        node.state = NodeState.DRAGGING
        self.active = node
        self._suppress_click_on = None
        self._origin = (node.x, node.y)
        self._moved = False
        return node

    def drag(self, x: float, y: float) -> Optional[SimNode]:
        node = self.active
        if node is None:
            return None
        node.fx, node.fy = x, y
        if math.hypot(x - self._origin[0], y - self._origin[1]) > self.click_tolerance:
            self._moved = True
        return node

    def drag_end(self) -> Optional[SimNode]:
        """Finish the drag; the node stays pinned where it was released."""
        node = self.active
        if node is None:
            return None
        self.simulation.alpha_target(0)
        node.pin(node.fx, node.fy)
        self.layout_state.save_position(node.id, node.fx, node.fy)
        logger.debug("Node pinned", node_id=node.id, x=node.fx, y=node.fy)
        self._suppress_click_on = node.id if self._moved else None
        self.active = None
        return node

    # ═══════════════════════════════════════════════════════════════════════════
    # CLICK
    # ═══════════════════════════════════════════════════════════════════════════

    def click(self, node_id: str) -> Optional[NetworkNodeSchema]:
        """Select a node unless this click is the tail of a real drag."""
        suppressed = self._suppress_click_on
        self._suppress_click_on = None
        if suppressed == node_id:
            return None
        node = self.simulation.find(node_id)
        if node is None:
            return None
        if self.on_select is not None:
            self.on_select(node.data)
        return node.data

    def background_click(self) -> None:
        self._suppress_click_on = None
        if self.on_clear is not None:
            self.on_clear()
