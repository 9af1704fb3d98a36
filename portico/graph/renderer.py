"""
Network Renderer

Headless orchestration of the network view: filter → place → simulate →
interact → describe the scene.

Lifecycle:
==========
    renderer = NetworkRenderer(layout_state=state, on_select=show_detail)
    renderer.render(network, active_cluster_ids={1, 2}, search_term="ana")
    renderer.settle()                   # or step() once per frame
    renderer.drag_start("contact-1"); renderer.drag(120, 340); renderer.drag_end()
    svg = renderer.to_svg()
    renderer.destroy()                  # stops the simulation

Each render() stops the previous simulation before building a new one,
so at most one simulation is ever ticking per renderer. The viewport
(and its once-per-session initial framing) survives re-renders.
"""

from dataclasses import dataclass, field
from typing import Callable, Dict, Iterable, List, Optional, Tuple

from portico.config.settings import settings
from portico.graph.filtering import filter_network
from portico.graph.forces import network_forces
from portico.graph.interaction import DragController
from portico.graph.layout_state import LayoutStateStore, SessionState, ZoomTransform
from portico.graph.nodes import NodeState, SimNode, build_sim_nodes
from portico.graph.placement import place_initial_positions
from portico.graph.simulation import ForceSimulation
from portico.graph.svg import render_svg
from portico.graph.styles import (
    CONTACT,
    LABEL_COLOR,
    NODE_STROKE,
    link_style,
    node_fill,
)
from portico.graph.viewport import Viewport
from portico.shared.core.logging import get_logger
from portico.shared.models.enums import NodeType
from portico.shared.schemas.network import NetworkNodeSchema, NetworkResponse

logger = get_logger("portico.graph.renderer")


# ═══════════════════════════════════════════════════════════════════════════════
# SCENE
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass
class Label:
    text: str
    dy: str
    font_size: int
    font_weight: int
    color: str = LABEL_COLOR


@dataclass
class NodeShape:
    """A positioned rounded box with its labels."""

    id: str
    kind: str
    x: float
    y: float
    width: float
    height: float
    fill: str
    stroke: str
    stroke_width: float
    state: NodeState
    labels: List[Label] = field(default_factory=list)
    corner_radius: float = 16.0


@dataclass
class LinkShape:
    id: str
    x1: float
    y1: float
    x2: float
    y2: float
    stroke: str
    stroke_width: float
    dasharray: Optional[str] = None


@dataclass
class Scene:
    """Everything needed to draw one frame."""

    width: float
    height: float
    transform: ZoomTransform
    nodes: List[NodeShape] = field(default_factory=list)
    links: List[LinkShape] = field(default_factory=list)


# ═══════════════════════════════════════════════════════════════════════════════
# RENDERER
# ═══════════════════════════════════════════════════════════════════════════════


class NetworkRenderer:
    """Lays out and draws a network projection."""

    def __init__(
        self,
        width: Optional[float] = None,
        height: Optional[float] = None,
        layout_state: Optional[LayoutStateStore] = None,
        session: Optional[SessionState] = None,
        on_select: Optional[Callable[[NetworkNodeSchema], None]] = None,
        on_clear: Optional[Callable[[], None]] = None,
        seed: Optional[int] = 0,
    ):
        self.width = width or settings.CANVAS_WIDTH
        self.height = height or settings.CANVAS_HEIGHT
        self.layout_state = layout_state or LayoutStateStore(settings.LAYOUT_STATE_PATH or None)
        self.session = session or SessionState()
        self.on_select = on_select
        self.on_clear = on_clear
        self.seed = seed
        self.viewport = Viewport(self.width, self.height, self.layout_state, self.session)
        self.network: Optional[NetworkResponse] = None
        self.visible: Optional[NetworkResponse] = None
        self.simulation: Optional[ForceSimulation] = None
        self.controller: Optional[DragController] = None
        self._cluster_colors: Dict[int, str] = {}

    # ═══════════════════════════════════════════════════════════════════════════
    # LIFECYCLE
    # ═══════════════════════════════════════════════════════════════════════════

    def render(
        self,
        network: NetworkResponse,
        active_cluster_ids: Optional[Iterable[int]] = None,
        search_term: Optional[str] = "",
    ) -> "NetworkRenderer":
        """
        (Re)build the layout for ``network`` under the given filters.

        Saved positions are applied, the remaining nodes get their ring or
        sector slot, and the first render of the session frames the view.
        """
        self._stop_simulation()

        self.network = network
        self.visible = filter_network(network, active_cluster_ids, search_term)
        self._cluster_colors = {
            n.original_id: n.color
            for n in network.nodes
            if n.type == NodeType.CLUSTER and n.original_id is not None and n.color
        }

        nodes = build_sim_nodes(self.visible.nodes)
        place_initial_positions(nodes, self.layout_state.load_positions(), self.width, self.height)

        self.simulation = ForceSimulation(nodes, bounds=(self.width, self.height), seed=self.seed)
        links = [(link.source, link.target) for link in self.visible.links]
        for name, force in network_forces(links, self.width, self.height):
            self.simulation.force(name, force)

        self.controller = DragController(
            self.simulation,
            self.layout_state,
            on_select=self.on_select,
            on_clear=self.on_clear,
        )
        self.viewport.initialize(self._frame_items())

        logger.debug(
            "Network rendered",
            nodes=len(nodes),
            links=len(links),
            hidden=len(network.nodes) - len(nodes),
        )
        return self

    def destroy(self) -> None:
        """Stop the simulation and drop all layout state held in memory."""
        self._stop_simulation()
        self.controller = None
        self.visible = None

    @property
    def is_running(self) -> bool:
        return self.simulation is not None and self.simulation.running

    def _stop_simulation(self) -> None:
        if self.simulation is not None:
            self.simulation.stop()
            self.simulation.clear_listeners()
            self.simulation = None

    # ═══════════════════════════════════════════════════════════════════════════
    # SIMULATION
    # ═══════════════════════════════════════════════════════════════════════════

    def step(self) -> bool:
        """Advance one frame; False once settled or stopped."""
        if self.simulation is None:
            return False
        return self.simulation.step()

    def settle(self, max_iterations: int = 1000) -> int:
        if self.simulation is None:
            return 0
        return self.simulation.run(max_iterations)

    def node(self, node_id: str) -> Optional[SimNode]:
        if self.simulation is None:
            return None
        return self.simulation.find(node_id)

    def positions(self) -> Dict[str, Tuple[float, float]]:
        if self.simulation is None:
            return {}
        return {n.id: (n.x, n.y) for n in self.simulation.nodes}

    # ═══════════════════════════════════════════════════════════════════════════
    # INTERACTION
    # ═══════════════════════════════════════════════════════════════════════════

    def drag_start(self, node_id: str) -> Optional[SimNode]:
        return self.controller.drag_start(node_id) if self.controller else None

    def drag(self, x: float, y: float) -> Optional[SimNode]:
        return self.controller.drag(x, y) if self.controller else None

    def drag_end(self) -> Optional[SimNode]:
        return self.controller.drag_end() if self.controller else None

    def click(self, node_id: str) -> Optional[NetworkNodeSchema]:
        return self.controller.click(node_id) if self.controller else None

    def background_click(self) -> None:
        if self.controller:
            self.controller.background_click()

    def zoom_in(self) -> ZoomTransform:
        return self.viewport.zoom_in()

    def zoom_out(self) -> ZoomTransform:
        return self.viewport.zoom_out()

    def fit_to_view(self) -> ZoomTransform:
        return self.viewport.fit_to_view(self._frame_items())

    def _frame_items(self) -> List[Tuple[float, float, float]]:
        if self.simulation is None:
            return []
        return [(n.x, n.y, n.geometry.render_radius) for n in self.simulation.nodes]

    # ═══════════════════════════════════════════════════════════════════════════
    # SCENE
    # ═══════════════════════════════════════════════════════════════════════════

    def scene(self) -> Scene:
        """Describe the current frame: links first (drawn underneath), then nodes."""
        scene = Scene(width=self.width, height=self.height, transform=self.viewport.transform)
        if self.simulation is None or self.visible is None:
            return scene

        by_id = {n.id: n for n in self.simulation.nodes}
        for link in self.visible.links:
            source, target = by_id.get(link.source), by_id.get(link.target)
            if source is None or target is None:
                continue
            style = link_style(link)
            scene.links.append(
                LinkShape(
                    id=link.id,
                    x1=source.x,
                    y1=source.y,
                    x2=target.x,
                    y2=target.y,
                    stroke=style.stroke,
                    stroke_width=style.stroke_width,
                    dasharray=style.dasharray,
                )
            )

        for node in self.simulation.nodes:
            scene.nodes.append(self._node_shape(node))
        return scene

    def _node_shape(self, node: SimNode) -> NodeShape:
        geometry = node.geometry
        if node.kind == CONTACT:
            labels = [
                Label(node.data.name, "-10", geometry.font_size, geometry.font_weight),
                Label(node.data.role or "", "15", geometry.font_size, 400),
            ]
        else:
            labels = [Label(node.data.name, ".35em", geometry.font_size, geometry.font_weight)]
        return NodeShape(
            id=node.id,
            kind=node.kind,
            x=node.x,
            y=node.y,
            width=geometry.width,
            height=geometry.height,
            fill=node_fill(node.data, self._cluster_colors),
            stroke=NODE_STROKE,
            stroke_width=geometry.stroke_width,
            state=node.state,
            labels=labels,
        )

    def to_svg(self) -> str:
        return render_svg(self.scene())
