"""
Graph Module

Headless layout and rendering of the network projection.

Package Structure:
==================
    graph/
    ├── styles.py        ← Node geometry, fills, link styles
    ├── nodes.py         ← SimNode and NodeState (Free / Dragging / Pinned)
    ├── forces.py        ← Link, many-body, center and collide forces (numpy)
    ├── simulation.py    ← ForceSimulation (tick loop with cooling)
    ├── placement.py     ← Hub / ring / sector starting positions
    ├── layout_state.py  ← Saved positions, zoom transform, session flags
    ├── viewport.py      ← Zoom, pan, fit-to-view
    ├── interaction.py   ← Drag and click handling
    ├── filtering.py     ← Cluster filter and name/role search
    ├── renderer.py      ← NetworkRenderer orchestration and scene
    └── svg.py           ← SVG export

Usage:
======
    from portico.graph import NetworkRenderer, LayoutStateStore

    renderer = NetworkRenderer(layout_state=LayoutStateStore("layout.json"))
    renderer.render(network).settle()
    print(renderer.to_svg())
"""

from portico.graph.filtering import filter_network, matches_search
from portico.graph.forces import (
    CenterForce,
    CollideForce,
    LinkForce,
    ManyBodyForce,
    network_forces,
)
from portico.graph.interaction import DragController
from portico.graph.layout_state import (
    LayoutStateStore,
    NodePosition,
    SessionState,
    ZoomTransform,
)
from portico.graph.nodes import NodeState, SimNode
from portico.graph.placement import place_initial_positions, radial_sector_layout
from portico.graph.renderer import NetworkRenderer, Scene
from portico.graph.simulation import ForceSimulation
from portico.graph.svg import render_svg
from portico.graph.viewport import Viewport

__all__ = [
    # Filter / search
    "filter_network",
    "matches_search",
    # Forces
    "CenterForce",
    "CollideForce",
    "LinkForce",
    "ManyBodyForce",
    "network_forces",
    # Simulation
    "ForceSimulation",
    "NodeState",
    "SimNode",
    "place_initial_positions",
    "radial_sector_layout",
    # Interaction / viewport
    "DragController",
    "Viewport",
    # Layout state
    "LayoutStateStore",
    "NodePosition",
    "SessionState",
    "ZoomTransform",
    # Rendering
    "NetworkRenderer",
    "Scene",
    "render_svg",
]
