"""
Force Simulation

A cooperative, tick-driven physics simulation over SimNodes.

Cooling Schedule:
=================
    alpha ← alpha + (alpha_target − alpha) × alpha_decay     (every tick)

With the defaults (alpha 1, alpha_min 0.001, alpha_decay 1 − 0.001^(1/300))
an undisturbed simulation settles in 300 ticks. Raising alpha_target
(e.g. to 0.3 while dragging) keeps it warm until the target is lowered.

Tick:
=====
1. Cool alpha toward alpha_target
2. Apply every force (in registration order) to the velocity arrays
3. Integrate: free nodes move by their decayed velocity; fixed nodes
   snap to (fx, fy) with zero velocity
4. Clamp free nodes inside the canvas (node half-extent from each edge)
5. Notify tick listeners

There is no background thread or timer. Callers drive the simulation
with tick(), step() or run(), and stop() it when the view goes away.

Usage:
======
    sim = ForceSimulation(nodes, bounds=(800, 600))
    for name, force in network_forces(links, 800, 600):
        sim.force(name, force)
    sim.run()
"""

import math
from typing import Callable, Dict, List, Optional, Sequence, Tuple

import numpy as np

from portico.graph.forces import Force
from portico.graph.nodes import SimNode
from portico.shared.core.logging import get_logger

logger = get_logger("portico.graph.simulation")


INITIAL_RADIUS = 10.0
INITIAL_ANGLE = math.pi * (3 - math.sqrt(5))


class ForceSimulation:
    """Tick-driven force simulation with d3-compatible cooling."""

    def __init__(
        self,
        nodes: Sequence[SimNode],
        alpha: float = 1.0,
        alpha_min: float = 0.001,
        alpha_decay: Optional[float] = None,
        alpha_target: float = 0.0,
        velocity_decay: float = 0.4,
        bounds: Optional[Tuple[float, float]] = None,
        seed: Optional[int] = 0,
    ):
        self.nodes: List[SimNode] = list(nodes)
        self.alpha = alpha
        self.alpha_min = alpha_min
        self.alpha_decay = 1 - math.pow(alpha_min, 1 / 300) if alpha_decay is None else alpha_decay
        self._alpha_target = alpha_target
        self.velocity_decay = velocity_decay
        self.bounds = bounds
        self.rng = np.random.default_rng(seed)
        self.running = True
        self.tick_count = 0
        self._forces: Dict[str, Force] = {}
        self._listeners: List[Callable[["ForceSimulation"], None]] = []
        self._initialize_positions()

    # ═══════════════════════════════════════════════════════════════════════════
    # CONFIGURATION
    # ═══════════════════════════════════════════════════════════════════════════

    def force(self, name: str, force: Optional[Force] = None) -> Optional[Force]:
        """
        Register, replace or (with force=None) remove a named force.

        Returns the force now registered under ``name``.
        """
        if force is None:
            self._forces.pop(name, None)
            return None
        force.initialize(self.nodes, self.rng)
        self._forces[name] = force
        return force

    def get_force(self, name: str) -> Optional[Force]:
        return self._forces.get(name)

    def alpha_target(self, value: float) -> "ForceSimulation":
        self._alpha_target = value
        return self

    @property
    def target(self) -> float:
        return self._alpha_target

    def on_tick(self, listener: Callable[["ForceSimulation"], None]) -> None:
        self._listeners.append(listener)

    def find(self, node_id: str) -> Optional[SimNode]:
        for node in self.nodes:
            if node.id == node_id:
                return node
        return None

    # ═══════════════════════════════════════════════════════════════════════════
    # LIFECYCLE
    # ═══════════════════════════════════════════════════════════════════════════

    def restart(self) -> "ForceSimulation":
        self.running = True
        return self

    def stop(self) -> "ForceSimulation":
        if self.running:
            logger.debug("Simulation stopped", ticks=self.tick_count, alpha=round(self.alpha, 5))
        self.running = False
        return self

    def clear_listeners(self) -> None:
        self._listeners.clear()

    @property
    def settled(self) -> bool:
        return self.alpha < self.alpha_min

    # ═══════════════════════════════════════════════════════════════════════════
    # STEPPING
    # ═══════════════════════════════════════════════════════════════════════════

    def tick(self, iterations: int = 1) -> "ForceSimulation":
        """Advance the simulation, whether or not it is running."""
        for _ in range(iterations):
            self.alpha += (self._alpha_target - self.alpha) * self.alpha_decay
            pos = np.array([[n.x, n.y] for n in self.nodes], dtype=float).reshape(-1, 2)
            vel = np.array([[n.vx, n.vy] for n in self.nodes], dtype=float).reshape(-1, 2)

            for force in self._forces.values():
                force.apply(pos, vel, self.alpha)

            for i, node in enumerate(self.nodes):
                if node.fx is None:
                    vel[i, 0] *= 1 - self.velocity_decay
                    node.x = float(pos[i, 0] + vel[i, 0])
                    node.vx = float(vel[i, 0])
                else:
                    node.x = node.fx
                    node.vx = 0.0
                if node.fy is None:
                    vel[i, 1] *= 1 - self.velocity_decay
                    node.y = float(pos[i, 1] + vel[i, 1])
                    node.vy = float(vel[i, 1])
                else:
                    node.y = node.fy
                    node.vy = 0.0

            self._clamp()
            self.tick_count += 1
            for listener in list(self._listeners):
                listener(self)
        return self

    def step(self) -> bool:
        """
        One frame of the cooperative loop.

        Ticks once if running; stops the simulation once alpha has cooled
        below alpha_min. Returns whether it is still running.
        """
        if not self.running:
            return False
        self.tick()
        if self.settled:
            self.stop()
        return self.running

    def run(self, max_iterations: int = 1000) -> int:
        """Step until settled, stopped, or ``max_iterations``; returns ticks taken."""
        taken = 0
        logger.debug("Simulation started", nodes=len(self.nodes), alpha=self.alpha)
        while taken < max_iterations and self.step():
            taken += 1
        return taken

    # ═══════════════════════════════════════════════════════════════════════════
    # HELPERS
    # ═══════════════════════════════════════════════════════════════════════════

    def _initialize_positions(self) -> None:
        # Unplaced nodes start on a phyllotaxis spiral around the origin
        for i, node in enumerate(self.nodes):
            if node.fx is not None:
                node.x = node.fx
            if node.fy is not None:
                node.y = node.fy
            if node.x is None or node.y is None:
                radius = INITIAL_RADIUS * math.sqrt(0.5 + i)
                angle = i * INITIAL_ANGLE
                node.x = radius * math.cos(angle) if node.x is None else node.x
                node.y = radius * math.sin(angle) if node.y is None else node.y

    def _clamp(self) -> None:
        if self.bounds is None:
            return
        width, height = self.bounds
        for node in self.nodes:
            if node.is_fixed:
                continue
            geometry = node.geometry
            margin_x = min(geometry.half_width, width / 2)
            margin_y = min(geometry.half_height, height / 2)
            node.x = max(margin_x, min(width - margin_x, node.x))
            node.y = max(margin_y, min(height - margin_y, node.y))
