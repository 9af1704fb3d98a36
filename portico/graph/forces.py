"""
Forces

The four forces of the network layout, vectorized with numpy.

Every force follows the same two-step protocol used by ForceSimulation:

    force.initialize(nodes, rng)       # once, when attached or when nodes change
    force.apply(pos, vel, alpha)       # every tick, mutating vel (or pos) in place

``pos`` and ``vel`` are (n, 2) float arrays in node order.

Forces:
=======
- LinkForce:     spring toward a target distance along every link
                 (strength 1 / min(degree), bias toward the lighter end)
- ManyBodyForce: pairwise repulsion, per-node strength (contacts push harder)
- CenterForce:   translates the whole layout so its mean sits at (x, y)
- CollideForce:  separates nodes whose collision circles overlap
"""

from typing import Callable, Dict, List, Optional, Sequence, Tuple, Union

import numpy as np

from portico.graph.nodes import SimNode
from portico.graph.styles import CONTACT


NodeValue = Union[float, Callable[[SimNode], float]]


def _per_node(value: NodeValue, nodes: Sequence[SimNode]) -> np.ndarray:
    if callable(value):
        return np.array([value(node) for node in nodes], dtype=float)
    return np.full(len(nodes), float(value))


def _jiggle(rng: np.random.Generator, shape) -> np.ndarray:
    return (rng.random(shape) - 0.5) * 1e-6


class Force:
    """Base class; subclasses override apply()."""

    def initialize(self, nodes: Sequence[SimNode], rng: np.random.Generator) -> None:
        self.nodes = list(nodes)
        self.rng = rng

    def apply(self, pos: np.ndarray, vel: np.ndarray, alpha: float) -> None:
        raise NotImplementedError


class LinkForce(Force):
    """
    Spring force along links.

    Args:
        links: (source_id, target_id) pairs; pairs naming unknown nodes are ignored
        distance: Target separation
    """

    def __init__(self, links: Sequence[Tuple[str, str]], distance: float = 150.0, iterations: int = 1):
        self.links = list(links)
        self.distance = distance
        self.iterations = iterations
        self._pairs = np.empty((0, 2), dtype=int)
        self._strengths = np.empty(0)
        self._bias = np.empty(0)

    def initialize(self, nodes: Sequence[SimNode], rng: np.random.Generator) -> None:
        super().initialize(nodes, rng)
        index: Dict[str, int] = {node.id: i for i, node in enumerate(self.nodes)}
        pairs = [
            (index[s], index[t])
            for s, t in self.links
            if s in index and t in index and s != t
        ]
        self._pairs = np.array(pairs, dtype=int).reshape(-1, 2)

        count = np.zeros(len(self.nodes))
        for s, t in self._pairs:
            count[s] += 1
            count[t] += 1
        if len(self._pairs):
            cs = count[self._pairs[:, 0]]
            ct = count[self._pairs[:, 1]]
            self._strengths = 1.0 / np.minimum(cs, ct)
            self._bias = cs / (cs + ct)
        else:
            self._strengths = np.empty(0)
            self._bias = np.empty(0)

    def apply(self, pos: np.ndarray, vel: np.ndarray, alpha: float) -> None:
        # Links are applied one after another; each sees the previous one's velocity change
        for _ in range(self.iterations):
            for k, (s, t) in enumerate(self._pairs):
                delta = pos[t] + vel[t] - pos[s] - vel[s]
                if not delta.any():
                    delta = _jiggle(self.rng, 2)
                length = float(np.hypot(*delta))
                scale = (length - self.distance) / length * alpha * self._strengths[k]
                delta = delta * scale
                vel[t] -= delta * self._bias[k]
                vel[s] += delta * (1 - self._bias[k])


class ManyBodyForce(Force):
    """
    Pairwise charge between all nodes (negative strength repels).

    Computed exactly in O(n²); network sizes here stay in the hundreds.
    """

    def __init__(self, strength: NodeValue = -30.0, distance_min: float = 1.0, distance_max: Optional[float] = None):
        self.strength = strength
        self.distance_min2 = distance_min * distance_min
        self.distance_max2 = np.inf if distance_max is None else distance_max * distance_max
        self._strengths = np.empty(0)

    def initialize(self, nodes: Sequence[SimNode], rng: np.random.Generator) -> None:
        super().initialize(nodes, rng)
        self._strengths = _per_node(self.strength, self.nodes)

    def apply(self, pos: np.ndarray, vel: np.ndarray, alpha: float) -> None:
        n = len(pos)
        if n < 2:
            return
        # delta[i, j] points from i to j
        delta = pos[None, :, :] - pos[:, None, :]
        coincident = ~delta.any(axis=2)
        np.fill_diagonal(coincident, False)
        if coincident.any():
            delta[coincident] = _jiggle(self.rng, (int(coincident.sum()), 2))
        dist2 = (delta ** 2).sum(axis=2)
        np.fill_diagonal(dist2, np.inf)
        dist2 = np.where(dist2 < self.distance_min2, np.sqrt(self.distance_min2 * dist2), dist2)
        weight = np.where(dist2 < self.distance_max2, self._strengths[None, :] * alpha / dist2, 0.0)
        vel += (delta * weight[:, :, None]).sum(axis=1)


class CenterForce(Force):
    """Shift every node so the mean position lands on (x, y)."""

    def __init__(self, x: float = 0.0, y: float = 0.0, strength: float = 1.0):
        self.x = x
        self.y = y
        self.strength = strength

    def apply(self, pos: np.ndarray, vel: np.ndarray, alpha: float) -> None:
        if not len(pos):
            return
        shift = (pos.mean(axis=0) - np.array([self.x, self.y])) * self.strength
        pos -= shift


class CollideForce(Force):
    """
    Push apart nodes whose circles overlap.

    The smaller node moves more: node i takes rj² / (ri² + rj²) of the
    separation.
    """

    def __init__(self, radius: NodeValue = 1.0, strength: float = 1.0, iterations: int = 1):
        self.radius = radius
        self.strength = strength
        self.iterations = iterations
        self._radii = np.empty(0)

    def initialize(self, nodes: Sequence[SimNode], rng: np.random.Generator) -> None:
        super().initialize(nodes, rng)
        self._radii = _per_node(self.radius, self.nodes)

    def apply(self, pos: np.ndarray, vel: np.ndarray, alpha: float) -> None:
        n = len(pos)
        if n < 2:
            return
        r = self._radii
        r2 = r * r
        upper = np.triu(np.ones((n, n), dtype=bool), k=1)
        for _ in range(self.iterations):
            predicted = pos + vel
            # delta[i, j] points from j to i
            delta = predicted[:, None, :] - predicted[None, :, :]
            coincident = upper & ~delta.any(axis=2)
            if coincident.any():
                delta[coincident] = _jiggle(self.rng, (int(coincident.sum()), 2))
            dist = np.sqrt((delta ** 2).sum(axis=2))
            reach = r[:, None] + r[None, :]
            overlap = upper & (dist < reach)
            if not overlap.any():
                continue
            safe = np.where(overlap, dist, 1.0)
            scale = np.where(overlap, (reach - safe) / safe * self.strength, 0.0)
            push = delta * scale[:, :, None]
            share = r2[None, :] / (r2[:, None] + r2[None, :])
            vel += (push * share[:, :, None]).sum(axis=1)
            vel -= (push * (1 - share)[:, :, None]).sum(axis=0)


def default_charge(node: SimNode) -> float:
    """Contacts repel strongly so they spread around their cluster."""
    return -400.0 if node.kind == CONTACT else -100.0


def default_collide_radius(node: SimNode) -> float:
    return node.geometry.collide_radius


def network_forces(
    links: Sequence[Tuple[str, str]],
    width: float,
    height: float,
) -> List[Tuple[str, Force]]:
    """The standard force set of the network view, by name."""
    return [
        ("link", LinkForce(links, distance=150.0)),
        ("charge", ManyBodyForce(strength=default_charge)),
        ("center", CenterForce(width / 2, height / 2)),
        ("collide", CollideForce(radius=default_collide_radius)),
    ]
