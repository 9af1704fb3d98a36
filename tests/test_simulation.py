"""Tests for the force simulation and its forces."""

import math

import pytest

from portico.graph.forces import CenterForce, CollideForce, LinkForce, ManyBodyForce
from portico.graph.nodes import NodeState
from portico.graph.simulation import ForceSimulation
from tests.graph_helpers import cluster_node, contact_node, sim_node

pytestmark = pytest.mark.unit


def _distance(a, b):
    return math.hypot(a.x - b.x, a.y - b.y)


def test_simulation_cools_and_stops():
    nodes = [sim_node(contact_node("contact-1"), 0, 0), sim_node(contact_node("contact-2"), 50, 0)]
    sim = ForceSimulation(nodes)
    sim.force("charge", ManyBodyForce(strength=-30))

    ticks = sim.run()

    assert sim.settled
    assert not sim.running
    assert 290 <= ticks <= 301
    assert sim.step() is False


def test_alpha_target_keeps_simulation_warm():
    sim = ForceSimulation([sim_node(contact_node(), 0, 0)])
    sim.alpha_target(0.3)

    assert sim.run(max_iterations=500) == 500
    assert sim.running
    assert sim.alpha == pytest.approx(0.3, abs=0.01)


def test_link_force_pulls_toward_target_distance():
    a = sim_node(contact_node("contact-1"), 0, 0)
    b = sim_node(contact_node("contact-2"), 400, 0)
    sim = ForceSimulation([a, b])
    sim.force("link", LinkForce([("contact-1", "contact-2")], distance=150))

    sim.run()

    assert _distance(a, b) == pytest.approx(150, abs=5)


def test_link_force_ignores_unknown_endpoints():
    a = sim_node(contact_node("contact-1"), 0, 0)
    sim = ForceSimulation([a])
    sim.force("link", LinkForce([("contact-1", "contact-9")]))

    sim.tick(10)

    assert (a.x, a.y) == (0, 0)


def test_many_body_repels():
    a = sim_node(contact_node("contact-1"), 0, 0)
    b = sim_node(contact_node("contact-2"), 10, 0)
    sim = ForceSimulation([a, b])
    sim.force("charge", ManyBodyForce(strength=-400))

    sim.tick(50)

    assert _distance(a, b) > 100


def test_collide_separates_overlapping_nodes():
    a = sim_node(contact_node("contact-1"), 0, 0)
    b = sim_node(contact_node("contact-2"), 10, 0)
    sim = ForceSimulation([a, b])
    sim.force("collide", CollideForce(radius=85))

    sim.run()

    assert _distance(a, b) > 150


def test_center_force_moves_mean_to_center():
    a = sim_node(contact_node("contact-1"), 100, 100)
    b = sim_node(contact_node("contact-2"), 200, 100)
    sim = ForceSimulation([a, b])
    sim.force("center", CenterForce(400, 300))

    sim.tick()

    assert (a.x + b.x) / 2 == pytest.approx(400)
    assert (a.y + b.y) / 2 == pytest.approx(300)


def test_pinned_nodes_do_not_move():
    pinned = sim_node(cluster_node(), 0, 0)
    pinned.pin(300, 200)
    free = sim_node(contact_node(), 310, 200)
    sim = ForceSimulation([pinned, free])
    sim.force("charge", ManyBodyForce(strength=-400))
    sim.force("collide", CollideForce(radius=90))

    sim.run()

    assert (pinned.x, pinned.y) == (300, 200)
    assert pinned.state == NodeState.PINNED
    assert _distance(pinned, free) > 100


def test_free_nodes_are_clamped_to_canvas():
    node = sim_node(contact_node(), -500, 2000)
    sim = ForceSimulation([node], bounds=(800, 600))

    sim.tick()

    assert node.x == 85
    assert node.y == 600 - 55


def test_unplaced_nodes_get_starting_positions():
    node = sim_node(contact_node(), None, None)

    ForceSimulation([node])

    assert node.x is not None
    assert node.y is not None


def test_tick_listeners_and_removing_forces():
    sim = ForceSimulation([sim_node(contact_node(), 0, 0)])
    calls = []
    sim.on_tick(lambda s: calls.append(s.tick_count))
    sim.force("charge", ManyBodyForce())
    sim.force("charge", None)

    sim.tick(3)

    assert calls == [1, 2, 3]
    assert sim.get_force("charge") is None
