"""Tests for the network renderer: layout lifecycle, dragging, clicks and scene output."""

import xml.etree.ElementTree as ET

import pytest

from portico.graph.interaction import DRAG_ALPHA_TARGET
from portico.graph.layout_state import INITIAL_ZOOM_PERFORMED, SessionState
from portico.graph.nodes import NodeState
from portico.graph.renderer import NetworkRenderer

pytestmark = pytest.mark.unit


@pytest.fixture
def renderer(layout_state, session):
    selected = []
    cleared = []
    r = NetworkRenderer(
        width=800,
        height=600,
        layout_state=layout_state,
        session=session,
        on_select=selected.append,
        on_clear=lambda: cleared.append(True),
    )
    r.selected = selected
    r.cleared = cleared
    return r


# =============================================================================
# Lifecycle
# =============================================================================

def test_render_places_hub_and_marks_session(renderer, sample_network, session):
    renderer.render(sample_network)

    hub = renderer.node("portico")
    assert (hub.x, hub.y) == (400, 300)
    assert hub.state == NodeState.PINNED
    assert session.get(INITIAL_ZOOM_PERFORMED) is True
    assert renderer.is_running


def test_settle_stops_simulation_and_keeps_pinned_nodes(renderer, sample_network):
    renderer.render(sample_network)
    cluster = renderer.node("cluster-5")
    before = (cluster.x, cluster.y)

    ticks = renderer.settle()

    assert 0 < ticks <= 1000
    assert not renderer.is_running
    assert (cluster.x, cluster.y) == before
    assert renderer.step() is False


def test_rerender_stops_previous_simulation(renderer, sample_network):
    renderer.render(sample_network)
    first = renderer.simulation

    renderer.render(sample_network)

    assert first.running is False
    assert renderer.simulation is not first
    assert renderer.is_running


def test_destroy_stops_simulation(renderer, sample_network):
    renderer.render(sample_network)
    simulation = renderer.simulation

    renderer.destroy()

    assert simulation.running is False
    assert renderer.positions() == {}
    assert renderer.scene().nodes == []


def test_filters_hide_nodes(renderer, sample_network):
    renderer.render(sample_network, active_cluster_ids={5}, search_term="ana")

    assert set(renderer.positions()) == {"portico", "cluster-5", "contact-1"}


# =============================================================================
# Dragging
# =============================================================================

def test_dragged_position_is_persisted_and_restored_pinned(renderer, sample_network, layout_state):
    renderer.render(sample_network)
    renderer.drag_start("contact-1")
    renderer.drag(120, 340)
    renderer.drag_end()

    assert layout_state.load_positions()["contact-1"] == (120.0, 340.0)

    reloaded = NetworkRenderer(width=800, height=600, layout_state=layout_state, session=SessionState())
    reloaded.render(sample_network)
    node = reloaded.node("contact-1")
    assert node.state == NodeState.PINNED
    assert (node.x, node.y) == (120.0, 340.0)

    reloaded.settle()
    assert (node.x, node.y) == (120.0, 340.0)


def test_drag_heats_and_cools_simulation(renderer, sample_network):
    renderer.render(sample_network)
    renderer.settle()

    node = renderer.drag_start("contact-2")
    assert node.state == NodeState.DRAGGING
    assert renderer.simulation.target == DRAG_ALPHA_TARGET
    assert renderer.is_running

    renderer.drag(500, 100)
    renderer.step()
    assert (node.x, node.y) == (500, 100)

    renderer.drag_end()
    assert renderer.simulation.target == 0
    assert node.state == NodeState.PINNED
    assert (node.fx, node.fy) == (500, 100)


def test_hub_cannot_be_dragged(renderer, sample_network, layout_state):
    renderer.render(sample_network)

    assert renderer.drag_start("portico") is None
    assert renderer.drag(10, 10) is None
    assert renderer.drag_end() is None
    assert "portico" not in layout_state.load_positions()


# =============================================================================
# Clicks
# =============================================================================

def test_click_selects_node(renderer, sample_network):
    renderer.render(sample_network)

    data = renderer.click("contact-3")

    assert data.name == "Max Mustermann"
    assert [n.id for n in renderer.selected] == ["contact-3"]


def test_click_after_moving_drag_is_suppressed(renderer, sample_network):
    renderer.render(sample_network)
    renderer.drag_start("contact-1")
    renderer.drag(700, 500)
    renderer.drag_end()

    assert renderer.click("contact-1") is None
    assert renderer.selected == []
    # only the click that ends the drag is swallowed
    assert renderer.click("contact-1") is not None


def test_moving_drag_only_swallows_click_on_dragged_node(renderer, sample_network):
    renderer.render(sample_network)
    renderer.drag_start("contact-1")
    renderer.drag(700, 500)
    renderer.drag_end()

    assert renderer.click("contact-3") is not None
    assert renderer.click("contact-1") is not None


def test_new_drag_clears_pending_click_suppression(renderer, sample_network):
    renderer.render(sample_network)
    renderer.drag_start("contact-1")
    renderer.drag(700, 500)
    renderer.drag_end()

    renderer.drag_start("contact-2")
    renderer.drag_end()

    assert renderer.click("contact-1") is not None
    assert [n.id for n in renderer.selected] == ["contact-1"]


def test_click_after_drag_without_movement_selects(renderer, sample_network):
    renderer.render(sample_network)
    node = renderer.node("contact-1")
    renderer.drag_start("contact-1")
    renderer.drag(node.x + 1, node.y)
    renderer.drag_end()

    assert renderer.click("contact-1") is not None


def test_background_click_clears_selection(renderer, sample_network):
    renderer.render(sample_network)

    renderer.background_click()

    assert renderer.cleared == [True]


# =============================================================================
# Scene
# =============================================================================

def test_scene_fills_and_link_styles(renderer, sample_network):
    renderer.render(sample_network)

    scene = renderer.scene()
    nodes = {n.id: n for n in scene.nodes}

    assert nodes["contact-1"].fill == "rgba(1, 2, 3, 0.65)"
    assert nodes["portico"].fill == "rgba(255, 144, 104, 0.7)"
    assert nodes["cluster-6"].fill == "rgba(10, 20, 30, 0.55)"
    assert [label.text for label in nodes["contact-1"].labels] == ["Ana García", "Account Executive"]
    assert len(scene.links) == 5
    hub_links = [l for l in scene.links if l.dasharray == "5,3"]
    assert len(hub_links) == 2


def test_to_svg_is_well_formed(renderer, sample_network):
    renderer.render(sample_network)

    svg = renderer.to_svg()
    root = ET.fromstring(svg)

    assert 'data-id="contact-1"' in svg
    ids = [g.get("data-id") for g in root.iter("{http://www.w3.org/2000/svg}g") if g.get("data-id")]
    assert set(ids) == {"portico", "cluster-5", "cluster-6", "contact-1", "contact-2", "contact-3"}
