"""Tests for zoom, pan and fit-to-view."""

import pytest

from portico.graph.layout_state import INITIAL_ZOOM_PERFORMED, ZoomTransform
from portico.graph.viewport import Viewport

pytestmark = pytest.mark.unit


@pytest.fixture
def viewport(layout_state, session) -> Viewport:
    return Viewport(800, 600, layout_state, session)


def test_zoom_in_scales_around_center(viewport, layout_state):
    t = viewport.zoom_in()

    assert t.k == pytest.approx(1.3)
    assert t.x == pytest.approx(-120)
    assert t.y == pytest.approx(-90)
    assert layout_state.load_zoom_transform() == t


def test_zoom_out_keeps_center_fixed(viewport):
    t = viewport.zoom_out()

    assert t.k == pytest.approx(0.7)
    assert t.apply((400, 300)) == pytest.approx((400, 300))


def test_scale_is_clamped(viewport):
    for _ in range(20):
        viewport.zoom_in()
    assert viewport.transform.k == pytest.approx(3.0)

    for _ in range(40):
        viewport.zoom_out()
    assert viewport.transform.k == pytest.approx(0.3)


def test_pan_by(viewport):
    viewport.pan_by(15, -5)

    assert (viewport.transform.x, viewport.transform.y, viewport.transform.k) == (15, -5, 1)


def test_fit_to_view_frames_all_items(viewport):
    t = viewport.fit_to_view([(0, 0, 50), (1000, 0, 50)])

    assert t.k == pytest.approx(0.6)
    assert t.x == pytest.approx(100)
    assert t.y == pytest.approx(300)


def test_fit_without_items_is_identity(viewport):
    assert viewport.compute_fit([]) == ZoomTransform()


def test_initialize_prefers_saved_transform_once(viewport, layout_state, session):
    layout_state.save_zoom_transform(ZoomTransform(x=5, y=6, k=2))

    t = viewport.initialize([(0, 0, 50)])

    assert (t.x, t.y, t.k) == (5, 6, 2)
    assert session.get(INITIAL_ZOOM_PERFORMED) is True

    viewport.zoom_in()
    after = viewport.initialize([(0, 0, 50)])
    assert after.k == pytest.approx(2.6)


def test_initialize_fits_without_saved_transform(viewport, session):
    t = viewport.initialize([(0, 0, 50), (1000, 0, 50)])

    assert t.k == pytest.approx(0.6)
    assert session.get(INITIAL_ZOOM_PERFORMED) is True


def test_initialize_runs_again_after_session_flag_removed(viewport, session):
    viewport.initialize([(0, 0, 50), (1000, 0, 50)])
    viewport.zoom_in()
    session.remove(INITIAL_ZOOM_PERFORMED)

    t = viewport.initialize([(0, 0, 50), (1000, 0, 50)])

    # the zoom_in was persisted, so the saved transform wins
    assert t.k == pytest.approx(0.6 * 1.3)
