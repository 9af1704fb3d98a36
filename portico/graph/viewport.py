"""
Viewport

Pan/zoom state of the network view, with zoom controls, fit-to-view and
transform persistence.

Behavior:
=========
- Scale is clamped to SCALE_EXTENT (0.3× to 3×).
- Every change of transform is persisted to the layout state immediately.
- zoom_in()/zoom_out() scale by 1.3 / 0.7 around the viewport center, so
  the world point under the center stays put.
- initialize() runs once per session: it applies the saved transform if
  there is one, otherwise frames all nodes with fit_to_view(). Later
  calls in the same session leave the current transform alone, so user
  pan/zoom is not overridden on every re-render.

Fit To View:
============
    bbox   = node centers ± render radius, grown by PADDING (50) on each side
    k      = min(0.9 × W / bbox_w, 0.9 × H / bbox_h), clamped to SCALE_EXTENT
    offset = viewport center − k × bbox center
"""

from typing import Iterable, Optional, Tuple

from portico.graph.layout_state import (
    INITIAL_ZOOM_PERFORMED,
    LayoutStateStore,
    SessionState,
    ZoomTransform,
)


SCALE_EXTENT: Tuple[float, float] = (0.3, 3.0)
ZOOM_IN_FACTOR = 1.3
ZOOM_OUT_FACTOR = 0.7
FIT_PADDING = 50.0
FIT_FILL = 0.9

# (x, y, render radius)
FrameItem = Tuple[float, float, float]


class Viewport:
    """Zoom/pan transform of a canvas of ``width`` × ``height``."""

    def __init__(
        self,
        width: float,
        height: float,
        layout_state: Optional[LayoutStateStore] = None,
        session: Optional[SessionState] = None,
        scale_extent: Tuple[float, float] = SCALE_EXTENT,
    ):
        self.width = width
        self.height = height
        self.layout_state = layout_state or LayoutStateStore()
        self.session = session or SessionState()
        self.scale_extent = scale_extent
        self.transform = ZoomTransform()

    @property
    def center(self) -> Tuple[float, float]:
        return (self.width / 2, self.height / 2)

    def clamp_scale(self, k: float) -> float:
        low, high = self.scale_extent
        return max(low, min(high, k))

    def set_transform(self, transform: ZoomTransform) -> ZoomTransform:
        """Apply a transform (scale clamped) and persist it."""
        self.transform = ZoomTransform(x=transform.x, y=transform.y, k=self.clamp_scale(transform.k))
        self.layout_state.save_zoom_transform(self.transform)
        return self.transform

    # ═══════════════════════════════════════════════════════════════════════════
    # DIRECT MANIPULATION
    # ═══════════════════════════════════════════════════════════════════════════

    def scale_by(self, factor: float, anchor: Optional[Tuple[float, float]] = None) -> ZoomTransform:
        """
        Multiply the scale by ``factor`` keeping ``anchor`` (screen
        coordinates, default the center) fixed.
        """
        anchor = anchor or self.center
        world = self.transform.invert(anchor)
        k = self.clamp_scale(self.transform.k * factor)
        return self.set_transform(
            ZoomTransform(x=anchor[0] - world[0] * k, y=anchor[1] - world[1] * k, k=k)
        )

    def zoom_in(self) -> ZoomTransform:
        return self.scale_by(ZOOM_IN_FACTOR)

    def zoom_out(self) -> ZoomTransform:
        return self.scale_by(ZOOM_OUT_FACTOR)

    def pan_by(self, dx: float, dy: float) -> ZoomTransform:
        t = self.transform
        return self.set_transform(ZoomTransform(x=t.x + dx, y=t.y + dy, k=t.k))

    # ═══════════════════════════════════════════════════════════════════════════
    # FRAMING
    # ═══════════════════════════════════════════════════════════════════════════

    def compute_fit(self, items: Iterable[FrameItem], padding: float = FIT_PADDING) -> ZoomTransform:
        """The transform that frames every item; identity when there are none."""
        items = list(items)
        if not items:
            return ZoomTransform()
        min_x = min(x - r for x, _, r in items) - padding
        max_x = max(x + r for x, _, r in items) + padding
        min_y = min(y - r for _, y, r in items) - padding
        max_y = max(y + r for _, y, r in items) + padding
        box_w = max(max_x - min_x, 1e-9)
        box_h = max(max_y - min_y, 1e-9)

        k = self.clamp_scale(min(FIT_FILL * self.width / box_w, FIT_FILL * self.height / box_h))
        cx, cy = (min_x + max_x) / 2, (min_y + max_y) / 2
        return ZoomTransform(x=self.width / 2 - k * cx, y=self.height / 2 - k * cy, k=k)

    def fit_to_view(self, items: Iterable[FrameItem], padding: float = FIT_PADDING) -> ZoomTransform:
        return self.set_transform(self.compute_fit(items, padding))

    def initialize(self, items: Iterable[FrameItem]) -> ZoomTransform:
        """
        First framing of the session.

        Saved transform if present, else fit-to-view; afterwards the
        session flag keeps this from running again.
        """
        if self.session.get(INITIAL_ZOOM_PERFORMED):
            return self.transform

        saved = self.layout_state.load_zoom_transform()
        if saved is not None:
            self.set_transform(saved)
        else:
            self.fit_to_view(items)
        self.session.set(INITIAL_ZOOM_PERFORMED, True)
        return self.transform
