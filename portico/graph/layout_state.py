"""
Layout State

Durable, non-authoritative cache of user layout choices.

Keys:
=====
    nodePositions     { "<node id>": {"x": float, "y": float}, ... }
    zoomTransform     {"x": float, "y": float, "k": float}
    refreshInterval   seconds between background refetches (int ≥ 1)

LayoutStateStore is a small JSON key-value store. With a path it is backed
by one JSON file, rewritten on every change; without a path it lives in
memory only.

Losing or corrupting this state never breaks anything: unreadable files
and malformed entries are logged and treated as absent, and positions for
node ids that no longer exist are simply never looked up.

SessionState holds per-session flags (``initialZoomPerformed``) that must
not survive a restart.

Usage:
======
    state = LayoutStateStore(settings.LAYOUT_STATE_PATH or None)
    state.save_position("contact-1", 120, 340)
    state.load_positions()          # {"contact-1": (120.0, 340.0)}
"""

import json
from pathlib import Path
from typing import Any, Dict, Optional, Tuple, Union

from pydantic import BaseModel, ValidationError

from portico.shared.core.logging import get_logger

logger = get_logger("portico.graph.layout_state")


NODE_POSITIONS_KEY = "nodePositions"
ZOOM_TRANSFORM_KEY = "zoomTransform"
REFRESH_INTERVAL_KEY = "refreshInterval"
INITIAL_ZOOM_PERFORMED = "initialZoomPerformed"

DEFAULT_REFRESH_INTERVAL = 10


class NodePosition(BaseModel):
    """Saved canvas coordinates of one node."""

    x: float
    y: float


class ZoomTransform(BaseModel):
    """
    Pan/zoom transform: screen = world × k + (x, y).
    """

    x: float = 0.0
    y: float = 0.0
    k: float = 1.0

    def apply(self, point: Tuple[float, float]) -> Tuple[float, float]:
        """World → screen."""
        return (point[0] * self.k + self.x, point[1] * self.k + self.y)

    def invert(self, point: Tuple[float, float]) -> Tuple[float, float]:
        """Screen → world."""
        return ((point[0] - self.x) / self.k, (point[1] - self.y) / self.k)

    def to_svg(self) -> str:
        return f"translate({self.x},{self.y}) scale({self.k})"


class LayoutStateStore:
    """JSON key-value store for layout state, optionally file backed."""

    def __init__(self, path: Optional[Union[str, Path]] = None):
        self.path = Path(path) if path else None
        self._data: Dict[str, Any] = self._read()

    # ═══════════════════════════════════════════════════════════════════════════
    # RAW KEYS
    # ═══════════════════════════════════════════════════════════════════════════

    def get(self, key: str, default: Any = None) -> Any:
        return self._data.get(key, default)

    def set(self, key: str, value: Any) -> None:
        self._data[key] = value
        self._write()

    def remove(self, key: str) -> None:
        if self._data.pop(key, None) is not None:
            self._write()

    # ═══════════════════════════════════════════════════════════════════════════
    # NODE POSITIONS
    # ═══════════════════════════════════════════════════════════════════════════

    def load_positions(self) -> Dict[str, Tuple[float, float]]:
        """All saved positions; malformed entries are skipped."""
        raw = self._data.get(NODE_POSITIONS_KEY)
        if not isinstance(raw, dict):
            return {}
        positions = {}
        for node_id, value in raw.items():
            try:
                position = NodePosition.model_validate(value)
            except ValidationError:
                logger.warning("Ignoring malformed saved position", node_id=node_id)
                continue
            positions[node_id] = (position.x, position.y)
        return positions

    def save_position(self, node_id: str, x: float, y: float) -> None:
        raw = self._data.get(NODE_POSITIONS_KEY)
        positions = dict(raw) if isinstance(raw, dict) else {}
        positions[node_id] = NodePosition(x=x, y=y).model_dump()
        self.set(NODE_POSITIONS_KEY, positions)

    def forget_position(self, node_id: str) -> None:
        raw = self._data.get(NODE_POSITIONS_KEY)
        if isinstance(raw, dict) and node_id in raw:
            positions = dict(raw)
            del positions[node_id]
            self.set(NODE_POSITIONS_KEY, positions)

    # ═══════════════════════════════════════════════════════════════════════════
    # ZOOM TRANSFORM
    # ═══════════════════════════════════════════════════════════════════════════

    def load_zoom_transform(self) -> Optional[ZoomTransform]:
        raw = self._data.get(ZOOM_TRANSFORM_KEY)
        if raw is None:
            return None
        try:
            return ZoomTransform.model_validate(raw)
        except ValidationError:
            logger.warning("Ignoring malformed saved zoom transform")
            return None

    def save_zoom_transform(self, transform: ZoomTransform) -> None:
        self.set(ZOOM_TRANSFORM_KEY, transform.model_dump())

    # ═══════════════════════════════════════════════════════════════════════════
    # REFRESH INTERVAL
    # ═══════════════════════════════════════════════════════════════════════════

    def load_refresh_interval(self, default: int = DEFAULT_REFRESH_INTERVAL) -> int:
        """Refresh interval in seconds; anything unusable falls back to the default."""
        try:
            value = int(self._data.get(REFRESH_INTERVAL_KEY, default))
        except (TypeError, ValueError):
            return default
        return value if value >= 1 else default

    def save_refresh_interval(self, seconds: int) -> int:
        """Persist the interval, raised to at least one second."""
        value = max(1, int(seconds))
        self.set(REFRESH_INTERVAL_KEY, value)
        return value

    # ═══════════════════════════════════════════════════════════════════════════
    # PERSISTENCE
    # ═══════════════════════════════════════════════════════════════════════════

    def _read(self) -> Dict[str, Any]:
        if self.path is None or not self.path.exists():
            return {}
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            logger.warning("Failed to read layout state", path=str(self.path), error=str(e))
            return {}
        if not isinstance(data, dict):
            logger.warning("Layout state is not a JSON object", path=str(self.path))
            return {}
        return data

    def _write(self) -> None:
        if self.path is None:
            return
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(json.dumps(self._data, indent=2), encoding="utf-8")
        except OSError as e:
            logger.warning("Failed to save layout state", path=str(self.path), error=str(e))


class SessionState:
    """Per-session flags, kept in memory only."""

    def __init__(self):
        self._flags: Dict[str, Any] = {}

    def get(self, key: str, default: Any = None) -> Any:
        return self._flags.get(key, default)

    def set(self, key: str, value: Any = True) -> None:
        self._flags[key] = value

    def remove(self, key: str) -> None:
        self._flags.pop(key, None)

    def __contains__(self, key: str) -> bool:
        return key in self._flags
