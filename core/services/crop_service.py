"""State machine behind the circular crop marker.

The marker is visual only: the tracker records where the circle is, the canvas
draws it, and no pixel data is ever extracted.
"""

from __future__ import annotations

from core.constants import CROP_RADIUS
from core.models import CropRegion, CropState


class CropRegionTracker:
    """Tracks a fixed-radius circle that follows the pointer during a drag."""

    def __init__(self, radius: int = CROP_RADIUS) -> None:
        if radius <= 0:
            raise ValueError(f"crop radius must be positive, got {radius}")
        self._radius = int(radius)
        self._state = CropState.IDLE
        self._center: tuple[int, int] = (0, 0)

    @property
    def state(self) -> CropState:
        return self._state

    @property
    def is_active(self) -> bool:
        return self._state is CropState.ACTIVE

    @property
    def radius(self) -> int:
        return self._radius

    @property
    def region(self) -> CropRegion | None:
        """Current region while active, None while idle."""
        if not self.is_active:
            return None
        return CropRegion(self._center[0], self._center[1], self._radius)

    def begin(self, x: int, y: int) -> None:
        """Enter the active state centered at (x, y)."""
        self._state = CropState.ACTIVE
        self._center = (int(x), int(y))

    def move(self, x: int, y: int) -> bool:
        """Follow the pointer; return True when a repaint is needed."""
        if not self.is_active:
            return False
        self._center = (int(x), int(y))
        return True

    def finish(self) -> bool:
        """Return to idle; True if the tracker was active."""
        if not self.is_active:
            return False
        self._state = CropState.IDLE
        return True
