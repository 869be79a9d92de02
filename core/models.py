"""Core domain models for the viewer state."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class CropState(Enum):
    """States of the crop region tracker."""

    IDLE = "idle"
    ACTIVE = "active"


@dataclass(frozen=True)
class CropRegion:
    """A fixed-radius circular region centered on the pointer."""

    center_x: int
    center_y: int
    radius: int

    @property
    def diameter(self) -> int:
        """Width and height of the circle's bounding square."""
        return self.radius * 2

    @property
    def bounds(self) -> tuple[int, int, int, int]:
        """Bounding square as (x, y, width, height)."""
        return (
            self.center_x - self.radius,
            self.center_y - self.radius,
            self.diameter,
            self.diameter,
        )
