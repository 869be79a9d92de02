"""Zoom factor arithmetic and display-size computation."""

from __future__ import annotations

from core.constants import (
    BASE_DISPLAY_HEIGHT,
    ZOOM_DEFAULT,
    ZOOM_MAX,
    ZOOM_MIN,
    ZOOM_STEP,
)


class ZoomController:
    """Multiplicative zoom clamped to `[min_factor, max_factor]`."""

    def __init__(
        self,
        step: float = ZOOM_STEP,
        base_height: int = BASE_DISPLAY_HEIGHT,
        min_factor: float = ZOOM_MIN,
        max_factor: float = ZOOM_MAX,
    ) -> None:
        """Create a controller at zoom 1.0.

        Args:
            step: Multiplier applied per zoom-in (divisor per zoom-out); must exceed 1.
            base_height: Display height in pixels at zoom 1.0.
            min_factor: Lower clamp for the factor.
            max_factor: Upper clamp for the factor.
        """
        if step <= 1.0:
            raise ValueError(f"zoom step must be greater than 1, got {step}")
        if not 0 < min_factor <= ZOOM_DEFAULT <= max_factor:
            raise ValueError(f"invalid zoom range [{min_factor}, {max_factor}]")
        if base_height <= 0:
            raise ValueError(f"base height must be positive, got {base_height}")
        self._step = float(step)
        self._base_height = int(base_height)
        self._min = float(min_factor)
        self._max = float(max_factor)
        self._factor = ZOOM_DEFAULT

    @property
    def factor(self) -> float:
        """Current zoom multiplier."""
        return self._factor

    @property
    def percent(self) -> int:
        """Current zoom as a rounded percentage."""
        return round(self._factor * 100)

    def zoom_in(self) -> float:
        """Multiply the factor by the step."""
        return self._set(self._factor * self._step)

    def zoom_out(self) -> float:
        """Divide the factor by the step."""
        return self._set(self._factor / self._step)

    def reset(self) -> float:
        """Return to zoom 1.0."""
        return self._set(ZOOM_DEFAULT)

    def target_size(self, original_width: int, original_height: int) -> tuple[int, int]:
        """Return (width, height) for displaying an image at the current zoom.

        Height is `round(base_height * factor)`; width keeps the source aspect ratio.
        """
        if original_width <= 0 or original_height <= 0:
            raise ValueError(f"invalid image size {original_width}x{original_height}")
        height = max(1, round(self._base_height * self._factor))
        width = max(1, round(original_width * height / original_height))
        return width, height

    def _set(self, value: float) -> float:
        self._factor = min(self._max, max(self._min, value))
        return self._factor
