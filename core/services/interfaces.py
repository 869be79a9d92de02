"""Core service interfaces and shared error types.

The UI layer depends on these rather than on concrete infrastructure classes,
so view-models can be exercised with lightweight fakes.
"""

from __future__ import annotations

from typing import Any


class DirectoryScanError(OSError):
    """Raised when an image directory cannot be opened for listing.

    Attributes:
        path: Directory that failed to open.
    """

    def __init__(self, path: str, reason: str | None = None) -> None:
        self.path = path
        self.reason = reason or "unknown error"
        super().__init__(f"Could not open directory: {path} ({self.reason})")


class IImageService:
    """Interface for decoding and rescaling images."""

    def load(self, path: str) -> Any | None:
        """Decode `path`; return an image exposing width()/height(), or None on failure."""
        raise NotImplementedError

    def scale(self, image: Any, width: int, height: int) -> Any:
        """Return `image` rescaled to exactly `width` x `height` with bilinear filtering."""
        raise NotImplementedError
