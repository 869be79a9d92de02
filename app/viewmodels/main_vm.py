"""ViewModel orchestrating the image set, zoom and rendering pipeline."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from loguru import logger

from core.services.interfaces import DirectoryScanError, IImageService
from core.services.navigation_service import ImageSetNavigator
from core.services.zoom_service import ZoomController


class MainVM:
    """Main application view-model.

    Owns the navigator and zoom state and turns the current path into a
    display-ready image through an `IImageService`. Holds no Qt widgets.
    """

    def __init__(
        self,
        image_service: IImageService,
        navigator: ImageSetNavigator | None = None,
        zoom: ZoomController | None = None,
    ) -> None:
        """Create a MainVM.

        Args:
            image_service: Service with `load(path)` and `scale(image, w, h)`.
            navigator: Image set navigator (defaults to `ImageSetNavigator`).
            zoom: Zoom controller (defaults to `ZoomController`).
        """
        self._images = image_service
        self._nav = navigator or ImageSetNavigator()
        self._zoom = zoom or ZoomController()
        self._folder: str | None = None
        self._last_error: str | None = None

    @property
    def navigator(self) -> ImageSetNavigator:
        return self._nav

    @property
    def zoom(self) -> ZoomController:
        return self._zoom

    @property
    def folder(self) -> str | None:
        """The last folder passed to `open_folder`."""
        return self._folder

    @property
    def last_error(self) -> str | None:
        """Message from the most recent failed action, cleared on success."""
        return self._last_error

    def open_folder(self, path: str) -> bool:
        """Scan `path` for images. Returns False when the folder could not be opened."""
        self._folder = path
        try:
            found = self._nav.load_directory(path)
        except DirectoryScanError as ex:
            logger.error("Could not open directory: {} ({})", ex.path, ex.reason)
            self._last_error = str(ex)
            return False
        self._last_error = None
        if not found:
            logger.info("No images found in {}", path)
        return True

    def show_next(self) -> str | None:
        """Advance to the next image; None when the set is empty."""
        return self._nav.next()

    def show_previous(self) -> str | None:
        """Step back to the previous image; None when the set is empty."""
        return self._nav.previous()

    def zoom_in(self) -> float:
        return self._zoom.zoom_in()

    def zoom_out(self) -> float:
        return self._zoom.zoom_out()

    def reset_zoom(self) -> float:
        return self._zoom.reset()

    def render_current(self) -> Any | None:
        """Decode and scale the current image, or None if there is nothing to show."""
        path = self._nav.current()
        if path is None:
            return None
        source = self._images.load(path)
        if source is None:
            logger.warning("No image available for {}", path)
            return None
        width, height = self._zoom.target_size(source.width(), source.height())
        return self._images.scale(source, width, height)

    @property
    def current_file_name(self) -> str | None:
        """Base name of the current path."""
        path = self._nav.current()
        return Path(path).name if path else None

    @property
    def status_text(self) -> str:
        """One-line summary for the status bar."""
        if self._last_error:
            return self._last_error
        if self._nav.is_empty:
            return "No images"
        return (
            f"{self._nav.index + 1}/{len(self._nav)}  "
            f"{self.current_file_name}  {self._zoom.percent}%"
        )
