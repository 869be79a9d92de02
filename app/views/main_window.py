"""MainWindow: the single viewer window.

Wires Qt input events (buttons, keys, wheel, folder dialog) to the `MainVM`
and pushes rendered images into the `ImageCanvas`.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from PySide6.QtCore import QEvent, QObject, Qt, Signal
from PySide6.QtGui import QKeyEvent
from PySide6.QtWidgets import QFileDialog, QMainWindow, QMessageBox
from loguru import logger

from app.views.components.menu_controller import MenuController
from app.views.constants import STATUS_TIMEOUT_MS, WINDOW_ICON_FILE, WINDOW_TITLE
from app.views.layout.layout_manager import LayoutManager
from app.views.widgets.image_canvas import ImageCanvas
from core.constants import CROP_RADIUS
from core.services.crop_service import CropRegionTracker
from infrastructure import logging as app_logging

ZOOM_IN_KEYS = (Qt.Key_Plus, Qt.Key_Equal)
ZOOM_OUT_KEYS = (Qt.Key_Minus,)
ZOOM_RESET_KEYS = (Qt.Key_0,)


class MainWindow(QMainWindow):
    """Image browser window: scroll area, navigation buttons and menus."""

    # Emitted after each render with the displayed path (empty when none)
    imageShown = Signal(str)

    def __init__(
        self,
        vm: Any,
        settings: Any | None = None,
        icon_dir: Path | None = None,
        log_dir: str | None = None,
    ) -> None:
        """Initialize MainWindow.

        Args:
            vm: `MainVM` instance owning navigation and zoom state
            settings: Optional settings with dotted-key `get`
            icon_dir: Directory searched for the window icon
            log_dir: Log directory used by the Log menu
        """
        super().__init__()
        self._vm = vm
        self._log_dir = log_dir

        radius = CROP_RADIUS
        if settings is not None:
            radius = settings.get_int("crop.radius", CROP_RADIUS)
        self.canvas = ImageCanvas(CropRegionTracker(radius))

        self.menu_controller = MenuController(self)
        self.layout_manager = LayoutManager(self)

        self._setup_ui(icon_dir)
        self._connect_signals()
        self._refresh_status()

    def _setup_ui(self, icon_dir: Path | None) -> None:
        self.setWindowTitle(WINDOW_TITLE)
        central = self.layout_manager.setup_main_layout(self.canvas)
        self.setCentralWidget(central)
        self.layout_manager.apply_theme()
        self.layout_manager.setup_initial_window_size()
        if icon_dir is not None:
            self.layout_manager.apply_window_icon(icon_dir / WINDOW_ICON_FILE)
        self.menu_controller.setup_menus()
        self.setFocusPolicy(Qt.StrongFocus)

    def _connect_signals(self) -> None:
        buttons = self.layout_manager.buttons
        buttons["prev"].clicked.connect(self.show_previous)
        buttons["next"].clicked.connect(self.show_next)
        buttons["open"].clicked.connect(self.choose_folder)

        self.menu_controller.connect_actions(
            {
                "open_folder": self.choose_folder,
                "zoom_in": self.zoom_in,
                "zoom_out": self.zoom_out,
                "reset_zoom": self.reset_zoom,
                "open_latest_log": self._open_latest_log,
                "open_log_directory": self._open_log_directory,
            }
        )

        # Wheel over the image zooms instead of scrolling
        scroll_area = self.layout_manager.get_scroll_area()
        if scroll_area is not None:
            scroll_area.viewport().installEventFilter(self)

    # Public actions
    def load_folder(self, path: str) -> bool:
        """Scan `path` and show its first image. Returns False if the folder failed to open."""
        # Failures are logged by the view-model and surface in the status bar
        ok = self._vm.open_folder(path)
        self.update_image()
        return ok

    def choose_folder(self) -> None:
        """Ask for a folder and load it; cancelling leaves the current set untouched."""
        start = self._vm.folder or str(Path.home())
        folder = QFileDialog.getExistingDirectory(self, "Select Folder", start)
        if not folder:
            logger.debug("Folder selection cancelled")
            return
        self.load_folder(folder)

    def show_next(self) -> None:
        self._vm.show_next()
        self.update_image()

    def show_previous(self) -> None:
        self._vm.show_previous()
        self.update_image()

    def zoom_in(self) -> None:
        self._vm.zoom_in()
        self.update_image()

    def zoom_out(self) -> None:
        self._vm.zoom_out()
        self.update_image()

    def reset_zoom(self) -> None:
        self._vm.reset_zoom()
        self.update_image()

    def update_image(self) -> None:
        """Re-render the current image at the current zoom."""
        image = self._vm.render_current()
        self.canvas.set_image(image)
        self._refresh_status()
        path = self._vm.navigator.current() if image is not None else None
        self.imageShown.emit(path or "")

    # Qt event handlers
    def keyPressEvent(self, event: QKeyEvent) -> None:  # noqa: N802
        if event.modifiers() & Qt.ControlModifier:
            key = event.key()
            if key in ZOOM_IN_KEYS:
                self.zoom_in()
                event.accept()
                return
            if key in ZOOM_OUT_KEYS:
                self.zoom_out()
                event.accept()
                return
            if key in ZOOM_RESET_KEYS:
                self.reset_zoom()
                event.accept()
                return
        super().keyPressEvent(event)

    def eventFilter(self, obj: QObject, event: QEvent) -> bool:  # noqa: N802
        if event.type() == QEvent.Wheel:
            delta = event.angleDelta().y()
            if delta > 0:
                self.zoom_in()
            elif delta < 0:
                self.zoom_out()
            return True
        return super().eventFilter(obj, event)

    # Helpers
    def _refresh_status(self) -> None:
        self.statusBar().showMessage(self._vm.status_text, STATUS_TIMEOUT_MS)

    def _open_latest_log(self) -> None:
        if not app_logging.open_latest_log(self._log_dir):
            QMessageBox.information(self, "Log", "No log file found.")

    def _open_log_directory(self) -> None:
        if not app_logging.open_log_directory(self._log_dir):
            QMessageBox.information(self, "Log", "Could not open the log directory.")
