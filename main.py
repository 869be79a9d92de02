from __future__ import annotations

from pathlib import Path
import sys

from PySide6.QtWidgets import QApplication
from loguru import logger

from app.viewmodels.main_vm import MainVM
from app.views.main_window import MainWindow
from core.constants import BASE_DISPLAY_HEIGHT, ZOOM_MAX, ZOOM_MIN, ZOOM_STEP
from core.services.navigation_service import ImageSetNavigator
from core.services.zoom_service import ZoomController
from infrastructure.image_service import ImageService
from infrastructure.logging import get_log_directory, init_logging
from infrastructure.settings import JsonSettings

BASE_DIR = Path(__file__).parent


def _build_zoom(settings: JsonSettings) -> ZoomController:
    """Zoom controller from settings, falling back to defaults when the values are unusable."""
    try:
        return ZoomController(
            step=settings.get_float("zoom.step", ZOOM_STEP),
            base_height=settings.get_int("viewer.base_height", BASE_DISPLAY_HEIGHT),
            min_factor=settings.get_float("zoom.min", ZOOM_MIN),
            max_factor=settings.get_float("zoom.max", ZOOM_MAX),
        )
    except ValueError as ex:
        logger.warning("Invalid zoom settings ({}); using defaults", ex)
        return ZoomController()


def main() -> int:
    settings = JsonSettings(BASE_DIR / "settings.json", required=False)
    log_dir = settings.get("logging.dir") or get_log_directory()
    init_logging(log_dir, level=str(settings.get("logging.level", "INFO")))
    logger.info("Starting GIViewer")

    # No command-line options; Qt still gets argv for its own flags
    app = QApplication(sys.argv)

    vm = MainVM(ImageService(settings), navigator=ImageSetNavigator(), zoom=_build_zoom(settings))
    win = MainWindow(vm=vm, settings=settings, icon_dir=BASE_DIR, log_dir=log_dir)
    win.show()

    code = app.exec()
    logger.info("Exiting with code {}", code)
    return code


if __name__ == "__main__":
    raise SystemExit(main())
