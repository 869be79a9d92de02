"""LayoutManager: Builds the viewer's central layout and window geometry."""

from __future__ import annotations

from pathlib import Path

from PySide6.QtCore import Qt
from PySide6.QtGui import QIcon
from PySide6.QtWidgets import (
    QHBoxLayout,
    QMainWindow,
    QPushButton,
    QScrollArea,
    QVBoxLayout,
    QWidget,
)
from loguru import logger

from app.views.constants import (
    DEFAULT_WINDOW_HEIGHT,
    DEFAULT_WINDOW_WIDTH,
    LAYOUT_SPACING_PX,
    NEXT_LABEL,
    OPEN_FOLDER_LABEL,
    PREV_LABEL,
    STYLE_SHEET,
)


class LayoutManager:
    """Creates the scroll area and navigation button row for the main window.

    Layout, top to bottom:
    - scrollable image area (stretches)
    - row of equally stretched buttons: previous, next, open folder
    """

    def __init__(self, main_window: QMainWindow) -> None:
        """Initialize with main window reference.

        Args:
            main_window: The QMainWindow to manage layout for
        """
        self.window = main_window
        self.scroll_area: QScrollArea | None = None
        self.buttons: dict[str, QPushButton] = {}

    def setup_main_layout(self, canvas: QWidget) -> QWidget:
        """Create the central widget holding `canvas` and the button row.

        Args:
            canvas: Widget that displays the image

        Returns:
            Central widget configured with the layout
        """
        central = QWidget(self.window)
        root = QVBoxLayout(central)
        root.setSpacing(LAYOUT_SPACING_PX)

        self.scroll_area = QScrollArea()
        self.scroll_area.setWidgetResizable(True)
        self.scroll_area.setHorizontalScrollBarPolicy(Qt.ScrollBarAsNeeded)
        self.scroll_area.setVerticalScrollBarPolicy(Qt.ScrollBarAsNeeded)
        self.scroll_area.setAlignment(Qt.AlignCenter)
        self.scroll_area.setWidget(canvas)
        root.addWidget(self.scroll_area, 1)

        row = QHBoxLayout()
        row.setSpacing(LAYOUT_SPACING_PX)
        labels = (("prev", PREV_LABEL), ("next", NEXT_LABEL), ("open", OPEN_FOLDER_LABEL))
        for name, label in labels:
            button = QPushButton(label)
            # Keep keyboard focus on the window so Ctrl+/- reach it
            button.setFocusPolicy(Qt.NoFocus)
            row.addWidget(button, 1)
            self.buttons[name] = button
        root.addLayout(row)

        return central

    def apply_theme(self) -> None:
        """Apply the light-grey / lime style sheet to the window."""
        self.window.setStyleSheet(STYLE_SHEET)

    def setup_initial_window_size(self) -> None:
        """Resize the window to its default geometry."""
        self.window.resize(DEFAULT_WINDOW_WIDTH, DEFAULT_WINDOW_HEIGHT)

    def apply_window_icon(self, icon_path: Path) -> bool:
        """Set the window icon from `icon_path` when the file exists."""
        if not icon_path.is_file():
            logger.debug("Window icon not found: {}", icon_path)
            return False
        icon = QIcon(str(icon_path))
        if icon.isNull():
            logger.warning("Window icon could not be loaded: {}", icon_path)
            return False
        self.window.setWindowIcon(icon)
        return True

    def get_scroll_area(self) -> QScrollArea | None:
        return self.scroll_area
