"""
UI/view constants centralized for reuse across view modules.

Toolkit-independent defaults (zoom step, base height, crop radius) live in
`core.constants`.
"""

from __future__ import annotations

from PySide6.QtGui import QColor

WINDOW_TITLE: str = "GIViewer - GTG's Image Viewer"
WINDOW_ICON_FILE: str = "giviewer.png"
DEFAULT_WINDOW_WIDTH: int = 800
DEFAULT_WINDOW_HEIGHT: int = 600

# Button labels
PREV_LABEL: str = "<"
NEXT_LABEL: str = ">"
OPEN_FOLDER_LABEL: str = "Open Folder"

LAYOUT_SPACING_PX: int = 5

# Crop overlay: red at 50% opacity
CROP_OVERLAY_COLOR: QColor = QColor(255, 0, 0, 128)

STATUS_TIMEOUT_MS: int = 0  # 0 keeps the message until replaced

STYLE_SHEET: str = (
    "QMainWindow { background-color: lightgrey; }"
    "QPushButton { background-color: lime; color: black; border-radius: 5px;"
    " padding: 10px; font-size: 14px; }"
    "QPushButton:hover { background-color: green; }"
    "QPushButton:pressed { background-color: darkgreen; }"
)
