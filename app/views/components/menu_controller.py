"""MenuController: Manages menu creation and action connections."""

from __future__ import annotations

from collections.abc import Callable

from PySide6.QtGui import QAction
from PySide6.QtWidgets import QMainWindow, QMenuBar

# (menu title, [(action name, action text) or None for a separator])
_MENU_LAYOUT: list[tuple[str, list[tuple[str, str] | None]]] = [
    ("File", [("open_folder", "Open Folder…"), None, ("exit", "Exit")]),
    ("View", [("zoom_in", "Zoom In"), ("zoom_out", "Zoom Out"), ("reset_zoom", "Reset Zoom")]),
    (
        "Log",
        [("open_latest_log", "Open Latest Log"), ("open_log_directory", "Open Log Directory")],
    ),
]


class MenuController:
    """Manages main window menu creation and action connections.

    Zoom actions carry no shortcuts: Ctrl+plus/equal/minus/0 are handled by the
    window's key handler so the keyboard and menu paths stay identical.
    """

    def __init__(self, main_window: QMainWindow) -> None:
        """Initialize with main window reference.

        Args:
            main_window: The QMainWindow to create menus for
        """
        self.window = main_window
        self.actions: dict[str, QAction] = {}

    def setup_menus(self) -> dict[str, QAction]:
        """Create all menus and return action references.

        Returns:
            Dictionary mapping action names to QAction instances
        """
        menubar = QMenuBar(self.window)
        for title, entries in _MENU_LAYOUT:
            menu = menubar.addMenu(title)
            for entry in entries:
                if entry is None:
                    menu.addSeparator()
                    continue
                name, text = entry
                self.actions[name] = menu.addAction(text)
        self.window.setMenuBar(menubar)
        return self.actions

    def connect_actions(self, handlers: dict[str, Callable]) -> None:
        """Connect menu actions to their handler methods.

        Args:
            handlers: Dictionary mapping action names to handler callables
        """
        for name, action in self.actions.items():
            handler = handlers.get(name)
            if handler is not None:
                action.triggered.connect(handler)
            elif name == "exit":
                action.triggered.connect(self.window.close)

    def get_action(self, name: str) -> QAction | None:
        """Get a specific action by name."""
        return self.actions.get(name)

