"""
Viewer defaults shared by the core services and the UI.

Values here are toolkit-independent; Qt-specific constants live in
`app.views.constants`.
"""

from __future__ import annotations

# Case-sensitive suffixes accepted by the directory scan
IMAGE_EXTENSIONS: tuple[str, ...] = (".jpg", ".png", ".jpeg")

# Rendering
BASE_DISPLAY_HEIGHT: int = 500  # display height at zoom 1.0

# Zoom
ZOOM_STEP: float = 1.1
ZOOM_DEFAULT: float = 1.0
ZOOM_MIN: float = 0.05
ZOOM_MAX: float = 20.0

# Crop marker
CROP_RADIUS: int = 100

# Decoded-image memory cache
IMAGE_CACHE_SIZE: int = 8
