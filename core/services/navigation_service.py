"""Directory scan and wrap-around navigation over an image set."""

from __future__ import annotations

import os

from loguru import logger

from core.constants import IMAGE_EXTENSIONS
from core.services.interfaces import DirectoryScanError


class ImageSetNavigator:
    """Ordered list of image paths with a wrapping current index.

    Paths keep the filesystem enumeration order of `os.scandir`; they are not
    sorted, so the order may differ between platforms.
    """

    def __init__(self, extensions: tuple[str, ...] = IMAGE_EXTENSIONS) -> None:
        self._extensions = tuple(extensions)
        self._paths: list[str] = []
        self._index = 0

    def load_directory(self, path: str) -> list[str]:
        """Replace the set with the images found directly in `path`.

        The set is cleared before the scan, so a failed scan leaves it empty.

        Raises:
            DirectoryScanError: If the directory cannot be listed.
        """
        self._paths = []
        self._index = 0
        found: list[str] = []
        try:
            with os.scandir(path) as entries:
                for entry in entries:
                    # str.endswith is case-sensitive: ".JPG" is skipped
                    if entry.name.endswith(self._extensions):
                        found.append(os.path.join(path, entry.name))
        except OSError as ex:
            raise DirectoryScanError(str(path), ex.strerror or str(ex)) from ex
        self._paths = found
        logger.info("Scanned {}: {} image(s)", path, len(found))
        return list(found)

    def next(self) -> str | None:
        """Advance to the next image, wrapping to the first."""
        if not self._paths:
            return None
        self._index = (self._index + 1) % len(self._paths)
        return self._paths[self._index]

    def previous(self) -> str | None:
        """Step back to the previous image, wrapping to the last."""
        if not self._paths:
            return None
        size = len(self._paths)
        self._index = (self._index - 1 + size) % size
        return self._paths[self._index]

    def current(self) -> str | None:
        """Path at the current index, or None when the set is empty."""
        if not self._paths:
            return None
        return self._paths[self._index]

    @property
    def paths(self) -> list[str]:
        """Copy of the scanned paths in scan order."""
        return list(self._paths)

    @property
    def index(self) -> int:
        """Current index (0 when empty)."""
        return self._index

    @property
    def is_empty(self) -> bool:
        return not self._paths

    def __len__(self) -> int:
        return len(self._paths)
