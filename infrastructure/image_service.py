"""Image decoding, rescaling and a small decoded-image cache.

Decoding goes through Qt's `QImageReader` first and falls back to Pillow for
files Qt's plugins reject. A failed decode is reported as `None`, never as a
null `QImage`.
"""

from __future__ import annotations

from collections import OrderedDict
from dataclasses import dataclass
import os
from typing import Any

from PIL import Image, ImageOps, UnidentifiedImageError
from PySide6.QtCore import Qt
from PySide6.QtGui import QImage, QImageReader
from loguru import logger

from core.constants import IMAGE_CACHE_SIZE
from core.services.interfaces import IImageService


def _compute_cache_key(path: str) -> str | None:
    """Cache key from path, mtime and size; None when the file cannot be stat'ed."""
    try:
        st = os.stat(path)
    except OSError:
        return None
    return f"{path}|{int(st.st_mtime_ns)}|{int(st.st_size)}"


@dataclass
class _MemCacheItem:
    key: str
    image: QImage


class _LRUCache:
    def __init__(self, capacity: int) -> None:
        self._cap = max(1, int(capacity or 1))
        self._data: OrderedDict[str, _MemCacheItem] = OrderedDict()

    def get(self, key: str) -> QImage | None:
        """Return cached QImage for key, moving it to the MRU position."""
        item = self._data.get(key)
        if not item:
            return None
        self._data.move_to_end(key)
        return item.image

    def put(self, key: str, image: QImage) -> None:
        """Insert or update `key` with `image`, evicting LRU when over capacity."""
        self._data[key] = _MemCacheItem(key, image)
        self._data.move_to_end(key)
        while len(self._data) > self._cap:
            self._data.popitem(last=False)

    def __len__(self) -> int:
        return len(self._data)


class ImageService(IImageService):
    """Decode images from disk and rescale them for display."""

    def __init__(self, settings: object | None = None) -> None:
        """Initialize the memory cache, sized from `image_cache_size` when settings are given."""
        capacity = IMAGE_CACHE_SIZE
        if settings is not None:
            try:
                raw = settings.get("image_cache_size", IMAGE_CACHE_SIZE)
                capacity = int(raw or IMAGE_CACHE_SIZE)
            except (ValueError, TypeError):
                capacity = IMAGE_CACHE_SIZE
        self._cache = _LRUCache(capacity)

    def load(self, path: str) -> QImage | None:
        """Decode `path` at full size, or return None when no decoder can read it."""
        key = _compute_cache_key(path)
        if key is None:
            logger.warning("Image not readable: {}", path)
            return None
        cached = self._cache.get(key)
        if cached is not None:
            return cached

        img = self._load_via_qt(path)
        if img is None:
            img = self._load_via_pillow(path)
        if img is None:
            logger.warning("Could not decode image: {}", path)
            return None
        self._cache.put(key, img)
        return img

    def scale(self, image: QImage, width: int, height: int) -> QImage:
        """Rescale `image` to exactly `width` x `height` with bilinear filtering."""
        return image.scaled(width, height, Qt.IgnoreAspectRatio, Qt.SmoothTransformation)

    # Internal helpers
    def _load_via_qt(self, path: str) -> QImage | None:
        reader = QImageReader(path)
        reader.setAutoTransform(True)
        img = reader.read()
        if img is None or img.isNull():
            logger.debug("Qt read failed for {}: {}", path, reader.errorString() or "null image")
            return None
        return img

    def _load_via_pillow(self, path: str) -> QImage | None:
        """Load image with Pillow, applying the EXIF orientation."""
        try:
            with Image.open(path) as im:
                try:
                    im = ImageOps.exif_transpose(im)
                except (OSError, ValueError, AttributeError):
                    pass
                return self._pil_to_qimage(im)
        except (OSError, ValueError, UnidentifiedImageError, Image.DecompressionBombError) as ex:
            logger.debug("Pillow load failed for {}: {}", path, ex)
            return None

    def _pil_to_qimage(self, pil_img: Any) -> QImage | None:
        """Convert a Pillow image to `QImage` and detach from the source buffer."""
        try:
            mode = pil_img.mode
            if mode not in ("RGBA", "RGB"):
                pil_img = pil_img.convert("RGBA")
                mode = pil_img.mode
            if mode == "RGB":
                data = pil_img.tobytes("raw", "RGB")
                qimg = QImage(
                    data, pil_img.width, pil_img.height, pil_img.width * 3, QImage.Format_RGB888
                )
            else:
                data = pil_img.tobytes("raw", "RGBA")
                qimg = QImage(
                    data, pil_img.width, pil_img.height, pil_img.width * 4, QImage.Format_RGBA8888
                )
            if qimg is None or qimg.isNull():
                return None
            return qimg.copy()
        except (ValueError, TypeError) as ex:
            logger.debug("Pillow to QImage conversion failed: {}", ex)
            return None
