"""Image display label that also draws the circular crop marker."""

from __future__ import annotations

from PySide6.QtCore import QRect, Qt
from PySide6.QtGui import QImage, QMouseEvent, QPainter, QPaintEvent, QPixmap
from PySide6.QtWidgets import QLabel, QWidget

from app.views.constants import CROP_OVERLAY_COLOR
from core.services.crop_service import CropRegionTracker


class ImageCanvas(QLabel):
    """Shows the current image; Ctrl+left-drag moves a translucent circle over it.

    Marker coordinates are local to this widget.
    """

    def __init__(self, tracker: CropRegionTracker, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._tracker = tracker
        self.setAlignment(Qt.AlignCenter)

    @property
    def tracker(self) -> CropRegionTracker:
        return self._tracker

    def set_image(self, image: QImage | None) -> None:
        """Display `image`, or clear the canvas when None."""
        if image is None or image.isNull():
            self.clear()
            return
        self.setPixmap(QPixmap.fromImage(image))

    def has_image(self) -> bool:
        pm = self.pixmap()
        return pm is not None and not pm.isNull()

    # Qt event handlers
    def mousePressEvent(self, event: QMouseEvent) -> None:  # noqa: N802
        if event.button() == Qt.LeftButton and event.modifiers() & Qt.ControlModifier:
            pos = event.position().toPoint()
            self._tracker.begin(pos.x(), pos.y())
            self.update()
            event.accept()
            return
        super().mousePressEvent(event)

    def mouseMoveEvent(self, event: QMouseEvent) -> None:  # noqa: N802
        pos = event.position().toPoint()
        if self._tracker.move(pos.x(), pos.y()):
            self.update()
            event.accept()
            return
        super().mouseMoveEvent(event)

    def mouseReleaseEvent(self, event: QMouseEvent) -> None:  # noqa: N802
        if event.button() == Qt.LeftButton and self._tracker.finish():
            self.update()
            event.accept()
            return
        super().mouseReleaseEvent(event)

    def paintEvent(self, event: QPaintEvent) -> None:  # noqa: N802
        super().paintEvent(event)
        region = self._tracker.region
        if region is None:
            return
        painter = QPainter(self)
        try:
            painter.setRenderHint(QPainter.Antialiasing)
            painter.setPen(Qt.NoPen)
            painter.setBrush(CROP_OVERLAY_COLOR)
            painter.drawEllipse(QRect(*region.bounds))
        finally:
            painter.end()
