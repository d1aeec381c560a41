"""
Boid Canvas
Drawing surface for the flock: one filled dot per boid on a cleared
background. Emits its size on every resize so the simulation wraps
at the visible edges.
"""

from typing import List, Tuple
from PyQt5.QtWidgets import QWidget, QSizePolicy
from PyQt5.QtCore import Qt, QPointF, pyqtSignal
from PyQt5.QtGui import QPainter, QColor, QBrush

from .theme import COLORS, BOID_RADIUS


class BoidCanvas(QWidget):
    """
    Widget implementing the simulation Surface.

    clear() starts a new frame and schedules a repaint; draw() records a
    position. Painting happens in paintEvent once the frame is complete.
    """

    resized = pyqtSignal(int, int)  # width, height

    BOID_COLOR = QColor(COLORS['boid'])
    BACKGROUND_COLOR = QColor(COLORS['background'])

    def __init__(self, parent=None):
        super().__init__(parent)
        self.setSizePolicy(QSizePolicy.Expanding, QSizePolicy.Expanding)
        self.setAttribute(Qt.WA_OpaquePaintEvent)

        self._points: List[Tuple[float, float]] = []

    # === Surface ===

    def clear(self, width: int, height: int) -> None:
        self._points = []
        self.update(0, 0, width, height)

    def draw(self, position) -> None:
        self._points.append((position.x, position.y))

    @property
    def points(self) -> List[Tuple[float, float]]:
        """Positions recorded for the current frame."""
        return list(self._points)

    # === Qt ===

    def paintEvent(self, event):
        painter = QPainter(self)
        painter.setRenderHint(QPainter.Antialiasing)
        painter.fillRect(self.rect(), self.BACKGROUND_COLOR)

        painter.setPen(Qt.NoPen)
        painter.setBrush(QBrush(self.BOID_COLOR))
        for x, y in self._points:
            painter.drawEllipse(QPointF(x, y), BOID_RADIUS, BOID_RADIUS)
        painter.end()

    def resizeEvent(self, event):
        super().resizeEvent(event)
        size = event.size()
        self.resized.emit(size.width(), size.height())
