"""
Main Frame - Canvas window with a log status bar
"""

from typing import Optional

from PyQt5.QtWidgets import QMainWindow
from PyQt5.QtCore import Qt

from src.boids.boid_controller import BoidController
from src.gui.boid_canvas import BoidCanvas
from src.gui.theme import status_bar_style
from src.config import WINDOW_TITLE, DEFAULT_WIDTH, DEFAULT_HEIGHT
from src.utils.logger import logger, LogLevel

STATUS_TIMEOUT_MS = 4000


class MainFrame(QMainWindow):
    """Main application window."""

    def __init__(self, seed: Optional[int] = None):
        super().__init__()

        self.setWindowTitle(WINDOW_TITLE)
        self.resize(DEFAULT_WIDTH, DEFAULT_HEIGHT)

        self.canvas = BoidCanvas()
        self.boid_controller = BoidController(
            self.canvas, DEFAULT_WIDTH, DEFAULT_HEIGHT, seed=seed, parent=self
        )

        self.setup_ui()

    def setup_ui(self):
        """Create the window layout and wire signals."""
        self.setCentralWidget(self.canvas)
        self.statusBar().setStyleSheet(status_bar_style())

        self.canvas.resized.connect(self.boid_controller.set_viewport)
        logger.signal_emitter.log_message.connect(self._on_log_message)
        self._log_connected = True

    def _on_log_message(self, msg: str, level: int, timestamp: str):
        """Show INFO and above in the status bar."""
        if level < LogLevel.INFO:
            return
        self.statusBar().showMessage(f"{timestamp}  {msg}", STATUS_TIMEOUT_MS)

    def showEvent(self, event):
        super().showEvent(event)
        self.boid_controller.set_viewport(self.canvas.width(), self.canvas.height())
        self.boid_controller.start()

    def keyPressEvent(self, event):
        if event.key() == Qt.Key_Escape:
            self.close()
            return
        super().keyPressEvent(event)

    def closeEvent(self, event):
        self.boid_controller.stop()
        if self._log_connected:
            logger.signal_emitter.log_message.disconnect(self._on_log_message)
            self._log_connected = False
        super().closeEvent(event)
