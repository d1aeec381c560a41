"""
Boid Controller - Drives the flock frame loop

Connects:
- SimulationContext (viewport + flock)
- step() (per-frame physics)
- A drawing surface (the canvas widget)

Runs one frame per QTimer timeout (~60Hz). Missed frames are not
caught up.
"""

from typing import Optional
from PyQt5.QtCore import QObject, QTimer, pyqtSignal, pyqtSlot

from src.config import (
    DEFAULT_WIDTH, DEFAULT_HEIGHT, FLOCK_SIZE,
    FRAME_INTERVAL_MS, LOG_EVERY_N_FRAMES,
)
from src.utils.logger import logger

from .simulation import SimulationContext, Surface, create_context, resize, step


class BoidController(QObject):
    """
    Owns the simulation context and its frame timer.

    Emits frame_advanced after every completed frame.
    """

    frame_advanced = pyqtSignal(int)  # frame number
    running_changed = pyqtSignal(bool)

    def __init__(self, surface: Optional[Surface] = None,
                 width: int = DEFAULT_WIDTH, height: int = DEFAULT_HEIGHT,
                 seed: Optional[int] = None, parent=None):
        super().__init__(parent)

        self._surface = surface
        self._seed = seed
        self._context = create_context(width, height, FLOCK_SIZE, seed)

        self._timer = QTimer(self)
        self._timer.setInterval(FRAME_INTERVAL_MS)
        self._timer.timeout.connect(self._tick)

    @property
    def context(self) -> SimulationContext:
        return self._context

    @property
    def running(self) -> bool:
        return self._timer.isActive()

    # === Lifecycle ===

    def start(self) -> None:
        """Start the frame loop."""
        if self.running:
            return
        self._timer.start()
        logger.info(
            f"Flock of {len(self._context.flock)} started "
            f"({self._context.width}x{self._context.height})",
            component="BOID",
        )
        self.running_changed.emit(True)

    def stop(self) -> None:
        """Stop the frame loop. Flock state is kept."""
        if not self.running:
            return
        self._timer.stop()
        logger.info(f"Flock stopped at frame {self._context.frame}", component="BOID")
        self.running_changed.emit(False)

    def reseed(self, seed: Optional[int] = None) -> None:
        """Respawn the flock inside the current viewport."""
        self._seed = seed
        self._context = create_context(
            self._context.width, self._context.height, FLOCK_SIZE, seed
        )
        logger.info("Flock respawned", component="BOID",
                    details=f"seed={seed}" if seed is not None else "unseeded")

    @pyqtSlot(int, int)
    def set_viewport(self, width: int, height: int) -> None:
        """Track the drawing surface size. Zero-size events are ignored."""
        if width <= 0 or height <= 0:
            logger.debug(f"Ignoring empty viewport {width}x{height}", component="GUI")
            return
        resize(self._context, width, height)
        logger.debug(f"Viewport {width}x{height}", component="GUI")

    def _tick(self) -> None:
        """One frame."""
        step(self._context, self._surface)
        frame = self._context.frame

        if frame % LOG_EVERY_N_FRAMES == 0:
            logger.boid(f"Frame {frame}: mean speed {self._context.flock.mean_speed():.3f}")

        self.frame_advanced.emit(frame)
