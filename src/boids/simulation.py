"""
Simulation - Explicit context and per-frame step

The context owns the viewport size and the flock. step() advances
one frame in place and returns the same context; the caller owns
the repeat loop and the render binding.

Agents are updated sequentially, so boids later in the flock see
earlier boids already moved this frame.
"""

from dataclasses import dataclass
from typing import Optional, Protocol

from src.config import FLOCK_SIZE
from .flock import Flock
from .vector import Vector2


class Surface(Protocol):
    """Drawing surface the simulation renders into."""

    def clear(self, width: int, height: int) -> None: ...

    def draw(self, position: Vector2) -> None: ...


def _check_size(width: float, height: float) -> None:
    if width <= 0 or height <= 0:
        raise ValueError(f"Viewport must be positive, got {width}x{height}")


@dataclass
class SimulationContext:
    """Everything one frame needs: viewport and flock."""
    width: int
    height: int
    flock: Flock
    frame: int = 0

    def __post_init__(self):
        _check_size(self.width, self.height)


def create_context(width: int, height: int, count: int = FLOCK_SIZE,
                   seed: Optional[int] = None) -> SimulationContext:
    """Build a context with a freshly spawned flock."""
    _check_size(width, height)
    return SimulationContext(width, height, Flock.random(width, height, count, seed))


def resize(context: SimulationContext, width: int, height: int) -> SimulationContext:
    """Change the viewport. Boids are not moved; the next wrap uses the new bounds."""
    _check_size(width, height)
    context.width = width
    context.height = height
    return context


def step(context: SimulationContext, surface: Optional[Surface] = None) -> SimulationContext:
    """Advance one frame: edges -> flock -> update -> draw for each boid in order."""
    if surface is not None:
        surface.clear(context.width, context.height)

    boids = context.flock.boids
    for i, boid in enumerate(boids):
        boid.edges(context.width, context.height)
        boid.flock(boids, i)
        boid.update()
        if surface is not None:
            boid.draw(surface)

    context.frame += 1
    return context
