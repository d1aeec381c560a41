"""
Boid Flocking Simulation

Boids steer by alignment, cohesion and separation and wrap around
the edges of a resizable canvas.
"""

from .vector import Vector2, limit, distance
from .boid import Boid
from .flock import Flock, create_boids
from .simulation import SimulationContext, create_context, resize, step

__all__ = [
    'Vector2',
    'limit',
    'distance',
    'Boid',
    'Flock',
    'create_boids',
    'SimulationContext',
    'create_context',
    'resize',
    'step',
]
