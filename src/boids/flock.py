"""
Flock - Fixed-size ordered collection of boids

Boids are created once and mutated in place every frame; the flock
never grows or shrinks. Snapshots are exposed as numpy arrays for
logging and tests.
"""

from typing import Iterator, List, Optional

import numpy as np

from src.config import FLOCK_SIZE, INITIAL_SPEED_RANGE
from .boid import Boid
from .vector import Vector2


def create_boids(width: float, height: float, count: int = FLOCK_SIZE,
                 seed: Optional[int] = None) -> List[Boid]:
    """
    Create boids at uniform random positions in [0,width) x [0,height).

    Velocity components are uniform in INITIAL_SPEED_RANGE. Pass a seed
    for a reproducible flock; None draws fresh entropy.
    """
    if count < 0:
        raise ValueError(f"Boid count must be >= 0, got {count}")

    rng = np.random.default_rng(seed)
    lo, hi = INITIAL_SPEED_RANGE
    positions = rng.random((count, 2)) * (width, height)
    velocities = rng.uniform(lo, hi, size=(count, 2))

    return [
        Boid(
            position=Vector2(float(px), float(py)),
            velocity=Vector2(float(vx), float(vy)),
        )
        for (px, py), (vx, vy) in zip(positions, velocities)
    ]


class Flock:
    """
    Ordered boid collection owned by the simulation context.

    Iteration order is the update order within a frame.
    """

    def __init__(self, boids: List[Boid]):
        self._boids = list(boids)

    @classmethod
    def random(cls, width: float, height: float, count: int = FLOCK_SIZE,
               seed: Optional[int] = None) -> "Flock":
        return cls(create_boids(width, height, count, seed))

    def __len__(self) -> int:
        return len(self._boids)

    def __iter__(self) -> Iterator[Boid]:
        return iter(self._boids)

    def __getitem__(self, index: int) -> Boid:
        return self._boids[index]

    @property
    def boids(self) -> List[Boid]:
        return self._boids

    def positions(self) -> np.ndarray:
        """(n, 2) array of positions."""
        return np.array([b.position.as_tuple() for b in self._boids], dtype=float).reshape(-1, 2)

    def velocities(self) -> np.ndarray:
        """(n, 2) array of velocities."""
        return np.array([b.velocity.as_tuple() for b in self._boids], dtype=float).reshape(-1, 2)

    def accelerations(self) -> np.ndarray:
        """(n, 2) array of pending accelerations."""
        return np.array([b.acceleration.as_tuple() for b in self._boids], dtype=float).reshape(-1, 2)

    def mean_speed(self) -> float:
        if not self._boids:
            return 0.0
        return float(np.linalg.norm(self.velocities(), axis=1).mean())

    def is_finite(self) -> bool:
        """True when no position, velocity or acceleration is NaN/inf."""
        return bool(
            np.isfinite(self.positions()).all()
            and np.isfinite(self.velocities()).all()
            and np.isfinite(self.accelerations()).all()
        )
