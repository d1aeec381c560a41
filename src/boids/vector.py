"""
Vector2 - 2D vector math for the flocking simulation

Positions, velocities, accelerations and intermediate steering
values are all Vector2. Operators return new vectors; only the
in-place helpers on Boid mutate.
"""

import math
from dataclasses import dataclass


@dataclass
class Vector2:
    """Mutable {x, y} pair."""
    x: float = 0.0
    y: float = 0.0

    @classmethod
    def zero(cls) -> "Vector2":
        return cls(0.0, 0.0)

    def copy(self) -> "Vector2":
        return Vector2(self.x, self.y)

    def magnitude(self) -> float:
        return math.sqrt(self.x * self.x + self.y * self.y)

    def __add__(self, other: "Vector2") -> "Vector2":
        return Vector2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Vector2") -> "Vector2":
        return Vector2(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> "Vector2":
        return Vector2(self.x * scalar, self.y * scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar: float) -> "Vector2":
        return Vector2(self.x / scalar, self.y / scalar)

    def as_tuple(self):
        return (self.x, self.y)


def limit(vector: Vector2, max_value: float) -> Vector2:
    """
    Clamp vector magnitude to max_value.

    Returns the same object when already within the limit, so a
    zero vector is never divided by its own magnitude.
    """
    mag = vector.magnitude()
    if mag > max_value:
        return Vector2(vector.x / mag * max_value, vector.y / mag * max_value)
    return vector


def distance(a: Vector2, b: Vector2) -> float:
    """Euclidean distance between two points."""
    dx = a.x - b.x
    dy = a.y - b.y
    return math.sqrt(dx * dx + dy * dy)
