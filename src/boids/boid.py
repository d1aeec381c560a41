"""
Boid - Single flocking agent

Three classic steering rules, each computed against the whole flock:
- Alignment: match the average heading of neighbours
- Cohesion: steer toward the neighbours' centre
- Separation: steer away from crowding neighbours

Every rule uses the Reynolds double clamp: the desired vector is
limited to max_speed, the current velocity is subtracted, and the
result is limited to max_force.

Self-exclusion is by index: each query takes the boid's own position
in the flock sequence and skips it.
"""

from dataclasses import dataclass, field
from typing import Sequence

from src.config import (
    MAX_SPEED, MAX_FORCE,
    ALIGN_RADIUS, COHESION_RADIUS, SEPARATION_RADIUS,
)
from .vector import Vector2, limit, distance


@dataclass
class Boid:
    """Point-mass agent with position, velocity and force accumulator."""
    position: Vector2 = field(default_factory=Vector2.zero)
    velocity: Vector2 = field(default_factory=Vector2.zero)
    acceleration: Vector2 = field(default_factory=Vector2.zero)
    max_speed: float = MAX_SPEED
    max_force: float = MAX_FORCE

    # === Steering queries ===

    def align(self, boids: Sequence["Boid"], index: int) -> Vector2:
        """Steer toward the average velocity of neighbours within ALIGN_RADIUS."""
        steering = Vector2.zero()
        total = 0

        for j, other in enumerate(boids):
            if j == index:
                continue
            if distance(other.position, self.position) < ALIGN_RADIUS:
                steering.x += other.velocity.x
                steering.y += other.velocity.y
                total += 1

        if total > 0:
            steering = steering / total
            steering = self._steer(steering)
        return steering

    def cohesion(self, boids: Sequence["Boid"], index: int) -> Vector2:
        """Steer toward the centre of neighbours within COHESION_RADIUS."""
        steering = Vector2.zero()
        total = 0

        for j, other in enumerate(boids):
            if j == index:
                continue
            if distance(other.position, self.position) < COHESION_RADIUS:
                steering.x += other.position.x
                steering.y += other.position.y
                total += 1

        if total > 0:
            steering = steering / total - self.position
            steering = self._steer(steering)
        return steering

    def separation(self, boids: Sequence["Boid"], index: int) -> Vector2:
        """
        Steer away from neighbours within SEPARATION_RADIUS.

        Each neighbour contributes the unit vector pointing away from it
        divided by the distance, so closer boids push harder. Coincident
        neighbours have no away direction and are skipped.
        """
        steering = Vector2.zero()
        total = 0

        for j, other in enumerate(boids):
            if j == index:
                continue
            d = distance(other.position, self.position)
            if 0.0 < d < SEPARATION_RADIUS:
                # unit away-vector / d == raw difference / d^2
                d_sq = d * d
                steering.x += (self.position.x - other.position.x) / d_sq
                steering.y += (self.position.y - other.position.y) / d_sq
                total += 1

        if total > 0:
            steering = steering / total
            steering = self._steer(steering)
        return steering

    def _steer(self, desired: Vector2) -> Vector2:
        """Double clamp: desired speed, then max force."""
        desired = limit(desired, self.max_speed)
        return limit(desired - self.velocity, self.max_force)

    # === Integration ===

    def apply_force(self, force: Vector2) -> None:
        """Accumulate a force into acceleration."""
        self.acceleration.x += force.x
        self.acceleration.y += force.y

    def flock(self, boids: Sequence["Boid"], index: int) -> None:
        """Compute all three rules against the flock and apply them."""
        alignment = self.align(boids, index)
        cohesion = self.cohesion(boids, index)
        separation = self.separation(boids, index)

        self.apply_force(alignment)
        self.apply_force(cohesion)
        self.apply_force(separation)

    def update(self) -> None:
        """Semi-implicit Euler step with unit time step."""
        self.velocity = limit(self.velocity + self.acceleration, self.max_speed)
        self.position = self.position + self.velocity
        self.acceleration = Vector2.zero()

    def edges(self, width: float, height: float) -> None:
        """Wrap to the opposite edge when outside [0, width] x [0, height]."""
        if self.position.x > width:
            self.position.x = 0.0
        elif self.position.x < 0:
            self.position.x = float(width)

        if self.position.y > height:
            self.position.y = 0.0
        elif self.position.y < 0:
            self.position.y = float(height)

    def draw(self, surface) -> None:
        """Hand the current position to the drawing surface."""
        surface.draw(self.position)
