"""
Tests for the simulation context and per-frame step.

- Surface receives clear() once, then draw() once per boid
- Context is advanced in place and returned
- resize() takes effect on the next wrap without moving boids
- Long runs stay finite
"""

import pytest
from unittest.mock import MagicMock, call

from src.boids.boid import Boid
from src.boids.flock import Flock
from src.boids.simulation import SimulationContext, create_context, resize, step
from src.boids.vector import Vector2
from src.config import FLOCK_SIZE


def far_apart_flock():
    """Boids too far apart to influence each other."""
    return Flock([
        Boid(position=Vector2(50, 50), velocity=Vector2(1, 0)),
        Boid(position=Vector2(300, 300), velocity=Vector2(0, -1)),
    ])


class TestCreateContext:

    def test_default_flock_size(self):
        ctx = create_context(800, 600, seed=0)
        assert len(ctx.flock) == FLOCK_SIZE
        assert (ctx.width, ctx.height, ctx.frame) == (800, 600, 0)

    @pytest.mark.parametrize("w, h", [(0, 600), (800, 0), (-1, 10)])
    def test_rejects_empty_viewport(self, w, h):
        with pytest.raises(ValueError):
            create_context(w, h)

    def test_context_validates_directly(self):
        with pytest.raises(ValueError):
            SimulationContext(0, 0, Flock([]))


class TestStep:

    def test_returns_same_context(self):
        ctx = SimulationContext(400, 400, far_apart_flock())
        assert step(ctx) is ctx

    def test_frame_counter(self):
        ctx = SimulationContext(400, 400, far_apart_flock())
        step(ctx)
        step(ctx)
        assert ctx.frame == 2

    def test_clear_then_draw_each_boid(self):
        ctx = create_context(640, 480, count=5, seed=11)
        surface = MagicMock()
        step(ctx, surface)

        assert surface.mock_calls[0] == call.clear(640, 480)
        assert surface.clear.call_count == 1
        assert surface.draw.call_count == 5
        drawn = [c.args[0] for c in surface.draw.call_args_list]
        assert drawn == [b.position for b in ctx.flock]

    def test_draws_after_update(self):
        ctx = SimulationContext(400, 400, far_apart_flock())
        surface = MagicMock()
        step(ctx, surface)
        first = surface.draw.call_args_list[0].args[0]
        assert first == Vector2(51, 50)

    def test_without_surface(self):
        ctx = SimulationContext(400, 400, far_apart_flock())
        step(ctx)
        assert ctx.flock[1].position == Vector2(300, 299)

    def test_wrap_happens_before_integration(self):
        flock = Flock([Boid(position=Vector2(401, 200), velocity=Vector2(1, 0))])
        ctx = SimulationContext(400, 400, flock)
        step(ctx)
        # teleported to 0 then moved by velocity
        assert flock[0].position == Vector2(1, 200)

    def test_accelerations_clear_after_step(self):
        ctx = create_context(200, 200, count=30, seed=5)
        step(ctx)
        assert not ctx.flock.accelerations().any()


class TestResize:

    def test_resize_updates_bounds(self):
        ctx = create_context(800, 600, count=3, seed=0)
        assert resize(ctx, 1024, 768) is ctx
        assert (ctx.width, ctx.height) == (1024, 768)

    def test_resize_does_not_move_boids(self):
        ctx = create_context(800, 600, count=10, seed=0)
        before = ctx.flock.positions().copy()
        resize(ctx, 100, 100)
        assert (ctx.flock.positions() == before).all()

    def test_shrink_wraps_on_next_step(self):
        flock = Flock([Boid(position=Vector2(700, 50), velocity=Vector2(0, 0))])
        ctx = SimulationContext(800, 600, flock)
        resize(ctx, 500, 600)
        step(ctx)
        assert flock[0].position.x == 0

    @pytest.mark.parametrize("w, h", [(0, 10), (10, -5)])
    def test_rejects_empty_viewport(self, w, h):
        ctx = create_context(800, 600, count=1, seed=0)
        with pytest.raises(ValueError):
            resize(ctx, w, h)
        assert (ctx.width, ctx.height) == (800, 600)


class TestLongRun:

    def test_thousand_frames_stay_finite(self):
        ctx = create_context(800, 600, seed=2024)
        for _ in range(1000):
            step(ctx)
            assert ctx.flock.is_finite()
        assert len(ctx.flock) == FLOCK_SIZE
        assert ctx.frame == 1000

    def test_speed_never_exceeds_max(self):
        ctx = create_context(300, 300, seed=9)
        for _ in range(100):
            step(ctx)
        speeds = (ctx.flock.velocities() ** 2).sum(axis=1) ** 0.5
        assert (speeds <= 2.0 + 1e-9).all()
