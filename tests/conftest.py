"""Pytest configuration - shared flock fixtures and a recording draw surface.

Nothing here opens a window or touches OpenGL; rendering is checked through
RecordingSurface, which just remembers what it was asked to draw.
"""
from __future__ import annotations

import pytest

from boids import Boid, Bounds, Flock, FlockConfig, PointerTarget, Vector2D


class RecordingSurface:
    """Stand-in for GLSurface that records draw calls."""

    def __init__(self):
        self.calls = []

    def clear(self):
        self.calls.append(("clear",))

    def draw_polygon(self, points, color):
        self.calls.append(("polygon", list(points), color))

    def draw_circle(self, center, radius, color):
        self.calls.append(("circle", tuple(center), radius, color))

    def of_kind(self, kind):
        return [c for c in self.calls if c[0] == kind]


@pytest.fixture
def surface():
    return RecordingSurface()


@pytest.fixture
def bounds():
    return Bounds(1000, 1000)


@pytest.fixture
def target():
    """Pointer target parked off-surface."""
    return PointerTarget(radius=22.0)


@pytest.fixture
def classic():
    """Flock parameters matching the classic preset."""
    return FlockConfig.from_preset("classic")


@pytest.fixture
def make_flock(classic, bounds, target):
    """Build a flock from ((x, y), (vx, vy)) pairs."""
    def _make(*states, config=None, rng=None):
        population = [Boid(Vector2D(*pos), Vector2D(*vel)) for pos, vel in states]
        return Flock(config or classic, bounds, target, population=population, rng=rng)
    return _make
