"""Simulation bounds and the pointer-avoidance target."""

import math
from typing import NamedTuple, Tuple

from .vector import Vector2D


class Bounds:
    """Width and height of the simulation space; changed by the resize handler."""

    def __init__(self, width: float, height: float):
        self.width = 0.0
        self.height = 0.0
        self.resize(width, height)

    def resize(self, width: float, height: float):
        if not (math.isfinite(width) and math.isfinite(height)):
            raise ValueError(f"Bounds must be finite, got {width}x{height}")
        if width <= 0 or height <= 0:
            raise ValueError(f"Bounds must be positive, got {width}x{height}")
        self.width = float(width)
        self.height = float(height)

    @property
    def size(self) -> Tuple[float, float]:
        return (self.width, self.height)

    @property
    def area(self) -> float:
        return self.width * self.height

    def __repr__(self):
        return f"Bounds({self.width:g}x{self.height:g})"


class TargetSnapshot(NamedTuple):
    x: float
    y: float
    radius: float


class PointerTarget:
    """
    Obstacle the boids steer away from.

    Written by the input handler, read by the flock once per tick through
    snapshot(). Starts parked just off the top-left corner.
    """

    def __init__(self, radius: float):
        if not math.isfinite(radius):
            raise ValueError(f"Pointer radius must be finite, got {radius}")
        if radius < 0:
            raise ValueError(f"Pointer radius must be non-negative, got {radius}")
        self.radius = float(radius)
        self.position = Vector2D.zero()
        self.park()

    def move_to(self, x: float, y: float):
        self.position = Vector2D(x, y)

    def park(self):
        """Move the target off-surface so it affects no boid."""
        self.position = Vector2D(-self.radius, -self.radius)

    def snapshot(self) -> TargetSnapshot:
        return TargetSnapshot(self.position.x, self.position.y, self.radius)
