"""Individual boid entity with position, velocity, and glyph orientation."""

import math
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from .vector import Vector2D


def turn_towards(current: float, target: float, max_step: float) -> float:
    """Rotate `current` toward `target` along the shortest arc, at most `max_step` radians."""
    diff = (target - current + math.pi) % (2 * math.pi) - math.pi
    if diff > max_step:
        return current + max_step
    if diff < -max_step:
        return current - max_step
    return current + diff


@dataclass(eq=False)
class Boid:
    """
    A single boid (bird-oid object) in the simulation.

    Equality is identity: two boids with the same state are still two boids.

    Attributes:
        position: 2D position in screen space
        velocity: 2D velocity, in pixels per tick
        display_angle: Orientation of the drawn glyph (render only)
    """
    position: Vector2D = field(default_factory=Vector2D.zero)
    velocity: Vector2D = field(default_factory=Vector2D.zero)
    display_angle: Optional[float] = None

    def __post_init__(self):
        if self.display_angle is None:
            self.display_angle = self.heading

    @property
    def heading(self) -> float:
        """Direction of travel in radians."""
        return self.velocity.angle()

    @property
    def speed(self) -> float:
        return self.velocity.magnitude()

    def turn(self, turn_rate: float):
        """Ease the glyph toward the current heading."""
        self.display_angle = turn_towards(self.display_angle, self.heading, turn_rate)

    def triangle(self, length: float, spread: float) -> List[Tuple[float, float]]:
        """
        Vertices of the oriented glyph.

        Args:
            length: Distance from the center to each vertex
            spread: Half-angle of the tail, in radians

        Returns:
            Nose vertex followed by the two tail vertices
        """
        cx, cy = self.position.x, self.position.y
        angles = (
            self.display_angle,
            self.display_angle + math.pi + spread,
            self.display_angle + math.pi - spread,
        )
        return [(cx + length * math.cos(a), cy + length * math.sin(a)) for a in angles]
