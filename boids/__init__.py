"""
Boids Flocking Core

Cohesion, separation and alignment between boids plus avoidance of a
pointer-controlled obstacle, on a wrap-around 2D surface.
"""

from .vector import Vector2D
from .boid import Boid
from .parameters import FlockConfig, get_preset_list
from .world import Bounds, PointerTarget
from .flock import Flock
from .simulation import Simulation

__all__ = [
    "Vector2D",
    "Boid",
    "FlockConfig",
    "get_preset_list",
    "Bounds",
    "PointerTarget",
    "Flock",
    "Simulation",
]
