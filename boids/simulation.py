"""Simulation context: one object owning the flock, its bounds, and the pointer target."""

import math
from typing import Optional

import numpy as np

from config import boids as config
from .boid import Boid
from .flock import Flock
from .parameters import FlockConfig
from .vector import Vector2D
from .world import Bounds, PointerTarget


class Simulation:
    """
    Everything a host needs to run the flock.

    Built once and handed to the scheduler, renderer and input handler.
    Population size follows the surface area: one boid per `density` px^2.
    """

    def __init__(
        self,
        width: float,
        height: float,
        preset: str = config.DEFAULT_PRESET,
        seed: Optional[int] = None,
        density: float = config.POPULATION["density"],
        initial_speed: float = config.POPULATION["initial_speed"],
        pointer_radius: float = config.POINTER["radius"]
    ):
        if density <= 0:
            raise ValueError(f"density must be positive, got {density}")
        if initial_speed < 0:
            raise ValueError(f"initial_speed must be non-negative, got {initial_speed}")

        self.preset = preset
        self.seed = seed
        self.density = float(density)
        self.initial_speed = float(initial_speed)

        self.bounds = Bounds(width, height)
        self.target = PointerTarget(pointer_radius)
        self.rng = np.random.default_rng(seed)
        self.flock = Flock(FlockConfig.from_preset(preset), self.bounds, self.target, rng=self.rng)
        self.tick_count = 0

        self.populate()

    @property
    def config(self) -> FlockConfig:
        return self.flock.config

    @property
    def population_target(self) -> int:
        return int(math.floor(self.bounds.area / self.density))

    def _random_velocity(self) -> Vector2D:
        vx, vy = self.rng.uniform(-self.initial_speed, self.initial_speed, size=2)
        return Vector2D(vx, vy)

    def _random_position(self) -> Vector2D:
        return Vector2D(
            self.rng.uniform(0.0, self.bounds.width),
            self.rng.uniform(0.0, self.bounds.height),
        )

    def _grow(self, count: int):
        for _ in range(count):
            self.flock.spawn(self._random_position(), self._random_velocity())

    def populate(self):
        """Replace the population with a fresh random one sized to the bounds."""
        self.flock.despawn(len(self.flock))
        self._grow(self.population_target)
        self.tick_count = 0
        print(f"[Sim] Populated {len(self.flock)} boids (preset: {self.preset})")

    def reset(self):
        """Start over from a new random population, reseeding if a seed was given."""
        if self.seed is not None:
            self.rng = np.random.default_rng(self.seed)
            self.flock.rng = self.rng
        self.populate()

    def resize(self, width: float, height: float):
        """Change bounds and grow or shrink the population to match the new area."""
        self.bounds.resize(width, height)
        deficit = self.population_target - len(self.flock)
        if deficit > 0:
            self._grow(deficit)
        elif deficit < 0:
            self.flock.despawn(-deficit)
        print(f"[Sim] Resized to {self.bounds.width:g}x{self.bounds.height:g}, "
              f"{len(self.flock)} boids")

    def spawn_at(self, x: float, y: float) -> Boid:
        """Add one boid at a point with a random velocity."""
        return self.flock.spawn(Vector2D(x, y), self._random_velocity())

    def move_pointer(self, x: float, y: float):
        self.target.move_to(x, y)

    def park_pointer(self):
        self.target.park()

    def set_preset(self, preset: str):
        """Swap the flocking parameters; existing boids keep their state."""
        self.flock.config = FlockConfig.from_preset(preset)
        self.preset = preset
        print(f"[Sim] Preset: {preset}")

    def tick(self):
        self.flock.update()
        self.tick_count += 1

    def render(self, surface):
        """Clear the surface, draw the flock, then outline the pointer target."""
        surface.clear()
        self.flock.render(surface)
        target = self.target.snapshot()
        surface.draw_circle((target.x, target.y), target.radius, config.COLORS["pointer"])
