"""Flock management - all-pairs flocking rules in Numba JIT kernels over a per-tick snapshot."""

import math
from typing import Iterable, List, Optional, Tuple

import numpy as np
from numba import njit, prange

from .boid import Boid
from .parameters import FlockConfig
from .vector import Vector2D
from .world import Bounds, PointerTarget


# ============================================================================
# NUMBA JIT-COMPILED FLOCKING RULES
# ============================================================================
#
# Every rule scans the whole snapshot once and skips the subject by index.
# Index i of the snapshot is the i-th boid of the population list, so index
# equality is identity equality.

@njit(cache=True)
def cohesion_force(i: int, positions: np.ndarray, min_radius: float, radius: float) -> Tuple[float, float]:
    """Offset from boid i to the centroid of neighbors with min_radius < dist < radius."""
    px = positions[i, 0]
    py = positions[i, 1]
    sum_x, sum_y = 0.0, 0.0
    count = 0

    for j in range(positions.shape[0]):
        if j == i:
            continue

        dx = positions[j, 0] - px
        dy = positions[j, 1] - py
        dist = math.sqrt(dx * dx + dy * dy)

        if dist > min_radius and dist < radius:
            sum_x += positions[j, 0]
            sum_y += positions[j, 1]
            count += 1

    if count == 0:
        return 0.0, 0.0
    return sum_x / count - px, sum_y / count - py


@njit(cache=True)
def separation_force(i: int, positions: np.ndarray, radius: float) -> Tuple[float, float]:
    """Sum of (self - other) / dist over neighbors with 0 < dist <= radius."""
    px = positions[i, 0]
    py = positions[i, 1]
    force_x, force_y = 0.0, 0.0

    for j in range(positions.shape[0]):
        if j == i:
            continue

        dx = px - positions[j, 0]
        dy = py - positions[j, 1]
        dist = math.sqrt(dx * dx + dy * dy)

        # Coincident boids have no direction to push along; they contribute nothing
        if dist > 0.0 and dist <= radius:
            force_x += dx / dist
            force_y += dy / dist

    return force_x, force_y


@njit(cache=True)
def alignment_force(i: int, positions: np.ndarray, velocities: np.ndarray, radius: float) -> Tuple[float, float]:
    """Mean velocity of neighbors with dist <= radius."""
    px = positions[i, 0]
    py = positions[i, 1]
    sum_x, sum_y = 0.0, 0.0
    count = 0

    for j in range(positions.shape[0]):
        if j == i:
            continue

        dx = positions[j, 0] - px
        dy = positions[j, 1] - py
        dist = math.sqrt(dx * dx + dy * dy)

        if dist <= radius:
            sum_x += velocities[j, 0]
            sum_y += velocities[j, 1]
            count += 1

    if count == 0:
        return 0.0, 0.0
    return sum_x / count, sum_y / count


@njit(cache=True)
def avoidance_force(px: float, py: float, target_x: float, target_y: float, radius: float) -> Tuple[float, float]:
    """Displacement away from the pointer target when inside its radius."""
    dx = px - target_x
    dy = py - target_y
    if math.sqrt(dx * dx + dy * dy) < radius:
        return dx, dy
    return 0.0, 0.0


@njit(cache=True)
def wrap_coordinate(value: float, bound: float) -> float:
    """Map a coordinate that left [0, bound) back in from the opposite edge."""
    if value <= 0.0 or value >= bound:
        return (value + bound) % bound
    return value


@njit(parallel=True, cache=True)
def step_flock(
    positions: np.ndarray,
    velocities: np.ndarray,
    jitter: np.ndarray,
    new_positions: np.ndarray,
    new_velocities: np.ndarray,
    target_x: float,
    target_y: float,
    target_radius: float,
    width: float,
    height: float,
    cohesion_min_radius: float,
    cohesion_radius: float,
    separation_radius: float,
    alignment_radius: float,
    cohesion_weight: float,
    separation_weight: float,
    alignment_weight: float,
    avoidance_weight: float,
    speed_limit: float,
    num_boids: int
):
    """
    Advance every boid one tick.

    Reads only positions/velocities (the start-of-tick snapshot) and writes
    only new_positions/new_velocities, so the result does not depend on the
    order boids are processed in.
    """
    for i in prange(num_boids):
        coh_x, coh_y = cohesion_force(i, positions, cohesion_min_radius, cohesion_radius)
        sep_x, sep_y = separation_force(i, positions, separation_radius)
        ali_x, ali_y = alignment_force(i, positions, velocities, alignment_radius)
        avo_x, avo_y = avoidance_force(positions[i, 0], positions[i, 1], target_x, target_y, target_radius)

        vx = velocities[i, 0] + (
            coh_x * cohesion_weight
            + sep_x * separation_weight
            + ali_x * alignment_weight
            + avo_x * avoidance_weight
        )
        vy = velocities[i, 1] + (
            coh_y * cohesion_weight
            + sep_y * separation_weight
            + ali_y * alignment_weight
            + avo_y * avoidance_weight
        )
        vx += jitter[i, 0]
        vy += jitter[i, 1]

        # Limit speed, direction preserved
        speed = math.sqrt(vx * vx + vy * vy)
        if speed > speed_limit:
            vx = vx / speed * speed_limit
            vy = vy / speed * speed_limit

        new_velocities[i, 0] = vx
        new_velocities[i, 1] = vy
        new_positions[i, 0] = wrap_coordinate(positions[i, 0] + vx, width)
        new_positions[i, 1] = wrap_coordinate(positions[i, 1] + vy, height)


# ============================================================================
# FLOCK CLASS
# ============================================================================

class Flock:
    """
    Owns the boid population and advances it one tick at a time.

    Bounds and pointer target are shared with the host; the flock reads them
    once at the start of each tick.
    """

    def __init__(
        self,
        config: FlockConfig,
        bounds: Bounds,
        target: PointerTarget,
        population: Optional[Iterable[Boid]] = None,
        rng: Optional[np.random.Generator] = None
    ):
        self.config = config
        self.bounds = bounds
        self.target = target
        self.population: List[Boid] = list(population) if population is not None else []
        self.rng = rng if rng is not None else np.random.default_rng()

        # Warm up Numba
        self._warmup_numba()

    def __len__(self) -> int:
        return len(self.population)

    def __iter__(self):
        return iter(self.population)

    @property
    def num_boids(self) -> int:
        return len(self.population)

    def _warmup_numba(self):
        """Pre-compile Numba kernels."""
        n = 4
        pos = np.random.rand(n, 2) * 10
        vel = np.random.rand(n, 2)
        zeros = np.zeros((n, 2), dtype=np.float64)
        step_flock(
            pos, vel, zeros, np.empty_like(pos), np.empty_like(vel),
            -5.0, -5.0, 1.0, 10.0, 10.0,
            1.0, 5.0, 2.0, 5.0, 0.01, 0.1, 0.1, 0.1, 1.0, n
        )

    # ------------------------------------------------------------------
    # Population
    # ------------------------------------------------------------------

    def spawn(self, position: Vector2D, velocity: Vector2D) -> Boid:
        """Append a new boid to the population."""
        boid = Boid(position=position, velocity=velocity)
        self.population.append(boid)
        return boid

    def despawn(self, count: int) -> int:
        """Remove up to `count` boids from the tail. Returns how many were removed."""
        if count < 0:
            raise ValueError(f"Cannot despawn a negative number of boids ({count})")
        count = min(count, len(self.population))
        if count:
            del self.population[-count:]
        return count

    # ------------------------------------------------------------------
    # Snapshot
    # ------------------------------------------------------------------

    def snapshot(self) -> Tuple[np.ndarray, np.ndarray]:
        """Copy positions and velocities into (n, 2) float64 arrays."""
        n = len(self.population)
        positions = np.empty((n, 2), dtype=np.float64)
        velocities = np.empty((n, 2), dtype=np.float64)
        for i, boid in enumerate(self.population):
            positions[i] = (boid.position.x, boid.position.y)
            velocities[i] = (boid.velocity.x, boid.velocity.y)
        return positions, velocities

    def _index_of(self, boid: Boid) -> int:
        for i, other in enumerate(self.population):
            if other is boid:
                return i
        raise ValueError("Boid is not part of this flock")

    # ------------------------------------------------------------------
    # Individual rules (same kernels the update uses)
    # ------------------------------------------------------------------

    def cohesion(self, boid: Boid) -> Vector2D:
        i = self._index_of(boid)
        positions, _ = self.snapshot()
        return Vector2D(*cohesion_force(
            i, positions, self.config.cohesion_min_radius, self.config.cohesion_radius
        ))

    def separation(self, boid: Boid) -> Vector2D:
        i = self._index_of(boid)
        positions, _ = self.snapshot()
        return Vector2D(*separation_force(i, positions, self.config.separation_radius))

    def alignment(self, boid: Boid) -> Vector2D:
        i = self._index_of(boid)
        positions, velocities = self.snapshot()
        return Vector2D(*alignment_force(i, positions, velocities, self.config.alignment_radius))

    def pointer_avoidance(self, boid: Boid) -> Vector2D:
        target = self.target.snapshot()
        return Vector2D(*avoidance_force(
            boid.position.x, boid.position.y, target.x, target.y, target.radius
        ))

    # ------------------------------------------------------------------
    # Tick
    # ------------------------------------------------------------------

    def _draw_jitter(self, n: int) -> np.ndarray:
        if self.config.jitter > 0:
            return self.rng.uniform(-self.config.jitter, self.config.jitter, size=(n, 2))
        return np.zeros((n, 2), dtype=np.float64)

    def update(self):
        """Advance every boid by one tick against the start-of-tick snapshot."""
        n = len(self.population)
        if n == 0:
            return

        cfg = self.config
        positions, velocities = self.snapshot()
        target = self.target.snapshot()
        width, height = self.bounds.size

        new_positions = np.empty_like(positions)
        new_velocities = np.empty_like(velocities)

        step_flock(
            positions,
            velocities,
            self._draw_jitter(n),
            new_positions,
            new_velocities,
            float(target.x),
            float(target.y),
            float(target.radius),
            float(width),
            float(height),
            float(cfg.cohesion_min_radius),
            float(cfg.cohesion_radius),
            float(cfg.separation_radius),
            float(cfg.alignment_radius),
            float(cfg.cohesion_weight),
            float(cfg.separation_weight),
            float(cfg.alignment_weight),
            float(cfg.avoidance_weight),
            float(cfg.speed_limit),
            n
        )

        # Commit the whole tick at once
        for boid, pos, vel in zip(self.population, new_positions, new_velocities):
            boid.position = Vector2D(pos[0], pos[1])
            boid.velocity = Vector2D(vel[0], vel[1])

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def render(self, surface):
        """
        Draw every boid onto a surface.

        Positions and velocities are only read. Triangle glyphs do ease each
        boid's display_angle toward its heading here, once per drawn frame;
        that angle feeds nothing but drawing.

        Args:
            surface: Anything with draw_polygon(points, color) and
                draw_circle(center, radius, color)
        """
        cfg = self.config
        spread = math.radians(cfg.spread)

        for boid in self.population:
            if cfg.glyph == "triangle":
                boid.turn(cfg.turn_rate)
                surface.draw_polygon(boid.triangle(cfg.size, spread), cfg.color)
            else:
                surface.draw_circle(boid.position.as_tuple(), cfg.size, cfg.color)
