"""
Tests for the individual flocking rules and the wrap-around policy.

Radii used throughout are the classic preset's: cohesion (8, 40),
separation 18, alignment 40, pointer radius 22.
"""

import math

import pytest

from boids import Vector2D
from boids.flock import wrap_coordinate


class TestCohesion:
    """Steering toward the centroid of neighbors between the two radii."""

    def test_two_boid_scenario(self, make_flock):
        flock = make_flock(((0, 0), (0, 0)), ((10, 0), (1, 0)))
        a, b = flock.population
        assert flock.cohesion(a) == Vector2D(10, 0)
        assert flock.cohesion(b) == Vector2D(-10, 0)

    def test_centroid_of_several(self, make_flock):
        flock = make_flock(
            ((100, 100), (0, 0)),
            ((120, 100), (0, 0)),
            ((100, 130), (0, 0)),
        )
        force = flock.cohesion(flock.population[0])
        assert force.x == pytest.approx(10)
        assert force.y == pytest.approx(15)

    def test_single_boid_is_zero(self, make_flock):
        flock = make_flock(((50, 50), (1, 1)))
        assert flock.cohesion(flock.population[0]) == Vector2D.zero()

    def test_far_neighbors_ignored(self, make_flock):
        flock = make_flock(((0, 0), (0, 0)), ((500, 0), (0, 0)))
        assert flock.cohesion(flock.population[0]) == Vector2D.zero()

    @pytest.mark.parametrize("dist", [8.0, 40.0, 3.0])
    def test_band_is_exclusive(self, make_flock, dist):
        flock = make_flock(((100, 100), (0, 0)), ((100 + dist, 100), (0, 0)))
        assert flock.cohesion(flock.population[0]) == Vector2D.zero()

    def test_unknown_boid(self, make_flock):
        from boids import Boid
        flock = make_flock(((0, 0), (0, 0)))
        with pytest.raises(ValueError):
            flock.cohesion(Boid(Vector2D(0, 0), Vector2D(0, 0)))


class TestSeparation:
    """Unnormalized push away from neighbors at or inside the close radius."""

    def test_symmetry(self, make_flock):
        flock = make_flock(((100, 100), (0, 0)), ((103, 104), (0, 0)))
        a, b = flock.population
        fa = flock.separation(a)
        fb = flock.separation(b)
        assert fa == -fb
        assert fa.x == pytest.approx(-0.6)
        assert fa.y == pytest.approx(-0.8)

    def test_accumulates_with_crowding(self, make_flock):
        flock = make_flock(
            ((100, 100), (0, 0)),
            ((110, 100), (0, 0)),
            ((105, 100), (0, 0)),
        )
        assert flock.separation(flock.population[0]) == Vector2D(-2, 0)

    def test_radius_is_inclusive(self, make_flock):
        flock = make_flock(((100, 100), (0, 0)), ((118, 100), (0, 0)))
        assert flock.separation(flock.population[0]) == Vector2D(-1, 0)

    def test_outside_radius(self, make_flock):
        flock = make_flock(((100, 100), (0, 0)), ((119, 100), (0, 0)))
        assert flock.separation(flock.population[0]) == Vector2D.zero()

    def test_coincident_boids_contribute_nothing(self, make_flock):
        flock = make_flock(((50, 50), (1, 0)), ((50, 50), (0, 1)))
        force = flock.separation(flock.population[0])
        assert force == Vector2D.zero()
        assert math.isfinite(force.x) and math.isfinite(force.y)

    def test_single_boid_is_zero(self, make_flock):
        flock = make_flock(((50, 50), (1, 1)))
        assert flock.separation(flock.population[0]) == Vector2D.zero()


class TestAlignment:
    """Mean velocity of neighbors within the alignment radius."""

    def test_identical_velocities_converge(self, make_flock):
        shared = (1.25, -0.5)
        flock = make_flock(
            ((100, 100), shared),
            ((110, 100), shared),
            ((100, 120), shared),
            ((90, 90), shared),
        )
        for boid in flock.population:
            assert flock.alignment(boid) == Vector2D(*shared)

    def test_excludes_self(self, make_flock):
        flock = make_flock(((100, 100), (2, 0)), ((110, 100), (0, 2)))
        assert flock.alignment(flock.population[0]) == Vector2D(0, 2)

    def test_radius_is_inclusive(self, make_flock):
        flock = make_flock(((100, 100), (0, 0)), ((140, 100), (1, 1)))
        assert flock.alignment(flock.population[0]) == Vector2D(1, 1)

    def test_outside_radius(self, make_flock):
        flock = make_flock(((100, 100), (0, 0)), ((141, 100), (1, 1)))
        assert flock.alignment(flock.population[0]) == Vector2D.zero()

    def test_single_boid_is_zero(self, make_flock):
        flock = make_flock(((50, 50), (1, 1)))
        assert flock.alignment(flock.population[0]) == Vector2D.zero()


class TestPointerAvoidance:
    """Displacement away from the pointer when inside its radius."""

    def test_inside_radius(self, make_flock, target):
        flock = make_flock(((100, 100), (0, 0)))
        target.move_to(105, 97)
        assert flock.pointer_avoidance(flock.population[0]) == Vector2D(-5, 3)

    def test_at_radius_is_outside(self, make_flock, target):
        flock = make_flock(((100, 100), (0, 0)))
        target.move_to(122, 100)
        assert flock.pointer_avoidance(flock.population[0]) == Vector2D.zero()

    def test_parked_pointer_reaches_no_boid(self, make_flock, target):
        target.park()
        flock = make_flock(((0.001, 0.001), (0, 0)))
        assert flock.pointer_avoidance(flock.population[0]) == Vector2D.zero()


class TestWrapCoordinate:
    """Toroidal wrap of a single axis."""

    @pytest.mark.parametrize("value", [0.0, 0.5, 50.0, 99.75])
    def test_inside_is_noop(self, value):
        assert wrap_coordinate(value, 100.0) == value

    def test_bound_maps_to_zero(self):
        assert wrap_coordinate(100.0, 100.0) == 0.0

    def test_past_bound(self):
        assert wrap_coordinate(105.0, 100.0) == 5.0

    def test_negative(self):
        assert wrap_coordinate(-5.0, 100.0) == 95.0

    def test_idempotent(self):
        once = wrap_coordinate(-37.5, 100.0)
        assert wrap_coordinate(once, 100.0) == once
