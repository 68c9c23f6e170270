"""Immutable 2D vector value type shared by boids and the flock."""

import math
from dataclasses import dataclass
from numbers import Real
from typing import Tuple


def _require_scalar(value, operation: str):
    if isinstance(value, bool) or not isinstance(value, Real):
        raise TypeError(
            f"Vector2D {operation} expects a real scalar, got {type(value).__name__}"
        )


def _require_vector(value, operation: str):
    if not isinstance(value, Vector2D):
        raise TypeError(
            f"Vector2D {operation} expects a Vector2D, got {type(value).__name__}"
        )


@dataclass(frozen=True)
class Vector2D:
    """
    A 2D vector with value semantics.

    Every operation returns a new vector; instances are never mutated.

    Attributes:
        x: Horizontal component
        y: Vertical component (screen space, grows downward)
    """
    x: float = 0.0
    y: float = 0.0

    def __post_init__(self):
        _require_scalar(self.x, "component")
        _require_scalar(self.y, "component")
        # Normalize numpy scalars and ints to plain floats
        object.__setattr__(self, "x", float(self.x))
        object.__setattr__(self, "y", float(self.y))

    @classmethod
    def zero(cls) -> "Vector2D":
        return cls(0.0, 0.0)

    def __add__(self, other: "Vector2D") -> "Vector2D":
        _require_vector(other, "addition")
        return Vector2D(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Vector2D") -> "Vector2D":
        _require_vector(other, "subtraction")
        return Vector2D(self.x - other.x, self.y - other.y)

    def __neg__(self) -> "Vector2D":
        return Vector2D(-self.x, -self.y)

    def __mul__(self, scalar: float) -> "Vector2D":
        _require_scalar(scalar, "scaling")
        return Vector2D(self.x * scalar, self.y * scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar: float) -> "Vector2D":
        _require_scalar(scalar, "division")
        return Vector2D(self.x / scalar, self.y / scalar)

    def magnitude(self) -> float:
        return math.hypot(self.x, self.y)

    def angle(self) -> float:
        """Direction in radians, measured from the +x axis."""
        return math.atan2(self.y, self.x)

    def normalize(self) -> "Vector2D":
        """Unit vector in the same direction, or the zero vector for zero input."""
        mag = self.magnitude()
        if mag == 0:
            return Vector2D.zero()
        return Vector2D(self.x / mag, self.y / mag)

    def limit(self, max_magnitude: float) -> "Vector2D":
        """Rescale to max_magnitude if longer, preserving direction."""
        _require_scalar(max_magnitude, "limit")
        mag = self.magnitude()
        if mag > max_magnitude:
            return Vector2D(self.x / mag * max_magnitude, self.y / mag * max_magnitude)
        return self

    def distance_to(self, other: "Vector2D") -> float:
        _require_vector(other, "distance")
        return math.hypot(other.x - self.x, other.y - self.y)

    def as_tuple(self) -> Tuple[float, float]:
        return (self.x, self.y)
