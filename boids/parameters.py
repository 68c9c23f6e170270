"""Flocking parameters: radii, weights, speed limit and glyph settings."""

import math
from dataclasses import dataclass, fields
from typing import Tuple

from config import boids as config


GLYPHS = ("triangle", "circle")

NUMERIC_FIELDS = (
    "cohesion_min_radius", "cohesion_radius", "separation_radius", "alignment_radius",
    "cohesion_weight", "separation_weight", "alignment_weight", "avoidance_weight",
    "speed_limit", "jitter", "size", "spread", "turn_rate",
)


@dataclass(frozen=True)
class FlockConfig:
    """
    Configuration record for a Flock.

    Treated as immutable during a run; switching presets swaps the whole record.

    ### Neighbor radii
    * **cohesion_min_radius** / **cohesion_radius**: neighbors strictly between
      the two count toward the local centroid.
    * **separation_radius**: neighbors at or inside this distance push away.
    * **alignment_radius**: neighbors at or inside this distance share heading.

    ### Weights
    * **cohesion_weight**, **separation_weight**, **alignment_weight**,
      **avoidance_weight**: scale each force before it is added to velocity.

    ### Motion
    * **speed_limit**: maximum velocity magnitude after every tick.
    * **jitter**: per-axis uniform noise magnitude added to velocity (0 = off).

    ### Glyph
    * **glyph**: "triangle" or "circle".
    * **size**: triangle length or circle radius, in pixels.
    * **spread**: triangle tail half-angle, in degrees.
    * **turn_rate**: max glyph rotation per rendered frame, in radians.
    * **color**: RGB tuple (0-1 range).
    """
    cohesion_min_radius: float = 8.0
    cohesion_radius: float = 40.0
    separation_radius: float = 18.0
    alignment_radius: float = 40.0
    cohesion_weight: float = 0.002
    separation_weight: float = 0.1
    alignment_weight: float = 0.2
    avoidance_weight: float = 0.1
    speed_limit: float = 2.0
    jitter: float = 0.0
    glyph: str = "triangle"
    size: float = 8.0
    spread: float = 25.0
    turn_rate: float = 0.1
    color: Tuple[float, float, float] = (1.0, 1.0, 1.0)

    def __post_init__(self):
        # NaN compares False against every bound below, so reject it first
        for name in NUMERIC_FIELDS:
            value = getattr(self, name)
            if not math.isfinite(value):
                raise ValueError(f"{name} must be finite, got {value}")

        if self.speed_limit <= 0:
            raise ValueError(f"speed_limit must be positive, got {self.speed_limit}")

        for name in ("cohesion_min_radius", "cohesion_radius", "separation_radius",
                     "alignment_radius", "cohesion_weight", "separation_weight",
                     "alignment_weight", "avoidance_weight", "jitter", "turn_rate"):
            value = getattr(self, name)
            if value < 0:
                raise ValueError(f"{name} must be non-negative, got {value}")

        if self.cohesion_min_radius >= self.cohesion_radius:
            raise ValueError(
                f"cohesion_min_radius ({self.cohesion_min_radius}) must be smaller "
                f"than cohesion_radius ({self.cohesion_radius})"
            )
        if self.separation_radius >= self.cohesion_radius:
            raise ValueError(
                f"separation_radius ({self.separation_radius}) must be smaller "
                f"than cohesion_radius ({self.cohesion_radius})"
            )
        if self.glyph not in GLYPHS:
            raise ValueError(f"glyph must be one of {GLYPHS}, got {self.glyph!r}")
        if self.size <= 0:
            raise ValueError(f"size must be positive, got {self.size}")

    @classmethod
    def from_preset(cls, preset: str = config.DEFAULT_PRESET, **overrides) -> "FlockConfig":
        """Build a config from a named preset in config.boids.PRESETS."""
        if preset not in config.PRESETS:
            raise ValueError(
                f"Unknown preset {preset!r}; available: {', '.join(config.PRESETS)}"
            )
        known = {f.name for f in fields(cls)}
        values = {k: v for k, v in config.PRESETS[preset].items() if k in known}
        values.update(overrides)
        return cls(**values)


def get_preset_list():
    """Preset keys with their display name and description, in definition order."""
    return [(key, p["name"], p["description"]) for key, p in config.PRESETS.items()]
