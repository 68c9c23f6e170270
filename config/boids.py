"""Configuration for 2D Boids flocking simulation."""

WINDOW = {
    "width": 1280,
    "height": 720,
    "title": "2D Boids",
    "fps": 90,               # Target update/render rate
}

COLORS = {
    "background": (0.0, 0.0, 0.0, 1.0),
    "pointer": (1.0, 1.0, 1.0),
    "text": (230, 230, 230),
}

POINTER = {
    "radius": 22.0,          # Avoidance radius around the mouse
    "segments": 32,          # Outline resolution of the pointer ring
}

POPULATION = {
    "density": 3000.0,       # Screen area (px^2) per boid
    "initial_speed": 1.0,    # Spawned velocity is uniform in [-v, v) per axis
}

DEFAULT_PRESET = "classic"

# Flocking presets. Each one is a complete set of radii, weights and glyph
# settings; cohesion must stay an order of magnitude below the other weights
# or the flock collapses to a point.
PRESETS = {
    "classic": {
        "name": "Classic",
        "description": "Outlined triangles, loose flocks",
        "cohesion_min_radius": 8.0,
        "cohesion_radius": 40.0,
        "separation_radius": 18.0,
        "alignment_radius": 40.0,
        "cohesion_weight": 0.002,
        "separation_weight": 0.1,
        "alignment_weight": 0.2,
        "avoidance_weight": 0.1,
        "speed_limit": 2.0,
        "jitter": 0.0,
        "glyph": "triangle",
        "size": 8.0,
        "spread": 25.0,      # Half-angle of the triangle tail, degrees
        "turn_rate": 0.1,    # Max glyph rotation per frame, radians
        "color": (1.0, 1.0, 1.0),
    },
    "school": {
        "name": "School",
        "description": "Long, tightly aligned schools of fish",
        "cohesion_min_radius": 6.0,
        "cohesion_radius": 60.0,
        "separation_radius": 14.0,
        "alignment_radius": 50.0,
        "cohesion_weight": 0.003,
        "separation_weight": 0.08,
        "alignment_weight": 0.25,
        "avoidance_weight": 0.12,
        "speed_limit": 2.5,
        "jitter": 0.0,
        "glyph": "triangle",
        "size": 6.0,
        "spread": 20.0,
        "turn_rate": 0.15,
        "color": (0.55, 0.85, 1.0),
    },
    "swarm": {
        "name": "Swarm",
        "description": "Jittery insect-like swarm drawn as dots",
        "cohesion_min_radius": 4.0,
        "cohesion_radius": 30.0,
        "separation_radius": 12.0,
        "alignment_radius": 25.0,
        "cohesion_weight": 0.004,
        "separation_weight": 0.15,
        "alignment_weight": 0.1,
        "avoidance_weight": 0.15,
        "speed_limit": 3.0,
        "jitter": 0.05,
        "glyph": "circle",
        "size": 2.5,
        "spread": 25.0,
        "turn_rate": 0.1,
        "color": (1.0, 0.85, 0.4),
    },
    "drift": {
        "name": "Drift",
        "description": "Slow, calm drifting particles",
        "cohesion_min_radius": 10.0,
        "cohesion_radius": 50.0,
        "separation_radius": 20.0,
        "alignment_radius": 50.0,
        "cohesion_weight": 0.001,
        "separation_weight": 0.05,
        "alignment_weight": 0.3,
        "avoidance_weight": 0.1,
        "speed_limit": 1.2,
        "jitter": 0.0,
        "glyph": "circle",
        "size": 3.0,
        "spread": 25.0,
        "turn_rate": 0.1,
        "color": (0.75, 1.0, 0.75),
    },
}
