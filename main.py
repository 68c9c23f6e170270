"""
2D Boids Simulation
===================

A real-time flocking simulation: cohesion, separation and alignment, with
boids steering away from the mouse pointer.

Controls:
    - Mouse move: Boids avoid the pointer
    - Click: Spawn a boid at the pointer
    - 1-4: Switch flocking preset
    - SPACE: Pause/Resume
    - R: Reset population
    - H: Toggle help text
    - ESC: Quit

Usage:
    python main.py                        # Default window and preset
    python main.py --preset swarm         # Start with a preset
    python main.py --seed 42 --fps 60     # Reproducible start, 60 updates/s
    python main.py --list-presets         # Show available presets
"""

import argparse

from config import boids as config
from boids import get_preset_list


def print_preset_menu():
    """Print the available flocking presets."""
    print("\n" + "=" * 60)
    print("  FLOCKING PRESETS")
    print("=" * 60)
    for idx, (key, name, description) in enumerate(get_preset_list(), start=1):
        print(f"  [{idx}] {key:<10} {name:<10} {description}")
    print("=" * 60)


def main():
    parser = argparse.ArgumentParser(description="2D boids flocking simulation")
    parser.add_argument("--preset", "-p", type=str, default=config.DEFAULT_PRESET,
                        choices=list(config.PRESETS), help="Flocking preset to start with")
    parser.add_argument("--fps", type=float, default=config.WINDOW["fps"], help="Target update rate")
    parser.add_argument("--seed", type=int, help="Seed for the initial population and jitter")
    parser.add_argument("--width", type=int, default=config.WINDOW["width"], help="Window width")
    parser.add_argument("--height", type=int, default=config.WINDOW["height"], help="Window height")
    parser.add_argument("--density", type=float, default=config.POPULATION["density"],
                        help="Screen area (px^2) per boid")
    parser.add_argument("--list-presets", action="store_true", help="List presets and exit")
    args = parser.parse_args()

    if args.list_presets:
        print_preset_menu()
        return

    if args.width <= 0 or args.height <= 0:
        parser.error("--width and --height must be positive")
    if args.fps <= 0:
        parser.error("--fps must be positive")
    if args.density <= 0:
        parser.error("--density must be positive")

    # Window and OpenGL are only needed once we actually run
    from core.application import Application

    app = Application(
        width=args.width,
        height=args.height,
        preset=args.preset,
        fps=args.fps,
        seed=args.seed,
        density=args.density,
    )
    app.run()


if __name__ == "__main__":
    main()
