"""Main application class that ties everything together."""

from typing import Optional

import pygame
from pygame.locals import *
from OpenGL.GL import *

from config import boids as config
from .frame_limiter import FrameLimiter
from .input_handler import InputHandler
from .viewport import Viewport
from rendering import GLSurface, TextRenderer
from boids import Simulation


PRESET_KEYS = dict(zip((K_1, K_2, K_3, K_4), config.PRESETS))


class Application:
    """Main application managing the window, frame cadence and rendering."""

    def __init__(
        self,
        width: int = config.WINDOW["width"],
        height: int = config.WINDOW["height"],
        preset: str = config.DEFAULT_PRESET,
        fps: float = config.WINDOW["fps"],
        seed: Optional[int] = None,
        density: float = config.POPULATION["density"]
    ):
        pygame.init()
        pygame.display.set_mode((width, height), DOUBLEBUF | OPENGL | RESIZABLE)
        pygame.display.set_caption(config.WINDOW["title"])

        # Core components
        self.viewport = Viewport(width, height)
        self.simulation = Simulation(width, height, preset=preset, seed=seed, density=density)
        self.input_handler = InputHandler(self.simulation)
        self.limiter = FrameLimiter(fps)

        # Rendering components
        self.surface = GLSurface()
        self.text_renderer = TextRenderer()

        # State
        self.clock = pygame.time.Clock()
        self.running = True
        self.paused = False
        self.show_help = True
        self.fps = 0

        self._setup_gl()

    def _setup_gl(self):
        """Initialize OpenGL settings."""
        glClearColor(*config.COLORS["background"])
        glEnable(GL_LINE_SMOOTH)
        self.viewport.apply()

    def _handle_events(self):
        """Process all pending pygame events."""
        for event in pygame.event.get():
            if event.type == KEYDOWN and event.key == K_SPACE:
                self.paused = not self.paused
                print(f"[App] {'Paused' if self.paused else 'Running'}")
            elif event.type == KEYDOWN and event.key == K_r:
                print("[App] Resetting simulation...")
                self.simulation.reset()
            elif event.type == KEYDOWN and event.key == K_h:
                self.show_help = not self.show_help
            elif event.type == KEYDOWN and event.key in PRESET_KEYS:
                self.simulation.set_preset(PRESET_KEYS[event.key])
            elif event.type == VIDEORESIZE:
                self._resize(event.w, event.h)
            elif not self.input_handler.handle_event(event):
                self.running = False

    def _resize(self, width: int, height: int):
        """Apply a window resize between ticks."""
        if width <= 0 or height <= 0:
            return
        self.viewport.resize(width, height)
        self.simulation.resize(width, height)
        # Resume the cadence with an immediate frame at the new size
        self.limiter.reset()

    def _render(self):
        """Render the scene."""
        self.simulation.render(self.surface)

        screen_size = self.viewport.size
        status = "PAUSED" if self.paused else "RUNNING"
        self.text_renderer.draw_text(
            f"Boids: {len(self.simulation.flock)}  |  FPS: {self.fps:.0f}  |  "
            f"{self.simulation.preset}  |  {status}",
            10, 10, screen_size
        )
        if self.show_help:
            self.text_renderer.draw_text(
                "Click: Spawn | 1-4: Preset | SPACE: Pause | R: Reset | H: Toggle help",
                10, 32, screen_size
            )

        pygame.display.flip()

    def run(self):
        """Main application loop."""
        print("[App] Starting main loop...")

        while self.running:
            self._handle_events()

            if not self.limiter.ready(pygame.time.get_ticks()):
                pygame.time.wait(1)
                continue

            self.clock.tick()
            self.fps = self.clock.get_fps()
            if not self.paused:
                self.simulation.tick()
            self._render()

        pygame.quit()
        print("[App] Shutdown complete")
