"""Input handling for pointer and window events."""

import pygame
from pygame.locals import *

from boids import Simulation


class InputHandler:
    """Feeds mouse events into the simulation's pointer target and spawner."""

    def __init__(self, simulation: Simulation):
        self.simulation = simulation

    def handle_event(self, event: pygame.event.Event) -> bool:
        """
        Handle a single pygame event.
        Returns False if the application should quit, True otherwise.
        """
        if event.type == QUIT:
            return False
        elif event.type == KEYDOWN:
            if event.key == K_ESCAPE:
                return False
        elif event.type == MOUSEMOTION:
            self.simulation.move_pointer(*event.pos)
        elif event.type == MOUSEBUTTONDOWN:
            if event.button == 1:
                self.simulation.move_pointer(*event.pos)
                self.simulation.spawn_at(*event.pos)
        elif event.type == pygame.WINDOWLEAVE:
            self.simulation.park_pointer()

        return True
