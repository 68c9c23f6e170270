"""Orthographic 2D viewport matching screen pixels."""

from OpenGL.GL import *


class Viewport:
    """Maps simulation space 1:1 onto the window, origin top-left, y growing down."""

    def __init__(self, width: int, height: int):
        self.width = width
        self.height = height

    def resize(self, width: int, height: int):
        self.width = width
        self.height = height
        self.apply()

    @property
    def size(self) -> tuple:
        return (self.width, self.height)

    def apply(self):
        """Load the projection into OpenGL."""
        glViewport(0, 0, self.width, self.height)
        glMatrixMode(GL_PROJECTION)
        glLoadIdentity()
        glOrtho(0, self.width, self.height, 0, -1, 1)
        glMatrixMode(GL_MODELVIEW)
        glLoadIdentity()
