"""OpenGL drawing surface for boid glyphs."""

import math

from OpenGL.GL import *

from config import boids as config


class GLSurface:
    """Draws outlined polygons and circles in screen space."""

    def __init__(self, circle_segments: int = config.POINTER["segments"]):
        self.circle_segments = circle_segments
        self._unit_circle = [
            (math.cos(2 * math.pi * k / circle_segments),
             math.sin(2 * math.pi * k / circle_segments))
            for k in range(circle_segments)
        ]

    def clear(self):
        glClear(GL_COLOR_BUFFER_BIT)

    def draw_polygon(self, points, color):
        glColor3f(*color)
        glBegin(GL_LINE_LOOP)
        for x, y in points:
            glVertex2f(x, y)
        glEnd()

    def draw_circle(self, center, radius, color):
        cx, cy = center
        glColor3f(*color)
        glBegin(GL_LINE_LOOP)
        for ux, uy in self._unit_circle:
            glVertex2f(cx + ux * radius, cy + uy * radius)
        glEnd()
