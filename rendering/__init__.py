"""Rendering components for the 2D boids simulation."""

from .surface import GLSurface
from .text import TextRenderer

__all__ = ["GLSurface", "TextRenderer"]
