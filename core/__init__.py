"""
Core application components.

Import from the submodules directly (core.application, core.frame_limiter, ...);
the window and OpenGL pieces are not pulled in by importing the package.
"""
