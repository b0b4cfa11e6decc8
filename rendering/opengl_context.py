"""OpenGL context helpers for Heartdrift's 2D scene rendering."""
from __future__ import annotations

from typing import Tuple

from OpenGL import GL as gl


def initialize_gl(surface_size: Tuple[int, int]) -> None:
    """Configure a top-left origin orthographic projection with alpha blending."""
    width, height = surface_size
    gl.glViewport(0, 0, width, height)

    gl.glMatrixMode(gl.GL_PROJECTION)
    gl.glLoadIdentity()
    gl.glOrtho(0, width, height, 0, -1, 1)

    gl.glMatrixMode(gl.GL_MODELVIEW)
    gl.glLoadIdentity()

    gl.glDisable(gl.GL_DEPTH_TEST)
    gl.glEnable(gl.GL_BLEND)
    gl.glBlendFunc(gl.GL_SRC_ALPHA, gl.GL_ONE_MINUS_SRC_ALPHA)
    gl.glPixelStorei(gl.GL_UNPACK_ALIGNMENT, 1)


def resize_viewport(surface_size: Tuple[int, int]) -> None:
    """Update viewport and projection when the window changes size."""
    initialize_gl(surface_size)


def clear_background(color: Tuple[float, float, float, float]) -> None:
    gl.glClearColor(*color)
    gl.glClear(gl.GL_COLOR_BUFFER_BIT | gl.GL_DEPTH_BUFFER_BIT)
