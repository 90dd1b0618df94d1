"""
OpenGL-backed drawing surface: strokes go to an offscreen texture that is
never cleared, and each frame that texture is copied to the window.
"""

from __future__ import annotations
import logging
import math
import numpy as np
import pygame

try:
    import OpenGL.GL as gl  # noqa: N811
except ImportError:
    raise ImportError(
        "PyOpenGL is required to run this renderer. "
        "Please install via: pip install PyOpenGL PyOpenGL_accelerate"
    )
from .canvas import SOURCE_OVER, Canvas, Color, check_composite
from .config import CIRCLE_SEGMENTS, LINE_WIDTH
from .gl_resources import GLResourceManager
from .gl_utils import (
    create_render_target,
    hsla_to_rgba,
    set_blend_mode,
    setup_opengl,
)

logger = logging.getLogger(__name__)


def unit_circle(segments: int) -> np.ndarray:
    """Vertices of a unit circle as a (segments, 2) float32 array."""
    angles = np.linspace(0.0, 2.0 * math.pi, segments, endpoint=False)
    return np.stack([np.cos(angles), np.sin(angles)], axis=1).astype(np.float32)


class GLCanvas(Canvas):
    """Persistent canvas drawn with fixed-function OpenGL into a framebuffer."""

    def __init__(
        self,
        width: int,
        height: int,
        line_width: float = LINE_WIDTH,
        circle_segments: int = CIRCLE_SEGMENTS,
    ) -> None:
        self.width = width
        self.height = height
        self.composite = SOURCE_OVER
        self._res = GLResourceManager()
        self._circle = unit_circle(circle_segments)
        setup_opengl(width, height)
        gl.glLineWidth(line_width)
        self.fbo, self.texture = create_render_target(width, height, self._res)
        gl.glBindFramebuffer(gl.GL_FRAMEBUFFER, self.fbo)
        logger.info("GL canvas ready (%dx%d)", width, height)

    def set_composite(self, mode: str) -> None:
        self.composite = check_composite(mode)
        set_blend_mode(mode)

    def stroke_line(
        self, x0: float, y0: float, x1: float, y1: float, color: Color
    ) -> None:
        gl.glColor4f(*hsla_to_rgba(*color))
        gl.glBegin(gl.GL_LINES)
        gl.glVertex2f(x0, y0)
        gl.glVertex2f(x1, y1)
        gl.glEnd()

    def stroke_circle(
        self, cx: float, cy: float, radius: float, color: Color
    ) -> None:
        verts = np.ascontiguousarray(
            self._circle * np.float32(radius) + np.array([cx, cy], dtype=np.float32)
        )
        gl.glColor4f(*hsla_to_rgba(*color))
        gl.glEnableClientState(gl.GL_VERTEX_ARRAY)
        gl.glVertexPointer(2, gl.GL_FLOAT, 0, verts)
        gl.glDrawArrays(gl.GL_LINE_LOOP, 0, len(verts))
        gl.glDisableClientState(gl.GL_VERTEX_ARRAY)

    def fill_rect(
        self, x: float, y: float, w: float, h: float, color: Color
    ) -> None:
        gl.glColor4f(*hsla_to_rgba(*color))
        gl.glRectf(x, y, x + w, y + h)

    def present(self) -> None:
        """Copy the offscreen surface to the window over black and flip."""
        gl.glBindFramebuffer(gl.GL_FRAMEBUFFER, 0)
        gl.glDisable(gl.GL_BLEND)
        gl.glClearColor(0.0, 0.0, 0.0, 1.0)
        gl.glClear(gl.GL_COLOR_BUFFER_BIT)
        gl.glEnable(gl.GL_TEXTURE_2D)
        gl.glBindTexture(gl.GL_TEXTURE_2D, self.texture)
        gl.glColor4f(1.0, 1.0, 1.0, 1.0)
        # Texture rows are stored bottom-up; the projection is top-down
        gl.glBegin(gl.GL_QUADS)
        gl.glTexCoord2f(0.0, 1.0)
        gl.glVertex2f(0.0, 0.0)
        gl.glTexCoord2f(1.0, 1.0)
        gl.glVertex2f(self.width, 0.0)
        gl.glTexCoord2f(1.0, 0.0)
        gl.glVertex2f(self.width, self.height)
        gl.glTexCoord2f(0.0, 0.0)
        gl.glVertex2f(0.0, self.height)
        gl.glEnd()
        gl.glBindTexture(gl.GL_TEXTURE_2D, 0)
        gl.glDisable(gl.GL_TEXTURE_2D)
        gl.glEnable(gl.GL_BLEND)
        pygame.display.flip()
        gl.glBindFramebuffer(gl.GL_FRAMEBUFFER, self.fbo)

    def shutdown(self) -> None:
        """Free tracked GL resources."""
        gl.glBindFramebuffer(gl.GL_FRAMEBUFFER, 0)
        self._res.shutdown()
