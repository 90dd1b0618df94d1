"""
Helper functions for OpenGL setup, compositing modes, offscreen render targets
and color conversion.
"""

from __future__ import annotations
import logging
import pygame
import OpenGL.GL as gl  # noqa: N811
from typing import TYPE_CHECKING, Tuple

from .canvas import DESTINATION_OUT, LIGHTER, SOURCE_OVER, check_composite

if TYPE_CHECKING:
    from .gl_resources import GLResourceManager

logger = logging.getLogger(__name__)

# (src_rgb, dst_rgb, src_alpha, dst_alpha) per composite mode
BLEND_FUNCS = {
    SOURCE_OVER: (
        gl.GL_SRC_ALPHA,
        gl.GL_ONE_MINUS_SRC_ALPHA,
        gl.GL_ONE,
        gl.GL_ONE_MINUS_SRC_ALPHA,
    ),
    DESTINATION_OUT: (
        gl.GL_ZERO,
        gl.GL_ONE_MINUS_SRC_ALPHA,
        gl.GL_ZERO,
        gl.GL_ONE_MINUS_SRC_ALPHA,
    ),
    LIGHTER: (gl.GL_SRC_ALPHA, gl.GL_ONE, gl.GL_ONE, gl.GL_ONE),
}


def setup_opengl(width: int, height: int) -> None:
    """
    Configure OpenGL for 2D drawing in pixel coordinates: viewport, an
    orthographic projection with the origin at the top-left, no depth
    testing, blending on.
    """
    gl.glViewport(0, 0, width, height)
    gl.glMatrixMode(gl.GL_PROJECTION)
    gl.glLoadIdentity()
    gl.glOrtho(0, width, height, 0, -1, 1)
    gl.glMatrixMode(gl.GL_MODELVIEW)
    gl.glLoadIdentity()
    gl.glDisable(gl.GL_DEPTH_TEST)
    gl.glEnable(gl.GL_BLEND)
    set_blend_mode(SOURCE_OVER)


def set_blend_mode(mode: str) -> None:
    """Select the blend equation matching a canvas composite mode."""
    src_rgb, dst_rgb, src_a, dst_a = BLEND_FUNCS[check_composite(mode)]
    gl.glBlendFuncSeparate(src_rgb, dst_rgb, src_a, dst_a)


def _clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


def hsla_to_rgba(
    hue: float, saturation: float, lightness: float, alpha: float = 1.0
) -> Tuple[float, float, float, float]:
    """
    Convert an HSLA color (degrees, percent, percent, 0..1) to float RGBA.
    Hue wraps modulo 360; the other channels are clamped.
    """
    color = pygame.Color(0, 0, 0)
    color.hsla = (
        hue % 360.0,
        _clamp(saturation, 0.0, 100.0),
        _clamp(lightness, 0.0, 100.0),
        100.0,
    )
    return (
        color.r / 255.0,
        color.g / 255.0,
        color.b / 255.0,
        _clamp(alpha, 0.0, 1.0),
    )


def create_render_target(
    width: int, height: int, res_mgr: GLResourceManager
) -> Tuple[int, int]:
    """
    Create a 16-bit normalized RGBA texture and a framebuffer drawing into it.
    Additive strokes saturate at full intensity, and the extra precision keeps
    the slow per-frame fade from stalling at 8-bit rounding.
    Returns (framebuffer_id, texture_id); both are tracked by res_mgr.
    Raises RuntimeError if the framebuffer is incomplete.
    """
    tex = res_mgr.gen_texture()
    gl.glBindTexture(gl.GL_TEXTURE_2D, tex)
    gl.glTexParameteri(gl.GL_TEXTURE_2D, gl.GL_TEXTURE_MIN_FILTER, gl.GL_NEAREST)
    gl.glTexParameteri(gl.GL_TEXTURE_2D, gl.GL_TEXTURE_MAG_FILTER, gl.GL_NEAREST)
    gl.glTexParameteri(gl.GL_TEXTURE_2D, gl.GL_TEXTURE_WRAP_S, gl.GL_CLAMP_TO_EDGE)
    gl.glTexParameteri(gl.GL_TEXTURE_2D, gl.GL_TEXTURE_WRAP_T, gl.GL_CLAMP_TO_EDGE)
    gl.glTexImage2D(
        gl.GL_TEXTURE_2D,
        0,
        gl.GL_RGBA16,
        width,
        height,
        0,
        gl.GL_RGBA,
        gl.GL_UNSIGNED_SHORT,
        None,
    )
    gl.glBindTexture(gl.GL_TEXTURE_2D, 0)
    fbo = res_mgr.gen_framebuffer()
    with res_mgr.bind(
        lambda obj: gl.glBindFramebuffer(gl.GL_FRAMEBUFFER, obj), fbo
    ):
        gl.glFramebufferTexture2D(
            gl.GL_FRAMEBUFFER,
            gl.GL_COLOR_ATTACHMENT0,
            gl.GL_TEXTURE_2D,
            tex,
            0,
        )
        status = gl.glCheckFramebufferStatus(gl.GL_FRAMEBUFFER)
        if status != gl.GL_FRAMEBUFFER_COMPLETE:
            logger.error("Framebuffer incomplete: status 0x%x", status)
            raise RuntimeError(f"Framebuffer incomplete: 0x{status:x}")
        # Start from a fully transparent surface
        gl.glClearColor(0.0, 0.0, 0.0, 0.0)
        gl.glClear(gl.GL_COLOR_BUFFER_BIT)
    return fbo, tex
