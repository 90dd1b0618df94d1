"""
Drawing surface interface and the per-frame fade that turns strokes into trails.

Colors passed to a Canvas are HSLA tuples: (hue in degrees, saturation %,
lightness %, alpha 0..1). Hue may be any real number; it is read modulo 360.
"""

from __future__ import annotations
from typing import Tuple

from .config import CANVAS_CLEANUP_ALPHA

Color = Tuple[float, float, float, float]

# Compositing modes, named after their 2D canvas equivalents
SOURCE_OVER = "source-over"
# New content erases existing pixels in proportion to its alpha
DESTINATION_OUT = "destination-out"
# New content is added to existing pixels
LIGHTER = "lighter"
COMPOSITE_MODES = (SOURCE_OVER, DESTINATION_OUT, LIGHTER)


class Canvas:
    """Abstract persistent 2D raster surface."""

    width: int
    height: int

    def set_composite(self, mode: str) -> None:
        raise NotImplementedError(
            "Canvas.set_composite must be implemented by subclasses"
        )

    def stroke_line(
        self, x0: float, y0: float, x1: float, y1: float, color: Color
    ) -> None:
        raise NotImplementedError(
            "Canvas.stroke_line must be implemented by subclasses"
        )

    def stroke_circle(
        self, cx: float, cy: float, radius: float, color: Color
    ) -> None:
        raise NotImplementedError(
            "Canvas.stroke_circle must be implemented by subclasses"
        )

    def fill_rect(
        self, x: float, y: float, w: float, h: float, color: Color
    ) -> None:
        raise NotImplementedError(
            "Canvas.fill_rect must be implemented by subclasses"
        )

    def present(self) -> None:
        """Show the current surface contents on screen."""


def check_composite(mode: str) -> str:
    if mode not in COMPOSITE_MODES:
        raise ValueError(f"Unknown composite mode: {mode!r}")
    return mode


def fade_canvas(canvas: Canvas, alpha: float = CANVAS_CLEANUP_ALPHA) -> None:
    """
    Erode everything drawn so far by a small alpha instead of clearing, then
    leave the canvas in additive mode so overlapping strokes brighten.
    """
    canvas.set_composite(DESTINATION_OUT)
    canvas.fill_rect(0, 0, canvas.width, canvas.height, (0, 0, 0, alpha))
    canvas.set_composite(LIGHTER)
