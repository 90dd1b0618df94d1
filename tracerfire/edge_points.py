"""
Launch points along the screen edges for automated bullets.
"""

from __future__ import annotations
import random
from typing import List

from .config import (
    EDGE_POINT_CACHE_SIZE,
    EDGE_POINT_EXCLUDED_BAND,
    EDGE_POINT_MAX_ATTEMPTS,
)
from .utils import Point

# Edge indices, in the order they are drawn from
TOP, BOTTOM, LEFT, RIGHT = range(4)


class EdgePointGenerator:
    """
    Generates launch points on the screen edges and caches them.
    Once the cache is full, points are reused instead of generated, so
    automated launches cluster around a stable set of origins.
    """

    def __init__(
        self,
        cache_size: int = EDGE_POINT_CACHE_SIZE,
        excluded_band=EDGE_POINT_EXCLUDED_BAND,
        max_attempts: int = EDGE_POINT_MAX_ATTEMPTS,
        rng=random,
    ) -> None:
        self.cache_size = cache_size
        self.excluded_band = excluded_band
        self.max_attempts = max_attempts
        self.rng = rng
        self.points: List[Point] = []

    def get_starting_point(self, width: float, height: float) -> Point:
        """Return a cached point if the cache is full, else a new edge point."""
        if len(self.points) >= self.cache_size:
            return self.points[int(self.rng.random() * len(self.points))]
        edge = int(self.rng.random() * 4)
        if edge == TOP:
            point = (self.rng.random() * width, 0.0)
        elif edge == BOTTOM:
            point = (self._bottom_x(width), float(height))
        elif edge == LEFT:
            point = (0.0, self.rng.random() * height)
        else:
            point = (float(width), self.rng.random() * height)
        self.points.append(point)
        return point

    def _in_band(self, x: float, width: float) -> bool:
        low, high = self.excluded_band
        return width * low < x < width * high

    def _bottom_x(self, width: float) -> float:
        """Sample x along the bottom edge outside the reserved center band."""
        for _ in range(self.max_attempts):
            x = self.rng.random() * width
            if not self._in_band(x, width):
                return x
        # Map a uniform sample straight into the allowed region
        low, high = self.excluded_band
        x = self.rng.random() * width * (1.0 - (high - low))
        if x > width * low:
            x += width * (high - low)
        return x
