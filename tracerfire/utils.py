"""
Random and geometry helpers plus the fixed-length trail buffer shared by
bullets and impacts.
"""

from __future__ import annotations
import math
import random
from collections import deque
from typing import Deque, Iterator, Tuple

Point = Tuple[float, float]


def random_range(low: float, high: float, rng=random) -> float:
    """Return a uniform random float in [low, high)."""
    return rng.random() * (high - low) + low


def calculate_distance(ax: float, ay: float, bx: float, by: float) -> float:
    """Euclidean distance between (ax, ay) and (bx, by)."""
    return math.hypot(ax - bx, ay - by)


class Trail:
    """
    Fixed-length history of positions, newest first.
    Pushing a position evicts the oldest one, so the length never changes.
    """

    def __init__(self, length: int, x: float, y: float) -> None:
        if length < 1:
            raise ValueError("Trail length must be at least 1")
        self._points: Deque[Point] = deque(
            [(x, y)] * length, maxlen=length
        )

    def push(self, x: float, y: float) -> None:
        # appendleft on a full deque drops the rightmost (oldest) entry
        self._points.appendleft((x, y))

    @property
    def newest(self) -> Point:
        return self._points[0]

    @property
    def oldest(self) -> Point:
        return self._points[-1]

    def __len__(self) -> int:
        return len(self._points)

    def __iter__(self) -> Iterator[Point]:
        return iter(self._points)
