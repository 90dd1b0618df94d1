"""
Impact fragments thrown out when a bullet detonates.
"""

from __future__ import annotations
import math
import random
from typing import TYPE_CHECKING

from .config import (
    IMPACT_BRIGHTNESS_MAX,
    IMPACT_BRIGHTNESS_MIN,
    IMPACT_DECAY_MAX,
    IMPACT_DECAY_MIN,
    IMPACT_FRICTION,
    IMPACT_GRAVITY,
    IMPACT_HUE_VARIANCE,
    IMPACT_SPEED_MAX,
    IMPACT_SPEED_MIN,
    IMPACT_TRAIL_LENGTH,
    IMPACT_TRANSPARENCY,
)
from .utils import Trail, random_range

if TYPE_CHECKING:
    from .canvas import Canvas


class Impact:
    """
    One fragment of an explosion. Moves outward along a fixed angle, slowed
    by friction and pulled down by gravity, while fading out.
    """

    def __init__(
        self,
        x: float,
        y: float,
        hue: float,
        trail_length: int = IMPACT_TRAIL_LENGTH,
        friction: float = IMPACT_FRICTION,
        gravity: float = IMPACT_GRAVITY,
        rng=random,
    ) -> None:
        self.x = x
        self.y = y
        self.angle = random_range(0, math.pi * 2, rng)
        self.friction = friction
        self.gravity = gravity
        self.hue = random_range(
            hue - IMPACT_HUE_VARIANCE, hue + IMPACT_HUE_VARIANCE, rng
        )
        self.brightness = random_range(
            IMPACT_BRIGHTNESS_MIN, IMPACT_BRIGHTNESS_MAX, rng
        )
        self.decay = random_range(IMPACT_DECAY_MIN, IMPACT_DECAY_MAX, rng)
        self.speed = random_range(IMPACT_SPEED_MIN, IMPACT_SPEED_MAX, rng)
        self.trail = Trail(trail_length, x, y)
        self.transparency = IMPACT_TRANSPARENCY
        self.active = True

    def update(self) -> bool:
        """
        Move and fade the impact one tick.
        Returns False once transparency has dropped to the decay rate or below.
        """
        self.trail.push(self.x, self.y)
        self.speed *= self.friction
        self.x += math.cos(self.angle) * self.speed
        self.y += math.sin(self.angle) * self.speed + self.gravity
        self.transparency -= self.decay
        # Compared against decay, not zero: the last faint frame is never drawn
        if self.transparency <= self.decay:
            self.active = False
        return self.active

    def draw(self, canvas: Canvas) -> None:
        trail_x, trail_y = self.trail.oldest
        canvas.stroke_line(
            trail_x,
            trail_y,
            self.x,
            self.y,
            (self.hue, 100, self.brightness, self.transparency),
        )
