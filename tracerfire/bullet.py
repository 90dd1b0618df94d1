"""
Bullet/projectile representation for the animation.
"""

from __future__ import annotations
import math
import random
from typing import TYPE_CHECKING

from .config import (
    BULLET_ACCELERATION,
    BULLET_ARC_HEIGHT,
    BULLET_ARC_LIFT,
    BULLET_BRIGHTNESS_MAX,
    BULLET_BRIGHTNESS_MIN,
    BULLET_GRAVITY,
    BULLET_SPEED,
    BULLET_TARGET_INDICATOR_ENABLED,
    BULLET_TARGET_RADIUS_MAX,
    BULLET_TARGET_RADIUS_MIN,
    BULLET_TARGET_RADIUS_STEP,
    BULLET_TRAIL_LENGTH,
)
from .utils import Trail, calculate_distance, random_range

if TYPE_CHECKING:
    from .canvas import Canvas


class Bullet:
    """
    Represents a projectile flying an arc from a start point to a target.
    Attributes:
        x, y: Current position in pixels.
        start_x, start_y, end_x, end_y: Launch and target points.
        distance_to_end: Straight-line distance from start to target.
        distance_traveled: Accumulated speed; drives progress along the arc.
        trail: Recent positions, newest first.
        angle: Straight-line heading to the target (informational only).
        speed: Pixels per tick, multiplied by acceleration every update.
        brightness: HSL lightness of the stroke.
        target_radius: Current radius of the pulsing target reticle.
        active: False once the bullet has reached its target.
    """

    def __init__(
        self,
        start_x: float,
        start_y: float,
        end_x: float,
        end_y: float,
        trail_length: int = BULLET_TRAIL_LENGTH,
        speed: float = BULLET_SPEED,
        acceleration: float = BULLET_ACCELERATION,
        show_target: bool = BULLET_TARGET_INDICATOR_ENABLED,
        rng=random,
    ) -> None:
        self.x = start_x
        self.y = start_y
        self.start_x = start_x
        self.start_y = start_y
        self.end_x = end_x
        self.end_y = end_y
        self.distance_to_end = calculate_distance(start_x, start_y, end_x, end_y)
        self.distance_traveled = 0.0
        self.trail = Trail(trail_length, start_x, start_y)
        self.angle = math.atan2(end_y - start_y, end_x - start_x)
        self.speed = speed
        self.acceleration = acceleration
        self.brightness = random_range(
            BULLET_BRIGHTNESS_MIN, BULLET_BRIGHTNESS_MAX, rng
        )
        self.show_target = show_target
        self.target_radius = BULLET_TARGET_RADIUS_MIN
        self.active = True

    def update(self) -> bool:
        """
        Advance the bullet one tick along its arc.
        Returns False on the tick the bullet reaches its target.
        """
        self.trail.push(self.x, self.y)
        # Reticle pulse, independent of flight progress
        if self.show_target:
            if self.target_radius < BULLET_TARGET_RADIUS_MAX:
                self.target_radius += BULLET_TARGET_RADIUS_STEP
            else:
                self.target_radius = BULLET_TARGET_RADIUS_MIN
        self.speed *= self.acceleration
        self.distance_traveled += self.speed
        if self.distance_to_end == 0:
            t = 1.0
        else:
            t = min(self.distance_traveled / self.distance_to_end, 1.0)
        # Control point sits above the higher endpoint and lifts as the bullet travels
        cx = (self.start_x + self.end_x) / 2
        cy = min(self.start_y, self.end_y) - (
            BULLET_ARC_HEIGHT + self.distance_traveled * BULLET_ARC_LIFT
        )
        u = 1.0 - t
        self.x = u * u * self.start_x + 2 * u * t * cx + t * t * self.end_x
        self.y = u * u * self.start_y + 2 * u * t * cy + t * t * self.end_y
        self.y += BULLET_GRAVITY
        if self.distance_traveled >= self.distance_to_end:
            self.x = self.end_x
            self.y = self.end_y
            self.active = False
        return self.active

    def draw(self, canvas: Canvas, hue: float) -> None:
        """Stroke the trail segment and, if enabled, the target reticle."""
        color = (hue, 100, self.brightness, 1.0)
        trail_x, trail_y = self.trail.oldest
        canvas.stroke_line(trail_x, trail_y, self.x, self.y, color)
        if self.show_target:
            canvas.stroke_circle(self.end_x, self.end_y, self.target_radius, color)
