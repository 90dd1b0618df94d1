from __future__ import annotations
import logging
import random
from typing import List, Optional

from .bullet import Bullet
from .canvas import Canvas, fade_canvas
from .config import (
    CANVAS_CLEANUP_ALPHA,
    HUE_INITIAL,
    HUE_STEP_INCREASE,
    IMPACT_COUNT,
    LOG_THROTTLE_TICKS,
    TICKS_PER_BULLET_AUTOMATED_MAX,
    TICKS_PER_BULLET_AUTOMATED_MIN,
    TICKS_PER_BULLET_MIN,
)
from .edge_points import EdgePointGenerator
from .impact import Impact
from .input_handler import InputState
from .utils import random_range

logger = logging.getLogger(__name__)


class Animation:
    """
    Frame orchestrator: owns the bullet and impact registries, the rotating
    hue and the spawn counters, and advances all of them once per tick.
    """

    def __init__(
        self,
        input_state: Optional[InputState] = None,
        rng=None,
        impact_count: int = IMPACT_COUNT,
    ) -> None:
        self.input = input_state or InputState()
        self.rng = rng or random
        self.impact_count = impact_count
        # Registries of live entities, in spawn order
        self.bullets: List[Bullet] = []
        self.impacts: List[Impact] = []
        self.hue = HUE_INITIAL
        self.ticks_since_bullet = 0
        self.ticks_since_bullet_automated = 0
        self.tick_count = 0
        self.edge_points = EdgePointGenerator(rng=self.rng)

    def tick(self, canvas: Canvas) -> None:
        """Run one frame: fade, draw and advance every entity, then spawn."""
        self.tick_count += 1
        self.hue += HUE_STEP_INCREASE
        fade_canvas(canvas, CANVAS_CLEANUP_ALPHA)
        self.update_bullets(canvas)
        self.update_impacts(canvas)
        self.launch_automated_bullet(canvas.width, canvas.height)
        self.launch_manual_bullet(canvas.width, canvas.height)
        if self.tick_count % LOG_THROTTLE_TICKS == 0:
            logger.debug(
                "Tick %d | bullets=%d impacts=%d hue=%.1f",
                self.tick_count,
                len(self.bullets),
                len(self.impacts),
                self.hue,
            )

    def update_bullets(self, canvas: Canvas) -> None:
        # Each bullet is drawn at its position before this tick's motion
        for bullet in reversed(self.bullets):
            bullet.draw(canvas, self.hue)
            bullet.update()
        arrived = [b for b in self.bullets if not b.active]
        self.bullets = [b for b in self.bullets if b.active]
        for bullet in reversed(arrived):
            self.create_impacts(bullet.end_x, bullet.end_y)

    def update_impacts(self, canvas: Canvas) -> None:
        for impact in reversed(self.impacts):
            impact.draw(canvas)
            impact.update()
        self.impacts = [i for i in self.impacts if i.active]

    def create_impacts(self, x: float, y: float) -> None:
        """Detonate at (x, y): add a burst of impacts to the registry."""
        for _ in range(self.impact_count):
            self.impacts.append(Impact(x, y, self.hue, rng=self.rng))

    def spawn_bullet(
        self, start_x: float, start_y: float, end_x: float, end_y: float
    ) -> Bullet:
        bullet = Bullet(start_x, start_y, end_x, end_y, rng=self.rng)
        self.bullets.append(bullet)
        return bullet

    def launch_automated_bullet(
        self, width: float, height: float
    ) -> Optional[Bullet]:
        """
        Launch from a screen edge toward the top half once the counter passes
        a freshly drawn threshold, unless the pointer is held down.
        """
        threshold = random_range(
            TICKS_PER_BULLET_AUTOMATED_MIN, TICKS_PER_BULLET_AUTOMATED_MAX, self.rng
        )
        if self.ticks_since_bullet_automated >= threshold:
            if not self.input.pointer_down:
                start_x, start_y = self.edge_points.get_starting_point(width, height)
                end_x = random_range(0, width, self.rng)
                end_y = random_range(0, height / 2, self.rng)
                self.ticks_since_bullet_automated = 0
                return self.spawn_bullet(start_x, start_y, end_x, end_y)
        else:
            self.ticks_since_bullet_automated += 1
        return None

    def launch_manual_bullet(
        self, width: float, height: float
    ) -> Optional[Bullet]:
        """Launch from bottom center toward the pointer while it is held."""
        if self.ticks_since_bullet >= TICKS_PER_BULLET_MIN:
            if self.input.pointer_down:
                self.ticks_since_bullet = 0
                return self.spawn_bullet(
                    width / 2, height, self.input.pointer_x, self.input.pointer_y
                )
        else:
            self.ticks_since_bullet += 1
        return None
