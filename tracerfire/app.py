from __future__ import annotations
import logging
import random
import pygame
from typing import Optional

from . import config
from .animation import Animation
from .config import FPS, RANDOM_SEED, SCREEN_HEIGHT, SCREEN_WIDTH
from .input_handler import InputHandler
from .renderer import GLCanvas

logger = logging.getLogger(__name__)


class App:
    """Main application: window setup, frame clock and the run loop."""

    def __init__(
        self,
        clock: Optional[pygame.time.Clock] = None,
        seed: Optional[int] = RANDOM_SEED,
    ) -> None:
        config.validate()
        # Initialize Pygame and its subsystems
        pygame.init()
        self.screen_width = SCREEN_WIDTH
        self.screen_height = SCREEN_HEIGHT
        # Initialize an OpenGL-enabled window
        self.screen = pygame.display.set_mode(
            (self.screen_width, self.screen_height),
            pygame.OPENGL | pygame.DOUBLEBUF,
        )
        pygame.display.set_caption("Tracer Fire")
        # Frame clock (injectable for testing)
        self.clock = clock or pygame.time.Clock()
        self.fps = FPS
        self.canvas = GLCanvas(self.screen_width, self.screen_height)
        self.input = InputHandler()
        rng = random.Random(seed) if seed is not None else None
        self.animation = Animation(input_state=self.input.state, rng=rng)
        # Stop token for the otherwise endless loop
        self.running = True
        logger.info(
            "Tracer Fire started (%dx%d @ %d fps, seed=%s)",
            self.screen_width,
            self.screen_height,
            self.fps,
            seed,
        )

    def handle_events(self) -> None:
        """Process input events via InputHandler and handle quit."""
        self.input.process_events()
        if self.input.should_quit():
            self.running = False

    def update(self) -> None:
        """Advance the animation one tick, drawing onto the canvas."""
        self.animation.tick(self.canvas)

    def render(self) -> None:
        self.canvas.present()

    def run(self) -> None:
        """Main loop: one tick per frame until quit."""
        while self.running:
            # Wait for the next frame; elapsed time is ignored, motion is per tick
            self.clock.tick(self.fps)
            self.handle_events()
            if not self.running:
                break
            self.update()
            self.render()
        logger.info(
            "Stopping after %d ticks (%d bullets, %d impacts live)",
            self.animation.tick_count,
            len(self.animation.bullets),
            len(self.animation.impacts),
        )
        # Clean up GL resources before quitting
        self.canvas.shutdown()
        pygame.quit()
