"""
Input handling abstraction to decouple Pygame input from the animation.
"""

from __future__ import annotations
import pygame
from typing import Optional, Tuple


class InputState:
    """
    Pointer state read by the animation at tick boundaries.
    Written only by InputHandler, between ticks.
    """

    def __init__(self) -> None:
        # Pointer position relative to the drawing surface origin
        self.pointer_x = 0.0
        self.pointer_y = 0.0
        # Primary button held
        self.pointer_down = False
        self.quit_requested = False


class InputHandler:
    """
    Processes Pygame events into an InputState and answers quit/pointer queries.
    """

    def __init__(self, state: Optional[InputState] = None) -> None:
        self.state = state or InputState()

    def process_events(self) -> None:
        """
        Poll Pygame events, tracking pointer motion, the left button and quit
        requests (window close, Escape or X).
        """
        state = self.state
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                state.quit_requested = True
            elif event.type == pygame.KEYDOWN:
                if event.key in (pygame.K_ESCAPE, pygame.K_x):
                    state.quit_requested = True
            elif event.type == pygame.MOUSEMOTION:
                self._set_pointer(event.pos)
            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                self._set_pointer(event.pos)
                state.pointer_down = True
            elif event.type == pygame.MOUSEBUTTONUP and event.button == 1:
                self._set_pointer(event.pos)
                state.pointer_down = False

    def _set_pointer(self, pos: Tuple[int, int]) -> None:
        self.state.pointer_x = float(pos[0])
        self.state.pointer_y = float(pos[1])

    def should_quit(self) -> bool:
        """Return True once a quit command has been issued."""
        return self.state.quit_requested
