"""
Input handling: turns discrete key-down/key-up events into per-frame
rotation and movement deltas.
"""

from __future__ import annotations
import pygame

from .config import MOVE_STEP, ROT_STEP


class InputHandler:
    """
    Tracks the current rotation (degrees per frame) and movement
    (map units per frame) requested by the arrow keys, plus the quit flag.
    """

    def __init__(self, rot_step: float = ROT_STEP, move_step: float = MOVE_STEP) -> None:
        self.rot_step = rot_step
        self.move_step = move_step
        self.rotation = 0.0
        self.movement = 0.0
        self._quit = False

    def key_down(self, key: int) -> None:
        if key == pygame.K_LEFT:
            self.rotation = -self.rot_step
        elif key == pygame.K_RIGHT:
            self.rotation = self.rot_step
        elif key == pygame.K_UP:
            self.movement = self.move_step
        elif key == pygame.K_DOWN:
            self.movement = -self.move_step
        elif key == pygame.K_ESCAPE:
            self._quit = True

    def key_up(self, key: int) -> None:
        # Only stop if the released key is the one driving the motion
        if key == pygame.K_LEFT:
            if self.rotation < 0.0:
                self.rotation = 0.0
        elif key == pygame.K_RIGHT:
            if self.rotation > 0.0:
                self.rotation = 0.0
        elif key == pygame.K_UP:
            if self.movement > 0.0:
                self.movement = 0.0
        elif key == pygame.K_DOWN:
            if self.movement < 0.0:
                self.movement = 0.0

    def process_events(self) -> None:
        """Drain all pending Pygame events without blocking."""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self._quit = True
            elif event.type == pygame.KEYDOWN:
                self.key_down(event.key)
            elif event.type == pygame.KEYUP:
                self.key_up(event.key)

    def should_quit(self) -> bool:
        """Return True once a quit was requested (window close or Escape)."""
        return self._quit
