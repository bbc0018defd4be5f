from __future__ import annotations
import logging
import random
from typing import Optional

import pygame

from .config import (
    FPS,
    NUM_INTERIOR_WALLS,
    SCREEN_HEIGHT,
    SCREEN_WIDTH,
    WINDOW_TITLE,
)
from .input_handler import InputHandler
from .scene import Scene
from .surface import GLSurface

logger = logging.getLogger(__name__)


class Game:
    """Main Game class: handles initialization, loop, and shutdown."""

    def __init__(
        self,
        clock: Optional[pygame.time.Clock] = None,
        screen_width: int = SCREEN_WIDTH,
        screen_height: int = SCREEN_HEIGHT,
        num_walls: int = NUM_INTERIOR_WALLS,
        seed: Optional[int] = None,
        fps: int = FPS,
    ) -> None:
        # Initialize Pygame and its subsystems
        pygame.init()
        self.screen_width = screen_width
        self.screen_height = screen_height
        self.screen = pygame.display.set_mode(
            (self.screen_width, self.screen_height),
            pygame.OPENGL | pygame.DOUBLEBUF,
        )
        pygame.display.set_caption(WINDOW_TITLE)
        logger.info("Opened %dx%d window", screen_width, screen_height)
        # Clock for frame pacing (injectable for testing)
        self.clock = clock or pygame.time.Clock()
        self.fps = fps
        self.surface = GLSurface(self.screen_width, self.screen_height)
        logger.info("Map seed: %s", seed if seed is not None else "random")
        self.scene = Scene(
            self.screen_width,
            self.screen_height,
            num_walls=num_walls,
            rng=random.Random(seed),
        )
        self.input = InputHandler()
        self.running = True

    def handle_events(self) -> None:
        """Drain pending input and honour quit requests."""
        self.input.process_events()
        if self.input.should_quit():
            self.running = False

    def update(self) -> None:
        self.scene.move(self.input.rotation, self.input.movement)

    def render(self) -> None:
        self.surface.clear()
        self.scene.draw(self.surface)
        self.surface.present()

    def run(self) -> None:
        """Main loop: handle events, update, render, then wait out the frame."""
        while self.running:
            self.handle_events()
            self.update()
            self.render()
            self.clock.tick(self.fps)
        logger.info("Shutting down")
        self.surface.shutdown()
        pygame.quit()
