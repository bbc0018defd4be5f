import argparse
import logging
import sys

import pygame

from raycaster.config import FPS, NUM_INTERIOR_WALLS, SCREEN_HEIGHT, SCREEN_WIDTH
from raycaster.game import Game

logger = logging.getLogger("raycaster")


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        description="Wall-segment raycaster: top-down map plus pseudo-3D view."
    )
    parser.add_argument("-W", "--width", type=int, default=SCREEN_WIDTH, help="Window width")
    parser.add_argument("-H", "--height", type=int, default=SCREEN_HEIGHT, help="Window height")
    parser.add_argument("-w", "--walls", type=int, default=NUM_INTERIOR_WALLS, help="Number of random interior walls")
    parser.add_argument("-s", "--seed", type=int, default=None, help="Seed for the random map")
    parser.add_argument("--fps", type=int, default=FPS, help="Frame rate cap")
    parser.add_argument("-d", "--debug", action="store_true", help="Enable debug logging")
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.INFO,
        format="%(asctime)s %(name)s %(levelname)s: %(message)s",
    )
    try:
        game = Game(
            screen_width=args.width,
            screen_height=args.height,
            num_walls=args.walls,
            seed=args.seed,
            fps=args.fps,
        )
    except (pygame.error, RuntimeError):
        logger.exception("Failed to initialize display")
        pygame.quit()
        return 1
    game.run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
