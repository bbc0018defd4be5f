from __future__ import annotations
import logging
import random
from dataclasses import dataclass
from typing import List, Optional, Tuple

from .geometry import lerp

logger = logging.getLogger(__name__)

# Boundary walls always come first in a generated wall list
NUM_BOUNDARY_WALLS = 4


@dataclass(frozen=True)
class Wall:
    """Straight wall segment between two integer map points."""

    x1: int
    y1: int
    x2: int
    y2: int

    def point_at(self, t: float) -> Tuple[float, float]:
        """Point at parameter t along the segment (0 = first end, 1 = second)."""
        return lerp(self.x1, self.x2, t), lerp(self.y1, self.y2, t)


def boundary_walls(width: int, height: int) -> List[Wall]:
    """The four walls enclosing a width x height map: left, top, right, bottom."""
    w = width - 1
    h = height - 1
    return [
        Wall(0, 0, 0, h),
        Wall(0, 0, w, 0),
        Wall(w, 0, w, h),
        Wall(0, h, w, h),
    ]


def random_walls(
    count: int, width: int, height: int, rng: random.Random
) -> List[Wall]:
    """Scatter `count` walls with endpoints strictly inside the boundary box."""
    w = width - 1
    h = height - 1
    return [
        Wall(rng.randrange(w), rng.randrange(h), rng.randrange(w), rng.randrange(h))
        for _ in range(count)
    ]


def generate_walls(
    width: int,
    height: int,
    count: int,
    rng: Optional[random.Random] = None,
) -> List[Wall]:
    """Build a map: boundary walls followed by `count` random interior walls."""
    if width < 3 or height < 3:
        raise ValueError(f"Map must be at least 3x3, got {width}x{height}")
    if count < 0:
        raise ValueError(f"Interior wall count must be >= 0, got {count}")
    rng = rng or random.Random()
    walls = boundary_walls(width, height) + random_walls(count, width, height, rng)
    logger.info(
        "Generated %dx%d map with %d interior walls", width, height, count
    )
    return walls
