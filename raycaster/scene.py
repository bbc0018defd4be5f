from __future__ import annotations
import logging
import random
from typing import TYPE_CHECKING, List, Optional, Sequence

from .config import MAP_HEIGHT, MAP_WIDTH, NUM_INTERIOR_WALLS
from .player import Player, RayHit
from .view import layout_views
from .world import Wall, generate_walls

if TYPE_CHECKING:
    from .surface import Surface

logger = logging.getLogger(__name__)


class Scene:
    """Walls, the player, the cached ray hits and the two views drawing them."""

    def __init__(
        self,
        screen_width: int,
        screen_height: int,
        map_width: int = MAP_WIDTH,
        map_height: int = MAP_HEIGHT,
        num_walls: int = NUM_INTERIOR_WALLS,
        rng: Optional[random.Random] = None,
        walls: Optional[Sequence[Wall]] = None,
        player: Optional[Player] = None,
    ) -> None:
        """
        Build the scene. walls/player override the generated map and the
        default player standing at the map center facing +x.
        """
        self.map_width = map_width
        self.map_height = map_height
        if walls is None:
            walls = generate_walls(map_width, map_height, num_walls, rng)
        self.walls: List[Wall] = list(walls)
        self.player = player or Player(map_width // 2, map_height // 2)
        self.top, self.screen = layout_views(
            screen_width, screen_height, map_width, map_height
        )
        self.ray_hits: List[RayHit] = self.player.cast(self.walls)

    def move(self, da: float, dd: float) -> bool:
        """
        Apply one frame of input: rotate by da degrees, then step dd units
        if the step keeps the player off the map edge. Hits are recomputed
        only when there was some input; returns True if they were.
        """
        if da:
            self.player.rotate(da)
        if dd and self.player.can_move(dd, self.map_width, self.map_height):
            self.player.move(dd)
        if da or dd:
            self.ray_hits = self.player.cast(self.walls)
            logger.debug(
                "Recomputed %d/%d ray hits", len(self.ray_hits), len(self.player.rays)
            )
            return True
        return False

    def draw(self, surface: Surface) -> None:
        self.top.draw(
            surface, self.player.x, self.player.y, self.walls, self.ray_hits
        )
        self.screen.draw(surface, self.ray_hits, self.map_width)
