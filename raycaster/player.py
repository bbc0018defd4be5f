from __future__ import annotations
import math
from typing import TYPE_CHECKING, List, NamedTuple, Sequence

from .config import FOV_DEGREES, NUM_RAYS
from .geometry import Angle, angle_diff, from_angle, round_half_away
from .ray import Ray, nearest_hit

if TYPE_CHECKING:
    from .world import Wall


class RayHit(NamedTuple):
    """Nearest wall hit of one ray: corrected distance and hit point."""

    dist: float
    wall_x: float
    wall_y: float


class Player:
    """Player state, movement and the ray fan cast from the player."""

    def __init__(
        self,
        x: float,
        y: float,
        heading: float = 0.0,
        num_rays: int = NUM_RAYS,
        fov: float = FOV_DEGREES,
    ) -> None:
        """
        Initialize the player.
        x, y: starting position in map units.
        heading: facing direction in degrees.
        num_rays: number of rays spread across the field of view.
        fov: field of view in degrees.
        """
        if num_rays < 1:
            raise ValueError(f"num_rays must be >= 1, got {num_rays}")
        if fov <= 0:
            raise ValueError(f"fov must be positive, got {fov}")
        self.x = x
        self.y = y
        self.heading = Angle(heading)
        self.fov = fov
        # Fan laid out once; afterwards only rotated and moved with the player
        self.rays: List[Ray] = []
        a = self.heading.minus(fov / 2.0)
        for _ in range(num_rays):
            self.rays.append(Ray(x, y, a.copy()))
            a.add(fov / num_rays)

    def can_move(self, dd: float, map_width: int, map_height: int) -> bool:
        """Return False if moving dd along the heading would end next to the map edge."""
        d = from_angle(self.heading)
        new_x = round_half_away(self.x + d.x * dd)
        new_y = round_half_away(self.y + d.y * dd)
        if new_x < 1 or new_y < 1:
            return False
        if new_x >= map_width - 1 or new_y >= map_height - 1:
            return False
        return True

    def rotate(self, da: float) -> None:
        """Turn the player and its rays by da degrees."""
        self.heading.add(da)
        for ray in self.rays:
            ray.rotate(da)

    def move(self, dd: float) -> None:
        """Move dd map units along the heading (negative moves backward)."""
        d = from_angle(self.heading)
        self.x += d.x * dd
        self.y += d.y * dd
        for ray in self.rays:
            ray.move_to(self.x, self.y)

    def cast(self, walls: Sequence[Wall]) -> List[RayHit]:
        """
        Find the nearest wall for every ray.
        Rays that hit nothing are left out, so the result may be shorter
        than the ray fan.
        """
        hits: List[RayHit] = []
        for ray in self.rays:
            found = nearest_hit(ray, walls)
            if found is None:
                continue
            wall, tw, tr = found
            # Perpendicular distance removes the fisheye bulge
            dist = tr * math.cos(angle_diff(ray.angle, self.heading))
            wall_x, wall_y = wall.point_at(tw)
            hits.append(RayHit(dist, wall_x, wall_y))
        return hits
