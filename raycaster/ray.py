"""
Ray representation and ray/wall-segment intersection.
"""

from __future__ import annotations
from typing import TYPE_CHECKING, Optional, Sequence, Tuple

from .geometry import Angle, from_angle

if TYPE_CHECKING:
    from .world import Wall


class Ray:
    """
    A half-line cast from the player.
    Attributes:
        x, y: Origin in map coordinates.
        angle: Direction of travel.
    """

    def __init__(self, x: float, y: float, angle: Angle) -> None:
        self.x = x
        self.y = y
        self.angle = angle

    def rotate(self, degrees: float) -> None:
        self.angle.add(degrees)

    def move_to(self, x: float, y: float) -> None:
        self.x = x
        self.y = y

    def intersect(self, wall: Wall) -> Optional[Tuple[float, float]]:
        """
        Intersect this ray with a wall segment.
        Returns (t_wall, t_ray) where t_wall is the position along the wall
        (exclusive 0..1) and t_ray the distance along the ray (> 0), or None
        when the ray misses, runs parallel, or the wall lies behind it.
        """
        d = from_angle(self.angle)
        # Wall normal and ray normal
        nwx = wall.y2 - wall.y1
        nwy = wall.x1 - wall.x2
        nrx = d.y
        nry = -d.x
        den = nry * nwx - nrx * nwy
        # Exact zero: parallel or coincident
        if den == 0.0:
            return None
        tw = -(nrx * (wall.x1 - self.x) + nry * (wall.y1 - self.y)) / den
        tr = -(nwy * (wall.y1 - self.y) + nwx * (wall.x1 - self.x)) / den
        if 0.0 < tw < 1.0 and tr > 0.0:
            return tw, tr
        return None

    def __repr__(self) -> str:
        return f"<Ray x={self.x:.2f} y={self.y:.2f} angle={self.angle.degrees:.2f}>"


def nearest_hit(
    ray: Ray, walls: Sequence[Wall]
) -> Optional[Tuple[Wall, float, float]]:
    """
    Return (wall, t_wall, t_ray) for the closest wall along the ray, or None.
    The first wall in list order wins a tie.
    """
    best: Optional[Tuple[Wall, float, float]] = None
    for wall in walls:
        hit = ray.intersect(wall)
        if hit is None:
            continue
        tw, tr = hit
        if best is None or tr < best[2]:
            best = (wall, tw, tr)
    return best
