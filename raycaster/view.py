"""
Presentation layers: the top-down map view and the pseudo-3D wall view.
Both draw through a Surface and only read ray hits computed by the player.
"""

from __future__ import annotations
from typing import TYPE_CHECKING, List, NamedTuple, Sequence, Tuple

from .config import BORDER_COLOR, RAY_GRAY, WALL_COLOR
from .geometry import map_range, round_half_away
from .world import NUM_BOUNDARY_WALLS

if TYPE_CHECKING:
    from .player import RayHit
    from .surface import Color, Surface
    from .world import Wall


def gray(percent: float) -> Tuple[int, int, int]:
    """Gray level from a 0..100 brightness percentage."""
    w = min(int(percent / 100.0 * 255.0 + 0.5), 255)
    return (w, w, w)


class Viewport(NamedTuple):
    """Screen rectangle a view draws into."""

    x: int
    y: int
    width: int
    height: int


def centered_viewport(x: int, width: int, height: int, screen_height: int) -> Viewport:
    """Viewport at horizontal offset x, centered vertically on the screen."""
    return Viewport(x, (screen_height - height) // 2, width, height)


def draw_border(surface: Surface, viewport: Viewport) -> None:
    surface.draw_rect(
        viewport.x, viewport.y, viewport.width, viewport.height, BORDER_COLOR
    )


class Slice(NamedTuple):
    """One filled column of the 3D view."""

    x: int
    y: int
    width: int
    height: int
    color: Color


class View2D:
    """Top-down view: ray paths and interior walls, scaled into the viewport."""

    def __init__(self, viewport: Viewport, scale: float) -> None:
        self.viewport = viewport
        self.scale = scale

    def to_screen(self, x: float, y: float) -> Tuple[int, int]:
        """Convert map coordinates to pixel coordinates."""
        return (
            round_half_away(x * self.scale + self.viewport.x),
            round_half_away(y * self.scale + self.viewport.y),
        )

    def draw(
        self,
        surface: Surface,
        player_x: float,
        player_y: float,
        walls: Sequence[Wall],
        ray_hits: Sequence[RayHit],
    ) -> None:
        x1, y1 = self.to_screen(player_x, player_y)
        ray_color = gray(RAY_GRAY)
        for hit in ray_hits:
            x2, y2 = self.to_screen(hit.wall_x, hit.wall_y)
            surface.draw_line(x1, y1, x2, y2, ray_color)
        # Boundary walls coincide with the viewport border
        for wall in walls[NUM_BOUNDARY_WALLS:]:
            wx1, wy1 = self.to_screen(wall.x1, wall.y1)
            wx2, wy2 = self.to_screen(wall.x2, wall.y2)
            surface.draw_line(wx1, wy1, wx2, wy2, WALL_COLOR)
        draw_border(surface, self.viewport)


class View3D:
    """First-person view: one vertical slice per ray hit."""

    def __init__(self, viewport: Viewport) -> None:
        self.viewport = viewport

    def slice_height(self, dist: float, map_width: int) -> int:
        """Linear falloff: 0 -> full height, map_width or further -> 0."""
        h = int(map_range(dist, 0, map_width, self.viewport.height, 0))
        return max(0, min(h, self.viewport.height))

    @staticmethod
    def brightness(dist: float, map_width: int) -> int:
        """Quadratic falloff of the gray level, 100 at the eye, 0 at map_width."""
        b = int(map_range(dist * dist, 0, map_width * map_width, 100, 0))
        return max(0, min(b, 100))

    def slices(self, ray_hits: Sequence[RayHit], map_width: int) -> List[Slice]:
        """
        Lay out one slice per hit. Missed rays are absent from ray_hits, so
        the remaining slices widen to fill the viewport.
        """
        if not ray_hits:
            return []
        vp = self.viewport
        w = vp.width // len(ray_hits)
        out: List[Slice] = []
        for i, hit in enumerate(ray_hits):
            h = self.slice_height(hit.dist, map_width)
            color = gray(self.brightness(hit.dist, map_width))
            out.append(Slice(vp.x + i * w, vp.y + (vp.height - h) // 2, w, h, color))
        return out

    def draw(
        self, surface: Surface, ray_hits: Sequence[RayHit], map_width: int
    ) -> None:
        for s in self.slices(ray_hits, map_width):
            surface.draw_filled_rect(s.x, s.y, s.width, s.height, s.color)
        draw_border(surface, self.viewport)


def layout_views(
    screen_width: int, screen_height: int, map_width: int, map_height: int
) -> Tuple[View2D, View3D]:
    """Give the top-down view 1/3 of the screen width and the 3D view 2/3."""
    w = screen_width / 3.0
    scale = w / map_width
    h = map_height * scale
    top = View2D(centered_viewport(0, int(w + 1), int(h), screen_height), scale)
    scr = View3D(centered_viewport(int(w), int(w * 2), int(h * 2), screen_height))
    return top, scr
