import pytest

from raycaster.config import BORDER_COLOR, WALL_COLOR
from raycaster.player import RayHit
from raycaster.view import (
    View2D,
    View3D,
    Viewport,
    centered_viewport,
    draw_border,
    gray,
    layout_views,
)
from raycaster.world import Wall, boundary_walls


@pytest.mark.parametrize(
    "percent,level", [(0, 0), (33, 84), (50, 128), (100, 255), (150, 255)]
)
def test_gray_levels(percent, level):
    assert gray(percent) == (level, level, level)


def test_centered_viewport():
    assert centered_viewport(10, 100, 40, 100) == Viewport(10, 30, 100, 40)


def test_layout_views_splits_screen_one_third_two_thirds():
    top, scr = layout_views(1200, 600, 320, 240)
    assert top.scale == pytest.approx(1.25)
    assert top.viewport == Viewport(0, 150, 401, 300)
    assert scr.viewport == Viewport(400, 0, 800, 600)


def test_draw_border(surface):
    draw_border(surface, Viewport(1, 2, 3, 4))
    assert surface.calls == [("rect", 1, 2, 3, 4, BORDER_COLOR)]


def test_view2d_draws_rays_interior_walls_then_border(surface):
    view = View2D(Viewport(0, 150, 401, 300), 1.25)
    walls = boundary_walls(320, 240) + [Wall(10, 20, 30, 40)]
    hits = [RayHit(50.0, 200.0, 120.0), RayHit(60.0, 200.0, 140.0)]
    view.draw(surface, 160.0, 120.0, walls, hits)
    ray_color = gray(33)
    assert surface.calls == [
        ("line", 200, 300, 250, 300, ray_color),
        ("line", 200, 300, 250, 325, ray_color),
        # Only the interior wall; the boundary is the viewport border
        ("line", 13, 175, 38, 200, WALL_COLOR),
        ("rect", 0, 150, 401, 300, BORDER_COLOR),
    ]


def test_view3d_height_and_brightness_mapping():
    view = View3D(Viewport(0, 0, 100, 50))
    assert view.slice_height(0.0, 320) == 50
    assert view.slice_height(160.0, 320) == 25
    assert view.slice_height(320.0, 320) == 0
    # Beyond map_width the height is clamped instead of going negative
    assert view.slice_height(640.0, 320) == 0
    assert view.brightness(0.0, 320) == 100
    # Quadratic falloff: half the distance keeps three quarters of the light
    assert view.brightness(160.0, 320) == 75
    assert view.brightness(320.0, 320) == 0
    assert view.brightness(640.0, 320) == 0


def test_view3d_slices_are_centered_vertically():
    view = View3D(Viewport(10, 20, 100, 50))
    slices = view.slices([RayHit(0.0, 0, 0), RayHit(160.0, 0, 0)], 320)
    assert slices[0] == (10, 20, 50, 50, gray(100))
    assert slices[1] == (60, 32, 50, 25, gray(75))


def test_view3d_slice_width_follows_hit_count():
    view = View3D(Viewport(0, 0, 100, 50))
    three = view.slices([RayHit(10.0, 0, 0)] * 3, 320)
    two = view.slices([RayHit(10.0, 0, 0)] * 2, 320)
    assert {s.width for s in three} == {33}
    assert {s.width for s in two} == {50}


def test_view3d_no_hits_draws_only_border(surface):
    view = View3D(Viewport(0, 0, 100, 50))
    assert view.slices([], 320) == []
    view.draw(surface, [], 320)
    assert surface.calls == [("rect", 0, 0, 100, 50, BORDER_COLOR)]


def test_view3d_draw_fills_slices_then_border(surface):
    view = View3D(Viewport(0, 0, 100, 50))
    view.draw(surface, [RayHit(0.0, 0, 0), RayHit(160.0, 0, 0)], 320)
    assert surface.of_kind("fill") == [
        ("fill", 0, 0, 50, 50, gray(100)),
        ("fill", 50, 12, 50, 25, gray(75)),
    ]
    assert surface.calls[-1] == ("rect", 0, 0, 100, 50, BORDER_COLOR)
