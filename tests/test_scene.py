import random

import pytest

from raycaster.config import BORDER_COLOR, NUM_INTERIOR_WALLS
from raycaster.player import Player
from raycaster.scene import Scene
from raycaster.world import NUM_BOUNDARY_WALLS, Wall, boundary_walls


def box_scene(player=None):
    return Scene(1200, 600, walls=boundary_walls(320, 240), player=player)


def test_default_scene_generates_map_and_centers_player():
    scene = Scene(1200, 600, rng=random.Random(7))
    assert len(scene.walls) == NUM_BOUNDARY_WALLS + NUM_INTERIOR_WALLS
    assert (scene.player.x, scene.player.y) == (160, 120)
    assert scene.player.heading.degrees == 0.0
    # Hits are available before the first move
    assert scene.ray_hits


def test_zero_delta_reuses_cached_hits():
    scene = box_scene()
    cached = scene.ray_hits
    x, y = scene.player.x, scene.player.y
    heading = scene.player.heading.rad
    assert scene.move(0.0, 0.0) is False
    assert scene.ray_hits is cached
    assert (scene.player.x, scene.player.y) == (x, y)
    assert scene.player.heading.rad == heading


def test_no_recompute_on_idle_frame(monkeypatch):
    scene = box_scene()
    calls = []
    monkeypatch.setattr(scene.player, "cast", lambda walls: calls.append(walls) or [])
    scene.move(0, 0)
    assert calls == []
    scene.move(0.5, 0)
    assert len(calls) == 1


def test_rotation_recomputes_hits():
    scene = box_scene()
    cached = scene.ray_hits
    assert scene.move(0.5, 0.0) is True
    assert scene.ray_hits is not cached
    assert scene.player.heading.degrees == pytest.approx(0.5)


def test_movement_translates_player():
    scene = box_scene()
    assert scene.move(0.0, 0.5) is True
    assert scene.player.x == pytest.approx(160.5)
    assert scene.player.y == pytest.approx(120.0)


def test_rejected_move_keeps_position_but_recomputes():
    scene = box_scene(Player(2.0, 120.0, heading=180.0))
    cached = scene.ray_hits
    assert scene.move(0.0, 5.0) is True
    assert scene.player.x == 2.0
    assert scene.ray_hits is not cached


def test_interior_wall_does_not_block_movement():
    walls = boundary_walls(320, 240) + [Wall(161, 100, 161, 140)]
    scene = Scene(1200, 600, walls=walls)
    for _ in range(4):
        scene.move(0.0, 0.5)
    assert scene.player.x == pytest.approx(162.0)


def test_box_map_every_ray_hits_once():
    scene = box_scene()
    assert len(scene.ray_hits) == len(scene.player.rays) == 320


def test_box_map_slices_symmetric_about_center_ray():
    # The map's geometric center is (159.5, 119.5)
    scene = box_scene(Player(160.0, 119.5, heading=0.0))
    hits = scene.ray_hits
    slices = scene.screen.slices(hits, scene.map_width)
    assert len(slices) == 320
    center = 160
    for k in range(1, center):
        assert hits[center - k].dist == pytest.approx(hits[center + k].dist)
        assert slices[center - k].height == slices[center + k].height
        assert slices[center - k].y == slices[center + k].y


def test_box_map_flat_wall_gives_constant_depth():
    scene = box_scene(Player(160.0, 119.5, heading=0.0))
    # Every ray ends on the right wall, 159 units ahead
    for hit in scene.ray_hits:
        assert hit.dist == pytest.approx(159.0)
        assert hit.wall_x == pytest.approx(319.0)


def test_draw_delegates_to_both_views(surface):
    scene = box_scene()
    scene.draw(surface)
    lines = surface.of_kind("line")
    fills = surface.of_kind("fill")
    rects = surface.of_kind("rect")
    # Box map has no interior walls: one line per ray
    assert len(lines) == 320
    assert len(fills) == 320
    assert [r[5] for r in rects] == [BORDER_COLOR, BORDER_COLOR]
    # Top-down view is drawn before the 3D view
    assert surface.calls.index(lines[-1]) < surface.calls.index(fills[0])


@pytest.mark.parametrize("dd,stop_x", [(0.5, 318.0), (-0.5, 0.5)])
def test_holding_a_move_key_stops_short_of_the_edge(dd, stop_x):
    scene = box_scene()
    for _ in range(400):
        scene.move(0.0, dd)
    assert scene.player.x == stop_x
    assert scene.player.y == 120.0
