from raycaster import config


def test_ray_fan_defaults():
    # 320 rays across a 60 degree field of view
    assert config.NUM_RAYS == 320
    assert config.FOV_DEGREES == 60.0


def test_map_fits_boundary_clamp():
    assert config.MAP_WIDTH > 2 and config.MAP_HEIGHT > 2


def test_step_sizes_positive():
    assert config.ROT_STEP > 0
    assert config.MOVE_STEP > 0
