import math

import pytest

from cubray.raycast import (
    EW_WALL_COLOR,
    NS_WALL_COLOR,
    Settings,
    cast_rays,
    horizontal_distance,
    is_open,
    normalize_angle,
    unit_circle,
    vertical_distance,
    wall_color,
    wall_slice,
)

GRID = ["11111\n", "10001\n", "10001\n", "10001\n", "11111\n"]
TILE = 30
CENTER = 75.0


def test_normalize_angle_wraps_negative():
    result = normalize_angle(-0.5)
    assert 0 <= result <= 2 * math.pi
    assert math.isclose(math.cos(result), math.cos(-0.5))


def test_normalize_angle_wraps_above_turn():
    result = normalize_angle(2 * math.pi + 0.25)
    assert math.isclose(result, 0.25)


def test_normalize_angle_keeps_range():
    assert normalize_angle(1.0) == 1.0


@pytest.mark.parametrize(
    "axis, angle, expected",
    [
        ("x", math.pi / 4, True),
        ("x", 3 * math.pi / 2, False),
        ("y", math.pi, True),
        ("y", 0.1, False),
        ("z", math.pi, False),
    ],
)
def test_unit_circle(axis, angle, expected):
    assert unit_circle(axis, angle) is expected


def test_is_open_cases():
    assert is_open(GRID, CENTER, CENTER, TILE) is True
    assert is_open(GRID, 5, 5, TILE) is False
    assert is_open(GRID, -1, CENTER, TILE) is False
    assert is_open(GRID, CENTER, 1000, TILE) is False


def test_east_and_west_distances_are_symmetric():
    east = vertical_distance(GRID, CENTER, CENTER, 0.0, TILE)
    west = vertical_distance(GRID, CENTER, CENTER, math.pi, TILE)
    assert math.isclose(east, west, rel_tol=1e-6)
    assert east > 0


def test_north_and_south_distances_are_symmetric():
    south = horizontal_distance(GRID, CENTER, CENTER, math.pi / 2, TILE)
    north = horizontal_distance(GRID, CENTER, CENTER, 3 * math.pi / 2, TILE)
    assert math.isclose(south, north, rel_tol=1e-6)


def test_horizontal_distance_parallel_ray_is_infinite():
    assert horizontal_distance(GRID, CENTER, CENTER, 0.0, TILE) == math.inf


def test_wall_colors_follow_hit_side():
    assert wall_color(0.3, False) == NS_WALL_COLOR
    assert wall_color(4.0, True) == EW_WALL_COLOR


def test_wall_slice_is_centred_and_closer_is_taller():
    settings = Settings()
    far = wall_slice(300.0, 0.0, 0.0, settings)
    near = wall_slice(150.0, 0.0, 0.0, settings)
    assert near.bottom - near.top > far.bottom - far.top
    assert abs((far.top + far.bottom) - settings.height) <= 1


def test_wall_slice_clamps_to_screen():
    settings = Settings()
    column = wall_slice(0.5, 0.0, 0.0, settings)
    assert column.top == 0
    assert column.bottom == settings.height


def test_cast_rays_one_slice_per_column():
    settings = Settings(width=64, height=48)
    slices = cast_rays(GRID, CENTER, CENTER, 0.0, settings)
    assert len(slices) == settings.width
    assert all(0 <= s.top <= s.bottom <= settings.height for s in slices)
    assert {s.color for s in slices} <= {NS_WALL_COLOR, EW_WALL_COLOR}