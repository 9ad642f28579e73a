"""Grid ray casting: wall distances and the wall slice drawn for each screen column."""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass, replace

TWO_PI = 2 * math.pi

NS_WALL_COLOR = 0x00FF0000
EW_WALL_COLOR = 0x0000FF00
FLOOR_COLOR = 0x00FFFF00
CEILING_COLOR = 0x00000000


@dataclass(frozen=True)
class Settings:
    """Screen size, tile size, field of view (degrees) and movement speeds."""

    width: int = 1900
    height: int = 1000
    tile: int = 30
    fov: float = 60.0
    rotation_speed: float = 0.045
    player_speed: float = 4.0

    @property
    def fov_radians(self) -> float:
        return self.fov * math.pi / 180


@dataclass(frozen=True)
class WallSlice:
    """The rows [top, bottom) of one screen column covered by a wall."""

    top: int
    bottom: int
    distance: float
    color: int = NS_WALL_COLOR


def normalize_angle(angle: float) -> float:
    """Bring an angle less than one turn outside [0, 2*pi] back into it."""
    if angle < 0:
        angle += TWO_PI
    if angle > TWO_PI:
        angle -= TWO_PI
    return angle


def unit_circle(axis: str, angle: float) -> bool:
    """For 'x', whether the angle points down the screen; for 'y', whether it points left."""
    if axis == "x":
        return 0 < angle < math.pi
    if axis == "y":
        return math.pi / 2 < angle < 3 * math.pi / 2
    return False


def _grid_width(grid: Sequence[str]) -> int:
    return max((len(row) for row in grid), default=0)


def is_open(grid: Sequence[str], x: float, y: float, tile: int) -> bool:
    """Return True while the point (x, y) lies inside the grid and not in a wall."""
    if x < 0 or y < 0 or not (math.isfinite(x) and math.isfinite(y)):
        return False
    col = math.floor(x / tile)
    row = math.floor(y / tile)
    if row >= len(grid) or col >= _grid_width(grid):
        return False
    line = grid[row]
    return not (col < len(line) and line[col] == "1")


def horizontal_distance(
    grid: Sequence[str], px: float, py: float, angle: float, tile: int
) -> float:
    """Distance to the first wall met where the ray crosses horizontal grid lines."""
    tangent = math.tan(angle)
    if tangent == 0:
        return math.inf
    y_step = float(tile)
    x_step = tile / tangent
    hit_y = math.floor(py / tile) * tile
    if 0 < angle < math.pi:
        hit_y += tile
        nudge = -1
    else:
        y_step = -y_step
        nudge = 1
    hit_x = px + (hit_y - py) / tangent
    facing_left = unit_circle("y", angle)
    if (facing_left and x_step > 0) or (not facing_left and x_step < 0):
        x_step = -x_step
    while is_open(grid, hit_x, hit_y - nudge, tile):
        hit_x += x_step
        hit_y += y_step
    return math.hypot(hit_x - px, hit_y - py)


def vertical_distance(
    grid: Sequence[str], px: float, py: float, angle: float, tile: int
) -> float:
    """Distance to the first wall met where the ray crosses vertical grid lines."""
    tangent = math.tan(angle)
    x_step = float(tile)
    y_step = tile * tangent
    hit_x = math.floor(px / tile) * tile
    if not (math.pi / 2 < angle < 3 * math.pi / 2):
        hit_x += tile
        nudge = -1
    else:
        x_step = -x_step
        nudge = 1
    hit_y = py + (hit_x - px) * tangent
    facing_down = unit_circle("x", angle)
    if (facing_down and y_step < 0) or (not facing_down and y_step > 0):
        y_step = -y_step
    while is_open(grid, hit_x - nudge, hit_y, tile):
        hit_x += x_step
        hit_y += y_step
    return math.hypot(hit_x - px, hit_y - py)


def wall_color(angle: float, hit: bool) -> int:
    """Colour of a wall: one for vertical grid lines, another for horizontal ones."""
    angle = normalize_angle(angle)
    if not hit:
        return NS_WALL_COLOR
    return EW_WALL_COLOR


def wall_slice(
    distance: float, ray_angle: float, player_angle: float, settings: Settings
) -> WallSlice:
    """Project a wall at ``distance`` onto a screen column, correcting the fish-eye."""
    corrected = distance * math.cos(normalize_angle(ray_angle - player_angle))
    half_height = settings.height // 2
    if corrected <= 0:
        return WallSlice(0, settings.height, corrected)
    projection = (settings.width // 2) / math.tan(settings.fov_radians / 2)
    wall_height = (settings.tile / corrected) * projection
    bottom = min(half_height + wall_height / 2, settings.height)
    top = max(half_height - wall_height / 2, 0)
    return WallSlice(int(top), int(bottom), corrected)


def cast_rays(
    grid: Sequence[str],
    px: float,
    py: float,
    player_angle: float,
    settings: Settings,
) -> list[WallSlice]:
    """Cast one ray per screen column, left to right, and return its wall slices."""
    fov = settings.fov_radians
    step = fov / settings.width
    angle = player_angle - fov / 2
    slices = []
    for _ in range(settings.width):
        angle = normalize_angle(angle)
        h_dist = horizontal_distance(grid, px, py, angle, settings.tile)
        v_dist = vertical_distance(grid, px, py, angle, settings.tile)
        hit = not v_dist <= h_dist
        distance = h_dist if hit else v_dist
        column = wall_slice(distance, angle, player_angle, settings)
        slices.append(replace(column, color=wall_color(angle, hit)))
        angle += step
    return slices