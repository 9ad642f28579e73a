"""The player: position, heading, key state and movement through the grid."""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass

from cubray.raycast import Settings

TWO_PI = 2 * math.pi

KEY_LEFT = 65361
KEY_RIGHT = 65363
KEY_A = 97
KEY_D = 100
KEY_S = 115
KEY_W = 119

_ORIENTATIONS = {"N": math.pi / 2, "E": 0.0, "S": 3 * math.pi / 2, "W": math.pi}


def angle_for(orientation: str) -> float:
    """Heading in radians for a start letter N, E, S or W; 0 for anything else."""
    return _ORIENTATIONS.get(orientation, 0.0)


def _round_half_away(value: float) -> int:
    magnitude = math.floor(abs(value) + 0.5)
    return -magnitude if value < 0 else magnitude


def _trunc_div(value: int, divisor: int) -> int:
    quotient = abs(value) // divisor
    return -quotient if value < 0 else quotient


def _is_wall(grid: Sequence[str], col: int, row: int) -> bool:
    if row < 0 or col < 0 or row >= len(grid) or col >= len(grid[row]):
        return True
    return grid[row][col] == "1"


@dataclass
class Player:
    """Player position in pixels, heading in radians and held movement keys."""

    x: int
    y: int
    angle: float = 0.0
    rotating: int = 0
    strafe: int = 0
    walk: int = 0

    def press(self, key: int) -> None:
        """Start turning or moving for a pressed key."""
        if key == KEY_RIGHT:
            self.rotating = 1
        elif key == KEY_LEFT:
            self.rotating = -1
        if key == KEY_A:
            self.strafe = -1
        elif key == KEY_D:
            self.strafe = 1
        elif key == KEY_S:
            self.walk = -1
        elif key == KEY_W:
            self.walk = 1

    def release(self, key: int) -> None:
        """Stop all turning and moving, whichever key was released."""
        self.rotating = 0
        self.strafe = 0
        self.walk = 0

    def rotate(self, direction: int, speed: float) -> None:
        """Turn by ``speed`` radians: clockwise on screen for direction 1, else back."""
        if direction == 1:
            self.angle += speed
            if self.angle > TWO_PI:
                self.angle -= TWO_PI
        else:
            self.angle -= speed
            if self.angle < 0:
                self.angle += TWO_PI

    def move(self, grid: Sequence[str], dx: float, dy: float, tile: int) -> bool:
        """Step by (dx, dy) unless a wall blocks it; return whether the player moved."""
        new_x = _round_half_away(self.x + dx)
        new_y = _round_half_away(self.y + dy)
        col = _trunc_div(new_x, tile)
        row = _trunc_div(new_y, tile)
        here_col = _trunc_div(self.x, tile)
        here_row = _trunc_div(self.y, tile)
        if (
            _is_wall(grid, col, row)
            or _is_wall(grid, here_col, row)
            or _is_wall(grid, col, here_row)
        ):
            return False
        self.x, self.y = new_x, new_y
        return True

    def update(self, grid: Sequence[str], settings: Settings) -> None:
        """Apply one frame of the held keys: turn, then walk or strafe."""
        if self.rotating == 1:
            self.rotate(1, settings.rotation_speed)
        elif self.rotating == -1:
            self.rotate(0, settings.rotation_speed)
        speed = settings.player_speed
        cos_a, sin_a = math.cos(self.angle), math.sin(self.angle)
        dx = dy = 0.0
        if self.strafe == 1:
            dx, dy = -sin_a * speed, cos_a * speed
        if self.strafe == -1:
            dx, dy = sin_a * speed, -cos_a * speed
        if self.walk == 1:
            dx, dy = cos_a * speed, sin_a * speed
        if self.walk == -1:
            dx, dy = -cos_a * speed, -sin_a * speed
        self.move(grid, dx, dy, settings.tile)