"""The game: a scene, a player, one frame of rays per tick and the window loop."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from cubray.cubfile import CubFile, CubFileError, check_args, load_cub
from cubray.image import Image
from cubray.player import (
    KEY_A,
    KEY_D,
    KEY_LEFT,
    KEY_RIGHT,
    KEY_S,
    KEY_W,
    Player,
    angle_for,
)
from cubray.raycast import (
    CEILING_COLOR,
    FLOOR_COLOR,
    Settings,
    WallSlice,
    cast_rays,
)

WINDOW_TITLE = "Cub3D"
EXIT_FAILURE = 127
FRAMES_PER_SECOND = 60


def grid_width(rows: Sequence[str]) -> int:
    """Length of the longest map row, newline included."""
    return max((len(row) for row in rows), default=0)


def grid_height(rows: Sequence[str]) -> int:
    """Number of map rows."""
    return len(rows)


class Game:
    """A loaded scene with its player, advanced one frame per :meth:`tick`."""

    def __init__(self, cub: CubFile, settings: Settings | None = None) -> None:
        self.cub = cub
        self.settings = settings if settings is not None else Settings()
        self.grid = list(cub.map)
        self.width = grid_width(self.grid)
        self.height = grid_height(self.grid)
        tile = self.settings.tile
        self.player = Player(
            x=cub.start_x * tile + tile // 2,
            y=cub.start_y * tile + tile // 2,
            angle=angle_for(cub.orientation),
        )
        self.slices: list[WallSlice] = []

    def key_down(self, key: int) -> None:
        """Handle a key press, given as an X keysym."""
        self.player.press(key)

    def key_up(self, key: int) -> None:
        """Handle a key release, given as an X keysym."""
        self.player.release(key)

    def tick(self) -> list[WallSlice]:
        """Move the player for the held keys, then cast one ray per screen column."""
        self.player.update(self.grid, self.settings)
        self.slices = cast_rays(
            self.grid, self.player.x, self.player.y, self.player.angle, self.settings
        )
        return self.slices

    def render_frame(self) -> Image:
        """Draw the current wall slices, with ceiling above and floor below, into an image."""
        if not self.slices:
            self.tick()
        settings = self.settings
        image = Image(settings.width, settings.height)
        opp = image.bytes_per_pixel
        ceiling = CEILING_COLOR.to_bytes(opp, "little")
        floor = FLOOR_COLOR.to_bytes(opp, "little")
        walls = [column.color.to_bytes(opp, "little") for column in self.slices]
        padding = bytes(image.size_line - settings.width * opp)
        for y in range(settings.height):
            row = b"".join(
                ceiling if y < column.top else wall if y < column.bottom else floor
                for column, wall in zip(self.slices, walls)
            )
            start = y * image.size_line
            image.data[start:start + image.size_line] = row + padding
        return image


def _rgb(color: int) -> tuple[int, int, int]:
    return (color >> 16) & 0xFF, (color >> 8) & 0xFF, color & 0xFF


def _draw(surface, slices: Sequence[WallSlice], height: int) -> None:
    import pygame

    ceiling, floor = _rgb(CEILING_COLOR), _rgb(FLOOR_COLOR)
    for x, column in enumerate(slices):
        if column.top > 0:
            pygame.draw.line(surface, ceiling, (x, 0), (x, column.top - 1))
        if column.bottom > column.top:
            pygame.draw.line(surface, _rgb(column.color), (x, column.top), (x, column.bottom - 1))
        if column.bottom < height:
            pygame.draw.line(surface, floor, (x, column.bottom), (x, height - 1))


def main(argv: Sequence[str] | None = None) -> int:
    """Load the scene named on the command line and run the game window."""
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        cub = load_cub(check_args(args))
    except CubFileError as error:
        print(f"Error : {error}")
        return EXIT_FAILURE

    import pygame

    keys = {
        pygame.K_LEFT: KEY_LEFT,
        pygame.K_RIGHT: KEY_RIGHT,
        pygame.K_a: KEY_A,
        pygame.K_d: KEY_D,
        pygame.K_s: KEY_S,
        pygame.K_w: KEY_W,
    }
    game = Game(cub)
    settings = game.settings
    pygame.init()
    try:
        screen = pygame.display.set_mode((settings.width, settings.height))
        pygame.display.set_caption(WINDOW_TITLE)
        clock = pygame.time.Clock()
        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    game.key_down(keys.get(event.key, event.key))
                elif event.type == pygame.KEYUP:
                    game.key_up(keys.get(event.key, event.key))
            _draw(screen, game.tick(), settings.height)
            pygame.display.flip()
            clock.tick(FRAMES_PER_SECOND)
    finally:
        pygame.quit()
    return 0