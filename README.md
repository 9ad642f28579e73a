# cubray

A small grid raycaster. It reads a `.cub` scene file, checks it, opens a
pygame window and draws a first-person view of the map: one ray per screen
column, walls as flat-coloured vertical slices, a black ceiling and a yellow
floor.

## Installing

```
pip install .
```

The window and keyboard handling use pygame.

## Running

```
cubray path/to/scene.cub
```

Give exactly one argument. The part of the name from its first dot must be
exactly `.cub`. When the arguments or the file are wrong, the program prints
`Error : <message>` and exits with status 127.

Controls:

- `W` / `S`: move forward and back
- `A` / `D`: strafe
- Left and right arrows: turn

Releasing any key stops all movement and turning. Close the window to quit.
A move is refused when the target tile, or either of the tiles it would cut
across, is a wall (`1`) or lies outside the map.

## The `.cub` format

The file must hold between 6 and 1500 lines. Six element lines come first,
in any order, with blank lines allowed between them:

```
NO ./textures/north.xpm
SO ./textures/south.xpm
WE ./textures/west.xpm
EA ./textures/east.xpm
F 220,100,0
C 225,30,0
```

- Each element is a key and one value separated by spaces. Each key may
  appear only once.
- Each texture path must be a file that can be opened for reading.
- Each colour is three integers from 0 to 255 separated by commas.
- A line that is not an element before all six are seen is an error.

The map follows the last element line (blank lines after it are skipped).
It must have between 9 and 1500 rows, and its rows may only contain `0`,
`1`, spaces and `N`, `S`, `E`, `W`.

## What it does not do

- Textures are checked for existence but not drawn; walls are plain red
  where a ray meets a vertical grid line and plain green where it meets a
  horizontal one.
- The `F` and `C` colours are read and checked but not used; the floor is
  always yellow and the ceiling black.
- The player's start is not taken from the map. The player always starts in
  the middle of tile (1, 1), facing east.
- The map is not checked for being closed by walls, nor for holding exactly
  one start letter.

## Using it as a library

```python
from cubray.cubfile import load_cub, CubFileError
from cubray.game import Game

cub = load_cub("scene.cub")    # raises CubFileError on bad input
game = Game(cub, None)         # None selects the default Settings
game.key_down(119)             # 'w', as an X keysym
slices = game.tick()           # move for held keys, cast one ray per column
image = game.render_frame()    # an Image of the current frame
```

Modules:

- `cubray.cubfile`: `load_cub`, `check_args`, `check_file_name`,
  `read_lines`, `parse_elements`, `extract_map`, `parse_color`, `parse_int`,
  the `CubFile` dataclass and `CubFileError`.
- `cubray.game`: `Game`, `grid_width`, `grid_height` and `main`, the
  command above.
- `cubray.raycast`: `Settings` (screen 1900x1000, tile 30, 60 degree field
  of view by default), `WallSlice`, `cast_rays`, `horizontal_distance`,
  `vertical_distance`, `wall_slice`, `wall_color`, `is_open`,
  `normalize_angle` and `unit_circle`.
- `cubray.player`: `Player` (`press`, `release`, `rotate`, `move`,
  `update`) and `angle_for`.
- `cubray.image`: `Image`, an in-memory pixel buffer with rows padded to
  32 bits (`put_pixel`, `get_pixel`, `fill`, `rows`).
- `cubray.xpm`: `load_xpm`, `xpm_to_image` and `parse_xpm`, which read XPM
  pictures into an `Image`, plus helpers and `XpmError`.
- `cubray.colors`: `lookup_color`, X11 colour names to 0xRRGGBB values.
- `cubray.visual`: `rgb_shifts` and `good_color`, which turn 0xRRGGBB
  colours into pixel values for visuals shallower than 24 bits.

## Tests

```
pip install .[test]
pytest
```