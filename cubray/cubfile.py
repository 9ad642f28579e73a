"""Reading and validation of .cub scene description files.

A scene file holds six elements (four wall textures and the floor and
ceiling colours) followed by the map grid.
"""

from __future__ import annotations

import os
import re
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from pathlib import Path

MIN_FILE_LINES = 6
MAX_FILE_LINES = 1500
MIN_MAP_LINES = 9
MAX_MAP_LINES = 1500

_INT_MAX = 2147483647
_C_SPACE = " \t\n\v\f\r"
_MAP_CHARS = frozenset("NSWE10 \n")
_ELEMENT_STARTS = frozenset("NSWECF")
_LINE = re.compile(r"[^\n]*\n|[^\n]+")

# Element keys in the order they are tried, with the field each one fills.
_ELEMENTS = {
    "NO": "north",
    "SO": "south",
    "WE": "west",
    "EA": "east",
    "F": "floor",
    "C": "ceiling",
}
_COLOR_FIELDS = frozenset({"floor", "ceiling"})

_TEXTURE_FORMAT = "Texture format : NO /texture/file_name"
_COLOR_FORMAT = "Texture format : C 255,255,255"
_COLOR_CODE = "Wrong color code, must be : C 255,255,255"


class CubFileError(ValueError):
    """Raised when a scene file or the command line naming it is invalid."""


@dataclass
class CubFile:
    """The contents of a scene file."""

    north: str | None = None
    south: str | None = None
    west: str | None = None
    east: str | None = None
    floor: tuple[int, int, int] | None = None
    ceiling: tuple[int, int, int] | None = None
    lines: list[str] = field(default_factory=list)
    map: list[str] = field(default_factory=list)
    orientation: str = "m"
    start_x: int = 1
    start_y: int = 1

    def is_complete(self) -> bool:
        """Return True when all four textures and both colours are set."""
        return all(getattr(self, name) is not None for name in _ELEMENTS.values())


def check_file_name(name: str | os.PathLike[str]) -> bool:
    """Return True when the part of the name from its first dot is exactly '.cub'."""
    name = os.fspath(name)
    dot = name.find(".")
    return dot != -1 and name[dot:] == ".cub"


def read_lines(path: str | os.PathLike[str]) -> list[str]:
    """Return the lines of a file, each keeping its newline.

    The file must hold between 6 and 1500 lines.
    """
    try:
        data = Path(path).read_bytes()
    except OSError:
        raise CubFileError("File access") from None
    lines = _LINE.findall(data.decode("utf-8", errors="replace"))
    if not MIN_FILE_LINES <= len(lines) <= MAX_FILE_LINES:
        raise CubFileError("File length")
    return lines


def parse_int(text: str) -> int:
    """Parse a whole string as a 32-bit signed integer.

    Leading whitespace and one sign are allowed; anything after the digits,
    an empty string or an out-of-range value raises ValueError.
    """
    pos, length = 0, len(text)
    while pos < length and text[pos] in _C_SPACE:
        pos += 1
    sign = 1
    if pos < length and text[pos] in "+-":
        if text[pos] == "-":
            sign = -1
        pos += 1
    value = 0
    limit = _INT_MAX + (1 if sign < 0 else 0)
    while pos < length and "0" <= text[pos] <= "9":
        value = value * 10 + ord(text[pos]) - ord("0")
        pos += 1
        if value > limit:
            raise ValueError(f"integer out of range: {text!r}")
    if pos == 0 or pos != length:
        raise ValueError(f"not an integer: {text!r}")
    return sign * value


def _split(text: str, sep: str) -> list[str]:
    return [part for part in text.split(sep) if part]


def parse_color(text: str) -> tuple[int, int, int]:
    """Parse 'R,G,B' with each component between 0 and 255."""
    values = []
    for part in _split(text, ","):
        try:
            value = parse_int(part)
        except ValueError:
            raise CubFileError(_COLOR_CODE) from None
        if not 0 <= value <= 255:
            raise CubFileError(_COLOR_CODE)
        values.append(value)
    if len(values) != 3:
        raise CubFileError(_COLOR_CODE)
    red, green, blue = values
    return red, green, blue


def _prefix_match(line: str, key: str) -> bool:
    common = min(len(line), len(key))
    return line[:common] == key[:common]


def _element_value(line: str, key: str, message: str) -> str:
    words = _split(line, " ")
    if len(words) != 2 or not key.startswith(words[0]):
        raise CubFileError(message)
    return words[1].strip("\n")


def _set_texture(cub: CubFile, line: str, key: str, attr: str) -> None:
    if getattr(cub, attr) is not None:
        raise CubFileError("too many textures")
    path = _element_value(line, key, _TEXTURE_FORMAT)
    try:
        fd = os.open(path, os.O_RDONLY)
    except (OSError, ValueError):
        raise CubFileError("File can't be opened") from None
    os.close(fd)
    setattr(cub, attr, path)


def _set_color(cub: CubFile, line: str, key: str, attr: str) -> None:
    if getattr(cub, attr) is not None:
        raise CubFileError("Invalid characters")
    value = _element_value(line, key, _COLOR_FORMAT)
    setattr(cub, attr, parse_color(value))


def _check_element(cub: CubFile, line: str) -> None:
    for key, attr in _ELEMENTS.items():
        if _prefix_match(line, key):
            if attr in _COLOR_FIELDS:
                _set_color(cub, line, key, attr)
            else:
                _set_texture(cub, line, key, attr)
            return
    if not cub.is_complete():
        raise CubFileError("Texture")


def parse_elements(lines: Iterable[str]) -> CubFile:
    """Read the texture and colour elements from the lines of a scene file.

    Texture files must be readable. Lines that are not elements are allowed
    only once all six elements have been seen.
    """
    cub = CubFile(lines=list(lines))
    for line in cub.lines:
        if line and not line.startswith("\n"):
            _check_element(cub, line)
    if not cub.is_complete():
        raise CubFileError("missing texture")
    return cub


def is_element(line: str) -> bool:
    """Return True when a line starts with the first letter of an element key."""
    return bool(line) and line[0] in _ELEMENT_STARTS


def is_valid_map_char(char: str) -> bool:
    """Return True for the characters a map row may hold."""
    return char in _MAP_CHARS


def extract_map(lines: Sequence[str]) -> list[str]:
    """Return the map rows: the lines after the last element and any blank lines.

    The file must hold exactly six element lines, and the map between 9 and
    1500 rows made only of map characters.
    """
    lines = list(lines)
    element_rows = [index for index, line in enumerate(lines) if is_element(line)]
    if len(element_rows) != len(_ELEMENTS):
        raise CubFileError("Invalid characters")
    start = element_rows[-1] + 1
    while start < len(lines) and lines[start].startswith("\n"):
        start += 1
    size = len(lines) - start
    if not MIN_MAP_LINES <= size <= MAX_MAP_LINES:
        raise CubFileError("wrong map size (must be between 3 && 1500 lines)")
    rows = lines[start:]
    for row in rows:
        if not all(is_valid_map_char(char) for char in row):
            raise CubFileError("Invalid characters in map")
    return rows


def load_cub(path: str | os.PathLike[str]) -> CubFile:
    """Read and validate a scene file."""
    lines = read_lines(path)
    cub = parse_elements(lines)
    cub.map = extract_map(lines)
    return cub


def check_args(argv: Sequence[str]) -> str:
    """Return the scene file named by the command-line arguments.

    Exactly one argument is expected, and it must end in '.cub'.
    """
    args = list(argv)
    if len(args) != 1:
        raise CubFileError("Wrong argument count")
    name = args[0]
    if not check_file_name(name):
        raise CubFileError("Wrong File Name / Format")
    return name