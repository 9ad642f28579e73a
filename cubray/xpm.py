"""Reading of XPM images into :class:`cubray.image.Image` buffers."""

from __future__ import annotations

import os
import re
from collections.abc import Iterable, Iterator
from pathlib import Path

from cubray.colors import lookup_color
from cubray.image import Image

TRANSPARENT = 0xFF000000

_HEX_NUMBER = re.compile(r"\s*([+-]?)(?:0[xX](?=[0-9a-fA-F]))?([0-9a-fA-F]*)", re.ASCII)
_DEC_NUMBER = re.compile(r"\s*([+-]?[0-9]+)", re.ASCII)
_WORD_SEPARATORS = re.compile(r"[ \t]+")


class XpmError(ValueError):
    """Raised when XPM data is malformed."""


def parse_color_spec(name: str, end: str | None = None) -> int:
    """Return the 0xRRGGBB value of an XPM colour.

    ``#`` introduces a hexadecimal value; otherwise ``name`` (joined with
    ``end`` when given) is looked up among the named colours. ``None``
    gives -1 and an unknown name gives 0.
    """
    if name.startswith("#"):
        match = _HEX_NUMBER.match(name, 1)
        sign, digits = match.group(1), match.group(2)
        if not digits:
            return 0
        value = int(digits, 16)
        return -value if sign == "-" else value
    if end is not None:
        name = f"{name} {end}"[:63]
    try:
        return lookup_color(name)
    except KeyError:
        return 0


def str_to_words(text: str) -> list[str]:
    """Split text into words separated by spaces and tabs."""
    return [word for word in _WORD_SEPARATORS.split(text) if word]


def find(text: str, needle: str) -> int:
    """Return the index of the first occurrence of needle, or -1."""
    return text.find(needle)


def find_unquoted(text: str, needle: str) -> int:
    """Return the index of the first occurrence of needle outside double quotes, or -1."""
    quoted = False
    for pos in range(len(text) - len(needle) + 1):
        if text[pos] == '"':
            quoted = not quoted
        if not quoted and text.startswith(needle, pos):
            return pos
    return -1


def _blank(text: str, start: int, length: int) -> str:
    span = len(text[start:start + length])
    return text[:start] + " " * span + text[start + span:]


def strip_comments(text: str) -> str:
    """Replace C comments outside string literals with spaces.

    The text keeps its length; a line comment also blanks its newline.
    """
    while (begin := find_unquoted(text, "/*")) != -1:
        end = find(text[begin + 2:], "*/")
        text = _blank(text, begin, end + 4)
    while (begin := find_unquoted(text, "//")) != -1:
        end = find(text[begin + 2:], "\n")
        text = _blank(text, begin, end + 3)
    return text


def extract_strings(text: str) -> list[str]:
    """Return the contents of the double-quoted strings in text, in order."""
    strings = []
    pos = 0
    while (start := text.find('"', pos)) != -1:
        stop = text.find('"', start + 1)
        if stop == -1:
            break
        strings.append(text[start + 1:stop])
        pos = stop + 1
    return strings


def _atoi(text: str) -> int:
    match = _DEC_NUMBER.match(text)
    return int(match.group(1)) if match else 0


def _next_line(lines: Iterator[str], what: str) -> str:
    try:
        return next(lines)
    except StopIteration:
        raise XpmError(f"XPM data ends before the {what}") from None


def _color_entry(spec: str) -> int:
    words = str_to_words(spec)
    try:
        index = words.index("c")
    except ValueError:
        raise XpmError(f"colour entry without a 'c' key: {spec!r}") from None
    if index + 1 >= len(words):
        raise XpmError(f"colour entry without a colour: {spec!r}")
    end = words[index + 2] if index + 2 < len(words) else None
    return parse_color_spec(words[index + 1], end)


def parse_xpm(lines: Iterable[str]) -> Image:
    """Build an image from the strings of an XPM: header, colours, pixel rows.

    Transparent pixels are stored as 0xFF000000; pixel codes missing from
    the colour table are black.
    """
    it = iter(lines)
    header = str_to_words(_next_line(it, "header"))
    if len(header) < 4:
        raise XpmError(f"XPM header needs four values, got {header!r}")
    width, height, ncolors, cpp = (_atoi(word) for word in header[:4])
    if min(width, height, ncolors, cpp) <= 0:
        raise XpmError(f"invalid XPM header {header!r}")

    # Short codes overwrite earlier entries; longer ones keep the first.
    overwrite = cpp <= 2
    palette: dict[str, int] = {}
    for _ in range(ncolors):
        line = _next_line(it, "colour table end")
        if len(line) < cpp:
            raise XpmError(f"colour entry shorter than its code: {line!r}")
        key, color = line[:cpp], _color_entry(line[cpp:])
        if overwrite:
            palette[key] = color
        else:
            palette.setdefault(key, color)

    image = Image(width, height)
    for y in range(height):
        row = _next_line(it, "last pixel row")
        if len(row) < width * cpp:
            raise XpmError(f"pixel row {y} is too short")
        for x in range(width):
            color = palette.get(row[x * cpp:(x + 1) * cpp], 0)
            if color == -1:
                color = TRANSPARENT
            image.put_pixel(x, y, color)
    return image


def xpm_to_image(data: Iterable[str]) -> Image:
    """Build an image from XPM data given as a sequence of strings."""
    return parse_xpm(list(data))


def load_xpm(path: str | os.PathLike[str]) -> Image:
    """Read an XPM file and build its image."""
    text = Path(path).read_text(encoding="latin-1")
    return parse_xpm(extract_strings(strip_comments(text)))