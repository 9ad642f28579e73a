"""Conversion of 0xRRGGBB colours to pixel values of a TrueColor visual."""

from __future__ import annotations


def _split_mask(mask: int) -> tuple[int, int]:
    """Return (shift, width) of the contiguous run of set bits in a mask."""
    if mask <= 0:
        raise ValueError(f"colour mask must be a positive bit mask, got {mask!r}")
    shift = (mask & -mask).bit_length() - 1
    mask >>= shift
    width = 0
    while mask & 1:
        mask >>= 1
        width += 1
    return shift, width


def rgb_shifts(red_mask: int, green_mask: int, blue_mask: int) -> tuple[int, ...]:
    """Return (red_shift, red_bits, green_shift, green_bits, blue_shift, blue_bits).

    Each shift is the position of the lowest set bit of the channel mask and
    each bit count is the length of the run of set bits starting there.
    """
    return tuple(
        value
        for mask in (red_mask, green_mask, blue_mask)
        for value in _split_mask(mask)
    )


def good_color(color: int, depth: int, shifts: tuple[int, ...]) -> int:
    """Return the pixel value of an 0xRRGGBB colour on a visual of this depth.

    Visuals of 24 bits or more take the colour unchanged; shallower ones get
    each channel scaled down and placed according to ``shifts``, as returned
    by :func:`rgb_shifts`.
    """
    if depth >= 24:
        return color
    red_shift, red_bits, green_shift, green_bits, blue_shift, blue_bits = shifts
    red = (color >> 8) & 0xFF00
    green = color & 0xFF00
    blue = (color << 8) & 0xFF00
    return (
        ((red >> (16 - red_bits)) << red_shift)
        + ((green >> (16 - green_bits)) << green_shift)
        + ((blue >> (16 - blue_bits)) << blue_shift)
    )