"""In-memory pixel images laid out like a ZPixmap."""

from __future__ import annotations

from collections.abc import Iterator


class Image:
    """A width x height pixel buffer with ``bpp`` bits per pixel.

    Rows are padded to 32 bits; ``endian`` is 0 for little-endian pixels and
    1 for big-endian ones. A new image is all zeros.
    """

    def __init__(self, width: int, height: int, bpp: int = 32, endian: int = 0) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"image size must be positive, got {width}x{height}")
        if bpp <= 0 or bpp % 8:
            raise ValueError(f"bits per pixel must be a positive multiple of 8, got {bpp}")
        if endian not in (0, 1):
            raise ValueError(f"endian must be 0 or 1, got {endian!r}")
        self.width = width
        self.height = height
        self.bpp = bpp
        self.endian = endian
        self.size_line = ((width * bpp + 31) // 32) * 4
        self.data = bytearray(self.size_line * height)

    @property
    def bytes_per_pixel(self) -> int:
        return self.bpp // 8

    @property
    def _byteorder(self) -> str:
        return "big" if self.endian else "little"

    def _offset(self, x: int, y: int) -> int:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height} image")
        return y * self.size_line + x * self.bytes_per_pixel

    def put_pixel(self, x: int, y: int, color: int) -> None:
        """Store the low bytes of ``color`` at pixel (x, y)."""
        opp = self.bytes_per_pixel
        offset = self._offset(x, y)
        value = color & ((1 << (8 * opp)) - 1)
        self.data[offset:offset + opp] = value.to_bytes(opp, self._byteorder)

    def get_pixel(self, x: int, y: int) -> int:
        """Return the unsigned value stored at pixel (x, y)."""
        opp = self.bytes_per_pixel
        offset = self._offset(x, y)
        return int.from_bytes(self.data[offset:offset + opp], self._byteorder)

    def fill(self, color: int) -> None:
        """Set every pixel to ``color``."""
        opp = self.bytes_per_pixel
        value = (color & ((1 << (8 * opp)) - 1)).to_bytes(opp, self._byteorder)
        row = value * self.width
        row += bytes(self.size_line - len(row))
        self.data[:] = row * self.height

    def rows(self) -> Iterator[bytes]:
        """Yield the raw bytes of each row, padding included, top to bottom."""
        for y in range(self.height):
            start = y * self.size_line
            yield bytes(self.data[start:start + self.size_line])