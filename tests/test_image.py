import pytest

from cubray.image import Image


def _color_map(x, y, w, h, kind):
    if kind == 2:
        return (y * 255) // w + ((((w - x) * 255) // w) << 16) + (((y * 255) // h) << 8)
    return (x * 255) // w + ((((w - x) * 255) // w) << 16) + (((y * 255) // h) << 8)


@pytest.mark.parametrize("kind", [1, 2])
@pytest.mark.parametrize("endian", [0, 1])
def test_color_map_fill_reads_back(kind, endian):
    width = height = 42
    image = Image(width, height, 32, endian)
    for y in range(height):
        for x in range(width):
            image.put_pixel(x, y, _color_map(x, y, width, height, kind))
    for y in range(height):
        for x in range(width):
            assert image.get_pixel(x, y) == _color_map(x, y, width, height, kind)


def test_new_image_layout():
    image = Image(42, 42, 32, 0)
    assert image.size_line == 168
    assert len(image.data) == 168 * 42
    assert all(byte == 0 for byte in image.data)


def test_little_endian_bytes():
    image = Image(2, 1, 32, 0)
    image.put_pixel(0, 0, 0x11223344)
    assert bytes(image.data[0:4]) == bytes([0x44, 0x33, 0x22, 0x11])


def test_big_endian_bytes():
    image = Image(2, 1, 32, 1)
    image.put_pixel(1, 0, 0x11223344)
    assert bytes(image.data[4:8]) == bytes([0x11, 0x22, 0x33, 0x44])


def test_24_bit_pixels_drop_top_byte():
    image = Image(3, 3, 24, 0)
    image.put_pixel(2, 2, 0xFF123456)
    assert image.get_pixel(2, 2) == 0x123456


def test_rows_are_padded_to_32_bits():
    image = Image(3, 2, 24, 0)
    rows = list(image.rows())
    assert len(rows) == 2
    assert all(len(row) % 4 == 0 and len(row) >= 9 for row in rows)


def test_fill_sets_every_pixel():
    image = Image(5, 4, 32, 1)
    image.fill(0x00FFFF00)
    assert {image.get_pixel(x, y) for x in range(5) for y in range(4)} == {0x00FFFF00}


def test_rows_follow_put_pixel():
    image = Image(4, 3, 32, 0)
    image.put_pixel(1, 2, 0xABCDEF)
    rows = list(image.rows())
    assert rows[2][4:8] == (0xABCDEF).to_bytes(4, "little")
    assert rows[0] == bytes(image.size_line)


@pytest.mark.parametrize("x, y", [(-1, 0), (0, -1), (4, 0), (0, 3)])
def test_out_of_range_pixel(x, y):
    image = Image(4, 3)
    with pytest.raises(IndexError):
        image.put_pixel(x, y, 0)
    with pytest.raises(IndexError):
        image.get_pixel(x, y)


@pytest.mark.parametrize(
    "args", [(0, 1, 32, 0), (1, -2, 32, 0), (1, 1, 12, 0), (1, 1, 0, 0), (1, 1, 32, 2)]
)
def test_invalid_image(args):
    with pytest.raises(ValueError):
        Image(*args)