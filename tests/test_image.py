import pytest

from mazechase.image import Image

IM1_SX = 42
IM1_SY = 42
IM3_SX = 242
IM3_SY = 242


def _pattern(x, y, w, h, kind):
    if kind == 2:
        return (y * 255) // w + ((((w - x) * 255) // w) << 16) + (((y * 255) // h) << 8)
    return (x * 255) // w + ((((w - x) * 255) // w) << 16) + (((y * 255) // h) << 8)


@pytest.mark.parametrize("byte_order", [0, 1])
@pytest.mark.parametrize("size,kind", [((IM1_SX, IM1_SY), 1), ((IM3_SX, IM3_SY), 1), ((IM3_SX, IM3_SY), 2)])
def test_colour_map_fill_reads_back(byte_order, size, kind):
    w, h = size
    image = Image(w, h, 32, byte_order)
    for y in range(h):
        for x in range(w):
            image.set_pixel(x, y, _pattern(x, y, w, h, kind))
    for y in range(0, h, 7):
        for x in range(0, w, 5):
            assert image.get_pixel(x, y) == _pattern(x, y, w, h, kind)


def test_new_image_is_zeroed_and_row_sized():
    image = Image(IM1_SX, IM1_SY)
    assert image.size_line == IM1_SX * image.bytes_per_pixel
    assert len(image.data) == image.size_line * IM1_SY
    assert not any(image.data)


def test_little_endian_layout():
    image = Image(2, 1, 32, 0)
    image.set_pixel(0, 0, 0x11223344)
    assert image.row(0)[:4] == bytes([0x44, 0x33, 0x22, 0x11])


def test_big_endian_layout():
    image = Image(2, 1, 32, 1)
    image.set_pixel(1, 0, 0x11223344)
    assert image.row(0)[4:8] == bytes([0x11, 0x22, 0x33, 0x44])


def test_rows_are_padded_to_32_bits():
    image = Image(3, 2, 8, 0)
    assert image.size_line % 4 == 0
    assert image.size_line >= 3
    assert len(image.row(1)) == image.size_line


def test_set_pixel_keeps_only_pixel_bytes():
    image = Image(1, 1, 16, 0)
    image.set_pixel(0, 0, 0x11223344)
    assert image.get_pixel(0, 0) == 0x3344


def test_negative_colour_wraps_to_pixel_width():
    image = Image(1, 1, 32, 0)
    image.set_pixel(0, 0, -1)
    assert image.get_pixel(0, 0) == 0xFFFFFFFF


@pytest.mark.parametrize("x,y", [(-1, 0), (0, -1), (IM1_SX, 0), (0, IM1_SY)])
def test_out_of_range_pixel(x, y):
    image = Image(IM1_SX, IM1_SY)
    with pytest.raises(IndexError):
        image.set_pixel(x, y, 0)
    with pytest.raises(IndexError):
        image.get_pixel(x, y)


def test_out_of_range_row():
    with pytest.raises(IndexError):
        Image(IM1_SX, IM1_SY).row(IM1_SY)


@pytest.mark.parametrize(
    "args", [(0, 10, 32, 0), (10, -1, 32, 0), (10, 10, 12, 0), (10, 10, 32, 2)]
)
def test_invalid_construction(args):
    with pytest.raises(ValueError):
        Image(*args)