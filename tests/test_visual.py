import pytest

from mazechase.visual import good_color, mask_shifts


def test_mask_shifts_24_bit_layout():
    assert mask_shifts(0xFF0000, 0x00FF00, 0x0000FF) == (16, 8, 8, 8, 0, 8)


def test_mask_shifts_565_layout():
    assert mask_shifts(0xF800, 0x07E0, 0x001F) == (11, 5, 5, 6, 0, 5)


@pytest.mark.parametrize("masks", [(0, 0xFF00, 0xFF), (0xFF0000, 0, 0xFF), (0xFF0000, 0xFF00, 0)])
def test_mask_shifts_rejects_empty_mask(masks):
    with pytest.raises(ValueError):
        mask_shifts(*masks)


@pytest.mark.parametrize("color", [0x000000, 0xFF99FF, 0x00FFFF, 0x11223344 & 0xFFFFFF])
def test_deep_visual_keeps_colour(color):
    shifts = mask_shifts(0xF800, 0x07E0, 0x001F)
    assert good_color(color, 24, shifts) == color
    assert good_color(color, 32, shifts) == color


@pytest.mark.parametrize("color", [0x000000, 0xFF99FF, 0x00FFFF, 0x123456])
def test_shallow_visual_with_8_bit_channels_is_identity(color):
    shifts = mask_shifts(0xFF0000, 0x00FF00, 0x0000FF)
    assert good_color(color, 16, shifts) == color


def test_shallow_visual_565_white_and_black():
    shifts = mask_shifts(0xF800, 0x07E0, 0x001F)
    assert good_color(0xFFFFFF, 16, shifts) == 0xFFFF
    assert good_color(0, 16, shifts) == 0


def test_shallow_visual_channels_stay_inside_masks():
    red_mask, green_mask, blue_mask = 0xF800, 0x07E0, 0x001F
    shifts = mask_shifts(red_mask, green_mask, blue_mask)
    assert good_color(0xFF0000, 16, shifts) == red_mask
    assert good_color(0x00FF00, 16, shifts) == green_mask
    assert good_color(0x0000FF, 16, shifts) == blue_mask