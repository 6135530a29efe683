"""Pixel value conversion for TrueColor visuals."""

from __future__ import annotations

Shifts = tuple[int, int, int, int, int, int]


def _shift_and_width(mask: int, channel: str) -> tuple[int, int]:
    if mask <= 0:
        raise ValueError(f"{channel} mask must be a positive bit mask")
    shift = 0
    while not mask & 1:
        mask >>= 1
        shift += 1
    width = 0
    while mask & 1:
        mask >>= 1
        width += 1
    return shift, width


def mask_shifts(red_mask: int, green_mask: int, blue_mask: int) -> Shifts:
    """Return (red shift, red bits, green shift, green bits, blue shift, blue bits).

    Each shift is the position of the lowest set bit of the mask and each
    bit count is the length of the run of set bits starting there.
    """
    red = _shift_and_width(red_mask, "red")
    green = _shift_and_width(green_mask, "green")
    blue = _shift_and_width(blue_mask, "blue")
    return (*red, *green, *blue)


def good_color(color: int, depth: int, shifts: Shifts) -> int:
    """Convert a 0xRRGGBB colour to a pixel value for a visual.

    Visuals of depth 24 or more take the colour as it is; shallower ones
    get each channel scaled down to its bit count and moved to its shift.
    """
    if depth >= 24:
        return color
    red = (color >> 8) & 0xFF00
    green = color & 0xFF00
    blue = (color << 8) & 0xFF00
    red_shift, red_bits, green_shift, green_bits, blue_shift, blue_bits = shifts
    return (
        ((red >> (16 - red_bits)) << red_shift)
        + ((green >> (16 - green_bits)) << green_shift)
        + ((blue >> (16 - blue_bits)) << blue_shift)
    )