"""Reading XPM pixmaps into images."""

from __future__ import annotations

import os
import re
from typing import Iterable, Iterator, Optional, Union

from mazechase.colors import lookup_color
from mazechase.image import Image

TRANSPARENT_PIXEL = 0xFF000000
_NAME_BUFFER = 64
_LONG_MAX = (1 << 63) - 1
_LONG_MIN = -(1 << 63)

_INT_RE = re.compile(r"\s*([+-]?\d+)")
_HEX_RE = re.compile(r"\s*([+-]?)(?:0[xX](?=[0-9a-fA-F]))?([0-9a-fA-F]*)")
_QUOTED_RE = re.compile(r'"([^"]*)"')


class XpmError(ValueError):
    """Raised when XPM data cannot be turned into an image."""


def split_words(text: str) -> list[str]:
    """Split ``text`` on runs of spaces and tabs, dropping empty words."""
    return [word for word in re.split(r"[ \t]+", text) if word]


def find_unquoted(text: str, needle: str) -> int:
    """Return the index of the first ``needle`` outside double quotes, or -1."""
    if not needle:
        raise ValueError("needle must not be empty")
    quoted = False
    for pos in range(len(text) - len(needle) + 1):
        if text[pos] == '"':
            quoted = not quoted
        if not quoted and text.startswith(needle, pos):
            return pos
    return -1


def strip_comments(text: str) -> str:
    """Blank out C comments that lie outside strings, keeping the text's length."""
    chars = list(text)
    while (begin := find_unquoted("".join(chars), "/*")) != -1:
        end = "".join(chars).find("*/", begin + 2)
        if end == -1:
            raise XpmError("unterminated comment")
        chars[begin:end + 2] = " " * (end + 2 - begin)
    while (begin := find_unquoted("".join(chars), "//")) != -1:
        end = "".join(chars).find("\n", begin + 2)
        stop = begin + 2 if end == -1 else end + 1
        chars[begin:stop] = " " * (stop - begin)
    return "".join(chars)


def _to_int32(value: int) -> int:
    value = max(_LONG_MIN, min(_LONG_MAX, value)) & 0xFFFFFFFF
    return value - (1 << 32) if value & 0x80000000 else value


def _atoi(text: str) -> int:
    match = _INT_RE.match(text)
    return int(match.group(1)) if match else 0


def _hex_value(text: str) -> int:
    match = _HEX_RE.match(text)
    sign, digits = match.groups()
    if not digits:
        return 0
    value = int(digits, 16)
    return _to_int32(-value if sign == "-" else value)


def text_to_rgb(name: str, suffix: Optional[str] = None) -> int:
    """Resolve an XPM colour value: ``#RRGGBB`` or a colour name.

    A name may be given in two words (``light`` and ``blue``). Unknown names
    resolve to black; ``None`` resolves to -1.
    """
    if name.startswith("#"):
        return _hex_value(name[1:])
    if suffix is not None:
        name = f"{name} {suffix}"[:_NAME_BUFFER - 1]
    color = lookup_color(name)
    return 0 if color is None else color


def _next_line(lines: Iterator[str], what: str) -> str:
    try:
        return next(lines)
    except StopIteration:
        raise XpmError(f"missing {what}") from None


def _parse_header(line: str) -> tuple[int, int, int, int]:
    words = split_words(line)
    if len(words) < 4:
        raise XpmError("incomplete header")
    values = tuple(_atoi(word) for word in words[:4])
    if any(value <= 0 for value in values):
        raise XpmError("header values must be positive")
    return values  # type: ignore[return-value]


def _parse_color_line(line: str, chars_per_pixel: int) -> tuple[str, int]:
    words = split_words(line[chars_per_pixel:])
    if "c" not in words:
        raise XpmError("colour line has no 'c' key")
    index = words.index("c") + 1
    if index >= len(words):
        raise XpmError("colour line has no colour after 'c'")
    suffix = words[index + 1] if index + 1 < len(words) else None
    return line[:chars_per_pixel], text_to_rgb(words[index], suffix)


def parse_xpm(lines: Iterable[str]) -> Image:
    """Build a 32-bit image from the strings of an XPM description."""
    source = iter(lines)
    width, height, ncolors, cpp = _parse_header(_next_line(source, "header"))

    palette: dict[str, int] = {}
    for _ in range(ncolors):
        key, color = _parse_color_line(_next_line(source, "colour line"), cpp)
        if cpp <= 2:
            palette[key] = color
        else:
            palette.setdefault(key, color)

    image = Image(width, height, 32, 0)
    for y in range(height):
        line = _next_line(source, "pixel row")
        if len(line) < width * cpp:
            raise XpmError(f"pixel row {y} is too short")
        for x in range(width):
            color = palette.get(line[cpp * x:cpp * (x + 1)], 0)
            if color == -1:
                color = TRANSPARENT_PIXEL
            image.set_pixel(x, y, color)
    return image


def xpm_from_text(text: str) -> Image:
    """Parse the text of an XPM file, comments and C syntax included."""
    return parse_xpm(_QUOTED_RE.findall(strip_comments(text)))


def xpm_from_file(path: Union[str, os.PathLike]) -> Image:
    """Read and parse an XPM file."""
    with open(path, encoding="latin-1") as handle:
        return xpm_from_text(handle.read())