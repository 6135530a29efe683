import pytest

from mazechase.colors import lookup_color
from mazechase.xpm import (
    TRANSPARENT_PIXEL,
    XpmError,
    find_unquoted,
    parse_xpm,
    split_words,
    strip_comments,
    text_to_rgb,
    xpm_from_file,
    xpm_from_text,
)

XPM_TEXT = """/* XPM */
static char *sample[] = {
/* columns rows colors chars-per-pixel */
"2 2 2 1 ",
"a c #FF0000", // red
"b c None",
/* pixels */
"ab",
"ba"
};
"""


def test_split_words_on_spaces_and_tabs():
    assert split_words("  one\ttwo   three\t") == ["one", "two", "three"]
    assert split_words(" \t ") == []


def test_find_unquoted_skips_quoted_occurrence():
    text = '"/*" x /* y'
    pos = find_unquoted(text, "/*")
    assert pos == text.rindex("/*")


def test_find_unquoted_missing():
    assert find_unquoted('"//"', "//") == -1
    assert find_unquoted("a", "abc") == -1


def test_strip_comments_keeps_length_and_strings():
    cleaned = strip_comments(XPM_TEXT)
    assert len(cleaned) == len(XPM_TEXT)
    assert "/*" not in cleaned
    assert "//" not in cleaned
    assert '"a c #FF0000"' in cleaned
    assert "red" not in cleaned


def test_strip_comments_leaves_quoted_markers():
    text = '"a // b" "c /* d */"'
    assert strip_comments(text) == text


def test_strip_comments_unterminated_block():
    with pytest.raises(XpmError):
        strip_comments("abc /* never closed")


def test_text_to_rgb_hex():
    assert text_to_rgb("#FF99FF") == 0xFF99FF
    assert text_to_rgb("#00ffff", None) == 0x00FFFF


def test_text_to_rgb_names():
    assert text_to_rgb("White") == lookup_color("white")
    assert text_to_rgb("light", "blue") == lookup_color("light blue")
    assert text_to_rgb("None") == -1


def test_text_to_rgb_unknown_is_black():
    assert text_to_rgb("nosuchcolour") == 0


def test_parse_xpm_pixels():
    image = parse_xpm(["2 2 2 1", "a c #FF0000", "b c None", "ab", "ba"])
    assert (image.width, image.height) == (2, 2)
    assert image.get_pixel(0, 0) == 0xFF0000
    assert image.get_pixel(1, 1) == 0xFF0000
    assert image.get_pixel(1, 0) == TRANSPARENT_PIXEL
    assert image.get_pixel(0, 1) == TRANSPARENT_PIXEL


def test_parse_xpm_multichar_keys_first_definition_wins():
    image = parse_xpm(["1 1 2 3", "abc c #0000FF", "abc c #00FF00", "abc"])
    assert image.get_pixel(0, 0) == 0x0000FF


def test_parse_xpm_short_keys_last_definition_wins():
    image = parse_xpm(["1 1 2 1", "a c #0000FF", "a c #00FF00", "a"])
    assert image.get_pixel(0, 0) == 0x00FF00


def test_parse_xpm_unknown_key_is_black():
    image = parse_xpm(["1 1 1 1", "a c #0000FF", "z"])
    assert image.get_pixel(0, 0) == 0


@pytest.mark.parametrize(
    "lines",
    [
        [],
        ["0 2 1 1", "a c #000000", "a", "a"],
        ["2 2 1"],
        ["1 1 1 1", "a #000000", "a"],
        ["1 1 1 1", "a c", "a"],
        ["1 2 1 1", "a c #000000", "a"],
        ["2 1 1 1", "a c #000000", "a"],
        ["1 1 2 1", "a c #000000"],
    ],
)
def test_parse_xpm_errors(lines):
    with pytest.raises(XpmError):
        parse_xpm(lines)


def test_xpm_from_text_matches_parse():
    from_text = xpm_from_text(XPM_TEXT)
    direct = parse_xpm(["2 2 2 1 ", "a c #FF0000", "b c None", "ab", "ba"])
    assert from_text.data == direct.data


def test_xpm_from_file(tmp_path):
    path = tmp_path / "sprite.xpm"
    path.write_text(XPM_TEXT)
    image = xpm_from_file(path)
    assert image.get_pixel(0, 0) == 0xFF0000
    assert image.get_pixel(1, 0) == TRANSPARENT_PIXEL


def test_xpm_from_missing_file(tmp_path):
    with pytest.raises(OSError):
        xpm_from_file(tmp_path / "absent.xpm")