import pytest

from mazechase.colors import lookup_color


@pytest.mark.parametrize(
    "name, expected",
    [
        ("snow", 0xFFFAFA),
        ("ghost white", 0xF8F8FF),
        ("white", 0xFFFFFF),
        ("black", 0x0),
        ("navy", 0x80),
        ("hot pink", 0xFF69B4),
        ("red4", 0x8B0000),
        ("gray50", 0x7F7F7F),
        ("lightgreen", 0x90EE90),
    ],
)
def test_known_names(name, expected):
    assert lookup_color(name) == expected


def test_none_is_transparent():
    assert lookup_color("none") == -1


def test_lookup_is_case_insensitive():
    assert lookup_color("SNOW") == lookup_color("snow")
    assert lookup_color("Hot Pink") == lookup_color("hot pink")
    assert lookup_color("NONE") == -1


def test_unknown_name_gives_none():
    assert lookup_color("not a colour") is None
    assert lookup_color("") is None


def test_duplicate_name_first_entry_wins():
    assert lookup_color("dark slate") == 0x2F4F4F
    assert lookup_color("light slate") == 0x778899
    assert lookup_color("light goldenrod") == 0xFAFAD2


def test_whitespace_is_significant():
    assert lookup_color(" snow") is None
    assert lookup_color("snow ") is None


@pytest.mark.parametrize("number", range(0, 101))
def test_gray_and_grey_agree(number):
    gray = lookup_color(f"gray{number}")
    assert gray == lookup_color(f"grey{number}")
    assert gray is not None and gray % 0x010101 == 0


def test_gray_ramp_is_increasing_from_black_to_white():
    values = [lookup_color(f"gray{n}") for n in range(101)]
    assert values[0] == lookup_color("black")
    assert values[-1] == lookup_color("white")
    assert all(a < b for a, b in zip(values, values[1:]))


@pytest.mark.parametrize(
    "spaced, joined",
    [
        ("ghost white", "ghostwhite"),
        ("white smoke", "whitesmoke"),
        ("navy blue", "navyblue"),
        ("dark grey", "darkgray"),
        ("light gray", "lightgrey"),
        ("dim grey", "dimgray"),
    ],
)
def test_aliases_share_a_value(spaced, joined):
    assert lookup_color(spaced) == lookup_color(joined)


@pytest.mark.parametrize(
    "family", ["snow", "seashell", "blue", "red", "magenta", "thistle"]
)
def test_numbered_shades_darken(family):
    shades = [lookup_color(f"{family}{n}") for n in range(1, 5)]
    assert None not in shades
    assert all(0 <= value <= 0xFFFFFF for value in shades)
    assert len(set(shades)) == 4
    assert family + "5" and lookup_color(f"{family}5") is None


def test_first_shade_matches_base_where_the_table_says_so():
    assert lookup_color("snow1") == lookup_color("snow")
    assert lookup_color("blue1") == lookup_color("blue")
    assert lookup_color("red1") == lookup_color("red")
    assert lookup_color("antiquewhite1") == 0xFFEFDB
    assert lookup_color("antiquewhite") == 0xFAEBD7