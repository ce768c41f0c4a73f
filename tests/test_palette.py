import pytest

from roguekit.palette import color_names, named_color
from roguekit.palette_shades import shade, shade_names


def test_white_and_black():
    assert named_color("WHITE") == (255, 255, 255)
    assert named_color("BLACK") == (0, 0, 0)


def test_blue_pinned():
    assert named_color("BLUE") == (0, 0, 255)


def test_case_insensitive():
    assert named_color("cornflower_blue") == named_color("CORNFLOWER_BLUE")
    assert named_color("Teal") == named_color("TEAL")


@pytest.mark.parametrize(
    "first, second",
    [
        ("GRAY", "GREY"),
        ("CYAN", "AQUA"),
        ("MAGENTA", "FUCHSIA"),
        ("GREEN", "LIME"),
        ("DARK_GREY", "DARKGRAY"),
        ("REBECCA_PURPLE", "REBECCAPURPLE"),
    ],
)
def test_aliases_match(first, second):
    assert named_color(first) == named_color(second)


def test_shades_resolve_through_named_color():
    for name in shade_names():
        assert named_color(name) == shade(name)


def test_unknown_name_raises():
    with pytest.raises(KeyError):
        named_color("NOT_A_COLOUR")


def test_every_name_resolves_to_bytes():
    for name in color_names():
        color = named_color(name)
        assert len(color) == 3
        assert all(0 <= channel <= 255 for channel in color)


def test_names_are_unique_and_include_shades():
    names = color_names()
    assert len(names) == len(set(names))
    assert set(shade_names()) <= set(names)
    assert "WHITE" in names
    assert names.index("WHITE") < names.index(shade_names()[0])