import pytest

from solong.rgbnames import lookup_color


@pytest.mark.parametrize(
    "name, value",
    [
        ("white", 0xFFFFFF),
        ("black", 0x0),
        ("red", 0xFF0000),
        ("gray50", 0x7F7F7F),
        ("navy", 0x80),
        ("snow", 0xFFFAFA),
    ],
)
def test_known_names(name, value):
    assert lookup_color(name) == value


def test_none_means_transparent():
    assert lookup_color("none") == -1


def test_lookup_ignores_case():
    assert lookup_color("RED") == lookup_color("red")
    assert lookup_color("Ghost White") == lookup_color("ghost white")
    assert lookup_color("NONE") == -1


def test_unknown_name_gives_none():
    assert lookup_color("no such colour") is None
    assert lookup_color("") is None


def test_first_entry_wins_for_repeated_name():
    assert lookup_color("dark slate") == lookup_color("darkslategray")
    assert lookup_color("light slate") == lookup_color("lightslategray")
    assert lookup_color("light goldenrod") == lookup_color("lightgoldenrodyellow")


@pytest.mark.parametrize("level", range(101))
def test_gray_and_grey_agree(level):
    gray = lookup_color(f"gray{level}")
    grey = lookup_color(f"grey{level}")
    assert gray is not None
    assert gray == grey


def test_gray_levels_increase():
    values = [lookup_color(f"gray{level}") for level in range(101)]
    assert values == sorted(values)
    assert values[0] == lookup_color("black")
    assert values[-1] == lookup_color("white")


@pytest.mark.parametrize(
    "spaced, joined",
    [
        ("ghost white", "ghostwhite"),
        ("misty rose", "mistyrose"),
        ("dodger blue", "dodgerblue"),
        ("hot pink", "hotpink"),
        ("dark red", "darkred"),
    ],
)
def test_spaced_and_joined_names_agree(spaced, joined):
    assert lookup_color(spaced) == lookup_color(joined)


@pytest.mark.parametrize("base", ["snow", "bisque", "red", "gold", "tomato"])
def test_first_numbered_variant_matches_base(base):
    assert lookup_color(f"{base}1") == lookup_color(base)


def test_values_fit_in_24_bits():
    names = ["azure4", "thistle4", "maroon", "purple", "lightgreen", "gray100"]
    for name in names:
        value = lookup_color(name)
        assert 0 <= value <= 0xFFFFFF