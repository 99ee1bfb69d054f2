from rainbow_utils.colors import (
    COLORS, SCHEMES, color_title, describe_color, get_color, get_scheme, int_to_rgb, rgb_to_int,
)


def test_lookup_is_case_insensitive():
    assert get_color("Red") == (255, 0, 0)
    assert get_color("nope") is None
    assert get_scheme("PRIDE").name == "Pride Flag"
    assert get_scheme("nope") is None


def test_int_conversion():
    assert rgb_to_int((255, 0, 0)) == 0xFF0000
    assert rgb_to_int((0, 255, 191)) == 0x00FFBF
    assert int_to_rgb(0x5BCEFA) == (91, 206, 250)


def test_color_title():
    assert color_title("red") == "Red"
    assert color_title("bluegreen") == "Blue Green"


def test_describe_color():
    assert describe_color((255, 0, 0)) == "#FF0000 (Red)"
    assert describe_color((0, 255, 191)) == "#00FFBF (Blue Green)"
    assert describe_color((1, 2, 3)) == "#010203"


def test_tables_are_well_formed():
    for name, rgb in COLORS.items():
        assert name == name.lower()
        assert len(rgb) == 3 and all(0 <= part <= 255 for part in rgb)
    for key, scheme in SCHEMES.items():
        assert key == scheme.key
        assert key not in COLORS
        assert scheme.colors


def test_pride_scheme_order():
    assert SCHEMES["pride"].colors == (
        COLORS["red"], COLORS["orange"], COLORS["yellow"],
        COLORS["green"], COLORS["blue"], COLORS["purple"],
    )
