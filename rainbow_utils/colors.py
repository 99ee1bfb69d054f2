"""Static color and color-set tables used by rainbow roles.

Colors are stored as ``(r, g, b)`` triples. Sets ("schemes") are named,
ordered lists of colors that can stand in for a list of colors in a role
name, e.g. ``rainbow-pride``.
"""
from typing import Dict, List, NamedTuple, Optional, Tuple

RGB = Tuple[int, int, int]


class Scheme(NamedTuple):
    key: str          # token used inside role names
    name: str         # display name
    colors: Tuple[RGB, ...]


# Keys are lowercase tokens; insertion order is the display order.
COLORS: Dict[str, RGB] = {
    "red": (255, 0, 0),
    "darkred": (139, 0, 0),
    "orange": (255, 127, 0),
    "darkorange": (255, 69, 0),
    "yellow": (255, 255, 0),
    "gold": (255, 215, 0),
    "lime": (127, 255, 0),
    "green": (0, 255, 0),
    "darkgreen": (0, 100, 0),
    "bluegreen": (0, 255, 191),
    "cyan": (0, 255, 255),
    "lightblue": (91, 206, 250),
    "blue": (0, 0, 255),
    "darkblue": (0, 0, 139),
    "indigo": (75, 0, 130),
    "purple": (139, 0, 255),
    "magenta": (255, 0, 255),
    "pink": (245, 169, 184),
    "hotpink": (255, 105, 180),
    "white": (255, 255, 255),
    "gray": (128, 128, 128),
}

# Display titles for color keys that are not a single word.
COLOR_TITLES: Dict[str, str] = {
    "darkred": "Dark Red",
    "darkorange": "Dark Orange",
    "darkgreen": "Dark Green",
    "bluegreen": "Blue Green",
    "lightblue": "Light Blue",
    "darkblue": "Dark Blue",
    "hotpink": "Hot Pink",
}

SCHEMES: Dict[str, Scheme] = {
    scheme.key: scheme for scheme in (
        Scheme("pride", "Pride Flag", (
            COLORS["red"], COLORS["orange"], COLORS["yellow"],
            COLORS["green"], COLORS["blue"], COLORS["purple"],
        )),
        Scheme("trans", "Trans Flag", (
            COLORS["lightblue"], COLORS["pink"], COLORS["white"], COLORS["pink"],
        )),
        Scheme("orangetored", "Orange to Red", (
            COLORS["orange"], COLORS["darkorange"], COLORS["red"], COLORS["darkorange"],
        )),
        Scheme("ocean", "Ocean Breeze", (
            (0, 255, 255), (127, 255, 212), (64, 224, 208), (32, 178, 170), (0, 128, 128),
        )),
        Scheme("forest", "Forest Whisper", (
            (34, 139, 34), (0, 100, 0), (144, 238, 144), (60, 179, 113), (85, 107, 47),
        )),
        Scheme("fireandice", "Fire and Ice", (
            (255, 69, 0), (255, 140, 0), (255, 255, 0), (0, 255, 255), (30, 144, 255),
        )),
    )
}


def get_color(name: str) -> Optional[RGB]:
    return COLORS.get(name.lower())


def get_scheme(key: str) -> Optional[Scheme]:
    return SCHEMES.get(key.lower())


def rgb_to_int(rgb: RGB) -> int:
    r, g, b = rgb
    return (r << 16) | (g << 8) | b


def int_to_rgb(value: int) -> RGB:
    return ((value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF)


def color_title(name: str) -> str:
    key = name.lower()
    return COLOR_TITLES.get(key, key.capitalize())


def color_name_for(rgb: RGB) -> Optional[str]:
    """Returns the first color key whose value is ``rgb``, if any."""
    for name, value in COLORS.items():
        if value == tuple(rgb):
            return name
    return None


def describe_color(rgb: RGB) -> str:
    """Human readable description, e.g. ``#FF0000 (Red)``."""
    hex_code = f"#{rgb_to_int(rgb):06X}"
    name = color_name_for(rgb)
    if name:
        return f"{hex_code} ({color_title(name)})"
    return hex_code


def all_tokens() -> List[str]:
    """Every token accepted in a role name, colors and scheme keys alike."""
    return list(COLORS.keys()) + list(SCHEMES.keys())
