"""Numbered X11 colour shades (``SNOW1``..``THISTLE4``, ``GRAY0``..``GREY100``)."""

from __future__ import annotations

Color = tuple[int, int, int]

# Each family has four shades, from brightest (1) to darkest (4).
_FAMILIES: dict[str, tuple[Color, Color, Color, Color]] = {
    "SNOW": ((255, 250, 250), (238, 233, 233), (205, 201, 201), (139, 137, 137)),
    "SEASHELL": ((255, 245, 238), (238, 229, 222), (205, 197, 191), (139, 134, 130)),
    "ANTIQUEWHITE": ((255, 239, 219), (238, 223, 204), (205, 192, 176), (139, 131, 120)),
    "BISQUE": ((255, 228, 196), (238, 213, 183), (205, 183, 158), (139, 125, 107)),
    "PEACHPUFF": ((255, 218, 185), (238, 203, 173), (205, 175, 149), (139, 119, 101)),
    "NAVAJOWHITE": ((255, 222, 173), (238, 207, 161), (205, 179, 139), (139, 121, 94)),
    "LEMONCHIFFON": ((255, 250, 205), (238, 233, 191), (205, 201, 165), (139, 137, 112)),
    "CORNSILK": ((255, 248, 220), (238, 232, 205), (205, 200, 177), (139, 136, 120)),
    "IVORY": ((255, 255, 240), (238, 238, 224), (205, 205, 193), (139, 139, 131)),
    "HONEYDEW": ((240, 255, 240), (224, 238, 224), (193, 205, 193), (131, 139, 131)),
    "LAVENDERBLUSH": ((255, 240, 245), (238, 224, 229), (205, 193, 197), (139, 131, 134)),
    "MISTYROSE": ((255, 228, 225), (238, 213, 210), (205, 183, 181), (139, 125, 123)),
    "AZURE": ((240, 255, 255), (224, 238, 238), (193, 205, 205), (131, 139, 139)),
    "SLATEBLUE": ((131, 111, 255), (122, 103, 238), (105, 89, 205), (71, 60, 139)),
    "ROYALBLUE": ((72, 118, 255), (67, 110, 238), (58, 95, 205), (39, 64, 139)),
    "BLUE": ((0, 0, 255), (0, 0, 238), (0, 0, 205), (0, 0, 139)),
    "DODGERBLUE": ((30, 144, 255), (28, 134, 238), (24, 116, 205), (16, 78, 139)),
    "STEELBLUE": ((99, 184, 255), (92, 172, 238), (79, 148, 205), (54, 100, 139)),
    "DEEPSKYBLUE": ((0, 191, 255), (0, 178, 238), (0, 154, 205), (0, 104, 139)),
    "SKYBLUE": ((135, 206, 255), (126, 192, 238), (108, 166, 205), (74, 112, 139)),
    "LIGHTSKYBLUE": ((176, 226, 255), (164, 211, 238), (141, 182, 205), (96, 123, 139)),
    "SLATEGRAY": ((198, 226, 255), (185, 211, 238), (159, 182, 205), (108, 123, 139)),
    "LIGHTSTEELBLUE": ((202, 225, 255), (188, 210, 238), (162, 181, 205), (110, 123, 139)),
    "LIGHTBLUE": ((191, 239, 255), (178, 223, 238), (154, 192, 205), (104, 131, 139)),
    "LIGHTCYAN": ((224, 255, 255), (209, 238, 238), (180, 205, 205), (122, 139, 139)),
    "PALETURQUOISE": ((187, 255, 255), (174, 238, 238), (150, 205, 205), (102, 139, 139)),
    "CADETBLUE": ((152, 245, 255), (142, 229, 238), (122, 197, 205), (83, 134, 139)),
    "TURQUOISE": ((0, 245, 255), (0, 229, 238), (0, 197, 205), (0, 134, 139)),
    "CYAN": ((0, 255, 255), (0, 238, 238), (0, 205, 205), (0, 139, 139)),
    "DARKSLATEGRAY": ((151, 255, 255), (141, 238, 238), (121, 205, 205), (82, 139, 139)),
    "AQUAMARINE": ((127, 255, 212), (118, 238, 198), (102, 205, 170), (69, 139, 116)),
    "DARKSEAGREEN": ((193, 255, 193), (180, 238, 180), (155, 205, 155), (105, 139, 105)),
    "SEAGREEN": ((84, 255, 159), (78, 238, 148), (67, 205, 128), (46, 139, 87)),
    "PALEGREEN": ((154, 255, 154), (144, 238, 144), (124, 205, 124), (84, 139, 84)),
    "SPRINGGREEN": ((0, 255, 127), (0, 238, 118), (0, 205, 102), (0, 139, 69)),
    "GREEN": ((0, 255, 0), (0, 238, 0), (0, 205, 0), (0, 139, 0)),
    "CHARTREUSE": ((127, 255, 0), (118, 238, 0), (102, 205, 0), (69, 139, 0)),
    "OLIVEDRAB": ((192, 255, 62), (179, 238, 58), (154, 205, 50), (105, 139, 34)),
    "DARKOLIVEGREEN": ((202, 255, 112), (188, 238, 104), (162, 205, 90), (110, 139, 61)),
    "KHAKI": ((255, 246, 143), (238, 230, 133), (205, 198, 115), (139, 134, 78)),
    "LIGHTGOLDENROD": ((255, 236, 139), (238, 220, 130), (205, 190, 112), (139, 129, 76)),
    "LIGHTYELLOW": ((255, 255, 224), (238, 238, 209), (205, 205, 180), (139, 139, 122)),
    "YELLOW": ((255, 255, 0), (238, 238, 0), (205, 205, 0), (139, 139, 0)),
    "GOLD": ((255, 215, 0), (238, 201, 0), (205, 173, 0), (139, 117, 0)),
    "GOLDENROD": ((255, 193, 37), (238, 180, 34), (205, 155, 29), (139, 105, 20)),
    "DARKGOLDENROD": ((255, 185, 15), (238, 173, 14), (205, 149, 12), (139, 101, 8)),
    "ROSYBROWN": ((255, 193, 193), (238, 180, 180), (205, 155, 155), (139, 105, 105)),
    "INDIANRED": ((255, 106, 106), (238, 99, 99), (205, 85, 85), (139, 58, 58)),
    "SIENNA": ((255, 130, 71), (238, 121, 66), (205, 104, 57), (139, 71, 38)),
    "BURLYWOOD": ((255, 211, 155), (238, 197, 145), (205, 170, 125), (139, 115, 85)),
    "WHEAT": ((255, 231, 186), (238, 216, 174), (205, 186, 150), (139, 126, 102)),
    "TAN": ((255, 165, 79), (238, 154, 73), (205, 133, 63), (139, 90, 43)),
    "CHOCOLATE": ((255, 127, 36), (238, 118, 33), (205, 102, 29), (139, 69, 19)),
    "FIREBRICK": ((255, 48, 48), (238, 44, 44), (205, 38, 38), (139, 26, 26)),
    "BROWN": ((255, 64, 64), (238, 59, 59), (205, 51, 51), (139, 35, 35)),
    "SALMON": ((255, 140, 105), (238, 130, 98), (205, 112, 84), (139, 76, 57)),
    "LIGHTSALMON": ((255, 160, 122), (238, 149, 114), (205, 129, 98), (139, 87, 66)),
    "ORANGE": ((255, 165, 0), (238, 154, 0), (205, 133, 0), (139, 90, 0)),
    "DARKORANGE": ((255, 127, 0), (238, 118, 0), (205, 102, 0), (139, 69, 0)),
    "CORAL": ((255, 114, 86), (238, 106, 80), (205, 91, 69), (139, 62, 47)),
    "TOMATO": ((255, 99, 71), (238, 92, 66), (205, 79, 57), (139, 54, 38)),
    "ORANGERED": ((255, 69, 0), (238, 64, 0), (205, 55, 0), (139, 37, 0)),
    "RED": ((255, 0, 0), (238, 0, 0), (205, 0, 0), (139, 0, 0)),
    "DEEPPINK": ((255, 20, 147), (238, 18, 137), (205, 16, 118), (139, 10, 80)),
    "HOTPINK": ((255, 110, 180), (238, 106, 167), (205, 96, 144), (139, 58, 98)),
    "PINK": ((255, 181, 197), (238, 169, 184), (205, 145, 158), (139, 99, 108)),
    "LIGHTPINK": ((255, 174, 185), (238, 162, 173), (205, 140, 149), (139, 95, 101)),
    "PALEVIOLETRED": ((255, 130, 171), (238, 121, 159), (205, 104, 137), (139, 71, 93)),
    "MAROON": ((255, 52, 179), (238, 48, 167), (205, 41, 144), (139, 28, 98)),
    "VIOLETRED": ((255, 62, 150), (238, 58, 140), (205, 50, 120), (139, 34, 82)),
    "MAGENTA": ((255, 0, 255), (238, 0, 238), (205, 0, 205), (139, 0, 139)),
    "ORCHID": ((255, 131, 250), (238, 122, 233), (205, 105, 201), (139, 71, 137)),
    "PLUM": ((255, 187, 255), (238, 174, 238), (205, 150, 205), (139, 102, 139)),
    "MEDIUMORCHID": ((224, 102, 255), (209, 95, 238), (180, 82, 205), (122, 55, 139)),
    "DARKORCHID": ((191, 62, 255), (178, 58, 238), (154, 50, 205), (104, 34, 139)),
    "PURPLE": ((155, 48, 255), (145, 44, 238), (125, 38, 205), (85, 26, 139)),
    "MEDIUMPURPLE": ((171, 130, 255), (159, 121, 238), (137, 104, 205), (93, 71, 139)),
    "THISTLE": ((255, 225, 255), (238, 210, 238), (205, 181, 205), (139, 123, 139)),
}

# Grey intensity for GRAY0..GRAY100 (and the GREY spellings).
_GREY_LEVELS: tuple[int, ...] = (
    0, 3, 5, 8, 10, 13, 15, 18, 20, 23,
    26, 28, 31, 33, 36, 38, 41, 43, 46, 48,
    51, 54, 56, 59, 61, 64, 66, 69, 71, 74,
    77, 79, 82, 84, 87, 89, 92, 94, 97, 99,
    102, 105, 107, 110, 112, 115, 117, 120, 122, 125,
    127, 130, 133, 135, 138, 140, 143, 145, 148, 150,
    153, 156, 158, 161, 163, 166, 168, 171, 173, 176,
    179, 181, 184, 186, 189, 191, 194, 196, 199, 201,
    204, 207, 209, 212, 214, 217, 219, 222, 224, 227,
    229, 232, 235, 237, 240, 242, 245, 247, 250, 252,
    255,
)


def _build() -> dict[str, Color]:
    shades: dict[str, Color] = {}
    for family, variants in _FAMILIES.items():
        for number, color in enumerate(variants, start=1):
            shades[f"{family}{number}"] = color
    for number, level in enumerate(_GREY_LEVELS):
        shades[f"GRAY{number}"] = (level, level, level)
        shades[f"GREY{number}"] = (level, level, level)
    return shades


_SHADES: dict[str, Color] = _build()


def shade(name: str) -> Color:
    """Return the (r, g, b) bytes of a numbered shade; names are case-insensitive.

    Raises KeyError if there is no shade of that name.
    """
    try:
        return _SHADES[name.upper()]
    except KeyError:
        raise KeyError(f"unknown colour shade: {name!r}") from None


def shade_names() -> tuple[str, ...]:
    """Return every shade name, in definition order."""
    return tuple(_SHADES)