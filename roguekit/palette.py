"""Named colours from the X11/HTML/SVG palette, as (r, g, b) byte triples."""

from __future__ import annotations

from roguekit.palette_shades import Color, shade, shade_names

_NAMED: dict[str, Color] = {
    "SNOW": (255, 250, 250),
    "GHOST_WHITE": (248, 248, 255),
    "GHOSTWHITE": (248, 248, 255),
    "WHITE_SMOKE": (245, 245, 245),
    "WHITESMOKE": (245, 245, 245),
    "GAINSBORO": (220, 220, 220),
    "FLORAL_WHITE": (255, 250, 240),
    "FLORALWHITE": (255, 250, 240),
    "OLD_LACE": (253, 245, 230),
    "OLDLACE": (253, 245, 230),
    "LINEN": (250, 240, 230),
    "ANTIQUE_WHITE": (250, 235, 215),
    "ANTIQUEWHITE": (250, 235, 215),
    "PAPAYA_WHIP": (255, 239, 213),
    "PAPAYAWHIP": (255, 239, 213),
    "BLANCHED_ALMOND": (255, 235, 205),
    "BLANCHEDALMOND": (255, 235, 205),
    "BISQUE": (255, 228, 196),
    "PEACH_PUFF": (255, 218, 185),
    "PEACHPUFF": (255, 218, 185),
    "NAVAJO_WHITE": (255, 222, 173),
    "NAVAJOWHITE": (255, 222, 173),
    "MOCCASIN": (255, 228, 181),
    "CORNSILK": (255, 248, 220),
    "IVORY": (255, 255, 240),
    "LEMON_CHIFFON": (255, 250, 205),
    "LEMONCHIFFON": (255, 250, 205),
    "SEASHELL": (255, 245, 238),
    "HONEYDEW": (240, 255, 240),
    "MINT_CREAM": (245, 255, 250),
    "MINTCREAM": (245, 255, 250),
    "AZURE": (240, 255, 255),
    "ALICE_BLUE": (240, 248, 255),
    "ALICEBLUE": (240, 248, 255),
    "LAVENDER": (230, 230, 250),
    "LAVENDER_BLUSH": (255, 240, 245),
    "LAVENDERBLUSH": (255, 240, 245),
    "MISTY_ROSE": (255, 228, 225),
    "MISTYROSE": (255, 228, 225),
    "WHITE": (255, 255, 255),
    "BLACK": (0, 0, 0),
    "DARK_SLATE": (47, 79, 79),
    "DARKSLATEGRAY": (47, 79, 79),
    "DARKSLATEGREY": (47, 79, 79),
    "DIM_GRAY": (105, 105, 105),
    "DIMGRAY": (105, 105, 105),
    "DIM_GREY": (105, 105, 105),
    "DIMGREY": (105, 105, 105),
    "SLATE_GRAY": (112, 128, 144),
    "SLATEGRAY": (112, 128, 144),
    "SLATE_GREY": (112, 128, 144),
    "SLATEGREY": (112, 128, 144),
    "LIGHT_SLATE": (119, 136, 153),
    "LIGHTSLATEGRAY": (119, 136, 153),
    "LIGHTSLATEGREY": (119, 136, 153),
    "GRAY": (190, 190, 190),
    "GREY": (190, 190, 190),
    "X11_GRAY": (190, 190, 190),
    "X11GRAY": (190, 190, 190),
    "X11_GREY": (190, 190, 190),
    "X11GREY": (190, 190, 190),
    "WEB_GRAY": (128, 128, 128),
    "WEBGRAY": (128, 128, 128),
    "WEB_GREY": (128, 128, 128),
    "WEBGREY": (128, 128, 128),
    "LIGHT_GREY": (211, 211, 211),
    "LIGHTGREY": (211, 211, 211),
    "LIGHT_GRAY": (211, 211, 211),
    "LIGHTGRAY": (211, 211, 211),
    "MIDNIGHT_BLUE": (25, 25, 112),
    "MIDNIGHTBLUE": (25, 25, 112),
    "NAVY": (0, 0, 128),
    "NAVY_BLUE": (0, 0, 128),
    "NAVYBLUE": (0, 0, 128),
    "CORNFLOWER_BLUE": (100, 149, 237),
    "CORNFLOWERBLUE": (100, 149, 237),
    "DARKSLATEBLUE": (72, 61, 139),
    "SLATE_BLUE": (106, 90, 205),
    "SLATEBLUE": (106, 90, 205),
    "MEDIUM_SLATE": (123, 104, 238),
    "MEDIUMSLATEBLUE": (123, 104, 238),
    "LIGHTSLATEBLUE": (132, 112, 255),
    "MEDIUM_BLUE": (0, 0, 205),
    "MEDIUMBLUE": (0, 0, 205),
    "ROYAL_BLUE": (65, 105, 225),
    "ROYALBLUE": (65, 105, 225),
    "BLUE": (0, 0, 255),
    "DODGER_BLUE": (30, 144, 255),
    "DODGERBLUE": (30, 144, 255),
    "DEEP_SKY": (0, 191, 255),
    "DEEPSKYBLUE": (0, 191, 255),
    "SKY_BLUE": (135, 206, 235),
    "SKYBLUE": (135, 206, 235),
    "LIGHT_SKY": (135, 206, 250),
    "LIGHTSKYBLUE": (135, 206, 250),
    "STEEL_BLUE": (70, 130, 180),
    "STEELBLUE": (70, 130, 180),
    "LIGHT_STEEL": (176, 196, 222),
    "LIGHTSTEELBLUE": (176, 196, 222),
    "LIGHT_BLUE": (173, 216, 230),
    "LIGHTBLUE": (173, 216, 230),
    "POWDER_BLUE": (176, 224, 230),
    "POWDERBLUE": (176, 224, 230),
    "PALE_TURQUOISE": (175, 238, 238),
    "PALETURQUOISE": (175, 238, 238),
    "DARK_TURQUOISE": (0, 206, 209),
    "DARKTURQUOISE": (0, 206, 209),
    "MEDIUM_TURQUOISE": (72, 209, 204),
    "MEDIUMTURQUOISE": (72, 209, 204),
    "TURQUOISE": (64, 224, 208),
    "CYAN": (0, 255, 255),
    "AQUA": (0, 255, 255),
    "LIGHT_CYAN": (224, 255, 255),
    "LIGHTCYAN": (224, 255, 255),
    "CADET_BLUE": (95, 158, 160),
    "CADETBLUE": (95, 158, 160),
    "MEDIUM_AQUAMARINE": (102, 205, 170),
    "MEDIUMAQUAMARINE": (102, 205, 170),
    "AQUAMARINE": (127, 255, 212),
    "DARK_GREEN": (0, 100, 0),
    "DARKGREEN": (0, 100, 0),
    "DARK_OLIVE": (85, 107, 47),
    "DARKOLIVEGREEN": (85, 107, 47),
    "DARK_SEA": (143, 188, 143),
    "DARKSEAGREEN": (143, 188, 143),
    "SEA_GREEN": (46, 139, 87),
    "SEAGREEN": (46, 139, 87),
    "MEDIUM_SEA": (60, 179, 113),
    "MEDIUMSEAGREEN": (60, 179, 113),
    "LIGHT_SEA": (32, 178, 170),
    "LIGHTSEAGREEN": (32, 178, 170),
    "PALE_GREEN": (152, 251, 152),
    "PALEGREEN": (152, 251, 152),
    "SPRING_GREEN": (0, 255, 127),
    "SPRINGGREEN": (0, 255, 127),
    "LAWN_GREEN": (124, 252, 0),
    "LAWNGREEN": (124, 252, 0),
    "GREEN": (0, 255, 0),
    "LIME": (0, 255, 0),
    "X11_GREEN": (0, 255, 0),
    "X11GREEN": (0, 255, 0),
    "WEB_GREEN": (0, 128, 0),
    "WEBGREEN": (0, 128, 0),
    "CHARTREUSE": (127, 255, 0),
    "MEDIUM_SPRING": (0, 250, 154),
    "MEDIUMSPRINGGREEN": (0, 250, 154),
    "GREEN_YELLOW": (173, 255, 47),
    "GREENYELLOW": (173, 255, 47),
    "LIME_GREEN": (50, 205, 50),
    "LIMEGREEN": (50, 205, 50),
    "YELLOW_GREEN": (154, 205, 50),
    "YELLOWGREEN": (154, 205, 50),
    "FOREST_GREEN": (34, 139, 34),
    "FORESTGREEN": (34, 139, 34),
    "OLIVE_DRAB": (107, 142, 35),
    "OLIVEDRAB": (107, 142, 35),
    "DARK_KHAKI": (189, 183, 107),
    "DARKKHAKI": (189, 183, 107),
    "KHAKI": (240, 230, 140),
    "PALE_GOLDENROD": (238, 232, 170),
    "PALEGOLDENROD": (238, 232, 170),
    "LIGHT_GOLDENROD": (250, 250, 210),
    "LIGHTGOLDENRODYELLOW": (250, 250, 210),
    "LIGHT_YELLOW": (255, 255, 224),
    "LIGHTYELLOW": (255, 255, 224),
    "YELLOW": (255, 255, 0),
    "GOLD": (255, 215, 0),
    "LIGHTGOLDENROD": (238, 221, 130),
    "GOLDENROD": (218, 165, 32),
    "DARK_GOLDENROD": (184, 134, 11),
    "DARKGOLDENROD": (184, 134, 11),
    "ROSY_BROWN": (188, 143, 143),
    "ROSYBROWN": (188, 143, 143),
    "INDIAN_RED": (205, 92, 92),
    "INDIANRED": (205, 92, 92),
    "SADDLE_BROWN": (139, 69, 19),
    "SADDLEBROWN": (139, 69, 19),
    "SIENNA": (160, 82, 45),
    "PERU": (205, 133, 63),
    "BURLYWOOD": (222, 184, 135),
    "BEIGE": (245, 245, 220),
    "WHEAT": (245, 222, 179),
    "SANDY_BROWN": (244, 164, 96),
    "SANDYBROWN": (244, 164, 96),
    "TAN": (210, 180, 140),
    "CHOCOLATE": (210, 105, 30),
    "FIREBRICK_34": (178, 34, 34),
    "BROWN_42": (165, 42, 42),
    "DARK_SALMON": (233, 150, 122),
    "DARKSALMON": (233, 150, 122),
    "SALMON": (250, 128, 114),
    "LIGHT_SALMON": (255, 160, 122),
    "LIGHTSALMON": (255, 160, 122),
    "ORANGE": (255, 165, 0),
    "DARK_ORANGE": (255, 140, 0),
    "DARKORANGE": (255, 140, 0),
    "CORAL": (255, 127, 80),
    "LIGHT_CORAL": (240, 128, 128),
    "LIGHTCORAL": (240, 128, 128),
    "TOMATO": (255, 99, 71),
    "ORANGE_RED": (255, 69, 0),
    "ORANGERED": (255, 69, 0),
    "RED": (255, 0, 0),
    "HOT_PINK": (255, 105, 180),
    "HOTPINK": (255, 105, 180),
    "DEEP_PINK": (255, 20, 147),
    "DEEPPINK": (255, 20, 147),
    "PINK": (255, 192, 203),
    "LIGHT_PINK": (255, 182, 193),
    "LIGHTPINK": (255, 182, 193),
    "PALE_VIOLET": (219, 112, 147),
    "PALEVIOLETRED": (219, 112, 147),
    "MAROON": (176, 48, 96),
    "X11_MAROON": (176, 48, 96),
    "X11MAROON": (176, 48, 96),
    "WEB_MAROON": (128, 0, 0),
    "WEBMAROON": (128, 0, 0),
    "MEDIUM_VIOLET": (199, 21, 133),
    "MEDIUMVIOLETRED": (199, 21, 133),
    "VIOLET_RED": (208, 32, 144),
    "VIOLETRED": (208, 32, 144),
    "MAGENTA": (255, 0, 255),
    "FUCHSIA": (255, 0, 255),
    "VIOLET": (238, 130, 238),
    "PLUM": (221, 160, 221),
    "ORCHID": (218, 112, 214),
    "MEDIUM_ORCHID": (186, 85, 211),
    "MEDIUMORCHID": (186, 85, 211),
    "DARK_ORCHID": (153, 50, 204),
    "DARKORCHID": (153, 50, 204),
    "DARK_VIOLET": (148, 0, 211),
    "DARKVIOLET": (148, 0, 211),
    "BLUE_VIOLET": (138, 43, 226),
    "BLUEVIOLET": (138, 43, 226),
    "PURPLE": (160, 32, 240),
    "X11_PURPLE": (160, 32, 240),
    "X11PURPLE": (160, 32, 240),
    "WEB_PURPLE": (128, 0, 128),
    "WEBPURPLE": (128, 0, 128),
    "MEDIUM_PURPLE": (147, 112, 219),
    "MEDIUMPURPLE": (147, 112, 219),
    "THISTLE": (216, 191, 216),
    "DARK_GREY": (169, 169, 169),
    "DARKGREY": (169, 169, 169),
    "DARK_GRAY": (169, 169, 169),
    "DARKGRAY": (169, 169, 169),
    "DARK_BLUE": (0, 0, 139),
    "DARKBLUE": (0, 0, 139),
    "DARK_CYAN": (0, 139, 139),
    "DARKCYAN": (0, 139, 139),
    "DARK_MAGENTA": (139, 0, 139),
    "DARKMAGENTA": (139, 0, 139),
    "DARK_RED": (139, 0, 0),
    "DARKRED": (139, 0, 0),
    "LIGHT_GREEN": (144, 238, 144),
    "LIGHTGREEN": (144, 238, 144),
    "CRIMSON": (220, 20, 60),
    "INDIGO": (75, 0, 130),
    "OLIVE": (128, 128, 0),
    "REBECCA_PURPLE": (102, 51, 153),
    "REBECCAPURPLE": (102, 51, 153),
    "SILVER": (192, 192, 192),
    "TEAL": (0, 128, 128),
}


def named_color(name: str) -> Color:
    """Return the (r, g, b) bytes of a named colour or numbered shade.

    Names are case-insensitive; raises KeyError for an unknown name.
    """
    key = name.upper()
    found = _NAMED.get(key)
    if found is not None:
        return found
    try:
        return shade(key)
    except KeyError:
        raise KeyError(f"unknown colour: {name!r}") from None


def color_names() -> tuple[str, ...]:
    """Return every colour name: the plain names first, then the numbered shades."""
    return tuple(_NAMED) + shade_names()