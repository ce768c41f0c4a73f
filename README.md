# roguekit

Building blocks for roguelike games: RGB and HSV colours, a palette of
named X11 and web colours, code page 437 glyph conversion, and a small
thread-safe registry of embedded resources. It uses only the standard
library.

## Installing

```
pip install roguekit
```

## Colours

`roguekit.color.RGB` is a frozen dataclass holding red, green and blue as
floats, nominally from 0 to 1. `HSV` holds hue, saturation and value in the
same way.

```python
from roguekit.color import RGB, HSV, HtmlColorConversionError

cyan = RGB.named("cyan")              # a palette name, case-insensitive
yellow = RGB.named((255, 255, 0))     # or an (r, g, b) byte triple
halfway = cyan.lerp(yellow, 0.5)

red = RGB.from_f32(1.0, 0.0, 0.0)
hsv = red.to_hsv()                    # HSV(h=0.0, s=1.0, v=1.0)
back = hsv.to_rgb()

grey = yellow.to_greyscale()          # luminance-weighted grey
flat = yellow.desaturate()            # saturation removed via HSV

dimmer = yellow * 0.3
mixed = red + RGB.from_f32(0.0, 0.5, 0.0)
darker = yellow - 0.2

green = RGB.from_hex("#00FF00")
try:
    RGB.from_hex("00FF00")
except HtmlColorConversionError as err:
    print(err.kind)                   # ColorErrorKind.MISSING_HASH
```

- `RGB.from_f32(r, g, b)` clamps each channel to 0..1.
- `RGB.from_u8(r, g, b)` takes bytes and raises `ValueError` for a value
  outside 0..255.
- `RGB.from_hex(code)` takes exactly `#` followed by six hex digits. On
  failure it raises `HtmlColorConversionError` (a `ValueError`) whose `kind`
  is a `ColorErrorKind`: `MISSING_HASH`, `INVALID_CHARACTER` or
  `INVALID_STRING_LENGTH`, and whose `code` is the string given.
- `+`, `-` and `*` take another `RGB` (channel by channel) or a number
  (applied to every channel). Neither they nor `lerp` clamp the result.
- `HSV.from_f32(h, s, v)` does not clamp; `HSV.to_rgb()` clamps its result.

## Named colours

```python
from roguekit.palette import named_color, color_names
from roguekit.palette_shades import shade, shade_names

named_color("dark_olive")     # (85, 107, 47)
named_color("gold3")          # (205, 173, 0), a numbered shade
shade("GRAY50")               # (127, 127, 127)
```

`named_color` looks a name up among the X11 and web colours and then among
the numbered shades; `shade` looks only at the numbered shades (`SNOW1` to
`THISTLE4`, `GRAY0` to `GRAY100` and the `GREY` spellings). Both ignore case
and raise `KeyError` for an unknown name. `color_names()` returns every
name, plain names first and then the shades; `shade_names()` returns just
the shades.

## Code page 437

```python
from roguekit.codepage437 import to_cp437, to_char, string_to_cp437

to_cp437("☺")                  # 1
to_char(219)                    # "█"
string_to_cp437("Hello")        # b"Hello"
string_to_cp437("½Ñ░")          # bytes([171, 165, 176])
```

A character with no code page 437 equivalent becomes 0, and a code with no
character (0, 255 or anything out of range) becomes a space. `to_cp437`
raises `ValueError` unless it is given exactly one character.

## Embedded resources

```python
from roguekit.embedding import EMBED, ResourceDictionary

resources = ResourceDictionary({"resources/tiles.png": b"..."})
resources.add_resource("resources/map.xp", b"...")
data = resources.get_resource("resources/map.xp")   # bytes, or None if missing
"resources/map.xp" in resources                      # True
len(resources)                                       # 2
```

`EMBED` is a process-wide `ResourceDictionary`. It starts empty; register
whatever your program needs in it.

## What this package does not do

It has no window, console or rendering: nothing draws glyphs or colours to
a screen, and there is no game loop or input handling. It ships no font
images or other resource files, and it does not read or write REX Paint
(`.xp`) files.

## Running the tests

```
pip install -e ".[test]"
pytest
```