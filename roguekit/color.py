"""RGB and HSV colour triplets with conversion and arithmetic."""

from __future__ import annotations

import enum
import math
from dataclasses import dataclass

from roguekit.palette import named_color

_EPSILON = 1.1920928955078125e-07
_HEX_DIGITS = "0123456789abcdefABCDEF"


class ColorErrorKind(enum.Enum):
    """Why an HTML colour code could not be converted."""

    INVALID_STRING_LENGTH = "invalid string length"
    MISSING_HASH = "missing hash"
    INVALID_CHARACTER = "invalid character"


class HtmlColorConversionError(ValueError):
    """Raised when an HTML colour code cannot be parsed."""

    def __init__(self, kind: ColorErrorKind, code: str) -> None:
        super().__init__(f"cannot convert {code!r} to a colour: {kind.value}")
        self.kind = kind
        self.code = code


def _clamp(value: float) -> float:
    return min(1.0, max(0.0, value))


@dataclass(frozen=True)
class RGB:
    """A red/green/blue triplet, nominally in the range 0..1."""

    r: float = 0.0
    g: float = 0.0
    b: float = 0.0

    @classmethod
    def from_f32(cls, r: float, g: float, b: float) -> RGB:
        """Build a colour from floats, clamping each to 0..1."""
        return cls(_clamp(r), _clamp(g), _clamp(b))

    @classmethod
    def from_u8(cls, r: int, g: int, b: int) -> RGB:
        """Build a colour from bytes in the range 0..255."""
        for value in (r, g, b):
            if not 0 <= value <= 255:
                raise ValueError(f"colour byte out of range: {value}")
        return cls(r / 255.0, g / 255.0, b / 255.0)

    @classmethod
    def named(cls, col: tuple[int, int, int] | str) -> RGB:
        """Build a colour from an (r, g, b) byte triple or a palette name."""
        if isinstance(col, str):
            col = named_color(col)
        r, g, b = col
        return cls.from_u8(r, g, b)

    @classmethod
    def from_hex(cls, code: str) -> RGB:
        """Parse an HTML colour code such as ``"#eeffee"``."""
        chars = iter(code)
        first = next(chars, None)
        if first is None:
            raise HtmlColorConversionError(ColorErrorKind.INVALID_STRING_LENGTH, code)
        if first != "#":
            raise HtmlColorConversionError(ColorErrorKind.MISSING_HASH, code)

        digits = []
        for _ in range(6):
            ch = next(chars, None)
            if ch is None:
                raise HtmlColorConversionError(
                    ColorErrorKind.INVALID_STRING_LENGTH, code
                )
            if ch not in _HEX_DIGITS:
                raise HtmlColorConversionError(ColorErrorKind.INVALID_CHARACTER, code)
            digits.append(int(ch, 16))

        if next(chars, None) is not None:
            raise HtmlColorConversionError(ColorErrorKind.INVALID_STRING_LENGTH, code)

        red, green, blue = (
            digits[i] * 16 + digits[i + 1] for i in range(0, 6, 2)
        )
        return cls(red / 255.0, green / 255.0, blue / 255.0)

    def to_hsv(self) -> HSV:
        """Convert to hue/saturation/value."""
        r, g, b = self.r, self.g, self.b
        high = max(r, g, b)
        low = min(r, g, b)
        d = high - low

        s = 0.0 if high == 0.0 else d / high
        v = high

        if abs(d) < _EPSILON:
            h = 0.0
        else:
            h = high
            if abs(high - r) < _EPSILON:
                h = (g - b) / d + (6.0 if g < b else 0.0)
            elif abs(high - g) < _EPSILON:
                h = (b - r) / d + 2.0
            elif abs(high - b) < _EPSILON:
                h = (r - g) / d + 4.0
            h /= 6.0

        return HSV.from_f32(h, s, v)

    def to_greyscale(self) -> RGB:
        """Return a quick luminance-weighted grey version of this colour."""
        linear = self.r * 0.2126 + self.g * 0.7152 + self.b * 0.0722
        return RGB.from_f32(linear, linear, linear)

    def desaturate(self) -> RGB:
        """Return this colour with its HSV saturation removed."""
        hsv = self.to_hsv()
        return HSV(hsv.h, 0.0, hsv.v).to_rgb()

    def lerp(self, color: RGB, percent: float) -> RGB:
        """Interpolate between this colour and ``color`` by ``percent`` (0..1)."""
        return RGB(
            self.r + (color.r - self.r) * percent,
            self.g + (color.g - self.g) * percent,
            self.b + (color.b - self.b) * percent,
        )

    def _combine(self, other: object, op) -> RGB:
        if isinstance(other, RGB):
            return RGB(op(self.r, other.r), op(self.g, other.g), op(self.b, other.b))
        if isinstance(other, (int, float)) and not isinstance(other, bool):
            return RGB(op(self.r, other), op(self.g, other), op(self.b, other))
        return NotImplemented

    def __add__(self, other: RGB | float) -> RGB:
        return self._combine(other, lambda a, b: a + b)

    def __sub__(self, other: RGB | float) -> RGB:
        return self._combine(other, lambda a, b: a - b)

    def __mul__(self, other: RGB | float) -> RGB:
        return self._combine(other, lambda a, b: a * b)


@dataclass(frozen=True)
class HSV:
    """A hue/saturation/value triplet, nominally in the range 0..1."""

    h: float = 0.0
    s: float = 0.0
    v: float = 0.0

    @classmethod
    def from_f32(cls, h: float, s: float, v: float) -> HSV:
        """Build an HSV triplet from floats, without clamping."""
        return cls(h, s, v)

    def to_rgb(self) -> RGB:
        """Convert to an RGB colour."""
        h, s, v = self.h, self.s, self.v
        i = math.floor(h * 6.0)
        f = h * 6.0 - i
        p = v * (1.0 - s)
        q = v * (1.0 - f * s)
        t = v * (1.0 - (1.0 - f) * s)

        # Truncated remainder: a negative sector yields black.
        sector = int(math.fmod(i, 6))
        channels = {
            0: (v, t, p),
            1: (q, v, p),
            2: (p, v, t),
            3: (p, q, v),
            4: (t, p, v),
            5: (v, p, q),
        }.get(sector, (0.0, 0.0, 0.0))
        return RGB.from_f32(*channels)