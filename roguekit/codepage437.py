"""Conversion between Unicode characters and code page 437 glyph indices."""

from __future__ import annotations

from collections.abc import Iterable

# Glyphs for codes 1..254, in order; code 0 and 255 have no mapping.
_GLYPHS = (
    "☺☻♥♦♣♠•◘○◙♂♀♪♫☼"
    "►◄↕‼¶§▬↨↑↓→←∟↔▲▼"
    + "".join(chr(code) for code in range(32, 127))
    + "⌂"
    "ÇüéâäàåçêëèïîìÄÅ"
    "ÉæÆôöòûùÿÖÜ¢£¥₧ƒ"
    "áíóúñÑªº¿⌐¬½¼¡«»"
    "░▒▓│┤╡╢╖╕╣║╗╝╜╛┐"
    "└┴┬├─┼╞╟╚╔╩╦╠═╬╧"
    "╨╤╥╙╘╒╓╫╪┘┌█▄▌▐▀"
    "αßΓπΣσµτΦΘΩδ∞φε∩"
    "≡±≥≤⌠⌡÷≈°∙·√ⁿ²■"
)

_CODE_TO_CHAR: dict[int, str] = {
    code: glyph for code, glyph in enumerate(_GLYPHS, start=1)
}
_CHAR_TO_CODE: dict[str, int] = {
    glyph: code for code, glyph in _CODE_TO_CHAR.items()
}


def to_cp437(c: str) -> int:
    """Return the CP437 code for a single character, or 0 if it has none."""
    if len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    return _CHAR_TO_CODE.get(c, 0)


def to_char(code: int) -> str:
    """Return the Unicode character for a CP437 code, or a space if it has none."""
    return _CODE_TO_CHAR.get(code, " ")


def string_to_cp437(text: str | Iterable[str]) -> bytes:
    """Convert every character of a string to its CP437 code."""
    return bytes(to_cp437(c) for c in text)