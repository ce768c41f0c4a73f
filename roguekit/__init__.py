"""Colours, named palettes, code page 437 glyphs and an embedded resource registry."""

__version__ = "0.1.0"

__all__ = ["codepage437", "color", "embedding", "palette", "palette_shades"]