"""Bitmap font I/O layer for gridfont.

This module decodes font sheet images with Pillow and slices them into
glyphs.

Key functions:
- load_bitmap: Decode an image file or stream
- parse_glyphs: Slice a decoded image into a glyph list
- load_bitmap_font: Build a BitmapFont from an image in one call
"""

from gridfont.io.loader import (
    load_bitmap,
    load_bitmap_font,
    load_bitmap_font_from_settings,
    parse_glyphs,
)
from gridfont.surface import ImageSurface, Surface

__all__ = [
    "ImageSurface",
    "Surface",
    "load_bitmap",
    "load_bitmap_font",
    "load_bitmap_font_from_settings",
    "parse_glyphs",
]
