"""Gridfont - Bitmap fonts sliced from a grid of fixed-size character cells.

Gridfont loads a single image laid out as a grid of equally sized cells,
turns every cell into a glyph and exposes the result as a bitmap font that
can be rescaled and drawn as text onto a Pillow image.

Example:
    >>> from gridfont import load_bitmap_font
    >>> font = load_bitmap_font("terminal", "terminal-8x12.png", 8, 12)
    >>> font.rescale(2.0)
    >>> image = font.render("Hello\\nWorld")

Glyph index 0 is a transparent placeholder; the first cell of the sheet is
character code 1, the second code 2, and so on in row-major order.
"""

import logging

from gridfont.domain import BitmapFont, Glyph, GlyphPlacement, placeholder_glyph
from gridfont.io import (
    ImageSurface,
    Surface,
    load_bitmap,
    load_bitmap_font,
    load_bitmap_font_from_settings,
    parse_glyphs,
)

__version__ = "0.1.0"

logging.getLogger("gridfont").addHandler(logging.NullHandler())

__all__ = [
    "BitmapFont",
    "Glyph",
    "GlyphPlacement",
    "ImageSurface",
    "Surface",
    "__version__",
    "load_bitmap",
    "load_bitmap_font",
    "load_bitmap_font_from_settings",
    "parse_glyphs",
    "placeholder_glyph",
]
