"""Domain models for gridfont.

Key classes:
- Glyph: Immutable image of a single character cell
- BitmapFont: Glyphs indexed by character code, with resize and drawing
- GlyphPlacement: A glyph positioned by the draw cursor
"""

from gridfont.domain.font import BitmapFont, GlyphPlacement
from gridfont.domain.glyph import Glyph, placeholder_glyph

__all__: list[str] = [
    "BitmapFont",
    "Glyph",
    "GlyphPlacement",
    "placeholder_glyph",
]
