"""Exception hierarchy for Gridfont."""


class GridFontError(Exception):
    """Base exception for all Gridfont errors."""

    pass


class FontError(GridFontError):
    """Errors related to font loading."""

    pass


class FontLoadError(FontError):
    """Error reading or decoding a bitmap font image."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load bitmap '{path}': {reason}")


class GeometryError(GridFontError):
    """Errors in glyph grid geometry."""

    pass


class GridGeometryError(GeometryError):
    """Cell size or image size cannot produce a glyph grid."""

    def __init__(self, message: str) -> None:
        super().__init__(message)


class GlyphError(GridFontError):
    """Errors related to glyph lookup or processing."""

    pass


class UnsupportedCharacterError(GlyphError):
    """Requested character code has no glyph in the font."""

    def __init__(self, code: int, glyph_count: int) -> None:
        self.code = code
        self.glyph_count = glyph_count
        super().__init__(
            f"Character code {code} not supported (font has codes 0-{glyph_count - 1})"
        )


class GlyphResizeError(GlyphError):
    """Glyph cannot be resampled to the requested size."""

    def __init__(self, width: int, height: int) -> None:
        self.width = width
        self.height = height
        super().__init__(f"Cannot resize glyph to {width}x{height}: dimensions must be positive")
