"""Bitmap font model.

A BitmapFont owns an ordered list of glyphs indexed by character code and
draws strings by walking a cursor over a surface. Glyph 0 is the transparent
placeholder; printable glyphs start at code 1.

Resizing replaces the glyph list in place and is not safe to run
concurrently with any other call on the same font.
"""

import math
from collections.abc import Iterator, Sequence
from dataclasses import dataclass

from PIL import Image

from gridfont.config import RenderConfig, UnknownCharacterPolicy
from gridfont.domain.glyph import Glyph
from gridfont.exceptions import GridGeometryError, UnsupportedCharacterError
from gridfont.surface import Surface, as_surface
from gridfont.utils.logging import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class GlyphPlacement:
    """A glyph positioned by the draw cursor.

    Attributes:
        glyph: Glyph to draw
        x: Left edge in surface pixels
        y: Top edge in surface pixels
    """

    glyph: Glyph
    x: int
    y: int


class BitmapFont:
    """Collection of fixed-size glyphs that can draw text.

    The cell size is read from glyph 0 at construction time; callers must
    pass glyphs that all share that size. The name identifies the font only
    and is ignored by equality.

    Example:
        font = BitmapFont("tiny", glyphs)
        font.rescale(2.0)
        font.draw_string("HP\\t42", 10, 10, canvas)
    """

    def __init__(
        self,
        name: str,
        glyphs: Sequence[Glyph],
        config: RenderConfig | None = None,
    ) -> None:
        """Initialize the font.

        Args:
            name: Font name, used for identification only
            glyphs: Glyphs in code order, index 0 being the placeholder
            config: Text drawing settings (defaults if None)

        Raises:
            GridGeometryError: If no glyphs are given
        """
        if len(glyphs) == 0:
            raise GridGeometryError(f"Font '{name}' needs at least one glyph")

        self._name = name
        self._glyphs: list[Glyph] = list(glyphs)
        self._config = config if config is not None else RenderConfig()
        self._width = self._glyphs[0].width
        self._height = self._glyphs[0].height

    @property
    def name(self) -> str:
        return self._name

    @property
    def width(self) -> int:
        """Cell width in pixels as of the last construction or resize."""
        return self._width

    @property
    def height(self) -> int:
        """Cell height in pixels as of the last construction or resize."""
        return self._height

    @property
    def config(self) -> RenderConfig:
        return self._config

    @property
    def glyphs(self) -> tuple[Glyph, ...]:
        """Snapshot of the font's glyphs in code order."""
        return tuple(self._glyphs)

    def get_glyph(self, code: int | str) -> Glyph:
        """Return the glyph for a character or character code.

        Args:
            code: Single character, or its integer code

        Returns:
            Glyph stored at that code

        Raises:
            TypeError: If a string of length other than one, or a value that
                is neither a string nor an integer, is given
            UnsupportedCharacterError: If the code is outside the font
        """
        if isinstance(code, str):
            if len(code) != 1:
                raise TypeError(f"Expected a single character, got {code!r}")
            code = ord(code)
        elif not isinstance(code, int) or isinstance(code, bool):
            raise TypeError(f"Expected a character or integer code, got {type(code).__name__}")

        if code < 0 or code >= len(self._glyphs):
            raise UnsupportedCharacterError(code, len(self._glyphs))
        return self._glyphs[code]

    def resize(self, width: int, height: int) -> None:
        """Resize every glyph to ``width`` x ``height`` pixels.

        The new glyph list is built completely before it replaces the old
        one, so a failed resize leaves the font unchanged.

        Args:
            width: New cell width in pixels
            height: New cell height in pixels
        """
        resized = [glyph.resize(width, height) for glyph in self._glyphs]
        self._glyphs = resized
        self._width = width
        self._height = height
        logger.debug("Font resized", font=self._name, width=width, height=height)

    def rescale(self, scale: float) -> None:
        """Resize every glyph to the current cell size times ``scale``.

        Target dimensions are rounded up, unlike Glyph.rescale which rounds
        down.

        Args:
            scale: Multiplier applied to the cell width and height
        """
        self.resize(
            math.ceil(self._width * scale),
            math.ceil(self._height * scale),
        )

    def layout(self, text: str, x: int, y: int) -> list[GlyphPlacement]:
        """Position each glyph of ``text`` with the draw cursor.

        A newline moves the cursor back to ``x`` and down one cell height.
        A tab moves it right by ``tab_cells`` cell widths. Any other
        character places its glyph at the cursor and advances by that
        glyph's own width.

        Args:
            text: Text to lay out
            x: Starting cursor x
            y: Starting cursor y

        Returns:
            Placements in drawing order

        Raises:
            UnsupportedCharacterError: If a character has no glyph and the
                unknown-character policy is ``raise``
        """
        start_x = x
        tab_advance = self._width * self._config.tab_cells
        placements: list[GlyphPlacement] = []

        for char in text:
            if char == "\n":
                x = start_x
                y += self._height
            elif char == "\t":
                x += tab_advance
            else:
                glyph = self._resolve_glyph(char)
                if glyph is None:
                    continue
                placements.append(GlyphPlacement(glyph, x, y))
                x += glyph.width

        return placements

    def draw_string(self, text: str, x: int, y: int, surface: Surface | Image.Image) -> None:
        """Draw ``text`` onto ``surface`` starting at (x, y).

        The whole string is laid out before anything is drawn, so an
        unsupported character leaves the surface untouched.

        Args:
            text: Text to draw
            x: Starting cursor x
            y: Starting cursor y
            surface: Surface or Pillow image to draw on
        """
        placements = self.layout(text, x, y)
        target = as_surface(surface)
        for placement in placements:
            target.blit(placement.glyph.image, placement.x, placement.y)

    def measure(self, text: str) -> tuple[int, int]:
        """Return the width and height of the box covering the drawn glyphs."""
        placements = self.layout(text, 0, 0)
        if not placements:
            return 0, 0
        width = max(p.x + p.glyph.width for p in placements)
        height = max(p.y + p.glyph.height for p in placements)
        return width, height

    def render(
        self,
        text: str,
        background: tuple[int, int, int, int] = (0, 0, 0, 0),
    ) -> Image.Image:
        """Draw ``text`` onto a new RGBA image sized to fit it."""
        image = Image.new("RGBA", self.measure(text), background)
        self.draw_string(text, 0, 0, image)
        return image

    def _resolve_glyph(self, char: str) -> Glyph | None:
        try:
            return self.get_glyph(char)
        except UnsupportedCharacterError:
            policy = self._config.unknown_character
            if policy == UnknownCharacterPolicy.PLACEHOLDER:
                return self._glyphs[0]
            if policy == UnknownCharacterPolicy.SKIP:
                logger.debug("Skipping unsupported character", font=self._name, code=ord(char))
                return None
            raise

    def __len__(self) -> int:
        return len(self._glyphs)

    def __iter__(self) -> Iterator[Glyph]:
        return iter(tuple(self._glyphs))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BitmapFont):
            return NotImplemented
        return self._glyphs == other._glyphs

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return (
            f"BitmapFont(name={self._name!r}, glyphs={len(self._glyphs)}, "
            f"cell={self._width}x{self._height})"
        )
