"""Font sheet loader.

Decodes a bitmap image laid out as a grid of equally sized cells and turns
each cell into a glyph. Cells are numbered row by row from the top-left
corner, starting at character code 1; code 0 is the transparent
placeholder.
"""

from pathlib import Path
from typing import BinaryIO

from PIL import Image

from gridfont.config import GridFontSettings, RenderConfig
from gridfont.domain import BitmapFont, Glyph, placeholder_glyph
from gridfont.exceptions import FontLoadError, GridGeometryError
from gridfont.utils.logging import get_logger

logger = get_logger(__name__)

ImageSource = str | Path | BinaryIO


def _describe(source: ImageSource) -> str:
    if isinstance(source, (str, Path)):
        return str(source)
    return getattr(source, "name", "<stream>")


def load_bitmap(source: ImageSource) -> Image.Image:
    """Decode an image file or binary stream.

    The pixel data is read eagerly and converted to RGBA so that glyph
    transparency survives blitting.

    Args:
        source: Path to the image, or an open binary file object

    Returns:
        Decoded RGBA image

    Raises:
        FontLoadError: If the source cannot be read or decoded
    """
    try:
        with Image.open(source) as image:
            image.load()
            return image.convert("RGBA")
    except (OSError, Image.DecompressionBombError) as e:
        logger.error(
            "Bitmap decode failed",
            source=_describe(source),
            error=str(e),
            error_type=type(e).__name__,
        )
        raise FontLoadError(_describe(source), str(e)) from e


def parse_glyphs(image: Image.Image, glyph_width: int, glyph_height: int) -> list[Glyph]:
    """Slice an image into glyphs of ``glyph_width`` x ``glyph_height``.

    Cells are read row-major from the top-left corner. Pixels to the right
    of or below the last whole cell are ignored.

    Args:
        image: Decoded font sheet
        glyph_width: Width of one cell in pixels
        glyph_height: Height of one cell in pixels

    Returns:
        ``cols * rows + 1`` glyphs; index 0 is the placeholder resized to
        the cell size

    Raises:
        GridGeometryError: If the cell size is not positive or the image is
            smaller than one cell
    """
    if glyph_width <= 0 or glyph_height <= 0:
        raise GridGeometryError(
            f"Glyph cell size must be positive, got {glyph_width}x{glyph_height}"
        )

    cols = image.width // glyph_width
    rows = image.height // glyph_height
    if cols == 0 or rows == 0:
        raise GridGeometryError(
            f"Image of {image.width}x{image.height} is smaller than one "
            f"{glyph_width}x{glyph_height} cell"
        )

    leftover_x = image.width - cols * glyph_width
    leftover_y = image.height - rows * glyph_height
    if leftover_x or leftover_y:
        logger.debug(
            "Discarding pixels outside the glyph grid",
            leftover_x=leftover_x,
            leftover_y=leftover_y,
        )

    glyphs = [placeholder_glyph().resize(glyph_width, glyph_height)]
    for row in range(rows):
        for col in range(cols):
            left = col * glyph_width
            top = row * glyph_height
            cell = image.crop((left, top, left + glyph_width, top + glyph_height))
            glyphs.append(Glyph(cell))

    logger.debug("Glyph grid parsed", cols=cols, rows=rows, glyphs=len(glyphs))
    return glyphs


def load_bitmap_font(
    name: str,
    source: ImageSource,
    glyph_width: int,
    glyph_height: int,
    config: RenderConfig | None = None,
) -> BitmapFont:
    """Load a font sheet and build a BitmapFont from it.

    Args:
        name: Name given to the font
        source: Path to the image, or an open binary file object
        glyph_width: Width of one cell in pixels
        glyph_height: Height of one cell in pixels
        config: Text drawing settings for the font

    Returns:
        New BitmapFont

    Raises:
        FontLoadError: If the image cannot be decoded
        GridGeometryError: If the grid geometry is invalid
    """
    image = load_bitmap(source)
    glyphs = parse_glyphs(image, glyph_width, glyph_height)
    logger.info(
        "Bitmap font loaded",
        font=name,
        source=_describe(source),
        glyphs=len(glyphs),
        cell=f"{glyph_width}x{glyph_height}",
    )
    return BitmapFont(name, glyphs, config)


def load_bitmap_font_from_settings(
    name: str,
    source: ImageSource,
    settings: GridFontSettings,
) -> BitmapFont:
    """Load a font using the cell size and render options in ``settings``."""
    return load_bitmap_font(
        name,
        source,
        settings.grid.glyph_width,
        settings.grid.glyph_height,
        settings.render,
    )
