"""Glyph representation.

This module defines the glyph domain model: one character's fixed-size
image cell, cut out of a font sheet or produced by resampling another glyph.
"""

import base64
import math
from dataclasses import dataclass, field
from functools import lru_cache
from typing import Any

from PIL import Image

from gridfont.exceptions import GlyphResizeError


@dataclass(frozen=True, eq=False)
class Glyph:
    """Immutable wrapper around a single glyph image.

    The wrapped image is copied on construction and on every read through
    ``image``, so a glyph never changes after it has been created. Resizing
    produces a new glyph.

    Two glyphs are equal when their pixel buffers are equal (same mode, same
    size, same bytes), regardless of identity.

    Attributes:
        _image: Private copy of the glyph's pixel buffer
    """

    _image: Image.Image = field(repr=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "_image", self._image.copy())

    @property
    def image(self) -> Image.Image:
        """Return a copy of the glyph's pixel buffer."""
        return self._image.copy()

    @property
    def width(self) -> int:
        """Width in pixels, read from the current image."""
        return self._image.width

    @property
    def height(self) -> int:
        """Height in pixels, read from the current image."""
        return self._image.height

    @property
    def size(self) -> tuple[int, int]:
        """Width and height in pixels, read from the current image."""
        return self._image.size

    def resize(self, width: int, height: int) -> "Glyph":
        """Return a new glyph resampled to exactly ``width`` x ``height``.

        Uses Pillow's default resampling filter for the image mode.

        Args:
            width: Target width in pixels
            height: Target height in pixels

        Returns:
            New, resized glyph

        Raises:
            GlyphResizeError: If either dimension is not positive
        """
        if width <= 0 or height <= 0:
            raise GlyphResizeError(width, height)
        return Glyph(self._image.resize((width, height)))

    def rescale(self, scale: float) -> "Glyph":
        """Return a new glyph scaled by ``scale``.

        Target dimensions are rounded down. BitmapFont.rescale rounds up
        instead; the two differ on purpose.

        Args:
            scale: Multiplier applied to width and height

        Returns:
            New, rescaled glyph
        """
        return self.resize(
            math.floor(self.width * scale),
            math.floor(self.height * scale),
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Glyph):
            return NotImplemented
        return (
            self._image.mode == other._image.mode
            and self._image.size == other._image.size
            and self._image.tobytes() == other._image.tobytes()
        )

    def __hash__(self) -> int:
        return hash((self._image.mode, self._image.size, self._image.tobytes()))

    def __repr__(self) -> str:
        return f"Glyph({self.width}x{self.height}, mode={self._image.mode!r})"

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary.

        Returns:
            Dictionary with mode, size and base64-encoded pixel data
        """
        return {
            "mode": self._image.mode,
            "width": self.width,
            "height": self.height,
            "pixels": base64.b64encode(self._image.tobytes()).decode("ascii"),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Glyph":
        """Deserialize from dictionary.

        Args:
            data: Dictionary representation of a glyph

        Returns:
            Glyph instance
        """
        image = Image.frombytes(
            data["mode"],
            (data["width"], data["height"]),
            base64.b64decode(data["pixels"]),
        )
        return cls(image)


@lru_cache(maxsize=1)
def placeholder_glyph() -> Glyph:
    """Return the shared 1x1 fully transparent glyph.

    Used as glyph 0 of every font, resized to the font's cell size.
    """
    return Glyph(Image.new("RGBA", (1, 1), (0, 0, 0, 0)))
