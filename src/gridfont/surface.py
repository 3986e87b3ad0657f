"""Drawing targets for bitmap font text.

A surface is anything that can blit an image with its top-left corner at an
integer position. Pillow images are supported directly through
ImageSurface; other targets (pygame surfaces, framebuffers) only need a
``blit(image, x, y)`` method.
"""

from typing import Protocol, runtime_checkable

from PIL import Image


@runtime_checkable
class Surface(Protocol):
    """Target that glyph images are blitted onto."""

    def blit(self, image: Image.Image, x: int, y: int) -> None:
        """Draw ``image`` with its top-left corner at (x, y)."""
        ...


class ImageSurface:
    """Surface backed by a Pillow image.

    Glyphs with an alpha band (RGBA, LA, PA) are pasted using that band as
    the mask, so transparent glyph pixels leave the target untouched. Positions
    outside the target are clipped.

    Example:
        canvas = Image.new("RGBA", (320, 240), "black")
        font.draw_string("Score: 100", 4, 4, ImageSurface(canvas))
    """

    def __init__(self, target: Image.Image) -> None:
        self._target = target

    @property
    def target(self) -> Image.Image:
        """The image being drawn on."""
        return self._target

    def blit(self, image: Image.Image, x: int, y: int) -> None:
        mask = image.getchannel("A") if "A" in image.getbands() else None
        self._target.paste(image, (x, y), mask)


def as_surface(target: Surface | Image.Image) -> Surface:
    """Wrap a Pillow image in an ImageSurface, pass other surfaces through."""
    if isinstance(target, Image.Image):
        return ImageSurface(target)
    return target
