"""Bridge between Color and Pillow's native colour values."""

import logging

from PIL import Image, ImageColor

from tint_kit.core.decode import TRANSPARENT_BLACK
from tint_kit.core.types import Color

logger = logging.getLogger(__name__)


def to_pil(color: Color) -> tuple[int, int, int, int]:
    """RGBA 0-255 tuple, usable as a fill for any Pillow 'RGBA' API."""
    return color.to_rgba255()


def from_pil(value: object) -> Color:
    """Color from a Pillow pixel value or ImageColor string.

    Accepts RGBA / RGB / LA tuples, an 'L' int, or anything
    ImageColor.getrgb understands ('red', '#f00', 'hsl(0, 100%, 50%)').
    Unusable values fall back to transparent black.
    """
    if isinstance(value, str):
        try:
            value = ImageColor.getrgb(value)
        except ValueError:
            logger.debug('ImageColor cannot parse %r', value)
            return TRANSPARENT_BLACK

    if isinstance(value, int) and not isinstance(value, bool):
        value = (value, value, value)

    if not isinstance(value, tuple) or not all(isinstance(v, int) and not isinstance(v, bool) for v in value):
        logger.debug('not a pixel value: %r', value)
        return TRANSPARENT_BLACK

    if len(value) == 2:  # LA
        lum, alpha = value
        value = (lum, lum, lum, alpha)
    elif len(value) == 3:
        value = (*value, 255)
    elif len(value) != 4:
        logger.debug('pixel tuple of length %d: %r', len(value), value)
        return TRANSPARENT_BLACK

    r, g, b, a = value
    return Color(r / 255, g / 255, b / 255, a / 255)


def pixel_color(image: Image.Image, xy: tuple[int, int]) -> Color:
    """Colour of one pixel of `image`."""
    return from_pil(image.convert('RGBA').getpixel(xy))


def swatch(color: Color, size: tuple[int, int] = (32, 32)) -> Image.Image:
    """A new RGBA image filled with `color`."""
    return Image.new('RGBA', size, to_pil(color))
