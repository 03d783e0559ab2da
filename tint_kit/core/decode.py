"""Decode a ColorRepresentation into a normalised Color.

Hex widths:
  3 digits  0xRGB       each nibble n -> n * 17, alpha 255 (web shorthand)
  6 digits  0xRRGGBB    alpha 255
  8 digits  0xRRGGBBAA  low byte is alpha

A bare Hex(value) without `digits` is sized by magnitude, so 0x0000FF is
read as the shorthand 0x0FF. Pass digits=6 to keep the long form.
"""

import logging
import numbers
from dataclasses import astuple

from tint_kit.core.parser import HEX_DIGITS, parse_color_string
from tint_kit.core.types import INVALID, Color, ColorRepresentation, Hex, Invalid, Rgb, Rgba

logger = logging.getLogger(__name__)

TRANSPARENT_BLACK = Color(0.0, 0.0, 0.0, 0.0)


def _infer_digits(value: int) -> int | None:
    if value <= 0xFFF:
        return 3
    if value <= 0xFFFFFF:
        return 6
    if value <= 0xFFFFFFFF:
        return 8
    return None


def hex_to_rgba(value: int, digits: int | None = None) -> tuple[int, int, int, int] | None:
    """Unpack a hex integer into 0-255 (r, g, b, a). None if it fits no format."""
    if not _is_channel(value) or value < 0:
        return None
    if digits is None:
        digits = _infer_digits(value)
    if not _is_channel(digits) or digits not in HEX_DIGITS or value >= 1 << (4 * digits):
        return None

    if digits == 3:
        r, g, b = (value >> 8) & 0xF, (value >> 4) & 0xF, value & 0xF
        return (r * 17, g * 17, b * 17, 255)
    if digits == 6:
        return ((value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF, 255)
    return ((value >> 24) & 0xFF, (value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF)


def _is_channel(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _is_number(value: object) -> bool:
    return isinstance(value, numbers.Real) and not isinstance(value, bool)


def _channel(value: float) -> float:
    return min(max(value, 0), 255) / 255


def decode(representation: ColorRepresentation) -> Color:
    """Map a representation to exactly one Color. Never raises."""
    if isinstance(representation, Hex):
        rgba = hex_to_rgba(representation.value, representation.digits)
        if rgba is None:
            logger.debug('hex value %r does not fit a colour format', representation.value)
            return TRANSPARENT_BLACK
        r, g, b, a = rgba
        return Color(r / 255, g / 255, b / 255, a / 255)

    if isinstance(representation, (Rgb, Rgba)):
        fields = astuple(representation)
        if not all(map(_is_number, fields)):
            logger.debug('non-numeric channel in %r', representation)
            return TRANSPARENT_BLACK
        r, g, b = (_channel(c) for c in fields[:3])
        return Color(r, g, b, fields[3] if isinstance(representation, Rgba) else 1.0)

    if not isinstance(representation, Invalid):
        logger.debug('unknown representation: %r', representation)
    return TRANSPARENT_BLACK


def to_representation(value: object) -> ColorRepresentation:
    """Pick the representation for a loosely-typed value (int, str, tuple)."""
    if isinstance(value, (Hex, Rgb, Rgba, Invalid)):
        return value
    if isinstance(value, bool):
        return INVALID
    if isinstance(value, int):
        return Hex(value)
    if isinstance(value, str):
        return parse_color_string(value)
    if isinstance(value, tuple) and len(value) in (3, 4) and all(map(_is_channel, value[:3])):
        if len(value) == 3:
            return Rgb(*value)
        if isinstance(value[3], (int, float)) and not isinstance(value[3], bool):
            return Rgba(*value)
    logger.debug('cannot build a colour from %r', value)
    return INVALID


def to_color(value: object) -> Color:
    """Convenience constructor: Color, representation, int, str or tuple in, Color out."""
    if isinstance(value, Color):
        return value
    return decode(to_representation(value))
