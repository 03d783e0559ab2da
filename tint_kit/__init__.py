"""tint-kit — colour parsing, lighten/darken and dark/light classification."""

from tint_kit.core.adjust import darken, lighten
from tint_kit.core.decode import decode, to_color
from tint_kit.core.luma import is_dark, luma
from tint_kit.core.parser import parse_color_string
from tint_kit.core.types import INVALID, Color, ColorRepresentation, Hex, Invalid, Pattern, Rgb, Rgba
from tint_kit.functional import all_of, any_of, truthy

__all__ = [
    'INVALID',
    'Color',
    'ColorRepresentation',
    'Hex',
    'Invalid',
    'Pattern',
    'Rgb',
    'Rgba',
    'all_of',
    'any_of',
    'darken',
    'decode',
    'is_dark',
    'lighten',
    'luma',
    'parse_color_string',
    'to_color',
    'truthy',
]
