"""Lighten / darken a Color by a flat ratio.

The ratio is added to (or subtracted from) every channel and the result is
clamped to [0, 1]. By default alpha moves with the colour channels, so
lightening a translucent colour also makes it more opaque. Pass
preserve_alpha=True to leave alpha alone.
"""

from tint_kit.core.types import Color


def lighten(color: Color, ratio: float, preserve_alpha: bool = False) -> Color:
    """Return a new Color with each channel raised by `ratio`, capped at 1.0."""
    r, g, b, a = (min(c + ratio, 1.0) for c in color.to_tuple())
    return Color(r, g, b, color.a if preserve_alpha else a)


def darken(color: Color, ratio: float, preserve_alpha: bool = False) -> Color:
    """Return a new Color with each channel lowered by `ratio`, floored at 0.0."""
    r, g, b, a = (max(c - ratio, 0.0) for c in color.to_tuple())
    return Color(r, g, b, color.a if preserve_alpha else a)
