"""Shared types for tint-kit: Color, the ColorRepresentation variants, Pattern, reports."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from PIL import Image


def _clamp(value: float, low: float = 0.0, high: float = 1.0) -> float:
    value = float(value)
    if math.isnan(value):
        return low
    return min(max(value, low), high)


@dataclass(frozen=True)
class Color:
    """A decoded colour: four float channels, each clamped to [0, 1]."""

    r: float
    g: float
    b: float
    a: float = 1.0

    def __post_init__(self) -> None:
        for name in ('r', 'g', 'b', 'a'):
            object.__setattr__(self, name, _clamp(getattr(self, name)))

    def to_tuple(self) -> tuple[float, float, float, float]:
        return (self.r, self.g, self.b, self.a)

    def to_rgba255(self) -> tuple[int, int, int, int]:
        """Channels scaled to 0-255 ints (alpha included)."""
        return tuple(int(round(c * 255)) for c in self.to_tuple())  # type: ignore[return-value]

    def to_hex(self) -> str:
        """CSS-style hex: '#RRGGBB' when opaque, '#RRGGBBAA' otherwise."""
        r, g, b, a = self.to_rgba255()
        if a == 255:
            return f'#{r:02X}{g:02X}{b:02X}'
        return f'#{r:02X}{g:02X}{b:02X}{a:02X}'


@dataclass(frozen=True)
class Hex:
    """Packed hex integer. `digits` is 3, 6 or 8; None infers it from magnitude."""

    value: int
    digits: int | None = None


@dataclass(frozen=True)
class Rgb:
    """Discrete 0-255 channels, opaque."""

    r: int
    g: int
    b: int


@dataclass(frozen=True)
class Rgba:
    """Discrete 0-255 channels with an explicit 0.0-1.0 alpha."""

    r: int
    g: int
    b: int
    a: float


@dataclass(frozen=True)
class Invalid:
    """Marker for a colour that could not be parsed. Decodes to transparent black."""


INVALID = Invalid()

ColorRepresentation = Hex | Rgb | Rgba | Invalid


@dataclass(frozen=True)
class Pattern:
    """A colour backed by an image tile. It has no single RGBA decomposition."""

    image: Image.Image = field(compare=False)


@dataclass
class ColorReport:
    """Everything `tint-kit` prints about one colour."""

    source: str
    representation: ColorRepresentation
    color: Color
    luma: float
    is_dark: bool
    operation: str | None = None  # e.g. 'lighten 0.2'
    base: Color | None = None  # colour before the operation

    @property
    def valid(self) -> bool:
        return not isinstance(self.representation, Invalid)


@dataclass
class ImageReport:
    """Luma summary of an image."""

    path: str
    width: int
    height: int
    mean_luma: float
    dark_ratio: float
