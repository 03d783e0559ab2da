"""Perceived brightness (luma) and the "is dark" classification.

The colour is first composited over opaque white, then weighted with the
ITU-R BT.601 coefficients (x1000) on a 0-255 scale:

    luma = (R*255*299 + G*255*587 + B*255*114) / 1000

Anything below DARK_THRESHOLD (200) is dark. Fully transparent colours
composite to white and are never dark.

Formula: https://www.w3.org/TR/AERT/#color-contrast
"""

import numpy as np
from PIL import Image

from tint_kit.core.types import Color

DARK_THRESHOLD = 200
_WEIGHTS = np.array([299.0, 587.0, 114.0])


def _over_white(channel: float, alpha: float) -> float:
    return channel * alpha + 1.0 * (1 - alpha)


def luma(color: Color) -> float:
    """Luma of `color` over white, 0-255."""
    r, g, b = (_over_white(c, color.a) for c in (color.r, color.g, color.b))
    return (r * 255 * 299 + g * 255 * 587 + b * 255 * 114) / 1000


def is_dark(color: object) -> bool:
    """True when the colour's luma is below the threshold.

    Colours without RGBA channels (e.g. a Pattern) are not dark.
    """
    if not isinstance(color, Color):
        return False
    return luma(color) < DARK_THRESHOLD


def luma_array(rgba: np.ndarray) -> np.ndarray:
    """Vectorised luma for an array of shape (..., 4) with channels in [0, 1]."""
    arr = np.clip(np.asarray(rgba, dtype=float), 0.0, 1.0)
    if arr.shape[-1] != 4:
        raise ValueError(f'expected RGBA in the last axis, got shape {arr.shape}')
    alpha = arr[..., 3:4]
    blended = arr[..., :3] * alpha + 1.0 * (1 - alpha)
    return (blended * 255 * _WEIGHTS).sum(axis=-1) / 1000


def dark_mask(rgba: np.ndarray) -> np.ndarray:
    """Boolean mask: True where the pixel is dark."""
    return luma_array(rgba) < DARK_THRESHOLD


def image_luma(image: Image.Image) -> np.ndarray:
    """Per-pixel luma of a Pillow image, shape (height, width)."""
    arr = np.array(image.convert('RGBA')).astype(float) / 255
    return luma_array(arr)


def dark_ratio(image: Image.Image) -> float:
    """Fraction of dark pixels in `image`. 0.0 for an empty image."""
    values = image_luma(image)
    if values.size == 0:
        return 0.0
    return float(np.mean(values < DARK_THRESHOLD))
