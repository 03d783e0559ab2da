"""Regex-based parser for colour strings.

Recognises hex literals ('f00', '#FF0000', '#ff000080') and the CSS
functional forms 'rgb(r, g, b)' / 'rgba(r, g, b, a)'. Never raises:
anything unrecognised comes back as INVALID.
"""

import logging
import re

from tint_kit.core.types import INVALID, ColorRepresentation, Hex, Rgb, Rgba

logger = logging.getLogger(__name__)

_HEX_RE = re.compile(r'#?([0-9a-fA-F]+)')
_FUNC_RE = re.compile(r'(rgba?)\s*\((.*)\)', re.IGNORECASE | re.DOTALL)
_INT_RE = re.compile(r'[+-]?\d+', re.ASCII)
_FLOAT_RE = re.compile(r'[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?', re.ASCII)

HEX_DIGITS = (3, 6, 8)


def parse_color_string(text: str) -> ColorRepresentation:
    """Parse a colour string into a representation."""
    if not isinstance(text, str):
        logger.debug('not a string: %r', text)
        return INVALID
    stripped = text.strip()

    m = _HEX_RE.fullmatch(stripped)
    if m:
        return _parse_hex(m.group(1))

    m = _FUNC_RE.fullmatch(stripped)
    if m:
        return _parse_function(m.group(1).lower(), m.group(2))

    logger.debug('unrecognised colour string: %r', text)
    return INVALID


def _parse_hex(digits: str) -> ColorRepresentation:
    if len(digits) not in HEX_DIGITS:
        logger.debug('hex literal with %d digits: %r', len(digits), digits)
        return INVALID
    return Hex(int(digits, 16), digits=len(digits))


def _parse_function(name: str, inner: str) -> ColorRepresentation:
    args = [a.strip() for a in inner.split(',')]
    expected = 3 if name == 'rgb' else 4
    if len(args) != expected:
        logger.debug('%s() takes %d arguments, got %d', name, expected, len(args))
        return INVALID

    channels = []
    for arg in args[:3]:
        if not _INT_RE.fullmatch(arg):
            logger.debug('non-integer channel in %s(): %r', name, arg)
            return INVALID
        value = int(arg)
        if not 0 <= value <= 255:
            logger.debug('channel out of range in %s(): %d', name, value)
            return INVALID
        channels.append(value)
    r, g, b = channels

    if name == 'rgb':
        return Rgb(r, g, b)

    # rgba: alpha may be an int or a float
    if not _FLOAT_RE.fullmatch(args[3]):
        logger.debug('non-numeric alpha in rgba(): %r', args[3])
        return INVALID
    alpha = float(args[3])
    if not 0.0 <= alpha <= 1.0:
        logger.debug('alpha out of range in rgba(): %s', alpha)
        return INVALID
    return Rgba(r, g, b, alpha)
