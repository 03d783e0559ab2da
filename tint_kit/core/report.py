"""Report builder: text and JSON output for tint-kit results."""

import json
from dataclasses import asdict, is_dataclass
from typing import Any

from tint_kit.core.types import Color, ColorRepresentation, ColorReport, Hex, ImageReport, Invalid, Rgb, Rgba


def describe(representation: ColorRepresentation) -> str:
    """Short human-readable form of a representation, e.g. 'hex 0xF00'."""
    if isinstance(representation, Hex):
        digits = f'{representation.value:X}'.zfill(representation.digits or 1)
        return f'hex 0x{digits}'
    if isinstance(representation, Rgb):
        return f'rgb({representation.r}, {representation.g}, {representation.b})'
    if isinstance(representation, Rgba):
        rep = representation
        return f'rgba({rep.r}, {rep.g}, {rep.b}, {rep.a:g})'
    if isinstance(representation, Invalid):
        return 'invalid'
    return repr(representation)


def _channels(color: Color) -> str:
    return '  '.join(f'{name}={value:.3f}' for name, value in zip('rgba', color.to_tuple(), strict=True))


def format_text(report: ColorReport) -> str:
    """Format a colour report as human-readable text."""
    lines = [f'tint-kit: {report.source!r} → {describe(report.representation)}']
    if report.operation and report.base is not None:
        lines.append(f'  base:  {report.base.to_hex()}  {_channels(report.base)}')
        lines.append(f'  {report.operation}')
    lines.append(f'  color: {report.color.to_hex()}  {_channels(report.color)}')
    mark = 'dark' if report.is_dark else 'light'
    lines.append(f'  luma:  {report.luma:.1f}  ({mark})')
    if not report.valid:
        lines.append('  (unparseable input; using transparent black)')
    return '\n'.join(lines)


def _color_obj(color: Color) -> dict[str, Any]:
    return {'hex': color.to_hex(), **asdict(color)}


def format_json(report: ColorReport) -> str:
    """Format a colour report as JSON."""
    rep = report.representation
    obj: dict[str, Any] = {
        'source': report.source,
        'valid': report.valid,
        'representation': {
            'kind': type(rep).__name__.lower(),
            **(asdict(rep) if is_dataclass(rep) else {}),
        },
        'color': _color_obj(report.color),
        'luma': round(report.luma, 3),
        'is_dark': report.is_dark,
    }
    if report.operation and report.base is not None:
        obj['operation'] = report.operation
        obj['base'] = _color_obj(report.base)
    return json.dumps(obj, indent=2)


def format_image_text(report: ImageReport) -> str:
    """Format an image luma report as text."""
    dim = f'{report.width}×{report.height}'
    return '\n'.join(
        [
            f'tint-kit: {report.path} ({dim})',
            f'  mean luma: {report.mean_luma:.1f}',
            f'  dark pixels: {report.dark_ratio * 100:.1f}%',
        ]
    )


def format_image_json(report: ImageReport) -> str:
    """Format an image luma report as JSON."""
    obj = {
        'image': report.path,
        'dimensions': {'width': report.width, 'height': report.height},
        'mean_luma': round(report.mean_luma, 3),
        'dark_ratio': round(report.dark_ratio, 4),
    }
    return json.dumps(obj, indent=2)
