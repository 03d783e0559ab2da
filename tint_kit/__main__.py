"""tint-kit — inspect, lighten and darken colours; measure how dark an image is.

Usage: uv run tint-kit <command> [options]

Colours may be written as hex ('f00', '#FF0000', '#ff000080') or as
'rgb(255, 0, 0)' / 'rgba(255, 0, 0, 0.5)'. Unparseable colours are
reported as transparent black and the command exits 1.

Environment variables / .env loading:
  OS environment variables are always used first.
  If a variable is not set, tint-kit looks for a .env file starting from
  the current directory and walking up, stopping at the nearest .git boundary.
  Use --env-file to override the .env location explicitly.
"""

import argparse
import logging
import os
import sys

from PIL import Image, UnidentifiedImageError

from tint_kit.core.adjust import darken, lighten
from tint_kit.core.decode import decode
from tint_kit.core.env import load_settings
from tint_kit.core.luma import dark_ratio, image_luma, is_dark, luma
from tint_kit.core.parser import parse_color_string
from tint_kit.core.report import format_image_json, format_image_text, format_json, format_text
from tint_kit.core.types import ColorReport, ImageReport


def _build_parser() -> argparse.ArgumentParser:
    epilog = (
        'Examples:\n'
        '  tint-kit inspect f00\n'
        "  tint-kit inspect 'rgba(255, 0, 0, 0.15)' --json\n"
        "  tint-kit lighten '#336699' 0.2\n"
        "  tint-kit darken '#336699cc' 0.1 --preserve-alpha\n"
        '  tint-kit image screenshot.png\n'
        '\n'
        'Env vars (set in .env or environment):\n'
        '  TINT_KIT_OUTPUT=text|json\n'
        '  TINT_KIT_PRESERVE_ALPHA=1\n'
        '  TINT_KIT_LOG_LEVEL=DEBUG\n'
    )
    parser = argparse.ArgumentParser(
        prog='tint-kit',
        description='Colour parsing, lighten/darken and dark/light classification.',
        epilog=epilog,
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument(
        '--env-file',
        metavar='PATH',
        default=None,
        help='Path to .env file (default: walk up from cwd to .git boundary)',
    )
    parser.add_argument('-v', '--verbose', action='store_true', help='Debug logging to stderr')
    sub = parser.add_subparsers(dest='command', help='Command to run')

    p = sub.add_parser('inspect', help='Decode a colour and classify it')
    p.add_argument('color', help='Colour string')
    _add_json(p)

    for name in ('lighten', 'darken'):
        p = sub.add_parser(name, help=f'{name.capitalize()} a colour by a ratio')
        p.add_argument('color', help='Colour string')
        p.add_argument('ratio', type=float, help='Amount added to / removed from each channel (0-1)')
        p.add_argument(
            '-a',
            '--preserve-alpha',
            action='store_true',
            default=None,
            help='Leave alpha unchanged (default: TINT_KIT_PRESERVE_ALPHA)',
        )
        _add_json(p)

    p = sub.add_parser('image', help='Mean luma and share of dark pixels in an image')
    p.add_argument('image', help='Path to PNG/JPG')
    _add_json(p)

    return parser


def _add_json(p: argparse.ArgumentParser) -> None:
    p.add_argument(
        '-j',
        '--json',
        action='store_true',
        default=None,
        help='Output JSON instead of text (default: TINT_KIT_OUTPUT)',
    )


def build_color_report(
    text: str,
    operation: str | None = None,
    ratio: float = 0.0,
    preserve_alpha: bool = False,
) -> ColorReport:
    """Parse, decode and optionally lighten/darken `text`."""
    representation = parse_color_string(text)
    base = decode(representation)
    color = base
    label = None
    if operation == 'lighten':
        color = lighten(base, ratio, preserve_alpha=preserve_alpha)
    elif operation == 'darken':
        color = darken(base, ratio, preserve_alpha=preserve_alpha)
    if operation:
        label = f'{operation} {ratio:g}' + (' (alpha preserved)' if preserve_alpha else '')
    return ColorReport(
        source=text,
        representation=representation,
        color=color,
        luma=luma(color),
        is_dark=is_dark(color),
        operation=label,
        base=base if operation else None,
    )


def build_image_report(path: str, image: Image.Image) -> ImageReport:
    values = image_luma(image)
    return ImageReport(
        path=path,
        width=image.width,
        height=image.height,
        mean_luma=float(values.mean()) if values.size else 0.0,
        dark_ratio=dark_ratio(image),
    )


def main(argv: list[str] | None = None) -> None:
    parser = _build_parser()
    args = parser.parse_args(argv)

    # OS env vars always win; .env only fills gaps
    settings = load_settings(env_file=args.env_file)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else settings.log_level,
        format='%(levelname)s %(name)s: %(message)s',
        stream=sys.stderr,
    )
    if settings.env_path:
        print(f'tint-kit: loaded {settings.env_path}', file=sys.stderr)

    if not args.command:
        parser.print_help()
        sys.exit(1)

    as_json = args.json if args.json is not None else settings.output == 'json'

    if args.command == 'image':
        if not os.path.isfile(args.image):
            print(f'Error: image not found: {args.image}', file=sys.stderr)
            sys.exit(1)
        try:
            with Image.open(args.image) as image:
                image_report = build_image_report(args.image, image)
        except UnidentifiedImageError:
            print(f'Error: not a readable image: {args.image}', file=sys.stderr)
            sys.exit(1)
        print(format_image_json(image_report) if as_json else format_image_text(image_report))
        return

    if args.command == 'inspect':
        report = build_color_report(args.color)
    else:
        preserve = args.preserve_alpha if args.preserve_alpha is not None else settings.preserve_alpha
        report = build_color_report(args.color, args.command, args.ratio, preserve)

    print(format_json(report) if as_json else format_text(report))

    # Report first so the fallback colour is visible, then fail
    if not report.valid:
        print(f'Error: not a colour: {args.color!r}', file=sys.stderr)
        sys.exit(1)


if __name__ == '__main__':
    main()
