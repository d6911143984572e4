"""Render a theme as a PNG preview.

Draws the canonical layout (background rect, two rows of four circles) at
96x64 times --scale. Use --default to preview the built-in theme.

Example:
    svg-theme render apollo.svg -o apollo.png --scale 4
    svg-theme render --default -o default.png
"""

import sys

from svg_theme.core.builder import DEFAULT_THEME, decode_file
from svg_theme.core.raster import render_theme
from svg_theme.core.types import Command

command = Command(name='render', help='Render a theme (or the default theme) to a PNG preview.')


@command.arguments
def arguments(parser) -> None:
    parser.add_argument('file', nargs='?', help='Theme .svg file')
    parser.add_argument('--default', action='store_true', help='Render the built-in default theme')
    parser.add_argument('-o', '--output', required=True, help='PNG path to write')
    parser.add_argument('-s', '--scale', type=int, default=1, help='Pixel scale factor (default: 1)')


@command.run
def run(args) -> int:
    if args.default:
        theme = DEFAULT_THEME
    elif args.file:
        result = decode_file(args.file)
        if not result.ok:
            print(f'Error: {args.file}: {result.error.message()}', file=sys.stderr)
            return 1
        theme = result.theme
    else:
        print('Error: give a theme file or --default', file=sys.stderr)
        return 1

    render_theme(theme, scale=args.scale).save(args.output, format='PNG')
    print(f'svg-theme: wrote {args.output}', file=sys.stderr)
    return 0
