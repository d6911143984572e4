"""Recover a theme from a PNG preview made by `render`.

Reads one pixel per slot (circle centres, plus a background margin point)
and prints the canonical SVG. --scale must match the scale used to render.

Example:
    svg-theme sample apollo.png --scale 4 -o apollo.svg
"""

import sys

from PIL import Image

from svg_theme.core.encoder import encode_theme, write_theme_file
from svg_theme.core.raster import sample_theme
from svg_theme.core.types import Command

command = Command(name='sample', help='Recover a theme from a rendered PNG preview.')


@command.arguments
def arguments(parser) -> None:
    parser.add_argument('image', help='PNG produced by `svg-theme render`')
    parser.add_argument('-s', '--scale', type=int, default=1, help='Scale the image was rendered at (default: 1)')
    parser.add_argument('-o', '--output', help='Write SVG here instead of stdout')


@command.run
def run(args) -> int:
    with Image.open(args.image) as image:
        theme = sample_theme(image, scale=args.scale)
    if args.output:
        write_theme_file(theme, args.output)
    else:
        sys.stdout.write(encode_theme(theme))
    return 0
