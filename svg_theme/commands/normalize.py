"""Rewrite a theme file in canonical form.

Decodes the file, then encodes the theme again: fixed 96x64 layout,
uppercase 6-digit hex, extra elements dropped, duplicates resolved to the
last occurrence.

Example:
    svg-theme normalize messy.svg -o clean.svg
    svg-theme normalize messy.svg > clean.svg
"""

import sys

from svg_theme.core.builder import decode_file
from svg_theme.core.encoder import encode_theme, write_theme_file
from svg_theme.core.types import Command

command = Command(name='normalize', help='Decode a theme file and re-encode it canonically.')


@command.arguments
def arguments(parser) -> None:
    parser.add_argument('file', help='Theme .svg file')
    parser.add_argument('-o', '--output', help='Write here instead of stdout')


@command.run
def run(args) -> int:
    result = decode_file(args.file)
    if not result.ok:
        print(f'Error: {args.file}: {result.error.message()}', file=sys.stderr)
        return 1
    if args.output:
        write_theme_file(result.theme, args.output)
    else:
        sys.stdout.write(encode_theme(result.theme))
    return 0
