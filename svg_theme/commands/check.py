"""Validate a theme file and print its nine colours.

Exits 0 when the file holds all nine identifiers with valid hex fills,
1 otherwise. Only the first problem is reported: a missing identifier
before any bad colour, ties broken alphabetically.

Example:
    svg-theme check apollo.svg
    svg-theme check apollo.svg --json
"""

from svg_theme.core.builder import decode_file
from svg_theme.core.report import format_json, format_text
from svg_theme.core.types import Command

command = Command(name='check', help='Validate a theme file and print its colours.')


@command.arguments
def arguments(parser) -> None:
    parser.add_argument('file', help='Theme .svg file')
    parser.add_argument('-j', '--json', action='store_true', help='Output JSON instead of text')


@command.run
def run(args) -> int:
    result = decode_file(args.file)
    if args.json:
        print(format_json(result, path=args.file))
    else:
        print(format_text(result, path=args.file))
    return 0 if result.ok else 1
