"""svg-theme — decode, validate and encode nine-slot SVG colour themes.

Usage: svg-theme [--env-file PATH] [--log-level LEVEL] <command> [options]

Commands are auto-discovered from svg_theme/commands/.
Each command module's docstring is its documentation.
Run `svg-theme help <command>` for full module docs.

Environment variables / .env loading:
  SVG_THEME_LOG_LEVEL sets the log level when --log-level is not given.
  OS environment variables are always used first.
  If a variable is not set, svg-theme looks for a .env file starting from
  the current directory and walking up, stopping at the nearest .git boundary.
  Use --env-file to override the .env location explicitly.
"""

import argparse
import logging
import sys

from svg_theme import registry
from svg_theme.core.env import load_env, resolve_log_level

logger = logging.getLogger('svg_theme')


def _short_doc(name: str, fallback: str) -> str:
    doc = (registry.module_for(name).__doc__ or '').strip()
    return doc.splitlines()[0] if doc else fallback


def _build_parser() -> argparse.ArgumentParser:
    commands = registry.discover()

    epilog = (
        'Examples:\n'
        '  svg-theme check apollo.svg\n'
        '  svg-theme check apollo.svg --json\n'
        '  svg-theme normalize messy.svg -o clean.svg\n'
        '  svg-theme render apollo.svg -o apollo.png --scale 4\n'
        '  svg-theme sample apollo.png --scale 4\n'
        '  svg-theme help check\n'
    )
    parser = argparse.ArgumentParser(
        prog='svg-theme',
        description='Decode, validate and encode nine-slot SVG colour themes.',
        epilog=epilog,
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument(
        '--env-file',
        metavar='PATH',
        default=None,
        help='Path to .env file (default: walk up from cwd to .git boundary)',
    )
    parser.add_argument(
        '--log-level',
        metavar='LEVEL',
        default=None,
        help='DEBUG, INFO, WARNING, ERROR (default: $SVG_THEME_LOG_LEVEL or WARNING)',
    )
    sub = parser.add_subparsers(dest='command', help='Command to run')

    for name, cmd in sorted(commands.items()):
        p = sub.add_parser(name, help=_short_doc(name, cmd.help))
        cmd.configure(p)

    help_parser = sub.add_parser('help', help='Print full docs for a command')
    help_parser.add_argument('topic', nargs='?', help='Command name')

    return parser


def _print_help(topic: str | None) -> int:
    """Print full module docstring for a command."""
    commands = registry.discover()

    if topic is None:
        print('Available commands:\n')
        for name, cmd in sorted(commands.items()):
            print(f'  {name:<10} {_short_doc(name, cmd.help)}')
        print('\nRun: svg-theme help <command> for full docs.')
        return 0

    if topic not in commands:
        print(f'Unknown command: {topic}', file=sys.stderr)
        print(f'Available: {", ".join(sorted(commands))}', file=sys.stderr)
        return 1

    print((registry.module_for(topic).__doc__ or '').strip() or f'(No module docs for {topic!r})')
    return 0


def _setup_logging(level_name: str) -> None:
    level = getattr(logging, level_name, None)
    if not isinstance(level, int):
        print(f'svg-theme: unknown log level {level_name!r}, using WARNING', file=sys.stderr)
        level = logging.WARNING
    logging.basicConfig(
        level=level,
        stream=sys.stderr,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    )


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    # Load .env before reading any variable — OS env vars always win
    env_path = load_env(env_file=args.env_file)
    _setup_logging(resolve_log_level(args.log_level))
    if env_path:
        logger.info('loaded %s', env_path)

    if not args.command:
        parser.print_help()
        return 1

    if args.command == 'help':
        return _print_help(args.topic)

    cmd = registry.get(args.command)
    try:
        return cmd.execute(args)
    except (OSError, ValueError) as e:
        logger.debug('command %s failed', cmd.name, exc_info=True)
        print(f'Error: {e}', file=sys.stderr)
        return 1


if __name__ == '__main__':
    sys.exit(main())
