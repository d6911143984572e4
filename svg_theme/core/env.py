"""Environment and .env handling for the svg-theme CLI.

The core never reads configuration; only the CLI does, and only for its own
log level. Resolution order for any variable:
  1. The OS environment. Never overwritten.
  2. The .env file named by --env-file, if given.
  3. The first .env found walking up from the cwd, not past a .git boundary.
"""

import os
from pathlib import Path

LOG_LEVEL_VAR = 'SVG_THEME_LOG_LEVEL'
DEFAULT_LOG_LEVEL = 'WARNING'


def _find_dotenv(start: Path) -> Path | None:
    """Return the nearest .env at or above start, stopping at the repo root."""
    current = start.resolve()
    while True:
        candidate = current / '.env'
        if candidate.is_file():
            return candidate
        # .git is a dir in a normal clone, a file in a worktree
        if (current / '.git').exists():
            return None
        if current.parent == current:
            return None
        current = current.parent


def _parse_dotenv(path: Path) -> dict[str, str]:
    """Read KEY=value lines. Quotes around the value and a leading 'export ' are dropped."""
    result: dict[str, str] = {}
    for line in path.read_text(encoding='utf-8').splitlines():
        line = line.strip()
        if not line or line.startswith('#') or '=' not in line:
            continue
        if line.startswith('export '):
            line = line[len('export ') :]
        key, _, raw_value = line.partition('=')
        key = key.strip()
        if key:
            result[key] = raw_value.strip().strip('"').strip("'")
    return result


def load_env(env_file: str | None = None) -> Path | None:
    """Copy .env values into os.environ for keys not already set.

    Returns the file that was loaded, or None.
    """
    if env_file:
        path = Path(env_file)
        if not path.is_file():
            return None
    else:
        path = _find_dotenv(Path.cwd())
        if path is None:
            return None

    for key, value in _parse_dotenv(path).items():
        os.environ.setdefault(key, value)
    return path


def resolve_log_level(cli_value: str | None = None) -> str:
    """--log-level wins, then SVG_THEME_LOG_LEVEL, then WARNING."""
    level = cli_value or os.environ.get(LOG_LEVEL_VAR) or DEFAULT_LOG_LEVEL
    return level.upper()
