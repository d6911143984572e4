"""Report builder — text and JSON output for decode results."""

import json
import os
from typing import Any

from svg_theme.core.colour import format_hex
from svg_theme.core.types import REQUIRED_IDENTIFIERS, DecodeResult, MissingIdentifier


def format_text(result: DecodeResult, path: str | None = None) -> str:
    """Format a decode result as human-readable text."""
    name = os.path.basename(path) if path else '<theme>'
    if not result.ok:
        return f'{name}: FAIL\n  {result.error.message()}'

    lines = [f'{name}: OK']
    colours = result.theme.as_dict()
    for identifier in REQUIRED_IDENTIFIERS:
        lines.append(f'  {identifier:<12} {format_hex(colours[identifier])}')
    return '\n'.join(lines)


def format_json(result: DecodeResult, path: str | None = None) -> str:
    """Format a decode result as JSON."""
    obj: dict[str, Any] = {'ok': result.ok}
    if path:
        obj['file'] = path
    if result.ok:
        obj['theme'] = {k: format_hex(v) for k, v in result.theme.as_dict().items()}
    else:
        obj['error'] = {
            'kind': 'missing_identifier' if isinstance(result.error, MissingIdentifier) else 'invalid_color',
            'identifier': result.error.identifier,
            'message': result.error.message(),
        }
    return json.dumps(obj, indent=2)
