import os

import pytest
from svg_theme.core.colour import parse_hex
from svg_theme.core.types import Theme

FIXTURES_DIR = os.path.join(os.path.dirname(__file__), 'fixtures')

APOLLO_FILLS = {
    'background': '#E0B1CB',
    'f_high': '#231942',
    'f_med': '#5E548E',
    'f_low': '#BE95C4',
    'f_inv': '#E0B1CB',
    'b_high': '#FFFFFF',
    'b_med': '#5E548E',
    'b_low': '#BE95C4',
    'b_inv': '#9F86C0',
}


def fixture_path(name: str) -> str:
    return os.path.join(FIXTURES_DIR, name)


def make_svg(fills: dict[str, str], extra: str = '') -> str:
    """Minimal theme document: 'background' as a rect, everything else as circles."""
    parts = ['<svg xmlns="http://www.w3.org/2000/svg" width="96px" height="64px">']
    for identifier, fill in fills.items():
        tag = 'rect' if identifier == 'background' else 'circle'
        parts.append(f'  <{tag} id="{identifier}" fill="{fill}"/>')
    if extra:
        parts.append(extra)
    parts.append('</svg>')
    return '\n'.join(parts)


@pytest.fixture
def apollo_fills() -> dict[str, str]:
    return dict(APOLLO_FILLS)


@pytest.fixture
def apollo_theme() -> Theme:
    return Theme(**{k: parse_hex(v) for k, v in APOLLO_FILLS.items()})
