"""Hex colour codec.

Accepts '#rgb' and '#rrggbb' (any case). Anything else, including named
colours, alpha forms and a missing '#', is rejected even where Pillow's
ImageColor would accept it. Output is always '#RRGGBB' uppercase.
"""

import re

from PIL import ImageColor

from svg_theme.core.types import RGB

_HEX_RE = re.compile(r'#(?:[0-9a-fA-F]{3}|[0-9a-fA-F]{6})')


class InvalidFormat(ValueError):
    """Raised when text is not a 3- or 6-digit hex colour."""

    def __init__(self, text: str):
        super().__init__(f'not a hex colour: {text!r}')
        self.text = text


def is_hex_colour(text: str) -> bool:
    return isinstance(text, str) and _HEX_RE.fullmatch(text) is not None


def parse_hex(text: str) -> RGB:
    """Parse '#rgb' or '#rrggbb' into an RGB value."""
    if not is_hex_colour(text):
        raise InvalidFormat(text)
    r, g, b = ImageColor.getrgb(text)[:3]
    return RGB(r, g, b)


def format_hex(rgb: tuple[int, int, int]) -> str:
    r, g, b = rgb
    return f'#{r:02X}{g:02X}{b:02X}'
