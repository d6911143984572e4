"""Theme -> canonical SVG document.

The layout is fixed: a 96x64 canvas, one background rect covering it, and
eight r=8 circles on two rows (foreground at y=24, background at y=40).
encode_theme emits the exact canonical text; encode_tree builds the same
content as an xml.etree Element for renderers that want a tree.
"""

from xml.etree import ElementTree as ET

from svg_theme.core.colour import format_hex
from svg_theme.core.document import SVG_NS
from svg_theme.core.types import Theme

CANVAS_WIDTH = 96
CANVAS_HEIGHT = 64
RADIUS = 8

# identifier -> (cx, cy), in output order
CIRCLES: dict[str, tuple[int, int]] = {
    'f_high': (24, 24),
    'f_med': (40, 24),
    'f_low': (56, 24),
    'f_inv': (72, 24),
    'b_high': (24, 40),
    'b_med': (40, 40),
    'b_low': (56, 40),
    'b_inv': (72, 40),
}

_HEADER = (
    f'<svg width="{CANVAS_WIDTH}px" height="{CANVAS_HEIGHT}px" xmlns="{SVG_NS}" baseProfile="full" version="1.1">'
)


def _circle_line(theme: Theme, identifier: str) -> str:
    cx, cy = CIRCLES[identifier]
    fill = format_hex(getattr(theme, identifier))
    return f"  <circle cx='{cx}' cy='{cy}' r='{RADIUS}' id='{identifier}' fill='{fill}'></circle>"


def encode_theme(theme: Theme) -> str:
    """Render the canonical document text (newline-terminated)."""
    lines = [
        _HEADER,
        f"  <rect width='{CANVAS_WIDTH}' height='{CANVAS_HEIGHT}' id='background' "
        f"fill='{format_hex(theme.background)}'></rect>",
        '  <!-- Foreground -->',
    ]
    for identifier in CIRCLES:
        if identifier == 'b_high':
            lines.append('  <!-- Background -->')
        lines.append(_circle_line(theme, identifier))
    lines.append('</svg>')
    return '\n'.join(lines) + '\n'


def encode_tree(theme: Theme) -> ET.Element:
    """Same content as encode_theme, as an Element tree."""
    root = ET.Element(
        f'{{{SVG_NS}}}svg',
        {
            'width': f'{CANVAS_WIDTH}px',
            'height': f'{CANVAS_HEIGHT}px',
            'baseProfile': 'full',
            'version': '1.1',
        },
    )
    ET.SubElement(
        root,
        f'{{{SVG_NS}}}rect',
        {
            'width': str(CANVAS_WIDTH),
            'height': str(CANVAS_HEIGHT),
            'id': 'background',
            'fill': format_hex(theme.background),
        },
    )
    for identifier, (cx, cy) in CIRCLES.items():
        ET.SubElement(
            root,
            f'{{{SVG_NS}}}circle',
            {
                'cx': str(cx),
                'cy': str(cy),
                'r': str(RADIUS),
                'id': identifier,
                'fill': format_hex(getattr(theme, identifier)),
            },
        )
    return root


def write_theme_file(theme: Theme, path: str) -> None:
    """Write the canonical document to disk."""
    with open(path, 'w', encoding='utf-8', newline='\n') as f:
        f.write(encode_theme(theme))
