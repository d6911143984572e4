"""Raster previews of a theme.

render_theme paints the encode_tree output with PIL so a theme can be
previewed without an SVG renderer. sample_theme reads the colours back out
of such a preview: one pixel at each circle centre, one from the
background margin.
"""

import numpy as np
from PIL import Image, ImageDraw

from svg_theme.core.builder import build_theme
from svg_theme.core.colour import parse_hex
from svg_theme.core.document import EtreeDocument
from svg_theme.core.encoder import CANVAS_HEIGHT, CANVAS_WIDTH, CIRCLES, encode_tree
from svg_theme.core.types import RGB, Theme

# A point inside the rect but outside every circle
BACKGROUND_SAMPLE = (4, 4)


def render_theme(theme: Theme, scale: int = 1) -> Image.Image:
    """Draw the theme's canonical document as an RGB image."""
    if scale < 1:
        raise ValueError(f'scale must be >= 1, got {scale}')
    doc = EtreeDocument(encode_tree(theme))
    image = Image.new('RGB', (CANVAS_WIDTH * scale, CANVAS_HEIGHT * scale))
    draw = ImageDraw.Draw(image)

    for rect in doc.elements('rect'):
        w = int(rect.get('width')) * scale
        h = int(rect.get('height')) * scale
        draw.rectangle((0, 0, w - 1, h - 1), fill=tuple(parse_hex(rect.get('fill'))))

    for circle in doc.elements('circle'):
        cx = int(circle.get('cx')) * scale
        cy = int(circle.get('cy')) * scale
        r = int(circle.get('r')) * scale
        draw.ellipse((cx - r, cy - r, cx + r, cy + r), fill=tuple(parse_hex(circle.get('fill'))))

    return image


def _pixel(arr: np.ndarray, x: int, y: int) -> RGB:
    # Cast out of uint8 before anything else touches the values
    r, g, b = (int(v) for v in arr[y, x][:3])
    return RGB(r, g, b)


def sample_theme(image: Image.Image, scale: int = 1) -> Theme:
    """Recover a Theme from an image produced by render_theme(theme, scale)."""
    expected = (CANVAS_WIDTH * scale, CANVAS_HEIGHT * scale)
    if image.size != expected:
        raise ValueError(f'expected a {expected[0]}x{expected[1]} image, got {image.width}x{image.height}')
    arr = np.asarray(image.convert('RGB'))

    bx, by = BACKGROUND_SAMPLE
    colours = {'background': _pixel(arr, bx * scale, by * scale)}
    for identifier, (cx, cy) in CIRCLES.items():
        colours[identifier] = _pixel(arr, cx * scale, cy * scale)
    return build_theme(colours)
