"""svg-theme — decode, validate and encode nine-slot SVG colour themes."""

from svg_theme.core.builder import DEFAULT_THEME, build_theme, decode_file, decode_string, decode_tree
from svg_theme.core.encoder import encode_theme, encode_tree, write_theme_file
from svg_theme.core.types import (
    REQUIRED_IDENTIFIERS,
    RGB,
    DecodeResult,
    InvalidColor,
    MissingIdentifier,
    Theme,
    ValidationError,
)

__all__ = [
    'DEFAULT_THEME',
    'REQUIRED_IDENTIFIERS',
    'RGB',
    'DecodeResult',
    'InvalidColor',
    'MissingIdentifier',
    'Theme',
    'ValidationError',
    'build_theme',
    'decode_file',
    'decode_string',
    'decode_tree',
    'encode_theme',
    'encode_tree',
    'write_theme_file',
]
