"""Assemble a Theme from validated colours, and the top-level decode entry points."""

import logging

from svg_theme.core.colour import parse_hex
from svg_theme.core.document import DocumentTree, parse_document_file, parse_document_string
from svg_theme.core.extract import extract_entries
from svg_theme.core.types import REQUIRED_IDENTIFIERS, RGB, DecodeResult, Theme
from svg_theme.core.validate import validate_entries

logger = logging.getLogger(__name__)


def build_theme(colours: dict[str, RGB]) -> Theme:
    """Copy each required colour into its slot.

    Expects validate_entries output. An incomplete mapping is a caller bug.
    """
    return Theme(**{identifier: colours[identifier] for identifier in REQUIRED_IDENTIFIERS})


def decode_tree(tree: DocumentTree) -> DecodeResult:
    """Extract, validate, and build. Never returns a partial Theme."""
    result = validate_entries(extract_entries(tree))
    if not result.ok:
        logger.info('theme rejected: %s', result.error.message())
        return DecodeResult(error=result.error)
    return DecodeResult(theme=build_theme(result.colours))


def decode_string(text: str) -> DecodeResult:
    return decode_tree(parse_document_string(text))


def decode_file(path: str) -> DecodeResult:
    return decode_tree(parse_document_file(path))


DEFAULT_THEME = Theme(
    background=parse_hex('#EEEEEE'),
    f_high=parse_hex('#0A0A0A'),
    f_med=parse_hex('#4A4A4A'),
    f_low=parse_hex('#6A6A6A'),
    f_inv=parse_hex('#111111'),
    b_high=parse_hex('#A1A1A1'),
    b_med=parse_hex('#C1C1C1'),
    b_low=parse_hex('#FFFFFF'),
    b_inv=parse_hex('#FFB545'),
)
