"""Check extracted entries against the nine required identifiers.

Order of checks:
  1. Fold entries into identifier -> fill, later entries overwriting earlier.
  2. Any required identifier absent -> MissingIdentifier(smallest absent).
  3. Any required fill not a hex colour -> InvalidColor(smallest offender).
  4. Otherwise return the nine parsed colours.

"Smallest" is plain string ordering, not document order. A missing
identifier is always reported before any invalid colour. Unknown
identifiers are ignored.
"""

import logging
from collections.abc import Iterable

from svg_theme.core.colour import InvalidFormat, parse_hex
from svg_theme.core.types import (
    REQUIRED_IDENTIFIERS,
    RGB,
    InvalidColor,
    MissingIdentifier,
    RawEntry,
    ValidationResult,
)

logger = logging.getLogger(__name__)


def _fold(entries: Iterable[RawEntry]) -> dict[str, str]:
    fills: dict[str, str] = {}
    for identifier, fill in entries:
        fills[identifier] = fill
    return fills


def validate_entries(entries: Iterable[RawEntry]) -> ValidationResult:
    fills = _fold(entries)

    missing = sorted(set(REQUIRED_IDENTIFIERS) - set(fills))
    if missing:
        logger.debug('missing identifiers: %s', ', '.join(missing))
        return ValidationResult(error=MissingIdentifier(missing[0]))

    colours: dict[str, RGB] = {}
    invalid = []
    for identifier in REQUIRED_IDENTIFIERS:
        try:
            colours[identifier] = parse_hex(fills[identifier])
        except InvalidFormat:
            invalid.append(identifier)
    if invalid:
        invalid.sort()
        logger.debug('invalid colours: %s', ', '.join(invalid))
        return ValidationResult(error=InvalidColor(invalid[0]))

    return ValidationResult(colours=colours)
