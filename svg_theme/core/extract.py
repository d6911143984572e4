"""Pull (identifier, fill) pairs out of a document tree.

Rectangles come first, then circles, each group in document order.
Elements without both an 'id' and a 'fill' attribute are skipped; a skipped
required element shows up later as a missing identifier.
"""

import logging

from svg_theme.core.document import DocumentTree
from svg_theme.core.types import RawEntry

logger = logging.getLogger(__name__)

SHAPE_CATEGORIES = ('rect', 'circle')


def extract_entries(tree: DocumentTree) -> list[RawEntry]:
    entries = []
    skipped = 0
    for category in SHAPE_CATEGORIES:
        for el in tree.elements(category):
            identifier = el.get('id')
            fill = el.get('fill')
            if identifier is None or fill is None:
                skipped += 1
                continue
            entries.append(RawEntry(identifier, fill))
    logger.debug('extracted %d entries, skipped %d elements', len(entries), skipped)
    return entries
