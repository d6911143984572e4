"""Document tree capability consumed by the extractor.

The extractor only needs two things from a parsed document: the elements of
a category ('rect', 'circle') in document order, and named attributes on
each. DocumentTree/DocumentElement describe that; EtreeDocument provides it
over xml.etree. Tests can pass any object with the same shape.
"""

from collections.abc import Iterable, Iterator
from typing import Protocol
from xml.etree import ElementTree as ET

SVG_NS = 'http://www.w3.org/2000/svg'


class DocumentElement(Protocol):
    def get(self, name: str) -> str | None: ...


class DocumentTree(Protocol):
    def elements(self, category: str) -> Iterable[DocumentElement]: ...


class DocumentParseError(ValueError):
    """Raised when document text is not well-formed markup."""


class EtreeDocument:
    """DocumentTree over an xml.etree Element (parsed root or encode_tree output)."""

    def __init__(self, root: ET.Element):
        self.root = root

    def elements(self, category: str) -> Iterator[ET.Element]:
        # Match both bare and SVG-namespaced tags, in document order.
        wanted = {category, f'{{{SVG_NS}}}{category}'}
        for el in self.root.iter():
            if el.tag in wanted:
                yield el


def parse_document_string(text: str | bytes) -> EtreeDocument:
    """Parse document text (or raw bytes, honouring any XML encoding declaration) into a tree."""
    try:
        root = ET.fromstring(text)
    except ET.ParseError as e:
        raise DocumentParseError(f'malformed document: {e}') from e
    return EtreeDocument(root)


def parse_document_file(path: str) -> EtreeDocument:
    """Parse a document from disk."""
    with open(path, 'rb') as f:
        data = f.read()
    return parse_document_string(data)
