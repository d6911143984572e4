"""Tests for svg_theme.core.extract — (identifier, fill) extraction from a tree."""

from svg_theme.core.document import parse_document_string
from svg_theme.core.extract import extract_entries
from svg_theme.core.types import RawEntry


class FakeTree:
    """Synthetic document tree: category -> list of attribute dicts."""

    def __init__(self, **categories):
        self.categories = categories
        self.queried = []

    def elements(self, category):
        self.queried.append(category)
        return self.categories.get(category, [])


class TestExtractEntries:
    def test_rects_before_circles(self):
        tree = FakeTree(
            circle=[{'id': 'f_high', 'fill': '#111111'}],
            rect=[{'id': 'background', 'fill': '#222222'}],
        )
        assert extract_entries(tree) == [
            RawEntry('background', '#222222'),
            RawEntry('f_high', '#111111'),
        ]
        assert tree.queried == ['rect', 'circle']

    def test_document_order_within_group(self):
        tree = FakeTree(circle=[{'id': 'b', 'fill': '1'}, {'id': 'a', 'fill': '2'}])
        assert [e.identifier for e in extract_entries(tree)] == ['b', 'a']

    def test_drops_element_without_id(self):
        tree = FakeTree(circle=[{'fill': '#000'}, {'id': 'x', 'fill': '#fff'}])
        assert extract_entries(tree) == [RawEntry('x', '#fff')]

    def test_drops_element_without_fill(self):
        tree = FakeTree(rect=[{'id': 'background'}])
        assert extract_entries(tree) == []

    def test_keeps_duplicates_in_order(self):
        tree = FakeTree(circle=[{'id': 'f_high', 'fill': '#000'}, {'id': 'f_high', 'fill': '#fff'}])
        assert extract_entries(tree) == [RawEntry('f_high', '#000'), RawEntry('f_high', '#fff')]

    def test_ignores_other_element_types(self):
        tree = FakeTree(path=[{'id': 'p', 'fill': '#000'}])
        assert extract_entries(tree) == []

    def test_empty_fill_is_kept(self):
        tree = FakeTree(rect=[{'id': 'background', 'fill': ''}])
        assert extract_entries(tree) == [RawEntry('background', '')]


class TestExtractFromSvg:
    def test_namespaced_and_nested(self):
        doc = parse_document_string(
            '<svg xmlns="http://www.w3.org/2000/svg">'
            '<circle id="c1" fill="#111"/>'
            '<g><rect id="r1" fill="#222"/><circle id="c2" fill="#333"/></g>'
            '</svg>'
        )
        assert extract_entries(doc) == [
            RawEntry('r1', '#222'),
            RawEntry('c1', '#111'),
            RawEntry('c2', '#333'),
        ]

    def test_without_namespace(self):
        doc = parse_document_string('<svg><rect id="background" fill="#fff"/></svg>')
        assert extract_entries(doc) == [RawEntry('background', '#fff')]
