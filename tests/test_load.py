"""Tests for the load stage."""

import io
from xml.etree.ElementTree import fromstring

import pytest

from pagexmlcat.errors import DocumentParseError, SourceError
from pagexmlcat.pipeline.stage_load import (
    find_children,
    find_descendants,
    get_attribute,
    load_document,
    local_name,
    open_source,
)


class TestLocalName:
    """Tests for namespace stripping."""

    def test_namespaced_tag(self):
        """Namespace prefixes are removed."""
        assert local_name("{http://example.com/ns}TextLine") == "TextLine"

    def test_plain_tag(self):
        """Tags without namespace are unchanged."""
        assert local_name("TextLine") == "TextLine"

    def test_non_string_tag(self):
        """Comment and PI tags are callables, not strings."""
        assert local_name(None) == ""


class TestTreeLookup:
    """Tests for local-name lookups."""

    @pytest.fixture
    def root(self):
        return fromstring(
            '<a xmlns="urn:x" xmlns:y="urn:y">'
            '<b id="1"><c/><b id="2"/></b>'
            '<y:b y:id="3"/>'
            "</a>"
        )

    def test_find_descendants_document_order(self, root):
        """Descendants at any depth and in any namespace, in document order."""
        ids = [get_attribute(b, "id") for b in find_descendants(root, "b")]
        assert ids == ["1", "2", "3"]

    def test_find_descendants_includes_node(self, root):
        """The starting node is part of the search."""
        first = next(find_descendants(root, "b"))
        assert list(find_descendants(first, "b"))[0] is first

    def test_find_children_direct_only(self, root):
        """Only direct children are returned."""
        assert len(find_children(root, "b")) == 2
        assert find_children(root, "c") == []

    def test_get_attribute_missing(self, root):
        """A missing attribute gives None."""
        assert get_attribute(root, "id") is None


class TestLoadDocument:
    """Tests for XML parsing."""

    def test_parse_valid(self, simple_page):
        """Well-formed XML parses into a tree."""
        tree = load_document(io.BytesIO(simple_page))
        assert local_name(tree.getroot().tag) == "PcGts"

    def test_parse_malformed(self):
        """Malformed XML raises DocumentParseError naming the source."""
        with pytest.raises(DocumentParseError, match="cannot parse broken.xml"):
            load_document(io.BytesIO(b"<PcGts><Page></PcGts>"), "broken.xml")

    def test_parse_empty(self):
        """Empty input is not a document."""
        with pytest.raises(DocumentParseError):
            load_document(io.BytesIO(b""))


class TestOpenSource:
    """Tests for opening input sources."""

    def test_open_file_closes(self, write_page, simple_page):
        """Files are closed when the context exits."""
        path = write_page(simple_page)
        with open_source(path) as stream:
            assert stream.read() == simple_page
        assert stream.closed

    def test_open_file_closes_on_error(self, write_page, simple_page):
        """Files are closed when the body raises."""
        path = write_page(simple_page)
        with pytest.raises(RuntimeError):
            with open_source(path) as stream:
                raise RuntimeError("boom")
        assert stream.closed

    def test_open_missing_file(self, tmp_path):
        """A missing file raises SourceError."""
        with pytest.raises(SourceError, match="cannot open"):
            with open_source(tmp_path / "missing.xml"):
                pass

    def test_source_error_is_os_error(self, tmp_path):
        """SourceError can be caught as OSError."""
        with pytest.raises(OSError):
            with open_source(tmp_path / "missing.xml"):
                pass

    def test_stdin(self):
        """A dash yields stdin and leaves it open."""
        stdin = io.BytesIO(b"<x/>")
        with open_source("-", stdin=stdin) as stream:
            assert stream is stdin
        assert not stdin.closed
