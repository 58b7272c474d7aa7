"""Tests for the BeautifulSoup node adapter."""

import pytest

from src.parser.soup import SoupDocumentFactory, SoupNode


class TestSoupNode:
    """Tests for SoupNode capabilities."""

    HTML = (
        '<div class="card featured" data-id="7">'
        '<h2>Title <small>sub</small></h2>'
        '<a href="/x">Link</a><a href="/y">Other</a>'
        "</div>"
    )

    @pytest.fixture
    def root(self):
        return SoupDocumentFactory().load_document(self.HTML)

    def test_find_first_and_all(self, root):
        """Test CSS queries return nodes in document order."""
        assert root.find_first("a").text() == "Link"
        assert [node.text() for node in root.find_all("a")] == ["Link", "Other"]
        assert root.find_first("table") is None
        assert root.find_all("table") == []

    def test_text_includes_descendants(self, root):
        """Test text of nested elements."""
        assert root.find_first("h2").text() == "Title sub"

    def test_html(self, root):
        """Test inner and outer HTML."""
        heading = root.find_first("h2")
        assert heading.inner_html() == "Title <small>sub</small>"
        assert heading.outer_html() == "<h2>Title <small>sub</small></h2>"

    def test_attributes(self, root):
        """Test single and multi-valued attributes."""
        card = root.find_first("div")
        assert card.attribute("data-id") == "7"
        assert card.attribute("class") == "card featured"
        assert card.attribute("missing") is None

    def test_parent(self, root):
        """Test parent navigation and the root's parent."""
        link = root.find_first("a")
        assert link.parent().same_node(root.find_first("div"))
        assert root.parent() is root

    def test_same_node(self, root):
        """Test identity comparison across wrappers."""
        first = root.find_first("a")
        assert first.same_node(root.find_all("a")[0])
        assert not first.same_node(root.find_all("a")[1])

    def test_same_node_rejects_foreign_nodes(self, root):
        """Test comparing against something that is not a SoupNode."""
        with pytest.raises(TypeError):
            root.same_node("<a>")

    def test_root_outer_html(self):
        """Test the document root renders its content."""
        root = SoupDocumentFactory().load_document("<p>x</p>")
        assert root.outer_html() == "<p>x</p>"
        assert isinstance(root, SoupNode)


class TestSoupDocumentFactory:
    """Tests for document loading."""

    def test_default_backend(self):
        """Test the default parser backend."""
        assert SoupDocumentFactory().features == "html.parser"

    def test_empty_document(self):
        """Test that empty HTML gives an empty root."""
        root = SoupDocumentFactory().load_document("")
        assert root.find_first("p") is None
        assert root.text() == ""
