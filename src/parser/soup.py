"""Document Node implementation backed by BeautifulSoup.

CSS queries are executed by soupsieve through ``select`` / ``select_one``,
so any selector soupsieve supports can be used in schemas.
"""

from __future__ import annotations

from bs4 import BeautifulSoup, Tag

from ..core.config import DEFAULT_HTML_PARSER


class SoupNode:
    """Node wrapping a bs4 Tag (or the BeautifulSoup root)."""

    def __init__(self, element: Tag):
        self.element = element

    def find_all(self, query: str) -> list["SoupNode"]:
        return [SoupNode(child) for child in self.element.select(query)]

    def find_first(self, query: str) -> "SoupNode | None":
        child = self.element.select_one(query)
        return SoupNode(child) if child is not None else None

    def parent(self) -> "SoupNode":
        # the document root has no parent and stays its own ancestor
        return SoupNode(self.element.parent) if self.element.parent is not None else self

    def text(self) -> str:
        return self.element.get_text()

    def inner_html(self) -> str:
        return self.element.decode_contents()

    def outer_html(self) -> str:
        if isinstance(self.element, BeautifulSoup):
            return self.element.decode_contents()
        return str(self.element)

    def attribute(self, name: str) -> str | None:
        value = self.element.get(name)
        if isinstance(value, list):
            # multi-valued attributes such as class come back as lists
            return " ".join(value)
        return value

    def same_node(self, other: object) -> bool:
        """Identity comparison.

        Raises:
            TypeError: If other is not a SoupNode
        """
        if not isinstance(other, SoupNode):
            raise TypeError("Operation not supported. Target node is not a SoupNode")
        return self.element is other.element

    def __repr__(self) -> str:
        return f"SoupNode(<{self.element.name}>)"


class SoupDocumentFactory:
    """Loads HTML into a SoupNode root.

    Args:
        features: bs4 parser backend, e.g. "html.parser" or "lxml"
    """

    def __init__(self, features: str = DEFAULT_HTML_PARSER):
        self.features = features

    def load_document(self, html: str) -> SoupNode:
        return SoupNode(BeautifulSoup(html, self.features))
