"""Shared test fixtures for all tests."""

from pathlib import Path

import pytest

from src.core.config import ParserSettings
from src.parser.parser import BasicParser, Parser
from src.parser.soup import SoupDocumentFactory

ASSETS_DIR = Path(__file__).parent / "assets"


@pytest.fixture
def static_html():
    """Load the static HTML page used across parser tests."""
    return (ASSETS_DIR / "static.html").read_text(encoding="utf-8")


@pytest.fixture
def settings():
    """Parser settings independent of the environment."""
    return ParserSettings(html_parser="html.parser", date_timezone="UTC", log_level="DEBUG")


@pytest.fixture
def parser(settings):
    """Create a Parser with every built-in resolver."""
    return Parser(settings=settings)


@pytest.fixture
def basic_parser(settings):
    """Create a BasicParser (object, number and string resolvers)."""
    return BasicParser(settings=settings)


@pytest.fixture
def document(static_html):
    """Root node of the static page."""
    return SoupDocumentFactory().load_document(static_html)


@pytest.fixture
def load_document():
    """Factory turning an HTML snippet into a root node."""
    factory = SoupDocumentFactory()
    return factory.load_document
