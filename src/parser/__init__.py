"""Preassembled parsers, built-in transforms and the BeautifulSoup adapter."""

from .parser import BasicParser, Parser
from .soup import SoupDocumentFactory, SoupNode
from .transforms import TRANSFORMS

__all__ = ["BasicParser", "Parser", "SoupDocumentFactory", "SoupNode", "TRANSFORMS"]
