"""Declarative HTML extraction: selector schemas in, typed values out."""
from .core.config import ParserSettings
from .core.exceptions import (
    AutoScopeError,
    ConfigError,
    EmptySelectorError,
    ExtractionError,
    SchemaError,
)
from .engine import EngineConfig, ResolverEngine, SchemaDispatcher
from .parser import BasicParser, Parser, SoupDocumentFactory

__all__ = [
    "AutoScopeError",
    "BasicParser",
    "ConfigError",
    "EmptySelectorError",
    "EngineConfig",
    "ExtractionError",
    "Parser",
    "ParserSettings",
    "ResolverEngine",
    "SchemaDispatcher",
    "SchemaError",
    "SoupDocumentFactory",
]
