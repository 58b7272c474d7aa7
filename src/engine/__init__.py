"""Resolver engine: selector grammar, resolution context, resolvers and dispatch."""

from .base import Configurable, DocumentFactory, EngineConfig, Node, ResolverEngine, dispatch
from .context import ResolutionContext, SchemaKind
from .dispatcher import SchemaDispatcher
from .object import ObjectResolver
from .value import (
    BooleanResolver,
    DateResolver,
    DefaultResolver,
    NumberResolver,
    StringResolver,
    ValueResolver,
)

__all__ = [
    # Engine backbone
    "Configurable",
    "DocumentFactory",
    "EngineConfig",
    "Node",
    "ResolverEngine",
    "ResolutionContext",
    "SchemaKind",
    "SchemaDispatcher",
    "dispatch",
    # Resolvers
    "ObjectResolver",
    "ValueResolver",
    "StringResolver",
    "DefaultResolver",
    "NumberResolver",
    "BooleanResolver",
    "DateResolver",
]
