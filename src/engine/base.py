"""Resolver engine backbone shared by every resolver.

Defines the Document Node capabilities the engine consumes, the engine
configuration, and the scope / auto-scope traversal every resolver uses.
"""

from __future__ import annotations

import asyncio
import logging
from abc import ABC, abstractmethod
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any, Protocol, runtime_checkable

from ..core.exceptions import AutoScopeError, EmptySelectorError
from .common import TransformFunction, parse_selector_string
from .context import ResolutionContext

logger = logging.getLogger(__name__)


class Node(Protocol):
    """Element of a parsed document, as seen by the engine."""

    def find_all(self, query: str) -> list["Node"]:
        """Descendants matching the query, in document order."""
        ...

    def find_first(self, query: str) -> "Node | None":
        """First descendant matching the query."""
        ...

    def parent(self) -> "Node":
        ...

    def text(self) -> str:
        ...

    def inner_html(self) -> str:
        ...

    def outer_html(self) -> str:
        ...

    def attribute(self, name: str) -> str | None:
        ...

    def same_node(self, other: "Node") -> bool:
        """Identity comparison used to deduplicate auto-scope ancestors."""
        ...


class DocumentFactory(Protocol):
    """Turns HTML text into a root Node."""

    def load_document(self, html: str) -> Node:
        ...


@dataclass
class EngineConfig:
    """Configuration shared by the dispatcher and its resolvers.

    Attributes:
        resolvers: Ordered resolvers; the first matching one wins
        document_factory: Loads HTML for ``resolve_from_html``
        transforms: Named per-value transforms
        arr_transforms: Named transforms for select-all result lists
        obj_transforms: Named transforms for assembled objects
    """

    resolvers: list["ResolverEngine"]
    document_factory: DocumentFactory | None = None
    transforms: Mapping[str, TransformFunction] = field(default_factory=dict)
    arr_transforms: Mapping[str, TransformFunction] = field(default_factory=dict)
    obj_transforms: Mapping[str, TransformFunction] = field(default_factory=dict)


@runtime_checkable
class Configurable(Protocol):
    """Resolvers implementing this receive the engine configuration."""

    def configure(self, config: EngineConfig) -> None:
        ...


class ResolverEngine(ABC):
    """Base class for resolvers.

    Subclasses must implement:
        - match(): whether this resolver claims a schema
        - resolve_node(): resolution against a single node

    and may override compile() to prepare per-call state once, before any
    node is visited.
    """

    @abstractmethod
    def match(self, schema: Any) -> bool:
        """Check whether this resolver can handle the schema."""
        pass

    def compile(self, context: ResolutionContext) -> Any:
        """Prepare the per-call plan passed to resolve_node."""
        return context

    @abstractmethod
    async def resolve_node(self, node: Node, plan: Any) -> Any:
        """Resolve the compiled plan against one node."""
        pass

    async def resolve(self, node: Node | None, schema: Any) -> Any:
        """Resolve a schema against a node, honouring its scope.

        Args:
            node: Node to resolve against; None resolves to None
            schema: Raw schema or ResolutionContext

        Returns:
            Resolved value, None for a missed singular scope, or a list for
            array scopes

        Raises:
            SchemaError: For empty selectors or invalid auto scoping
        """
        context = ResolutionContext.of(schema)
        plan = self.compile(context)
        if node is None:
            return None

        scope = context.scope
        if isinstance(scope, (list, tuple)):
            query = scope[0] if scope else None
            if not query:
                return await self._auto_scope(node, context, plan)
            return await self._resolve_all(node.find_all(query), plan)

        if not scope:
            return await self.resolve_node(node, plan)

        child = node.find_first(scope)
        if child is None:
            return None
        return await self.resolve_node(child, plan)

    async def _auto_scope(self, node: Node, context: ResolutionContext, plan: Any) -> list:
        selector = context.active_selector
        if selector is not None and not isinstance(selector, str):
            raise AutoScopeError(context.selector)
        query = parse_selector_string(selector).selector if selector else ""
        if not query:
            raise EmptySelectorError(context.selector)

        parents = [child.parent() for child in node.find_all(query)]
        return await self._resolve_all(remove_duplicate_nodes(parents), plan)

    async def _resolve_all(self, nodes: Sequence[Node], plan: Any) -> list:
        if not nodes:
            return []
        values = await asyncio.gather(*(self.resolve_node(node, plan) for node in nodes))
        return [value for value in values if value is not None]


def remove_duplicate_nodes(nodes: Sequence[Node]) -> list[Node]:
    """Deduplicate nodes by identity, keeping first-seen order."""
    unique: list[Node] = []
    for node in nodes:
        if any(node.same_node(existing) for existing in unique):
            continue
        unique.append(node)
    return unique


async def dispatch(
    resolvers: Sequence[ResolverEngine],
    node: Node | None,
    schema: Any,
) -> Any:
    """Resolve with the first resolver that matches the schema.

    Returns None when no resolver claims the schema.
    """
    context = ResolutionContext.of(schema)
    for resolver in resolvers:
        if resolver.match(context):
            return await resolver.resolve(node, context)
    logger.debug(f"No resolver matched schema with selector: {context.selector!r}")
    return None
