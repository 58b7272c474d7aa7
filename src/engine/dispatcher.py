"""Schema dispatcher: the entry point resolving schemas against documents."""

from __future__ import annotations

import logging
from typing import Any

from ..core.exceptions import ConfigError
from .base import Configurable, EngineConfig, Node, dispatch

logger = logging.getLogger(__name__)


class SchemaDispatcher:
    """Resolves schemas with the first matching resolver.

    Usage:
        dispatcher = SchemaDispatcher(EngineConfig(
            resolvers=[ObjectResolver(), DefaultResolver()],
            document_factory=SoupDocumentFactory(),
        ))
        title = await dispatcher.resolve_from_html(html, "h1")
    """

    def __init__(self, config: EngineConfig):
        """Validate the configuration and hand it to configurable resolvers.

        Raises:
            ConfigError: If no resolver is provided, or a resolver rejects
                the configuration
        """
        if not config.resolvers:
            raise ConfigError(
                "No resolver provided. Please provide at least one resolver in resolvers",
                config_key="resolvers",
            )
        self.config = config
        for resolver in config.resolvers:
            if isinstance(resolver, Configurable):
                resolver.configure(config)
        logger.debug(f"Dispatcher ready with {len(config.resolvers)} resolvers")

    async def resolve_from_html(self, html: str, schema: Any) -> Any:
        """Load HTML with the document factory and resolve the schema.

        Raises:
            ConfigError: If no document factory is configured
        """
        if self.config.document_factory is None:
            raise ConfigError("No document factory configured", config_key="document_factory")
        node = self.config.document_factory.load_document(html)
        return await self.resolve_from_node(node, schema)

    async def resolve_from_node(self, node: Node, schema: Any) -> Any:
        """Resolve the schema against an already loaded node."""
        return await dispatch(self.config.resolvers, node, schema)
