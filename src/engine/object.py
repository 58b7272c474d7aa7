"""Object resolver: composes field schemas into dictionaries."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any

from ..core.exceptions import ConfigError
from .base import EngineConfig, Node, ResolverEngine, dispatch
from .common import TransformFunction, apply_transforms, build_transform_list, is_object
from .context import ResolutionContext, SchemaKind

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ObjectPlan:
    """Field contexts derived from the parent and the built object pipeline."""

    context: ResolutionContext
    fields: list[tuple[str, ResolutionContext]] = field(default_factory=list)
    obj_transforms: list[TransformFunction] = field(default_factory=list)


class ObjectResolver(ResolverEngine):
    """Resolver turning a ``{key: schema}`` selector into a dictionary.

    Every field is resolved concurrently through the configured resolver
    list, so nesting object schemas works to any depth. Including this
    resolver is what makes complex schemas possible.
    """

    def __init__(self) -> None:
        self._resolvers: Sequence[ResolverEngine] = []
        self._obj_transforms: Mapping[str, TransformFunction] = {}

    def configure(self, config: EngineConfig) -> None:
        """Receive the resolver list and the object transform registry.

        Raises:
            ConfigError: If no non-object resolver is available for fields
        """
        # keep the reference so resolvers registered later are visible
        self._resolvers = config.resolvers
        self._obj_transforms = config.obj_transforms

        if not any(not isinstance(resolver, ObjectResolver) for resolver in self._resolvers):
            raise ConfigError(
                "Object resolver cannot work without other resolvers. "
                "Please register at least one other resolver, e.g. DefaultResolver",
                config_key="resolvers",
            )

    def match(self, schema: Any) -> bool:
        context = ResolutionContext.of(schema)
        if context.flag("object") is False:
            return False
        return context.kind is SchemaKind.OBJECT

    def compile(self, context: ResolutionContext) -> ObjectPlan:
        fields = [
            (key, ResolutionContext.of(child).inherit(context))
            for key, child in context.selector.items()
        ]
        return ObjectPlan(
            context=context,
            fields=fields,
            obj_transforms=build_transform_list(context.obj_transforms, self._obj_transforms),
        )

    async def resolve_node(self, node: Node, plan: ObjectPlan) -> dict[str, Any]:
        values = await asyncio.gather(
            *(dispatch(self._resolvers, node, child) for _, child in plan.fields)
        )

        parsed: dict[str, Any] = {}
        flattened: dict[str, Any] = {}
        for (key, child), value in zip(plan.fields, values):
            if child.flat and is_object(value):
                logger.debug(f"Flattening field '{key}' into parent")
                flattened.update(value)
                continue
            parsed[key] = value

        return await apply_transforms({**parsed, **flattened}, plan.obj_transforms)
