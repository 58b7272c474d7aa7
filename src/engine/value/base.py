"""Base resolver for leaf values (text, attributes, HTML)."""

from __future__ import annotations

import asyncio
from abc import abstractmethod
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from ...core.exceptions import EmptySelectorError
from ..base import EngineConfig, Node, ResolverEngine
from ..common import (
    TransformFunction,
    apply_transforms,
    build_transform_list,
    parse_selector_string,
)
from ..context import ResolutionContext, SchemaKind

TEXT_ATTRIBUTE = "text"
INNER_HTML_ATTRIBUTES = ("html", "innerHTML")
OUTER_HTML_ATTRIBUTE = "outerHTML"


@dataclass(frozen=True)
class ValuePlan:
    """Selector parsed and pipelines built once per resolution call."""

    context: ResolutionContext
    query: str
    attribute: str
    transforms: list[TransformFunction] = field(default_factory=list)
    arr_transforms: list[TransformFunction] = field(default_factory=list)


class ValueResolver(ResolverEngine):
    """Resolver extracting a single value, or a list with select-all.

    Subclasses implement coerce() to turn the transformed raw value into
    their type.
    """

    def __init__(self) -> None:
        self._transforms: Mapping[str, TransformFunction] = {}
        self._arr_transforms: Mapping[str, TransformFunction] = {}

    def configure(self, config: EngineConfig) -> None:
        """Receive the named transform registries."""
        self._transforms = config.transforms
        self._arr_transforms = config.arr_transforms

    def compile(self, context: ResolutionContext) -> ValuePlan:
        raw = context.active_selector
        if not raw or not isinstance(raw, str):
            raise EmptySelectorError(context.selector)

        parsed = parse_selector_string(raw)
        if not parsed.selector:
            raise EmptySelectorError(context.selector)

        # transforms written in the selector string run first
        transforms = [*parsed.transforms, *context.transforms]
        return ValuePlan(
            context=context,
            query=parsed.selector,
            attribute=parsed.attribute or TEXT_ATTRIBUTE,
            transforms=build_transform_list(transforms, self._transforms),
            arr_transforms=build_transform_list(context.arr_transforms, self._arr_transforms),
        )

    async def resolve_node(self, node: Node, plan: ValuePlan) -> Any:
        if plan.context.is_select_all:
            children = node.find_all(plan.query)
            values = await asyncio.gather(*(self._select(child, plan) for child in children))
            return await apply_transforms(list(values), plan.arr_transforms)

        return await self._select(node.find_first(plan.query), plan)

    async def _select(self, node: Node | None, plan: ValuePlan) -> Any:
        value = extract_attribute(node, plan.attribute)
        if isinstance(value, str) and value and plan.context.trim is not False:
            value = value.strip()
        value = await apply_transforms(value, plan.transforms)
        return self.coerce(value, plan.context)

    @abstractmethod
    def coerce(self, value: Any, context: ResolutionContext) -> Any:
        """Convert the transformed value to this resolver's type."""
        pass

    @staticmethod
    def is_simple_selector(schema: Any) -> bool:
        """Check for a string selector or a list led by a string."""
        context = ResolutionContext.of(schema)
        if context.kind is not SchemaKind.VALUE:
            return False
        return isinstance(context.active_selector, str)


class TypedValueResolver(ValueResolver):
    """Value resolver claiming schemas whose type flag is set to True."""

    type_flag: str = ""

    def match(self, schema: Any) -> bool:
        context = ResolutionContext.of(schema)
        return self.is_simple_selector(context) and context.flag(self.type_flag) is True


def extract_attribute(node: Node | None, attribute: str) -> str | None:
    """Read text, inner/outer HTML or a named attribute from a node."""
    if node is None:
        return None
    if attribute == TEXT_ATTRIBUTE:
        return node.text()
    if attribute in INNER_HTML_ATTRIBUTES:
        return node.inner_html()
    if attribute == OUTER_HTML_ATTRIBUTE:
        return node.outer_html()
    return node.attribute(attribute)
