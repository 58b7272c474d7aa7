"""Preassembled parsers wiring resolvers, transforms and the bs4 adapter."""

from __future__ import annotations

from collections.abc import Mapping, Sequence

from ..core.config import ParserSettings
from ..engine.base import DocumentFactory, EngineConfig, ResolverEngine
from ..engine.common import TransformFunction
from ..engine.dispatcher import SchemaDispatcher
from ..engine.object import ObjectResolver
from ..engine.value.boolean import BooleanResolver
from ..engine.value.date import DateResolver
from ..engine.value.number import NumberResolver
from ..engine.value.string import DefaultResolver
from .soup import SoupDocumentFactory
from .transforms import TRANSFORMS


class BasicParser(SchemaDispatcher):
    """Parser supporting object, number and string schemas.

    User resolvers are tried before the built-in ones. User transform
    registries are merged over the built-in transforms.

    Args:
        resolvers: Extra resolvers, tried first
        transforms: Named per-value transforms
        arr_transforms: Named transforms for select-all lists
        obj_transforms: Named transforms for objects
        document_factory: Overrides the bs4 document factory
        settings: Parser settings; loaded from the environment when omitted
    """

    def __init__(
        self,
        resolvers: Sequence[ResolverEngine] | None = None,
        transforms: Mapping[str, TransformFunction] | None = None,
        arr_transforms: Mapping[str, TransformFunction] | None = None,
        obj_transforms: Mapping[str, TransformFunction] | None = None,
        document_factory: DocumentFactory | None = None,
        settings: ParserSettings | None = None,
    ):
        self.settings = settings or ParserSettings.from_env()
        super().__init__(EngineConfig(
            resolvers=[*(resolvers or []), *self.builtin_resolvers()],
            document_factory=document_factory or SoupDocumentFactory(self.settings.html_parser),
            transforms={**TRANSFORMS, **(transforms or {})},
            arr_transforms={**TRANSFORMS, **(arr_transforms or {})},
            obj_transforms={**TRANSFORMS, **(obj_transforms or {})},
        ))

    def builtin_resolvers(self) -> list[ResolverEngine]:
        return [ObjectResolver(), NumberResolver(), DefaultResolver()]


class Parser(BasicParser):
    """Parser supporting object, number, boolean, date and string schemas."""

    def builtin_resolvers(self) -> list[ResolverEngine]:
        return [
            ObjectResolver(),
            NumberResolver(),
            BooleanResolver(),
            DateResolver(timezone=self.settings.date_timezone),
            DefaultResolver(),
        ]
