"""String coercion and the default resolver."""

from __future__ import annotations

import re
from collections.abc import Mapping
from typing import Any

from ..common import render_scalar
from ..context import ResolutionContext, SchemaKind
from .base import TypedValueResolver, ValueResolver


def parse_string(value: Any, options: Mapping[str, Any] | None = None) -> str | None:
    """Coerce a raw value to a string.

    Options:
        default: Returned for unsupported values (None unless set)
        defaultIfEmpty: Returned instead of an empty string
        match: Pattern; keep only its first match
        defaultIfNoMatch: Returned when ``match`` finds nothing
    """
    options = options or {}
    if isinstance(value, str):
        if options.get("defaultIfEmpty") and value == "":
            return options["defaultIfEmpty"]
        return _match_if_required(value, options)

    if isinstance(value, (bool, int, float)):
        return _match_if_required(render_scalar(value), options)
    return options.get("default")


def _match_if_required(value: str, options: Mapping[str, Any]) -> str | None:
    pattern = options.get("match")
    if not pattern:
        return value
    found = re.search(pattern, value)
    if found:
        return found.group(0)
    return options.get("defaultIfNoMatch")


class StringResolver(TypedValueResolver):
    """Resolver for schemas flagged ``string: true``."""

    type_flag = "string"

    def coerce(self, value: Any, context: ResolutionContext) -> str | None:
        return parse_string(value, context.options)


class DefaultResolver(ValueResolver):
    """Fallback resolver for any remaining value schema.

    Claims empty selectors too, so that they are rejected instead of
    silently resolving to None.
    """

    def match(self, schema: Any) -> bool:
        context = ResolutionContext.of(schema)
        if context.flag("string") is False:
            return False
        return context.kind is SchemaKind.VALUE

    def coerce(self, value: Any, context: ResolutionContext) -> str | None:
        return parse_string(value, context.options)
