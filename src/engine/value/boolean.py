"""Boolean coercion."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from ..common import wrap_array
from ..context import ResolutionContext
from .base import TypedValueResolver


def parse_boolean(value: Any, options: Mapping[str, Any] | None = None) -> bool | None:
    """Coerce a raw value to a boolean.

    String handling depends on which lists are given:
    - neither: non-empty strings are true
    - only falsy: anything not listed as falsy is true
    - only truthy: anything not listed as truthy is false
    - both: listed values map accordingly, anything else gives the default

    Numbers are true when non-zero. Unsupported values give the default.
    """
    options = options or {}
    default = options.get("default")

    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        return value != 0
    if not isinstance(value, str):
        return default

    truthy = wrap_array(options.get("truthy"))
    falsy = wrap_array(options.get("falsy"))

    if not truthy and not falsy:
        return value != ""
    if not falsy:
        return value in truthy
    if not truthy:
        return value not in falsy

    if value in truthy:
        return True
    if value in falsy:
        return False
    return default


class BooleanResolver(TypedValueResolver):
    """Resolver for schemas flagged ``boolean: true``."""

    type_flag = "boolean"

    def coerce(self, value: Any, context: ResolutionContext) -> bool | None:
        return parse_boolean(value, context.options)
