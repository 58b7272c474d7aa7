"""Number coercion."""

from __future__ import annotations

import math
from collections.abc import Mapping
from typing import Any

from ...utils.number_format import format_number, unformat
from ..context import ResolutionContext
from .base import TypedValueResolver

ROUND_MODES = {
    "round": lambda num: math.floor(num + 0.5),
    "floor": math.floor,
    "ceil": math.ceil,
}


def parse_number(value: Any, options: Mapping[str, Any] | None = None) -> int | float | str | None:
    """Coerce a raw value to a number.

    Options:
        default: Returned for empty, invalid or unsupported values
        int: Round the result to an integer
        roundMode: ``round`` (half up, default), ``floor`` or ``ceil``
        format: numeral-style output pattern; ``"number"`` keeps the number
    """
    options = options or {}
    default = options.get("default")

    if isinstance(value, bool):
        number: int | float | None = 1 if value else 0
    elif isinstance(value, (int, float)):
        number = value
    elif isinstance(value, str):
        number = unformat(value) if value else None
        if number is None:
            return default
    else:
        return default

    if options.get("int") and not math.isfinite(number):
        return default
    number = _round_if_required(number, options)
    if isinstance(number, float) and number.is_integer():
        number = int(number)

    output_format = options.get("format")
    if not output_format or output_format == "number":
        return number
    return format_number(number, output_format)


def _round_if_required(number: int | float, options: Mapping[str, Any]) -> int | float:
    if not number or not options.get("int"):
        return number
    mode = ROUND_MODES.get(options.get("roundMode") or "round", ROUND_MODES["round"])
    return mode(number)


class NumberResolver(TypedValueResolver):
    """Resolver for schemas flagged ``number: true``."""

    type_flag = "number"

    def coerce(self, value: Any, context: ResolutionContext) -> int | float | str | None:
        return parse_number(value, context.options)
