"""Date coercion backed by arrow and dateutil."""

from __future__ import annotations

from collections.abc import Mapping
from datetime import datetime, tzinfo
from typing import Any

import arrow
from arrow.parser import DateTimeParser, ParserError, TzinfoParser
from dateutil import parser as lenient_parser

from ...core.config import DEFAULT_TIMEZONE
from ..context import ResolutionContext
from .base import TypedValueResolver

ISO_FORMAT = "iso"
DATE_FORMAT = "date"
TIMESTAMP_FORMAT = "timestamp"
NATIVE_FORMATS = ("arrow", "dayjs")


def parse_date(
    value: Any,
    options: Mapping[str, Any] | None = None,
    timezone: str = DEFAULT_TIMEZONE,
) -> Any:
    """Coerce a raw value to a date in the requested output format.

    Accepts strings, epoch milliseconds, datetimes and arrow instances.
    Naive values are read in ``timezone`` (option, else the argument).

    Options:
        parse: Input pattern or list of patterns tried in order
        format: ``iso`` (default), ``date``, ``timestamp``, ``arrow``
            or an arrow output pattern such as ``YYYY/MM/DD``
        default: Used when the value cannot be parsed; rendered with the
            same output format
        timezone: Zone name for naive values, or ``local``
    """
    options = options or {}
    output = options.get("format") or ISO_FORMAT
    zone = TzinfoParser.parse(options.get("timezone") or timezone)

    default = options.get("default")
    fallback = _format_date(_to_arrow(default, None, zone), output) if default else None

    date = _to_arrow(value, options.get("parse"), zone)
    if date is None:
        return fallback
    return _format_date(date, output)


def _to_arrow(value: Any, patterns: str | list[str] | None, zone: tzinfo) -> arrow.Arrow | None:
    if isinstance(value, arrow.Arrow):
        return value
    if isinstance(value, datetime):
        return arrow.Arrow.fromdatetime(value, value.tzinfo or zone)
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        try:
            return arrow.Arrow.fromtimestamp(value / 1000, tzinfo=zone)
        except (OverflowError, OSError, ValueError):
            return None
    if not isinstance(value, str):
        return None

    try:
        if patterns:
            parsed = DateTimeParser().parse(value, patterns)
        else:
            year_start = datetime(datetime.now().year, 1, 1)
            parsed = lenient_parser.parse(value, default=year_start)
    except (ParserError, ValueError, OverflowError):
        return None
    return arrow.Arrow.fromdatetime(parsed, parsed.tzinfo or zone)


def _format_date(date: arrow.Arrow | None, output: str) -> Any:
    if date is None:
        return None
    if output == ISO_FORMAT:
        utc = date.to("UTC")
        return f"{utc.strftime('%Y-%m-%dT%H:%M:%S')}.{utc.microsecond // 1000:03d}Z"
    if output in NATIVE_FORMATS:
        return date
    if output == DATE_FORMAT:
        return date.datetime
    if output == TIMESTAMP_FORMAT:
        return int(round(date.float_timestamp * 1000))
    return date.format(output)


class DateResolver(TypedValueResolver):
    """Resolver for schemas flagged ``date: true``."""

    type_flag = "date"

    def __init__(self, timezone: str = DEFAULT_TIMEZONE) -> None:
        super().__init__()
        self.timezone = timezone

    def coerce(self, value: Any, context: ResolutionContext) -> Any:
        return parse_date(value, context.options, self.timezone)
